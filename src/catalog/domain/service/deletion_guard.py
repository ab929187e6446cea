"""Domain service: Deletion Guard.

Decides whether a product may be removed from the catalog. Two
independent predicates must both hold:

  - stock:  the stock figure reported by inventory is exactly zero
  - usage:  no external record (order, bundle, ...) references it

Both are always evaluated so the caller can show every reason at once.
A refusal is a normal outcome and is returned, never raised.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from catalog.domain.repository.usage_lookup import UsageLookup

if TYPE_CHECKING:
    from catalog.domain.model.product import Product

logger = logging.getLogger(__name__)


class DeletionReason(Enum):
    STOCK_NOT_ZERO = "StockNotZero"
    IN_USE = "InUse"


_MESSAGES = {
    DeletionReason.STOCK_NOT_ZERO: "stock must be zero",
    DeletionReason.IN_USE: "product is referenced by other records",
}


@dataclass(frozen=True)
class DeletionDecision:
    allowed: bool
    reasons: tuple[DeletionReason, ...] = ()

    @staticmethod
    def from_reasons(reasons: list[DeletionReason]) -> DeletionDecision:
        return DeletionDecision(allowed=not reasons, reasons=tuple(reasons))

    def describe(self) -> str:
        if self.allowed:
            return "deletion allowed"
        return "; ".join(_MESSAGES[r] for r in self.reasons)


class DeletionGuard:

    def __init__(self, usage_lookup: UsageLookup) -> None:
        self._usage_lookup = usage_lookup

    def can_delete(self, product: Product) -> DeletionDecision:
        reasons: list[DeletionReason] = []

        if product.stock != 0:
            reasons.append(DeletionReason.STOCK_NOT_ZERO)
        if self._usage_lookup.is_in_use(product.id):
            reasons.append(DeletionReason.IN_USE)

        decision = DeletionDecision.from_reasons(reasons)
        if not decision.allowed:
            logger.warning(
                "Deletion of product %s refused: %s",
                product.id,
                ", ".join(r.value for r in decision.reasons),
            )
        return decision

"""Product aggregate.

A product composes its identity, up to one reference per facet, the stock
figure reported by inventory, and its price ledger. Non-price fields are
edited in place; the price only ever changes through the ledger.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Callable

from catalog.domain.exceptions import ValidationError
from catalog.domain.model.facet import FacetKind, FacetRef
from catalog.domain.model.price_ledger import PriceEntry, PriceLedger
from catalog.domain.model.value_objects import Money
from catalog.domain.service.catalog_filter import FilterCriteria, matches
from catalog.domain.service.deletion_guard import DeletionDecision, DeletionGuard

MAX_NAME_LENGTH = 30
MAX_NOTE_LENGTH = 30


@dataclass
class Product:
    """Aggregate root for a catalog product.

    Use ``Product.create()`` for new products — it enforces the creation
    invariants, including the mandatory initial price. The ``__init__`` is
    intentionally simple so the repository can reconstitute persisted
    products without re-validating.
    """

    id: str
    code: str
    name: str
    ledger: PriceLedger
    note: str = ""
    product_type: FacetRef | None = None
    color: FacetRef | None = None
    material: FacetRef | None = None
    size: FacetRef | None = None
    stock: int = 0

    _FACET_FIELDS = {
        FacetKind.TYPE: "product_type",
        FacetKind.COLOR: "color",
        FacetKind.MATERIAL: "material",
        FacetKind.SIZE: "size",
    }

    # --- Factory (used for NEW products only) ---------------------------------

    @staticmethod
    def create(
        id: str,
        code: str,
        name: str,
        initial_price: Money | Decimal | str | int,
        created_at: datetime,
        note: str = "",
        facets: dict[FacetKind, FacetRef | None] | None = None,
    ) -> Product:
        code = (code or "").strip().upper()
        if not code:
            raise ValidationError("Product code is required")

        ledger = PriceLedger()
        ledger.append(initial_price, created_at, reason="Initial price")

        product = Product(
            id=id,
            code=code,
            name=_clean_name(name),
            ledger=ledger,
            note=_clean_note(note),
        )
        for kind, ref in (facets or {}).items():
            product.set_facet(kind, ref)
        return product

    # --- Facets ---------------------------------------------------------------

    def facet(self, kind: FacetKind) -> FacetRef | None:
        return getattr(self, self._FACET_FIELDS[kind])

    def set_facet(self, kind: FacetKind, ref: FacetRef | None) -> None:
        setattr(self, self._FACET_FIELDS[kind], ref)

    # --- Mutations ------------------------------------------------------------

    def update_details(
        self,
        name: str | None = None,
        note: str | None = None,
        facets: dict[FacetKind, FacetRef | None] | None = None,
    ) -> None:
        """Edit the non-price fields. ``None`` keeps the current value."""
        new_name = self.name if name is None else _clean_name(name)
        new_note = self.note if note is None else _clean_note(note)

        self.name = new_name
        self.note = new_note
        for kind, ref in (facets or {}).items():
            self.set_facet(kind, ref)

    def set_stock(self, quantity: int) -> None:
        """Record the stock figure supplied by inventory."""
        if not isinstance(quantity, int) or quantity < 0:
            raise ValidationError("Stock quantity must be a non-negative integer")
        self.stock = quantity

    def change_price(
        self,
        value: Money | Decimal | str | int,
        effective_at: datetime,
        reason: str | None = None,
    ) -> PriceEntry:
        return self.ledger.append(value, effective_at, reason)

    # --- Queries --------------------------------------------------------------

    def current_price(self) -> Money:
        return self.ledger.current().value

    def matches(self, criteria: FilterCriteria) -> bool:
        return matches(self, criteria)

    # --- Deletion -------------------------------------------------------------

    def attempt_delete(
        self,
        guard: DeletionGuard,
        remove: Callable[[str], None],
    ) -> DeletionDecision:
        """Ask the guard, and call *remove* with this product's id only if allowed."""
        decision = guard.can_delete(self)
        if decision.allowed:
            remove(self.id)
        return decision


def _clean_name(name: str) -> str:
    name = (name or "").strip()
    if not name:
        raise ValidationError("Product name is required")
    if len(name) > MAX_NAME_LENGTH:
        raise ValidationError(f"Product name exceeds {MAX_NAME_LENGTH} characters")
    return name


def _clean_note(note: str | None) -> str:
    note = (note or "").strip()
    if len(note) > MAX_NOTE_LENGTH:
        raise ValidationError(f"Product note exceeds {MAX_NOTE_LENGTH} characters")
    return note

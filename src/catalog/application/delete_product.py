"""Application service: Delete Product use case.

Deletion is a two-phase protocol so the caller can show the outcome
before asking the user to confirm:

  1. ``check``:  evaluate the deletion guard, no mutation.
  2. ``commit``: re-evaluate the guard and, only if it still allows
               it, remove the product through the repository.

The guard is evaluated again at commit time because stock or usage may
have changed since the check. Storage must still refuse a delete that
races with a stock/usage change (transaction or version check); that is
the repository's responsibility.
"""

from __future__ import annotations

import logging

from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.repository.usage_lookup import UsageLookup
from catalog.domain.service.deletion_guard import DeletionDecision, DeletionGuard

logger = logging.getLogger(__name__)


class DeleteProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        usage_lookup: UsageLookup,
    ) -> None:
        self._product_repo = product_repo
        self._guard = DeletionGuard(usage_lookup)

    def check(self, product_id: str) -> DeletionDecision:
        return self._guard.can_delete(self._load(product_id))

    def commit(self, product_id: str) -> DeletionDecision:
        product = self._load(product_id)
        decision = product.attempt_delete(self._guard, self._product_repo.delete)
        if decision.allowed:
            logger.info("Product %s (%s) deleted", product.id, product.code)
        return decision

    def _load(self, product_id: str) -> Product:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        return product

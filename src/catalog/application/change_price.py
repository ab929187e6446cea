"""Application service: Change Price use case."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable

from catalog.application.add_product import utc_now
from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.model.price_ledger import PriceEntry
from catalog.domain.model.value_objects import Money
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class ChangePriceHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        clock: Callable[[], datetime] = utc_now,
        currency: str = "BRL",
    ) -> None:
        self._product_repo = product_repo
        self._clock = clock
        self._currency = currency

    def handle(
        self, product_id: str, new_price: str, reason: str | None = None
    ) -> PriceEntry:
        """Append a new price to the product's ledger.

        The ledger validates first; storage is only touched when the
        append succeeded locally. Earlier entries are never rewritten.
        """
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        previous = product.current_price()
        entry = product.change_price(
            Money.of(new_price, self._currency), self._clock(), reason
        )
        self._product_repo.append_price(product.id, entry)
        logger.info(
            "Price of product %s changed from %s to %s", product.id, previous, entry.value
        )
        return entry

"""Application service: Show Price History use case (query)."""

from __future__ import annotations

from datetime import timezone

from catalog.application.dto import PriceHistoryRowDTO
from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.repository.product_repository import ProductRepository


class PriceHistoryHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> list[PriceHistoryRowDTO]:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        return [
            PriceHistoryRowDTO(
                previous=str(change.previous) if change.previous is not None else None,
                new=str(change.new),
                effective_at=change.effective_at.astimezone(timezone.utc).strftime(
                    "%Y-%m-%d %H:%M UTC"
                ),
                reason=change.reason,
            )
            for change in product.ledger.changes()
        ]

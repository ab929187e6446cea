"""Application service: Add Product use case."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable

from catalog.domain.exceptions import ValidationError
from catalog.domain.model.facet import FacetKind, FacetRef, ReferenceData
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import Money
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.repository.reference_data_provider import ReferenceDataProvider

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def resolve_facets(
    reference: ReferenceData, facet_ids: dict[FacetKind, str | None]
) -> dict[FacetKind, FacetRef | None]:
    """Map facet ids to references; an empty id clears the facet."""
    return {
        kind: reference.resolve(kind, facet_id) if facet_id else None
        for kind, facet_id in facet_ids.items()
    }


class AddProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        reference_provider: ReferenceDataProvider,
        clock: Callable[[], datetime] = utc_now,
        currency: str = "BRL",
    ) -> None:
        self._product_repo = product_repo
        self._reference_provider = reference_provider
        self._clock = clock
        self._currency = currency

    def handle(
        self,
        code: str,
        name: str,
        price: str,
        note: str = "",
        facet_ids: dict[FacetKind, str | None] | None = None,
    ) -> Product:
        """Add a new product to the catalog with its initial price.

        Facet ids are checked against the reference data before anything
        is written.
        """
        if self._product_repo.get_by_code(code.strip()) is not None:
            raise ValidationError(f"Product code '{code.strip().upper()}' already exists")

        facets = resolve_facets(self._reference_provider.snapshot(), facet_ids or {})

        product = Product.create(
            id=self._product_repo.next_id(),
            code=code,
            name=name,
            initial_price=Money.of(price, self._currency),
            created_at=self._clock(),
            note=note,
            facets=facets,
        )
        self._product_repo.add(product)
        logger.info(
            "Product %s (%s) added at %s", product.id, product.code, product.current_price()
        )
        return product

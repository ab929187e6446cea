"""Application service: Update Product use case (non-price fields)."""

from __future__ import annotations

import logging

from catalog.application.add_product import resolve_facets
from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.model.facet import FacetKind
from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.repository.reference_data_provider import ReferenceDataProvider

logger = logging.getLogger(__name__)


class UpdateProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        reference_provider: ReferenceDataProvider,
    ) -> None:
        self._product_repo = product_repo
        self._reference_provider = reference_provider

    def handle(
        self,
        product_id: str,
        name: str | None = None,
        note: str | None = None,
        facet_ids: dict[FacetKind, str | None] | None = None,
    ) -> Product:
        """Edit name, note and facets.

        ``None`` leaves a field unchanged. In *facet_ids*, only the kinds
        present are touched and an empty id clears that facet. The price
        cannot be changed here; see ChangePriceHandler.
        """
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        facets = resolve_facets(self._reference_provider.snapshot(), facet_ids or {})
        product.update_details(name=name, note=note, facets=facets)
        self._product_repo.update(product)
        logger.info("Product %s updated", product.id)
        return product

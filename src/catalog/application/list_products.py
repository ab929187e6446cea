"""Application service: List Products use case (query).

Filtering runs over the whole catalog, then the result is paginated.
Each call is independent: the active filters travel in the
FilterCriteria argument, never in shared state.
"""

from __future__ import annotations

from catalog.application.dto import ProductDTO, ProductPageDTO
from catalog.domain.exceptions import ValidationError
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.repository.reference_data_provider import ReferenceDataProvider
from catalog.domain.service.catalog_filter import FilterCriteria, filter_products

DEFAULT_PAGE_SIZE = 20


class ListProductsHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        reference_provider: ReferenceDataProvider,
        per_page: int = DEFAULT_PAGE_SIZE,
    ) -> None:
        self._product_repo = product_repo
        self._reference_provider = reference_provider
        self._per_page = per_page

    def handle(self, criteria: FilterCriteria, page: int = 1) -> ProductPageDTO:
        if page < 1:
            raise ValidationError("Page number must be 1 or greater")

        matched = filter_products(
            self._product_repo.list_all(),
            criteria,
            reference=self._reference_provider.snapshot(),
        )

        start = (page - 1) * self._per_page
        return ProductPageDTO(
            items=[
                ProductDTO.from_product(p)
                for p in matched[start : start + self._per_page]
            ],
            page=page,
            per_page=self._per_page,
            total=len(matched),
        )


class FilterRequests:
    """Tracks which filter request is the most recent one.

    A caller issuing a new filter request (one per keystroke or selection
    change) takes a ticket, and only applies a result whose ticket is
    still the latest; older results are superseded and dropped.
    """

    def __init__(self) -> None:
        self._latest = 0

    def issue(self) -> int:
        self._latest += 1
        return self._latest

    def is_current(self, ticket: int) -> bool:
        return ticket == self._latest

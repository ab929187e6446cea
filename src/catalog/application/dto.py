"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from catalog.domain.model.facet import FacetKind
from catalog.domain.model.product import Product


@dataclass(frozen=True)
class ProductDTO:
    """Output: one catalog row as displayed to the user."""

    id: str
    code: str
    name: str
    note: str
    product_type: str | None
    color: str | None
    material: str | None
    size: str | None
    price: str  # formatted, e.g. "R$ 12.50"
    stock: int

    @staticmethod
    def from_product(product: Product) -> ProductDTO:
        def facet_name(kind: FacetKind) -> str | None:
            ref = product.facet(kind)
            return ref.name if ref else None

        return ProductDTO(
            id=product.id,
            code=product.code,
            name=product.name,
            note=product.note,
            product_type=facet_name(FacetKind.TYPE),
            color=facet_name(FacetKind.COLOR),
            material=facet_name(FacetKind.MATERIAL),
            size=facet_name(FacetKind.SIZE),
            price=str(product.current_price()),
            stock=product.stock,
        )


@dataclass(frozen=True)
class ProductPageDTO:
    """Output: one page of a filtered product listing."""

    items: list[ProductDTO]
    page: int
    per_page: int
    total: int

    @property
    def has_more(self) -> bool:
        return self.page * self.per_page < self.total


@dataclass(frozen=True)
class PriceHistoryRowDTO:
    """Output: a single price change, old price next to the new one."""

    previous: str | None
    new: str
    effective_at: str
    reason: str | None

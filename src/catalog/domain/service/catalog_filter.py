"""Domain service: Catalog Filter.

Narrows a product list by free text and facet ids. Filtering is a pure
read: it never reorders, mutates, or raises for "no match".

When reference data is supplied, a facet id that does not exist in it
(a stale selection) makes the filter match nothing rather than silently
dropping that constraint.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable

from catalog.domain.model.facet import FacetKind, ReferenceData

if TYPE_CHECKING:
    from catalog.domain.model.product import Product

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FilterCriteria:
    """One filter request. Empty string or None means "any"."""

    search: str = ""
    type_id: str | None = None
    color_id: str | None = None
    material_id: str | None = None
    size_id: str | None = None

    @property
    def needle(self) -> str:
        return (self.search or "").strip().casefold()

    def facet_ids(self) -> dict[FacetKind, str]:
        """Return only the facet constraints that are active."""
        raw = {
            FacetKind.TYPE: self.type_id,
            FacetKind.COLOR: self.color_id,
            FacetKind.MATERIAL: self.material_id,
            FacetKind.SIZE: self.size_id,
        }
        return {kind: value for kind, value in raw.items() if value}

    @property
    def is_empty(self) -> bool:
        return not self.needle and not self.facet_ids()


def matches(product: Product, criteria: FilterCriteria) -> bool:
    needle = criteria.needle
    if needle:
        haystack = (product.code, product.name, product.note or "")
        if not any(needle in text.casefold() for text in haystack):
            return False

    for kind, facet_id in criteria.facet_ids().items():
        ref = product.facet(kind)
        if ref is None or ref.id != facet_id:
            return False

    return True


def stale_facets(
    criteria: FilterCriteria, reference: ReferenceData
) -> list[tuple[FacetKind, str]]:
    """List the ``(kind, id)`` constraints that are absent from *reference*."""
    return [
        (kind, facet_id)
        for kind, facet_id in criteria.facet_ids().items()
        if not reference.contains(kind, facet_id)
    ]


def filter_products(
    products: Iterable[Product],
    criteria: FilterCriteria,
    reference: ReferenceData | None = None,
) -> list[Product]:
    """Return the products satisfying every active criterion, in input order."""
    if reference is not None:
        stale = stale_facets(criteria, reference)
        if stale:
            logger.warning(
                "Filter references unknown facet ids %s; no products match",
                ", ".join(f"{kind.value}={facet_id}" for kind, facet_id in stale),
            )
            return []

    if criteria.is_empty:
        return list(products)
    return [p for p in products if matches(p, criteria)]

"""In-memory fakes for testing.

These implement the same abstract interfaces as the JSON adapters
but keep everything in a dict. No file I/O, no side effects.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.model.facet import FacetKind, FacetRef
from catalog.domain.model.price_ledger import PriceEntry
from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.repository.reference_data_provider import ReferenceDataProvider
from catalog.domain.repository.usage_lookup import UsageLookup

T0 = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


def at(minutes: int) -> datetime:
    """A fixed UTC timestamp *minutes* after T0."""
    return T0 + timedelta(minutes=minutes)


class FakeClock:
    """Returns T0, T0+1min, T0+2min, ... on successive calls."""

    def __init__(self) -> None:
        self._calls = 0

    def __call__(self) -> datetime:
        now = at(self._calls)
        self._calls += 1
        return now


class FakeProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[str, Product] = {}
        self.appended: list[tuple[str, PriceEntry]] = []
        self.deleted: list[str] = []
        for p in products or []:
            self._store[p.id] = p

    def next_id(self) -> str:
        if not self._store:
            return "1"
        return str(max(int(pid) for pid in self._store) + 1)

    def get_by_id(self, product_id: str) -> Product | None:
        return self._store.get(product_id)

    def get_by_code(self, code: str) -> Product | None:
        for p in self._store.values():
            if p.code.lower() == code.lower():
                return p
        return None

    def list_all(self) -> list[Product]:
        return list(self._store.values())

    def add(self, product: Product) -> None:
        self._store[product.id] = product

    def update(self, product: Product) -> None:
        self._store[product.id] = product

    def append_price(self, product_id: str, entry: PriceEntry) -> None:
        self.appended.append((product_id, entry))

    def delete(self, product_id: str) -> None:
        if product_id not in self._store:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        del self._store[product_id]
        self.deleted.append(product_id)


class FakeReferenceDataProvider(ReferenceDataProvider):

    def __init__(self, facets: dict[FacetKind, list[FacetRef]] | None = None) -> None:
        self._facets = facets or {}

    def list_facets(self, kind: FacetKind) -> list[FacetRef]:
        return list(self._facets.get(kind, []))


class FakeUsageLookup(UsageLookup):

    def __init__(self, in_use: set[str] | None = None) -> None:
        self.in_use = set(in_use or ())
        self.calls: list[str] = []

    def is_in_use(self, product_id: str) -> bool:
        self.calls.append(product_id)
        return product_id in self.in_use


# --- Sample reference data ----------------------------------------------------

SHIRT = FacetRef(id="1", name="Shirt", code="SH")
PANTS = FacetRef(id="2", name="Pants", code="PT")
BLUE = FacetRef(id="1", name="Blue", code="BLU")
RED = FacetRef(id="2", name="Red", code="RED")
COTTON = FacetRef(id="1", name="Cotton", code="COT")
SIZE_M = FacetRef(id="1", name="M", code="00M")

REFERENCE = {
    FacetKind.TYPE: [SHIRT, PANTS],
    FacetKind.COLOR: [BLUE, RED],
    FacetKind.MATERIAL: [COTTON],
    FacetKind.SIZE: [SIZE_M],
}


def make_product(
    id: str = "1",
    code: str = "SH001",
    name: str = "Basic Tee",
    price: str = "10.00",
    note: str = "",
    stock: int = 0,
    **facets: FacetRef | None,
) -> Product:
    """Build a valid product; facet kwargs use the Product field names."""
    product = Product.create(
        id=id, code=code, name=name, initial_price=price, created_at=T0, note=note
    )
    product.stock = stock
    for field_name, ref in facets.items():
        setattr(product, field_name, ref)
    return product

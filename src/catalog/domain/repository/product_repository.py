"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, SQL, in-memory)
live in the infrastructure layer.

Price entries are written only through ``append_price``; ``update``
persists every other field and leaves the stored price history alone.
Implementations re-validate and are the final authority on conflicts.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from catalog.domain.model.price_ledger import PriceEntry
from catalog.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def next_id(self) -> str:
        """Generate the next unique product ID."""

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def get_by_code(self, code: str) -> Product | None:
        """Return a product by its code (case-insensitive), or None."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in catalog order."""

    @abstractmethod
    def add(self, product: Product) -> None:
        """Persist a newly created product, including its initial price."""

    @abstractmethod
    def update(self, product: Product) -> None:
        """Persist the non-price fields of an existing product."""

    @abstractmethod
    def append_price(self, product_id: str, entry: PriceEntry) -> None:
        """Append one entry to the stored price history of a product."""

    @abstractmethod
    def delete(self, product_id: str) -> None:
        """Remove a product. Raises EntityNotFoundError if it is gone."""

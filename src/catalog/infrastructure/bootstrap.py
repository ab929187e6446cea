"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from catalog.application.add_product import AddProductHandler
from catalog.application.change_price import ChangePriceHandler
from catalog.application.delete_product import DeleteProductHandler
from catalog.application.list_products import ListProductsHandler
from catalog.application.set_stock import SetStockHandler
from catalog.application.show_price_history import PriceHistoryHandler
from catalog.application.update_product import UpdateProductHandler
from catalog.infrastructure.config import Settings
from catalog.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from catalog.infrastructure.persistence.json_reference_data_provider import (
    JsonReferenceDataProvider,
)
from catalog.infrastructure.persistence.json_usage_lookup import JsonUsageLookup


class Container:

    def __init__(self, settings: Settings) -> None:
        self.settings = settings

    # --- Adapters -------------------------------------------------------------

    def product_repository(self) -> JsonProductRepository:
        return JsonProductRepository(self.settings.data_dir / "products.json")

    def reference_data(self) -> JsonReferenceDataProvider:
        return JsonReferenceDataProvider(self.settings.data_dir / "reference_data.json")

    def usage_lookup(self) -> JsonUsageLookup:
        return JsonUsageLookup(self.settings.data_dir / "usages.json")

    # --- Use cases ------------------------------------------------------------

    def add_product(self) -> AddProductHandler:
        return AddProductHandler(
            product_repo=self.product_repository(),
            reference_provider=self.reference_data(),
            currency=self.settings.currency,
        )

    def update_product(self) -> UpdateProductHandler:
        return UpdateProductHandler(
            product_repo=self.product_repository(),
            reference_provider=self.reference_data(),
        )

    def set_stock(self) -> SetStockHandler:
        return SetStockHandler(product_repo=self.product_repository())

    def change_price(self) -> ChangePriceHandler:
        return ChangePriceHandler(
            product_repo=self.product_repository(),
            currency=self.settings.currency,
        )

    def price_history(self) -> PriceHistoryHandler:
        return PriceHistoryHandler(product_repo=self.product_repository())

    def list_products(self) -> ListProductsHandler:
        return ListProductsHandler(
            product_repo=self.product_repository(),
            reference_provider=self.reference_data(),
            per_page=self.settings.page_size,
        )

    def delete_product(self) -> DeleteProductHandler:
        return DeleteProductHandler(
            product_repo=self.product_repository(),
            usage_lookup=self.usage_lookup(),
        )

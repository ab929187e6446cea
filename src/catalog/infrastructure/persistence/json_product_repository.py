"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

import json
from datetime import datetime
from decimal import Decimal
from pathlib import Path

from catalog.domain.exceptions import (
    EntityNotFoundError,
    PersistenceError,
    ValidationError,
)
from catalog.domain.model.facet import FacetRef
from catalog.domain.model.price_ledger import PriceEntry, PriceLedger
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import Money
from catalog.domain.repository.product_repository import ProductRepository

_FACET_KEYS = ("product_type", "color", "material", "size")


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def next_id(self) -> str:
        records = self._load_raw("next_id")
        if not records:
            return "1"
        return str(max(int(r["id"]) for r in records) + 1)

    def get_by_id(self, product_id: str) -> Product | None:
        for raw in self._load_raw("get_product"):
            if raw["id"] == product_id:
                return self._decode("get_product", raw)
        return None

    def get_by_code(self, code: str) -> Product | None:
        for raw in self._load_raw("get_product"):
            if str(raw.get("code", "")).lower() == code.lower():
                return self._decode("get_product", raw)
        return None

    def list_all(self) -> list[Product]:
        return [
            self._decode("list_products", raw)
            for raw in self._load_raw("list_products")
        ]

    def add(self, product: Product) -> None:
        records = self._load_raw("create_product")
        if any(r["id"] == product.id for r in records):
            raise ValidationError(f"Product with ID '{product.id}' already exists")
        records.append(self._to_raw(product))
        self._persist_raw("create_product", records)

    def update(self, product: Product) -> None:
        records = self._load_raw("update_product")
        raw = self._find(records, product.id)
        self._decode("update_product", raw)
        prices = raw["prices"]
        raw.clear()
        raw.update(self._to_raw(product))
        # Price history is only ever written by append_price.
        raw["prices"] = prices
        self._persist_raw("update_product", records)

    def append_price(self, product_id: str, entry: PriceEntry) -> None:
        records = self._load_raw("append_price")
        raw = self._find(records, product_id)

        # Replay the stored ledger so storage enforces the same ordering rule.
        ledger = self._decode("append_price", raw).ledger
        ledger.append(entry.value, entry.effective_at, entry.reason)

        raw["prices"].append(self._entry_to_raw(entry))
        self._persist_raw("append_price", records)

    def delete(self, product_id: str) -> None:
        records = self._load_raw("delete_product")
        raw = self._find(records, product_id)
        if raw.get("stock", 0) != 0:
            raise ValidationError(
                f"Product with ID '{product_id}' still has stock {raw['stock']}"
            )
        remaining = [r for r in records if r["id"] != product_id]
        self._persist_raw("delete_product", remaining)

    # --- Serialization --------------------------------------------------------

    @classmethod
    def _to_raw(cls, product: Product) -> dict:
        raw: dict = {
            "id": product.id,
            "code": product.code,
            "name": product.name,
            "note": product.note,
            "stock": product.stock,
        }
        for key in _FACET_KEYS:
            ref: FacetRef | None = getattr(product, key)
            raw[key] = (
                {"id": ref.id, "name": ref.name, "code": ref.code} if ref else None
            )
        raw["prices"] = [cls._entry_to_raw(e) for e in product.ledger.history()]
        return raw

    @staticmethod
    def _entry_to_raw(entry: PriceEntry) -> dict:
        return {
            "value": str(entry.value.amount),
            "currency": entry.value.currency,
            "effective_at": entry.effective_at.isoformat(),
            "reason": entry.reason,
        }

    @staticmethod
    def _to_entry(raw: dict) -> PriceEntry:
        return PriceEntry(
            value=Money(Decimal(raw["value"]), raw.get("currency", "BRL")),
            effective_at=datetime.fromisoformat(raw["effective_at"]),
            reason=raw.get("reason"),
        )

    @classmethod
    def _to_domain(cls, raw: dict) -> Product:
        facets = {
            key: FacetRef(**raw[key]) if raw.get(key) else None for key in _FACET_KEYS
        }
        return Product(
            id=raw["id"],
            code=raw["code"],
            name=raw["name"],
            note=raw.get("note", ""),
            stock=raw.get("stock", 0),
            ledger=PriceLedger(cls._to_entry(p) for p in raw["prices"]),
            **facets,
        )

    @classmethod
    def _decode(cls, operation: str, raw: dict) -> Product:
        try:
            if not raw["prices"]:
                raise ValidationError(f"product {raw['id']} has no price entries")
            return cls._to_domain(raw)
        except (KeyError, TypeError, ValueError, ArithmeticError, ValidationError) as exc:
            raise PersistenceError(operation, f"malformed record: {exc!r}") from exc

    # --- File helpers ---------------------------------------------------------

    @staticmethod
    def _find(records: list[dict], product_id: str) -> dict:
        for raw in records:
            if raw["id"] == product_id:
                return raw
        raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

    def _load_raw(self, operation: str) -> list[dict]:
        try:
            records = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise PersistenceError(operation, str(exc)) from exc
        if not isinstance(records, list) or not all(
            isinstance(r, dict) and "id" in r for r in records
        ):
            raise PersistenceError(operation, "expected a list of product records")
        return records

    def _persist_raw(self, operation: str, records: list[dict]) -> None:
        try:
            self._file_path.write_text(
                json.dumps(records, indent=2, ensure_ascii=False) + "\n",
                encoding="utf-8",
            )
        except OSError as exc:
            raise PersistenceError(operation, str(exc)) from exc

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")

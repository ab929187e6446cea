"""JSON-file-backed implementation of UsageLookup.

The file maps product IDs to the external records that reference them,
e.g. ``{"3": ["order #41", "bundle KIT-02"]}``. It is maintained by the
systems that own those records.
"""

from __future__ import annotations

import json
from pathlib import Path

from catalog.domain.exceptions import PersistenceError
from catalog.domain.repository.usage_lookup import UsageLookup


class JsonUsageLookup(UsageLookup):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    def is_in_use(self, product_id: str) -> bool:
        return bool(self.references(product_id))

    def references(self, product_id: str) -> list[str]:
        if not self._file_path.exists():
            return []
        try:
            data = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise PersistenceError("usage_lookup", str(exc)) from exc
        if not isinstance(data, dict):
            raise PersistenceError("usage_lookup", "expected an object keyed by product id")
        references = data.get(product_id, [])
        if not isinstance(references, list):
            raise PersistenceError(
                "usage_lookup", f"references of product {product_id} must be a list"
            )
        return list(references)

"""JSON-file-backed implementation of ReferenceDataProvider.

The catalog core only reads facets; ``add`` exists for the catalog
administration commands that maintain the reference lists.
"""

from __future__ import annotations

import json
from pathlib import Path

from catalog.domain.exceptions import PersistenceError, ValidationError
from catalog.domain.model.facet import FacetKind, FacetRef
from catalog.domain.repository.reference_data_provider import ReferenceDataProvider


class JsonReferenceDataProvider(ReferenceDataProvider):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- ReferenceDataProvider interface --------------------------------------

    def list_facets(self, kind: FacetKind) -> list[FacetRef]:
        records = self._load_raw("list_facets")[kind.value]
        try:
            return [FacetRef(**raw) for raw in records]
        except TypeError as exc:
            raise PersistenceError("list_facets", f"malformed facet: {exc}") from exc

    # --- Administration -------------------------------------------------------

    def add(self, kind: FacetKind, name: str, code: str) -> FacetRef:
        data = self._load_raw("add_facet")
        records = data[kind.value]

        try:
            ids = [int(r["id"]) for r in records]
            codes = {r["code"] for r in records}
        except (KeyError, TypeError, ValueError) as exc:
            raise PersistenceError("add_facet", f"malformed facet: {exc!r}") from exc

        facet = FacetRef.create(kind, str(max(ids) + 1 if ids else 1), name, code)
        if facet.code in codes:
            raise ValidationError(
                f"{kind.value.capitalize()} code '{facet.code}' already exists"
            )

        records.append({"id": facet.id, "name": facet.name, "code": facet.code})
        self._persist_raw("add_facet", data)
        return facet

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self, operation: str) -> dict[str, list[dict]]:
        try:
            data = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise PersistenceError(operation, str(exc)) from exc
        if not isinstance(data, dict):
            raise PersistenceError(operation, "expected an object keyed by facet kind")
        for kind in FacetKind:
            records = data.setdefault(kind.value, [])
            if not isinstance(records, list) or not all(
                isinstance(r, dict) for r in records
            ):
                raise PersistenceError(
                    operation, f"expected a list of {kind.value} records"
                )
        return data

    def _persist_raw(self, operation: str, data: dict[str, list[dict]]) -> None:
        try:
            self._file_path.write_text(
                json.dumps(data, indent=2, ensure_ascii=False) + "\n",
                encoding="utf-8",
            )
        except OSError as exc:
            raise PersistenceError(operation, str(exc)) from exc

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            empty = {kind.value: [] for kind in FacetKind}
            self._file_path.write_text(json.dumps(empty, indent=2), encoding="utf-8")

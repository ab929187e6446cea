"""Facet reference data: the four classification dimensions of a product.

Facets are owned by the reference data provider. The catalog only reads
them; a product holds at most one reference per dimension.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from catalog.domain.exceptions import UnknownFacetIdError, ValidationError

MAX_FACET_NAME_LENGTH = 30


class FacetKind(Enum):
    TYPE = "type"
    COLOR = "color"
    MATERIAL = "material"
    SIZE = "size"


@dataclass(frozen=True)
class FacetRef:
    """An ``(id, name)`` pair from the reference data, plus its short code."""

    id: str
    name: str
    code: str = ""

    @staticmethod
    def create(kind: FacetKind, facet_id: str, name: str, code: str) -> FacetRef:
        """Build a new facet entry, normalizing its code for *kind*.

        Type codes are two letters, color and material codes three letters.
        Size codes hold up to three characters and are left-padded with
        zeros ("M" -> "00M", "40" -> "040").
        """
        name = (name or "").strip()
        if not name:
            raise ValidationError(f"{kind.value.capitalize()} name is required")
        if len(name) > MAX_FACET_NAME_LENGTH:
            raise ValidationError(
                f"{kind.value.capitalize()} name exceeds {MAX_FACET_NAME_LENGTH} characters"
            )
        return FacetRef(id=facet_id, name=name, code=normalize_code(kind, code))


def normalize_code(kind: FacetKind, code: str) -> str:
    code = (code or "").strip().upper()
    if not code:
        raise ValidationError(f"{kind.value.capitalize()} code is required")

    if kind is FacetKind.SIZE:
        if len(code) > 3:
            raise ValidationError("Size code must have at most 3 characters")
        return code.rjust(3, "0")

    expected = 2 if kind is FacetKind.TYPE else 3
    if len(code) != expected or not code.isalpha():
        raise ValidationError(
            f"{kind.value.capitalize()} code must be exactly {expected} letters"
        )
    return code


@dataclass(frozen=True)
class ReferenceData:
    """Immutable snapshot of every facet set, keyed by kind then id."""

    facets: Mapping[FacetKind, Mapping[str, FacetRef]] = field(default_factory=dict)

    @staticmethod
    def of(entries: Mapping[FacetKind, list[FacetRef]]) -> ReferenceData:
        return ReferenceData(
            facets=MappingProxyType(
                {
                    kind: MappingProxyType({ref.id: ref for ref in entries.get(kind, [])})
                    for kind in FacetKind
                }
            )
        )

    def contains(self, kind: FacetKind, facet_id: str) -> bool:
        return facet_id in self.facets.get(kind, {})

    def resolve(self, kind: FacetKind, facet_id: str) -> FacetRef:
        """Return the facet for *facet_id*, raising UnknownFacetIdError if absent."""
        try:
            return self.facets.get(kind, {})[facet_id]
        except KeyError:
            raise UnknownFacetIdError(kind.value, facet_id) from None

    def list(self, kind: FacetKind) -> list[FacetRef]:
        return list(self.facets.get(kind, {}).values())

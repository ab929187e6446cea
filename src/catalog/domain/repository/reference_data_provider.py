"""Abstract provider of facet reference data (types, colors, materials, sizes)."""

from __future__ import annotations

from abc import ABC, abstractmethod

from catalog.domain.model.facet import FacetKind, FacetRef, ReferenceData


class ReferenceDataProvider(ABC):

    @abstractmethod
    def list_facets(self, kind: FacetKind) -> list[FacetRef]:
        """Return every facet of *kind*."""

    def snapshot(self) -> ReferenceData:
        """Return an immutable view of all four facet sets."""
        return ReferenceData.of({kind: self.list_facets(kind) for kind in FacetKind})

"""Tests for the JSON reference data provider and usage lookup."""

import json

import pytest

from catalog.domain.exceptions import PersistenceError, ValidationError
from catalog.domain.model.facet import FacetKind, FacetRef
from catalog.infrastructure.persistence.json_reference_data_provider import (
    JsonReferenceDataProvider,
)
from catalog.infrastructure.persistence.json_usage_lookup import JsonUsageLookup


class TestJsonReferenceDataProvider:

    def test_starts_empty(self, tmp_path):
        provider = JsonReferenceDataProvider(tmp_path / "reference_data.json")
        assert all(provider.list_facets(kind) == [] for kind in FacetKind)

    def test_add_assigns_ids_per_kind(self, tmp_path):
        provider = JsonReferenceDataProvider(tmp_path / "reference_data.json")
        shirt = provider.add(FacetKind.TYPE, "Shirt", "sh")
        pants = provider.add(FacetKind.TYPE, "Pants", "pt")
        blue = provider.add(FacetKind.COLOR, "Blue", "blu")
        assert (shirt.id, pants.id, blue.id) == ("1", "2", "1")
        assert provider.list_facets(FacetKind.TYPE) == [
            FacetRef("1", "Shirt", "SH"),
            FacetRef("2", "Pants", "PT"),
        ]

    def test_size_code_padded(self, tmp_path):
        provider = JsonReferenceDataProvider(tmp_path / "reference_data.json")
        assert provider.add(FacetKind.SIZE, "Medium", "m").code == "00M"

    def test_duplicate_code_rejected(self, tmp_path):
        provider = JsonReferenceDataProvider(tmp_path / "reference_data.json")
        provider.add(FacetKind.COLOR, "Blue", "BLU")
        with pytest.raises(ValidationError, match="already exists"):
            provider.add(FacetKind.COLOR, "Navy blue", "blu")

    @pytest.mark.parametrize(
        "content",
        [
            [],
            {"color": {"id": "1"}},
            {"color": [{"id": "1", "name": "Blue", "code": "BLU", "hex": "#00f"}]},
        ],
    )
    def test_wrong_shape_reported(self, tmp_path, content):
        path = tmp_path / "reference_data.json"
        path.write_text(json.dumps(content))
        with pytest.raises(PersistenceError, match="list_facets failed"):
            JsonReferenceDataProvider(path).list_facets(FacetKind.COLOR)

    def test_malformed_record_reported_on_add(self, tmp_path):
        path = tmp_path / "reference_data.json"
        path.write_text(json.dumps({"color": [{"name": "Blue"}]}))
        with pytest.raises(PersistenceError, match="add_facet failed"):
            JsonReferenceDataProvider(path).add(FacetKind.COLOR, "Red", "RED")

    def test_snapshot(self, tmp_path):
        provider = JsonReferenceDataProvider(tmp_path / "reference_data.json")
        provider.add(FacetKind.MATERIAL, "Cotton", "COT")
        snapshot = provider.snapshot()
        assert snapshot.contains(FacetKind.MATERIAL, "1")
        assert not snapshot.contains(FacetKind.TYPE, "1")


class TestJsonUsageLookup:

    def test_missing_file_means_unused(self, tmp_path):
        assert not JsonUsageLookup(tmp_path / "usages.json").is_in_use("1")

    def test_referenced_product_is_in_use(self, tmp_path):
        path = tmp_path / "usages.json"
        path.write_text(json.dumps({"1": ["order #41"], "2": []}))
        lookup = JsonUsageLookup(path)
        assert lookup.is_in_use("1")
        assert not lookup.is_in_use("2")
        assert lookup.references("1") == ["order #41"]

    def test_corrupt_file(self, tmp_path):
        path = tmp_path / "usages.json"
        path.write_text("[")
        with pytest.raises(PersistenceError, match="usage_lookup"):
            JsonUsageLookup(path).is_in_use("1")

    @pytest.mark.parametrize("content", [["1"], {"1": "order #41"}])
    def test_wrong_shape(self, tmp_path, content):
        path = tmp_path / "usages.json"
        path.write_text(json.dumps(content))
        with pytest.raises(PersistenceError, match="usage_lookup failed"):
            JsonUsageLookup(path).is_in_use("1")

"""
Tests for the metadata deriver.
"""

import pytest

from csn_interop.schemas.meta import InteropMeta
from csn_interop.services.metadata import derive_meta, find_services, parse_service_name


def _csn(*services: str) -> dict:
    return {"definitions": {name: {"kind": "service"} for name in services}}


class TestParseServiceName:
    """Tests for service name parsing."""

    def test_version_segment(self):
        """Test a trailing vN segment gives the major version."""
        meta = parse_service_name("customer.namespace.MyService.v2")
        assert meta.to_csn() == {
            "document": {"version": "2.0.0"},
            "__name": "MyService",
            "__namespace": "customer.namespace",
        }

    def test_no_version_segment(self):
        """Test the default major version is 1."""
        meta = parse_service_name("com.example.MyService")
        assert meta.document.version == "1.0.0"
        assert meta.name == "MyService"
        assert meta.namespace == "com.example"

    def test_no_dots(self):
        """Test an unqualified name has no namespace."""
        assert parse_service_name("CatalogService").to_csn() == {
            "document": {"version": "1.0.0"},
            "__name": "CatalogService",
        }

    def test_non_numeric_version_like_segment(self):
        """Test 'vX' is an ordinary short name."""
        meta = parse_service_name("com.example.vX")
        assert meta.name == "vX"
        assert meta.document.version == "1.0.0"

    def test_non_ascii_digits_are_not_a_version(self):
        """Test only ASCII digits form a version segment."""
        meta = parse_service_name("ns.Svc.v٢")
        assert meta.name == "v٢"
        assert meta.namespace == "ns.Svc"
        assert meta.document.version == "1.0.0"

    def test_trailing_newline_is_not_a_version(self):
        """Test a version segment must match the whole segment."""
        meta = parse_service_name("ns.Svc.v2\n")
        assert meta.name == "v2\n"
        assert meta.document.version == "1.0.0"

    def test_version_without_namespace(self):
        """Test 'Service.v10' has no namespace."""
        meta = parse_service_name("Service.v10")
        assert meta.to_csn() == {"document": {"version": "10.0.0"}, "__name": "Service"}

    def test_version_only_name(self):
        """Test a bare version segment leaves the name unset."""
        assert parse_service_name("v3").to_csn() == {"document": {"version": "3.0.0"}}


class TestDeriveMeta:
    """Tests for derive_meta."""

    def test_single_service(self):
        """Test meta information for exactly one service."""
        csn = _csn("customer.namespace.MyService.v2")

        result = derive_meta(csn)

        assert result is csn
        assert csn["csnInteropEffective"] == "1.0"
        assert csn["meta"] == {
            "flavor": "effective",
            "document": {"version": "2.0.0"},
            "__name": "MyService",
            "__namespace": "customer.namespace",
        }

    def test_multiple_services(self):
        """Test no service meta information for two services."""
        csn = _csn("a.One", "b.Two")
        derive_meta(csn)
        assert csn["meta"] == {"flavor": "effective"}

    def test_no_service(self):
        """Test entities only yield the flavor."""
        csn = {"definitions": {"E": {"kind": "entity"}}}
        derive_meta(csn)
        assert csn["meta"] == {"flavor": "effective"}

    def test_existing_meta_kept_and_creator_removed(self):
        """Test other meta entries survive and creator is removed."""
        csn = _csn("S")
        csn["meta"] = {"creator": "CDS Compiler v5", "custom": 1}
        derive_meta(csn)
        assert csn["meta"] == {
            "custom": 1,
            "flavor": "effective",
            "document": {"version": "1.0.0"},
            "__name": "S",
        }

    @pytest.mark.parametrize("value", ["string", 123, None, ["list"]])
    def test_non_dict_input_unchanged(self, value):
        """Test non-dict input is returned as is."""
        assert derive_meta(value) is value

    def test_missing_definitions_raises(self):
        """Test a CSN without definitions is not silently accepted."""
        with pytest.raises(KeyError):
            derive_meta({})

    def test_find_services(self):
        """Test only service definitions are returned."""
        csn = {
            "definitions": {
                "S": {"kind": "service"},
                "S.E": {"kind": "entity"},
                "T": {"kind": "type"},
            }
        }
        assert find_services(csn) == ["S"]


class TestInteropMeta:
    """Tests for the InteropMeta schema."""

    def test_populate_by_alias(self):
        """Test the CSN key names are accepted."""
        meta = InteropMeta.model_validate(
            {"document": {"version": "2.0.0"}, "__name": "S", "__namespace": "ns"}
        )
        assert meta.name == "S"
        assert meta.namespace == "ns"

    def test_from_version(self):
        """Test building from a major version."""
        meta = InteropMeta.from_version("4", "S")
        assert meta.to_csn() == {"document": {"version": "4.0.0"}, "__name": "S"}

"""Tests for specval.validation.registry."""

from __future__ import annotations

import pytest

from specval.exceptions import SchemaNotFoundError
from specval.models import FragmentKind, SpecFamily
from specval.validation.registry import (
    _DOCUMENT_SCHEMAS,
    _FRAGMENT_DEFINITIONS,
    SchemaRegistry,
    fragment_schema,
    get_registry,
)


class TestVersionBuckets:
    """Patch releases of a family share one compiled validator."""

    def test_30_patch_versions_share_validator(self) -> None:
        registry = SchemaRegistry()
        first = registry.get("3.0.3")
        assert registry.get("3.0.1") is first
        assert registry.get("3.0") is first

    def test_families_are_distinct(self) -> None:
        registry = SchemaRegistry()
        assert registry.get("3.0.3") is not registry.get("3.1.0")

    def test_fragment_validators_cached(self) -> None:
        registry = SchemaRegistry()
        assert registry.get("3.1.0", FragmentKind.SCHEMA) is registry.get(
            "3.1.1", FragmentKind.SCHEMA
        )

    def test_families(self) -> None:
        assert SchemaRegistry().families() == [
            SpecFamily.SWAGGER_2_0,
            SpecFamily.OPENAPI_3_0,
            SpecFamily.OPENAPI_3_1,
            SpecFamily.OPENAPI_3_2,
        ]


class TestLookupMisses:
    def test_unknown_document_version_raises(self) -> None:
        with pytest.raises(SchemaNotFoundError, match="No schema available for OpenAPI version: 4.0"):
            SchemaRegistry().get("4.0")

    def test_unknown_fragment_version_is_none(self) -> None:
        assert SchemaRegistry().get("4.0", FragmentKind.SCHEMA) is None

    def test_swagger_has_no_request_body(self) -> None:
        assert SchemaRegistry().get("2.0", FragmentKind.REQUESTBODY) is None

    def test_swagger_kinds(self) -> None:
        assert SchemaRegistry().kinds("2.0") == [
            FragmentKind.SCHEMA,
            FragmentKind.PARAMETER,
            FragmentKind.RESPONSE,
            FragmentKind.PATHITEM,
        ]

    def test_openapi_has_all_fragment_kinds(self) -> None:
        kinds = set(SchemaRegistry().kinds("3.2.0"))
        assert kinds == set(FragmentKind) - {FragmentKind.SPECIFICATION}


class TestFragmentSchemas:
    @pytest.mark.parametrize(
        ("family", "kind", "definition"),
        [
            (family, kind, definition)
            for family, table in _FRAGMENT_DEFINITIONS.items()
            for kind, definition in table.items()
        ],
    )
    def test_every_definition_exists(
        self, family: SpecFamily, kind: FragmentKind, definition: str
    ) -> None:
        root = _DOCUMENT_SCHEMAS[family]
        keyword = "$defs" if "$defs" in root else "definitions"
        assert definition in root[keyword]

    def test_wrapper_for_draft_04(self) -> None:
        root = _DOCUMENT_SCHEMAS[SpecFamily.OPENAPI_3_0]
        wrapper = fragment_schema(root, "Parameter")
        assert wrapper["$ref"] == "#/definitions/Parameter"
        assert wrapper["id"] == root["id"]
        assert wrapper["$schema"] == root["$schema"]
        assert wrapper["definitions"] is root["definitions"]

    def test_wrapper_for_2020_12(self) -> None:
        wrapper = SchemaRegistry().get_schema("3.1.0", FragmentKind.PATHITEM)
        assert wrapper["$ref"] == "#/$defs/path-item"
        assert "$defs" in wrapper

    def test_specification_kind_returns_root(self) -> None:
        assert SchemaRegistry().get_schema("2.0") is _DOCUMENT_SCHEMAS[SpecFamily.SWAGGER_2_0]

    def test_parameter_fragment_validates(self) -> None:
        evaluate = SchemaRegistry().get("3.0.3", FragmentKind.PARAMETER)
        assert evaluate({"name": "id", "in": "query", "schema": {"type": "string"}}) == []
        keywords = {v.keyword for v in evaluate({"name": "id"})}
        assert "required" in keywords


class TestCustomRegistry:
    def test_custom_documents(self) -> None:
        registry = SchemaRegistry(
            documents={SpecFamily.OPENAPI_3_0: {"type": "object", "required": ["x"]}},
            fragments={},
        )
        assert [v.keyword for v in registry.get("3.0.0")({})] == ["required"]
        with pytest.raises(SchemaNotFoundError):
            registry.get("3.1.0")


def test_shared_registry_is_singleton() -> None:
    assert get_registry() is get_registry()

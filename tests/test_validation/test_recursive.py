"""Tests for specval.validation.recursive."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

from specval.models import RecursiveValidationResult, ResolvedReference, ValidationOptions
from specval.parser.references import find_references
from specval.parser.resolver import ResolvedDocument
from specval.validation.recursive import (
    CIRCULAR_MESSAGE,
    analyze_references,
    recurring_references,
    validate_multiple_recursively,
    validate_recursively,
)


def _assert_counts(result: RecursiveValidationResult) -> None:
    assert result.total_documents == 1 + len(result.partial_validations)
    assert result.valid_documents <= result.total_documents
    assert result.valid == (len(result.errors) == 0)


class TestValidateRecursively:
    def test_petstore_references_all_valid(self, petstore_30_path: str) -> None:
        result = validate_recursively(petstore_30_path)
        _assert_counts(result)
        assert result.valid
        assert result.total_documents == 8
        assert result.valid_documents == 8
        assert result.circular_references == []
        assert result.version == "3.0.3"

    def test_partial_paths_are_reference_values(self, petstore_30_path: str) -> None:
        result = validate_recursively(petstore_30_path)
        assert [p.path for p in result.partial_validations][:2] == [
            "#/components/parameters/Limit",
            "#/components/schemas/Pet",
        ]

    def test_split_files(self, split_spec_path: str) -> None:
        result = validate_recursively(split_spec_path)
        _assert_counts(result)
        assert result.valid
        assert [p.path for p in result.partial_validations] == [
            "pet.yaml",
            "responses.json#/Error",
        ]
        assert result.total_documents == 3

    def test_repeated_reference_is_not_circular(self, self_reference_path: str) -> None:
        result = validate_recursively(self_reference_path)
        _assert_counts(result)
        assert result.circular_references == []
        assert len(result.partial_validations) == 3
        assert not any(p.is_circular for p in result.partial_validations)

    def test_unresolvable_reference_is_skipped(self, tmp_path: Path) -> None:
        spec = {
            "openapi": "3.0.3",
            "info": {"title": "S", "version": "1"},
            "paths": {"/a": {"get": {"responses": {"200": {"$ref": "#/does/not/exist"}}}}},
        }
        source = tmp_path / "broken.json"
        source.write_text(json.dumps(spec), encoding="utf-8")

        result = validate_recursively(str(source))
        assert result.partial_validations == []
        assert result.total_documents == 1
        assert result.valid_documents == 1
        assert result.valid

    def test_invalid_fragment_invalidates_result(self, tmp_path: Path) -> None:
        spec = {
            "openapi": "3.0.3",
            "info": {"title": "S", "version": "1"},
            "paths": {},
            "components": {
                "schemas": {
                    "Bad": {"type": "object", "required": "id"},
                    "Uses": {"$ref": "#/components/schemas/Bad"},
                }
            },
        }
        source = tmp_path / "bad.json"
        source.write_text(json.dumps(spec), encoding="utf-8")

        result = validate_recursively(str(source))
        _assert_counts(result)
        assert not result.valid
        bad = result.partial_validations[0]
        assert bad.path == "#/components/schemas/Bad"
        assert not bad.result.valid
        assert all(e.path.startswith("#/components/schemas/Bad") for e in bad.result.errors)
        assert bad.result.errors[0] in result.errors

    def test_root_issues_come_first(self, tmp_path: Path) -> None:
        spec = {
            "openapi": "3.0.3",
            "info": {"title": 5, "version": "1"},
            "paths": {},
            "components": {"schemas": {"A": {"$ref": "#/info"}}},
        }
        source = tmp_path / "order.json"
        source.write_text(json.dumps(spec), encoding="utf-8")

        result = validate_recursively(str(source))
        assert result.errors[0].path == "/info/title"
        assert result.partial_validations[0].path == "#/info"

    def test_circular_resolution_counts_as_document(self, petstore_30_path: str) -> None:
        outcome = ResolvedDocument(
            document={},
            resolved=[
                ResolvedReference(path="#/components/schemas/Pet", is_circular=True),
                ResolvedReference(path="#/components/schemas/Error", content={"type": "object"}),
            ],
            circular=["#/components/schemas/Pet"],
        )
        with patch(
            "specval.validation.recursive.resolve_all_references", return_value=outcome
        ):
            result = validate_recursively(petstore_30_path)

        _assert_counts(result)
        assert not result.valid
        assert result.circular_references == ["#/components/schemas/Pet"]
        circular = result.partial_validations[0]
        assert circular.is_circular
        assert circular.result.errors[0].message == CIRCULAR_MESSAGE
        assert circular.result.version == "3.0"
        assert result.total_documents == 3
        assert result.valid_documents == 2

    def test_max_depth_is_passed_to_resolver(self, petstore_30_path: str) -> None:
        with patch(
            "specval.validation.recursive.resolve_all_references",
            return_value=ResolvedDocument(document={}),
        ) as mock_resolve:
            validate_recursively(petstore_30_path, ValidationOptions(max_ref_depth=3))
        assert mock_resolve.call_args.kwargs["max_depth"] == 3


class TestValidateMultipleRecursively:
    def test_failed_source_does_not_stop_batch(
        self, petstore_30_path: str, unparseable_path: str
    ) -> None:
        results = validate_multiple_recursively([petstore_30_path, unparseable_path])
        assert len(results) == 2
        assert results[0].valid

        failed = results[1]
        assert not failed.valid
        assert len(failed.errors) == 1
        assert failed.errors[0].message.startswith("Failed to parse specification:")
        assert failed.total_documents == 0
        assert failed.version == "3.0"

    def test_order_is_preserved(
        self, swagger_20_path: str, petstore_30_path: str, missing_fields_path: str
    ) -> None:
        results = validate_multiple_recursively(
            [swagger_20_path, missing_fields_path, petstore_30_path]
        )
        assert [r.version for r in results] == ["2.0", "3.0.3", "3.0.3"]
        assert [r.valid for r in results] == [True, False, True]

    def test_default_version(self, unparseable_path: str) -> None:
        results = validate_multiple_recursively([unparseable_path], default_version="3.1")
        assert results[0].version == "3.1"

    def test_empty_batch(self) -> None:
        assert validate_multiple_recursively([]) == []


class TestAnalyzeReferences:
    def test_recurring_value_is_reported(self, self_reference_path: str) -> None:
        analysis = analyze_references(self_reference_path)
        assert analysis.total_references == 3
        assert analysis.circular_references == ["#/components/schemas/Self"]

    def test_disagrees_with_resolver(self, self_reference_path: str) -> None:
        analysis = analyze_references(self_reference_path)
        result = validate_recursively(self_reference_path)
        assert analysis.circular_references
        assert not result.circular_references

    def test_petstore(self, petstore_30_path: str) -> None:
        analysis = analyze_references(petstore_30_path)
        assert analysis.total_references == 7
        assert analysis.circular_references == ["#/components/schemas/Pet"]
        assert analysis.references[0].value == "#/components/parameters/Limit"

    def test_no_references(self, tmp_path: Path) -> None:
        source = tmp_path / "plain.json"
        source.write_text(
            '{"openapi": "3.0.3", "info": {"title": "S", "version": "1"}, "paths": {}}',
            encoding="utf-8",
        )
        analysis = analyze_references(str(source))
        assert analysis.total_references == 0
        assert analysis.references == []


def test_recurring_references_order() -> None:
    tree = {"a": {"$ref": "#/x"}, "b": {"$ref": "#/y"}, "c": [{"$ref": "#/y"}, {"$ref": "#/x"}]}
    assert recurring_references(find_references(tree)) == ["#/x", "#/y"]

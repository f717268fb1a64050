"""Tests for specval.validation.evaluator."""

from __future__ import annotations

import pytest
from jsonschema.exceptions import SchemaError

from specval.validation.evaluator import (
    ERROR_KEYWORDS,
    Violation,
    check_schema,
    compile_schema,
    partition,
)


class TestCompileSchema:
    def test_valid_instance_has_no_violations(self) -> None:
        evaluate = compile_schema({"type": "object"})
        assert evaluate({}) == []

    def test_required_at_root(self) -> None:
        violations = compile_schema({"type": "object", "required": ["a"]})({})
        assert len(violations) == 1
        violation = violations[0]
        assert violation.keyword == "required"
        assert violation.instance_path == ""
        assert violation.schema_path == "#/required"
        assert "'a' is a required property" in violation.message

    def test_instance_path_is_escaped_pointer(self) -> None:
        schema = {"properties": {"a/b": {"properties": {"c~d": {"type": "string"}}}}}
        violations = compile_schema(schema)({"a/b": {"c~d": 1}})
        assert violations[0].instance_path == "/a~1b/c~0d"
        assert violations[0].data == 1

    def test_combinator_branches_are_flattened(self) -> None:
        schema = {"oneOf": [{"type": "object", "required": ["a"]}, {"type": "string"}]}
        violations = compile_schema(schema)({})
        keywords = [v.keyword for v in violations]
        assert keywords == ["required", "type", "oneOf"]
        assert violations[0].schema_path == "#/oneOf/0/required"

    def test_format_checker_enabled(self) -> None:
        schema = {"$schema": "https://json-schema.org/draft/2020-12/schema", "format": "ipv4"}
        violations = compile_schema(schema)("999.1.1.1")
        assert [v.keyword for v in violations] == ["format"]

    def test_draft_04_selected_from_schema(self) -> None:
        schema = {
            "$schema": "http://json-schema.org/draft-04/schema#",
            "type": "number",
            "maximum": 5,
            "exclusiveMaximum": True,
        }
        assert compile_schema(schema)(5) != []
        assert compile_schema(schema)(4) == []


class TestViolationToIssue:
    def test_instance_path_preferred(self) -> None:
        issue = Violation("type", "/info", "#/properties/info/type", "bad").to_issue()
        assert issue.path == "/info"
        assert issue.schema_path == "#/properties/info/type"

    def test_falls_back_to_schema_path(self) -> None:
        issue = Violation("required", "", "#/required", "missing").to_issue()
        assert issue.path == "#/required"

    def test_falls_back_to_root(self) -> None:
        issue = Violation("required", "", "", "").to_issue()
        assert issue.path == "/"
        assert issue.message == "Validation error"


class TestPartition:
    """Only ``required`` and ``type`` failures are errors."""

    def test_error_keywords(self) -> None:
        assert ERROR_KEYWORDS == {"required", "type"}

    @pytest.mark.parametrize(
        ("keyword", "is_error"),
        [
            ("required", True),
            ("type", True),
            ("enum", False),
            ("pattern", False),
            ("additionalProperties", False),
            ("oneOf", False),
            ("format", False),
        ],
    )
    def test_severity(self, keyword: str, is_error: bool) -> None:
        errors, warnings = partition([Violation(keyword, "/x", "#/x", "msg")])
        assert len(errors) == int(is_error)
        assert len(warnings) == int(not is_error)

    def test_order_preserved(self) -> None:
        violations = [
            Violation("enum", "/a", "#", "1"),
            Violation("required", "/b", "#", "2"),
            Violation("pattern", "/c", "#", "3"),
            Violation("type", "/d", "#", "4"),
        ]
        errors, warnings = partition(violations)
        assert [i.message for i in errors] == ["2", "4"]
        assert [i.message for i in warnings] == ["1", "3"]


class TestCheckSchema:
    def test_valid_schema(self) -> None:
        check_schema({"type": "object", "required": ["a"]})

    def test_invalid_schema(self) -> None:
        with pytest.raises(SchemaError):
            check_schema({"type": 5})

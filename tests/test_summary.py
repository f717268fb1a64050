"""Tests for specval.summary."""

from __future__ import annotations

from specval.models import ValidationCounts
from specval.parser.loader import parse_spec
from specval.summary import analyze_specification, summary_rows


class TestAnalyzeSpecification:
    def test_petstore(self, petstore_30_raw: dict) -> None:
        summary = analyze_specification(petstore_30_raw, "3.0.3")
        assert summary.title == "Swagger Petstore"
        assert summary.description == "A sample pet store"
        assert summary.paths == 2
        assert summary.endpoints == 3
        assert summary.http_methods == ["GET", "POST"]
        assert summary.servers == 1
        assert summary.tags == 1
        assert summary.webhooks == 0

    def test_petstore_components(self, petstore_30_raw: dict) -> None:
        components = analyze_specification(petstore_30_raw, "3.0.3").components
        assert components.schemas == 2
        assert components.parameters == 1
        assert components.responses == 1
        assert components.request_bodies == 1
        assert components.security_schemes == 2
        assert components.total == 7

    def test_petstore_security(self, petstore_30_raw: dict) -> None:
        security = analyze_specification(petstore_30_raw, "3.0.3").security
        assert security.has_security
        assert security.security_requirements == 1
        assert security.security_schemes == 2
        assert security.oauth_flows == 1
        assert security.api_keys == 1
        assert security.http_auth == 0

    def test_petstore_references(self, petstore_30_raw: dict) -> None:
        references = analyze_specification(petstore_30_raw, "3.0.3").references
        assert references.total_references == 7
        assert references.internal_references == 7
        assert references.external_references == 0
        assert references.circular_references == 1

    def test_swagger_ignores_components(self, swagger_20_raw: dict) -> None:
        swagger_20_raw["components"] = {"schemas": {"X": {}}}
        summary = analyze_specification(swagger_20_raw, "2.0")
        assert summary.components.total == 0
        assert summary.security.http_auth == 1
        assert summary.endpoints == 1

    def test_webhooks_counted_for_31(self, webhooks_31_path: str) -> None:
        parsed = parse_spec(webhooks_31_path)
        summary = analyze_specification(parsed.spec, parsed.version)
        assert summary.webhooks == 1
        assert summary.security.http_auth == 1
        assert summary.security.has_security is False

    def test_webhooks_ignored_for_30(self, minimal_30_raw: dict) -> None:
        minimal_30_raw["webhooks"] = {"a": {}}
        assert analyze_specification(minimal_30_raw, "3.0.3").webhooks == 0

    def test_external_references(self, split_spec_path: str) -> None:
        parsed = parse_spec(split_spec_path)
        references = analyze_specification(parsed.spec, parsed.version).references
        assert references.external_references == 2
        assert references.internal_references == 0

    def test_non_operation_keys_are_not_endpoints(self, minimal_30_raw: dict) -> None:
        minimal_30_raw["paths"] = {
            "/a": {
                "parameters": [],
                "get": {"responses": {}},
                "put": {},
                "x-get": {"responses": {}},
            }
        }
        summary = analyze_specification(minimal_30_raw, "3.0.3")
        assert summary.endpoints == 1
        assert summary.http_methods == ["GET"]

    def test_malformed_sections_count_as_zero(self) -> None:
        spec = {"openapi": "3.0.3", "info": "x", "paths": [], "components": "y", "servers": {}}
        summary = analyze_specification(spec, "3.0.3")
        assert summary.title is None
        assert summary.paths == 0
        assert summary.components.total == 0
        assert summary.servers == 0

    def test_non_string_info_fields(self) -> None:
        spec = {
            "openapi": "3.0.3",
            "info": {"title": 2024, "description": ["a"], "version": "1"},
            "paths": {},
        }
        summary = analyze_specification(spec, "3.0.3")
        assert summary.title == "2024"
        assert summary.description is None

    def test_validation_counts_embedded(self, minimal_30_raw: dict) -> None:
        counts = ValidationCounts(valid=True, errors=0, warnings=2, processing_time_ms=1.5)
        assert analyze_specification(minimal_30_raw, "3.0.3", counts).validation == counts


class TestSummaryRows:
    def test_rows_are_three_strings(self, petstore_30_raw: dict) -> None:
        rows = summary_rows(analyze_specification(petstore_30_raw, "3.0.3"))
        assert all(len(row) == 3 and all(isinstance(cell, str) for cell in row) for row in rows)

    def test_selected_values(self, petstore_30_raw: dict) -> None:
        counts = ValidationCounts(valid=True, processing_time_ms=12.5)
        rows = summary_rows(analyze_specification(petstore_30_raw, "3.0.3", counts))
        lookup = {(section, field): value for section, field, value in rows}
        assert lookup[("Basic", "Title")] == "Swagger Petstore"
        assert lookup[("Paths", "HTTP methods")] == "GET, POST"
        assert lookup[("Components", "Total")] == "7"
        assert lookup[("References", "Recurring")] == "1"
        assert lookup[("Validation", "Valid")] == "Yes"
        assert lookup[("Validation", "Processing time")] == "12.50ms"

    def test_missing_title(self, minimal_30_raw: dict) -> None:
        del minimal_30_raw["info"]["title"]
        rows = summary_rows(analyze_specification(minimal_30_raw, "3.0.3"))
        assert ["Basic", "Title", "N/A"] in rows
        assert ["Paths", "HTTP methods", "-"] in rows

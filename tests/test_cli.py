"""End-to-end tests for the ``specval`` command line.

Every invocation runs inside :func:`isolated_config` so the user's real
configuration is never read or written. JSON payloads are sent to a file
with ``-o`` so they can be parsed without the diagnostics on stderr.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from specval import __version__
from specval.app import app, register_commands
from specval.exit_codes import (
    EXIT_INVALID_USAGE,
    EXIT_SPEC_PARSE_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_FAILED,
)


@pytest.fixture(autouse=True)
def _commands() -> None:
    register_commands()


def _invoke(runner, *args: str, input: str | None = None):
    return runner.invoke(app, ["--no-color", *args], input=input)


def _json_file(path: Path) -> Any:
    return json.loads(path.read_text(encoding="utf-8"))


# ---------------------------------------------------------------------------
# Root callback
# ---------------------------------------------------------------------------


class TestRoot:
    def test_version(self, cli_runner, isolated_config: Path) -> None:
        result = cli_runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert f"specval {__version__}" in result.output

    def test_no_args_shows_help(self, cli_runner, isolated_config: Path) -> None:
        result = cli_runner.invoke(app, [])
        assert "validate" in result.output
        assert "batch" in result.output

    def test_register_commands_is_idempotent(self) -> None:
        before = len(app.registered_commands)
        register_commands()
        assert len(app.registered_commands) == before

    def test_broken_project_config_only_warns(self, cli_runner, isolated_config: Path) -> None:
        (isolated_config / "specval.json").write_text("[1]", encoding="utf-8")
        result = _invoke(cli_runner, "inspect", "versions")
        assert result.exit_code == EXIT_SUCCESS
        assert "Warning: Invalid project config" in result.output


# ---------------------------------------------------------------------------
# validate
# ---------------------------------------------------------------------------


class TestValidateCommand:
    def test_valid_document(self, cli_runner, isolated_config: Path, petstore_30_path: str) -> None:
        result = _invoke(cli_runner, "validate", petstore_30_path)
        assert result.exit_code == EXIT_SUCCESS, result.output
        assert "valid (OpenAPI 3.0.3)" in result.output
        assert "Errors: 0, warnings: 0" in result.output

    def test_invalid_document(
        self, cli_runner, isolated_config: Path, missing_fields_path: str
    ) -> None:
        result = _invoke(cli_runner, "validate", missing_fields_path)
        assert result.exit_code == EXIT_VALIDATION_FAILED
        assert "Severity\tPath\tMessage" in result.output
        assert "is a required property" in result.output
        assert "Error: Validation failed" in result.output
        assert "--recursive" not in result.output

    def test_invalid_document_with_references_suggests_recursive(
        self, cli_runner, isolated_config: Path
    ) -> None:
        source = isolated_config / "untitled.json"
        source.write_text(
            json.dumps(
                {
                    "openapi": "3.0.3",
                    "info": {"version": "1"},
                    "paths": {
                        "/a": {"get": {"responses": {"200": {"$ref": "#/components/responses/Ok"}}}}
                    },
                    "components": {"responses": {"Ok": {"description": "ok"}}},
                }
            ),
            encoding="utf-8",
        )
        result = _invoke(cli_runner, "validate", str(source))
        assert result.exit_code == EXIT_VALIDATION_FAILED
        assert "→ Run with --recursive to validate referenced documents as well" in result.output

    def test_unparseable_document(
        self, cli_runner, isolated_config: Path, unparseable_path: str
    ) -> None:
        result = _invoke(cli_runner, "validate", unparseable_path)
        assert result.exit_code == EXIT_SPEC_PARSE_ERROR
        assert "Failed to parse YAML" in result.output

    def test_missing_file(self, cli_runner, isolated_config: Path) -> None:
        result = _invoke(cli_runner, "validate", str(isolated_config / "nope.yaml"))
        assert result.exit_code == EXIT_SPEC_PARSE_ERROR

    def test_strict_flag(self, cli_runner, isolated_config: Path, swagger_20_raw: dict) -> None:
        del swagger_20_raw["host"]
        source = isolated_config / "nohost.json"
        source.write_text(json.dumps(swagger_20_raw), encoding="utf-8")

        assert _invoke(cli_runner, "validate", str(source)).exit_code == EXIT_SUCCESS
        strict = _invoke(cli_runner, "validate", str(source), "--strict")
        assert strict.exit_code == EXIT_VALIDATION_FAILED
        assert 'Either "host" or "servers"' in strict.output

    def test_strict_from_project_config(
        self, cli_runner, isolated_config: Path, swagger_20_raw: dict
    ) -> None:
        del swagger_20_raw["host"]
        source = isolated_config / "nohost.json"
        source.write_text(json.dumps(swagger_20_raw), encoding="utf-8")
        (isolated_config / "specval.json").write_text(
            '{"validation": {"strict": true}}', encoding="utf-8"
        )

        assert _invoke(cli_runner, "validate", str(source)).exit_code == EXIT_VALIDATION_FAILED
        relaxed = _invoke(cli_runner, "validate", str(source), "--no-strict")
        assert relaxed.exit_code == EXIT_SUCCESS

    def test_references_flag(self, cli_runner, isolated_config: Path, split_spec_path: str) -> None:
        result = _invoke(cli_runner, "validate", split_spec_path, "--references")
        assert result.exit_code == EXIT_VALIDATION_FAILED
        assert "Broken reference: pet.yaml" in result.output

    def test_recursive(self, cli_runner, isolated_config: Path, split_spec_path: str) -> None:
        result = _invoke(cli_runner, "validate", split_spec_path, "--recursive")
        assert result.exit_code == EXIT_SUCCESS, result.output
        assert "Documents: 3/3 valid" in result.output
        assert "Reference\tStatus\tErrors" in result.output
        assert "responses.json#/Error\tvalid\t0" in result.output

    def test_max_depth_must_be_positive(
        self, cli_runner, isolated_config: Path, petstore_30_path: str
    ) -> None:
        result = _invoke(cli_runner, "validate", petstore_30_path, "--max-depth", "0")
        assert result.exit_code == EXIT_INVALID_USAGE

    def test_json_output(self, cli_runner, isolated_config: Path, missing_fields_path: str) -> None:
        out = isolated_config / "result.json"
        result = _invoke(cli_runner, "--json", "-o", str(out), "validate", missing_fields_path)
        assert result.exit_code == EXIT_VALIDATION_FAILED

        payload = _json_file(out)
        assert payload["source"] == missing_fields_path
        assert payload["valid"] is False
        assert payload["version"] == "3.0.3"
        assert "spec" not in payload
        assert all("schemaPath" in issue for issue in payload["errors"])

    def test_json_output_recursive(
        self, cli_runner, isolated_config: Path, petstore_30_path: str
    ) -> None:
        out = isolated_config / "result.json"
        result = _invoke(
            cli_runner, "--json", "-o", str(out), "validate", petstore_30_path, "--recursive"
        )
        assert result.exit_code == EXIT_SUCCESS, result.output

        payload = _json_file(out)
        assert payload["total_documents"] == 8
        assert payload["valid_documents"] == 8
        assert len(payload["partial_validations"]) == 7
        assert "spec" not in payload["partial_validations"][0]["result"]

    def test_stdin(self, cli_runner, isolated_config: Path, minimal_30_raw: dict) -> None:
        result = _invoke(cli_runner, "validate", "-", input=json.dumps(minimal_30_raw))
        assert result.exit_code == EXIT_SUCCESS, result.output


# ---------------------------------------------------------------------------
# batch
# ---------------------------------------------------------------------------


class TestBatchCommand:
    def test_all_valid(
        self, cli_runner, isolated_config: Path, petstore_30_path: str, swagger_20_path: str
    ) -> None:
        result = _invoke(cli_runner, "batch", petstore_30_path, swagger_20_path)
        assert result.exit_code == EXIT_SUCCESS, result.output
        assert "Source\tValid\tVersion\tErrors\tWarnings" in result.output
        assert f"{swagger_20_path}\tyes\t2.0\t0\t0" in result.output
        assert "All 2 documents are valid" in result.output

    def test_failure_does_not_stop_batch(
        self, cli_runner, isolated_config: Path, unparseable_path: str, petstore_30_path: str
    ) -> None:
        out = isolated_config / "batch.json"
        result = _invoke(
            cli_runner, "--json", "-o", str(out), "batch", unparseable_path, petstore_30_path
        )
        assert result.exit_code == EXIT_VALIDATION_FAILED
        assert "1 of 2 documents are invalid" in result.output

        payload = _json_file(out)
        assert [item["source"] for item in payload] == [unparseable_path, petstore_30_path]
        assert payload[0]["errors"][0]["message"].startswith("Failed to parse specification:")
        assert payload[1]["valid"] is True

    def test_recursive_batch(
        self, cli_runner, isolated_config: Path, unparseable_path: str, split_spec_path: str
    ) -> None:
        out = isolated_config / "batch.json"
        result = _invoke(
            cli_runner,
            "--json",
            "-o",
            str(out),
            "batch",
            split_spec_path,
            unparseable_path,
            "--recursive",
        )
        assert result.exit_code == EXIT_VALIDATION_FAILED

        payload = _json_file(out)
        assert payload[0]["total_documents"] == 3
        assert payload[1]["total_documents"] == 0


# ---------------------------------------------------------------------------
# report
# ---------------------------------------------------------------------------


class TestReportCommand:
    def test_json_to_stdout(self, cli_runner, isolated_config: Path, petstore_30_path: str) -> None:
        result = _invoke(cli_runner, "report", petstore_30_path)
        assert result.exit_code == EXIT_SUCCESS, result.output
        assert '"errorCount": 0' in result.output

    def test_markdown_file(
        self, cli_runner, isolated_config: Path, missing_fields_path: str
    ) -> None:
        target = isolated_config / "reports" / "report.md"
        result = _invoke(
            cli_runner,
            "report",
            missing_fields_path,
            "--format",
            "MARKDOWN",
            "--report-file",
            str(target),
            "--metadata",
        )
        assert result.exit_code == EXIT_SUCCESS, result.output
        assert "Report written to" in result.output
        content = target.read_text(encoding="utf-8")
        assert "**Status:** ❌ Invalid" in content
        assert "## Metadata" in content

    def test_html_with_warnings(
        self, cli_runner, isolated_config: Path, minimal_30_raw: dict
    ) -> None:
        source = isolated_config / "minimal.json"
        source.write_text(json.dumps(minimal_30_raw), encoding="utf-8")
        target = isolated_config / "report.html"
        result = _invoke(
            cli_runner,
            "report",
            str(source),
            "-f",
            "html",
            "--report-file",
            str(target),
            "-w",
            "--strict",
        )
        assert result.exit_code == EXIT_SUCCESS, result.output
        content = target.read_text(encoding="utf-8")
        assert "Warnings (1)" in content
        assert "No servers specified." in content

    def test_default_format_from_config(
        self, cli_runner, isolated_config: Path, petstore_30_path: str
    ) -> None:
        (isolated_config / "specval.json").write_text(
            '{"report_formats": ["yaml"]}', encoding="utf-8"
        )
        result = _invoke(cli_runner, "report", petstore_30_path)
        assert result.exit_code == EXIT_SUCCESS, result.output
        assert "errorCount: 0" in result.output

    def test_unknown_format(self, cli_runner, isolated_config: Path, petstore_30_path: str) -> None:
        result = _invoke(cli_runner, "report", petstore_30_path, "-f", "pdf")
        assert result.exit_code == EXIT_INVALID_USAGE


# ---------------------------------------------------------------------------
# inspect
# ---------------------------------------------------------------------------


class TestInspectCommands:
    def test_spec(self, cli_runner, isolated_config: Path, petstore_30_path: str) -> None:
        result = _invoke(cli_runner, "inspect", "spec", petstore_30_path)
        assert result.exit_code == EXIT_SUCCESS, result.output
        assert "title\tSwagger Petstore" in result.output
        assert "family\t3.0" in result.output
        assert "schemas\t2" in result.output

    def test_spec_swagger_json(self, cli_runner, isolated_config: Path, swagger_20_path: str) -> None:
        out = isolated_config / "spec.json"
        result = _invoke(cli_runner, "--json", "-o", str(out), "inspect", "spec", swagger_20_path)
        assert result.exit_code == EXIT_SUCCESS, result.output
        payload = _json_file(out)
        assert payload["version"] == "2.0"
        assert payload["definitions"] == 1
        assert "contact" not in payload

    def test_spec_parse_error(self, cli_runner, isolated_config: Path, unparseable_path: str) -> None:
        result = _invoke(cli_runner, "inspect", "spec", unparseable_path)
        assert result.exit_code == EXIT_SPEC_PARSE_ERROR

    def test_refs_table(self, cli_runner, isolated_config: Path, self_reference_path: str) -> None:
        result = _invoke(cli_runner, "inspect", "refs", self_reference_path)
        assert result.exit_code == EXIT_SUCCESS, result.output
        assert "Location\tReference\tRecurring" in result.output
        assert "#/components/schemas/Self\tyes" in result.output

    def test_refs_json(self, cli_runner, isolated_config: Path, petstore_30_path: str) -> None:
        out = isolated_config / "refs.json"
        result = _invoke(cli_runner, "--json", "-o", str(out), "inspect", "refs", petstore_30_path)
        assert result.exit_code == EXIT_SUCCESS, result.output
        payload = _json_file(out)
        assert payload["total_references"] == 7
        assert payload["circular_references"] == ["#/components/schemas/Pet"]

    def test_refs_none(self, cli_runner, isolated_config: Path, minimal_30_raw: dict) -> None:
        source = isolated_config / "minimal.json"
        source.write_text(json.dumps(minimal_30_raw), encoding="utf-8")
        result = _invoke(cli_runner, "inspect", "refs", str(source))
        assert result.exit_code == EXIT_SUCCESS
        assert "No references found." in result.output

    def test_summary(self, cli_runner, isolated_config: Path, petstore_30_path: str) -> None:
        result = _invoke(cli_runner, "inspect", "summary", petstore_30_path)
        assert result.exit_code == EXIT_SUCCESS, result.output
        assert "Paths\tEndpoints\t3" in result.output
        assert "Validation\tValid\tYes" in result.output

    def test_summary_of_numeric_title(self, cli_runner, isolated_config: Path) -> None:
        source = isolated_config / "numeric.yaml"
        source.write_text(
            "openapi: 3.0.3\ninfo:\n  title: 2024\n  version: '1'\npaths: {}\n",
            encoding="utf-8",
        )
        result = _invoke(cli_runner, "inspect", "summary", str(source))
        assert result.exit_code == EXIT_SUCCESS, result.output
        assert "Validation\tValid\tNo" in result.output

    def test_summary_json(self, cli_runner, isolated_config: Path, webhooks_31_path: str) -> None:
        out = isolated_config / "summary.json"
        result = _invoke(
            cli_runner, "--json", "-o", str(out), "inspect", "summary", webhooks_31_path
        )
        assert result.exit_code == EXIT_SUCCESS, result.output
        payload = _json_file(out)
        assert payload["webhooks"] == 1
        assert payload["validation"]["valid"] is True
        assert payload["validation"]["processing_time_ms"] >= 0

    def test_versions(self, cli_runner, isolated_config: Path) -> None:
        result = _invoke(cli_runner, "inspect", "versions")
        assert result.exit_code == EXIT_SUCCESS
        assert "3.0.3\t3.0" in result.output
        assert "3.2.0\t3.2" in result.output


# ---------------------------------------------------------------------------
# config
# ---------------------------------------------------------------------------


class TestConfigCommands:
    def _config_file(self, root: Path) -> Path:
        return root / "config" / "specval" / "config.json"

    def test_show_defaults(self, cli_runner, isolated_config: Path) -> None:
        out = isolated_config / "config-show.json"
        result = _invoke(cli_runner, "--json", "-o", str(out), "config", "show")
        assert result.exit_code == EXIT_SUCCESS, result.output
        assert _json_file(out)["validation"]["max_ref_depth"] == 10

    def test_set_bool_and_int(self, cli_runner, isolated_config: Path) -> None:
        assert _invoke(cli_runner, "config", "set", "validation.strict", "true").exit_code == 0
        result = _invoke(cli_runner, "config", "set", "validation.max_ref_depth", "4")
        assert result.exit_code == EXIT_SUCCESS
        assert "Set validation.max_ref_depth = 4" in result.output

        saved = _json_file(self._config_file(isolated_config))
        assert saved["validation"]["strict"] is True
        assert saved["validation"]["max_ref_depth"] == 4

    def test_set_list(self, cli_runner, isolated_config: Path) -> None:
        result = _invoke(cli_runner, "config", "set", "report_formats", '["html", "markdown"]')
        assert result.exit_code == EXIT_SUCCESS, result.output
        saved = _json_file(self._config_file(isolated_config))
        assert saved["report_formats"] == ["html", "markdown"]

    @pytest.mark.parametrize(
        ("key", "value"),
        [
            ("validation.nope", "1"),
            ("nope.strict", "1"),
            ("validation.max_ref_depth", "deep"),
            ("validation.max_ref_depth", "0"),
            ("http.timeout", "soon"),
            ("report_formats", "not-json"),
            ("output.format", "xml"),
        ],
    )
    def test_set_rejects(self, cli_runner, isolated_config: Path, key: str, value: str) -> None:
        result = _invoke(cli_runner, "config", "set", key, value)
        assert result.exit_code == EXIT_INVALID_USAGE
        assert not self._config_file(isolated_config).exists()

    def test_reset_with_force(self, cli_runner, isolated_config: Path) -> None:
        _invoke(cli_runner, "config", "set", "validation.strict", "true")
        result = _invoke(cli_runner, "--force", "config", "reset")
        assert result.exit_code == EXIT_SUCCESS
        assert _json_file(self._config_file(isolated_config))["validation"]["strict"] is False

    def test_reset_declined(self, cli_runner, isolated_config: Path) -> None:
        _invoke(cli_runner, "config", "set", "validation.strict", "true")
        result = _invoke(cli_runner, "config", "reset", input="n\n")
        assert result.exit_code == EXIT_SUCCESS
        assert "Cancelled." in result.output
        assert _json_file(self._config_file(isolated_config))["validation"]["strict"] is True

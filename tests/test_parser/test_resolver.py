"""Tests for specval.parser.resolver."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any
from unittest.mock import patch

import httpx
import pytest

from specval.exceptions import DepthExceededError, ResolutionError
from specval.parser.resolver import (
    ResolutionContext,
    local_reference_exists,
    resolve_all_references,
    resolve_pointer,
    resolve_reference,
)


def _context(document: Any, base_path: str = "spec.json", **kwargs: Any) -> ResolutionContext:
    return ResolutionContext(base_path=base_path, base_document=document, **kwargs)


def _json_response(url: str, payload: Any, status_code: int = 200) -> httpx.Response:
    return httpx.Response(
        status_code=status_code, json=payload, request=httpx.Request("GET", url)
    )


# ---------------------------------------------------------------------------
# resolve_pointer
# ---------------------------------------------------------------------------


class TestResolvePointer:
    DOC = {
        "components": {"schemas": {"Pet": {"type": "object"}}},
        "paths": {"/pets/{id}": {"get": {"parameters": [{"name": "id"}]}}},
        "a~b": 1,
    }

    def test_empty_pointer_is_whole_document(self) -> None:
        assert resolve_pointer(self.DOC, "") is self.DOC
        assert resolve_pointer(self.DOC, "#") is self.DOC

    def test_nested_key(self) -> None:
        assert resolve_pointer(self.DOC, "#/components/schemas/Pet") == {"type": "object"}

    def test_escaped_slash_and_tilde(self) -> None:
        assert resolve_pointer(self.DOC, "/paths/~1pets~1{id}/get/parameters/0/name") == "id"
        assert resolve_pointer(self.DOC, "/a~0b") == 1

    def test_missing_key(self) -> None:
        with pytest.raises(ResolutionError, match="key 'Dog' missing"):
            resolve_pointer(self.DOC, "#/components/schemas/Dog")

    def test_bad_array_index(self) -> None:
        with pytest.raises(ResolutionError, match="invalid array index"):
            resolve_pointer(self.DOC, "/paths/~1pets~1{id}/get/parameters/5")

    @pytest.mark.parametrize("segment", ["-1", "+0", " 0", "00", "01", "0x0", "-"])
    def test_non_canonical_array_index(self, segment: str) -> None:
        with pytest.raises(ResolutionError, match="invalid array index"):
            resolve_pointer({"a": [1, 2, 3]}, f"#/a/{segment}")

    def test_canonical_indices(self) -> None:
        doc = {"a": [1, 2, 3]}
        assert resolve_pointer(doc, "#/a/0") == 1
        assert resolve_pointer(doc, "#/a/2") == 3

    def test_cannot_descend_into_scalar(self) -> None:
        with pytest.raises(ResolutionError, match="cannot navigate into int"):
            resolve_pointer(self.DOC, "/a~0b/deeper")

    def test_relative_pointer_rejected(self) -> None:
        with pytest.raises(ResolutionError, match="Invalid JSON pointer"):
            resolve_pointer(self.DOC, "components")


# ---------------------------------------------------------------------------
# resolve_reference
# ---------------------------------------------------------------------------


class TestResolveInternal:
    def test_resolves_internal_pointer(self, petstore_30_raw: dict) -> None:
        resolved = resolve_reference("#/components/schemas/Pet", _context(petstore_30_raw))
        assert resolved.path == "#/components/schemas/Pet"
        assert resolved.content["required"] == ["id", "name"]
        assert resolved.is_circular is False
        assert resolved.version is None

    def test_missing_target_wrapped(self) -> None:
        with pytest.raises(ResolutionError, match="Failed to resolve reference '#/does/not/exist'"):
            resolve_reference("#/does/not/exist", _context({"paths": {}}))

    def test_visited_released_after_failure(self) -> None:
        context = _context({})
        with pytest.raises(ResolutionError):
            resolve_reference("#/missing", context)
        assert context.visited == set()


class TestCycleDetection:
    """Cycles are detected only along the active resolution chain."""

    def test_same_reference_twice_is_not_circular(self) -> None:
        document = {"components": {"schemas": {"X": {"type": "string"}}}}
        context = _context(document)
        first = resolve_reference("#/components/schemas/X", context)
        second = resolve_reference("#/components/schemas/X", context)
        assert first.is_circular is False
        assert second.is_circular is False
        assert second.content == {"type": "string"}
        assert context.visited == set()

    def test_reference_already_on_chain_is_circular(self) -> None:
        context = _context({"components": {"schemas": {"X": {"type": "string"}}}})
        with context.visiting("#/components/schemas/X"):
            resolved = resolve_reference("#/components/schemas/X", context)
        assert resolved.is_circular is True
        assert resolved.content is None
        assert context.visited == set()


class TestDepthLimit:
    def test_at_max_depth_raises(self) -> None:
        context = _context({"a": 1}, max_depth=2, current_depth=2)
        with pytest.raises(DepthExceededError, match=r"Maximum reference depth \(2\) exceeded"):
            resolve_reference("#/a", context)

    def test_depth_error_is_a_resolution_error(self) -> None:
        context = _context({"a": 1}, max_depth=1, current_depth=1)
        with pytest.raises(ResolutionError):
            resolve_reference("#/a", context)

    def test_depth_is_not_incremented(self) -> None:
        context = _context({"a": 1}, max_depth=1)
        resolved = resolve_reference("#/a", context)
        assert resolved.depth == 0
        assert context.current_depth == 0


class TestResolveFiles:
    def test_relative_file(self, tmp_path: Path) -> None:
        (tmp_path / "pet.yaml").write_text("type: object\n", encoding="utf-8")
        root = tmp_path / "openapi.yaml"
        resolved = resolve_reference("pet.yaml", _context({}, base_path=str(root)))
        assert resolved.content == {"type": "object"}
        assert resolved.path == "pet.yaml"

    def test_relative_file_with_fragment(self, tmp_path: Path) -> None:
        (tmp_path / "common.json").write_text(
            json.dumps({"schemas": {"Id": {"type": "integer"}}}), encoding="utf-8"
        )
        resolved = resolve_reference(
            "common.json#/schemas/Id", _context({}, base_path=str(tmp_path / "root.json"))
        )
        assert resolved.content == {"type": "integer"}

    def test_subdirectory(self, tmp_path: Path) -> None:
        (tmp_path / "schemas").mkdir()
        (tmp_path / "schemas" / "pet.json").write_text('{"type": "object"}', encoding="utf-8")
        resolved = resolve_reference(
            "schemas/pet.json", _context({}, base_path=str(tmp_path / "root.json"))
        )
        assert resolved.content == {"type": "object"}

    def test_referenced_document_version_detected(self, tmp_path: Path) -> None:
        (tmp_path / "other.json").write_text(
            json.dumps({"openapi": "3.1.0", "info": {}}), encoding="utf-8"
        )
        resolved = resolve_reference(
            "other.json", _context({}, base_path=str(tmp_path / "root.json"))
        )
        assert resolved.version == "3.1"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ResolutionError, match="Failed to resolve reference 'nope.yaml'"):
            resolve_reference("nope.yaml", _context({}, base_path=str(tmp_path / "root.yaml")))

    def test_stdin_base_uses_cwd(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "pet.json").write_text('{"type": "string"}', encoding="utf-8")
        monkeypatch.chdir(tmp_path)
        resolved = resolve_reference("pet.json", _context({}, base_path="-"))
        assert resolved.content == {"type": "string"}


class TestResolveRemote:
    def test_absolute_url(self) -> None:
        url = "https://example.com/schemas/pet.json"
        with patch(
            "specval.parser.resolver.httpx.get",
            return_value=_json_response(url, {"type": "object"}),
        ) as mock_get:
            resolved = resolve_reference(url, _context({}, timeout=3.0))
        assert resolved.content == {"type": "object"}
        mock_get.assert_called_once_with(url, timeout=3.0, follow_redirects=True)

    def test_url_with_fragment(self) -> None:
        url = "https://example.com/common.json"
        payload = {"definitions": {"Id": {"type": "integer"}}}
        with patch(
            "specval.parser.resolver.httpx.get", return_value=_json_response(url, payload)
        ):
            resolved = resolve_reference(f"{url}#/definitions/Id", _context({}))
        assert resolved.content == {"type": "integer"}

    def test_relative_to_remote_base(self) -> None:
        expected = "https://example.com/api/schemas/pet.json"
        with patch(
            "specval.parser.resolver.httpx.get",
            return_value=_json_response(expected, {"type": "object"}),
        ) as mock_get:
            resolve_reference(
                "schemas/pet.json", _context({}, base_path="https://example.com/api/openapi.json")
            )
        assert mock_get.call_args.args[0] == expected

    def test_http_error(self) -> None:
        url = "https://example.com/missing.json"
        with patch(
            "specval.parser.resolver.httpx.get",
            return_value=_json_response(url, {}, status_code=404),
        ):
            with pytest.raises(ResolutionError, match="HTTP 404"):
                resolve_reference(url, _context({}))

    def test_timeout_becomes_resolution_error(self) -> None:
        url = "https://example.com/slow.json"
        with patch(
            "specval.parser.resolver.httpx.get",
            side_effect=httpx.ReadTimeout("timed out", request=httpx.Request("GET", url)),
        ):
            with pytest.raises(ResolutionError, match="Failed to fetch external reference"):
                resolve_reference(url, _context({}))

    def test_non_json_body(self) -> None:
        url = "https://example.com/schema.yaml"
        response = httpx.Response(
            status_code=200, text="type: object", request=httpx.Request("GET", url)
        )
        with patch("specval.parser.resolver.httpx.get", return_value=response):
            with pytest.raises(ResolutionError, match="not valid JSON"):
                resolve_reference(url, _context({}))


# ---------------------------------------------------------------------------
# resolve_all_references
# ---------------------------------------------------------------------------


class TestResolveAllReferences:
    def test_resolves_every_reference(self, petstore_30_raw: dict, petstore_30_path: str) -> None:
        outcome = resolve_all_references(petstore_30_raw, petstore_30_path)
        assert len(outcome.resolved) == 7
        assert outcome.circular == []
        assert outcome.failed == []

    def test_failures_are_skipped(self) -> None:
        document = {
            "a": {"$ref": "#/does/not/exist"},
            "b": {"$ref": "#/c"},
            "c": {"type": "string"},
        }
        outcome = resolve_all_references(document, "spec.json")
        assert [r.path for r in outcome.resolved] == ["#/c"]
        assert [r.value for r in outcome.failed] == ["#/does/not/exist"]

    def test_repeated_self_reference_is_not_circular(self, self_reference_path: str) -> None:
        document = json.loads(Path(self_reference_path).read_text(encoding="utf-8"))
        outcome = resolve_all_references(document, self_reference_path)
        assert len(outcome.resolved) == 3
        assert all(not r.is_circular for r in outcome.resolved)
        assert outcome.circular == []

    def test_external_files(self, split_spec_path: str) -> None:
        from specval.parser.loader import parse_spec

        parsed = parse_spec(split_spec_path)
        outcome = resolve_all_references(parsed.spec, split_spec_path)
        assert [r.path for r in outcome.resolved] == ["pet.yaml", "responses.json#/Error"]
        assert outcome.resolved[1].content["description"] == "Unexpected error"


class TestLocalReferenceExists:
    def test_existing(self, petstore_30_raw: dict) -> None:
        assert local_reference_exists(petstore_30_raw, "#/components/schemas/Pet")

    def test_missing(self, petstore_30_raw: dict) -> None:
        assert not local_reference_exists(petstore_30_raw, "#/does/not/exist")

    def test_external_never_exists(self, petstore_30_raw: dict) -> None:
        assert not local_reference_exists(petstore_30_raw, "pet.yaml")

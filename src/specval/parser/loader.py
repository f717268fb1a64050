"""Load API description documents from a URL, local file, or stdin.

This module handles all I/O for fetching raw documents and turning them into
Python objects, plus the version detection every later stage depends on.

The public functions are:

* :func:`load_source` -- Read the raw text of a document.
* :func:`parse_content` -- Parse text as JSON or YAML.
* :func:`detect_version` -- Return the declared version of a root document,
  rejecting anything that is neither Swagger 2.0 nor OpenAPI 3.0/3.1/3.2.
* :func:`detect_document_version` -- Lenient variant used on referenced
  documents; returns the schema bucket or ``None``.
* :func:`extract_metadata` -- Lift the *Info Object* into
  :class:`~specval.models.SpecMetadata`.
* :func:`parse_spec` -- All of the above in one call, returning a
  :class:`~specval.models.ParsedSpec`.
* :func:`validate_basic_structure` -- Quick presence check of the top-level
  fields a document cannot do without.
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any, Optional

import httpx
import yaml

from specval.exceptions import SpecParseError, UnsupportedVersionError
from specval.models import ParsedSpec, SpecFamily, SpecMetadata

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0
"""Seconds to wait for a remote document before giving up."""


def is_url(source: str) -> bool:
    """Return True if *source* is an ``http://`` or ``https://`` URL."""
    return source.startswith(("http://", "https://"))


def load_source(source: str, timeout: float = DEFAULT_TIMEOUT) -> str:
    """Read the raw text of a document from URL, file path, or stdin ('-').

    Args:
        source: A URL (http/https), file path, or '-' for stdin.
        timeout: Request timeout in seconds for remote documents.

    Returns:
        The document text.

    Raises:
        SpecParseError: If the source cannot be read or is empty.
    """
    if source == "-":
        return _read_stdin()
    if is_url(source):
        return _fetch_url(source, timeout)
    return _read_file(source)


def _read_stdin() -> str:
    try:
        content = sys.stdin.read()
    except OSError as exc:
        raise SpecParseError(f"Failed to read from stdin: {exc}") from exc

    if not content.strip():
        raise SpecParseError("No input received from stdin")
    return content


def _fetch_url(url: str, timeout: float) -> str:
    logger.debug("Fetching remote document %s", url)
    try:
        response = httpx.get(url, timeout=timeout, follow_redirects=True)
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        raise SpecParseError(
            f"HTTP {exc.response.status_code} fetching specification from {url}"
        ) from exc
    except httpx.RequestError as exc:
        raise SpecParseError(f"Failed to fetch specification from {url}: {exc}") from exc

    logger.debug("Fetched %d characters from %s", len(response.text), url)
    return response.text


def _read_file(path: str) -> str:
    file_path = Path(path)
    if not file_path.is_file():
        raise SpecParseError(f"Specification file not found: {path}")

    try:
        content = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SpecParseError(f"Failed to read specification file {path}: {exc}") from exc

    if not content.strip():
        raise SpecParseError(f"Specification file is empty: {path}")

    logger.debug("Read %d characters from %s", len(content), file_path.resolve())
    return content


def parse_content(content: str, hint: str = "") -> Any:
    """Parse document text as JSON or YAML.

    Text whose first non-blank character is ``{`` or ``[`` is parsed as JSON,
    everything else as YAML. A ``json`` hint forces JSON parsing.

    Args:
        content: The raw document text.
        hint: Optional format hint (``"json"`` or ``"yaml"``), usually derived
            from a file extension.

    Returns:
        The parsed value. Usually a dict, but callers that need a mapping
        must check.

    Raises:
        SpecParseError: If the text is not valid in the chosen format.
    """
    stripped = content.lstrip()
    if hint == "json" or stripped.startswith(("{", "[")):
        logger.debug("Parsing content as JSON")
        try:
            return json.loads(content)
        except json.JSONDecodeError as exc:
            raise SpecParseError(f"Invalid JSON: {exc}") from exc

    logger.debug("Parsing content as YAML")
    try:
        return _stringify_keys(yaml.safe_load(content))
    except yaml.YAMLError as exc:
        raise SpecParseError(f"Failed to parse YAML: {exc}") from exc


def _stringify_keys(value: Any) -> Any:
    """Turn YAML's non-string mapping keys (``200:``, ``true:``) into strings."""
    if isinstance(value, dict):
        return {
            (key if isinstance(key, str) else _yaml_key(key)): _stringify_keys(item)
            for key, item in value.items()
        }
    if isinstance(value, list):
        return [_stringify_keys(item) for item in value]
    return value


def _yaml_key(key: Any) -> str:
    if isinstance(key, bool):
        return "true" if key else "false"
    if key is None:
        return "null"
    return str(key)


def format_hint(source: str) -> str:
    """Derive a :func:`parse_content` hint from a path or URL suffix."""
    suffix = Path(source.split("?", 1)[0]).suffix.lower()
    if suffix == ".json":
        return "json"
    if suffix in (".yaml", ".yml"):
        return "yaml"
    return ""


def detect_version(spec: dict[str, Any]) -> str:
    """Return the version string a root document declares.

    An ``openapi`` field wins over ``swagger``. OpenAPI versions must begin
    with ``3.0``, ``3.1`` or ``3.2`` and are returned verbatim; Swagger must
    be exactly ``"2.0"``.

    Raises:
        UnsupportedVersionError: If the version is missing or unsupported.
    """
    openapi = spec.get("openapi")
    if openapi:
        version = str(openapi)
        try:
            family = SpecFamily.from_version(version)
        except UnsupportedVersionError:
            logger.error("Unsupported OpenAPI version: %s", version)
            raise
        if family is not SpecFamily.SWAGGER_2_0:
            logger.debug("Detected OpenAPI %s.x (%s)", family.value, version)
            return version
        raise UnsupportedVersionError(f"Unsupported OpenAPI version: {version}")

    if str(spec.get("swagger")) == "2.0":
        logger.debug("Detected Swagger 2.0")
        return "2.0"

    raise UnsupportedVersionError(
        'Unable to detect OpenAPI version. Specification must have "openapi" '
        'or "swagger" field.'
    )


def detect_document_version(doc: Any) -> Optional[str]:
    """Return the schema bucket of a referenced document, or None.

    Unlike :func:`detect_version` this never raises: fragments usually carry
    no version at all and simply inherit the root's.
    """
    if not isinstance(doc, dict):
        return None
    openapi = doc.get("openapi")
    if openapi:
        version = str(openapi)
        for family in (SpecFamily.OPENAPI_3_0, SpecFamily.OPENAPI_3_1, SpecFamily.OPENAPI_3_2):
            if version.startswith(family.value):
                return family.value
    if str(doc.get("swagger")) == "2.0":
        return SpecFamily.SWAGGER_2_0.value
    return None


def _text(value: Any) -> Optional[str]:
    if value is None or isinstance(value, (dict, list)):
        return None
    return str(value)


def extract_metadata(spec: dict[str, Any]) -> SpecMetadata:
    """Lift title, version, description, contact and license from ``info``.

    Missing or malformed fields come back as ``None``; the schema validator
    is what reports them.
    """
    info = spec.get("info")
    if not isinstance(info, dict):
        return SpecMetadata()

    contact = info.get("contact")
    license_ = info.get("license")
    return SpecMetadata(
        title=_text(info.get("title")),
        version=_text(info.get("version")),
        description=_text(info.get("description")),
        contact=contact if isinstance(contact, dict) else None,
        license=license_ if isinstance(license_, dict) else None,
    )


def parse_spec(source: str, timeout: float = DEFAULT_TIMEOUT) -> ParsedSpec:
    """Load, parse and version-detect a root document.

    Args:
        source: A URL, file path, or '-' for stdin.
        timeout: Request timeout in seconds for remote documents.

    Returns:
        The :class:`~specval.models.ParsedSpec`.

    Raises:
        SpecParseError: If the document cannot be read, parsed, is not a
            mapping, or declares no supported version.

    Example::

        parsed = parse_spec("petstore.yaml")
        parsed.version          # '3.0.3'
        parsed.metadata.title   # 'Swagger Petstore'
    """
    logger.debug("Parsing specification from %s", source)
    content = load_source(source, timeout=timeout)
    spec = parse_content(content, hint=format_hint(source))

    if not isinstance(spec, dict):
        kind = "empty document" if spec is None else type(spec).__name__
        raise SpecParseError(f"Specification must be a JSON/YAML object (got {kind})")

    version = detect_version(spec)
    metadata = extract_metadata(spec)
    paths = spec.get("paths")
    logger.debug(
        "Parsed %s: version=%s title=%r paths=%d",
        source,
        version,
        metadata.title,
        len(paths) if isinstance(paths, dict) else 0,
    )
    return ParsedSpec(spec=spec, version=version, source=source, metadata=metadata)


def validate_basic_structure(spec: dict[str, Any], version: str) -> bool:
    """Check that the version field, ``info`` and ``paths`` are all present.

    Swagger 2.0 documents need ``swagger``; OpenAPI 3.x documents need
    ``openapi``. ``None``, ``False``, ``0`` and empty strings count as
    missing; an empty ``paths`` object does not.
    """
    version_key = "swagger" if version == "2.0" else "openapi"
    is_valid = all(
        spec.get(key) not in (None, False, 0, "") for key in (version_key, "info", "paths")
    )
    logger.debug("Basic structure check for %s: %s", version, is_valid)
    return is_valid

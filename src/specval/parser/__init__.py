"""Document loading and ``$ref`` handling.

This sub-package is the first half of the specval pipeline: turning a raw
document (JSON or YAML, local file, remote URL or stdin) into a
:class:`~specval.models.ParsedSpec`, and following the references it
contains.

Typical usage::

    from specval.parser import parse_spec, resolve_all_references

    parsed = parse_spec("openapi.yaml")
    outcome = resolve_all_references(parsed.spec, parsed.source)

Sub-modules:

* :mod:`~specval.parser.loader` -- I/O layer plus format and version
  detection.
* :mod:`~specval.parser.references` -- Locates ``$ref`` occurrences.
* :mod:`~specval.parser.resolver` -- Resolves internal, file-relative and
  remote references with chain-local cycle detection.
"""

from specval.parser.loader import (
    detect_document_version,
    detect_version,
    extract_metadata,
    load_source,
    parse_content,
    parse_spec,
    validate_basic_structure,
)
from specval.parser.references import find_references
from specval.parser.resolver import (
    ResolutionContext,
    resolve_all_references,
    resolve_pointer,
    resolve_reference,
)

__all__ = [
    "ResolutionContext",
    "detect_document_version",
    "detect_version",
    "extract_metadata",
    "find_references",
    "load_source",
    "parse_content",
    "parse_spec",
    "resolve_all_references",
    "resolve_pointer",
    "resolve_reference",
    "validate_basic_structure",
]

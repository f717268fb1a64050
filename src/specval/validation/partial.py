"""Validate a fragment of a document on its own."""

from __future__ import annotations

import logging
from typing import Any, Optional

from specval.models import ValidationIssue, ValidationResult
from specval.validation.classifier import detect_partial_type
from specval.validation.evaluator import partition
from specval.validation.registry import SchemaRegistry, get_registry

logger = logging.getLogger(__name__)

UNKNOWN_TYPE_MESSAGE = (
    "Unable to determine document type. "
    "This doesn't appear to be a valid OpenAPI partial document."
)


def validate_partial_document(
    fragment: Any,
    version: str,
    document_path: Optional[str] = None,
    registry: Optional[SchemaRegistry] = None,
) -> ValidationResult:
    """Classify *fragment* and validate it against the schema for its kind.

    Args:
        fragment: The resolved content of a reference.
        version: Version to validate under; the fragment's own version when
            it declares one, otherwise the root document's.
        document_path: When given, prefixed verbatim to every issue path so
            issues point back into the referring document.
        registry: Schema registry to use. Defaults to the shared one.

    Returns:
        A :class:`~specval.models.ValidationResult` for the fragment alone.
        Fragments whose kind cannot be determined, or whose kind has no
        schema in this version, fail with a single error.
    """
    registry = registry or get_registry()
    kind = detect_partial_type(fragment, version)

    if kind is None:
        logger.debug("Could not classify fragment at %s", document_path or "/")
        return _failed(UNKNOWN_TYPE_MESSAGE, fragment, version)

    evaluate = registry.get(version, kind)
    if evaluate is None:
        return _failed(
            f"No validation schema available for {kind.value} in OpenAPI {version}",
            fragment,
            version,
        )

    errors, warnings = partition(evaluate(fragment))
    if document_path:
        for issue in (*errors, *warnings):
            issue.path = f"{document_path}{issue.path}"

    logger.debug(
        "Fragment %s validated as %s: %d errors, %d warnings",
        document_path or "/",
        kind.value,
        len(errors),
        len(warnings),
    )
    return ValidationResult.from_issues(errors, warnings, fragment, version)


def _failed(message: str, fragment: Any, version: str) -> ValidationResult:
    return ValidationResult.from_issues(
        [ValidationIssue(path="/", message=message)], [], fragment, version
    )

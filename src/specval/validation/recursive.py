"""Validate a document together with everything it references.

:func:`validate_recursively` validates the root document, resolves each
reference found directly in it, and validates every resolved target as a
partial document. Only the root's own references are followed; references
inside resolved targets are not chased further.

:func:`analyze_references` is a separate, resolution-free scan. Its notion of
"circular" is textual: any reference value that occurs more than once in the
document is reported. That is a different question from the chain-local
cycle check the resolver performs, and the two can disagree.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Optional

from specval.exceptions import SpecvalError
from specval.models import (
    PartialValidation,
    RecursiveValidationResult,
    Reference,
    ReferenceAnalysis,
    ResolvedReference,
    ValidationIssue,
    ValidationOptions,
    ValidationResult,
)
from specval.parser.loader import DEFAULT_TIMEOUT, parse_spec
from specval.parser.references import find_references
from specval.parser.resolver import resolve_all_references
from specval.validation.document import validate_spec
from specval.validation.partial import validate_partial_document
from specval.validation.registry import SchemaRegistry

logger = logging.getLogger(__name__)

CIRCULAR_MESSAGE = "Circular reference detected"
DEFAULT_VERSION = "3.0"


def validate_recursively(
    source: str,
    options: Optional[ValidationOptions] = None,
    timeout: float = DEFAULT_TIMEOUT,
    registry: Optional[SchemaRegistry] = None,
) -> RecursiveValidationResult:
    """Validate *source* and each fragment its references point at.

    Args:
        source: File path, URL, or '-' for stdin.
        options: Options for the root document's validation; ``max_ref_depth``
            also bounds reference resolution.
        timeout: Request timeout in seconds for remote documents.
        registry: Schema registry to use. Defaults to the shared one.

    Returns:
        A :class:`~specval.models.RecursiveValidationResult`. References that
        fail to resolve are logged and left out; they add no partial entry.

    Raises:
        SpecParseError: If the root document cannot be loaded or parsed.
        SchemaNotFoundError: If the root's version has no document schema.
    """
    options = options or ValidationOptions()
    root = parse_spec(source, timeout=timeout)
    root_result = validate_spec(root.spec, root.version, options, registry=registry)

    outcome = resolve_all_references(
        root.spec, source, max_depth=options.max_ref_depth, timeout=timeout
    )
    logger.info("Following %d references in %s", len(outcome.resolved), source)

    partials: list[PartialValidation] = []
    for resolved in outcome.resolved:
        partial = _validate_resolved(resolved, root.version, registry)
        if partial is not None:
            partials.append(partial)

    errors = list(root_result.errors)
    warnings = list(root_result.warnings)
    for partial in partials:
        errors.extend(partial.result.errors)
        warnings.extend(partial.result.warnings)

    valid_documents = int(root_result.valid) + sum(
        1 for partial in partials if not partial.is_circular and partial.result.valid
    )
    return RecursiveValidationResult(
        valid=root_result.valid and all(partial.result.valid for partial in partials),
        errors=errors,
        warnings=warnings,
        spec=root.spec,
        version=root.version,
        partial_validations=partials,
        circular_references=outcome.circular,
        total_documents=1 + len(partials),
        valid_documents=valid_documents,
    )


def _validate_resolved(
    resolved: ResolvedReference,
    root_version: str,
    registry: Optional[SchemaRegistry],
) -> Optional[PartialValidation]:
    if resolved.is_circular:
        logger.info("Circular reference: %s", resolved.path)
        result = ValidationResult.from_issues(
            [ValidationIssue(path="/", message=CIRCULAR_MESSAGE)],
            [],
            {},
            resolved.version or DEFAULT_VERSION,
        )
        return PartialValidation(path=resolved.path, result=result, is_circular=True)

    if resolved.content is None:
        return None

    result = validate_partial_document(
        resolved.content,
        resolved.version or root_version,
        document_path=resolved.path,
        registry=registry,
    )
    if result.valid:
        logger.info("Reference valid: %s", resolved.path)
    else:
        logger.info("Reference invalid: %s (%d errors)", resolved.path, len(result.errors))
    return PartialValidation(path=resolved.path, result=result)


def validate_multiple_recursively(
    sources: list[str],
    options: Optional[ValidationOptions] = None,
    timeout: float = DEFAULT_TIMEOUT,
    registry: Optional[SchemaRegistry] = None,
    default_version: str = DEFAULT_VERSION,
) -> list[RecursiveValidationResult]:
    """Run :func:`validate_recursively` over *sources* one after another.

    A source that cannot be validated does not stop the batch: it yields a
    failed result with a single ``Failed to parse specification: ...`` error
    and zero documents. ``results[i]`` always belongs to ``sources[i]``.

    Args:
        sources: File paths or URLs.
        options: Shared validation options.
        timeout: Request timeout in seconds for remote documents.
        registry: Schema registry to use. Defaults to the shared one.
        default_version: Version reported on failed results.
    """
    results: list[RecursiveValidationResult] = []
    for index, source in enumerate(sources, start=1):
        logger.debug("Validating %s (%d/%d)", source, index, len(sources))
        try:
            result = validate_recursively(source, options, timeout=timeout, registry=registry)
        except SpecvalError as exc:
            logger.error("Specification validation failed for %s: %s", source, exc)
            result = RecursiveValidationResult(
                valid=False,
                errors=[
                    ValidationIssue(path="/", message=f"Failed to parse specification: {exc}")
                ],
                spec={},
                version=default_version,
            )
        results.append(result)

    valid = sum(1 for result in results if result.valid)
    logger.info("Batch validation completed: %d valid, %d invalid", valid, len(results) - valid)
    return results


def recurring_references(references: Iterable[Reference]) -> list[str]:
    """Reference values that occur more than once, in first-seen order."""
    counts: dict[str, int] = {}
    for reference in references:
        counts[reference.value] = counts.get(reference.value, 0) + 1
    return [value for value, count in counts.items() if count > 1]


def analyze_references(source: str, timeout: float = DEFAULT_TIMEOUT) -> ReferenceAnalysis:
    """List the references in *source* without resolving them.

    Any value that occurs more than once is reported in
    ``circular_references``.

    Raises:
        SpecParseError: If the document cannot be loaded or parsed.
    """
    parsed = parse_spec(source, timeout=timeout)
    references = find_references(parsed.spec)
    circular = recurring_references(references)
    for value in circular:
        logger.debug("Reference %s occurs more than once", value)
    logger.debug(
        "Reference analysis of %s: %d total, %d recurring", source, len(references), len(circular)
    )
    return ReferenceAnalysis(
        references=references,
        circular_references=circular,
        total_references=len(references),
    )

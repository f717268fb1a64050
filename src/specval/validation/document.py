"""Validate a whole document against its family's schema plus optional checks.

Schema violations are always reported. The remaining checks only run when
switched on through :class:`~specval.models.ValidationOptions`:

``strict``
    Swagger 2.0 documents must declare ``host`` (error); OpenAPI 3.x
    documents should declare ``servers`` (warning). Security requirements
    must name schemes that are actually defined (errors).
``validate_references``
    Every ``$ref`` must resolve inside the document itself. External
    references cannot be checked here and are always reported as broken.
``validate_examples``
    Examples sitting next to an inline schema in a response or media type
    must satisfy that schema. Mismatches are warnings.
``custom_rules``
    Extra JSON schemas applied to values addressed by JSON Pointer.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any, Optional

from jsonschema.exceptions import SchemaError, UnknownType
from referencing.exceptions import Unresolvable

from specval.exceptions import ConfigError, ResolutionError
from specval.models import (
    HTTPMethod,
    SpecFamily,
    ValidationIssue,
    ValidationOptions,
    ValidationResult,
)
from specval.parser.references import find_references
from specval.parser.resolver import local_reference_exists, resolve_pointer
from specval.validation.evaluator import ERROR_KEYWORDS, check_schema, compile_schema, partition
from specval.validation.registry import SchemaRegistry, get_registry

logger = logging.getLogger(__name__)

_DRAFT_04 = "http://json-schema.org/draft-04/schema#"
_DRAFT_2020_12 = "https://json-schema.org/draft/2020-12/schema"


def _missing(value: Any) -> bool:
    return value is None or value is False or value == "" or (
        isinstance(value, int) and not isinstance(value, bool) and value == 0
    )


def _escape(segment: Any) -> str:
    return str(segment).replace("~", "~0").replace("/", "~1")


def validate_spec(
    spec: dict[str, Any],
    version: str,
    options: Optional[ValidationOptions] = None,
    registry: Optional[SchemaRegistry] = None,
) -> ValidationResult:
    """Validate a complete document.

    Args:
        spec: The parsed document.
        version: Its declared version (``"2.0"``, ``"3.0.3"``, ...).
        options: Which optional checks to run. Defaults to schema
            validation only.
        registry: Schema registry to use. Defaults to the shared one.

    Returns:
        The :class:`~specval.models.ValidationResult`.

    Raises:
        SchemaNotFoundError: If no document schema exists for *version*.
        ConfigError: If a custom rule carries an invalid JSON schema.
    """
    options = options or ValidationOptions()
    registry = registry or get_registry()
    evaluate = registry.get(version)

    errors, warnings = partition(evaluate(spec))
    logger.debug(
        "Schema validation for %s: %d errors, %d warnings", version, len(errors), len(warnings)
    )

    family = SpecFamily.from_version(version)
    if options.strict:
        _check_strict(spec, family, errors, warnings)
    if options.validate_examples:
        _check_examples(spec, family, warnings)
    if options.validate_references:
        _check_references(spec, errors)
    for pointer, rule in options.custom_rules.items():
        _check_custom_rule(spec, pointer, rule, errors, warnings)

    result = ValidationResult.from_issues(errors, warnings, spec, version)
    logger.debug(
        "Validation completed: valid=%s errors=%d warnings=%d",
        result.valid,
        len(errors),
        len(warnings),
    )
    return result


# --- strict ---


def _check_strict(
    spec: dict[str, Any],
    family: SpecFamily,
    errors: list[ValidationIssue],
    warnings: list[ValidationIssue],
) -> None:
    if family is SpecFamily.SWAGGER_2_0:
        if _missing(spec.get("host")):
            errors.append(
                ValidationIssue(
                    path="/",
                    message='Either "host" or "servers" must be specified in Swagger 2.0',
                )
            )
        schemes = spec.get("securityDefinitions")
        schemes_path = "/securityDefinitions"
    else:
        servers = spec.get("servers")
        if not isinstance(servers, list) or not servers:
            warnings.append(
                ValidationIssue(
                    path="/",
                    message="No servers specified. Consider adding at least one server.",
                )
            )
        components = spec.get("components")
        schemes = components.get("securitySchemes") if isinstance(components, dict) else None
        schemes_path = "/components/securitySchemes"

    requirements = list(_security_requirements(spec))
    if not requirements:
        return

    root_security = spec.get("security")
    if isinstance(root_security, list) and root_security and _missing(schemes):
        errors.append(
            ValidationIssue(path="/", message="Security schemes must be defined when using security")
        )
        return

    defined = set(schemes) if isinstance(schemes, dict) else set()
    for path, requirement in requirements:
        for name in requirement:
            if name not in defined:
                errors.append(
                    ValidationIssue(
                        path=path,
                        message=f'Security scheme "{name}" is not defined in {schemes_path}',
                        data=name,
                    )
                )


def _security_requirements(spec: dict[str, Any]) -> Iterator[tuple[str, dict[str, Any]]]:
    """Yield ``(pointer, requirement)`` for root and operation-level security."""
    root = spec.get("security")
    if isinstance(root, list):
        for index, requirement in enumerate(root):
            if isinstance(requirement, dict):
                yield f"/security/{index}", requirement

    for pointer, operation in _operations(spec):
        security = operation.get("security")
        if isinstance(security, list):
            for index, requirement in enumerate(security):
                if isinstance(requirement, dict):
                    yield f"{pointer}/security/{index}", requirement


def _operations(spec: dict[str, Any]) -> Iterator[tuple[str, dict[str, Any]]]:
    paths = spec.get("paths")
    if not isinstance(paths, dict):
        return
    for route, item in paths.items():
        if not isinstance(item, dict):
            continue
        for method in HTTPMethod:
            operation = item.get(method.value)
            if isinstance(operation, dict):
                yield f"/paths/{_escape(route)}/{method.value}", operation


# --- references ---


def _check_references(spec: dict[str, Any], errors: list[ValidationIssue]) -> None:
    broken = 0
    for reference in find_references(spec):
        if not local_reference_exists(spec, reference.value):
            errors.append(
                ValidationIssue(path=reference.path, message=f"Broken reference: {reference.value}")
            )
            broken += 1
    logger.debug("Reference check: %d broken", broken)


# --- examples ---


def _check_examples(
    spec: dict[str, Any], family: SpecFamily, warnings: list[ValidationIssue]
) -> None:
    if family in (SpecFamily.SWAGGER_2_0, SpecFamily.OPENAPI_3_0):
        draft = _DRAFT_04
    else:
        draft = _DRAFT_2020_12
    checked = 0
    for pointer, schema, example in _examples(spec, family):
        wrapped = _example_schema(spec, schema, draft)
        try:
            violations = compile_schema(wrapped)(example)
        except (Unresolvable, UnknownType) as exc:
            logger.debug("Skipping example at %s: %s", pointer, exc)
            continue
        checked += 1
        for violation in violations:
            warnings.append(
                ValidationIssue(
                    path=f"{pointer}{violation.instance_path}",
                    message=f"Example does not match schema: {violation.message}",
                    data=violation.data,
                    schema_path=violation.schema_path,
                )
            )
    logger.debug("Checked %d examples", checked)


def _example_schema(spec: dict[str, Any], schema: dict[str, Any], draft: str) -> dict[str, Any]:
    """Give an inline schema access to the document's named schemas.

    ``#/definitions/...`` and ``#/components/...`` references inside *schema*
    then resolve against the wrapper exactly as they would in the document.
    """
    wrapped: dict[str, Any] = {"$schema": draft, "allOf": [schema]}
    for key in ("definitions", "components"):
        if isinstance(spec.get(key), dict):
            wrapped[key] = spec[key]
    return wrapped


def _examples(
    spec: dict[str, Any], family: SpecFamily
) -> Iterator[tuple[str, dict[str, Any], Any]]:
    """Yield ``(pointer, schema, example)`` for every example with a schema beside it."""
    for pointer, operation in _operations(spec):
        responses = operation.get("responses")
        if isinstance(responses, dict):
            for status, response in responses.items():
                if not isinstance(response, dict):
                    continue
                base = f"{pointer}/responses/{_escape(status)}"
                if family is SpecFamily.SWAGGER_2_0:
                    yield from _swagger_examples(base, response)
                else:
                    yield from _media_examples(f"{base}/content", response.get("content"))

        body = operation.get("requestBody")
        if family is not SpecFamily.SWAGGER_2_0 and isinstance(body, dict):
            yield from _media_examples(f"{pointer}/requestBody/content", body.get("content"))


def _swagger_examples(
    base: str, response: dict[str, Any]
) -> Iterator[tuple[str, dict[str, Any], Any]]:
    schema = response.get("schema")
    examples = response.get("examples")
    if isinstance(schema, dict) and isinstance(examples, dict):
        for mime, example in examples.items():
            yield f"{base}/examples/{_escape(mime)}", schema, example


def _media_examples(base: str, content: Any) -> Iterator[tuple[str, dict[str, Any], Any]]:
    if not isinstance(content, dict):
        return
    for media_type, media in content.items():
        if not isinstance(media, dict) or not isinstance(media.get("schema"), dict):
            continue
        schema = media["schema"]
        pointer = f"{base}/{_escape(media_type)}"
        if "example" in media:
            yield f"{pointer}/example", schema, media["example"]
        examples = media.get("examples")
        if isinstance(examples, dict):
            for name, example in examples.items():
                if isinstance(example, dict) and "value" in example:
                    yield f"{pointer}/examples/{_escape(name)}/value", schema, example["value"]


# --- custom rules ---


def _check_custom_rule(
    spec: dict[str, Any],
    pointer: str,
    rule: dict[str, Any],
    errors: list[ValidationIssue],
    warnings: list[ValidationIssue],
) -> None:
    try:
        check_schema(rule)
    except SchemaError as exc:
        raise ConfigError(f"Invalid custom rule for '{pointer}': {exc.message}") from exc

    try:
        target = resolve_pointer(spec, pointer)
    except ResolutionError:
        warnings.append(
            ValidationIssue(path=pointer or "/", message=f"Custom rule target not found: {pointer}")
        )
        return

    for violation in compile_schema(rule)(target):
        issue = violation.to_issue()
        issue.path = f"{pointer}{violation.instance_path}" or "/"
        if violation.keyword in ERROR_KEYWORDS:
            errors.append(issue)
        else:
            warnings.append(issue)

"""Structural overview of a document: paths, components, security, references.

:func:`analyze_specification` never raises on malformed input; anything of
the wrong shape simply counts as zero. Pair it with a validation result to
get the full picture.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from specval.models import (
    ComponentBreakdown,
    HTTPMethod,
    ReferenceBreakdown,
    SecurityAnalysis,
    SpecFamily,
    SpecificationSummary,
    ValidationCounts,
)
from specval.parser.loader import extract_metadata
from specval.parser.references import find_references
from specval.validation.recursive import recurring_references

logger = logging.getLogger(__name__)

_OPERATION_MARKERS = ("responses", "operationId", "summary", "description")

_COMPONENT_FIELDS = {
    "schemas": "schemas",
    "responses": "responses",
    "parameters": "parameters",
    "examples": "examples",
    "requestBodies": "request_bodies",
    "headers": "headers",
    "securitySchemes": "security_schemes",
    "links": "links",
    "callbacks": "callbacks",
    "pathItems": "path_items",
}


def _count(value: Any) -> int:
    return len(value) if isinstance(value, (dict, list)) else 0


def analyze_specification(
    spec: dict[str, Any],
    version: str,
    validation: Optional[ValidationCounts] = None,
) -> SpecificationSummary:
    """Summarise the structure of *spec*.

    An endpoint is an HTTP-method key of a path item whose value looks like
    an operation (it has ``responses``, ``operationId``, ``summary`` or
    ``description``). Components are only counted for OpenAPI 3.x, webhooks
    for 3.1 and later.

    Args:
        spec: The parsed document.
        version: Its declared version.
        validation: Counts from a validation run to embed in the summary.
    """
    family = SpecFamily.from_version(version)
    metadata = extract_metadata(spec)
    summary = SpecificationSummary(
        version=version,
        title=metadata.title,
        description=metadata.description,
        validation=validation or ValidationCounts(),
    )

    paths = spec.get("paths")
    if isinstance(paths, dict):
        summary.paths = len(paths)
        methods: list[str] = []
        for item in paths.values():
            if not isinstance(item, dict):
                continue
            for key, operation in item.items():
                if str(key).lower() not in {m.value for m in HTTPMethod}:
                    continue
                if isinstance(operation, dict) and any(m in operation for m in _OPERATION_MARKERS):
                    summary.endpoints += 1
                    if key.upper() not in methods:
                        methods.append(key.upper())
        summary.http_methods = methods

    components = spec.get("components")
    if family is not SpecFamily.SWAGGER_2_0 and isinstance(components, dict):
        summary.components = ComponentBreakdown(
            **{field: _count(components.get(key)) for key, field in _COMPONENT_FIELDS.items()}
        )

    if family in (SpecFamily.OPENAPI_3_1, SpecFamily.OPENAPI_3_2):
        summary.webhooks = _count(spec.get("webhooks"))

    summary.servers = _count(spec.get("servers"))
    summary.tags = _count(spec.get("tags"))
    summary.security = _analyze_security(spec, family)
    summary.references = _analyze_references(spec)

    logger.debug(
        "Summary for %s: %d paths, %d endpoints, %d components",
        version,
        summary.paths,
        summary.endpoints,
        summary.components.total,
    )
    return summary


def _analyze_security(spec: dict[str, Any], family: SpecFamily) -> SecurityAnalysis:
    analysis = SecurityAnalysis()
    security = spec.get("security")
    if isinstance(security, list) and security:
        analysis.has_security = True
        analysis.security_requirements = len(security)

    if family is SpecFamily.SWAGGER_2_0:
        schemes = spec.get("securityDefinitions")
    else:
        components = spec.get("components")
        schemes = components.get("securitySchemes") if isinstance(components, dict) else None
    if not isinstance(schemes, dict):
        return analysis

    analysis.security_schemes = len(schemes)
    for scheme in schemes.values():
        if not isinstance(scheme, dict):
            continue
        kind = scheme.get("type")
        if kind == "oauth2":
            analysis.oauth_flows += 1
        elif kind == "apiKey":
            analysis.api_keys += 1
        elif kind in ("http", "basic"):
            analysis.http_auth += 1
    return analysis


def _analyze_references(spec: dict[str, Any]) -> ReferenceBreakdown:
    references = find_references(spec)
    internal = sum(1 for ref in references if ref.value.startswith("#/"))
    return ReferenceBreakdown(
        total_references=len(references),
        internal_references=internal,
        external_references=len(references) - internal,
        circular_references=len(recurring_references(references)),
    )


def summary_rows(summary: SpecificationSummary) -> list[list[str]]:
    """Flatten *summary* into ``[section, field, value]`` rows for table output."""

    def yes_no(flag: bool) -> str:
        return "Yes" if flag else "No"

    components = summary.components
    security = summary.security
    references = summary.references
    validation = summary.validation
    return [
        ["Basic", "Version", summary.version],
        ["Basic", "Title", summary.title or "N/A"],
        ["Basic", "Description", yes_no(bool(summary.description))],
        ["Paths", "Paths", str(summary.paths)],
        ["Paths", "Endpoints", str(summary.endpoints)],
        ["Paths", "HTTP methods", ", ".join(summary.http_methods) or "-"],
        ["Components", "Total", str(components.total)],
        ["Components", "Schemas", str(components.schemas)],
        ["Components", "Responses", str(components.responses)],
        ["Components", "Parameters", str(components.parameters)],
        ["Components", "Examples", str(components.examples)],
        ["Components", "Request bodies", str(components.request_bodies)],
        ["Components", "Headers", str(components.headers)],
        ["Components", "Security schemes", str(components.security_schemes)],
        ["Components", "Links", str(components.links)],
        ["Components", "Callbacks", str(components.callbacks)],
        ["Components", "Path items", str(components.path_items)],
        ["Security", "Has security", yes_no(security.has_security)],
        ["Security", "Schemes", str(security.security_schemes)],
        ["Security", "Requirements", str(security.security_requirements)],
        ["Security", "OAuth flows", str(security.oauth_flows)],
        ["Security", "API keys", str(security.api_keys)],
        ["Security", "HTTP auth", str(security.http_auth)],
        ["References", "Total", str(references.total_references)],
        ["References", "Internal", str(references.internal_references)],
        ["References", "External", str(references.external_references)],
        ["References", "Recurring", str(references.circular_references)],
        ["Other", "Servers", str(summary.servers)],
        ["Other", "Tags", str(summary.tags)],
        ["Other", "Webhooks", str(summary.webhooks)],
        ["Validation", "Valid", yes_no(validation.valid)],
        ["Validation", "Errors", str(validation.errors)],
        ["Validation", "Warnings", str(validation.warnings)],
        ["Validation", "Processing time", f"{validation.processing_time_ms:.2f}ms"],
    ]

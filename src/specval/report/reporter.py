"""Turn a :class:`~specval.models.ValidationResult` into a report document.

Every format is rendered from one report dictionary built by
:func:`build_report`:

* ``summary`` -- validity, version, error and warning counts, and an ISO-8601
  UTC timestamp.
* ``errors`` -- each issue's ``path``, ``message`` and, when known,
  ``schemaPath``. The offending value is left out.
* ``warnings`` -- only with ``include_warnings``.
* ``metadata`` -- only with ``include_metadata``; title, version and
  description from ``info``, with contact and license as compact JSON.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

import yaml
from jinja2 import Environment, FileSystemLoader, select_autoescape

from specval.config import atomic_write
from specval.exceptions import ReportError
from specval.models import ReportFormat, ReportOptions, ValidationIssue, ValidationResult

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent / "templates"
"""Path to the Jinja2 template directory (``report/templates/``)."""

_TEMPLATES = {
    ReportFormat.HTML: "report.html.j2",
    ReportFormat.MARKDOWN: "report.md.j2",
}


def generate_report(
    result: ValidationResult,
    options: ReportOptions,
    now: Optional[datetime] = None,
) -> str:
    """Render *result* in the format named by ``options.format``.

    Args:
        result: The validation result to report on.
        options: Format and which optional sections to include.
        now: Timestamp to stamp the report with. Defaults to the current
            UTC time.

    Returns:
        The rendered report text.

    Raises:
        ReportError: If the format is not one of json, yaml, html, markdown.
    """
    try:
        fmt = ReportFormat(options.format)
    except ValueError as exc:
        raise ReportError(f"Unsupported report format: {options.format}") from exc

    report = build_report(result, options, now=now)
    logger.debug("Rendering %s report (%d errors)", fmt.value, len(result.errors))

    if fmt is ReportFormat.JSON:
        return json.dumps(report, indent=2, ensure_ascii=False)
    if fmt is ReportFormat.YAML:
        return yaml.safe_dump(report, sort_keys=False, allow_unicode=True)

    env = _create_jinja_env()
    template = env.get_template(_TEMPLATES[fmt])
    return template.render(report=report, options=options)


def build_report(
    result: ValidationResult,
    options: ReportOptions,
    now: Optional[datetime] = None,
) -> dict[str, Any]:
    """Assemble the format-independent report dictionary."""
    now = now or datetime.now(timezone.utc)
    report: dict[str, Any] = {
        "summary": {
            "valid": result.valid,
            "version": result.version,
            "errorCount": len(result.errors),
            "warningCount": len(result.warnings),
            "timestamp": _timestamp(now),
        },
        "errors": [_issue(issue) for issue in result.errors],
    }
    if options.include_warnings:
        report["warnings"] = [_issue(issue) for issue in result.warnings]
    if options.include_metadata:
        report["metadata"] = extract_metadata(result.spec)
    return report


def extract_metadata(spec: Any) -> dict[str, Any]:
    """Pull the ``info`` fields shown in the metadata section, skipping empty ones."""
    info = spec.get("info") if isinstance(spec, dict) else None
    if not isinstance(info, dict):
        return {}
    metadata = {
        "title": info.get("title"),
        "version": info.get("version"),
        "description": info.get("description"),
        "contact": json.dumps(info["contact"]) if info.get("contact") else None,
        "license": json.dumps(info["license"]) if info.get("license") else None,
    }
    return {key: value for key, value in metadata.items() if value}


def save_report(content: str, path: str | Path) -> Path:
    """Write *content* to *path* atomically.

    Returns:
        The resolved path the report was written to.

    Raises:
        ReportError: If the file cannot be written.
    """
    target = Path(path).expanduser().resolve()
    try:
        atomic_write(target, content)
    except OSError as exc:
        raise ReportError(f"Failed to write report to {target}: {exc}") from exc
    logger.info("Report saved to %s", target)
    return target


def _issue(issue: ValidationIssue) -> dict[str, Any]:
    return issue.model_dump(by_alias=True, exclude={"data"}, exclude_none=True)


def _timestamp(moment: datetime) -> str:
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _create_jinja_env() -> Environment:
    """Create the Jinja2 environment for report templates.

    HTML templates are autoescaped, Markdown templates are not.
    """
    return Environment(
        loader=FileSystemLoader(str(TEMPLATE_DIR)),
        autoescape=select_autoescape(
            enabled_extensions=("html.j2",), disabled_extensions=("md.j2",)
        ),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )

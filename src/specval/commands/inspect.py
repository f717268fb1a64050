"""Inspect commands -- examine a document without judging it.

Provides the ``specval inspect`` sub-command group with read-only views of
a document: parse information, the ``$ref`` values it contains, a
structural summary, and the list of supported versions.
"""

from __future__ import annotations

import time

import typer

from specval.commands.common import exit_on_error, load_settings
from specval.output import OutputFormat, format_response, get_output, info

inspect_app = typer.Typer(no_args_is_help=True)


@inspect_app.command("spec")
def inspect_spec(
    ctx: typer.Context,
    source: str = typer.Argument(help="Document path, URL, or '-' for stdin."),
) -> None:
    """Show what the parser sees: version, title and top-level counts.

    Example::

        specval inspect spec openapi.yaml
        specval --json inspect spec https://api.example.com/openapi.json
    """
    from specval.api import parse

    with exit_on_error():
        config, _ = load_settings(ctx)
        parsed = parse(source, config)

    spec = parsed.spec
    paths = spec.get("paths")
    data: dict = {
        "source": parsed.source,
        "version": parsed.version,
        "family": parsed.family.value,
        "title": parsed.metadata.title or "-",
        "api_version": parsed.metadata.version or "-",
        "description": parsed.metadata.description or "-",
        "paths": len(paths) if isinstance(paths, dict) else 0,
    }
    if parsed.is_swagger2:
        definitions = spec.get("definitions")
        data["definitions"] = len(definitions) if isinstance(definitions, dict) else 0
    else:
        components = spec.get("components")
        schemas = components.get("schemas") if isinstance(components, dict) else None
        data["schemas"] = len(schemas) if isinstance(schemas, dict) else 0
    if parsed.metadata.contact:
        data["contact"] = parsed.metadata.contact
    if parsed.metadata.license:
        data["license"] = parsed.metadata.license

    format_response(data)


@inspect_app.command("refs")
def inspect_refs(
    ctx: typer.Context,
    source: str = typer.Argument(help="Document path, URL, or '-' for stdin."),
) -> None:
    """List every ``$ref`` in the document.

    Values that occur more than once are flagged as recurring.

    Example::

        specval inspect refs openapi.yaml
    """
    from specval.api import analyze_document_references

    with exit_on_error():
        config, _ = load_settings(ctx)
        analysis = analyze_document_references(source, config)

    output = get_output()
    if output.format == OutputFormat.JSON:
        format_response(analysis.model_dump(mode="json"))
        return

    if not analysis.references:
        info("No references found.")
        return

    recurring = set(analysis.circular_references)
    rows = [
        [ref.path, ref.value, "yes" if ref.value in recurring else ""]
        for ref in analysis.references
    ]
    output.print_table(
        ["Location", "Reference", "Recurring"],
        rows,
        title=f"References ({analysis.total_references})",
    )


@inspect_app.command("summary")
def inspect_summary(
    ctx: typer.Context,
    source: str = typer.Argument(help="Document path, URL, or '-' for stdin."),
) -> None:
    """Summarise paths, components, security and references, with a validation pass.

    Example::

        specval inspect summary openapi.yaml
    """
    from specval.models import ValidationCounts
    from specval.parser.loader import parse_spec
    from specval.summary import analyze_specification, summary_rows
    from specval.validation.document import validate_spec

    with exit_on_error():
        config, options = load_settings(ctx)
        started = time.perf_counter()
        parsed = parse_spec(source, timeout=config.http.timeout)
        result = validate_spec(parsed.spec, parsed.version, options)
        counts = ValidationCounts(
            valid=result.valid,
            errors=len(result.errors),
            warnings=len(result.warnings),
            processing_time_ms=(time.perf_counter() - started) * 1000,
        )
        summary = analyze_specification(parsed.spec, parsed.version, counts)

    output = get_output()
    if output.format == OutputFormat.JSON:
        format_response(summary.model_dump(mode="json"))
        return

    title = summary.title or source
    output.print_table(["Section", "Field", "Value"], summary_rows(summary), title=title)


@inspect_app.command("versions")
def inspect_versions() -> None:
    """List the document versions specval can validate.

    Example::

        specval inspect versions
    """
    from specval.api import get_supported_versions
    from specval.models import SpecFamily

    rows = [
        [version, SpecFamily.from_version(version).value]
        for version in get_supported_versions()
    ]
    get_output().print_table(["Version", "Schema"], rows, title="Supported versions")

"""Validate commands -- check one document or a batch of documents.

Implements the ``specval validate`` and ``specval batch`` top-level
commands. Both resolve validation options from CLI flags and the layered
configuration (see :func:`~specval.config.resolve_options`), print the
outcome in the active output format, and exit with
:data:`~specval.exit_codes.EXIT_VALIDATION_FAILED` when any document is
invalid.
"""

from __future__ import annotations

from typing import Any, Optional

import typer

from specval.commands.common import exit_on_error, load_settings, validation_overrides
from specval.models import RecursiveValidationResult, ValidationResult
from specval.output import (
    OutputFormat,
    format_response,
    get_output,
    info,
    progress,
    success,
    suggest,
    warning,
)

STRICT_OPTION = typer.Option(
    None, "--strict/--no-strict", help="Check hosts/servers and security definitions."
)
EXAMPLES_OPTION = typer.Option(
    None, "--examples/--no-examples", help="Validate examples against their schemas."
)
REFERENCES_OPTION = typer.Option(
    None, "--references/--no-references", help="Report $refs that do not resolve."
)
RECURSIVE_OPTION = typer.Option(
    None, "--recursive/--no-recursive", help="Validate every referenced fragment too."
)
MAX_DEPTH_OPTION = typer.Option(
    None, "--max-depth", min=1, help="Maximum reference resolution depth."
)

_RECURSIVE_EXCLUDE: dict[str, Any] = {
    "spec": True,
    "partial_validations": {"__all__": {"result": {"spec"}}},
}


def result_payload(source: str, result: ValidationResult) -> dict[str, Any]:
    """Serialise *result* for JSON output, leaving the document itself out."""
    exclude = _RECURSIVE_EXCLUDE if isinstance(result, RecursiveValidationResult) else {"spec"}
    payload = {"source": source}
    payload.update(result.model_dump(mode="json", by_alias=True, exclude=exclude))
    return payload


def render_result(source: str, result: ValidationResult) -> None:
    """Print *result* in the active output format."""
    output = get_output()
    if output.format == OutputFormat.JSON:
        format_response(result_payload(source, result))
        return

    status = f"{source}: {'valid' if result.valid else 'invalid'} (OpenAPI {result.version})"
    if result.valid:
        success(status)
    else:
        warning(status)
    info(f"Errors: {len(result.errors)}, warnings: {len(result.warnings)}")

    rows = [["error", issue.path, issue.message] for issue in result.errors]
    rows.extend(["warning", issue.path, issue.message] for issue in result.warnings)
    if rows:
        output.print_table(["Severity", "Path", "Message"], rows, title="Issues")

    if isinstance(result, RecursiveValidationResult):
        info(f"Documents: {result.valid_documents}/{result.total_documents} valid")
        partial_rows = []
        for partial in result.partial_validations:
            if partial.is_circular:
                state = "circular"
            else:
                state = "valid" if partial.result.valid else "invalid"
            partial_rows.append([partial.path, state, str(len(partial.result.errors))])
        if partial_rows:
            output.print_table(
                ["Reference", "Status", "Errors"], partial_rows, title="Referenced documents"
            )


def validate_command(
    ctx: typer.Context,
    source: str = typer.Argument(help="Document path, URL, or '-' for stdin."),
    strict: Optional[bool] = STRICT_OPTION,
    examples: Optional[bool] = EXAMPLES_OPTION,
    references: Optional[bool] = REFERENCES_OPTION,
    recursive: Optional[bool] = RECURSIVE_OPTION,
    max_depth: Optional[int] = MAX_DEPTH_OPTION,
) -> None:
    """Validate an OpenAPI or Swagger document.

    With ``--recursive`` every fragment the document references is
    validated as well and listed separately.

    Raises:
        typer.Exit: With code 3 if the document is invalid, or the error's
            exit code if it cannot be loaded, parsed or matched to a schema.

    Example::

        specval validate openapi.yaml
        specval validate openapi.yaml --strict --references
        specval validate openapi.yaml --recursive --max-depth 5
        curl -s https://api.example.com/openapi.json | specval validate -
    """
    from specval.api import validate, validate_with_references
    from specval.exceptions import ValidationFailedError
    from specval.parser.references import find_references

    with exit_on_error():
        config, options = load_settings(
            ctx, validation_overrides(strict, examples, references, recursive, max_depth)
        )
        progress(f"Validating {source}...")
        if options.recursive:
            result: ValidationResult = validate_with_references(source, options, config)
        else:
            result = validate(source, options, config)

        render_result(source, result)
        if not result.valid:
            if not options.recursive and find_references(result.spec):
                suggest("Run with --recursive to validate referenced documents as well")
            raise ValidationFailedError(f"Validation failed: {source}")


def batch_command(
    ctx: typer.Context,
    sources: list[str] = typer.Argument(help="Document paths or URLs."),
    strict: Optional[bool] = STRICT_OPTION,
    examples: Optional[bool] = EXAMPLES_OPTION,
    references: Optional[bool] = REFERENCES_OPTION,
    recursive: Optional[bool] = RECURSIVE_OPTION,
) -> None:
    """Validate several documents, one after another.

    A document that cannot be loaded is reported as invalid and does not
    stop the batch.

    Raises:
        typer.Exit: With code 3 if any document is invalid.

    Example::

        specval batch api/*.yaml
        specval --json batch users.yaml orders.yaml --recursive
    """
    from specval.api import validate, validate_multiple_with_references
    from specval.exceptions import ValidationFailedError

    with exit_on_error():
        config, options = load_settings(
            ctx, validation_overrides(strict, examples, references, recursive)
        )
        progress(f"Validating {len(sources)} documents...")
        results: list[ValidationResult]
        if options.recursive:
            results = list(validate_multiple_with_references(sources, options, config))
        else:
            results = validate(sources, options, config)

        output = get_output()
        if output.format == OutputFormat.JSON:
            format_response(
                [result_payload(source, result) for source, result in zip(sources, results)]
            )
        else:
            rows = [
                [
                    source,
                    "yes" if result.valid else "no",
                    result.version,
                    str(len(result.errors)),
                    str(len(result.warnings)),
                ]
                for source, result in zip(sources, results)
            ]
            output.print_table(
                ["Source", "Valid", "Version", "Errors", "Warnings"],
                rows,
                title=f"Batch validation ({len(rows)})",
            )

        invalid = sum(1 for result in results if not result.valid)
        if invalid:
            raise ValidationFailedError(f"{invalid} of {len(results)} documents are invalid")
        success(f"All {len(results)} documents are valid")

"""Report command -- validate a document and render a report.

Implements the ``specval report`` top-level command. The report is printed
to stdout unless ``--report-file`` names a file, in which case it is
written atomically. Unlike ``validate``, an invalid document is not an
error here: the report itself carries the verdict.
"""

from __future__ import annotations

from typing import Optional

import typer

from specval.commands.common import exit_on_error, load_settings, validation_overrides
from specval.commands.validate import (
    EXAMPLES_OPTION,
    RECURSIVE_OPTION,
    REFERENCES_OPTION,
    STRICT_OPTION,
)
from specval.models import ReportFormat, ReportOptions
from specval.output import print_data, success


def report_command(
    ctx: typer.Context,
    source: str = typer.Argument(help="Document path, URL, or '-' for stdin."),
    report_format: Optional[ReportFormat] = typer.Option(
        None,
        "--format",
        "-f",
        case_sensitive=False,
        help="Report format. Defaults to the first configured report format.",
    ),
    report_file: Optional[str] = typer.Option(
        None, "--report-file", help="Write the report to this file."
    ),
    include_warnings: bool = typer.Option(
        False, "--warnings", "-w", help="Include warnings in the report."
    ),
    include_metadata: bool = typer.Option(
        False, "--metadata", "-m", help="Include info metadata in the report."
    ),
    strict: Optional[bool] = STRICT_OPTION,
    examples: Optional[bool] = EXAMPLES_OPTION,
    references: Optional[bool] = REFERENCES_OPTION,
    recursive: Optional[bool] = RECURSIVE_OPTION,
) -> None:
    """Validate a document and render the result as a report.

    Args:
        ctx: Typer context carrying the resolved configuration.
        source: Document path, URL, or ``-`` for stdin.
        report_format: ``json``, ``yaml``, ``html`` or ``markdown``.
        report_file: Destination file; stdout when omitted.
        include_warnings: Add the warnings section.
        include_metadata: Add title, version, description, contact and
            license from ``info``.

    Example::

        specval report openapi.yaml
        specval report openapi.yaml -f html --report-file report.html -w -m
    """
    from specval.api import generate_validation_report
    from specval.report import save_report

    with exit_on_error():
        config, options = load_settings(
            ctx, validation_overrides(strict, examples, references, recursive)
        )
        fmt = report_format
        if fmt is None:
            fmt = config.report_formats[0] if config.report_formats else ReportFormat.JSON
        report_options = ReportOptions(
            format=fmt,
            output=report_file,
            include_warnings=include_warnings,
            include_metadata=include_metadata,
        )
        content = generate_validation_report(source, report_options, options, config)

        if report_file:
            path = save_report(content, report_file)
            success(f"Report written to {path}")
        else:
            print_data(content)

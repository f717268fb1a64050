"""Typer application factory and CLI entry point for specval.

This module wires together the top-level Typer application and registers
the built-in commands (``validate``, ``batch``, ``report``, ``inspect``,
``config``).

The :func:`main` function is the console-script entry point declared in
``pyproject.toml``. It installs signal handlers, registers commands and
invokes the Typer app. Unhandled exceptions are written to a crash log
under the data directory.

See Also:
    :mod:`specval.config`: Configuration resolution.
    :mod:`specval.output`: Output formatting initialised in :func:`main_callback`.
"""

from __future__ import annotations

import logging
import signal
import sys
import traceback
from datetime import datetime
from typing import Any, Optional

import typer

from specval import __version__
from specval.exit_codes import EXIT_GENERIC_FAILURE

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="specval",
    help="Validate Swagger 2.0 and OpenAPI 3.0/3.1/3.2 documents and their references.",
    no_args_is_help=True,
    add_completion=False,
    rich_markup_mode="rich",
)


def _version_callback(value: bool) -> None:
    """Print version and exit when --version is passed."""
    if value:
        typer.echo(f"specval {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    json_output: bool = typer.Option(
        False, "--json", help="JSON output format."
    ),
    plain_output: bool = typer.Option(
        False, "--plain", help="Plain text output."
    ),
    no_color: bool = typer.Option(
        False, "--no-color", help="Disable color output."
    ),
    quiet: bool = typer.Option(
        False, "--quiet", "-q", help="Suppress non-essential output."
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output."
    ),
    force: bool = typer.Option(
        False, "--force", "-f", help="Skip confirmations."
    ),
    output_file: Optional[str] = typer.Option(
        None, "-o", "--output", help="Output file path."
    ),
) -> None:
    """Root callback executed before every sub-command.

    Resolves the layered configuration, initialises the global
    :class:`~specval.output.OutputManager` from CLI flags (falling back to
    the configured ``output.format``), routes library logging to stderr,
    and stores shared state in ``ctx.obj``.

    Args:
        ctx: Typer invocation context.
        version: If ``True``, print the version string and exit.
        json_output: Force JSON output format.
        plain_output: Force plain-text output format.
        no_color: Disable all colour and Rich markup.
        quiet: Suppress non-essential diagnostic output.
        verbose: Enable debug-level logging.
        force: Skip interactive confirmations.
        output_file: Redirect primary data output to a file path.
    """
    from specval.config import resolve_config
    from specval.exceptions import ConfigError
    from specval.output import OutputFormat, OutputManager, configure_logging, set_output

    cli_format: Optional[str] = None
    if json_output:
        cli_format = OutputFormat.JSON.value
    elif plain_output:
        cli_format = OutputFormat.PLAIN.value

    config = None
    config_problem: Optional[str] = None
    try:
        config = resolve_config(cli_format=cli_format)
        fmt = OutputFormat(config.output.format)
    except ConfigError as exc:
        config_problem = str(exc)
        fmt = OutputFormat(cli_format) if cli_format else OutputFormat.AUTO

    output = OutputManager(
        format=fmt,
        no_color=no_color,
        quiet=quiet,
        output_file=output_file,
    )
    set_output(output)
    configure_logging(verbose=verbose, console=output.stderr_console)
    if config_problem:
        output.warning(config_problem)

    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    ctx.obj["force"] = force
    ctx.obj["verbose"] = verbose


def _setup_signal_handlers() -> None:
    """Install a SIGINT handler so Ctrl-C exits cleanly."""

    def _handler(signum: int, frame: Any) -> None:  # noqa: ANN401
        sys.stderr.write("\nCancelled.\n")
        sys.exit(130)

    signal.signal(signal.SIGINT, _handler)


def _write_crash_log(exc: Exception) -> str:
    """Write a crash traceback to disk and return the log file path.

    Args:
        exc: The unhandled exception to log.

    Returns:
        Absolute path to the written crash log file.
    """
    from specval.config import get_data_dir

    logs_dir = get_data_dir() / "logs"
    logs_dir.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d-%H%M%S")
    log_path = logs_dir / f"crash-{timestamp}.log"
    log_path.write_text(traceback.format_exc())
    return str(log_path)


def register_commands() -> None:
    """Attach the built-in commands to :data:`app`. Safe to call more than once."""
    if getattr(app, "_specval_registered", False):
        return

    from specval.commands.config import config_app
    from specval.commands.inspect import inspect_app
    from specval.commands.report import report_command
    from specval.commands.validate import batch_command, validate_command

    app.command("validate")(validate_command)
    app.command("batch")(batch_command)
    app.command("report")(report_command)
    app.add_typer(inspect_app, name="inspect", help="Inspect a document without validating it.")
    app.add_typer(config_app, name="config", help="Configuration management.")
    app._specval_registered = True  # type: ignore[attr-defined]


def main() -> None:
    """CLI entry point invoked by the ``specval`` console script.

    Performs the following sequence:

    1. Install signal handlers for clean Ctrl-C behaviour.
    2. Register the built-in commands.
    3. Invoke the Typer application.

    Unhandled :class:`~specval.exceptions.SpecvalError` instances cause a
    clean exit with the error's ``exit_code``. All other exceptions produce
    a crash log and a generic failure exit.

    Raises:
        SystemExit: Always raised (either by Typer or explicitly).
    """
    _setup_signal_handlers()
    try:
        register_commands()
        app()
    except SystemExit:
        raise
    except KeyboardInterrupt:
        sys.stderr.write("\nCancelled.\n")
        sys.exit(130)
    except Exception as exc:
        from specval.exceptions import SpecvalError
        from specval.output import error

        if isinstance(exc, SpecvalError):
            error(str(exc))
            sys.exit(exc.exit_code)
        else:
            logger.debug("Unhandled exception", exc_info=True)
            log_path = _write_crash_log(exc)
            error(f"Unexpected error. Debug log: {log_path}")
            sys.exit(EXIT_GENERIC_FAILURE)

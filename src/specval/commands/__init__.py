"""Built-in CLI sub-commands for specval.

This package groups the Typer command modules that form the CLI's
top-level command tree:

* :mod:`~specval.commands.validate` -- ``validate`` and ``batch``.
* :mod:`~specval.commands.report` -- render a validation report.
* :mod:`~specval.commands.inspect` -- parse info, references, summary and
  supported versions.
* :mod:`~specval.commands.config` -- view and modify global settings.

Single commands are plain callback functions registered directly on the
root app; multi-command groups export a :class:`typer.Typer` sub-application.
"""

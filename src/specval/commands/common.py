"""Helpers shared by the command modules."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any, Optional

import typer

from specval.exceptions import SpecvalError
from specval.models import GlobalConfig, ValidationOptions
from specval.output import error


@contextmanager
def exit_on_error() -> Iterator[None]:
    """Report a :class:`~specval.exceptions.SpecvalError` and exit with its code."""
    try:
        yield
    except SpecvalError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None


def load_settings(
    ctx: typer.Context, overrides: Optional[dict[str, Any]] = None
) -> tuple[GlobalConfig, ValidationOptions]:
    """Return the effective config and validation options for a command.

    The config resolved by the root callback is reused when present.

    Raises:
        ConfigError: If any configuration layer is invalid.
    """
    from specval.config import resolve_config, resolve_options

    config = ctx.obj.get("config") if ctx.obj else None
    if config is None:
        config = resolve_config()
    return config, resolve_options(overrides, config)


def validation_overrides(
    strict: Optional[bool] = None,
    examples: Optional[bool] = None,
    references: Optional[bool] = None,
    recursive: Optional[bool] = None,
    max_depth: Optional[int] = None,
) -> dict[str, Any]:
    """Map CLI flags onto :class:`~specval.models.ValidationOptions` fields."""
    return {
        "strict": strict,
        "validate_examples": examples,
        "validate_references": references,
        "recursive": recursive,
        "max_ref_depth": max_depth,
    }

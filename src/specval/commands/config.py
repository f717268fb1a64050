"""Config commands -- view and modify global configuration.

Provides the ``specval config`` sub-command group for reading, updating
and resetting the user's global configuration file
(:class:`~specval.models.GlobalConfig`). Settings are persisted in the
specval config directory and provide the lowest-precedence defaults for
validation options, output format, HTTP timeout and report formats.
"""

from __future__ import annotations

import json

import typer
from pydantic import ValidationError

from specval.commands.common import exit_on_error
from specval.output import error, format_response, info, success

config_app = typer.Typer(no_args_is_help=True)


@config_app.command("show")
def config_show() -> None:
    """Show current configuration.

    Example::

        specval config show
        specval --json config show
    """
    from specval.config import get_config_dir, load_global_config

    with exit_on_error():
        config = load_global_config()
    info(f"Config directory: {get_config_dir()}")
    format_response(config.model_dump(mode="json"))


def _coerce(key: str, current: object, value: str) -> object:
    """Convert *value* to the type of the field it replaces."""
    if isinstance(current, bool):
        return value.lower() in ("true", "1", "yes", "on")
    if isinstance(current, int):
        try:
            return int(value)
        except ValueError:
            error(f"Expected integer for {key}, got: {value}")
            raise typer.Exit(code=2) from None
    if isinstance(current, float):
        try:
            return float(value)
        except ValueError:
            error(f"Expected number for {key}, got: {value}")
            raise typer.Exit(code=2) from None
    if isinstance(current, (list, dict)):
        try:
            return json.loads(value)
        except json.JSONDecodeError:
            error(f"Expected JSON for {key}, got: {value}")
            raise typer.Exit(code=2) from None
    return value


@config_app.command("set")
def config_set(
    key: str = typer.Argument(
        help="Config key (dot notation, e.g., 'validation.strict')."
    ),
    value: str = typer.Argument(help="Value to set."),
) -> None:
    """Set a configuration value.

    Uses dot notation for nested keys. The value is coerced to the type of
    the field it replaces; list and object fields take JSON. The updated
    config is validated against :class:`~specval.models.GlobalConfig`
    before saving.

    Raises:
        typer.Exit: With code 2 if the key path is invalid, the value
            cannot be coerced, or validation fails.

    Example::

        specval config set validation.strict true
        specval config set validation.max_ref_depth 5
        specval config set http.timeout 10
        specval config set report_formats '["html", "markdown"]'
    """
    from specval.config import load_global_config, save_global_config
    from specval.models import GlobalConfig

    with exit_on_error():
        config = load_global_config()
    data = config.model_dump(mode="json")

    keys = key.split(".")
    target = data
    for k in keys[:-1]:
        if k not in target or not isinstance(target[k], dict):
            error(f"Invalid config key: {key}")
            raise typer.Exit(code=2)
        target = target[k]

    final_key = keys[-1]
    if final_key not in target:
        error(f"Unknown config key: {key}")
        raise typer.Exit(code=2)

    coerced = _coerce(key, target[final_key], value)
    target[final_key] = coerced

    try:
        new_config = GlobalConfig.model_validate(data)
    except ValidationError as exc:
        error(f"Validation error: {exc}")
        raise typer.Exit(code=2) from None

    save_global_config(new_config)
    success(f"Set {key} = {coerced}")


@config_app.command("reset")
def config_reset(
    ctx: typer.Context,
) -> None:
    """Reset configuration to defaults.

    Asks for confirmation unless ``--force`` is active.

    Raises:
        typer.Exit: If the user declines confirmation.

    Example::

        specval config reset
        specval --force config reset
    """
    from specval.config import save_global_config
    from specval.models import GlobalConfig

    force = ctx.obj.get("force", False) if ctx.obj else False
    if not force:
        confirmed = typer.confirm("Reset all config to defaults?")
        if not confirmed:
            info("Cancelled.")
            raise typer.Exit()

    save_global_config(GlobalConfig())
    success("Configuration reset to defaults.")

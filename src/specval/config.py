"""Configuration management with XDG paths, atomic writes, and precedence resolution.

This module handles all persistent configuration for specval:

* **Directory layout** -- XDG Base Directory compliant on Linux/BSD,
  ``~/.specval/`` on macOS and Windows. See :func:`get_config_dir` and
  :func:`get_data_dir`.
* **Global config** -- A single :class:`~specval.models.GlobalConfig`
  JSON file storing default validation options, output format and HTTP
  settings.
* **Project config** -- An optional ``./specval.json`` whose keys mirror
  :class:`~specval.models.GlobalConfig`, so a repository can pin e.g.
  ``{"validation": {"strict": true}}``.
* **Precedence resolution** -- :func:`resolve_options` merges CLI flags,
  environment variables, project config and global config into the
  effective :class:`~specval.models.ValidationOptions`.

All file writes use an atomic temp-file-then-rename strategy
(:func:`atomic_write`) to prevent data loss on crash or power failure.
"""

from __future__ import annotations

import json
import os
import platform
import tempfile
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError

from specval.exceptions import ConfigError
from specval.models import GlobalConfig, ValidationOptions

_APP_NAME = "specval"
_CONFIG_FILENAME = "config.json"
_PROJECT_CONFIG_FILENAME = "specval.json"

ENV_STRICT = "SPECVAL_STRICT"
ENV_MAX_REF_DEPTH = "SPECVAL_MAX_REF_DEPTH"
ENV_HTTP_TIMEOUT = "SPECVAL_HTTP_TIMEOUT"

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off", "")


# --- XDG path resolution ---


def _is_xdg_platform() -> bool:
    """Return True if the platform supports XDG Base Directory spec (Linux/FreeBSD)."""
    return platform.system() == "Linux" or platform.system().endswith("BSD")


def _fallback_base_dir() -> Path:
    """Fallback base directory for non-XDG platforms (macOS, Windows)."""
    return Path.home() / f".{_APP_NAME}"


def _xdg_base(env_var: str, default_segments: tuple[str, ...]) -> Path:
    """Resolve an XDG base directory from an env var with fallback segments under $HOME."""
    env_value = os.environ.get(env_var, "")
    if env_value:
        return Path(env_value)
    base = Path.home()
    for seg in default_segments:
        base = base / seg
    return base


def get_config_dir() -> Path:
    """Return the configuration directory, creating it if necessary.

    On Linux/BSD: ``$XDG_CONFIG_HOME/specval/`` (default ``~/.config/specval/``).
    On macOS/Windows: ``~/.specval/``.
    """
    if _is_xdg_platform():
        path = _xdg_base("XDG_CONFIG_HOME", (".config",)) / _APP_NAME
    else:
        path = _fallback_base_dir()
    path.mkdir(parents=True, exist_ok=True)
    return path


def get_data_dir() -> Path:
    """Return the data directory (crash logs), creating it if necessary.

    On Linux/BSD: ``$XDG_DATA_HOME/specval/`` (default ``~/.local/share/specval/``).
    On macOS/Windows: ``~/.specval/logs/``.
    """
    if _is_xdg_platform():
        path = _xdg_base("XDG_DATA_HOME", (".local", "share")) / _APP_NAME
    else:
        path = _fallback_base_dir() / "logs"
    path.mkdir(parents=True, exist_ok=True)
    return path


# --- Atomic file writes ---


def atomic_write(path: Path, data: str) -> None:
    """Write data to file atomically using temp file + rename.

    The temporary file is created in the same directory as *path* so that
    ``os.replace`` is an atomic rename on POSIX systems. On any failure the
    temp file is cleaned up.
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    fd = None
    tmp_path: Optional[str] = None
    try:
        fd = tempfile.NamedTemporaryFile(
            mode="w",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
            encoding="utf-8",
        )
        tmp_path = fd.name
        fd.write(data)
        fd.flush()
        os.fsync(fd.fileno())
        fd.close()
        fd = None
        os.replace(tmp_path, path)
    except BaseException:
        if fd is not None:
            fd.close()
        if tmp_path is not None:
            try:
                os.unlink(tmp_path)
            except OSError:
                pass
        raise


# --- Global config ---


def _global_config_path() -> Path:
    return get_config_dir() / _CONFIG_FILENAME


def load_global_config() -> GlobalConfig:
    """Load the global configuration from the config directory.

    Returns:
        The deserialised :class:`~specval.models.GlobalConfig`, or a default
        instance if the file does not exist.

    Raises:
        ConfigError: If the file exists but contains invalid JSON or fails
            Pydantic validation.
    """
    path = _global_config_path()
    if not path.is_file():
        return GlobalConfig()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        return GlobalConfig.model_validate(data)
    except (json.JSONDecodeError, ValueError) as exc:
        raise ConfigError(f"Invalid global config at {path}: {exc}") from exc


def save_global_config(config: GlobalConfig) -> None:
    """Persist the global configuration atomically to disk."""
    data = config.model_dump(mode="json")
    atomic_write(_global_config_path(), json.dumps(data, indent=2) + "\n")


# --- Project-local config ---


def load_project_config() -> Optional[dict[str, Any]]:
    """Load project-local configuration from ``./specval.json``.

    Returns:
        The parsed JSON object, or ``None`` if the file does not exist.

    Raises:
        ConfigError: If the file exists but is not a JSON object.
    """
    path = Path.cwd() / _PROJECT_CONFIG_FILENAME
    if not path.is_file():
        return None
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, ValueError) as exc:
        raise ConfigError(f"Invalid project config at {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Invalid project config at {path}: expected a JSON object")
    return data


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


# --- Environment ---


def _env_bool(name: str) -> Optional[bool]:
    raw = os.environ.get(name)
    if raw is None:
        return None
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigError(f"{name} must be a boolean (got {raw!r})")


def _env_number(name: str, kind: type) -> Optional[Any]:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return None
    try:
        return kind(raw)
    except ValueError as exc:
        raise ConfigError(f"{name} must be a {kind.__name__} (got {raw!r})") from exc


def _env_overrides() -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    validation: dict[str, Any] = {}

    strict = _env_bool(ENV_STRICT)
    if strict is not None:
        validation["strict"] = strict
    depth = _env_number(ENV_MAX_REF_DEPTH, int)
    if depth is not None:
        validation["max_ref_depth"] = depth
    if validation:
        overrides["validation"] = validation

    timeout = _env_number(ENV_HTTP_TIMEOUT, float)
    if timeout is not None:
        overrides["http"] = {"timeout": timeout}
    return overrides


# --- Precedence resolution ---


def resolve_config(cli_format: Optional[str] = None) -> GlobalConfig:
    """Resolve the effective :class:`~specval.models.GlobalConfig`.

    Precedence (high to low):
        1. CLI flags (``cli_format``)
        2. Environment variables (``SPECVAL_STRICT``,
           ``SPECVAL_MAX_REF_DEPTH``, ``SPECVAL_HTTP_TIMEOUT``)
        3. Project config (``./specval.json``)
        4. User config (``~/.config/specval/config.json``)
        5. Defaults

    Raises:
        ConfigError: If any layer holds an invalid value.
    """
    data = load_global_config().model_dump(mode="json")

    project = load_project_config()
    if project is not None:
        data = _deep_merge(data, project)

    data = _deep_merge(data, _env_overrides())

    if cli_format is not None:
        data = _deep_merge(data, {"output": {"format": cli_format}})

    try:
        return GlobalConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc


def resolve_options(
    cli_overrides: Optional[dict[str, Any]] = None,
    config: Optional[GlobalConfig] = None,
) -> ValidationOptions:
    """Resolve the effective validation options.

    Args:
        cli_overrides: Options given on the command line. ``None`` values
            mean "not given" and do not override lower layers.
        config: Already-resolved configuration. Resolved with
            :func:`resolve_config` when omitted.

    Raises:
        ConfigError: If the merged options are invalid (e.g. a
            ``max_ref_depth`` below 1).
    """
    config = config or resolve_config()
    data = config.validation.model_dump()
    for key, value in (cli_overrides or {}).items():
        if value is not None:
            data[key] = value
    try:
        return ValidationOptions.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid validation options: {exc}") from exc

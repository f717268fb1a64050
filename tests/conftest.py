"""Shared test fixtures for specval.

Provides reusable fixtures for locating and loading document fixtures,
creating isolated config environments, managing output state, and running
CLI commands. These fixtures are automatically discovered by pytest and
available to all test modules without explicit imports.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import pytest

from specval.output import OutputFormat, OutputManager, reset_output, set_output


FIXTURES_DIR = Path(__file__).parent / "fixtures"


# ---------------------------------------------------------------------------
# Auto-reset global output state between tests
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_output_between_tests() -> None:
    """Reset the global OutputManager after every test.

    The OutputManager caches references to sys.stdout/sys.stderr at
    creation time.  When Typer's CliRunner redirects those streams during
    a test and the test finishes, the cached references become stale
    ("I/O operation on closed file").  Resetting forces a fresh manager
    to be created on next use.
    """
    yield
    reset_output()


@pytest.fixture(autouse=True)
def _restore_logging() -> None:
    """Undo the handler the CLI callback attaches to the ``specval`` logger.

    The handler writes to the console of the test that installed it, which
    is closed once that test's CliRunner exits.
    """
    logger = logging.getLogger("specval")
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield
    logger.handlers = handlers
    logger.setLevel(level)
    logger.propagate = propagate


# ---------------------------------------------------------------------------
# Fixture paths
# ---------------------------------------------------------------------------


@pytest.fixture
def petstore_30_path() -> str:
    return str(FIXTURES_DIR / "petstore_3.0.json")


@pytest.fixture
def swagger_20_path() -> str:
    return str(FIXTURES_DIR / "swagger_2.0.json")


@pytest.fixture
def webhooks_31_path() -> str:
    return str(FIXTURES_DIR / "webhooks_3.1.yaml")


@pytest.fixture
def split_spec_path() -> str:
    """Root of a document whose references point into sibling files."""
    return str(FIXTURES_DIR / "split" / "openapi.yaml")


@pytest.fixture
def self_reference_path() -> str:
    return str(FIXTURES_DIR / "self_reference.json")


@pytest.fixture
def missing_fields_path() -> str:
    return str(FIXTURES_DIR / "missing_fields.json")


@pytest.fixture
def unparseable_path() -> str:
    return str(FIXTURES_DIR / "not_a_spec.yaml")


# ---------------------------------------------------------------------------
# Raw spec fixtures (plain dicts loaded from JSON files)
# ---------------------------------------------------------------------------


@pytest.fixture
def petstore_30_raw(petstore_30_path: str) -> dict[str, Any]:
    """Load raw petstore 3.0 spec dict."""
    with open(petstore_30_path) as f:
        return json.load(f)


@pytest.fixture
def swagger_20_raw(swagger_20_path: str) -> dict[str, Any]:
    """Load raw Swagger 2.0 spec dict."""
    with open(swagger_20_path) as f:
        return json.load(f)


@pytest.fixture
def minimal_30_raw() -> dict[str, Any]:
    """The smallest document the 3.0 schema accepts."""
    return {"openapi": "3.0.3", "info": {"title": "S", "version": "1"}, "paths": {}}


# ---------------------------------------------------------------------------
# Config isolation fixture
# ---------------------------------------------------------------------------


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Isolate configuration to a temporary directory.

    Sets XDG_CONFIG_HOME and XDG_DATA_HOME to subdirectories of tmp_path
    so that tests never touch real user config. Clears all SPECVAL_*
    environment variables and changes the working directory to tmp_path.

    Returns:
        The tmp_path root directory for additional file creation.
    """
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    monkeypatch.setattr("specval.config._is_xdg_platform", lambda: True)

    for var in [
        "SPECVAL_STRICT",
        "SPECVAL_MAX_REF_DEPTH",
        "SPECVAL_HTTP_TIMEOUT",
    ]:
        monkeypatch.delenv(var, raising=False)

    monkeypatch.chdir(tmp_path)
    return tmp_path


# ---------------------------------------------------------------------------
# Output fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def quiet_output() -> OutputManager:
    """Set up a quiet output manager for tests that don't care about output."""
    output = OutputManager(format=OutputFormat.PLAIN, quiet=True)
    set_output(output)
    yield output
    reset_output()


@pytest.fixture
def json_output() -> OutputManager:
    """Set up JSON output for tests that check JSON-formatted output."""
    output = OutputManager(format=OutputFormat.JSON)
    set_output(output)
    yield output
    reset_output()


# ---------------------------------------------------------------------------
# CLI runner fixture
# ---------------------------------------------------------------------------


@pytest.fixture
def cli_runner():
    """Typer CLI test runner."""
    from typer.testing import CliRunner

    return CliRunner()

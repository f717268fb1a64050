"""Exception hierarchy for specval.

All exceptions inherit from :class:`SpecvalError`, which carries an
``exit_code`` attribute mapped to a constant from :mod:`specval.exit_codes`.
The top-level error handler in :func:`specval.app.main` catches
``SpecvalError`` and exits with the appropriate code, while unexpected
exceptions produce a crash log and exit with :data:`EXIT_GENERIC_FAILURE`.

Subclass hierarchy::

    SpecvalError (exit 1)
    +-- InvalidUsageError        (exit 2)
    +-- ValidationFailedError    (exit 3)
    +-- SpecParseError           (exit 7)
    |   +-- UnsupportedVersionError
    +-- SchemaNotFoundError      (exit 8)
    +-- ResolutionError          (exit 9)
    |   +-- DepthExceededError
    +-- ReportError              (exit 1)
    +-- ConfigError              (exit 1)
"""

from specval.exit_codes import (
    EXIT_GENERIC_FAILURE,
    EXIT_INVALID_USAGE,
    EXIT_REFERENCE_ERROR,
    EXIT_SCHEMA_ERROR,
    EXIT_SPEC_PARSE_ERROR,
    EXIT_VALIDATION_FAILED,
)


class SpecvalError(Exception):
    """Base exception for all specval errors.

    Every subclass sets a class-level ``exit_code`` corresponding to one of
    the constants in :mod:`specval.exit_codes`. The entry point catches
    this exception type and calls ``sys.exit(exc.exit_code)``.

    Args:
        message: Human-readable error description printed to stderr.
        exit_code: Optional override for the class-level exit code.
    """

    exit_code: int = EXIT_GENERIC_FAILURE

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class InvalidUsageError(SpecvalError):
    """Raised for invalid CLI arguments or option values."""

    exit_code = EXIT_INVALID_USAGE


class ValidationFailedError(SpecvalError):
    """Raised by CLI commands when a document was validated and found invalid."""

    exit_code = EXIT_VALIDATION_FAILED


class SpecParseError(SpecvalError):
    """Raised when a document cannot be loaded or parsed."""

    exit_code = EXIT_SPEC_PARSE_ERROR


class UnsupportedVersionError(SpecParseError):
    """Raised when a document declares no version, or one specval cannot handle."""


class SchemaNotFoundError(SpecvalError):
    """Raised when the whole-document schema for a version is missing."""

    exit_code = EXIT_SCHEMA_ERROR


class ResolutionError(SpecvalError):
    """Raised when a ``$ref`` pointer cannot be resolved."""

    exit_code = EXIT_REFERENCE_ERROR


class DepthExceededError(ResolutionError):
    """Raised when a resolution chain reaches the configured maximum depth.

    Not wrapped by the resolver: it aborts the current chain as-is.
    """


class ReportError(SpecvalError):
    """Raised when a report cannot be rendered or written."""

    exit_code = EXIT_GENERIC_FAILURE


class ConfigError(SpecvalError):
    """Raised for configuration problems (invalid JSON, bad option values)."""

    exit_code = EXIT_GENERIC_FAILURE

"""Numeric process exit codes following `clig.dev <https://clig.dev/>`_ conventions.

Each constant maps to a specific error category and is referenced by the
corresponding :class:`~specval.exceptions.SpecvalError` subclass.
CI pipelines can inspect the exit code to tell an invalid document apart
from a document that could not be read at all.

Example::

    $ specval validate broken.yaml
    $ echo $?
    3   # EXIT_VALIDATION_FAILED -- the document has errors
"""

EXIT_SUCCESS = 0
"""The command completed successfully."""

EXIT_GENERIC_FAILURE = 1
"""An unclassified error occurred."""

EXIT_INVALID_USAGE = 2
"""The command was invoked with invalid arguments or missing required parameters."""

EXIT_VALIDATION_FAILED = 3
"""Validation ran to completion and reported at least one error."""

EXIT_SPEC_PARSE_ERROR = 7
"""The document could not be loaded, parsed, or its version detected."""

EXIT_SCHEMA_ERROR = 8
"""No validation schema is available for the document's version."""

EXIT_REFERENCE_ERROR = 9
"""A ``$ref`` pointer could not be resolved."""

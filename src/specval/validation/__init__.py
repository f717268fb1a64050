"""Schema-driven validation of whole documents and referenced fragments.

Sub-modules:

* :mod:`~specval.validation.schemas` -- Published JSON schemas per family.
* :mod:`~specval.validation.evaluator` -- :mod:`jsonschema` adapter and the
  error/warning severity policy.
* :mod:`~specval.validation.registry` -- Compiled validator per version
  bucket and fragment kind.
* :mod:`~specval.validation.classifier` -- Infers a fragment's kind.
* :mod:`~specval.validation.partial` -- Validates one fragment.
* :mod:`~specval.validation.document` -- Validates a whole document.
* :mod:`~specval.validation.recursive` -- Root plus referenced fragments,
  batches, and reference analysis.
"""

from specval.validation.classifier import detect_partial_type
from specval.validation.document import validate_spec
from specval.validation.partial import validate_partial_document
from specval.validation.recursive import (
    analyze_references,
    validate_multiple_recursively,
    validate_recursively,
)
from specval.validation.registry import SchemaRegistry, get_registry

__all__ = [
    "SchemaRegistry",
    "analyze_references",
    "detect_partial_type",
    "get_registry",
    "validate_multiple_recursively",
    "validate_partial_document",
    "validate_recursively",
    "validate_spec",
]

"""Thin adapter over :mod:`jsonschema` that yields flat, path-addressed violations.

:func:`compile_schema` picks the validator class matching a schema's
``$schema`` draft and wires in that draft's format checker. Violations raised
inside combinators (``oneOf``, ``anyOf``, ``allOf``, ``if``/``then``) carry
the failures of each branch in ``error.context``; those are flattened so a
missing required field deep inside a ``oneOf`` branch still surfaces as a
``required`` violation.

:func:`partition` applies the fixed severity policy: ``required`` and
``type`` violations are errors, everything else is a warning.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any

from jsonschema.exceptions import ValidationError as SchemaViolation
from jsonschema.validators import validator_for

from specval.models import ValidationIssue

ERROR_KEYWORDS = frozenset({"required", "type"})


@dataclass(frozen=True)
class Violation:
    """One failed schema keyword.

    Attributes:
        keyword: The JSON Schema keyword that failed (``required``,
            ``enum``, ...).
        instance_path: JSON Pointer to the offending value, ``""`` for the
            document root.
        schema_path: ``#``-prefixed pointer into the schema.
        message: Human-readable description from the evaluator.
        data: The offending value.
    """

    keyword: str
    instance_path: str
    schema_path: str
    message: str
    data: Any = None

    def to_issue(self) -> ValidationIssue:
        return ValidationIssue(
            path=self.instance_path or self.schema_path or "/",
            message=self.message or "Validation error",
            data=self.data,
            schema_path=self.schema_path,
        )


CompiledSchema = Callable[[Any], list[Violation]]


def _escape(segment: Any) -> str:
    return str(segment).replace("~", "~0").replace("/", "~1")


def _pointer(segments: Iterable[Any]) -> str:
    return "".join(f"/{_escape(segment)}" for segment in segments)


def _flatten(errors: Iterable[SchemaViolation]) -> Iterator[Violation]:
    for error in errors:
        if error.context:
            yield from _flatten(error.context)
        yield Violation(
            keyword=str(error.validator),
            instance_path=_pointer(error.absolute_path),
            schema_path="#" + _pointer(error.absolute_schema_path),
            message=error.message,
            data=error.instance,
        )


def compile_schema(schema: dict[str, Any]) -> CompiledSchema:
    """Compile *schema* into a reusable evaluation function.

    Args:
        schema: A JSON schema. Its ``$schema`` key selects the draft;
            schemas without one are evaluated with the latest draft.

    Returns:
        A function mapping an instance to its violations, in the order the
        evaluator reports them. An empty list means the instance is valid.
    """
    cls = validator_for(schema)
    validator = cls(schema, format_checker=cls.FORMAT_CHECKER)

    def evaluate(instance: Any) -> list[Violation]:
        return list(_flatten(validator.iter_errors(instance)))

    return evaluate


def partition(
    violations: Iterable[Violation],
) -> tuple[list[ValidationIssue], list[ValidationIssue]]:
    """Split violations into ``(errors, warnings)`` by keyword."""
    errors: list[ValidationIssue] = []
    warnings: list[ValidationIssue] = []
    for violation in violations:
        if violation.keyword in ERROR_KEYWORDS:
            errors.append(violation.to_issue())
        else:
            warnings.append(violation.to_issue())
    return errors, warnings


def check_schema(schema: dict[str, Any]) -> None:
    """Raise :class:`jsonschema.exceptions.SchemaError` if *schema* is malformed."""
    validator_for(schema).check_schema(schema)

"""Guess which OpenAPI object a referenced fragment is.

Fragments reached through ``$ref`` carry no type information, so the kind is
inferred from which keys they set. The checks run in a fixed priority order
and the first one that matches decides; the order matters because the shapes
overlap (a response and an example both have a ``description``).
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Optional

from specval.models import FragmentKind

_OPERATION_KEYS = ("get", "post", "put", "delete", "patch", "head", "options")
_SCHEMA_KEYS = ("type", "properties", "items", "allOf", "oneOf", "anyOf")


def _set(doc: dict[str, Any], key: str) -> bool:
    """A key is set when present with a value other than None, False, 0 or ''."""
    value = doc.get(key)
    if value is None or value is False or value == "":
        return False
    if isinstance(value, (int, float)) and not isinstance(value, bool) and value == 0:
        return False
    return True


def _any_set(doc: dict[str, Any], keys: tuple[str, ...]) -> bool:
    return any(_set(doc, key) for key in keys)


_RULES: tuple[tuple[FragmentKind, Callable[[dict[str, Any]], bool]], ...] = (
    (FragmentKind.SCHEMA, lambda d: _any_set(d, _SCHEMA_KEYS)),
    (FragmentKind.PARAMETER, lambda d: _set(d, "name") and _any_set(d, ("in", "parameter"))),
    (
        FragmentKind.RESPONSE,
        lambda d: _set(d, "description") and _any_set(d, ("content", "schema", "headers")),
    ),
    (FragmentKind.PATHITEM, lambda d: _any_set(d, _OPERATION_KEYS)),
    (FragmentKind.REQUESTBODY, lambda d: _set(d, "content") and not _set(d, "description")),
    (FragmentKind.HEADER, lambda d: _set(d, "schema") and not _set(d, "name")),
    (
        FragmentKind.EXAMPLE,
        lambda d: _any_set(d, ("summary", "description")) or "value" in d,
    ),
    (FragmentKind.LINK, lambda d: _any_set(d, ("operationRef", "operationId"))),
    (
        FragmentKind.CALLBACK,
        lambda d: isinstance(d.get("expression"), str) and d["expression"] != "",
    ),
    (
        FragmentKind.SECURITYSCHEME,
        lambda d: _set(d, "type") and _any_set(d, ("flows", "openIdConnectUrl", "scheme")),
    ),
)


def detect_partial_type(fragment: Any, version: Optional[str] = None) -> Optional[FragmentKind]:
    """Return the kind of OpenAPI object *fragment* looks like.

    The same input always yields the same kind; *version* does not take
    part in the decision.

    Args:
        fragment: A resolved reference target.
        version: Version the fragment will be validated under.

    Returns:
        The matching :class:`~specval.models.FragmentKind`, or ``None`` if
        no rule matches or *fragment* is not a mapping.

    Example::

        detect_partial_type({"type": "string"})              # SCHEMA
        detect_partial_type({"name": "id", "in": "query"})   # PARAMETER
        detect_partial_type({})                              # None
    """
    if not isinstance(fragment, dict):
        return None
    for kind, matches in _RULES:
        if matches(fragment):
            return kind
    return None

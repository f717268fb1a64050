"""Locate every ``$ref`` occurrence in a raw document tree."""

from __future__ import annotations

from typing import Any

from specval.models import Reference


def find_references(tree: Any, path: str = "") -> list[Reference]:
    """Collect all ``$ref`` pointers in *tree*.

    The walk is depth-first and pre-order, visiting keys in insertion order.
    A key literally named ``$ref`` whose value is a string is recorded with
    its dot-joined location; list positions appear as integers
    (``paths./pets.get.parameters.0.$ref``). A ``$ref`` with a non-string
    value is descended into like any other key.

    The tree is assumed to be a plain JSON/YAML parse result, so no cycle
    protection is applied.

    Args:
        tree: Any parsed JSON/YAML value.
        path: Location prefix for the values found under *tree*.

    Returns:
        The references in encounter order.
    """
    refs: list[Reference] = []

    if isinstance(tree, dict):
        items = tree.items()
    elif isinstance(tree, list):
        items = enumerate(tree)
    else:
        return refs

    for key, value in items:
        current = f"{path}.{key}" if path else str(key)
        if key == "$ref" and isinstance(value, str):
            refs.append(Reference(path=current, value=value))
        elif isinstance(value, (dict, list)):
            refs.extend(find_references(value, current))

    return refs

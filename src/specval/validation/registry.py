"""Lookup table from (version bucket, fragment kind) to a compiled schema.

Whole documents are checked against the published root schema of their
family. Fragments are checked against a wrapper schema that carries the root
schema's identifier and definitions and points ``$ref`` at the definition for
the fragment's kind, so references between definitions keep resolving.

Swagger 2.0 defines only ``schema``, ``parameter``, ``response`` and
``pathitem`` fragments; the OpenAPI 3.x families define all ten.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from specval.exceptions import SchemaNotFoundError, UnsupportedVersionError
from specval.models import FragmentKind, SpecFamily
from specval.validation import schemas
from specval.validation.evaluator import CompiledSchema, compile_schema

logger = logging.getLogger(__name__)

_DOCUMENT_SCHEMAS: dict[SpecFamily, dict[str, Any]] = {
    SpecFamily.SWAGGER_2_0: schemas.SWAGGER_20,
    SpecFamily.OPENAPI_3_0: schemas.OPENAPI_30,
    SpecFamily.OPENAPI_3_1: schemas.OPENAPI_31,
    SpecFamily.OPENAPI_3_2: schemas.OPENAPI_32,
}

_OPENAPI_31_DEFINITIONS = {
    FragmentKind.SCHEMA: "schema",
    FragmentKind.PARAMETER: "parameter",
    FragmentKind.RESPONSE: "response",
    FragmentKind.PATHITEM: "path-item",
    FragmentKind.REQUESTBODY: "request-body",
    FragmentKind.HEADER: "header",
    FragmentKind.EXAMPLE: "example",
    FragmentKind.LINK: "link",
    FragmentKind.CALLBACK: "callbacks",
    FragmentKind.SECURITYSCHEME: "security-scheme",
}

# Definition names differ between the published schemas.
_FRAGMENT_DEFINITIONS: dict[SpecFamily, dict[FragmentKind, str]] = {
    SpecFamily.SWAGGER_2_0: {
        FragmentKind.SCHEMA: "schema",
        FragmentKind.PARAMETER: "parameter",
        FragmentKind.RESPONSE: "response",
        FragmentKind.PATHITEM: "pathItem",
    },
    SpecFamily.OPENAPI_3_0: {
        FragmentKind.SCHEMA: "Schema",
        FragmentKind.PARAMETER: "Parameter",
        FragmentKind.RESPONSE: "Response",
        FragmentKind.PATHITEM: "PathItem",
        FragmentKind.REQUESTBODY: "RequestBody",
        FragmentKind.HEADER: "Header",
        FragmentKind.EXAMPLE: "Example",
        FragmentKind.LINK: "Link",
        FragmentKind.CALLBACK: "Callback",
        FragmentKind.SECURITYSCHEME: "SecurityScheme",
    },
    SpecFamily.OPENAPI_3_1: _OPENAPI_31_DEFINITIONS,
    SpecFamily.OPENAPI_3_2: _OPENAPI_31_DEFINITIONS,
}


def fragment_schema(root: dict[str, Any], definition: str) -> dict[str, Any]:
    """Wrap *root* so that it validates against one of its own definitions.

    Args:
        root: A document schema with a ``definitions`` or ``$defs`` table.
        definition: Name of the entry in that table.

    Returns:
        A new schema sharing *root*'s draft, identifier and definitions.
    """
    keyword = "$defs" if "$defs" in root else "definitions"
    wrapper = {key: root[key] for key in ("$schema", "id", "$id") if key in root}
    wrapper[keyword] = root[keyword]
    wrapper["$ref"] = f"#/{keyword}/{definition}"
    return wrapper


class SchemaRegistry:
    """Hands out compiled validators, compiling each one at most once.

    Args:
        documents: Root schema per family. Defaults to the bundled schemas.
        fragments: Definition name per family and fragment kind.

    Example::

        registry = SchemaRegistry()
        evaluate = registry.get("3.0.3", FragmentKind.PARAMETER)
        violations = evaluate({"name": "id", "in": "query"})
    """

    def __init__(
        self,
        documents: Optional[dict[SpecFamily, dict[str, Any]]] = None,
        fragments: Optional[dict[SpecFamily, dict[FragmentKind, str]]] = None,
    ) -> None:
        self._documents = dict(_DOCUMENT_SCHEMAS if documents is None else documents)
        self._fragments = dict(_FRAGMENT_DEFINITIONS if fragments is None else fragments)
        self._compiled: dict[tuple[SpecFamily, FragmentKind], CompiledSchema] = {}

    def families(self) -> list[SpecFamily]:
        """Families with a document schema, in registration order."""
        return list(self._documents)

    def kinds(self, version: str) -> list[FragmentKind]:
        """Fragment kinds that have a schema for *version*."""
        family = _family(version)
        if family is None:
            return []
        return list(self._fragments.get(family, {}))

    def get_schema(
        self, version: str, kind: FragmentKind = FragmentKind.SPECIFICATION
    ) -> Optional[dict[str, Any]]:
        """Return the raw JSON schema for *version* and *kind*, or None."""
        family = _family(version)
        if family is None or family not in self._documents:
            return None
        root = self._documents[family]
        if kind is FragmentKind.SPECIFICATION:
            return root
        definition = self._fragments.get(family, {}).get(kind)
        if definition is None:
            return None
        return fragment_schema(root, definition)

    def get(
        self, version: str, kind: FragmentKind = FragmentKind.SPECIFICATION
    ) -> Optional[CompiledSchema]:
        """Return the compiled validator for *version* and *kind*.

        Any version beginning with ``3.0``, ``3.1`` or ``3.2`` shares its
        bucket's validator.

        Returns:
            The validator, or ``None`` when no fragment schema exists for the
            combination.

        Raises:
            SchemaNotFoundError: If *kind* is ``SPECIFICATION`` and the
                version has no document schema.
        """
        family = _family(version)
        key = (family, kind)
        if family is not None and key in self._compiled:
            return self._compiled[key]

        schema = self.get_schema(version, kind)
        if schema is None:
            if kind is FragmentKind.SPECIFICATION:
                raise SchemaNotFoundError(f"No schema available for OpenAPI version: {version}")
            return None

        logger.debug("Compiling %s schema for %s", kind.value, family.value)
        compiled = compile_schema(schema)
        self._compiled[key] = compiled
        return compiled


def _family(version: str) -> Optional[SpecFamily]:
    try:
        return SpecFamily.from_version(version)
    except UnsupportedVersionError:
        return None


_default_registry: Optional[SchemaRegistry] = None


def get_registry() -> SchemaRegistry:
    """Return the process-wide registry, creating it on first use."""
    global _default_registry
    if _default_registry is None:
        _default_registry = SchemaRegistry()
    return _default_registry

"""Resolve ``$ref`` pointers to the content they name.

Three kinds of reference are understood:

* **Internal** -- ``#/components/schemas/Pet`` is looked up in the document
  the reference was found in, following RFC 6901 JSON Pointer rules.
* **File-relative** -- ``common.yaml`` or ``schemas/pet.json#/Pet`` is
  resolved against the directory of the referring document (or joined onto
  its URL when the referring document was fetched remotely).
* **Remote** -- ``https://example.com/pet.json`` is fetched with httpx and
  parsed as JSON.

Cycle detection is chain-local: a reference is only circular while it is
already being resolved further up the same chain. The ``visited`` set of a
:class:`ResolutionContext` is mutated exclusively through
:meth:`ResolutionContext.visiting`, so a reference is always released again
however its resolution ends.

Depth enforcement is shallow: :func:`resolve_reference` compares
``current_depth`` against ``max_depth`` but does not deepen the context
itself.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any
from urllib.parse import urljoin

import httpx

from specval.exceptions import DepthExceededError, ResolutionError, SpecvalError
from specval.models import Reference, ResolvedReference
from specval.parser.loader import (
    DEFAULT_TIMEOUT,
    detect_document_version,
    format_hint,
    is_url,
    load_source,
    parse_content,
)
from specval.parser.references import find_references

logger = logging.getLogger(__name__)

_ARRAY_INDEX = re.compile(r"0|[1-9][0-9]*")


@dataclass
class ResolutionContext:
    """Mutable state shared by the resolutions of one document.

    Attributes:
        base_path: Path or URL of the referring document; relative
            references are resolved against it.
        base_document: The referring document's tree, used for ``#/``
            references.
        max_depth: Depth at which resolution is refused.
        current_depth: Depth of the chain being resolved.
        visited: Reference strings currently being resolved on this chain.
        timeout: Request timeout in seconds for remote references.
    """

    base_path: str
    base_document: Any
    max_depth: int = 10
    current_depth: int = 0
    visited: set[str] = field(default_factory=set)
    timeout: float = DEFAULT_TIMEOUT

    @contextmanager
    def visiting(self, ref: str) -> Iterator[None]:
        """Mark *ref* as in progress for the duration of the block."""
        self.visited.add(ref)
        try:
            yield
        finally:
            self.visited.discard(ref)


@dataclass
class ResolvedDocument:
    """Everything :func:`resolve_all_references` learned about a document."""

    document: Any
    resolved: list[ResolvedReference] = field(default_factory=list)
    circular: list[str] = field(default_factory=list)
    failed: list[Reference] = field(default_factory=list)


def resolve_pointer(document: Any, pointer: str) -> Any:
    """Walk *document* along an RFC 6901 JSON Pointer.

    Args:
        document: The tree to walk.
        pointer: A pointer such as ``/components/schemas/Pet``. The empty
            string names the whole document. A leading ``#`` is ignored.

    Returns:
        The value the pointer names.

    Raises:
        ResolutionError: If any segment does not exist.
    """
    if pointer.startswith("#"):
        pointer = pointer[1:]
    if not pointer:
        return document
    if not pointer.startswith("/"):
        raise ResolutionError(f"Invalid JSON pointer: {pointer!r}")

    current = document
    for raw in pointer[1:].split("/"):
        segment = raw.replace("~1", "/").replace("~0", "~")
        if isinstance(current, dict):
            if segment not in current:
                raise ResolutionError(f"Reference not found: key '{segment}' missing")
            current = current[segment]
        elif isinstance(current, list):
            if not _ARRAY_INDEX.fullmatch(segment) or int(segment) >= len(current):
                raise ResolutionError(f"Reference not found: invalid array index '{segment}'")
            current = current[int(segment)]
        else:
            raise ResolutionError(
                f"Reference not found: cannot navigate into {type(current).__name__}"
            )
    return current


def resolve_reference(ref: str, context: ResolutionContext) -> ResolvedReference:
    """Resolve a single reference string.

    Args:
        ref: The ``$ref`` value.
        context: Shared resolution state for the referring document.

    Returns:
        The :class:`~specval.models.ResolvedReference`. When *ref* is
        already being resolved on this chain it is returned with
        ``is_circular=True`` and no content instead of being followed.

    Raises:
        DepthExceededError: If the context is already at ``max_depth``.
        ResolutionError: For any other failure, with a message of the form
            ``Failed to resolve reference '<ref>': <cause>``.
    """
    if ref in context.visited:
        logger.debug("Circular reference %s", ref)
        return ResolvedReference(path=ref, is_circular=True, depth=context.current_depth)

    if context.current_depth >= context.max_depth:
        raise DepthExceededError(f"Maximum reference depth ({context.max_depth}) exceeded")

    with context.visiting(ref):
        try:
            if ref.startswith("#"):
                content = resolve_pointer(context.base_document, ref)
                return ResolvedReference(
                    path=ref, content=content, depth=context.current_depth
                )

            target, _, fragment = ref.partition("#")
            if is_url(target):
                content = _fetch_json(target, context.timeout)
            elif is_url(context.base_path):
                content = _fetch_json(urljoin(context.base_path, target), context.timeout)
            else:
                content = _load_file(_relative_to(context.base_path, target), context.timeout)

            if fragment:
                content = resolve_pointer(content, fragment)
        except SpecvalError as exc:
            raise ResolutionError(f"Failed to resolve reference '{ref}': {exc}") from exc

    return ResolvedReference(
        path=ref,
        content=content,
        version=detect_document_version(content),
        depth=context.current_depth,
    )


def _relative_to(base_path: str, target: str) -> Path:
    base_dir = Path.cwd() if base_path in ("", "-") else Path(base_path).resolve().parent
    return (base_dir / target).resolve()


def _load_file(path: Path, timeout: float) -> Any:
    logger.debug("Loading referenced file %s", path)
    return parse_content(load_source(str(path), timeout=timeout), hint=format_hint(path.name))


def _fetch_json(url: str, timeout: float) -> Any:
    logger.debug("Fetching remote reference %s", url)
    try:
        response = httpx.get(url, timeout=timeout, follow_redirects=True)
        response.raise_for_status()
        return response.json()
    except httpx.HTTPStatusError as exc:
        raise ResolutionError(
            f"Failed to fetch external reference: HTTP {exc.response.status_code}"
        ) from exc
    except httpx.RequestError as exc:
        raise ResolutionError(f"Failed to fetch external reference: {exc}") from exc
    except ValueError as exc:
        raise ResolutionError(f"External reference is not valid JSON: {exc}") from exc


def resolve_all_references(
    document: Any,
    base_path: str,
    max_depth: int = 10,
    timeout: float = DEFAULT_TIMEOUT,
) -> ResolvedDocument:
    """Resolve every reference found directly in *document*.

    All references share one :class:`ResolutionContext`. A reference that
    fails to resolve, including one that hits the depth limit, is logged as
    a warning and recorded in :attr:`ResolvedDocument.failed`; the remaining
    references are still attempted.

    Args:
        document: The root document tree.
        base_path: Path or URL the document was loaded from.
        max_depth: Depth at which resolution is refused.
        timeout: Request timeout in seconds for remote references.
    """
    context = ResolutionContext(
        base_path=base_path,
        base_document=document,
        max_depth=max_depth,
        timeout=timeout,
    )
    outcome = ResolvedDocument(document=document)

    for reference in find_references(document):
        try:
            resolved = resolve_reference(reference.value, context)
        except ResolutionError as exc:
            logger.warning("Skipping reference '%s': %s", reference.value, exc)
            outcome.failed.append(reference)
            continue

        outcome.resolved.append(resolved)
        if resolved.is_circular:
            outcome.circular.append(reference.value)

    logger.debug(
        "Resolved %d of %d references in %s",
        len(outcome.resolved),
        len(outcome.resolved) + len(outcome.failed),
        base_path,
    )
    return outcome


def local_reference_exists(document: Any, ref: str) -> bool:
    """Return True if *ref* names something inside *document* itself.

    External references never exist by this definition.
    """
    if not ref.startswith("#"):
        return False
    try:
        resolve_pointer(document, ref)
    except ResolutionError:
        return False
    return True

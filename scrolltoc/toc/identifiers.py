"""Unique identifier allocation for headings."""

import logging
from collections.abc import Callable, Iterable, Iterator, Sequence

from scrolltoc.exceptions import (
    AlreadyIdentifiedError,
    AmbiguousTargetError,
    EmptyTextError,
)
from scrolltoc.models.heading import Heading
from scrolltoc.toc.slug import to_slug

logger = logging.getLogger(__name__)

SlugFunction = Callable[[str], str]

# Used when the default slug function leaves nothing of the heading text.
EMPTY_SLUG_FALLBACK = "heading"


class IdentifierRegistry:
    """Set of identifiers already in use during an allocation pass.

    A registry normally lives for a single ``give_id`` call. Callers that
    need uniqueness across several calls keep one registry and pass it in.
    """

    def __init__(self, used: Iterable[str] = ()) -> None:
        self._used: set[str] = set(used)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._used

    def __iter__(self) -> Iterator[str]:
        return iter(self._used)

    def __len__(self) -> int:
        return len(self._used)

    def reserve(self, identifier: str) -> None:
        self._used.add(identifier)

    def resolve(self, candidate: str) -> str:
        """Return ``candidate`` or its first free ``candidate-N`` variant (N >= 2)."""
        if candidate not in self._used:
            return candidate

        suffix = 2
        while f"{candidate}-{suffix}" in self._used:
            suffix += 1
        return f"{candidate}-{suffix}"


def _single_heading(target: Heading | Sequence[Heading]) -> Heading:
    if isinstance(target, Heading):
        return target
    if len(target) != 1:
        raise AmbiguousTargetError()
    return target[0]


def derive_id(
    target: Heading | Sequence[Heading],
    slug_fn: SlugFunction | None = None,
    registry: IdentifierRegistry | None = None,
) -> str:
    """Derive a unique identifier for exactly one heading.

    Neither the heading nor the registry is modified; see ``assign_id``.

    Args:
        target: The heading, or a selection that must hold exactly one.
        slug_fn: Text-to-slug function. Its result is used as is. Defaults
            to ``to_slug``, whose empty result falls back to ``"heading"``.
        registry: Identifiers already in use. Defaults to an empty registry.

    Returns:
        The slug of the heading text, suffixed with ``-2``, ``-3``, ... when
        the plain slug is already taken.

    Raises:
        AmbiguousTargetError: If the selection does not hold one heading.
        EmptyTextError: If the heading has no text.
        AlreadyIdentifiedError: If the heading already has an identifier.
    """
    heading = _single_heading(target)

    if not heading.text.strip():
        raise EmptyTextError()
    if heading.identifier:
        raise AlreadyIdentifiedError()

    if slug_fn is None:
        candidate = to_slug(heading.text) or EMPTY_SLUG_FALLBACK
    else:
        candidate = slug_fn(heading.text)

    if registry is None:
        return candidate
    return registry.resolve(candidate)


def assign_id(heading: Heading, identifier: str) -> None:
    """Write an allocated identifier back onto a heading."""
    heading.identifier = identifier


def give_id(
    headings: Sequence[Heading],
    slug_fn: SlugFunction | None = None,
    registry: IdentifierRegistry | None = None,
) -> list[Heading]:
    """Assign a unique identifier to every heading that lacks one.

    Headings that already carry an identifier are left untouched; their
    identifiers are only reserved so that generated ones never collide with
    them. When no registry is given, one is seeded from ``headings``. Pass a
    registry seeded with every identifier of the document to avoid clashes
    with elements outside the sequence.

    Args:
        headings: Headings in document order.
        slug_fn: Text-to-slug function. Defaults to ``to_slug``.
        registry: Shared registry of identifiers in use.

    Returns:
        The headings that received a new identifier.

    Raises:
        EmptyTextError: If a heading without identifier has no text. No
            heading is modified in that case.
    """
    pending = [heading for heading in headings if not heading.identifier]
    if any(not heading.text.strip() for heading in pending):
        raise EmptyTextError()

    if registry is None:
        registry = IdentifierRegistry()
    for heading in headings:
        if heading.identifier:
            registry.reserve(heading.identifier)

    assigned: list[Heading] = []
    for heading in pending:
        identifier = derive_id(heading, slug_fn=slug_fn, registry=registry)
        assign_id(heading, identifier)
        registry.reserve(identifier)
        assigned.append(heading)
        logger.debug("Assigned id %r to heading %r", identifier, heading.text)

    return assigned

"""Heading hierarchy builder for the table-of-contents tree."""

import logging
from collections.abc import Callable, Iterator, Sequence

from scrolltoc.exceptions import MissingIdentifierError, NoHeadingsError
from scrolltoc.models.heading import Heading
from scrolltoc.models.hierarchy import HierarchyNode

logger = logging.getLogger(__name__)

Decorator = Callable[[HierarchyNode], None]


def default_decorator(node: HierarchyNode) -> None:
    """Label a node with its heading text and link it to the heading id.

    Raises:
        MissingIdentifierError: If the heading has not been given an id.
    """
    heading = node.heading
    if heading is None:
        return
    if not heading.identifier:
        raise MissingIdentifierError(
            f"Heading {heading.text!r} has no identifier to link to."
        )
    node.label = heading.text
    node.href = f"#{heading.identifier}"


def iter_nodes(root: HierarchyNode) -> Iterator[HierarchyNode]:
    """Yield every non-root node of the tree in pre-order."""
    for child in root.children:
        yield child
        yield from iter_nodes(child)


def generate_hierarchy(
    headings: Sequence[Heading], decorate: Decorator | None = None
) -> HierarchyNode:
    """Build a nested table-of-contents tree from a flat heading sequence.

    Uses a stack-based approach: when encountering a heading at level N,
    pop all open nodes at level >= N, attach the heading under the new top
    of the stack, then push it. Skipped levels (h1 followed by h3) nest at
    their own depth.

    Args:
        headings: Headings in document order.
        decorate: Called once per non-root node, in pre-order, after the
            tree is complete. Defaults to ``default_decorator``, which needs
            identifiers to be assigned already.

    Returns:
        The synthetic level-0 root node.

    Raises:
        NoHeadingsError: If ``headings`` is empty.
    """
    if not headings:
        raise NoHeadingsError()

    root = HierarchyNode(level=0)
    stack: list[HierarchyNode] = [root]

    for heading in headings:
        while stack[-1].level >= heading.level:
            stack.pop()

        node = HierarchyNode(heading=heading, level=heading.level)
        stack[-1].children.append(node)
        stack.append(node)

    decorator = decorate or default_decorator
    for node in iter_nodes(root):
        decorator(node)

    logger.debug(
        "Built hierarchy of %d headings, %d top-level entries",
        len(headings),
        len(root.children),
    )
    return root

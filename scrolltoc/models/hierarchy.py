"""Table-of-contents tree model."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from scrolltoc.models.heading import Heading


class HierarchyNode(BaseModel):
    """One entry of the table-of-contents tree.

    The tree root is synthetic: it has no heading and level 0. Every other
    node wraps a heading, and its ``children`` are the contiguous run of
    deeper headings that follow it. ``label``, ``href`` and ``extra`` are
    presentation slots filled in by a decorator.
    """

    heading: Heading | None = None
    level: int = 0
    children: list[HierarchyNode] = Field(default_factory=list)
    label: str | None = None
    href: str | None = None
    extra: dict[str, Any] = Field(default_factory=dict)

    @property
    def is_root(self) -> bool:
        return self.heading is None

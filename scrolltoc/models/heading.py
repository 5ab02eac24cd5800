"""Heading and offset index data models."""

from typing import Any

from pydantic import BaseModel, Field


class Heading(BaseModel):
    """A single document heading captured from the host document.

    ``level`` and ``text`` are fixed at capture time. ``identifier`` is
    assigned by the identifier allocator and ``position`` by a geometry
    provider. ``ref`` is an opaque handle owned by the collaborator that
    discovered the heading (e.g. a BeautifulSoup tag) and is never
    serialised.
    """

    level: int = Field(ge=1, le=6, frozen=True)
    text: str = Field(default="", frozen=True)
    identifier: str | None = None
    position: float | None = None
    ref: Any = Field(default=None, exclude=True, repr=False)


class OffsetRecord(BaseModel):
    """A scroll threshold at which ``heading`` becomes the active heading."""

    position: float
    heading: Heading


class ActiveChange(BaseModel):
    """Emitted when the active heading changes while scrolling."""

    previous: OffsetRecord | None = None
    current: OffsetRecord

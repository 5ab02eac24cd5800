"""Scroll-synchronised table of contents built on the core operations."""

import logging
from collections.abc import Sequence
from pathlib import Path

from scrolltoc.config import AppConfig
from scrolltoc.document.geometry import StyleGeometry
from scrolltoc.document.html import HtmlDocument
from scrolltoc.exceptions import NoHeadingsError
from scrolltoc.models.heading import ActiveChange, Heading, OffsetRecord
from scrolltoc.models.hierarchy import HierarchyNode
from scrolltoc.toc.hierarchy import Decorator, generate_hierarchy
from scrolltoc.toc.identifiers import SlugFunction
from scrolltoc.toc.offsets import (
    Geometry,
    ScrollOffsetAccessor,
    build_offset_index,
    get_active_record,
)

logger = logging.getLogger(__name__)


class TableOfContents:
    """A heading tree plus the offset index that tracks the active heading.

    ``sync()`` is meant to be called from the host's scroll handler and
    ``reindex()`` from its resize handler.

    Args:
        headings: Headings in document order, identifiers already assigned
            when the default decorator is used.
        scroll: Accessor for the live scroll offset.
        geometry: Geometry provider. When omitted, ``Heading.position`` is used.
        deduction: Uniform shift applied to every offset.
        decorate: Node decorator passed to ``generate_hierarchy``.
    """

    def __init__(
        self,
        headings: Sequence[Heading],
        scroll: ScrollOffsetAccessor,
        geometry: Geometry | None = None,
        deduction: float = 0.0,
        decorate: Decorator | None = None,
    ) -> None:
        if not headings:
            raise NoHeadingsError()

        self.headings: list[Heading] = list(headings)
        self.scroll = scroll
        self._geometry = geometry
        self._deduction = deduction
        self._active: OffsetRecord | None = None

        self.tree: HierarchyNode = generate_hierarchy(self.headings, decorate)
        self.index: list[OffsetRecord] = build_offset_index(
            self.headings, deduction=deduction, geometry=geometry
        )

    @classmethod
    def from_document(
        cls,
        document: HtmlDocument,
        scroll: ScrollOffsetAccessor,
        config: AppConfig | None = None,
        decorate: Decorator | None = None,
        slug_fn: SlugFunction | None = None,
    ) -> "TableOfContents":
        """Discover headings, give them ids and lay them out from inline styles."""
        config = config or AppConfig()
        headings = document.get_headings(
            config.headings.target, levels=config.headings.levels
        )
        document.give_id(headings, slug_fn=slug_fn)

        return cls(
            headings,
            scroll,
            geometry=StyleGeometry(document),
            deduction=config.offsets.deduction,
            decorate=decorate,
        )

    @classmethod
    def from_file(
        cls,
        file_path: str | Path,
        scroll: ScrollOffsetAccessor,
        config: AppConfig | None = None,
        decorate: Decorator | None = None,
    ) -> "TableOfContents":
        """Parse an HTML file with the configured parser and build its TOC."""
        config = config or AppConfig()
        document = HtmlDocument.from_file(file_path, features=config.parser.features)
        return cls.from_document(document, scroll, config, decorate=decorate)

    @property
    def active(self) -> OffsetRecord | None:
        """The record reported by the last ``sync()``, if any."""
        return self._active

    def reindex(self) -> None:
        """Rebuild the offset index after the layout changed."""
        invalidate = getattr(self._geometry, "invalidate", None)
        if invalidate is not None:
            invalidate()
        self.index = build_offset_index(
            self.headings, deduction=self._deduction, geometry=self._geometry
        )

    def sync(self) -> ActiveChange | None:
        """Resolve the active heading at the current scroll offset.

        Returns:
            An ActiveChange when the active heading differs from the one seen
            by the previous call, otherwise None.
        """
        offset = self.scroll.current()
        current = get_active_record(offset, self.index)

        previous = self._active
        if previous is not None and previous.heading is current.heading:
            return None

        self._active = current
        logger.debug(
            "Active heading changed to %r at offset %s", current.heading.text, offset
        )
        return ActiveChange(previous=previous, current=current)

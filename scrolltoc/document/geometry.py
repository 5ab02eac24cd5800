"""Geometry providers: vertical heading positions for the offset index."""

import logging
import re
from collections.abc import Mapping

from bs4 import Tag

from scrolltoc.document.html import HtmlDocument
from scrolltoc.exceptions import MissingPositionError
from scrolltoc.models.heading import Heading

logger = logging.getLogger(__name__)

_DECLARATION = re.compile(r"([a-z-]+)\s*:\s*([^;]+)")
_PX_LENGTH = re.compile(r"^(-?\d+(?:\.\d+)?)(?:px)?$")


def _length(value: str) -> float:
    """Parse a CSS pixel length; unsupported units count as zero."""
    match = _PX_LENGTH.match(value.strip())
    if match is None:
        logger.debug("Unsupported CSS length %r treated as 0", value)
        return 0.0
    return float(match.group(1))


def _declarations(tag: Tag) -> list[tuple[str, str]]:
    """Return the inline style declarations in source order, skipping empty values."""
    style = tag.get("style") or ""
    return [
        (prop, value.strip())
        for prop, value in _DECLARATION.findall(style.lower())
        if value.strip()
    ]


class StyleGeometry:
    """Estimates heading positions from inline CSS using a block-flow model.

    Every element is stacked below its previous sibling. An element's box
    is ``padding-top + height + padding-bottom``, where ``height`` is the
    inline height or, when absent, the sum of its children's boxes. A
    heading's position is the top edge of its box, padding included.

    Margins are not supported: they are ignored with a warning.
    """

    def __init__(self, document: HtmlDocument) -> None:
        self._document = document
        self._tops: dict[int, float] | None = None

    def __call__(self, heading: Heading) -> float:
        tops = self._layout()
        if heading.ref is None or id(heading.ref) not in tops:
            raise MissingPositionError(
                f"Heading {heading.text!r} is not part of the laid out document."
            )
        return tops[id(heading.ref)]

    def invalidate(self) -> None:
        """Forget the computed layout, e.g. after the document changed."""
        self._tops = None

    def _layout(self) -> dict[int, float]:
        if self._tops is None:
            self._tops = {}
            soup = self._document.soup
            root = soup.body or soup
            self._place(root, 0.0)
        return self._tops

    def _place(self, tag: Tag, top: float) -> float:
        """Record the top edge of ``tag`` and its descendants; return its box height."""
        self._tops[id(tag)] = top

        declarations = _declarations(tag)
        if any(prop.startswith("margin") for prop, _ in declarations):
            logger.warning(
                "Ignoring margin on <%s>: margins do not contribute to positions",
                tag.name,
            )

        # Later declarations override earlier ones, as in CSS.
        padding_top = padding_bottom = 0.0
        height: float | None = None
        for prop, value in declarations:
            if prop == "padding":
                values = value.split()
                padding_top = _length(values[0])
                padding_bottom = _length(values[2] if len(values) > 2 else values[0])
            elif prop == "padding-top":
                padding_top = _length(value)
            elif prop == "padding-bottom":
                padding_bottom = _length(value)
            elif prop == "height":
                height = _length(value)

        content = 0.0
        for child in tag.children:
            if isinstance(child, Tag):
                content += self._place(child, top + padding_top + content)

        if height is not None:
            content = height

        return padding_top + content + padding_bottom


class MappingGeometry:
    """Positions measured elsewhere (e.g. by a headless browser), keyed by id."""

    def __init__(self, positions: Mapping[str, float]) -> None:
        self._positions = dict(positions)

    def __call__(self, heading: Heading) -> float:
        if heading.identifier is None or heading.identifier not in self._positions:
            raise MissingPositionError(
                f"No measured position for heading {heading.text!r}."
            )
        return self._positions[heading.identifier]

"""HTML document adapter: heading discovery and id write-back via BeautifulSoup."""

import logging
from collections.abc import Sequence
from pathlib import Path

import chardet
from bs4 import BeautifulSoup, Tag

from scrolltoc.exceptions import NoHeadingsError, NoTargetError
from scrolltoc.models.heading import Heading
from scrolltoc.toc.identifiers import (
    IdentifierRegistry,
    SlugFunction,
    assign_id,
    derive_id,
    give_id,
)

logger = logging.getLogger(__name__)

HEADING_LEVELS: dict[str, int] = {f"h{level}": level for level in range(1, 7)}


def read_markup(file_path: Path) -> str:
    """Read an HTML file with encoding detection.

    Tries UTF-8 first, then uses chardet for fallback detection.

    Args:
        file_path: Path to the HTML file.

    Returns:
        The file content as a string.
    """
    try:
        return file_path.read_text(encoding="utf-8")
    except UnicodeDecodeError:
        pass

    raw_bytes = file_path.read_bytes()
    detected = chardet.detect(raw_bytes)
    encoding = detected.get("encoding") or "utf-8"
    confidence = detected.get("confidence", 0)

    if confidence < 0.7:
        logger.warning(
            "Low confidence encoding detection for %s: %s (%.0f%%)",
            file_path,
            encoding,
            confidence * 100,
        )

    try:
        return raw_bytes.decode(encoding)
    except (UnicodeDecodeError, LookupError):
        logger.error("Failed to decode file: %s", file_path)
        return raw_bytes.decode("utf-8", errors="replace")


class HtmlDocument:
    """A parsed HTML page acting as the host document for the TOC core.

    Headings are handed out as ``Heading`` values whose ``ref`` is the
    underlying tag, so identifiers assigned by the core can be written back
    to the markup.
    """

    def __init__(self, markup: str, features: str = "lxml") -> None:
        self._soup = BeautifulSoup(markup, features)

    @classmethod
    def from_file(cls, file_path: str | Path, features: str = "lxml") -> "HtmlDocument":
        """Load a document from disk.

        Raises:
            FileNotFoundError: If file_path does not exist.
        """
        path = Path(file_path)
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")
        return cls(read_markup(path), features=features)

    @property
    def soup(self) -> BeautifulSoup:
        return self._soup

    def get_headings(
        self, target: str | None = None, levels: Sequence[int] | None = None
    ) -> list[Heading]:
        """Return the headings inside ``target`` in document order.

        Args:
            target: CSS selector of the scope. None searches the whole
                document.
            levels: Heading levels to include. Defaults to all six.

        Raises:
            NoTargetError: If the selector matches nothing.
            NoHeadingsError: If the scope contains no headings.
        """
        if target is None:
            scope: Tag | None = self._soup
        else:
            scope = self._soup.select_one(target)
        if scope is None:
            raise NoTargetError()

        wanted = [
            name
            for name, level in HEADING_LEVELS.items()
            if levels is None or level in levels
        ]
        tags = scope.find_all(wanted)
        if not tags:
            raise NoHeadingsError()

        return [self._to_heading(tag) for tag in tags]

    def select_headings(self, selector: str) -> list[Heading]:
        """Return the heading elements matched by a CSS selector (possibly none)."""
        return [
            self._to_heading(tag)
            for tag in self._soup.select(selector)
            if tag.name in HEADING_LEVELS
        ]

    def existing_ids(self) -> set[str]:
        """Return every non-empty id attribute in the document."""
        return {tag["id"] for tag in self._soup.find_all(id=True) if tag["id"]}

    def derive_id(
        self,
        target: Heading | Sequence[Heading],
        slug_fn: SlugFunction | None = None,
    ) -> str:
        """Derive an id for one heading that is unique within this document."""
        return derive_id(
            target, slug_fn=slug_fn, registry=IdentifierRegistry(self.existing_ids())
        )

    def assign_id(self, heading: Heading, identifier: str) -> None:
        assign_id(heading, identifier)
        if heading.ref is not None:
            heading.ref["id"] = identifier

    def give_id(
        self,
        headings: Sequence[Heading],
        slug_fn: SlugFunction | None = None,
        registry: IdentifierRegistry | None = None,
    ) -> list[Heading]:
        """Give every heading without an id a unique one and write it to the markup.

        The registry is seeded with all ids already present in the document
        unless the caller supplies its own.
        """
        if registry is None:
            registry = IdentifierRegistry(self.existing_ids())

        assigned = give_id(headings, slug_fn=slug_fn, registry=registry)
        for heading in assigned:
            if heading.ref is not None:
                heading.ref["id"] = heading.identifier

        return assigned

    def to_html(self) -> str:
        return str(self._soup)

    @staticmethod
    def _to_heading(tag: Tag) -> Heading:
        return Heading(
            level=HEADING_LEVELS[tag.name],
            text=tag.get_text().strip(),
            identifier=tag.get("id") or None,
            ref=tag,
        )

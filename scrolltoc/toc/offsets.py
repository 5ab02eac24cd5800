"""Offset index construction and scroll position resolution."""

import logging
from bisect import bisect_right
from collections.abc import Callable, Iterator, Sequence
from contextlib import contextmanager

from scrolltoc.exceptions import MissingPositionError, NoHeadingsError
from scrolltoc.models.heading import Heading, OffsetRecord

logger = logging.getLogger(__name__)

Geometry = Callable[[Heading], float]


def build_offset_index(
    headings: Sequence[Heading],
    deduction: float = 0,
    geometry: Geometry | None = None,
) -> list[OffsetRecord]:
    """Build the scroll threshold index for a heading sequence.

    Each record's position is the heading's raw vertical position minus
    ``deduction``. Records keep the input order; document order is trusted
    to be position order.

    Args:
        headings: Headings in document order.
        deduction: Uniform shift, e.g. the height of a fixed header bar.
        geometry: Geometry provider returning a heading's top edge. When
            omitted, ``Heading.position`` is used.

    Returns:
        One OffsetRecord per heading.

    Raises:
        NoHeadingsError: If ``headings`` is empty.
        MissingPositionError: If a heading's raw position is unknown.
    """
    if not headings:
        raise NoHeadingsError()

    index: list[OffsetRecord] = []
    for heading in headings:
        raw = geometry(heading) if geometry is not None else heading.position
        if raw is None:
            raise MissingPositionError(
                f"Heading {heading.text!r} has no vertical position."
            )
        index.append(OffsetRecord(position=raw - deduction, heading=heading))

    logger.debug(
        "Built offset index of %d records (deduction=%s)", len(index), deduction
    )
    return index


def get_active_record(
    scroll_offset: float, index: Sequence[OffsetRecord]
) -> OffsetRecord:
    """Return the record that is active at ``scroll_offset``.

    This is the last record whose position is <= ``scroll_offset``. Offsets
    before the first record resolve to the first record, so a match is
    always returned.

    Raises:
        NoHeadingsError: If ``index`` is empty.
    """
    if not index:
        raise NoHeadingsError("Offset index is empty.")

    position = bisect_right(index, scroll_offset, key=lambda record: record.position)
    return index[max(position - 1, 0)]


class ScrollOffsetAccessor:
    """Reads the live scroll offset of the viewing surface.

    ``source`` is supplied by the host environment. When ``override`` is
    set, it is returned instead, which lets callers exercise the resolver
    without a real viewport.
    """

    def __init__(
        self, source: Callable[[], float], override: float | None = None
    ) -> None:
        self._source = source
        self.override = override

    def current(self) -> float:
        if self.override is not None:
            return self.override
        return self._source()

    @contextmanager
    def overridden(self, value: float) -> Iterator["ScrollOffsetAccessor"]:
        """Temporarily report ``value`` as the scroll offset."""
        previous = self.override
        self.override = value
        try:
            yield self
        finally:
            self.override = previous

"""Data models for the table-of-contents core."""

from scrolltoc.models.heading import ActiveChange, Heading, OffsetRecord
from scrolltoc.models.hierarchy import HierarchyNode

__all__ = [
    "ActiveChange",
    "Heading",
    "HierarchyNode",
    "OffsetRecord",
]

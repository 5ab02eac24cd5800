"""Table-of-contents core: slugs, identifiers, hierarchy and offset index."""

from scrolltoc.toc.hierarchy import default_decorator, generate_hierarchy, iter_nodes
from scrolltoc.toc.identifiers import IdentifierRegistry, assign_id, derive_id, give_id
from scrolltoc.toc.offsets import (
    ScrollOffsetAccessor,
    build_offset_index,
    get_active_record,
)
from scrolltoc.toc.slug import to_slug

__all__ = [
    "IdentifierRegistry",
    "ScrollOffsetAccessor",
    "assign_id",
    "build_offset_index",
    "default_decorator",
    "derive_id",
    "generate_hierarchy",
    "get_active_record",
    "give_id",
    "iter_nodes",
    "to_slug",
]

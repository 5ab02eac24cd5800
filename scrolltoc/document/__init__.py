"""Host document collaborators: heading discovery and geometry."""

from scrolltoc.document.geometry import MappingGeometry, StyleGeometry
from scrolltoc.document.html import HtmlDocument, read_markup

__all__ = ["HtmlDocument", "MappingGeometry", "StyleGeometry", "read_markup"]

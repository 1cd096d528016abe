"""Text rendering of plugin search results."""

from .hover import DebouncedFlag
from .result import (
    CategoryChip,
    MetadataItem,
    RenderedResult,
    SearchResultView,
    render_description_preview,
    render_search_page,
    render_search_result,
)

__all__ = [
    "CategoryChip",
    "DebouncedFlag",
    "MetadataItem",
    "RenderedResult",
    "SearchResultView",
    "render_description_preview",
    "render_search_page",
    "render_search_result",
]

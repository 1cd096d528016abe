"""Search-result previews and text rendering for plugin listings."""

from hubsearch.preview.window import InvalidSpanError, MatchSpan, Preview, build_preview, compute_preview

__all__ = ["InvalidSpanError", "MatchSpan", "Preview", "build_preview", "compute_preview"]

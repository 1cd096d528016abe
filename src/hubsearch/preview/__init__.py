"""Match-centred preview windows for long text fields."""

from .window import (
    DEFAULT_CONTEXT_WIDTH,
    ELLIPSIS,
    InvalidSpanError,
    MatchSpan,
    Preview,
    build_preview,
    compute_preview,
)

__all__ = [
    "DEFAULT_CONTEXT_WIDTH",
    "ELLIPSIS",
    "InvalidSpanError",
    "MatchSpan",
    "Preview",
    "build_preview",
    "compute_preview",
]

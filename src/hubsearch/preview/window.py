"""Context-window previews around a single search match."""

from __future__ import annotations

from dataclasses import dataclass


DEFAULT_CONTEXT_WIDTH = 40
ELLIPSIS = "..."


class InvalidSpanError(ValueError):
    """Raised when a match span does not fit inside the text it points into."""


@dataclass(frozen=True, slots=True)
class MatchSpan:
    """Inclusive ``[start, end]`` character range reported by the search engine."""

    start: int
    end: int

    @property
    def length(self) -> int:
        return self.end - self.start + 1


@dataclass(frozen=True, slots=True)
class Preview:
    """Preview text plus the inclusive position of the match inside it."""

    text: str
    match_start: int | None = None
    match_end: int | None = None

    @property
    def matched_text(self) -> str | None:
        if self.match_start is None or self.match_end is None:
            return None
        return self.text[self.match_start : self.match_end + 1]


def _validate_span(text: str, span: MatchSpan) -> None:
    if span.start < 0:
        raise InvalidSpanError(f"span start must be >= 0, got {span.start}")
    if span.start > span.end:
        raise InvalidSpanError(f"span start {span.start} is after span end {span.end}")
    if span.end >= len(text):
        raise InvalidSpanError(f"span end {span.end} is outside text of length {len(text)}")


def _window_bounds(text_length: int, span: MatchSpan, context_width: int) -> tuple[int, int]:
    min_index = 0
    max_index = text_length - 1

    raw_start = span.start - context_width
    raw_end = span.end + context_width
    preview_start = max(min_index, raw_start)
    preview_end = min(max_index, raw_end)

    # Unused budget on one side moves to the other. Both shifts start from the
    # clamped bounds above, so neither side can take back what it gave away.
    shifted_end = preview_end
    if raw_start < min_index:
        shifted_end = min(max_index, preview_end + (min_index - raw_start))
    shifted_start = preview_start
    if raw_end > max_index:
        shifted_start = max(min_index, preview_start - (raw_end - max_index))

    return shifted_start, shifted_end


def build_preview(text: str, span: MatchSpan, context_width: int = DEFAULT_CONTEXT_WIDTH) -> Preview:
    """Return the windowed preview and where the match landed inside it.

    The window holds the match plus ``context_width`` characters on each side.
    When one side runs into an edge of ``text`` the leftover budget is spent on
    the other side. Ellipsis markers are added only on sides that stop short of
    the text's edges.

    Empty text yields an empty preview without looking at ``span``. Any other
    span that does not fit the text raises :class:`InvalidSpanError`.
    """
    if context_width < 0:
        raise ValueError(f"context_width must be >= 0, got {context_width}")
    if not text:
        return Preview(text="")

    _validate_span(text, span)

    preview_start, preview_end = _window_bounds(len(text), span, context_width)
    prefix = ELLIPSIS if preview_start > 0 else ""
    suffix = ELLIPSIS if preview_end < len(text) - 1 else ""

    match_start = len(prefix) + span.start - preview_start
    return Preview(
        text=f"{prefix}{text[preview_start : preview_end + 1]}{suffix}",
        match_start=match_start,
        match_end=match_start + span.length - 1,
    )


def compute_preview(text: str, span: MatchSpan, context_width: int = DEFAULT_CONTEXT_WIDTH) -> str:
    """Return only the preview string for ``text`` around ``span``."""
    return build_preview(text, span, context_width).text

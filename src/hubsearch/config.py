"""Runtime configuration for search-result rendering."""

from __future__ import annotations

from dataclasses import dataclass
import os
from typing import Mapping

from hubsearch.preview.window import DEFAULT_CONTEXT_WIDTH
from hubsearch.search.highlight import DEFAULT_CLOSE_MARKER, DEFAULT_OPEN_MARKER


DEFAULT_HOVER_DEBOUNCE_SECONDS = 0.1
DEFAULT_PLUGIN_URL_PREFIX = "/plugins/"


def _parse_int(*, name: str, raw_value: str, minimum: int = 0) -> int:
    try:
        value = int(raw_value)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw_value!r}") from exc
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}")
    return value


def _parse_float(*, name: str, raw_value: str, minimum: float = 0.0) -> float:
    try:
        value = float(raw_value)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {raw_value!r}") from exc
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}")
    return value


@dataclass(frozen=True, slots=True)
class RenderSettings:
    """Validated settings for previews, highlighting and result links."""

    context_width: int = DEFAULT_CONTEXT_WIDTH
    hover_debounce_seconds: float = DEFAULT_HOVER_DEBOUNCE_SECONDS
    highlight_open: str = DEFAULT_OPEN_MARKER
    highlight_close: str = DEFAULT_CLOSE_MARKER
    plugin_url_prefix: str = DEFAULT_PLUGIN_URL_PREFIX

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "RenderSettings":
        source: Mapping[str, str] = os.environ if environ is None else environ

        context_width_raw = source.get("HUBSEARCH_PREVIEW_CONTEXT_WIDTH", str(DEFAULT_CONTEXT_WIDTH)).strip()
        debounce_raw = source.get("HUBSEARCH_HOVER_DEBOUNCE_SECONDS", str(DEFAULT_HOVER_DEBOUNCE_SECONDS)).strip()
        # Markers are not stripped; a space-padded marker is a valid choice.
        highlight_open = source.get("HUBSEARCH_HIGHLIGHT_OPEN", DEFAULT_OPEN_MARKER)
        highlight_close = source.get("HUBSEARCH_HIGHLIGHT_CLOSE", DEFAULT_CLOSE_MARKER)
        url_prefix = source.get("HUBSEARCH_PLUGIN_URL_PREFIX", DEFAULT_PLUGIN_URL_PREFIX).strip()

        if not context_width_raw:
            raise ValueError("HUBSEARCH_PREVIEW_CONTEXT_WIDTH cannot be empty")
        if not debounce_raw:
            raise ValueError("HUBSEARCH_HOVER_DEBOUNCE_SECONDS cannot be empty")
        if not highlight_open:
            raise ValueError("HUBSEARCH_HIGHLIGHT_OPEN cannot be empty")
        if not highlight_close:
            raise ValueError("HUBSEARCH_HIGHLIGHT_CLOSE cannot be empty")
        if not url_prefix:
            raise ValueError("HUBSEARCH_PLUGIN_URL_PREFIX cannot be empty")

        context_width = _parse_int(
            name="HUBSEARCH_PREVIEW_CONTEXT_WIDTH",
            raw_value=context_width_raw,
            minimum=0,
        )
        hover_debounce_seconds = _parse_float(
            name="HUBSEARCH_HOVER_DEBOUNCE_SECONDS",
            raw_value=debounce_raw,
            minimum=0.0,
        )

        return cls(
            context_width=context_width,
            hover_debounce_seconds=hover_debounce_seconds,
            highlight_open=highlight_open,
            highlight_close=highlight_close,
            plugin_url_prefix=url_prefix,
        )

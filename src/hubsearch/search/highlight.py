"""Plain-text highlighting of matched words."""

from __future__ import annotations

from collections.abc import Iterable
import re

from razdel import tokenize


DEFAULT_OPEN_MARKER = "«"
DEFAULT_CLOSE_MARKER = "»"

_WORD_RE = re.compile(r"\w+")


def extract_terms(query: str) -> list[str]:
    """Split a free-text query into unique lower-cased word terms."""
    terms: list[str] = []
    for token in tokenize(query.lower()):
        value = token.text.strip()
        if value and _WORD_RE.fullmatch(value) and value not in terms:
            terms.append(value)
    return terms


def _build_pattern(words: Iterable[str | None]) -> re.Pattern[str] | None:
    cleaned = {word for word in words if word and word.strip()}
    if not cleaned:
        return None
    # Longest first so "segmentation" wins over "segment" at the same offset.
    ordered = sorted(cleaned, key=lambda word: (-len(word), word))
    return re.compile("|".join(re.escape(word) for word in ordered), re.IGNORECASE)


def highlight_text(
    text: str,
    words: Iterable[str | None],
    *,
    open_marker: str = DEFAULT_OPEN_MARKER,
    close_marker: str = DEFAULT_CLOSE_MARKER,
    disabled: bool = False,
) -> str:
    """Wrap every case-insensitive occurrence of ``words`` in markers."""
    if disabled or not text:
        return text
    pattern = _build_pattern(words)
    if pattern is None:
        return text
    return pattern.sub(lambda match: f"{open_marker}{match.group(0)}{close_marker}", text)


def highlight_span(
    text: str,
    start: int,
    end: int,
    *,
    open_marker: str = DEFAULT_OPEN_MARKER,
    close_marker: str = DEFAULT_CLOSE_MARKER,
) -> str:
    """Wrap the inclusive ``[start, end]`` range of ``text`` in markers."""
    if not 0 <= start <= end < len(text):
        raise ValueError(f"span {start}..{end} is outside text of length {len(text)}")
    return f"{text[:start]}{open_marker}{text[start : end + 1]}{close_marker}{text[end + 1 :]}"

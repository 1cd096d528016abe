"""Plugin records, match payloads and highlighting helpers."""

from .highlight import extract_terms, highlight_text
from .models import (
    Author,
    PluginRecord,
    RecordValidationError,
    SearchMatch,
    parse_matches,
    parse_plugin,
)

__all__ = [
    "Author",
    "PluginRecord",
    "RecordValidationError",
    "SearchMatch",
    "extract_terms",
    "highlight_text",
    "parse_matches",
    "parse_plugin",
]

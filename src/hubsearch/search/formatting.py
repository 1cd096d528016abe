"""Display formatting for plugin metadata values."""

from __future__ import annotations

from datetime import date, datetime


_MONTHS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)
_CLASSIFIER_SEPARATOR = " :: "


def _parse_date(raw_value: str) -> date | None:
    cleaned = raw_value.strip()
    if not cleaned:
        return None
    if cleaned.endswith("Z"):
        cleaned = cleaned[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(cleaned).date()
    except ValueError:
        return None


def format_date(raw_value: str) -> str:
    """Format an ISO date or timestamp as ``"05 March 2024"``.

    Values that are not ISO formatted are returned stripped but otherwise
    untouched so nothing submitted by the plugin author is hidden.
    """
    parsed = _parse_date(raw_value)
    if parsed is None:
        return raw_value.strip()
    return f"{parsed.day:02d} {_MONTHS[parsed.month - 1]} {parsed.year}"


def format_operating_system(classifier: str) -> str:
    # "Operating System :: POSIX :: Linux" -> "Linux"
    return classifier.rsplit(_CLASSIFIER_SEPARATOR, 1)[-1].strip()

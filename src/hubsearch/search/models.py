"""Validated plugin records and search-match payloads."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from hubsearch.preview.window import MatchSpan


class RecordValidationError(ValueError):
    """Raised when an incoming payload does not match the record schema."""

    def __init__(self, path: str, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = path


@dataclass(frozen=True, slots=True)
class SearchMatch:
    """A search-engine match: the matched word and its inclusive offsets."""

    match: str
    start: int
    end: int

    @property
    def span(self) -> MatchSpan:
        return MatchSpan(self.start, self.end)


@dataclass(frozen=True, slots=True)
class Author:
    name: str
    email: str | None = None


@dataclass(frozen=True, slots=True)
class PluginRecord:
    """Plugin index entry as shown in search results."""

    name: str
    summary: str = ""
    description_text: str = ""
    version: str = ""
    release_date: str = ""
    license: str = ""
    python_version: str = ""
    operating_system: tuple[str, ...] = ()
    authors: tuple[Author, ...] = ()
    category: dict[str, tuple[str, ...]] = field(default_factory=dict)


def _require_mapping(value: Any, path: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise RecordValidationError(path, f"expected an object, got {type(value).__name__}")
    return value


def _string(payload: Mapping[str, Any], key: str, path: str, *, required: bool = False) -> str:
    value = payload.get(key)
    if value is None:
        if required:
            raise RecordValidationError(f"{path}.{key}", "is required")
        return ""
    if not isinstance(value, str):
        raise RecordValidationError(f"{path}.{key}", f"expected a string, got {type(value).__name__}")
    return value


def _int(payload: Mapping[str, Any], key: str, path: str) -> int:
    value = payload.get(key)
    # bool is an int subclass but never a valid offset
    if isinstance(value, bool) or not isinstance(value, int):
        raise RecordValidationError(f"{path}.{key}", "expected an integer")
    return value


def _string_list(value: Any, path: str) -> tuple[str, ...]:
    if value is None:
        return ()
    if not isinstance(value, list):
        raise RecordValidationError(path, f"expected a list, got {type(value).__name__}")
    items: list[str] = []
    for idx, item in enumerate(value):
        if not isinstance(item, str):
            raise RecordValidationError(f"{path}[{idx}]", "expected a string")
        items.append(item)
    return tuple(items)


def parse_author(payload: Any, path: str = "author") -> Author:
    data = _require_mapping(payload, path)
    name = _string(data, "name", path, required=True)
    email = _string(data, "email", path) or None
    return Author(name=name, email=email)


def parse_plugin(payload: Any, path: str = "plugin") -> PluginRecord:
    """Build a :class:`PluginRecord` from decoded JSON, rejecting bad shapes.

    ``name`` is required. Every other field is optional and falls back to an
    empty value. Keys the record does not know about are ignored.
    """
    data = _require_mapping(payload, path)

    raw_authors = data.get("authors")
    if raw_authors is not None and not isinstance(raw_authors, list):
        raise RecordValidationError(f"{path}.authors", "expected a list")
    authors = tuple(
        parse_author(author, f"{path}.authors[{idx}]") for idx, author in enumerate(raw_authors or [])
    )

    raw_category = data.get("category")
    category: dict[str, tuple[str, ...]] = {}
    if raw_category is not None:
        category_map = _require_mapping(raw_category, f"{path}.category")
        for dimension, values in category_map.items():
            category[str(dimension)] = _string_list(values, f"{path}.category.{dimension}")

    return PluginRecord(
        name=_string(data, "name", path, required=True),
        summary=_string(data, "summary", path),
        description_text=_string(data, "description_text", path),
        version=_string(data, "version", path),
        release_date=_string(data, "release_date", path),
        license=_string(data, "license", path),
        python_version=_string(data, "python_version", path),
        operating_system=_string_list(data.get("operating_system"), f"{path}.operating_system"),
        authors=authors,
        category=category,
    )


def parse_match(payload: Any, path: str = "match") -> SearchMatch:
    data = _require_mapping(payload, path)
    return SearchMatch(
        match=_string(data, "match", path, required=True),
        start=_int(data, "start", path),
        end=_int(data, "end", path),
    )


def parse_matches(payload: Any, path: str = "matches") -> dict[str, SearchMatch]:
    """Parse the field-name to match mapping; ``null`` entries are dropped."""
    if payload is None:
        return {}
    data = _require_mapping(payload, path)
    return {
        str(field_name): parse_match(value, f"{path}.{field_name}")
        for field_name, value in data.items()
        if value is not None
    }

"""Plain-text rendering of plugin search results."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
import logging

from hubsearch.config import RenderSettings
from hubsearch.preview.window import InvalidSpanError, build_preview
from hubsearch.render.hover import DebouncedFlag
from hubsearch.search.formatting import format_date, format_operating_system
from hubsearch.search.highlight import extract_terms, highlight_span, highlight_text
from hubsearch.search.models import PluginRecord, SearchMatch


SKELETON = "░░░░"
NOT_SUBMITTED = "information not submitted"
HIDDEN_CATEGORY_DIMENSION = "Supported data"
DESCRIPTION_FIELD = "description_text"


logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MetadataItem:
    label: str
    value: str

    @property
    def display_value(self) -> str:
        return self.value or NOT_SUBMITTED


@dataclass(frozen=True, slots=True)
class CategoryChip:
    dimension: str
    category: str


@dataclass(frozen=True, slots=True)
class RenderedResult:
    """Text card for one search result plus the pieces it was built from."""

    text: str
    href: str | None
    metadata: tuple[MetadataItem, ...]
    categories: tuple[CategoryChip, ...]
    description_preview: str | None = None


def build_metadata_items(plugin: PluginRecord) -> tuple[MetadataItem, ...]:
    return (
        MetadataItem("version", plugin.version),
        MetadataItem("release date", format_date(plugin.release_date)),
        MetadataItem("license", plugin.license),
        MetadataItem("Python version", plugin.python_version),
        MetadataItem(
            "operating system",
            ", ".join(format_operating_system(value) for value in plugin.operating_system),
        ),
    )


def build_category_chips(plugin: PluginRecord) -> tuple[CategoryChip, ...]:
    return tuple(
        CategoryChip(dimension=dimension, category=category)
        for dimension, categories in plugin.category.items()
        if HIDDEN_CATEGORY_DIMENSION not in dimension
        for category in categories
    )


def render_description_preview(
    description: str,
    match: SearchMatch,
    *,
    settings: RenderSettings,
) -> str:
    """Window a long description around ``match`` and mark the match.

    A span that does not fit the description is logged and the full
    description is returned unhighlighted instead.
    """
    try:
        preview = build_preview(description, match.span, settings.context_width)
    except InvalidSpanError as exc:
        logger.warning("Falling back to full description for match %r: %s", match.match, exc)
        return description

    if preview.match_start is None or preview.match_end is None:
        return preview.text
    return highlight_span(
        preview.text,
        preview.match_start,
        preview.match_end,
        open_marker=settings.highlight_open,
        close_marker=settings.highlight_close,
    )


def _render_field(
    text: str,
    match: SearchMatch | None,
    *,
    enabled: bool,
    settings: RenderSettings,
    query_terms: Sequence[str] = (),
) -> str:
    words = [match.match] if match is not None else list(query_terms)
    return highlight_text(
        text,
        words,
        open_marker=settings.highlight_open,
        close_marker=settings.highlight_close,
        disabled=not enabled,
    )


def _render_loading() -> RenderedResult:
    lines = [SKELETON, SKELETON, SKELETON, SKELETON, SKELETON]
    return RenderedResult(text="\n".join(lines), href=None, metadata=(), categories=())


def render_search_result(
    plugin: PluginRecord,
    matches: Mapping[str, SearchMatch],
    *,
    settings: RenderSettings | None = None,
    is_loading: bool = False,
    is_hovering_over_chip: bool = False,
    query_terms: Sequence[str] = (),
) -> RenderedResult:
    """Render one result card as text.

    Name, summary and author names are highlighted in place. A result without
    match records highlights ``query_terms`` in those fields instead. The
    description is only shown while searching and only as a preview window
    around its match. While a chip is hovered the card carries no link so a chip click
    does not open the plugin page.
    """
    if is_loading:
        return _render_loading()

    active = settings or RenderSettings()
    is_searching = bool(matches)
    terms = () if is_searching else tuple(query_terms)
    highlighting = is_searching or bool(terms)

    lines = [
        _render_field(plugin.name, matches.get("name"), enabled=highlighting, settings=active, query_terms=terms),
        _render_field(plugin.summary, matches.get("summary"), enabled=highlighting, settings=active, query_terms=terms),
    ]
    for author in plugin.authors:
        # Author matches are keyed by the author's name, not by a field name.
        author_text = _render_field(
            author.name,
            matches.get(author.name),
            enabled=highlighting,
            settings=active,
            query_terms=terms,
        )
        lines.append(f"  {author_text}")

    description_preview: str | None = None
    description_match = matches.get(DESCRIPTION_FIELD)
    if is_searching and description_match is not None:
        description_preview = render_description_preview(
            plugin.description_text,
            description_match,
            settings=active,
        )
        if description_preview:
            lines.append(description_preview)

    metadata = build_metadata_items(plugin)
    lines.extend(f"{item.label}: {item.display_value}" for item in metadata)

    categories = build_category_chips(plugin)
    if categories:
        lines.append(" ".join(f"[{chip.category}]" for chip in categories))

    href = None if is_hovering_over_chip else f"{active.plugin_url_prefix}{plugin.name}"
    if href is not None:
        lines.append(href)

    return RenderedResult(
        text="\n".join(lines),
        href=href,
        metadata=metadata,
        categories=categories,
        description_preview=description_preview,
    )


def render_search_page(
    results: Sequence[tuple[PluginRecord, Mapping[str, SearchMatch]]],
    *,
    query: str | None = None,
    settings: RenderSettings | None = None,
) -> str:
    """Render several results under a header counting them.

    Results that carry no match records get the query's terms highlighted
    in their short fields instead.
    """
    terms = extract_terms(query) if query else []
    header = f"{len(results)} results for: {query}" if query else f"{len(results)} results"
    text = f"{header}\n\n"
    for idx, (plugin, matches) in enumerate(results, 1):
        rendered = render_search_result(plugin, matches, settings=settings, query_terms=terms)
        text += f"{idx}. {rendered.text}\n\n"
    return text


class SearchResultView:
    """A result card that tracks chip hover state between renders."""

    def __init__(
        self,
        plugin: PluginRecord,
        matches: Mapping[str, SearchMatch],
        *,
        settings: RenderSettings | None = None,
    ) -> None:
        self.plugin = plugin
        self.matches = dict(matches)
        self._settings = settings or RenderSettings()
        self._hover = DebouncedFlag(delay_seconds=self._settings.hover_debounce_seconds)

    def on_chip_enter(self) -> None:
        self._hover.set(True)

    def on_chip_leave(self) -> None:
        self._hover.set(False)

    def render(self, *, is_loading: bool = False) -> RenderedResult:
        return render_search_result(
            self.plugin,
            self.matches,
            settings=self._settings,
            is_loading=is_loading,
            is_hovering_over_chip=self._hover.value,
        )

    def close(self) -> None:
        self._hover.close()

"""CLI entrypoint that renders search-engine results as text cards."""

from __future__ import annotations

import argparse
import dataclasses
import json
import logging
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from hubsearch.config import RenderSettings
from hubsearch.render.result import render_search_page, render_search_result
from hubsearch.search.highlight import extract_terms
from hubsearch.search.models import PluginRecord, RecordValidationError, SearchMatch, parse_matches, parse_plugin


load_dotenv()

LOGGER = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render plugin search results with description previews")
    parser.add_argument("--input", required=True, help="JSON file with a query and search results")
    parser.add_argument("--format", choices=("text", "json"), default="text", help="Output format")
    parser.add_argument(
        "--context-width",
        type=int,
        default=None,
        help="Characters of description shown on each side of a match",
    )
    parser.add_argument("--loading", action="store_true", help="Render loading placeholders instead of data")
    return parser.parse_args(argv)


def load_results(path: Path) -> tuple[str | None, list[tuple[PluginRecord, dict[str, SearchMatch]]]]:
    """Read and validate a results file.

    Raises ``OSError`` for unreadable files, ``UnicodeDecodeError`` for files
    that are not UTF-8, ``json.JSONDecodeError`` for bad JSON and
    :class:`RecordValidationError` for payloads of the wrong shape.
    """
    payload: Any = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(payload, dict):
        raise RecordValidationError("$", "expected an object with a 'results' list")

    query = payload.get("query")
    if query is not None and not isinstance(query, str):
        raise RecordValidationError("query", "expected a string")

    raw_results = payload.get("results", [])
    if not isinstance(raw_results, list):
        raise RecordValidationError("results", "expected a list")

    results: list[tuple[PluginRecord, dict[str, SearchMatch]]] = []
    for idx, item in enumerate(raw_results):
        if not isinstance(item, dict):
            raise RecordValidationError(f"results[{idx}]", "expected an object")
        plugin = parse_plugin(item.get("plugin"), f"results[{idx}].plugin")
        matches = parse_matches(item.get("matches"), f"results[{idx}].matches")
        results.append((plugin, matches))
    return query, results


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")
    args = _parse_args(argv)

    try:
        settings = RenderSettings.from_env()
        if args.context_width is not None:
            if args.context_width < 0:
                raise ValueError("--context-width must be >= 0")
            settings = dataclasses.replace(settings, context_width=args.context_width)
    except ValueError as exc:
        LOGGER.error("Invalid configuration: %s", exc)
        return 2

    input_path = Path(args.input)
    try:
        query, results = load_results(input_path)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError, RecordValidationError) as exc:
        LOGGER.error("Cannot load results from %s: %s", input_path, exc)
        return 2

    LOGGER.info("Rendering %d results from %s", len(results), input_path)

    if args.format == "text":
        if args.loading:
            cards = [render_search_result(plugin, matches, is_loading=True).text for plugin, matches in results]
            print("\n\n".join(cards))
        else:
            print(render_search_page(results, query=query, settings=settings), end="")
        return 0

    terms = extract_terms(query) if query else []
    rendered = [
        (
            plugin,
            render_search_result(
                plugin,
                matches,
                settings=settings,
                is_loading=args.loading,
                query_terms=terms,
            ),
        )
        for plugin, matches in results
    ]
    output = {
        "query": query,
        "context_width": settings.context_width,
        "results": [
            {
                "name": plugin.name,
                "href": result.href,
                "description_preview": result.description_preview,
                "text": result.text,
            }
            for plugin, result in rendered
        ],
    }
    print(json.dumps(output, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

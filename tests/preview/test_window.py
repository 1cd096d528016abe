from __future__ import annotations

import pytest

from hubsearch.preview.window import (
    DEFAULT_CONTEXT_WIDTH,
    InvalidSpanError,
    MatchSpan,
    Preview,
    build_preview,
    compute_preview,
)


DIGITS = "0123456789"
ALPHABET_100 = "".join(chr(ord("a") + idx % 26) for idx in range(100))


def test_match_at_left_edge_spends_left_budget_on_the_right() -> None:
    assert compute_preview(DIGITS, MatchSpan(0, 0), 3) == "0123456..."


def test_match_at_right_edge_spends_right_budget_on_the_left() -> None:
    assert compute_preview(DIGITS, MatchSpan(9, 9), 3) == "...3456789"


def test_redistributed_window_reaching_both_edges_has_no_ellipsis() -> None:
    assert compute_preview(DIGITS, MatchSpan(1, 1), 5) == DIGITS


def test_window_inside_text_gets_both_ellipses() -> None:
    preview = compute_preview(ALPHABET_100, MatchSpan(50, 55), 10)

    assert preview == "..." + ALPHABET_100[40:66] + "..."


def test_zero_context_width_returns_only_the_match() -> None:
    assert compute_preview(DIGITS, MatchSpan(4, 6), 0) == "...456..."
    assert compute_preview(DIGITS, MatchSpan(0, 2), 0) == "012..."
    assert compute_preview(DIGITS, MatchSpan(7, 9), 0) == "...789"
    assert compute_preview(DIGITS, MatchSpan(0, 9), 0) == DIGITS


def test_short_text_overflowing_both_sides_is_returned_whole() -> None:
    assert compute_preview("abc", MatchSpan(1, 1), 10) == "abc"


def test_empty_text_yields_empty_preview_for_any_span() -> None:
    assert compute_preview("", MatchSpan(0, 0), 5) == ""
    assert compute_preview("", MatchSpan(7, 2), 0) == ""
    assert build_preview("", MatchSpan(3, 4)) == Preview(text="")


def test_preview_always_contains_the_matched_substring() -> None:
    text = "napari plugin for segmenting cells in microscopy images"
    for width in (0, 1, 4, 12, 80):
        for start in range(len(text)):
            for end in (start, min(start + 5, len(text) - 1)):
                preview = compute_preview(text, MatchSpan(start, end), width)
                assert text[start : end + 1] in preview


def test_compute_preview_is_idempotent() -> None:
    span = MatchSpan(50, 55)

    assert compute_preview(ALPHABET_100, span, 10) == compute_preview(ALPHABET_100, span, 10)


def test_default_context_width_is_forty_characters() -> None:
    text = "x" * 200
    preview = compute_preview(text, MatchSpan(100, 100))

    assert DEFAULT_CONTEXT_WIDTH == 40
    assert preview == "..." + "x" * 81 + "..."


def test_build_preview_remaps_match_into_preview_coordinates() -> None:
    preview = build_preview(ALPHABET_100, MatchSpan(50, 55), 10)

    assert preview.match_start == 13
    assert preview.match_end == 18
    assert preview.matched_text == ALPHABET_100[50:56]


def test_build_preview_remaps_match_after_left_redistribution() -> None:
    preview = build_preview(DIGITS, MatchSpan(9, 9), 3)

    assert preview.text == "...3456789"
    assert preview.match_start == 9
    assert preview.matched_text == "9"


def test_build_preview_without_leading_ellipsis_keeps_text_offsets() -> None:
    preview = build_preview(DIGITS, MatchSpan(2, 3), 2)

    assert preview.text == "012345..."
    assert (preview.match_start, preview.match_end) == (2, 3)
    assert preview.matched_text == "23"


@pytest.mark.parametrize(
    ("span", "message"),
    [
        (MatchSpan(-1, 2), "start must be >= 0"),
        (MatchSpan(5, 3), "is after span end"),
        (MatchSpan(8, 10), "outside text of length 10"),
    ],
)
def test_invalid_spans_are_rejected(span: MatchSpan, message: str) -> None:
    with pytest.raises(InvalidSpanError, match=message):
        compute_preview(DIGITS, span, 3)


def test_negative_context_width_is_rejected() -> None:
    with pytest.raises(ValueError, match="context_width"):
        compute_preview(DIGITS, MatchSpan(1, 1), -1)


def test_invalid_span_error_is_a_value_error() -> None:
    assert issubclass(InvalidSpanError, ValueError)


def test_match_span_length_counts_both_ends() -> None:
    assert MatchSpan(4, 4).length == 1
    assert MatchSpan(50, 55).length == 6

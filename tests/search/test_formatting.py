from __future__ import annotations

from hubsearch.search.formatting import format_date, format_operating_system


def test_format_date_handles_dates_and_timestamps() -> None:
    assert format_date("2024-03-05") == "05 March 2024"
    assert format_date("2021-12-31T23:59:59Z") == "31 December 2021"
    assert format_date("2022-07-01T08:00:00+02:00") == "01 July 2022"


def test_format_date_keeps_unparseable_values() -> None:
    assert format_date("  last spring ") == "last spring"
    assert format_date("") == ""


def test_format_operating_system_keeps_last_classifier_segment() -> None:
    assert format_operating_system("Operating System :: POSIX :: Linux") == "Linux"
    assert format_operating_system("Operating System :: OS Independent") == "OS Independent"
    assert format_operating_system("macOS") == "macOS"

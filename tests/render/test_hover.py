from __future__ import annotations

import time

import pytest

from hubsearch.render.hover import DebouncedFlag


def _wait_until_settled(flag: DebouncedFlag, timeout: float = 1.0) -> None:
    deadline = time.monotonic() + timeout
    while flag.pending and time.monotonic() < deadline:
        time.sleep(0.01)


def test_flag_changes_only_after_delay() -> None:
    flag = DebouncedFlag(delay_seconds=0.1)

    flag.set(True)
    assert flag.value is False
    assert flag.pending

    _wait_until_settled(flag)
    assert flag.value is True
    flag.close()


def test_rapid_toggles_settle_on_last_value() -> None:
    flag = DebouncedFlag(delay_seconds=0.1)

    for value in (True, False, True, False, True):
        flag.set(value)
        time.sleep(0.01)

    _wait_until_settled(flag)
    assert flag.value is True
    flag.close()


def test_returning_to_settled_value_cancels_pending_change() -> None:
    flag = DebouncedFlag(delay_seconds=0.1)

    flag.set(True)
    flag.set(False)

    assert not flag.pending
    time.sleep(0.2)
    assert flag.value is False
    flag.close()


def test_close_cancels_pending_and_ignores_later_updates() -> None:
    flag = DebouncedFlag(delay_seconds=0.05)

    flag.set(True)
    flag.close()
    time.sleep(0.1)
    assert flag.value is False
    assert not flag.pending

    flag.set(True)
    assert not flag.pending
    assert flag.value is False


def test_negative_delay_is_rejected() -> None:
    with pytest.raises(ValueError, match="delay_seconds"):
        DebouncedFlag(delay_seconds=-1)

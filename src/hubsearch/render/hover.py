"""Debounced hover state for category chips inside a result link."""

from __future__ import annotations

import logging
import threading


logger = logging.getLogger(__name__)


class DebouncedFlag:
    """Boolean whose changes become visible only after a quiet period.

    Every :meth:`set` call restarts the countdown, so a pointer sweeping over
    several chips does not flicker the result's link on and off. Call
    :meth:`close` when the owning result goes away to drop pending timers.
    """

    def __init__(self, initial: bool = False, *, delay_seconds: float = 0.1) -> None:
        if delay_seconds < 0:
            raise ValueError("delay_seconds must be >= 0")
        self._value = initial
        self._delay_seconds = delay_seconds
        self._timer: threading.Timer | None = None
        self._lock = threading.Lock()
        self._closed = False

    @property
    def value(self) -> bool:
        with self._lock:
            return self._value

    @property
    def pending(self) -> bool:
        with self._lock:
            return self._timer is not None

    def _apply(self, value: bool, timer: threading.Timer) -> None:
        with self._lock:
            # A newer set() may have replaced this timer after it fired.
            if self._timer is not timer:
                return
            self._timer = None
            self._value = value

    def set(self, value: bool) -> None:
        with self._lock:
            if self._closed:
                logger.debug("Ignoring hover update on closed flag")
                return
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
            if value == self._value:
                return

            timer = threading.Timer(self._delay_seconds, lambda: self._apply(value, timer))
            timer.daemon = True
            self._timer = timer
            timer.start()

    def close(self) -> None:
        with self._lock:
            self._closed = True
            timer = self._timer
            self._timer = None
        if timer is not None:
            timer.cancel()

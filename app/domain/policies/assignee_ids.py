"""Assignee id minting — timestamp based, strictly increasing per process."""

from __future__ import annotations

import threading
import time


class TimestampIdGenerator:
    """Produce ``<prefix><epoch-millis>`` ids that never repeat.

    Two calls inside the same millisecond (or after a clock step backwards)
    get the previous value plus one.
    """

    def __init__(self, prefix: str = "ca_", clock=time.time_ns):
        self._prefix = prefix
        self._clock = clock
        self._last = 0
        self._lock = threading.Lock()

    def next_id(self) -> str:
        with self._lock:
            now_ms = self._clock() // 1_000_000
            self._last = max(now_ms, self._last + 1)
            return f"{self._prefix}{self._last}"


_default_generator = TimestampIdGenerator()


def mint_assignee_id() -> str:
    return _default_generator.next_id()

"""Object key naming: sanitized file names behind a millisecond timestamp.

Keys look like ``<folder>/<timestamp>-<sanitized-name>``. Timestamps come from
a per-process clock that never repeats a value, so two uploads of the same
name in the same folder always get different keys.
"""

from __future__ import annotations

import re
import time
from threading import Lock

_WHITESPACE_RE = re.compile(r"\s+")


class MonotonicMillisClock:
    """Wall-clock milliseconds, bumped by one when a value would repeat."""

    def __init__(self) -> None:
        self._last = 0
        self._lock = Lock()

    def now(self) -> int:
        current = time.time_ns() // 1_000_000
        with self._lock:
            if current <= self._last:
                current = self._last + 1
            self._last = current
            return current


_clock = MonotonicMillisClock()


def sanitize_name(original_name: str) -> str:
    """Replace every whitespace run with a single '-'. 'my plan v2.png' -> 'my-plan-v2.png'."""
    return _WHITESPACE_RE.sub("-", original_name)


def build_file_name(original_name: str, clock: MonotonicMillisClock | None = None) -> str:
    """Return '<timestamp>-<sanitized-name>'."""
    timestamp = (clock or _clock).now()
    return f"{timestamp}-{sanitize_name(original_name)}"


def build_object_key(
    folder: str,
    original_name: str,
    clock: MonotonicMillisClock | None = None,
) -> str:
    """Return '<folder>/<timestamp>-<sanitized-name>'. folder is used as given."""
    return f"{folder}/{build_file_name(original_name, clock)}"

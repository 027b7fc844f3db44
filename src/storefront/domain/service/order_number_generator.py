"""Domain service: Order Number Generator.

Order numbers look like ``RP482913057``: a short prefix, the last six
digits of the current Unix time in milliseconds, and a three-digit
random suffix.  The time part keeps numbers from the same stretch of
time roughly ordered; the suffix separates orders in the same
millisecond.

The generator never consults the store.  Within one generator instance
a suffix is not reused inside the same millisecond; across processes
uniqueness is probabilistic and the unique index on ``order_number``
has the final word.
"""

from __future__ import annotations

import secrets
import threading
import time
from typing import Callable

DEFAULT_PREFIX = "RP"
TIMESTAMP_DIGITS = 6
RANDOM_DIGITS = 3


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


class OrderNumberGenerator:

    def __init__(
        self,
        prefix: str = DEFAULT_PREFIX,
        clock: Callable[[], int] = _now_ms,
        randbelow: Callable[[int], int] = secrets.randbelow,
    ) -> None:
        if not prefix or not prefix.isalnum():
            raise ValueError(f"Order number prefix must be alphanumeric, got {prefix!r}")
        self._prefix = prefix
        self._clock = clock
        self._randbelow = randbelow
        self._current_ms: int | None = None
        self._issued: set[int] = set()
        self._lock = threading.Lock()

    def next(self) -> str:
        """Return a fresh order number.  Safe to call from several threads."""
        with self._lock:
            return self._next_locked()

    def _next_locked(self) -> str:
        suffix_space = 10 ** RANDOM_DIGITS
        while True:
            ms = self._clock()
            if ms != self._current_ms:
                self._current_ms = ms
                self._issued.clear()
            if len(self._issued) < suffix_space:
                break
            # every suffix for this millisecond is taken; wait for the next one
            time.sleep(0.0005)

        suffix = self._randbelow(suffix_space)
        while suffix in self._issued:
            suffix = self._randbelow(suffix_space)
        self._issued.add(suffix)

        stamp = ms % 10 ** TIMESTAMP_DIGITS
        return f"{self._prefix}{stamp:0{TIMESTAMP_DIGITS}d}{suffix:0{RANDOM_DIGITS}d}"

"""
Watcher state shared between the watch loop and the repair engine.
"""

import time
from threading import Lock
from typing import Callable, Optional


class CooldownState:
    """
    Time of the last self-triggered write.

    Owned by the watch loop and handed to the repair engine, which marks it
    before touching the file and again after writing. Starts out as "never".
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._lock = Lock()
        self._last_write: Optional[float] = None

    @property
    def last_write(self) -> Optional[float]:
        with self._lock:
            return self._last_write

    def mark(self) -> float:
        """Record the current time as the last write."""
        now = self._clock()
        with self._lock:
            self._last_write = now
        return now

    def elapsed(self) -> float:
        """Seconds since the last write, infinite if there never was one."""
        with self._lock:
            last = self._last_write
        if last is None:
            return float("inf")
        return self._clock() - last

    def is_cooling_down(self, window: float) -> bool:
        return self.elapsed() < window

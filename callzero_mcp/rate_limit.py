from __future__ import annotations

import time
from collections import deque
from typing import Callable, Deque

from .errors import RateLimitError


class SlidingWindowRateLimiter:
    """
    In-process sliding-window limiter.

    Counts only the requests made within the trailing `window_seconds`. State is
    per instance and resets with the process; nothing is shared or persisted.
    """

    def __init__(
        self,
        max_requests: int = 50,
        window_seconds: float = 60.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._clock = clock
        self._timestamps: Deque[float] = deque()

    def _prune(self, now: float) -> None:
        while self._timestamps and now - self._timestamps[0] >= self.window_seconds:
            self._timestamps.popleft()

    def acquire(self) -> None:
        """Record one request, or raise `RateLimitError` if the window is full."""
        now = self._clock()
        self._prune(now)
        if len(self._timestamps) >= self.max_requests:
            raise RateLimitError(
                "Rate limit exceeded. Please wait before making more requests."
            )
        self._timestamps.append(now)

    @property
    def remaining(self) -> int:
        self._prune(self._clock())
        return max(self.max_requests - len(self._timestamps), 0)

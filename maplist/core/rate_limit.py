from __future__ import annotations

import math
import time
from collections import deque
from threading import Lock
from typing import Callable, Deque, Dict

from fastapi import HTTPException, Request, status


class SlidingWindowLimiter:
    """Allows ``limit`` hits per key within any ``window_seconds`` span.

    Counts live in this process only.
    """

    def __init__(
        self,
        *,
        limit: int,
        window_seconds: int,
        max_keys: int = 10_000,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.limit = limit
        self.window_seconds = window_seconds
        self._max_keys = max_keys
        self._clock = clock
        self._lock = Lock()
        self._hits: Dict[str, Deque[float]] = {}

    def hit(self, key: str) -> int:
        """Record a hit for ``key``; returns 0 when allowed, else seconds to wait."""
        now = self._clock()
        with self._lock:
            hits = self._hits.setdefault(key, deque())
            while hits and hits[0] <= now - self.window_seconds:
                hits.popleft()

            if len(hits) >= self.limit:
                return max(1, math.ceil(hits[0] + self.window_seconds - now))

            hits.append(now)
            if len(self._hits) > self._max_keys:
                self._drop_expired(now)
            return 0

    def reset(self) -> None:
        with self._lock:
            self._hits.clear()

    def _drop_expired(self, now: float) -> None:
        # keys whose newest hit has left the window carry no state worth keeping
        cutoff = now - self.window_seconds
        for key in [k for k, hits in self._hits.items() if not hits or hits[-1] <= cutoff]:
            del self._hits[key]


_throttles: list[Throttle] = []


class Throttle:
    """FastAPI dependency limiting one group of endpoints per client address."""

    def __init__(self, scope: str, *, limit: int, window_seconds: int, trust_forwarded_for: bool = False) -> None:
        self.scope = scope
        self.trust_forwarded_for = trust_forwarded_for
        self.limiter = SlidingWindowLimiter(limit=limit, window_seconds=window_seconds)
        _throttles.append(self)

    def client_key(self, request: Request) -> str:
        if self.trust_forwarded_for:
            forwarded = request.headers.get("x-forwarded-for", "").split(",")[0].strip()
            if forwarded:
                return f"{self.scope}:{forwarded}"
        host = request.client.host if request.client else "unknown"
        return f"{self.scope}:{host}"

    def __call__(self, request: Request) -> None:
        retry_after = self.limiter.hit(self.client_key(request))
        if retry_after:
            raise HTTPException(
                status_code=status.HTTP_429_TOO_MANY_REQUESTS,
                detail="Too many parse requests",
                headers={"Retry-After": str(retry_after)},
            )


def _reset_for_tests() -> None:
    for throttle in _throttles:
        throttle.limiter.reset()

"""Request counters for per-client rate limiting."""

import threading
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, Optional


class RateLimitStore(ABC):
    """
    Abstract counter store keyed by client identity.

    Implementations may keep counters in memory (single instance) or in a
    shared store such as Redis for multi-instance deployments.
    """

    @abstractmethod
    def hit(self, key: str, window_seconds: float, now: Optional[float] = None) -> int:
        """
        Register a request for ``key`` and return its count in the current window.

        A new window starts on the first request after the previous one expired.
        """
        ...

    @abstractmethod
    def clear(self) -> None:
        """Drop every counter."""
        ...


@dataclass
class _Window:
    count: int
    reset_at: float


class InMemoryRateLimitStore(RateLimitStore):
    """
    Fixed-window counters held in process memory.

    Expired windows are evicted on every hit, so memory is bounded by the
    number of clients seen within one window. Not shared across processes.
    """

    def __init__(self) -> None:
        self._windows: Dict[str, _Window] = {}
        self._lock = threading.Lock()

    def hit(self, key: str, window_seconds: float, now: Optional[float] = None) -> int:
        now = time.monotonic() if now is None else now

        with self._lock:
            self._evict_expired(now)

            window = self._windows.get(key)
            if window is None:
                self._windows[key] = _Window(count=1, reset_at=now + window_seconds)
                return 1

            window.count += 1
            return window.count

    def clear(self) -> None:
        with self._lock:
            self._windows.clear()

    def __len__(self) -> int:
        return len(self._windows)

    def _evict_expired(self, now: float) -> None:
        expired = [key for key, w in self._windows.items() if now >= w.reset_at]
        for key in expired:
            del self._windows[key]

"""
utils/rate_limit_utils.py

Purpose: Abuse prevention

- Fixed-window attempt counter keyed by an identifier string
- In-memory and local to one process

A multi-instance deployment needs a shared store with atomic
increment-and-expire instead; this limiter only sees its own process.
"""

import threading
import time
from dataclasses import dataclass
from typing import Callable, Dict, Optional


@dataclass
class AttemptRecord:
    count: int
    reset_time: float  # clock seconds after which the window is over


class RateLimiter:
    """
    Fixed-window rate limiter.

    The first attempt for a key opens a window of `window_ms`. Up to
    `max_attempts` attempts are allowed inside it; the window is not
    sliding, so the counter resets in one step when it expires.

    Stale records are only replaced on the next `is_allowed` call for
    the same key, never swept, so memory grows with the number of
    distinct keys seen.
    """

    def __init__(
        self,
        max_attempts: int = 5,
        window_ms: int = 60000,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if max_attempts <= 0:
            raise ValueError("max_attempts must be positive")
        if window_ms <= 0:
            raise ValueError("window_ms must be positive")

        self.max_attempts = max_attempts
        self.window_ms = window_ms
        self._clock = clock
        self._attempts: Dict[str, AttemptRecord] = {}
        self._lock = threading.Lock()

    def is_allowed(self, key: str) -> bool:
        """
        Records an attempt for `key` and returns whether it is allowed.

        A denied attempt does not change the stored record.
        """
        with self._lock:
            now = self._clock()
            attempt = self._attempts.get(key)

            if attempt is None or now > attempt.reset_time:
                self._attempts[key] = AttemptRecord(
                    count=1,
                    reset_time=now + self.window_ms / 1000.0,
                )
                return True

            if attempt.count >= self.max_attempts:
                return False

            attempt.count += 1
            return True

    def reset(self, key: str) -> None:
        """Clears the window for `key` immediately."""
        with self._lock:
            self._attempts.pop(key, None)

    def get_record(self, key: str) -> Optional[AttemptRecord]:
        """Returns a copy of the stored record for `key`, stale or not."""
        with self._lock:
            attempt = self._attempts.get(key)
            if attempt is None:
                return None
            return AttemptRecord(count=attempt.count, reset_time=attempt.reset_time)

    def __len__(self) -> int:
        with self._lock:
            return len(self._attempts)

"""
Sliding‑window rate limiter for the token verification endpoint.

Attempts are tracked per client address in process memory, so the
history is lost on restart and is not shared between processes.  The
limiter is advisory: it slows down brute forcing of the admin token
from a single address, nothing more.
"""

import time
from typing import Callable, Dict, List, Optional


class RateLimiter:
    """Count recent attempts per client address.

    Parameters
    ----------
    window_seconds : float
        Length of the sliding window.
    max_attempts : int
        Number of attempts allowed inside the window.
    clock : Callable[[], float]
        Time source, ``time.time`` by default.
    """

    def __init__(
        self,
        window_seconds: float = 60.0,
        max_attempts: int = 5,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.window_seconds = window_seconds
        self.max_attempts = max_attempts
        self._clock = clock
        self._attempts: Dict[str, List[float]] = {}

    def check(self, address: str) -> bool:
        """Return ``True`` while ``address`` is below the attempt threshold.

        Timestamps that fell out of the window are pruned and the
        pruned list is stored back.
        """
        now = self._clock()
        recent = [t for t in self._attempts.get(address, []) if now - t < self.window_seconds]
        self._attempts[address] = recent
        return len(recent) < self.max_attempts

    def record_attempt(self, address: str) -> None:
        self._attempts.setdefault(address, []).append(self._clock())

    def attempts(self, address: str) -> List[float]:
        return list(self._attempts.get(address, []))

    def reset(self, address: Optional[str] = None) -> None:
        """Forget the history of ``address``, or of every address."""
        if address is None:
            self._attempts.clear()
        else:
            self._attempts.pop(address, None)

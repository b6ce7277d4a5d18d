from __future__ import annotations

from fundraiser_api.app.core.rate_limit import RateLimiter


class _FakeClock:
    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


def test_allows_up_to_max_attempts() -> None:
    limiter = RateLimiter(window_seconds=60, max_attempts=5, clock=_FakeClock())

    for _ in range(5):
        assert limiter.check("1.2.3.4") is True
        limiter.record_attempt("1.2.3.4")

    assert limiter.check("1.2.3.4") is False


def test_addresses_are_tracked_independently() -> None:
    limiter = RateLimiter(max_attempts=1, clock=_FakeClock())
    limiter.record_attempt("10.0.0.1")

    assert limiter.check("10.0.0.1") is False
    assert limiter.check("10.0.0.2") is True


def test_old_attempts_leave_the_window_and_are_pruned() -> None:
    clock = _FakeClock()
    limiter = RateLimiter(window_seconds=60, max_attempts=2, clock=clock)
    limiter.record_attempt("a")
    clock.now += 30
    limiter.record_attempt("a")
    assert limiter.check("a") is False

    clock.now += 31
    assert limiter.check("a") is True
    assert limiter.attempts("a") == [1030.0]

    clock.now += 60
    assert limiter.check("a") is True
    assert limiter.attempts("a") == []


def test_attempt_exactly_window_old_is_expired() -> None:
    clock = _FakeClock()
    limiter = RateLimiter(window_seconds=60, max_attempts=1, clock=clock)
    limiter.record_attempt("a")

    clock.now += 60
    assert limiter.check("a") is True


def test_reset() -> None:
    limiter = RateLimiter(max_attempts=1, clock=_FakeClock())
    limiter.record_attempt("a")
    limiter.record_attempt("b")

    limiter.reset("a")
    assert limiter.check("a") is True
    assert limiter.check("b") is False

    limiter.reset()
    assert limiter.check("b") is True

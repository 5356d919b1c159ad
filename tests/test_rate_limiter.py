from concurrent.futures import ThreadPoolExecutor
from datetime import timedelta

import pytest

from coredrills.rate_limiter import RateLimiter


class FakeClock:
    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now


def test_burst_allows_only_max_requests():
    clock = FakeClock()
    limiter = RateLimiter(3, 1, clock=clock)
    results = []
    for i in range(1, 6):
        results.append(limiter.should_allow(str(i)))
        clock.now += 0.1
    assert results == [True, True, True, False, False]
    assert len(limiter) == 3


def test_window_slides_after_waiting():
    clock = FakeClock()
    limiter = RateLimiter(3, 1, clock=clock)
    for i in range(1, 6):
        limiter.should_allow(str(i))
        clock.now += 0.1
    clock.now += 1.0
    results = []
    for i in range(6, 11):
        results.append(limiter.should_allow(str(i)))
        clock.now += 0.1
    assert results == [True, True, True, False, False]


def test_entry_exactly_window_old_expires():
    clock = FakeClock()
    limiter = RateLimiter(1, 1, clock=clock)
    assert limiter.should_allow("a") is True
    clock.now = 0.999
    assert limiter.should_allow("b") is False
    clock.now = 1.0
    assert limiter.should_allow("c") is True


def test_denied_requests_are_not_logged():
    clock = FakeClock()
    limiter = RateLimiter(2, 10, clock=clock)
    limiter.should_allow("a")
    limiter.should_allow("b")
    for _ in range(5):
        assert limiter.should_allow("x") is False
    assert len(limiter) == 2


def test_timedelta_window():
    clock = FakeClock()
    limiter = RateLimiter(1, timedelta(milliseconds=500), clock=clock)
    assert limiter.window == 0.5
    assert limiter.should_allow("a") is True
    clock.now = 0.5
    assert limiter.should_allow("b") is True


def test_zero_limit_denies_everything():
    limiter = RateLimiter(0, 1, clock=FakeClock())
    assert limiter.should_allow("a") is False


@pytest.mark.parametrize("max_requests, window", [(-1, 1), (1, 0), (1, -2)])
def test_invalid_arguments(max_requests, window):
    with pytest.raises(ValueError):
        RateLimiter(max_requests, window)


def test_concurrent_callers_never_exceed_limit():
    limiter = RateLimiter(50, 3600, clock=FakeClock())
    request_ids = [f"{n}-{i}" for n in range(8) for i in range(20)]
    with ThreadPoolExecutor(max_workers=8) as executor:
        results = list(executor.map(limiter.should_allow, request_ids))
    assert len(results) == 160
    assert sum(results) == 50
    assert len(limiter) == 50
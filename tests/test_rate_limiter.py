from concurrent.futures import ThreadPoolExecutor

import pytest

from playertrack.ingest import RateLimiter


def test_first_request_opens_window():
    limiter = RateLimiter()
    assert limiter.admit("1.2.3.4", 0.0)
    window = limiter.window_for("1.2.3.4")
    assert window is not None
    assert window.count == 1
    assert window.window_start == 0.0


def test_twenty_first_request_in_window_is_rejected():
    limiter = RateLimiter(window_seconds=10.0, max_requests=20)
    results = [limiter.admit("a", 1.0 + i * 0.1) for i in range(21)]
    assert all(results[:20])
    assert results[20] is False


def test_rejected_requests_still_count():
    limiter = RateLimiter(window_seconds=10.0, max_requests=2)
    for _ in range(5):
        limiter.admit("a", 0.0)
    assert limiter.window_for("a").count == 5


def test_window_resets_after_elapsed():
    limiter = RateLimiter(window_seconds=10.0, max_requests=20)
    for _ in range(25):
        limiter.admit("a", 0.0)
    # Exactly at the boundary the window is still open.
    assert limiter.admit("a", 10.0) is False
    assert limiter.admit("a", 10.001) is True
    window = limiter.window_for("a")
    assert window.count == 1
    assert window.window_start == 10.001


def test_origins_are_independent():
    limiter = RateLimiter(window_seconds=10.0, max_requests=1)
    assert limiter.admit("a", 0.0)
    assert not limiter.admit("a", 0.0)
    assert limiter.admit("b", 0.0)


def test_sweep_drops_only_expired_windows():
    limiter = RateLimiter(window_seconds=10.0, max_requests=5)
    limiter.admit("old", 0.0)
    limiter.admit("fresh", 8.0)
    assert limiter.sweep(12.0) == 1
    assert limiter.window_for("old") is None
    assert limiter.window_for("fresh") is not None
    assert len(limiter) == 1


@pytest.mark.parametrize("kwargs", [{"window_seconds": 0}, {"max_requests": 0}])
def test_invalid_configuration(kwargs):
    with pytest.raises(ValueError):
        RateLimiter(**kwargs)


def test_concurrent_admits_are_all_counted():
    limiter = RateLimiter(window_seconds=10.0, max_requests=50)
    with ThreadPoolExecutor(max_workers=16) as pool:
        results = list(pool.map(lambda _: limiter.admit("shared", 0.0), range(500)))

    assert limiter.window_for("shared").count == 500
    assert sum(results) == 50

from datetime import datetime

from schemas.brand import BrandSignals
from services.brand_vetter import score_brand_signals
from services.cache import BrandVetCache, next_local_midnight
from services.rate_limiter import FixedWindowRateLimiter


class FakeClock:
    def __init__(self, now=1000.0):
        self.now = now

    def __call__(self):
        return self.now


class TestBrandVetCache:
    def setup_method(self):
        self.result = score_brand_signals(BrandSignals())
        self.morning = datetime(2026, 3, 1, 9, 30)

    def test_hit_returns_flagged_copy(self):
        cache = BrandVetCache()
        cache.set("brand:glow co:2026-03-01", self.result, now=self.morning)

        hit = cache.get("brand:glow co:2026-03-01", now=datetime(2026, 3, 1, 23, 59))
        assert hit.cached is True
        assert hit.trust_score == self.result.trust_score
        assert self.result.cached is False

    def test_expires_at_local_midnight(self):
        cache = BrandVetCache()
        cache.set("key", self.result, now=self.morning)
        assert cache.get("key", now=datetime(2026, 3, 2, 0, 0)) is None
        assert len(cache) == 0

    def test_miss(self):
        assert BrandVetCache().get("nothing") is None

    def test_expired_entries_evicted_past_threshold(self):
        cache = BrandVetCache(cleanup_threshold=2)
        for key in ("a", "b", "c"):
            cache.set(key, self.result, now=self.morning)
        cache.set("d", self.result, now=datetime(2026, 3, 2, 8, 0))
        assert len(cache) == 1

    def test_next_local_midnight(self):
        assert next_local_midnight(self.morning) == datetime(2026, 3, 2)


class TestRateLimiter:
    def test_allows_up_to_max(self):
        limiter = FixedWindowRateLimiter(window_seconds=60, max_requests=3, clock=FakeClock())
        statuses = [limiter.check("ratelimit:1.2.3.4") for _ in range(4)]
        assert [s.allowed for s in statuses] == [True, True, True, False]
        assert [s.remaining for s in statuses] == [2, 1, 0, 0]

    def test_denial_reports_reset(self):
        clock = FakeClock()
        limiter = FixedWindowRateLimiter(window_seconds=60, max_requests=1, clock=clock)
        limiter.check("k")
        clock.now += 15.5
        status = limiter.check("k")
        assert not status.allowed
        assert status.reset_in == 45

    def test_window_rolls_over(self):
        clock = FakeClock()
        limiter = FixedWindowRateLimiter(window_seconds=60, max_requests=1, clock=clock)
        limiter.check("k")
        clock.now += 60
        assert limiter.check("k").allowed

    def test_keys_are_independent(self):
        limiter = FixedWindowRateLimiter(max_requests=1, clock=FakeClock())
        limiter.check("a")
        assert limiter.check("b").allowed
        assert not limiter.check("a").allowed

    def test_reset_and_cleanup(self):
        clock = FakeClock()
        limiter = FixedWindowRateLimiter(window_seconds=60, max_requests=1, clock=clock)
        limiter.check("a")
        limiter.check("b")
        clock.now += 61
        assert limiter.cleanup() == 2
        assert len(limiter) == 0

        limiter.check("a")
        limiter.reset()
        assert limiter.check("a").allowed

import pytest
from unittest.mock import Mock
from redis.exceptions import ConnectionError as RedisConnectionError

from services.render_cache import MemoryRenderCache, RedisRenderCache, RenderCache


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


@pytest.mark.unit
class TestMemoryRenderCache:

    def setup_method(self):
        self.clock = FakeClock()
        self.cache = MemoryRenderCache(ttl_seconds=60, clock=self.clock)

    def test_miss_for_unknown_slug(self):
        assert self.cache.get("home") is None

    def test_hit_within_ttl(self):
        self.cache.set("home", "<html>home</html>")
        self.clock.now += 59.9

        assert self.cache.get("home") == "<html>home</html>"

    def test_expired_entry_is_a_miss(self):
        self.cache.set("home", "<html>home</html>")
        self.clock.now += 60

        assert self.cache.get("home") is None

    def test_set_after_expiry_overwrites(self):
        self.cache.set("home", "old")
        self.clock.now += 120
        self.cache.set("home", "new")

        assert self.cache.get("home") == "new"

    def test_entries_are_per_slug(self):
        self.cache.set("a", "A")
        self.cache.set("b", "B")

        assert self.cache.get("a") == "A"
        assert self.cache.get("b") == "B"

    def test_least_recently_used_slug_is_evicted_when_full(self):
        class TinyRenderCache(MemoryRenderCache):
            MAX_ENTRIES = 2

        cache = TinyRenderCache(ttl_seconds=60, clock=self.clock)
        cache.set("a", "A")
        cache.set("b", "B")
        cache.get("a")
        cache.set("c", "C")

        assert cache.get("a") == "A"
        assert cache.get("b") is None
        assert cache.get("c") == "C"

    def test_ttl_follows_constructor_argument(self):
        cache = MemoryRenderCache(ttl_seconds=5, clock=self.clock)
        cache.set("home", "html")
        self.clock.now += 4
        assert cache.get("home") == "html"

        self.clock.now += 1
        assert cache.get("home") is None


@pytest.mark.unit
def test_render_cache_is_abstract():
    with pytest.raises(TypeError):
        RenderCache()


@pytest.mark.unit
class TestRedisRenderCache:

    def setup_method(self):
        self.client = Mock()
        self.cache = RedisRenderCache(self.client, ttl_seconds=60)

    def test_set_uses_setex_with_prefix(self):
        self.cache.set("home", "<html></html>")

        self.client.setex.assert_called_once_with("pageforge:render:home", 60, "<html></html>")

    def test_get_decodes_bytes(self):
        self.client.get.return_value = "<p>ü</p>".encode("utf-8")

        assert self.cache.get("home") == "<p>ü</p>"
        self.client.get.assert_called_once_with("pageforge:render:home")

    def test_get_miss(self):
        self.client.get.return_value = None

        assert self.cache.get("home") is None

    def test_redis_errors_degrade_to_miss(self):
        self.client.get.side_effect = RedisConnectionError("down")
        self.client.setex.side_effect = RedisConnectionError("down")

        self.cache.set("home", "<html></html>")
        assert self.cache.get("home") is None

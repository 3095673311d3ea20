"""
Slug-keyed cache of rendered page HTML.

Entries live for a fixed TTL and are not invalidated when a page changes, so an
edit or publish toggle can take up to one TTL to show up publicly.
"""
import threading
import time
from abc import ABC, abstractmethod
from functools import lru_cache
from typing import Callable

import redis
from cachetools import TTLCache
from redis.exceptions import RedisError

from core.logging_config import get_logger
from core.settings import settings

logger = get_logger(__name__)


class RenderCache(ABC):
    ttl_seconds: int

    @abstractmethod
    def get(self, slug: str) -> str | None:
        """Cached HTML for the slug, or None on a miss."""
        pass

    @abstractmethod
    def set(self, slug: str, html: str) -> None:
        pass


class MemoryRenderCache(RenderCache):
    """Per-process cache holding at most MAX_ENTRIES slugs, least recently used evicted first."""

    MAX_ENTRIES = 10_000

    def __init__(self, ttl_seconds: int = 60, clock: Callable[[], float] = time.monotonic):
        self.ttl_seconds = ttl_seconds
        self._entries = TTLCache(maxsize=self.MAX_ENTRIES, ttl=ttl_seconds, timer=clock)
        # Requests are served from a thread pool and TTLCache is not thread-safe
        self._lock = threading.Lock()

    def get(self, slug: str) -> str | None:
        with self._lock:
            return self._entries.get(slug)

    def set(self, slug: str, html: str) -> None:
        with self._lock:
            self._entries[slug] = html


class RedisRenderCache(RenderCache):
    """Cache shared by all API workers. Redis failures degrade to a miss."""

    KEY_PREFIX = "pageforge:render:"

    def __init__(self, client: redis.Redis, ttl_seconds: int = 60):
        self.client = client
        self.ttl_seconds = ttl_seconds

    def _key(self, slug: str) -> str:
        return f"{self.KEY_PREFIX}{slug}"

    def get(self, slug: str) -> str | None:
        try:
            value = self.client.get(self._key(slug))
        except RedisError as e:
            logger.warning(f"Render cache read failed for '{slug}': {e}")
            return None
        if value is None:
            return None
        return value.decode("utf-8") if isinstance(value, bytes) else value

    def set(self, slug: str, html: str) -> None:
        try:
            self.client.setex(self._key(slug), self.ttl_seconds, html)
        except RedisError as e:
            logger.warning(f"Render cache write failed for '{slug}': {e}")


@lru_cache
def get_render_cache() -> RenderCache:
    """Process-wide render cache, backend chosen by RENDER_CACHE_BACKEND."""
    ttl = settings.RENDER_CACHE_TTL_SECONDS
    if settings.RENDER_CACHE_BACKEND == "redis":
        if not settings.REDIS_URL:
            raise ValueError("RENDER_CACHE_BACKEND=redis requires REDIS_URL")
        logger.info("Using Redis render cache")
        return RedisRenderCache(redis.from_url(settings.REDIS_URL), ttl_seconds=ttl)
    return MemoryRenderCache(ttl_seconds=ttl)

"""Versioned page payload cache on Django's cache framework."""

from collections.abc import Callable
from typing import Any

from django.conf import settings
from django.core.cache import cache

import structlog

logger = structlog.get_logger(__name__)

_VERSION_KEY = "page-cache:version:{path}"
_ENTRY_KEY = "page-cache:{path}:v{version}:{key}"


class PageCacheService:
    """Cache rendered page payloads per path.

    Each path has a version counter folded into every entry key. Revalidating
    a path bumps its counter, so entries written under older versions are
    never read again and simply age out of the backend.

    Cache backend failures are logged and treated as misses; a broken cache
    never fails the request that uses it.
    """

    def __init__(self, timeout: int | None = None) -> None:
        """Initialize the page cache.

        Args:
            timeout: Entry lifetime in seconds; defaults to PAGE_CACHE_TTL
        """
        self.timeout = (
            timeout if timeout is not None else getattr(settings, "PAGE_CACHE_TTL", 60)
        )

    def get(self, path: str, key: str) -> Any | None:
        """Return the cached payload for ``key`` under ``path``, or None."""
        try:
            return cache.get(self._entry_key(path, key))
        except Exception as e:
            logger.warning("page_cache_read_failed", path=path, key=key, error=str(e))
            return None

    def set(self, path: str, key: str, value: Any) -> None:
        """Store ``value`` for ``key`` under the current version of ``path``."""
        try:
            cache.set(self._entry_key(path, key), value, timeout=self.timeout)
        except Exception as e:
            logger.warning("page_cache_write_failed", path=path, key=key, error=str(e))

    def get_or_set(self, path: str, key: str, builder: Callable[[], Any]) -> Any:
        """Return the cached payload, building and storing it on a miss."""
        value = self.get(path, key)
        if value is None:
            value = builder()
            self.set(path, key, value)
        return value

    def revalidate(self, *paths: str) -> None:
        """Invalidate every cached payload for the given paths."""
        for path in paths:
            version_key = _VERSION_KEY.format(path=path)
            try:
                cache.add(version_key, 1, timeout=None)
                cache.incr(version_key)
            except Exception as e:
                logger.warning("page_cache_revalidate_failed", path=path, error=str(e))
                continue
            logger.debug("page_cache_revalidated", path=path)

    def _entry_key(self, path: str, key: str) -> str:
        version = cache.get(_VERSION_KEY.format(path=path)) or 1
        return _ENTRY_KEY.format(path=path, version=version, key=key)


# Global page cache instance
page_cache = PageCacheService()

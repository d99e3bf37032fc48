"""Base repository class."""

from collections.abc import Callable
from typing import Any

from loguru import logger


class BaseRepository:
    """Base repository with an in-memory cache."""

    def __init__(self):
        self._cache: dict[str, Any] = {}
        logger.debug("{} initialized", self.__class__.__name__)

    def clear_cache(self) -> None:
        """Clear in-memory cache."""
        self._cache.clear()
        logger.debug("Cache cleared")

    def refresh(self) -> None:
        """Drop cached tables so the next read goes back to storage."""
        self.clear_cache()
        logger.info("Repository refreshed")

    def _cached(self, key: str, fn: Callable[[], Any]) -> Any:
        """Get from cache or compute."""
        if key not in self._cache:
            self._cache[key] = fn()
            logger.debug("Cache miss: {}", key)
        return self._cache[key]

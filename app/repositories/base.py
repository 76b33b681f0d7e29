"""Base repository class."""

from collections.abc import Callable
from typing import Any

import duckdb
from loguru import logger


class BaseRepository:
    """Base repository with common functionality."""

    def __init__(self, conn: duckdb.DuckDBPyConnection):
        self._db = conn
        self._cache: dict[str, Any] = {}
        logger.debug("{} initialized", self.__class__.__name__)

    def clear_cache(self) -> None:
        """Clear in-memory cache."""
        self._cache.clear()
        logger.debug("Cache cleared")

    def _cached(self, key: str, fn: Callable[[], Any]) -> Any:
        """Get from cache or compute. ``None`` results are not cached."""
        if key not in self._cache:
            value = fn()
            if value is None:
                return None
            self._cache[key] = value
            logger.debug("Cache miss: {}", key)
        return self._cache[key]

    def execute(self, query: str, params: list | None = None) -> Any:
        """Execute SQL query."""
        if params:
            return self._db.execute(query, params)
        return self._db.execute(query)

    def fetchall(self, query: str, params: list | None = None) -> list:
        """Execute and fetch all rows."""
        return self.execute(query, params).fetchall()

    def fetchone(self, query: str, params: list | None = None) -> Any:
        """Execute and fetch one row."""
        return self.execute(query, params).fetchone()

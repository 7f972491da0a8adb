"""Concrete implementation of the in-memory TTL Caching Service.

Entries share one TTL fixed at construction. Expiry is evaluated lazily:
a read that finds an expired entry removes it, there is no background sweep.
"""

import logging
import math
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

# Domain Layer Imports
from regiondash.domain.interfaces.cache import CacheService
from regiondash.domain.models.common import CacheKey

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 5 * 60  # 5 minutes

@dataclass
class CacheEntry:
    """Internal representation of a cache entry."""
    value: Any
    inserted_at: float # Clock reading at insertion

class CachingServiceImpl(CacheService):
    """Memory-resident key/value cache with a single time-to-live."""

    def __init__(
        self,
        ttl: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        """Initializes the caching service.

        Args:
            ttl: Maximum entry age in seconds.
            clock: Source of the current time; tests inject a fake one.
        """
        if not math.isfinite(ttl) or ttl < 0:
            raise ValueError(f"Cache TTL must be a finite non-negative number, got {ttl}")
        self._entries: Dict[CacheKey, CacheEntry] = {}
        self.ttl = ttl
        self._clock = clock
        logger.info(f"CachingService initialized (ttl={ttl}s)")

    def _is_expired(self, entry: CacheEntry, now: float) -> bool:
        return now - entry.inserted_at > self.ttl

    # --- CacheService Interface Implementation ---

    def get(self, key: CacheKey) -> Optional[Any]:
        """Retrieves a live item, evicting it if it has expired."""
        entry = self._entries.get(key)
        if entry is None:
            logger.debug(f"Cache MISS for key: {key}")
            return None

        if self._is_expired(entry, self._clock()):
            del self._entries[key]
            logger.debug(f"Cache EXPIRED key: {key}. Removed.")
            return None

        logger.debug(f"Cache HIT for key: {key}")
        return entry.value

    def set(self, key: CacheKey, value: Any) -> None:
        """Stores an item, replacing any previous entry for the key."""
        self._entries[key] = CacheEntry(value=value, inserted_at=self._clock())
        logger.debug(f"Cache PUT key: {key}")

    def clear(self) -> None:
        """Clears all items."""
        self._entries.clear()
        logger.info("Cleared in-memory cache.")

"""Interface for caching mechanisms.

Defines the contract for storing, retrieving, and clearing cached data
under a single time-to-live policy.
"""

import abc
from typing import Any, Optional

from ..models.common import CacheKey

class CacheService(abc.ABC):
    """Abstract Base Class for caching operations."""

    @abc.abstractmethod
    def get(self, key: CacheKey) -> Optional[Any]:
        """Retrieves an item from the cache.

        An entry found to be expired is removed before returning.

        Args:
            key: The cache key to retrieve.

        Returns:
            The cached item if found and not expired, otherwise None.
        """
        pass

    @abc.abstractmethod
    def set(self, key: CacheKey, value: Any) -> None:
        """Stores an item, replacing any existing entry and restarting its TTL.

        Args:
            key: The cache key to store the item under.
            value: The item to store. Callers must not mutate it afterwards.
        """
        pass

    @abc.abstractmethod
    def clear(self) -> None:
        """Removes all entries."""
        pass

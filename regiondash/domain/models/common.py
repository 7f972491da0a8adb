"""Defines common Value Objects used across different domain contexts.

These objects represent simple values like cache keys and manager ids,
ensuring consistency and type safety between the layers.
"""

from typing import NewType

# === Caching Context ===
CacheKey = NewType("CacheKey", str)              # Unique key for a cache entry

# === Manager Context ===
ManagerId = NewType("ManagerId", int)            # Identifier of a manager entity

# Fixed key under which the manager list is cached
MANAGER_LIST_CACHE_KEY = CacheKey("entities")


def manager_cache_key(manager_id: ManagerId) -> CacheKey:
    """Cache key for the composite data of a single manager."""
    return CacheKey(f"entity-{manager_id}")

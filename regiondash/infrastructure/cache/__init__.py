"""Caching Service Implementation.

Provides the in-memory TTL implementation of the CacheService interface.
Bounded Context: Cache Management
"""

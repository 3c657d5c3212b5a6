"""Ephemeral store implementations."""

from .inmemory import InMemoryEphemeralStore
from .redis_store import RedisEphemeralStore

__all__ = [
    "InMemoryEphemeralStore",
    "RedisEphemeralStore",
]

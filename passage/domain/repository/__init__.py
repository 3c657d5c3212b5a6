"""Domain repository interfaces for Passage."""

from passage.domain.repository.ephemeral import EphemeralStore, ttl_seconds
from passage.domain.repository.user import UserRepository

__all__ = [
    "EphemeralStore",
    "UserRepository",
    "ttl_seconds",
]

"""Ephemeral key-value store interface."""

from abc import ABC, abstractmethod
from datetime import timedelta
from typing import Optional


class EphemeralStore(ABC):
    """Flat string key-value store with per-key expiry.

    Backs every short-lived record in the login flow. Implementations raise
    StoreUnavailableError for any transport or protocol failure; a missing
    key is never an error.
    """

    @abstractmethod
    async def get(self, key: str) -> Optional[str]:
        """Read a value.

        Args:
            key: Store key

        Returns:
            The stored value, or None if absent or expired
        """
        pass

    @abstractmethod
    async def set(self, key: str, value: str, ttl: timedelta) -> None:
        """Write a value unconditionally, replacing any previous expiry.

        Args:
            key: Store key
            value: Value to store
            ttl: Time until the key expires
        """
        pass

    @abstractmethod
    async def set_if_absent(self, key: str, value: str, ttl: timedelta) -> bool:
        """Write a value only if no live value exists for the key.

        Args:
            key: Store key
            value: Value to store
            ttl: Time until the key expires

        Returns:
            True if the value was written, False if the key was taken
        """
        pass

    @abstractmethod
    async def delete(self, key: str) -> None:
        """Delete a key. Deleting a missing key is a no-op."""
        pass

    @abstractmethod
    async def take(self, key: str) -> Optional[str]:
        """Atomically read and delete a value.

        Args:
            key: Store key

        Returns:
            The value that was stored, or None if absent or expired
        """
        pass

    @abstractmethod
    async def ping(self) -> bool:
        """Check that the store is reachable."""
        pass


def ttl_seconds(ttl: timedelta) -> int:
    """Whole seconds for a TTL, never less than one."""
    return max(1, int(ttl.total_seconds()))

"""In-memory ephemeral store for tests and local development."""

import time
from datetime import timedelta
from typing import Callable, Optional

from passage.domain.repository import EphemeralStore, ttl_seconds


class InMemoryEphemeralStore(EphemeralStore):
    """Dict-backed EphemeralStore with per-key expiry.

    Expiry is read from an injectable clock (seconds, monotonic) so tests
    can move time forward. A key is dead once the clock reaches its expiry.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self.clock = clock
        self._data: dict[str, tuple[str, float]] = {}

    def _live(self, key: str) -> Optional[str]:
        entry = self._data.get(key)
        if entry is None:
            return None
        value, expires_at = entry
        if self.clock() >= expires_at:
            del self._data[key]
            return None
        return value

    def _expiry(self, ttl: timedelta) -> float:
        return self.clock() + ttl_seconds(ttl)

    async def get(self, key: str) -> Optional[str]:
        return self._live(key)

    async def set(self, key: str, value: str, ttl: timedelta) -> None:
        self._data[key] = (value, self._expiry(ttl))

    async def set_if_absent(self, key: str, value: str, ttl: timedelta) -> bool:
        if self._live(key) is not None:
            return False
        self._data[key] = (value, self._expiry(ttl))
        return True

    async def delete(self, key: str) -> None:
        self._data.pop(key, None)

    async def take(self, key: str) -> Optional[str]:
        value = self._live(key)
        if value is not None:
            del self._data[key]
        return value

    async def ping(self) -> bool:
        return True

    def __len__(self) -> int:
        return sum(1 for key in list(self._data) if self._live(key) is not None)

"""Redis implementation of the ephemeral store."""

from contextlib import asynccontextmanager
from datetime import timedelta
from typing import AsyncIterator, Optional

import logfire
import redis.asyncio as aioredis
from redis.exceptions import RedisError

from passage.domain.error import StoreUnavailableError
from passage.domain.repository import EphemeralStore, ttl_seconds


class RedisEphemeralStore(EphemeralStore):
    """EphemeralStore backed by Redis key expiry.

    Every command is bounded by the client's socket timeouts; any Redis
    failure surfaces as StoreUnavailableError.
    """

    def __init__(self, client: aioredis.Redis) -> None:
        """Initialize store.

        Args:
            client: Redis client created with ``decode_responses=True``
        """
        self.client = client

    @classmethod
    def from_url(cls, url: str, *, socket_timeout: float = 5.0) -> "RedisEphemeralStore":
        """Create a store with a client bounded by the given timeout."""
        client = aioredis.from_url(
            url,
            decode_responses=True,
            socket_timeout=socket_timeout,
            socket_connect_timeout=socket_timeout,
        )
        return cls(client)

    @asynccontextmanager
    async def _command(self, name: str) -> AsyncIterator[None]:
        try:
            yield
        except RedisError as e:
            logfire.error("Redis command failed", command=name, error=str(e))
            raise StoreUnavailableError(f"Ephemeral store unavailable ({name})") from e

    async def get(self, key: str) -> Optional[str]:
        async with self._command("GET"):
            return await self.client.get(key)

    async def set(self, key: str, value: str, ttl: timedelta) -> None:
        async with self._command("SET"):
            await self.client.set(key, value, ex=ttl_seconds(ttl))

    async def set_if_absent(self, key: str, value: str, ttl: timedelta) -> bool:
        async with self._command("SET NX"):
            # Redis answers None when NX refuses the write
            written = await self.client.set(key, value, ex=ttl_seconds(ttl), nx=True)
        return bool(written)

    async def delete(self, key: str) -> None:
        async with self._command("DEL"):
            await self.client.delete(key)

    async def take(self, key: str) -> Optional[str]:
        async with self._command("GETDEL"):
            return await self.client.getdel(key)

    async def ping(self) -> bool:
        async with self._command("PING"):
            return bool(await self.client.ping())

    async def close(self) -> None:
        await self.client.aclose()

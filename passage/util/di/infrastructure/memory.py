"""Ephemeral store infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide

from passage.config import Settings
from passage.domain.repository import EphemeralStore
from passage.persistence.ephemeral import RedisEphemeralStore
from passage.util.di.base import ProviderBase
from passage.util.observability import instrument_redis


class MemoryProvider(ProviderBase):
    """Ephemeral store component base."""

    __mock_component__ = "memory"


class ProdMemoryProvider(MemoryProvider):
    """Production ephemeral store backed by Redis."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_ephemeral_store(
        self, settings: Settings
    ) -> AsyncIterator[EphemeralStore]:
        """Provide Redis store, closed on shutdown."""
        instrument_redis()
        store = RedisEphemeralStore.from_url(
            settings.redis.url, socket_timeout=settings.redis.socket_timeout
        )
        yield store
        await store.close()

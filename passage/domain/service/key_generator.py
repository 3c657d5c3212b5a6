"""Random key generation with collision retry."""

import secrets
from datetime import timedelta
from typing import Callable, TypeVar

import logfire

from passage.domain.error import KeyGenerationExhaustedError
from passage.domain.model import EphemeralRecord

from .base import Service
from .record_store import RecordStore

R = TypeVar("R", bound=EphemeralRecord)


def secure_rand_hex(byte_len: int) -> str:
    """Hex string of `byte_len` bytes from the OS CSPRNG."""
    return secrets.token_hex(byte_len)


class KeyGenerator(Service):
    """Creates records under fresh random keys.

    Uniqueness is enforced by the store's set-if-absent; a colliding key is
    simply regenerated, up to a bounded number of attempts.
    """

    def __init__(
        self,
        records: RecordStore,
        max_attempts: int = 5,
        rand_hex: Callable[[int], str] = secure_rand_hex,
    ) -> None:
        """Initialize key generator.

        Args:
            records: Typed ephemeral store
            max_attempts: Attempts before giving up on a free key
            rand_hex: Source of random hex keys
        """
        self.records = records
        self.max_attempts = max_attempts
        self.rand_hex = rand_hex

    async def create_unique(
        self,
        build: Callable[[str], R],
        ttl: timedelta,
        *,
        byte_len: int = 16,
    ) -> R:
        """Store a new record under a key nobody else holds.

        Args:
            build: Builds the record for a candidate key
            ttl: Expiry of the stored record
            byte_len: Random bytes per key

        Returns:
            The stored record

        Raises:
            KeyGenerationExhaustedError: If every attempt collided
        """
        key = ""
        prefix = ""
        for attempt in range(1, self.max_attempts + 1):
            key = self.rand_hex(byte_len)
            record = build(key)
            prefix = record.table_prefix
            if await self.records.set_if_absent(record, ttl):
                return record
            logfire.warn("Key collision, retrying", prefix=prefix, attempt=attempt)

        logfire.error(
            "Ran out of attempts to create a unique key",
            prefix=prefix,
            attempts=self.max_attempts,
            last_key=key,
        )
        raise KeyGenerationExhaustedError(prefix, self.max_attempts)

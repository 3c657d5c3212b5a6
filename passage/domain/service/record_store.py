"""Typed access to the ephemeral store.

Records are serialized as compact JSON under ``<prefix>#<key>``.
"""

from datetime import timedelta
from typing import Optional, TypeVar

import logfire
from pydantic import ValidationError

from passage.domain.error import StoreUnavailableError
from passage.domain.model import EphemeralRecord
from passage.domain.repository import EphemeralStore

from .base import Service

R = TypeVar("R", bound=EphemeralRecord)


class RecordStore(Service):
    """Reads and writes ephemeral records of any type."""

    def __init__(self, store: EphemeralStore) -> None:
        """Initialize record store.

        Args:
            store: Raw ephemeral key-value store
        """
        self.store = store

    async def get(self, record_type: type[R], key: str) -> Optional[R]:
        """Load a record, or None if it is absent or expired."""
        raw = await self.store.get(record_type.named_key(key))
        return self._load(record_type, key, raw)

    async def set(self, record: EphemeralRecord, ttl: timedelta) -> None:
        """Store a record, overwriting any previous value and expiry."""
        await self.store.set(record.named_key(record.key), self._dump(record), ttl)

    async def set_if_absent(self, record: EphemeralRecord, ttl: timedelta) -> bool:
        """Store a record only if its key is free.

        Returns:
            True if stored, False if a live record already holds the key
        """
        return await self.store.set_if_absent(
            record.named_key(record.key), self._dump(record), ttl
        )

    async def delete(self, record_type: type[EphemeralRecord], key: str) -> None:
        await self.store.delete(record_type.named_key(key))

    async def take(self, record_type: type[R], key: str) -> Optional[R]:
        """Load and delete a record in one step."""
        raw = await self.store.take(record_type.named_key(key))
        return self._load(record_type, key, raw)

    @staticmethod
    def _dump(record: EphemeralRecord) -> str:
        return record.model_dump_json(by_alias=True, exclude_none=True)

    @staticmethod
    def _load(record_type: type[R], key: str, raw: Optional[str]) -> Optional[R]:
        if raw is None:
            return None
        try:
            return record_type.model_validate_json(raw)
        except ValidationError as e:
            logfire.error(
                "Corrupt record in ephemeral store",
                prefix=record_type.table_prefix,
                key=key,
                error=str(e),
            )
            raise StoreUnavailableError("Stored record could not be decoded") from e

"""Base model for all domain entities."""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for all domain models.

    Provides common configuration for immutability and custom types.
    """

    model_config = ConfigDict(
        frozen=True,  # All domain models are immutable
        arbitrary_types_allowed=True,  # Allow custom value objects
        populate_by_name=True,  # Construct by field name, store by alias
    )


class EphemeralRecord(DomainModel):
    """Record kept in the ephemeral key-value store.

    Each record type owns a short prefix so that all types can share one
    flat keyspace; the stored key is ``<prefix>#<key>``.
    """

    table_prefix: ClassVar[str]

    key: str

    @classmethod
    def named_key(cls, key: str) -> str:
        """Store key for a record of this type."""
        return f"{cls.table_prefix}#{key}"

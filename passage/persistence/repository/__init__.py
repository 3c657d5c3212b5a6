"""PostgreSQL repository implementations."""

from passage.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
]

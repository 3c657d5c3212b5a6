"""Engine and session factory for the durable user store."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import NullPool

from passage.config import Settings


def create_engine(settings: Settings, *, pooled: bool = True) -> AsyncEngine:
    """Async engine for the configured PostgreSQL database.

    Migrations run once and exit, so they ask for an unpooled engine.
    """
    if not pooled:
        return create_async_engine(settings.database_url, poolclass=NullPool)
    return create_async_engine(
        settings.database_url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Sessions that keep loaded rows usable after commit.

    Repositories flush explicitly; commit and rollback belong to the
    request-scoped provider.
    """
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)

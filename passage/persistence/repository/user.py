"""PostgreSQL implementation of User repository."""

from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

import logfire
from sqlalchemy import insert, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from passage.domain.error import AlreadyRegisteredError
from passage.domain.model import NewUserProfile, User
from passage.domain.repository import UserRepository
from passage.domain.value import ExternalIdentity, UserId
from passage.persistence.mappers import row_to_user, user_to_dict
from passage.persistence.tables import user_logins_table, users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: User ID to look up

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_external_identity(
        self, identity: ExternalIdentity
    ) -> Optional[User]:
        """Find the user linked to a provider identity.

        Joins user_logins and users tables.

        Args:
            identity: Provider identity

        Returns:
            User if found, None otherwise
        """
        stmt = (
            select(users_table)
            .join(user_logins_table, user_logins_table.c.user_id == users_table.c.id)
            .where(user_logins_table.c.external_id == str(identity))
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def create_user(
        self, identity: ExternalIdentity, profile: NewUserProfile
    ) -> User:
        """Create a user and its login in one savepoint.

        The unique constraint on user_logins.external_id decides races
        between concurrent registrations of the same identity. The new user
        is committed before returning: callers link ephemeral sessions to
        its id, and those must never point at a rolled-back row.

        Raises:
            AlreadyRegisteredError: If the identity is already linked to a user
        """
        user = User(
            id=UserId(uuid4()),
            display_name=profile.display_name,
            full_name=profile.full_name,
            photo_url=profile.photo_url,
            created_at=datetime.now(timezone.utc),
        )
        try:
            async with self.session.begin_nested():
                await self.session.execute(insert(users_table).values(**user_to_dict(user)))
                await self.session.execute(
                    insert(user_logins_table).values(
                        id=uuid4(),
                        user_id=user.id,
                        external_id=str(identity),
                        created_at=user.created_at,
                    )
                )
        except IntegrityError as e:
            logfire.warn(
                "External identity already registered",
                external_id=str(identity),
                error=str(e.orig),
            )
            raise AlreadyRegisteredError(str(identity)) from e

        await self.session.commit()
        logfire.info("User registered", user_id=str(user.id))
        return user

"""In-memory user repository for testing."""

from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

from passage.domain.error import AlreadyRegisteredError
from passage.domain.model import NewUserProfile, User
from passage.domain.repository.user import UserRepository
from passage.domain.value import ExternalIdentity, UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}
        self._logins: dict[str, UserId] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_external_identity(
        self, identity: ExternalIdentity
    ) -> Optional[User]:
        """Find the user linked to a provider identity."""
        user_id = self._logins.get(str(identity))
        return self._users.get(user_id) if user_id else None

    async def create_user(
        self, identity: ExternalIdentity, profile: NewUserProfile
    ) -> User:
        """Create a user, enforcing one user per external identity."""
        external_id = str(identity)
        if external_id in self._logins:
            raise AlreadyRegisteredError(external_id)

        user = User(
            id=UserId(uuid4()),
            display_name=profile.display_name,
            full_name=profile.full_name,
            photo_url=profile.photo_url,
            created_at=datetime.now(timezone.utc),
        )
        self._users[user.id] = user
        self._logins[external_id] = user.id
        return user

    async def delete(self, user_id: UserId) -> None:
        """Remove a user and its logins (test helper)."""
        self._users.pop(user_id, None)
        self._logins = {k: v for k, v in self._logins.items() if v != user_id}

"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from passage.domain.model import NewUserProfile, User
from passage.domain.value import ExternalIdentity, UserId


class UserRepository(ABC):
    """Repository for permanent users.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_external_identity(
        self, identity: ExternalIdentity
    ) -> Optional[User]:
        """Find the user linked to a provider identity.

        Args:
            identity: Provider identity

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def create_user(
        self, identity: ExternalIdentity, profile: NewUserProfile
    ) -> User:
        """Create a user and link it to a provider identity.

        Args:
            identity: Provider identity the user logs in with
            profile: Initial profile fields

        Returns:
            The created user

        Raises:
            AlreadyRegisteredError: If the identity is already linked to a user
        """
        pass

"""User domain service."""

import logfire

from passage.domain.error import NotFoundError
from passage.domain.model import NewUserProfile, User
from passage.domain.repository import UserRepository
from passage.domain.value import ExternalIdentity, IAm, UserId

from .base import Service

DEFAULT_DISPLAY_NAME = "New User"


class UserService(Service):
    """Domain service for permanent users."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def get_by_external_identity(self, identity: ExternalIdentity) -> User | None:
        """Get the user linked to a provider identity.

        Args:
            identity: Provider identity

        Returns:
            User if found, None otherwise
        """
        with logfire.span(
            "user_service.get_by_external_identity", external_id=str(identity)
        ):
            user = await self.user_repository.find_by_external_identity(identity)
            if user:
                logfire.info(
                    "User found", external_id=str(identity), user_id=str(user.id)
                )
            return user

    async def register(self, i_am: IAm) -> User:
        """Create a user from a provider identity.

        Args:
            i_am: Identity returned by the provider

        Returns:
            The created user

        Raises:
            AlreadyRegisteredError: If the identity already has a user
        """
        identity = ExternalIdentity.from_i_am(i_am)
        with logfire.span("user_service.register", external_id=str(identity)):
            profile = NewUserProfile(
                display_name=i_am.given_name or i_am.full_name or DEFAULT_DISPLAY_NAME,
                full_name=i_am.full_name,
                photo_url=i_am.photo_url,
            )
            user = await self.user_repository.create_user(identity, profile)
            logfire.info("User registered", user_id=str(user.id))
            return user

"""Create user session use case."""

import logfire
from pydantic import BaseModel

from passage.application.usecase.base import BaseUseCase
from passage.domain.error import BadRequestError, NotFoundError, UnauthorizedError
from passage.domain.service import Authenticator, SessionService, UserService

from .create_login_session import AccessTokenResponse


class CreateUserSessionRequest(BaseModel):
    """Create user session request."""

    token: str  # Login token


class CreateUserSessionUseCase(BaseUseCase):
    """Promotes a linked login session to a user session."""

    def __init__(
        self,
        authenticator: Authenticator,
        session_service: SessionService,
        user_service: UserService,
    ) -> None:
        """Initialize create user session use case.

        Args:
            authenticator: Bearer token authentication and issuance
            session_service: Session store service
            user_service: User domain service
        """
        self.authenticator = authenticator
        self.session_service = session_service
        self.user_service = user_service

    async def execute(self, request: CreateUserSessionRequest) -> AccessTokenResponse:
        """Issue a User token for the user linked to the login session.

        Raises:
            UnauthorizedError: If the token is invalid or no user is linked
            BadRequestError: If the linked user was deleted
        """
        with logfire.span("create_user_session.execute"):
            session = await self.authenticator.login_session(request.token)
            if session.user_id is None:
                raise UnauthorizedError("Login session is not associated with a user")

            try:
                user = await self.user_service.get_by_id(session.user_id)
            except NotFoundError:
                raise BadRequestError("User linked no longer exists")

            user_session = await self.session_service.create_user_session(user)
            return AccessTokenResponse(
                access_token=self.authenticator.user_token(user_session)
            )

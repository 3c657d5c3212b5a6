"""Register user use case."""

import logfire
from pydantic import BaseModel

from passage.application.usecase.base import BaseUseCase
from passage.domain.error import BadRequestError
from passage.domain.service import Authenticator, SessionService, UserService


class RegisterUserRequest(BaseModel):
    """Register user request."""

    token: str  # Login token


class RegisterUserResponse(BaseModel):
    """Register user response."""

    user_id: str
    created: bool  # False when the session was already linked
    message: str


class RegisterUserUseCase(BaseUseCase):
    """Creates a permanent user for the identity on a login session."""

    def __init__(
        self,
        authenticator: Authenticator,
        session_service: SessionService,
        user_service: UserService,
    ) -> None:
        """Initialize register user use case.

        Args:
            authenticator: Bearer token authentication
            session_service: Session store service
            user_service: User domain service
        """
        self.authenticator = authenticator
        self.session_service = session_service
        self.user_service = user_service

    async def execute(self, request: RegisterUserRequest) -> RegisterUserResponse:
        """Register the identity attached to the login session.

        Raises:
            UnauthorizedError: If the Login token is invalid
            BadRequestError: If no provider identity is attached yet
            AlreadyRegisteredError: If the identity already has a user
        """
        with logfire.span("register_user.execute"):
            session = await self.authenticator.login_session(request.token)

            if session.user_id is not None:
                logfire.info("Login session already linked", user_id=str(session.user_id))
                return RegisterUserResponse(
                    user_id=str(session.user_id),
                    created=False,
                    message="You already have a user!",
                )
            if session.i_am is None:
                raise BadRequestError("Login with an identity provider first")

            user = await self.user_service.register(session.i_am)
            await self.session_service.link_user(session.key, user.id)

            return RegisterUserResponse(
                user_id=str(user.id), created=True, message="User created"
            )

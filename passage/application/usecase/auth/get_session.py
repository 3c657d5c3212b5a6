"""Session polling use cases."""

import logfire
from pydantic import BaseModel

from passage.application.usecase.base import BaseUseCase
from passage.domain.service import Authenticator
from passage.domain.value import AuthProvider, SessionState


class GetSessionRequest(BaseModel):
    """Request carrying a bearer token."""

    token: str


class IdentityInfo(BaseModel):
    """Provider identity attached to a login session."""

    provider: AuthProvider
    email: str | None
    given_name: str | None
    full_name: str | None
    photo_url: str | None


class GetLoginSessionResponse(BaseModel):
    """Current progress of a login session."""

    state: SessionState
    i_am: IdentityInfo | None
    user_id: str | None


class SessionUserInfo(BaseModel):
    """User snapshot held by a user session."""

    display_name: str
    full_name: str | None
    photo_url: str | None


class GetUserSessionResponse(BaseModel):
    """Who the User token belongs to."""

    user_id: str
    user: SessionUserInfo


class GetLoginSessionUseCase(BaseUseCase):
    """Lets a client poll its login session during the OAuth round-trip."""

    def __init__(self, authenticator: Authenticator) -> None:
        """Initialize get login session use case.

        Args:
            authenticator: Bearer token authentication
        """
        self.authenticator = authenticator

    async def execute(self, request: GetSessionRequest) -> GetLoginSessionResponse:
        """Report the state of the login session behind a Login token.

        Raises:
            UnauthorizedError: If the token is invalid or not a Login token
        """
        with logfire.span("get_login_session.execute"):
            session = await self.authenticator.login_session(request.token)

            identity = None
            if session.i_am is not None:
                identity = IdentityInfo(
                    provider=session.i_am.provider,
                    email=session.i_am.email,
                    given_name=session.i_am.given_name,
                    full_name=session.i_am.full_name,
                    photo_url=session.i_am.photo_url,
                )
            return GetLoginSessionResponse(
                state=session.state,
                i_am=identity,
                user_id=str(session.user_id) if session.user_id else None,
            )


class GetUserSessionUseCase(BaseUseCase):
    """Resolves a User token to the user it was issued for."""

    def __init__(self, authenticator: Authenticator) -> None:
        """Initialize get user session use case.

        Args:
            authenticator: Bearer token authentication
        """
        self.authenticator = authenticator

    async def execute(self, request: GetSessionRequest) -> GetUserSessionResponse:
        """Describe the user behind a User token.

        Raises:
            UnauthorizedError: If the token is invalid, not a User token, or
                its session has ended
        """
        with logfire.span("get_user_session.execute"):
            session = await self.authenticator.user_session(request.token)
            return GetUserSessionResponse(
                user_id=str(session.user.user_id),
                user=SessionUserInfo(
                    display_name=session.user.display_name,
                    full_name=session.user.full_name,
                    photo_url=session.user.photo_url,
                ),
            )

"""Create login session use case."""

import logfire
from pydantic import BaseModel

from passage.application.usecase.base import BaseUseCase
from passage.domain.service import Authenticator, SessionService


class CreateLoginSessionRequest(BaseModel):
    """Create login session request (no parameters)."""

    pass


class AccessTokenResponse(BaseModel):
    """Bearer token issued for a session."""

    access_token: str


class CreateLoginSessionUseCase(BaseUseCase):
    """Starts a login attempt with an anonymous login session."""

    def __init__(
        self, session_service: SessionService, authenticator: Authenticator
    ) -> None:
        """Initialize create login session use case.

        Args:
            session_service: Session store service
            authenticator: Token issuer
        """
        self.session_service = session_service
        self.authenticator = authenticator

    async def execute(
        self, request: CreateLoginSessionRequest
    ) -> AccessTokenResponse:
        with logfire.span("create_login_session.execute"):
            session = await self.session_service.create_login_session()
            return AccessTokenResponse(
                access_token=self.authenticator.login_token(session)
            )

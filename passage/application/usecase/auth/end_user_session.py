"""End user session use case."""

import logfire
from pydantic import BaseModel

from passage.application.usecase.base import BaseUseCase
from passage.domain.service import Authenticator, SessionService


class EndUserSessionRequest(BaseModel):
    """Logout request."""

    token: str  # User token


class EndUserSessionUseCase(BaseUseCase):
    """Logs out by deleting the user session behind a User token."""

    def __init__(
        self, authenticator: Authenticator, session_service: SessionService
    ) -> None:
        """Initialize end user session use case.

        Args:
            authenticator: Bearer token authentication
            session_service: Session store service
        """
        self.authenticator = authenticator
        self.session_service = session_service

    async def execute(self, request: EndUserSessionRequest) -> None:
        """Delete the user session behind a User token.

        Raises:
            UnauthorizedError: If the token is invalid or not a User token
        """
        with logfire.span("end_user_session.execute"):
            session = await self.authenticator.user_session(request.token)
            await self.session_service.delete_user_session(session.key)

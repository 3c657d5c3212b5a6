"""Create provider login URL use case."""

import logfire
from pydantic import BaseModel

from passage.application.usecase.base import BaseUseCase
from passage.config import Settings
from passage.domain.error import BadRequestError
from passage.domain.service import AuthService, Authenticator, SessionService
from passage.domain.value import AuthProvider


class CreateLoginUrlRequest(BaseModel):
    """Request for a provider authorization URL."""

    provider: AuthProvider
    token: str  # Login token
    redirect_uri: str | None = None  # Where to send the browser after the callback


class CreateLoginUrlResponse(BaseModel):
    """Provider authorization URL."""

    url: str


class CreateLoginUrlUseCase(BaseUseCase):
    """Ties a provider redirect to the caller's login session.

    A fresh hand-off is stored for every URL; its code travels through the
    provider as the OAuth `state` and brings the callback back to this
    login session.
    """

    def __init__(
        self,
        authenticator: Authenticator,
        session_service: SessionService,
        auth_service: AuthService,
        settings: Settings,
    ) -> None:
        """Initialize create login URL use case.

        Args:
            authenticator: Bearer token authentication
            session_service: Session store service
            auth_service: Identity provider dispatch
            settings: Application settings
        """
        self.authenticator = authenticator
        self.session_service = session_service
        self.auth_service = auth_service
        self.settings = settings

    async def execute(self, request: CreateLoginUrlRequest) -> CreateLoginUrlResponse:
        """Create a hand-off and the provider URL carrying it.

        Raises:
            UnauthorizedError: If the Login token is invalid
            BadRequestError: If the redirect leaves the frontend
        """
        with logfire.span(
            "create_login_url.execute", provider=request.provider.value
        ):
            self._check_redirect(request.redirect_uri)
            session = await self.authenticator.login_session(request.token)
            handoff = await self.session_service.create_handoff(
                session.key, request.redirect_uri
            )
            url = self.auth_service.login_url(request.provider, handoff.key)
            return CreateLoginUrlResponse(url=url)

    def _check_redirect(self, redirect_uri: str | None) -> None:
        if redirect_uri is None:
            return
        frontend = self.settings.api.frontend_url
        if redirect_uri != frontend and not redirect_uri.startswith(f"{frontend}/"):
            logfire.warn("Rejected foreign redirect", redirect_uri=redirect_uri)
            raise BadRequestError("Redirect must point to the frontend")

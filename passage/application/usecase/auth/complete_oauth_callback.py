"""Complete OAuth callback use case."""

import logfire
from pydantic import BaseModel

from passage.application.usecase.base import BaseUseCase
from passage.config import Settings
from passage.domain.error import BadRequestError, SessionExpiredError
from passage.domain.service import AuthService, SessionService, UserService
from passage.domain.value import AuthProvider, ExternalIdentity, SessionState


class CompleteOAuthCallbackRequest(BaseModel):
    """Query parameters the provider sends to the callback URL."""

    provider: AuthProvider
    code: str | None = None
    state: str | None = None  # Hand-off code
    error: str | None = None


class CompleteOAuthCallbackResponse(BaseModel):
    """Where to send the browser, and the session's new state."""

    redirect_to: str
    state: SessionState


class CompleteOAuthCallbackUseCase(BaseUseCase):
    """Finishes a provider round-trip.

    Steps:
    1. Reject provider errors and callbacks missing `code` or `state`
    2. Exchange the code and fetch who the person is
    3. Resolve the hand-off named by `state`, then its login session
    4. Link the login session to the user already registered for the
       identity, or just attach the identity for a later registration
    """

    def __init__(
        self,
        auth_service: AuthService,
        session_service: SessionService,
        user_service: UserService,
        settings: Settings,
    ) -> None:
        """Initialize complete OAuth callback use case.

        Args:
            auth_service: Identity provider dispatch
            session_service: Session store service
            user_service: User domain service
            settings: Application settings
        """
        self.auth_service = auth_service
        self.session_service = session_service
        self.user_service = user_service
        self.settings = settings

    async def execute(
        self, request: CompleteOAuthCallbackRequest
    ) -> CompleteOAuthCallbackResponse:
        """Execute the callback.

        Raises:
            BadRequestError: If the provider reported an error or a
                parameter is missing
            SessionExpiredError: If the hand-off or its login session expired
            ProviderError: If the provider rejected the code
        """
        with logfire.span(
            "complete_oauth_callback.execute", provider=request.provider.value
        ):
            if request.error:
                logfire.warn(
                    "Provider returned an error",
                    provider=request.provider.value,
                    error=request.error,
                )
                raise BadRequestError("Error during login")
            if not request.code:
                raise BadRequestError("Missing code")
            if not request.state:
                raise BadRequestError("Missing state")

            i_am = await self.auth_service.complete_login(
                request.provider, request.code
            )

            handoff = await self.session_service.resolve_handoff(request.state)
            if handoff is None:
                raise SessionExpiredError()

            existing = await self.user_service.get_by_external_identity(
                ExternalIdentity.from_i_am(i_am)
            )
            if existing is not None:
                session = await self.session_service.link_user(
                    handoff.session_key, existing.id, i_am
                )
            else:
                session = await self.session_service.attach_identity(
                    handoff.session_key, i_am
                )

            logfire.info(
                "OAuth callback completed",
                provider=request.provider.value,
                state=session.state.value,
            )
            return CompleteOAuthCallbackResponse(
                redirect_to=handoff.redirect_uri or self.settings.api.frontend_url,
                state=session.state,
            )

"""Application layer DI providers."""

from dishka import Scope, provide

from passage.application.usecase.auth import (
    CompleteOAuthCallbackUseCase,
    CreateLoginSessionUseCase,
    CreateLoginUrlUseCase,
    CreateUserSessionUseCase,
    EndUserSessionUseCase,
    GetLoginSessionUseCase,
    GetUserSessionUseCase,
    RegisterUserUseCase,
)
from passage.config import Settings
from passage.domain.service import (
    AuthService,
    Authenticator,
    SessionService,
    UserService,
)
from passage.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    @provide
    def get_create_login_session_use_case(
        self, session_service: SessionService, authenticator: Authenticator
    ) -> CreateLoginSessionUseCase:
        """Provide create login session use case."""
        return CreateLoginSessionUseCase(session_service, authenticator)

    @provide
    def get_create_login_url_use_case(
        self,
        authenticator: Authenticator,
        session_service: SessionService,
        auth_service: AuthService,
        settings: Settings,
    ) -> CreateLoginUrlUseCase:
        """Provide create login URL use case."""
        return CreateLoginUrlUseCase(
            authenticator, session_service, auth_service, settings
        )

    @provide
    def get_complete_oauth_callback_use_case(
        self,
        auth_service: AuthService,
        session_service: SessionService,
        user_service: UserService,
        settings: Settings,
    ) -> CompleteOAuthCallbackUseCase:
        """Provide OAuth callback use case."""
        return CompleteOAuthCallbackUseCase(
            auth_service, session_service, user_service, settings
        )

    @provide
    def get_register_user_use_case(
        self,
        authenticator: Authenticator,
        session_service: SessionService,
        user_service: UserService,
    ) -> RegisterUserUseCase:
        """Provide register user use case."""
        return RegisterUserUseCase(authenticator, session_service, user_service)

    @provide
    def get_create_user_session_use_case(
        self,
        authenticator: Authenticator,
        session_service: SessionService,
        user_service: UserService,
    ) -> CreateUserSessionUseCase:
        """Provide create user session use case."""
        return CreateUserSessionUseCase(authenticator, session_service, user_service)

    @provide
    def get_login_session_use_case(
        self, authenticator: Authenticator
    ) -> GetLoginSessionUseCase:
        """Provide login session polling use case."""
        return GetLoginSessionUseCase(authenticator)

    @provide
    def get_user_session_use_case(
        self, authenticator: Authenticator
    ) -> GetUserSessionUseCase:
        """Provide user session lookup use case."""
        return GetUserSessionUseCase(authenticator)

    @provide
    def get_end_user_session_use_case(
        self, authenticator: Authenticator, session_service: SessionService
    ) -> EndUserSessionUseCase:
        """Provide logout use case."""
        return EndUserSessionUseCase(authenticator, session_service)

"""Domain layer DI providers."""

from dishka import Scope, provide

from passage.config import AuthSettings, SessionSettings
from passage.domain.repository import EphemeralStore, UserRepository
from passage.domain.service import (
    AccessTokenCodec,
    AuthService,
    Authenticator,
    IdentityProviderClient,
    KeyGenerator,
    RecordStore,
    SessionService,
    UserService,
)
from passage.domain.value import AuthProvider
from passage.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    The token codec only depends on settings, so it lives for the whole app.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_token_codec(self, auth_settings: AuthSettings) -> AccessTokenCodec:
        """Provide access token codec keyed by the server pepper."""
        return AccessTokenCodec(
            pepper=auth_settings.pepper,
            obfuscation_key=auth_settings.obfuscation_key,
        )

    @provide
    def get_record_store(self, store: EphemeralStore) -> RecordStore:
        """Provide typed ephemeral record store."""
        return RecordStore(store)

    @provide
    def get_key_generator(
        self, records: RecordStore, session_settings: SessionSettings
    ) -> KeyGenerator:
        """Provide unique key generator."""
        return KeyGenerator(records, max_attempts=session_settings.max_key_attempts)

    @provide
    def get_session_service(
        self,
        records: RecordStore,
        key_generator: KeyGenerator,
        session_settings: SessionSettings,
    ) -> SessionService:
        """Provide session store domain service."""
        return SessionService(records, key_generator, session_settings)

    @provide
    def get_authenticator(
        self, codec: AccessTokenCodec, session_service: SessionService
    ) -> Authenticator:
        """Provide bearer token authenticator."""
        return Authenticator(codec, session_service)

    @provide
    def get_auth_service(
        self, clients: dict[AuthProvider, IdentityProviderClient]
    ) -> AuthService:
        """Provide identity provider dispatch service.

        Args:
            clients: Dictionary mapping providers to their OAuth clients

        Returns:
            AuthService configured with all available OAuth clients
        """
        return AuthService(clients=clients)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository)

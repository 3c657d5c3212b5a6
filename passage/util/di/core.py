"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from passage.config import AuthSettings, SessionSettings, Settings
from passage.util.di.base import ProviderBase
from passage.util.error import ConfigurationError

_PLACEHOLDER = "CHANGE_ME_IN_PRODUCTION"


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment.

        Raises:
            ConfigurationError: If production runs with the placeholder pepper
        """
        settings = Settings()
        if settings.environment == "production" and settings.auth.pepper == _PLACEHOLDER:
            raise ConfigurationError("AUTH__PEPPER must be set in production")
        return settings

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_session_settings(self, settings: Settings) -> SessionSettings:
        """Provide session TTL and key settings."""
        return settings.sessions

"""Google infrastructure providers."""

from dishka import Scope, provide

from passage.adapter.google.client import GoogleOAuthClient, RealGoogleOAuthClient
from passage.config import Settings
from passage.util.di.base import ProviderBase
from passage.util.error import ConfigurationError


class GoogleProvider(ProviderBase):
    """Google component base."""

    __mock_component__ = "google"


class ProdGoogleProvider(GoogleProvider):
    """Production Google provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_google_oauth_client(self, settings: Settings) -> GoogleOAuthClient:
        """Provide Google OAuth client.

        Returns:
            Google OAuth 2.0 client

        Raises:
            ConfigurationError: If Google OAuth credentials are not configured
        """
        google = settings.auth.google
        if not google.client_id:
            raise ConfigurationError("Google OAuth client ID must be configured")
        if not google.client_secret:
            raise ConfigurationError("Google OAuth client secret must be configured")

        return RealGoogleOAuthClient(
            client_id=google.client_id,
            client_secret=google.client_secret,
            redirect_uri=settings.auth.google_callback_url,
            hosted_domain=google.hosted_domain,
        )

"""OAuth infrastructure provider for identity provider dispatch."""

from dishka import Scope, provide

from passage.adapter.google.client import GoogleOAuthClient
from passage.domain.service.auth_service import IdentityProviderClient
from passage.domain.value import AuthProvider
from passage.util.di.base import ProviderBase


class OAuthAggregatorProvider(ProviderBase):
    """Provider that aggregates all OAuth clients into a dictionary."""

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_oauth_clients(
        self, google_oauth_client: GoogleOAuthClient
    ) -> dict[AuthProvider, IdentityProviderClient]:
        """Provide dictionary of all OAuth clients by provider.

        Args:
            google_oauth_client: Google OAuth client (specific type)

        Returns:
            Dictionary mapping AuthProvider to IdentityProviderClient
        """
        return {AuthProvider.GOOGLE: google_oauth_client}

"""Identity provider domain service."""

import logfire

from passage.domain.error import BadRequestError
from passage.domain.value import AuthProvider, ExchangeResult, IAm

from .base import Service


class IdentityProviderClient:
    """Generic OAuth client interface for all identity providers."""

    def login_url(self, state: str, redirect_uri: str | None = None) -> str:
        """Build the provider's authorization URL.

        Args:
            state: Hand-off code echoed back on the callback
            redirect_uri: Callback URL (defaults to the configured one)

        Returns:
            Authorization URL to redirect the browser to
        """
        raise NotImplementedError

    async def exchange_code(
        self, code: str, redirect_uri: str | None = None
    ) -> ExchangeResult:
        """Exchange an authorization code for provider tokens.

        Args:
            code: Authorization code from the callback
            redirect_uri: Callback URL used for the authorization request

        Returns:
            Access token, its expiry and an optional refresh token
        """
        raise NotImplementedError

    async def who_am_i(self, access_token: str) -> IAm:
        """Fetch the profile of the person the access token belongs to."""
        raise NotImplementedError

    async def revoke(self, access_token: str) -> None:
        """Revoke a provider token."""
        raise NotImplementedError


class AuthService(Service):
    """Dispatches login operations to the client of each provider."""

    def __init__(self, clients: dict[AuthProvider, IdentityProviderClient]) -> None:
        """Initialize auth service.

        Args:
            clients: Map of provider to OAuth client implementation
        """
        self.clients = clients

    def _client(self, provider: AuthProvider) -> IdentityProviderClient:
        client = self.clients.get(provider)
        if not client:
            raise BadRequestError(f"Unsupported provider: {provider.value}")
        return client

    def login_url(self, provider: AuthProvider, state: str) -> str:
        """Authorization URL for a provider carrying the hand-off code."""
        return self._client(provider).login_url(state)

    async def complete_login(self, provider: AuthProvider, code: str) -> IAm:
        """Exchange the callback code and fetch who the person is.

        Raises:
            BadRequestError: If the provider is not supported
            ProviderError: If the provider rejects the code or is unreachable
        """
        with logfire.span("auth_service.complete_login", provider=provider.value):
            client = self._client(provider)
            exchange = await client.exchange_code(code)
            logfire.info(
                "Authorization code exchanged",
                provider=provider.value,
                refreshable=exchange.is_refreshable,
            )
            return await client.who_am_i(exchange.access_token)

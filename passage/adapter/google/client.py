"""Google OAuth 2.0 client implementation.

Authorization code flow against Google's OAuth endpoints, with the People
API answering "who am I" for the exchanged access token.
"""

import secrets
from datetime import datetime, timedelta, timezone
from typing import Any
from urllib.parse import urlencode

import httpx
import logfire

from passage.adapter.error import ProviderError
from passage.domain.service.auth_service import IdentityProviderClient
from passage.domain.value import AuthProvider, ExchangeResult, IAm

PROFILE_SCOPE = "https://www.googleapis.com/auth/userinfo.profile"


class GoogleOAuthClient(IdentityProviderClient):
    """Base class for Google OAuth clients.

    Provides type distinction for dependency injection.
    """

    pass


class RealGoogleOAuthClient(GoogleOAuthClient):
    """Google OAuth 2.0 client over httpx."""

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        redirect_uri: str,
        hosted_domain: str | None = None,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize Google OAuth client.

        Args:
            client_id: Google OAuth client ID
            client_secret: Google OAuth client secret
            redirect_uri: Callback URL registered with Google
            hosted_domain: Restrict the account chooser to one G Suite domain
            timeout: Per-request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self.client_id = client_id
        self.client_secret = client_secret
        self.redirect_uri = redirect_uri
        self.hosted_domain = hosted_domain
        self.timeout = timeout
        self.transport = transport

        # OAuth endpoints
        self.authorize_url = "https://accounts.google.com/o/oauth2/v2/auth"
        self.token_url = "https://www.googleapis.com/oauth2/v4/token"
        self.revoke_url = "https://oauth2.googleapis.com/revoke"
        self.people_url = "https://people.googleapis.com/v1/people/me"

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout, transport=self.transport)

    def login_url(self, state: str, redirect_uri: str | None = None) -> str:
        """Build the Google authorization URL.

        Args:
            state: Hand-off code echoed back on the callback
            redirect_uri: Callback URL (defaults to the configured one)

        Returns:
            Authorization URL to redirect the browser to
        """
        params = {
            "response_type": "code",
            "client_id": self.client_id,
            "redirect_uri": redirect_uri or self.redirect_uri,
            "scope": PROFILE_SCOPE,
            "state": state,
            "hd": self.hosted_domain or "",
            "nonce": secrets.token_hex(8),
            "prompt": "select_account",
        }
        return f"{self.authorize_url}?{urlencode(params)}"

    async def exchange_code(
        self, code: str, redirect_uri: str | None = None
    ) -> ExchangeResult:
        """Exchange an authorization code for tokens.

        Raises:
            ProviderError: If Google rejects the code or is unreachable
        """
        data = {
            "code": code,
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "redirect_uri": redirect_uri or self.redirect_uri,
            "grant_type": "authorization_code",
        }
        result = await self._request("POST", self.token_url, "token exchange", data=data)

        try:
            expires_at = datetime.now(timezone.utc) + timedelta(
                seconds=int(result.get("expires_in", 0))
            )
            return ExchangeResult(
                access_token=result["access_token"],
                expires_at=expires_at,
                refresh_token=result.get("refresh_token"),
            )
        except (KeyError, TypeError, ValueError) as e:
            logfire.error("Google token response malformed", error=str(e))
            raise ProviderError("Malformed token response from Google")

    async def who_am_i(self, access_token: str) -> IAm:
        """Fetch the signed-in person from the People API.

        Raises:
            ProviderError: If the request fails or the profile is malformed
        """
        person = await self._request(
            "GET",
            self.people_url,
            "people lookup",
            params={"personFields": "names,emailAddresses,photos"},
            headers={"Authorization": f"Bearer {access_token}"},
        )

        resource_name = person.get("resourceName")
        if not resource_name:
            raise ProviderError("Google profile has no resource name")

        name = _primary(person.get("names"))
        email = _primary(person.get("emailAddresses"))
        photo = _primary(person.get("photos"))

        logfire.info("Google profile fetched", resource_name=resource_name)
        return IAm(
            provider=AuthProvider.GOOGLE,
            resource_name=resource_name,
            email=email.get("value"),
            given_name=name.get("givenName"),
            full_name=name.get("displayName"),
            photo_url=photo.get("url"),
        )

    async def revoke(self, access_token: str) -> None:
        """Revoke an access or refresh token.

        Raises:
            ProviderError: If Google refuses the revocation
        """
        await self._request(
            "POST", self.revoke_url, "token revocation", data={"token": access_token}
        )
        logfire.info("Google token revoked")

    async def _request(
        self, method: str, url: str, action: str, **kwargs: Any
    ) -> dict[str, Any]:
        try:
            async with self._client() as client:
                response = await client.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            logfire.error(f"Google {action} HTTP error", error=str(e))
            raise ProviderError(f"HTTP error during {action}: {e}")

        if response.status_code != 200:
            logfire.error(
                f"Google {action} failed",
                status_code=response.status_code,
                error=response.text,
            )
            raise ProviderError(f"Google {action} failed: {response.status_code}")

        if not response.content:
            return {}
        try:
            body = response.json()
        except ValueError:
            raise ProviderError(f"Google {action} returned invalid JSON")
        if not isinstance(body, dict):
            raise ProviderError(f"Google {action} returned unexpected JSON")
        return body


def _primary(entries: Any) -> dict[str, Any]:
    """Primary entry of a People API field list, or an empty dict."""
    if not isinstance(entries, list) or not entries:
        return {}
    for entry in entries:
        if isinstance(entry, dict) and entry.get("metadata", {}).get("primary"):
            return entry
    first = entries[0]
    return first if isinstance(first, dict) else {}


class MockGoogleOAuthClient(GoogleOAuthClient):
    """Mock Google OAuth client for testing.

    Returns deterministic test data without making real API calls. The
    profile returned by `who_am_i` can be swapped per test.
    """

    def __init__(self, i_am: IAm | None = None) -> None:
        """Initialize mock client without real OAuth configuration."""
        self.i_am = i_am or IAm(
            provider=AuthProvider.GOOGLE,
            resource_name="people/mock123",
            email="mock@example.com",
            given_name="Mock",
            full_name="Mock Google User",
            photo_url="https://example.com/avatar.jpg",
        )
        self.revoked: list[str] = []

    def login_url(self, state: str, redirect_uri: str | None = None) -> str:
        return f"https://accounts.google.com/o/oauth2/v2/auth?state={state}&mock=true"

    async def exchange_code(
        self, code: str, redirect_uri: str | None = None
    ) -> ExchangeResult:
        if code == "bad-code":
            raise ProviderError("Token exchange failed: 400")
        return ExchangeResult(
            access_token=f"mock-access-{code}",
            expires_at=datetime.now(timezone.utc) + timedelta(hours=1),
        )

    async def who_am_i(self, access_token: str) -> IAm:
        return self.i_am

    async def revoke(self, access_token: str) -> None:
        self.revoked.append(access_token)

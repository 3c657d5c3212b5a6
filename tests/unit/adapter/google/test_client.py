"""Unit tests for the Google OAuth client."""

from urllib.parse import parse_qs, urlparse

import httpx
import pytest

from passage.adapter.error import ProviderError
from passage.adapter.google import RealGoogleOAuthClient
from passage.domain.value import AuthProvider

PERSON = {
    "resourceName": "people/42",
    "names": [
        {"givenName": "Other", "displayName": "Other Name", "metadata": {}},
        {
            "givenName": "Ada",
            "displayName": "Ada Lovelace",
            "metadata": {"primary": True},
        },
    ],
    "emailAddresses": [{"value": "ada@example.com", "metadata": {"primary": True}}],
    "photos": [{"url": "https://example.com/ada.png"}],
}


def _client(handler) -> RealGoogleOAuthClient:
    return RealGoogleOAuthClient(
        client_id="client-id",
        client_secret="client-secret",
        redirect_uri="http://localhost:8088/auth/v0/google/callback",
        transport=httpx.MockTransport(handler),
    )


def _unreachable(request: httpx.Request) -> httpx.Response:
    raise AssertionError(f"Unexpected request to {request.url}")


class TestLoginUrl:
    """Tests for RealGoogleOAuthClient.login_url()."""

    def test_carries_state_and_client(self):
        """Should point at Google with the state and client id."""
        client = _client(_unreachable)

        url = urlparse(client.login_url("cafe" * 6))
        params = parse_qs(url.query)

        assert url.netloc == "accounts.google.com"
        assert params["state"] == ["cafe" * 6]
        assert params["client_id"] == ["client-id"]
        assert params["response_type"] == ["code"]
        assert params["prompt"] == ["select_account"]
        assert params["redirect_uri"] == [
            "http://localhost:8088/auth/v0/google/callback"
        ]

    def test_nonce_differs_per_call(self):
        """Should send a fresh nonce on every URL."""
        client = _client(_unreachable)

        first = parse_qs(urlparse(client.login_url("a" * 24)).query)["nonce"]
        second = parse_qs(urlparse(client.login_url("a" * 24)).query)["nonce"]

        assert first != second


class TestExchangeCode:
    """Tests for RealGoogleOAuthClient.exchange_code()."""

    @pytest.mark.asyncio
    async def test_success(self):
        """Should return the access token and its expiry."""
        seen: list[dict] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(parse_qs(request.content.decode()))
            return httpx.Response(
                200,
                json={"access_token": "at", "expires_in": 3600, "refresh_token": "rt"},
            )

        result = await _client(handler).exchange_code("the-code")

        assert result.access_token == "at"
        assert result.is_refreshable
        assert seen[0]["code"] == ["the-code"]
        assert seen[0]["grant_type"] == ["authorization_code"]

    @pytest.mark.asyncio
    async def test_rejected_code(self):
        """Should raise ProviderError when Google refuses the code."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(400, json={"error": "invalid_grant"})

        with pytest.raises(ProviderError):
            await _client(handler).exchange_code("bad")

    @pytest.mark.asyncio
    async def test_network_failure(self):
        """Should raise ProviderError when Google is unreachable."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("boom", request=request)

        with pytest.raises(ProviderError):
            await _client(handler).exchange_code("code")

    @pytest.mark.asyncio
    async def test_malformed_response(self):
        """Should raise ProviderError when the token is missing."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"expires_in": 3600})

        with pytest.raises(ProviderError):
            await _client(handler).exchange_code("code")


class TestWhoAmI:
    """Tests for RealGoogleOAuthClient.who_am_i()."""

    @pytest.mark.asyncio
    async def test_maps_primary_entries(self):
        """Should map the People API profile using primary entries."""
        auth_headers: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            auth_headers.append(request.headers["Authorization"])
            return httpx.Response(200, json=PERSON)

        i_am = await _client(handler).who_am_i("at")

        assert auth_headers == ["Bearer at"]
        assert i_am.provider == AuthProvider.GOOGLE
        assert i_am.resource_name == "people/42"
        assert i_am.given_name == "Ada"
        assert i_am.full_name == "Ada Lovelace"
        assert i_am.email == "ada@example.com"
        assert i_am.photo_url == "https://example.com/ada.png"

    @pytest.mark.asyncio
    async def test_sparse_profile(self):
        """Should leave optional fields empty when Google omits them."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"resourceName": "people/7"})

        i_am = await _client(handler).who_am_i("at")

        assert i_am.resource_name == "people/7"
        assert i_am.given_name is None
        assert i_am.email is None

    @pytest.mark.asyncio
    async def test_missing_resource_name(self):
        """Should refuse profiles without a permanent id."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"names": []})

        with pytest.raises(ProviderError):
            await _client(handler).who_am_i("at")


class TestRevoke:
    """Tests for RealGoogleOAuthClient.revoke()."""

    @pytest.mark.asyncio
    async def test_posts_token(self):
        """Should post the token to the revocation endpoint."""
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200)

        await _client(handler).revoke("at")

        assert seen[0].url.host == "oauth2.googleapis.com"
        assert parse_qs(seen[0].content.decode())["token"] == ["at"]

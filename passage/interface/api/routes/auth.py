"""Authentication routes.

Clients authenticate with ``Authorization: Bearer <token>``. A Login token
identifies an in-progress login session; a User token identifies a user
session and is issued once the login session is linked to a user.
"""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, Query, status
from fastapi.responses import RedirectResponse
from pydantic import BaseModel

from passage.application.usecase.auth import (
    AccessTokenResponse,
    CompleteOAuthCallbackRequest,
    CompleteOAuthCallbackUseCase,
    CreateLoginSessionRequest,
    CreateLoginSessionUseCase,
    CreateLoginUrlRequest,
    CreateLoginUrlResponse,
    CreateLoginUrlUseCase,
    CreateUserSessionRequest,
    CreateUserSessionUseCase,
    EndUserSessionRequest,
    EndUserSessionUseCase,
    GetLoginSessionResponse,
    GetLoginSessionUseCase,
    GetSessionRequest,
    GetUserSessionResponse,
    GetUserSessionUseCase,
    RegisterUserRequest,
    RegisterUserResponse,
    RegisterUserUseCase,
)
from passage.domain.service import parse_bearer
from passage.domain.value import AuthProvider

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth/v0", tags=["authentication"], route_class=DishkaRoute)


class LoginUrlAPIRequest(BaseModel):
    """Optional body for login URL creation."""

    redirect_uri: str | None = None


@router.post("/login/session", response_model=AccessTokenResponse)
async def create_login_session(
    use_case: FromDishka[CreateLoginSessionUseCase],
) -> AccessTokenResponse:
    """Start a login attempt and return its Login token."""
    return await use_case.execute(CreateLoginSessionRequest())


@router.get("/login/session", response_model=GetLoginSessionResponse)
async def get_login_session(
    use_case: FromDishka[GetLoginSessionUseCase],
    authorization: str | None = Header(default=None),
) -> GetLoginSessionResponse:
    """Poll the login session behind a Login token.

    Example:
        GET /auth/v0/login/session
        Authorization: Bearer <login token>

        Response:
        {
            "state": "identity_known",
            "i_am": {"provider": "google", "given_name": "Ada", ...},
            "user_id": null
        }
    """
    return await use_case.execute(GetSessionRequest(token=parse_bearer(authorization)))


@router.post("/login/session/register", response_model=RegisterUserResponse)
async def register_user(
    use_case: FromDishka[RegisterUserUseCase],
    authorization: str | None = Header(default=None),
) -> RegisterUserResponse:
    """Create a user for the identity attached to the login session."""
    return await use_case.execute(
        RegisterUserRequest(token=parse_bearer(authorization))
    )


@router.post("/login/session/user_session", response_model=AccessTokenResponse)
async def create_user_session(
    use_case: FromDishka[CreateUserSessionUseCase],
    authorization: str | None = Header(default=None),
) -> AccessTokenResponse:
    """Exchange a linked Login token for a User token."""
    return await use_case.execute(
        CreateUserSessionRequest(token=parse_bearer(authorization))
    )


@router.post("/{provider}/login_url", response_model=CreateLoginUrlResponse)
async def create_login_url(
    provider: AuthProvider,
    use_case: FromDishka[CreateLoginUrlUseCase],
    body: LoginUrlAPIRequest | None = None,
    authorization: str | None = Header(default=None),
) -> CreateLoginUrlResponse:
    """Create the provider authorization URL for a login session.

    Example:
        POST /auth/v0/google/login_url
        Authorization: Bearer <login token>

        Response:
        {"url": "https://accounts.google.com/o/oauth2/v2/auth?...&state=<code>"}
    """
    return await use_case.execute(
        CreateLoginUrlRequest(
            provider=provider,
            token=parse_bearer(authorization),
            redirect_uri=body.redirect_uri if body else None,
        )
    )


@router.get("/{provider}/callback")
async def oauth_callback(
    provider: AuthProvider,
    use_case: FromDishka[CompleteOAuthCallbackUseCase],
    code: str | None = Query(default=None),
    state: str | None = Query(default=None),
    error: str | None = Query(default=None),
) -> RedirectResponse:
    """Handle the provider redirect and send the browser on."""
    logger.info(
        "OAuth callback received: provider=%s, has_code=%s, error=%s",
        provider.value,
        code is not None,
        error,
    )
    result = await use_case.execute(
        CompleteOAuthCallbackRequest(
            provider=provider, code=code, state=state, error=error
        )
    )
    logger.info("OAuth callback completed: state=%s", result.state.value)
    return RedirectResponse(url=result.redirect_to, status_code=status.HTTP_302_FOUND)


@router.get("/me", response_model=GetUserSessionResponse)
async def get_me(
    use_case: FromDishka[GetUserSessionUseCase],
    authorization: str | None = Header(default=None),
) -> GetUserSessionResponse:
    """Return the user behind a User token."""
    return await use_case.execute(GetSessionRequest(token=parse_bearer(authorization)))


@router.delete("/me/session", status_code=status.HTTP_204_NO_CONTENT)
async def logout(
    use_case: FromDishka[EndUserSessionUseCase],
    authorization: str | None = Header(default=None),
) -> None:
    """End the user session behind a User token."""
    await use_case.execute(EndUserSessionRequest(token=parse_bearer(authorization)))

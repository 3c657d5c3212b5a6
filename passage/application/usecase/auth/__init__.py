"""Authentication use cases."""

from .complete_oauth_callback import (
    CompleteOAuthCallbackRequest,
    CompleteOAuthCallbackResponse,
    CompleteOAuthCallbackUseCase,
)
from .create_login_session import (
    AccessTokenResponse,
    CreateLoginSessionRequest,
    CreateLoginSessionUseCase,
)
from .create_login_url import (
    CreateLoginUrlRequest,
    CreateLoginUrlResponse,
    CreateLoginUrlUseCase,
)
from .create_user_session import CreateUserSessionRequest, CreateUserSessionUseCase
from .end_user_session import EndUserSessionRequest, EndUserSessionUseCase
from .get_session import (
    GetLoginSessionResponse,
    GetLoginSessionUseCase,
    GetSessionRequest,
    GetUserSessionResponse,
    GetUserSessionUseCase,
)
from .register_user import (
    RegisterUserRequest,
    RegisterUserResponse,
    RegisterUserUseCase,
)

__all__ = [
    "AccessTokenResponse",
    "CompleteOAuthCallbackRequest",
    "CompleteOAuthCallbackResponse",
    "CompleteOAuthCallbackUseCase",
    "CreateLoginSessionRequest",
    "CreateLoginSessionUseCase",
    "CreateLoginUrlRequest",
    "CreateLoginUrlResponse",
    "CreateLoginUrlUseCase",
    "CreateUserSessionRequest",
    "CreateUserSessionUseCase",
    "EndUserSessionRequest",
    "EndUserSessionUseCase",
    "GetLoginSessionResponse",
    "GetLoginSessionUseCase",
    "GetSessionRequest",
    "GetUserSessionResponse",
    "GetUserSessionUseCase",
    "RegisterUserRequest",
    "RegisterUserResponse",
    "RegisterUserUseCase",
]

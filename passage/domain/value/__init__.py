"""Domain value objects for Passage."""

from passage.domain.value.identifiers import UserId
from passage.domain.value.types import (
    AccessKey,
    AuthProvider,
    ExchangeResult,
    ExternalIdentity,
    IAm,
    LoginAccessKey,
    SessionState,
    UserAccessKey,
)

__all__ = [
    # Identifiers
    "UserId",
    # Types
    "AccessKey",
    "AuthProvider",
    "ExchangeResult",
    "ExternalIdentity",
    "IAm",
    "LoginAccessKey",
    "SessionState",
    "UserAccessKey",
]

"""Domain model entities for Passage."""

from passage.domain.model.common import DomainModel, EphemeralRecord
from passage.domain.model.session import (
    LoginSession,
    SessionUser,
    StateHandoff,
    UserSession,
)
from passage.domain.model.user import NewUserProfile, User

__all__ = [
    "DomainModel",
    "EphemeralRecord",
    "LoginSession",
    "NewUserProfile",
    "SessionUser",
    "StateHandoff",
    "User",
    "UserSession",
]

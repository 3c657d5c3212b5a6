"""Ephemeral session records.

Login sessions are created anonymous and gain a provider identity and a
linked user as the OAuth hand-off progresses. User sessions are immutable
snapshots issued once a login session is linked. State hand-offs correlate
a provider callback with the login session that started it.
"""

from typing import Optional

from pydantic import Field

from passage.domain.model.common import DomainModel, EphemeralRecord
from passage.domain.model.user import User
from passage.domain.value import IAm, SessionState, UserId


class LoginSession(EphemeralRecord):
    """Anonymous, pre-authentication session.

    A login session without a linked user never authorizes access to
    user-scoped data.
    """

    table_prefix = "ls"

    key: str = Field(alias="k")
    i_am: Optional[IAm] = Field(default=None, alias="a")
    user_id: Optional[UserId] = Field(default=None, alias="u")

    @property
    def state(self) -> SessionState:
        if self.user_id is not None:
            return SessionState.USER_LINKED
        if self.i_am is not None:
            return SessionState.IDENTITY_KNOWN
        return SessionState.ANONYMOUS


class SessionUser(DomainModel):
    """Minimal user snapshot embedded in a user session."""

    user_id: UserId = Field(alias="i")
    display_name: str = Field(alias="d")
    full_name: Optional[str] = Field(default=None, alias="f")
    photo_url: Optional[str] = Field(default=None, alias="p")

    @classmethod
    def from_user(cls, user: User) -> "SessionUser":
        return cls(
            user_id=user.id,
            display_name=user.display_name,
            full_name=user.full_name,
            photo_url=user.photo_url,
        )


class UserSession(EphemeralRecord):
    """Session tied to a permanent user.

    The embedded user is a snapshot taken when the session was issued and is
    not kept in sync with the durable record.
    """

    table_prefix = "us"

    key: str = Field(alias="k")
    user: SessionUser = Field(alias="u")


class StateHandoff(EphemeralRecord):
    """Short-lived pointer from an OAuth `state` value to a login session."""

    table_prefix = "sh"

    key: str = Field(alias="k")
    session_key: str = Field(alias="sk")
    redirect_uri: Optional[str] = Field(default=None, alias="r")

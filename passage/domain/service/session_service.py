"""Session store domain service."""

from datetime import timedelta
from typing import Optional

import logfire

from passage.config import SessionSettings
from passage.domain.error import SessionExpiredError
from passage.domain.model import (
    LoginSession,
    SessionUser,
    StateHandoff,
    User,
    UserSession,
)
from passage.domain.value import IAm, UserId

from .base import Service
from .key_generator import KeyGenerator
from .record_store import RecordStore


class SessionService(Service):
    """Domain service for login sessions, user sessions and hand-offs.

    Every record type has its own TTL, taken from the session settings:
    anonymous login sessions live for the login TTL and are refreshed when
    touched, linked login sessions for the linked TTL, user sessions for the
    user-session TTL and hand-offs for the short hand-off TTL.
    """

    def __init__(
        self,
        records: RecordStore,
        key_generator: KeyGenerator,
        settings: SessionSettings,
    ) -> None:
        """Initialize session service.

        Args:
            records: Typed ephemeral store
            key_generator: Unique key generator
            settings: TTLs and key sizes
        """
        self.records = records
        self.key_generator = key_generator
        self.settings = settings

    async def create_login_session(self) -> LoginSession:
        """Create an empty, anonymous login session."""
        with logfire.span("session_service.create_login_session"):
            session = await self.key_generator.create_unique(
                lambda key: LoginSession(key=key),
                self.settings.login_session_ttl,
                byte_len=self.settings.key_bytes,
            )
            logfire.info("Login session created")
            return session

    async def get_login_session(self, key: str) -> Optional[LoginSession]:
        """Load a login session, or None if it expired."""
        with logfire.span("session_service.get_login_session"):
            return await self.records.get(LoginSession, key)

    async def get_user_session(self, key: str) -> Optional[UserSession]:
        """Load a user session, or None if it expired."""
        with logfire.span("session_service.get_user_session"):
            return await self.records.get(UserSession, key)

    async def attach_identity(self, login_key: str, i_am: IAm) -> LoginSession:
        """Record the provider identity on a login session.

        Overwrites any identity attached before, so replays are harmless.

        Raises:
            SessionExpiredError: If the login session no longer exists
        """
        with logfire.span(
            "session_service.attach_identity", provider=i_am.provider.value
        ):
            session = await self._require_login_session(login_key)
            updated = session.model_copy(update={"i_am": i_am})
            await self.records.set(updated, self._login_ttl(updated))
            logfire.info("Identity attached", provider=i_am.provider.value)
            return updated

    async def link_user(
        self, login_key: str, user_id: UserId, i_am: IAm | None = None
    ) -> LoginSession:
        """Link a login session to a permanent user.

        The provider identity is recorded too when given.

        Raises:
            SessionExpiredError: If the login session no longer exists
        """
        with logfire.span("session_service.link_user", user_id=str(user_id)):
            session = await self._require_login_session(login_key)
            update: dict[str, object] = {"user_id": user_id}
            if i_am is not None:
                update["i_am"] = i_am
            updated = session.model_copy(update=update)
            await self.records.set(updated, self.settings.linked_session_ttl)
            logfire.info("User linked to login session", user_id=str(user_id))
            return updated

    async def create_handoff(
        self, login_key: str, redirect_uri: str | None = None
    ) -> StateHandoff:
        """Create the hand-off whose code travels as the OAuth `state`.

        Refreshes the login session so it outlives the provider round-trip.

        Raises:
            SessionExpiredError: If the login session no longer exists
        """
        with logfire.span("session_service.create_handoff"):
            session = await self._require_login_session(login_key)
            await self.records.set(session, self._login_ttl(session))

            handoff = await self.key_generator.create_unique(
                lambda key: StateHandoff(
                    key=key, session_key=login_key, redirect_uri=redirect_uri
                ),
                self.settings.handoff_ttl,
                byte_len=self.settings.handoff_key_bytes,
            )
            logfire.info("State hand-off created")
            return handoff

    async def resolve_handoff(self, code: str) -> Optional[StateHandoff]:
        """Look up a hand-off by the code returned from the provider.

        With delete-on-read enabled a code resolves at most once.
        """
        with logfire.span(
            "session_service.resolve_handoff",
            take=self.settings.take_handoff_on_read,
        ):
            if self.settings.take_handoff_on_read:
                handoff = await self.records.take(StateHandoff, code)
            else:
                handoff = await self.records.get(StateHandoff, code)
            if handoff is None:
                logfire.warn("State hand-off not found")
            return handoff

    async def create_user_session(self, user: User) -> UserSession:
        """Issue a user session holding a snapshot of the user."""
        with logfire.span("session_service.create_user_session", user_id=str(user.id)):
            snapshot = SessionUser.from_user(user)
            session = await self.key_generator.create_unique(
                lambda key: UserSession(key=key, user=snapshot),
                self.settings.user_session_ttl,
                byte_len=self.settings.key_bytes,
            )
            logfire.info("User session created", user_id=str(user.id))
            return session

    async def delete_user_session(self, key: str) -> None:
        """End a user session."""
        with logfire.span("session_service.delete_user_session"):
            await self.records.delete(UserSession, key)
            logfire.info("User session deleted")

    async def _require_login_session(self, key: str) -> LoginSession:
        session = await self.records.get(LoginSession, key)
        if session is None:
            logfire.warn("Login session not found")
            raise SessionExpiredError()
        return session

    def _login_ttl(self, session: LoginSession) -> timedelta:
        if session.user_id is not None:
            return self.settings.linked_session_ttl
        return self.settings.login_session_ttl

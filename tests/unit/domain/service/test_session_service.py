"""Unit tests for SessionService."""

from datetime import datetime, timezone
from uuid import uuid4

import pytest

from passage.config import SessionSettings
from passage.domain.error import SessionExpiredError
from passage.domain.model import User
from passage.domain.value import SessionState, UserId
from passage.persistence.ephemeral import InMemoryEphemeralStore
from tests.factories import build_session_service, make_i_am

MINUTE = 60
DAY = 24 * 60 * MINUTE


def _user(display_name: str = "Ada") -> User:
    return User(
        id=UserId(uuid4()),
        display_name=display_name,
        full_name="Ada Lovelace",
        photo_url="https://example.com/ada.png",
        created_at=datetime.now(timezone.utc),
    )


class TestLoginSession:
    """Tests for login session creation and mutation."""

    @pytest.mark.asyncio
    async def test_create_is_anonymous(self):
        """Should create an empty login session with a hex key."""
        service, _ = build_session_service()

        session = await service.create_login_session()

        assert session.state == SessionState.ANONYMOUS
        assert len(session.key) == 32
        assert await service.get_login_session(session.key) == session

    @pytest.mark.asyncio
    async def test_attach_identity(self):
        """Should move the session to identity known."""
        service, _ = build_session_service()
        session = await service.create_login_session()

        updated = await service.attach_identity(session.key, make_i_am())

        assert updated.state == SessionState.IDENTITY_KNOWN
        assert await service.get_login_session(session.key) == updated

    @pytest.mark.asyncio
    async def test_attach_identity_is_idempotent_overwrite(self):
        """Should keep only the most recent identity."""
        service, _ = build_session_service()
        session = await service.create_login_session()

        await service.attach_identity(session.key, make_i_am("people/1"))
        await service.attach_identity(session.key, make_i_am("people/2"))

        stored = await service.get_login_session(session.key)
        assert stored.i_am.resource_name == "people/2"

    @pytest.mark.asyncio
    async def test_attach_identity_to_missing_session(self):
        """Should report an expired session instead of creating one."""
        service, store = build_session_service()

        with pytest.raises(SessionExpiredError):
            await service.attach_identity("ab" * 16, make_i_am())

        assert len(store) == 0

    @pytest.mark.asyncio
    async def test_link_user(self):
        """Should move the session to user linked, keeping the identity."""
        service, _ = build_session_service()
        session = await service.create_login_session()
        user_id = UserId(uuid4())

        linked = await service.link_user(session.key, user_id, make_i_am())

        assert linked.state == SessionState.USER_LINKED
        assert linked.user_id == user_id
        assert linked.i_am is not None

    @pytest.mark.asyncio
    async def test_link_user_is_idempotent(self):
        """Linking the same user twice should succeed and change nothing."""
        service, _ = build_session_service()
        session = await service.create_login_session()
        user_id = UserId(uuid4())

        first = await service.link_user(session.key, user_id)
        second = await service.link_user(session.key, user_id)

        assert first == second
        assert await service.get_login_session(session.key) == second

    @pytest.mark.asyncio
    async def test_link_user_to_missing_session(self):
        """Should report an expired session."""
        service, _ = build_session_service()

        with pytest.raises(SessionExpiredError):
            await service.link_user("ab" * 16, UserId(uuid4()))


class TestTimeToLive:
    """Tests for each record's lifetime against a controlled clock."""

    @pytest.mark.asyncio
    async def test_login_session_expires(self, clock):
        """Should drop an untouched login session after the login TTL."""
        service, _ = build_session_service(store=InMemoryEphemeralStore(clock=clock))
        session = await service.create_login_session()

        clock.advance(120 * MINUTE - 1)
        assert await service.get_login_session(session.key) is not None

        clock.advance(1)
        assert await service.get_login_session(session.key) is None

    @pytest.mark.asyncio
    async def test_linked_session_lives_longer(self, clock):
        """Should keep a linked login session for the linked TTL."""
        service, _ = build_session_service(store=InMemoryEphemeralStore(clock=clock))
        session = await service.create_login_session()
        await service.link_user(session.key, UserId(uuid4()))

        clock.advance(365 * DAY - 1)
        assert await service.get_login_session(session.key) is not None

        clock.advance(1)
        assert await service.get_login_session(session.key) is None

    @pytest.mark.asyncio
    async def test_handoff_refreshes_login_session(self, clock):
        """Should restart the login TTL when a hand-off is created."""
        service, _ = build_session_service(store=InMemoryEphemeralStore(clock=clock))
        session = await service.create_login_session()

        clock.advance(100 * MINUTE)
        await service.create_handoff(session.key)
        clock.advance(100 * MINUTE)

        assert await service.get_login_session(session.key) is not None

    @pytest.mark.asyncio
    async def test_handoff_expires_quickly(self, clock):
        """Should drop a hand-off after the hand-off TTL."""
        service, _ = build_session_service(store=InMemoryEphemeralStore(clock=clock))
        session = await service.create_login_session()
        handoff = await service.create_handoff(session.key)

        clock.advance(10 * MINUTE)

        assert await service.resolve_handoff(handoff.key) is None

    @pytest.mark.asyncio
    async def test_ttls_come_from_settings(self, clock):
        """Should honor shortened TTLs injected through settings."""
        settings = SessionSettings(login_session_ttl=5)
        service, _ = build_session_service(
            store=InMemoryEphemeralStore(clock=clock), settings=settings
        )
        session = await service.create_login_session()

        clock.advance(5)

        assert await service.get_login_session(session.key) is None


class TestHandoff:
    """Tests for state hand-off creation and resolution."""

    @pytest.mark.asyncio
    async def test_create_requires_login_session(self):
        """Should refuse to create a hand-off for a missing session."""
        service, _ = build_session_service()

        with pytest.raises(SessionExpiredError):
            await service.create_handoff("ab" * 16)

    @pytest.mark.asyncio
    async def test_handoff_points_at_session(self):
        """Should record the login session and redirect target."""
        service, _ = build_session_service()
        session = await service.create_login_session()

        handoff = await service.create_handoff(session.key, "http://localhost:3000/x")

        assert len(handoff.key) == 24
        assert handoff.session_key == session.key
        assert handoff.redirect_uri == "http://localhost:3000/x"

    @pytest.mark.asyncio
    async def test_resolves_only_once(self):
        """Should return not found on the second resolution."""
        service, _ = build_session_service()
        session = await service.create_login_session()
        handoff = await service.create_handoff(session.key)

        first = await service.resolve_handoff(handoff.key)
        second = await service.resolve_handoff(handoff.key)

        assert first == handoff
        assert second is None

    @pytest.mark.asyncio
    async def test_read_mode_leaves_handoff(self):
        """Should leave the hand-off in place when delete-on-read is off."""
        settings = SessionSettings(take_handoff_on_read=False)
        service, _ = build_session_service(settings=settings)
        session = await service.create_login_session()
        handoff = await service.create_handoff(session.key)

        await service.resolve_handoff(handoff.key)

        assert await service.resolve_handoff(handoff.key) == handoff


class TestUserSession:
    """Tests for user session issuance and logout."""

    @pytest.mark.asyncio
    async def test_snapshot_of_user(self):
        """Should embed a snapshot of the user."""
        service, _ = build_session_service()
        user = _user()

        session = await service.create_user_session(user)

        stored = await service.get_user_session(session.key)
        assert stored.user.user_id == user.id
        assert stored.user.display_name == "Ada"
        assert stored.user.photo_url == user.photo_url

    @pytest.mark.asyncio
    async def test_user_session_ttl(self, clock):
        """Should keep the user session for the user-session TTL."""
        service, _ = build_session_service(store=InMemoryEphemeralStore(clock=clock))
        session = await service.create_user_session(_user())

        clock.advance(5 * DAY - 1)
        assert await service.get_user_session(session.key) is not None
        clock.advance(1)
        assert await service.get_user_session(session.key) is None

    @pytest.mark.asyncio
    async def test_delete(self):
        """Should end the user session."""
        service, _ = build_session_service()
        session = await service.create_user_session(_user())

        await service.delete_user_session(session.key)

        assert await service.get_user_session(session.key) is None

    @pytest.mark.asyncio
    async def test_login_and_user_keys_are_separate(self):
        """Should not find a login session under a user session key."""
        service, _ = build_session_service()
        session = await service.create_user_session(_user())

        assert await service.get_login_session(session.key) is None

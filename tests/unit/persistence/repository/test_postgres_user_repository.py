"""Unit tests for PostgresUserRepository transaction handling."""

from contextlib import asynccontextmanager

import pytest
from sqlalchemy.exc import IntegrityError

from passage.domain.error import AlreadyRegisteredError
from passage.domain.model import NewUserProfile
from passage.domain.value import ExternalIdentity
from passage.persistence.repository import PostgresUserRepository
from tests.factories import make_i_am


class RecordingSession:
    """Stands in for AsyncSession, recording transaction steps."""

    def __init__(self, fail_on_login_insert: bool = False) -> None:
        self.steps: list[str] = []
        self.fail_on_login_insert = fail_on_login_insert

    @asynccontextmanager
    async def begin_nested(self):
        self.steps.append("savepoint")
        try:
            yield
        except Exception:
            self.steps.append("rollback savepoint")
            raise
        self.steps.append("release savepoint")

    async def execute(self, statement):
        table = statement.table.name
        self.steps.append(f"insert {table}")
        if self.fail_on_login_insert and table == "user_logins":
            raise IntegrityError("INSERT", {}, Exception("duplicate external_id"))

    async def commit(self):
        self.steps.append("commit")


def _identity() -> ExternalIdentity:
    return ExternalIdentity.from_i_am(make_i_am())


class TestCreateUser:
    """Tests for PostgresUserRepository.create_user()."""

    @pytest.mark.asyncio
    async def test_commits_before_returning(self):
        """The new user should be durable by the time its id is handed out."""
        session = RecordingSession()
        repo = PostgresUserRepository(session)

        await repo.create_user(_identity(), NewUserProfile(display_name="Ada"))

        assert session.steps == [
            "savepoint",
            "insert users",
            "insert user_logins",
            "release savepoint",
            "commit",
        ]

    @pytest.mark.asyncio
    async def test_duplicate_identity_does_not_commit(self):
        """A unique violation should roll back the savepoint and not commit."""
        session = RecordingSession(fail_on_login_insert=True)
        repo = PostgresUserRepository(session)

        with pytest.raises(AlreadyRegisteredError):
            await repo.create_user(_identity(), NewUserProfile(display_name="Ada"))

        assert "commit" not in session.steps
        assert session.steps[-1] == "rollback savepoint"

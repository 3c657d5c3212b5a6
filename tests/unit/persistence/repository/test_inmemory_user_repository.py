"""Unit tests for InMemoryUserRepository."""

import pytest

from passage.domain.error import AlreadyRegisteredError
from passage.domain.model import NewUserProfile
from passage.domain.value import ExternalIdentity
from passage.persistence.repository.inmemory import InMemoryUserRepository
from tests.factories import make_i_am


@pytest.mark.asyncio
async def test_create_and_find():
    """Should find a created user by id and by identity."""
    repo = InMemoryUserRepository()
    identity = ExternalIdentity.from_i_am(make_i_am())

    user = await repo.create_user(identity, NewUserProfile(display_name="Ada"))

    assert await repo.find_by_id(user.id) == user
    assert await repo.find_by_external_identity(identity) == user


@pytest.mark.asyncio
async def test_one_user_per_identity():
    """Should refuse a second user for the same identity."""
    repo = InMemoryUserRepository()
    identity = ExternalIdentity.from_i_am(make_i_am())
    await repo.create_user(identity, NewUserProfile(display_name="Ada"))

    with pytest.raises(AlreadyRegisteredError):
        await repo.create_user(identity, NewUserProfile(display_name="Ada again"))


@pytest.mark.asyncio
async def test_delete_forgets_logins():
    """Should drop the identity link along with the user."""
    repo = InMemoryUserRepository()
    identity = ExternalIdentity.from_i_am(make_i_am())
    user = await repo.create_user(identity, NewUserProfile(display_name="Ada"))

    await repo.delete(user.id)

    assert await repo.find_by_id(user.id) is None
    assert await repo.find_by_external_identity(identity) is None

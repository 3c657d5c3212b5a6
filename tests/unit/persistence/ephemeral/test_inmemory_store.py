"""Unit tests for InMemoryEphemeralStore expiry."""

from datetime import timedelta

import pytest

from passage.persistence.ephemeral import InMemoryEphemeralStore


class TestExpiry:
    """Tests for TTL enforcement against a controlled clock."""

    @pytest.mark.asyncio
    async def test_visible_until_the_last_second(self, clock):
        """Should still return the value just before the TTL elapses."""
        store = InMemoryEphemeralStore(clock=clock)
        await store.set("k", "v", timedelta(seconds=10))

        clock.advance(9.999)

        assert await store.get("k") == "v"

    @pytest.mark.asyncio
    async def test_gone_at_the_boundary(self, clock):
        """Should treat a key as expired once its TTL has elapsed."""
        store = InMemoryEphemeralStore(clock=clock)
        await store.set("k", "v", timedelta(seconds=10))

        clock.advance(10)

        assert await store.get("k") is None
        assert await store.take("k") is None

    @pytest.mark.asyncio
    async def test_expired_key_can_be_claimed_again(self, clock):
        """Should let set_if_absent reuse an expired key."""
        store = InMemoryEphemeralStore(clock=clock)
        await store.set_if_absent("k", "old", timedelta(seconds=1))

        clock.advance(1)

        assert await store.set_if_absent("k", "new", timedelta(seconds=1)) is True
        assert await store.get("k") == "new"

    @pytest.mark.asyncio
    async def test_set_replaces_expiry(self, clock):
        """Should restart the TTL on overwrite."""
        store = InMemoryEphemeralStore(clock=clock)
        await store.set("k", "v1", timedelta(seconds=10))
        clock.advance(8)

        await store.set("k", "v2", timedelta(seconds=10))
        clock.advance(8)

        assert await store.get("k") == "v2"

    @pytest.mark.asyncio
    async def test_sub_second_ttl_rounds_up_to_one_second(self, clock):
        """Should never store a key that is already dead."""
        store = InMemoryEphemeralStore(clock=clock)
        await store.set("k", "v", timedelta(milliseconds=1))

        assert await store.get("k") == "v"
        clock.advance(1)
        assert await store.get("k") is None

    @pytest.mark.asyncio
    async def test_len_counts_live_keys_only(self, clock):
        """Should not count expired keys."""
        store = InMemoryEphemeralStore(clock=clock)
        await store.set("short", "v", timedelta(seconds=1))
        await store.set("long", "v", timedelta(seconds=60))

        clock.advance(2)

        assert len(store) == 1


class TestBasics:
    """Tests for plain reads, writes and deletes."""

    @pytest.mark.asyncio
    async def test_delete_missing_is_noop(self):
        """Should not fail when deleting an absent key."""
        store = InMemoryEphemeralStore()

        await store.delete("missing")

        assert await store.get("missing") is None

    @pytest.mark.asyncio
    async def test_ping(self):
        """Should always be reachable."""
        assert await InMemoryEphemeralStore().ping() is True

"""Test configuration and fixtures."""

import logfire
import pytest

from tests.factories import FakeClock

# Keep spans local and quiet during tests
logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture
def clock() -> FakeClock:
    """Clock for stores whose expiry tests control."""
    return FakeClock()

"""Mock providers for testing."""

from .google import MockGoogleProvider
from .memory import MockMemoryProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockGoogleProvider",
    "MockMemoryProvider",
    "MockPersistenceProvider",
    "build_test_container",
]

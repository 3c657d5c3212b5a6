"""Mock persistence providers for testing."""

from dishka import Scope, provide

from passage.domain.repository import UserRepository
from passage.persistence.repository.inmemory import InMemoryUserRepository
from passage.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using an in-memory user repository.

    APP scope keeps users across the requests of one test client; each test
    builds its own container, so tests stay isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_user_repository(self) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository()

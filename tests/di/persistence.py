"""Mock persistence providers for testing."""

from dishka import Scope, provide

from inkwell.domain.repository import PostRepository, TransactionManager, UserRepository
from inkwell.persistence.repository.inmemory import (
    InMemoryPostRepository,
    InMemoryTransactionManager,
    InMemoryUserRepository,
)
from inkwell.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Repositories are APP-scoped so data survives across the requests of one
    test client; each test builds its own container, so tests stay isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_user_repository(self) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository()

    @provide(scope=Scope.APP)
    def get_post_repository(self) -> PostRepository:
        """Provide in-memory post repository."""
        return InMemoryPostRepository()

    @provide(scope=Scope.APP)
    def get_transaction_manager(self) -> TransactionManager:
        """Provide in-memory transaction manager (counts commits)."""
        return InMemoryTransactionManager()

"""In-memory repository implementations for testing."""

from .post import InMemoryPostRepository
from .transaction import InMemoryTransactionManager
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryPostRepository",
    "InMemoryTransactionManager",
    "InMemoryUserRepository",
]

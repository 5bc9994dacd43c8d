"""Repository interfaces for Inkwell."""

from inkwell.domain.repository.post import PostRepository
from inkwell.domain.repository.transaction import TransactionManager
from inkwell.domain.repository.user import UserRepository

__all__ = [
    "PostRepository",
    "TransactionManager",
    "UserRepository",
]

"""User domain service."""

from typing import Sequence

import logfire

from inkwell.domain.error import NotFoundError
from inkwell.domain.model import User
from inkwell.domain.repository import UserRepository
from inkwell.domain.value import UserId

from .base import Service


class UserService(Service):
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def get_users_by_ids(self, user_ids: Sequence[UserId]) -> dict[UserId, User]:
        """Load several users, keyed by ID.

        Args:
            user_ids: IDs to load (duplicates allowed)

        Returns:
            Mapping of found user IDs to users
        """
        unique_ids = list(dict.fromkeys(user_ids))
        if not unique_ids:
            return {}

        users = await self.user_repository.find_by_ids(unique_ids)
        return {user.id: user for user in users}

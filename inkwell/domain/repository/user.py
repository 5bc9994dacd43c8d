"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from inkwell.domain.model.user import User
from inkwell.domain.value import Email, PostId, UserId, Username


class UserRepository(ABC):
    """Repository for User aggregate (the credential store).

    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by their email.

        Args:
            email: The user's (normalized) email address

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_username_or_email(
        self, username: Username, email: Email
    ) -> Optional[User]:
        """Find a user whose username or email matches.

        Used to detect duplicates before registration.

        Args:
            username: Normalized username
            email: Normalized email

        Returns:
            The first matching user, None if neither is taken
        """
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: Sequence[UserId]) -> list[User]:
        """Find several users at once (batch query).

        Args:
            user_ids: IDs to look up; unknown IDs are skipped

        Returns:
            The users found, in no particular order
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Create a user.

        Args:
            user: The user to create

        Returns:
            The saved user

        Raises:
            ConflictError: If the username or email is already taken
        """
        pass

    @abstractmethod
    async def append_post(self, user_id: UserId, post_id: PostId) -> None:
        """Add a post to the end of the user's owned posts.

        Adding a post that is already owned is a no-op.
        """
        pass

    @abstractmethod
    async def remove_post(self, user_id: UserId, post_id: PostId) -> None:
        """Remove a post from the user's owned posts, if present."""
        pass

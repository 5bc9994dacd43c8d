"""In-memory user repository for testing."""

from typing import Optional, Sequence

from inkwell.domain.error import ConflictError
from inkwell.domain.model.user import User
from inkwell.domain.repository.user import UserRepository
from inkwell.domain.value import Email, PostId, UserId, Username


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by their email."""
        for user in self._users.values():
            if user.email == email:
                return user
        return None

    async def find_by_username_or_email(
        self, username: Username, email: Email
    ) -> Optional[User]:
        """Find a user whose username or email is taken."""
        for user in self._users.values():
            if user.username == username or user.email == email:
                return user
        return None

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> list[User]:
        """Find several users."""
        return [self._users[uid] for uid in dict.fromkeys(user_ids) if uid in self._users]

    async def save(self, user: User) -> User:
        """Insert a user, enforcing unique username and email."""
        if await self.find_by_username_or_email(user.username, user.email):
            raise ConflictError("User with this email or username already exists")
        self._users[user.id] = user
        return user

    async def append_post(self, user_id: UserId, post_id: PostId) -> None:
        """Append a post to the user's owned posts."""
        user = self._users.get(user_id)
        if user and not user.owns(post_id):
            self._users[user_id] = user.model_copy(
                update={"post_ids": [*user.post_ids, post_id]}
            )

    async def remove_post(self, user_id: UserId, post_id: PostId) -> None:
        """Remove a post from the user's owned posts."""
        user = self._users.get(user_id)
        if user and user.owns(post_id):
            self._users[user_id] = user.model_copy(
                update={"post_ids": [p for p in user.post_ids if p != post_id]}
            )

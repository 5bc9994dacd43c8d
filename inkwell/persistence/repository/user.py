"""PostgreSQL implementation of User repository."""

from collections import defaultdict
from typing import Optional, Sequence
from uuid import UUID

import logfire
from sqlalchemy import delete, func, or_, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from inkwell.domain.error import ConflictError
from inkwell.domain.model import User
from inkwell.domain.repository import UserRepository
from inkwell.domain.value import Email, PostId, UserId, Username
from inkwell.persistence.mappers import row_to_user, user_to_dict
from inkwell.persistence.tables import user_posts_table, users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _fetch_post_ids_for_users(
        self, user_ids: list[UUID]
    ) -> dict[UUID, list[UUID]]:
        """Fetch owned post IDs for multiple users in a single query.

        Returns:
            Dict mapping user_id -> post IDs in insertion order
        """
        if not user_ids:
            return {}

        stmt = (
            select(user_posts_table.c.user_id, user_posts_table.c.post_id)
            .where(user_posts_table.c.user_id.in_(user_ids))
            .order_by(user_posts_table.c.user_id, user_posts_table.c.position)
        )
        result = await self.session.execute(stmt)

        owned: dict[UUID, list[UUID]] = defaultdict(list)
        for row in result.fetchall():
            owned[row.user_id].append(row.post_id)

        return owned

    async def _find_one(self, *conditions) -> Optional[User]:
        stmt = select(users_table).where(*conditions).limit(1)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        if not row:
            return None

        owned = await self._fetch_post_ids_for_users([row["id"]])
        return row_to_user(dict(row), owned.get(row["id"], []))

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: User ID to look up

        Returns:
            User if found, None otherwise
        """
        return await self._find_one(users_table.c.id == user_id)

    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by their email."""
        return await self._find_one(users_table.c.email == email.root)

    async def find_by_username_or_email(
        self, username: Username, email: Email
    ) -> Optional[User]:
        """Find a user whose username or email is taken."""
        return await self._find_one(
            or_(
                users_table.c.username == username.root,
                users_table.c.email == email.root,
            )
        )

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> list[User]:
        """Find several users in two queries."""
        if not user_ids:
            return []

        stmt = select(users_table).where(users_table.c.id.in_(list(user_ids)))
        result = await self.session.execute(stmt)
        rows = result.mappings().all()

        owned = await self._fetch_post_ids_for_users([row["id"] for row in rows])
        return [row_to_user(dict(row), owned.get(row["id"], [])) for row in rows]

    async def save(self, user: User) -> User:
        """Insert a new user.

        Raises:
            ConflictError: If the username or email is already taken
        """
        with logfire.span("user_repository.save", user_id=str(user.id)):
            stmt = users_table.insert().values(**user_to_dict(user))
            try:
                # Savepoint keeps the request transaction usable after a conflict
                async with self.session.begin_nested():
                    await self.session.execute(stmt)
            except IntegrityError as e:
                logfire.warn("Unique constraint violated on user insert", error=str(e.orig))
                raise ConflictError("User with this email or username already exists")

            if user.post_ids:
                for post_id in user.post_ids:
                    await self.append_post(user.id, post_id)

            await self.session.flush()
            return user

    async def append_post(self, user_id: UserId, post_id: PostId) -> None:
        """Append a post after the user's current last position."""
        next_position = (
            select(func.coalesce(func.max(user_posts_table.c.position), 0) + 1)
            .where(user_posts_table.c.user_id == user_id)
            .scalar_subquery()
        )
        stmt = (
            pg_insert(user_posts_table)
            .values(user_id=user_id, post_id=post_id, position=next_position)
            .on_conflict_do_nothing(index_elements=[user_posts_table.c.post_id])
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def remove_post(self, user_id: UserId, post_id: PostId) -> None:
        """Remove a post from the user's owned posts."""
        stmt = delete(user_posts_table).where(
            user_posts_table.c.user_id == user_id,
            user_posts_table.c.post_id == post_id,
        )
        await self.session.execute(stmt)
        await self.session.flush()

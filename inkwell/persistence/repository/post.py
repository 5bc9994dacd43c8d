"""PostgreSQL implementation of Post repository."""

from collections import defaultdict
from datetime import datetime
from typing import Optional, Sequence
from uuid import UUID

import logfire
from sqlalchemy import delete, desc, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from inkwell.domain.error import NotFoundError
from inkwell.domain.model import Post
from inkwell.domain.repository import PostRepository
from inkwell.domain.value import PostId, UserId
from inkwell.persistence.mappers import post_to_dict, row_to_post
from inkwell.persistence.tables import post_likes_table, posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _fetch_likes_for_posts(
        self, post_ids: list[UUID]
    ) -> dict[UUID, list[UUID]]:
        """Fetch likes for multiple posts in a single query.

        Args:
            post_ids: List of post IDs

        Returns:
            Dict mapping post_id -> IDs of users who like it
        """
        if not post_ids:
            return {}

        stmt = select(post_likes_table.c.post_id, post_likes_table.c.user_id).where(
            post_likes_table.c.post_id.in_(post_ids)
        )
        result = await self.session.execute(stmt)

        likes: dict[UUID, list[UUID]] = defaultdict(list)
        for row in result.fetchall():
            likes[row.post_id].append(row.user_id)

        return likes

    async def _rows_to_posts(self, rows) -> list[Post]:
        likes = await self._fetch_likes_for_posts([row.id for row in rows])
        return [row_to_post(row._asdict(), likes.get(row.id, [])) for row in rows]

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        with logfire.span("post_repository.find_by_id", post_id=str(post_id)):
            stmt = select(posts_table).where(posts_table.c.id == post_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()

            if not row:
                return None

            posts = await self._rows_to_posts([row])
            return posts[0]

    async def find_all(self) -> list[Post]:
        """Find every post, most recently updated first."""
        with logfire.span("post_repository.find_all"):
            stmt = select(posts_table).order_by(
                desc(posts_table.c.updated_at), desc(posts_table.c.created_at)
            )
            result = await self.session.execute(stmt)
            rows = result.fetchall()

            posts = await self._rows_to_posts(rows)
            logfire.info("Found posts", count=len(posts))
            return posts

    async def find_by_ids(self, post_ids: Sequence[PostId]) -> list[Post]:
        """Find several posts in two queries."""
        if not post_ids:
            return []

        stmt = select(posts_table).where(posts_table.c.id.in_(list(post_ids)))
        result = await self.session.execute(stmt)
        return await self._rows_to_posts(result.fetchall())

    async def save(self, post: Post) -> Post:
        """Insert a new post (and any likes it already carries)."""
        with logfire.span("post_repository.save", post_id=str(post.id)):
            stmt = posts_table.insert().values(**post_to_dict(post))
            await self.session.execute(stmt)

            if post.likes:
                await self.session.execute(
                    post_likes_table.insert(),
                    [{"post_id": post.id, "user_id": user_id} for user_id in post.likes],
                )

            await self.session.flush()
            logfire.info("Post inserted", post_id=str(post.id))
            return post

    async def update(
        self,
        post_id: PostId,
        author_id: UserId,
        title: str,
        content: str,
        updated_at: datetime,
    ) -> Optional[Post]:
        """Update title and content if the post still belongs to author_id."""
        with logfire.span("post_repository.update", post_id=str(post_id)):
            stmt = (
                update(posts_table)
                .where(posts_table.c.id == post_id)
                .where(posts_table.c.author_id == author_id)
                .values(title=title, content=content, updated_at=updated_at)
                .returning(posts_table)
            )
            result = await self.session.execute(stmt)
            row = result.fetchone()

            if row is None:
                return None

            await self.session.flush()
            posts = await self._rows_to_posts([row])
            return posts[0]

    async def delete(self, post_id: PostId, author_id: UserId) -> bool:
        """Delete the post if it still belongs to author_id.

        Likes and the owned-posts entry go with it (ON DELETE CASCADE).
        """
        with logfire.span("post_repository.delete", post_id=str(post_id)):
            stmt = (
                delete(posts_table)
                .where(posts_table.c.id == post_id)
                .where(posts_table.c.author_id == author_id)
                .returning(posts_table.c.id)
            )
            result = await self.session.execute(stmt)
            deleted = result.fetchone() is not None

            await self.session.flush()
            return deleted

    async def toggle_like(self, post_id: PostId, user_id: UserId) -> bool:
        """Toggle a like while holding a lock on the post row.

        SELECT ... FOR UPDATE on the post makes concurrent toggles of the
        same post wait for each other, so each one sees the committed
        result of the previous one before deciding to delete or insert.
        The lock is held until the request's transaction ends.

        Raises:
            NotFoundError: If the post or the user doesn't exist
        """
        with logfire.span(
            "post_repository.toggle_like", post_id=str(post_id), user_id=str(user_id)
        ):
            locked = await self.session.execute(
                select(posts_table.c.id)
                .where(posts_table.c.id == post_id)
                .with_for_update()
            )
            if locked.scalar_one_or_none() is None:
                logfire.warn("Like toggled on missing post", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))

            deleted = await self.session.execute(
                delete(post_likes_table)
                .where(post_likes_table.c.post_id == post_id)
                .where(post_likes_table.c.user_id == user_id)
                .returning(post_likes_table.c.post_id)
            )
            if deleted.first() is not None:
                return False

            try:
                async with self.session.begin_nested():
                    await self.session.execute(
                        post_likes_table.insert().values(post_id=post_id, user_id=user_id)
                    )
            except IntegrityError:
                # Foreign key on post_likes.user_id; the post row is locked
                logfire.warn("Like toggled by missing user", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))

            return True

"""Post domain service."""

from uuid import uuid4

import logfire

from inkwell.domain.error import NotFoundError
from inkwell.domain.model.common import utc_now
from inkwell.domain.model.post import Post
from inkwell.domain.repository import PostRepository, UserRepository
from inkwell.domain.value import PostId, UserId

from .base import Service


class PostService(Service):
    """Domain service for post operations.

    Keeps the post store and each author's owned-posts set in step. Callers
    commit the surrounding transaction.
    """

    def __init__(
        self, post_repository: PostRepository, user_repository: UserRepository
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            user_repository: User repository (owned-posts sets)
        """
        self.post_repository = post_repository
        self.user_repository = user_repository

    async def create_post(self, author_id: UserId, title: str, content: str) -> Post:
        """Create a post and append it to the author's owned posts.

        Args:
            author_id: Author's user ID
            title: Post title
            content: Post body

        Returns:
            The created post
        """
        with logfire.span("post_service.create_post", author_id=str(author_id)):
            post = Post(
                id=PostId(uuid4()),
                title=title,
                content=content,
                author_id=author_id,
            )
            saved = await self.post_repository.save(post)
            await self.user_repository.append_post(author_id, saved.id)

            logfire.info(
                "Post created", post_id=str(saved.id), author_id=str(author_id)
            )
            return saved

    async def get_post_by_id(self, post_id: PostId) -> Post | None:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            Post if found, None otherwise
        """
        with logfire.span("post_service.get_post_by_id", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)

            if not post:
                logfire.warn("Post not found", post_id=str(post_id))

            return post

    async def list_posts(self) -> list[Post]:
        """All posts, most recently updated first."""
        with logfire.span("post_service.list_posts"):
            return await self.post_repository.find_all()

    async def get_posts_by_ids(self, post_ids: list[PostId]) -> list[Post]:
        """Load posts in the order of ``post_ids``, skipping missing ones."""
        if not post_ids:
            return []

        posts = await self.post_repository.find_by_ids(post_ids)
        by_id = {post.id: post for post in posts}
        return [by_id[post_id] for post_id in post_ids if post_id in by_id]

    async def update_post(
        self, post_id: PostId, author_id: UserId, title: str, content: str
    ) -> Post:
        """Overwrite title and content of a post written by ``author_id``.

        Raises:
            NotFoundError: If no post with that ID and author exists at write
                time
        """
        with logfire.span("post_service.update_post", post_id=str(post_id)):
            updated = await self.post_repository.update(
                post_id, author_id, title, content, utc_now()
            )
            if not updated:
                logfire.warn(
                    "Conditional update matched nothing",
                    post_id=str(post_id),
                    author_id=str(author_id),
                )
                raise NotFoundError("Post", str(post_id))

            logfire.info("Post updated", post_id=str(post_id))
            return updated

    async def delete_post(self, post_id: PostId, author_id: UserId) -> None:
        """Delete a post and drop it from the author's owned posts.

        Raises:
            NotFoundError: If no post with that ID and author exists at write
                time
        """
        with logfire.span("post_service.delete_post", post_id=str(post_id)):
            deleted = await self.post_repository.delete(post_id, author_id)
            if not deleted:
                logfire.warn(
                    "Conditional delete matched nothing",
                    post_id=str(post_id),
                    author_id=str(author_id),
                )
                raise NotFoundError("Post", str(post_id))

            await self.user_repository.remove_post(author_id, post_id)
            logfire.info("Post deleted", post_id=str(post_id))

    async def toggle_like(self, post_id: PostId, user_id: UserId) -> bool:
        """Like or unlike a post.

        Returns:
            True if the post is now liked by the user
        """
        with logfire.span(
            "post_service.toggle_like", post_id=str(post_id), user_id=str(user_id)
        ):
            liked = await self.post_repository.toggle_like(post_id, user_id)
            logfire.info("Post like toggled", post_id=str(post_id), liked=liked)
            return liked

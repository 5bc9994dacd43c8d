"""Post repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional, Sequence

from inkwell.domain.model.post import Post
from inkwell.domain.value import PostId, UserId


class PostRepository(ABC):
    """Repository for Post aggregate (the post store).

    Mutations that depend on authorship take the expected author and only
    apply when it still matches, so ownership is re-checked at write time.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post (with its likes) if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> list[Post]:
        """Find every post, most recently updated first."""
        pass

    @abstractmethod
    async def find_by_ids(self, post_ids: Sequence[PostId]) -> list[Post]:
        """Find several posts at once (batch query).

        Args:
            post_ids: IDs to look up; unknown IDs are skipped

        Returns:
            The posts found, in no particular order
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Create a post.

        Args:
            post: The post to create

        Returns:
            The saved post
        """
        pass

    @abstractmethod
    async def update(
        self,
        post_id: PostId,
        author_id: UserId,
        title: str,
        content: str,
        updated_at: datetime,
    ) -> Optional[Post]:
        """Overwrite a post's title and content.

        Args:
            post_id: Post to update
            author_id: Expected author; nothing changes if it doesn't match
            title: New title
            content: New content
            updated_at: New modification time

        Returns:
            The updated post, or None if no post with that ID and author exists
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId, author_id: UserId) -> bool:
        """Delete a post written by the given author.

        Returns:
            True if a post was deleted, False if no post with that ID and
            author exists
        """
        pass

    @abstractmethod
    async def toggle_like(self, post_id: PostId, user_id: UserId) -> bool:
        """Atomically add or remove a user's like.

        Args:
            post_id: Post to like or unlike
            user_id: The liking user

        Returns:
            True if the post is now liked by the user, False if the like
            was removed

        Raises:
            NotFoundError: If the post (or the user) does not exist
        """
        pass

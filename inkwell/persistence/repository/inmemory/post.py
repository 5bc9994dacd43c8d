"""In-memory post repository for testing."""

from datetime import datetime
from typing import Optional, Sequence

from inkwell.domain.error import NotFoundError
from inkwell.domain.model.post import Post
from inkwell.domain.repository.post import PostRepository
from inkwell.domain.value import PostId, UserId


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing.

    No method awaits between reading and writing ``_posts``, so each
    mutation is atomic under asyncio.
    """

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def find_all(self) -> list[Post]:
        """All posts, most recently updated first."""
        return sorted(
            self._posts.values(),
            key=lambda p: (p.updated_at, p.created_at),
            reverse=True,
        )

    async def find_by_ids(self, post_ids: Sequence[PostId]) -> list[Post]:
        """Find several posts."""
        return [self._posts[pid] for pid in dict.fromkeys(post_ids) if pid in self._posts]

    async def save(self, post: Post) -> Post:
        """Insert a post."""
        self._posts[post.id] = post
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
        post = self._posts.get(post_id)
        if post is None or post.author_id != author_id:
            return None

        updated = post.model_copy(
            update={"title": title, "content": content, "updated_at": updated_at}
        )
        self._posts[post_id] = updated
        return updated

    async def delete(self, post_id: PostId, author_id: UserId) -> bool:
        """Delete the post if it still belongs to author_id."""
        post = self._posts.get(post_id)
        if post is None or post.author_id != author_id:
            return False

        del self._posts[post_id]
        return True

    async def toggle_like(self, post_id: PostId, user_id: UserId) -> bool:
        """Add the like if absent, remove it if present."""
        post = self._posts.get(post_id)
        if post is None:
            raise NotFoundError("Post", str(post_id))

        liked = user_id not in post.likes
        likes = post.likes | {user_id} if liked else post.likes - {user_id}
        self._posts[post_id] = post.model_copy(update={"likes": frozenset(likes)})
        return liked

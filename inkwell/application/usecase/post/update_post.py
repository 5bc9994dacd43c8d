"""Update post use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from inkwell.domain.error import NotAuthorizedError, NotFoundError
from inkwell.domain.repository import TransactionManager
from inkwell.domain.service import PostService
from inkwell.domain.value import PostId, UserId

from ..base import BaseUseCase
from .create_post import clean_post_fields


class UpdatePostRequest(BaseModel):
    """Update post request."""

    post_id: str  # UUID string
    user_id: str  # Current user ID (must be author)
    title: str | None = None
    content: str | None = None


class UpdatePostResponse(BaseModel):
    """Update post response."""

    post_id: str
    title: str
    content: str
    author_id: str
    updated_at: datetime


class UpdatePostUseCase(BaseUseCase):
    """Use case for editing a post's title and content."""

    def __init__(
        self, post_service: PostService, transaction_manager: TransactionManager
    ) -> None:
        """Initialize update post use case.

        Args:
            post_service: Post service
            transaction_manager: Commits the edit
        """
        self.post_service = post_service
        self.transaction_manager = transaction_manager

    async def execute(self, request: UpdatePostRequest) -> UpdatePostResponse:
        """Execute update post flow.

        Raises:
            ValidationError: If title or content is missing
            NotFoundError: If the post doesn't exist
            NotAuthorizedError: If the user isn't the author
        """
        post_id = PostId(UUID(request.post_id))
        user_id = UserId(UUID(request.user_id))

        post = await self.post_service.get_post_by_id(post_id)
        if post is None:
            raise NotFoundError("Post", request.post_id)

        if post.author_id != user_id:
            raise NotAuthorizedError("post", request.post_id, request.user_id)

        title, content = clean_post_fields(request.title, request.content)

        # Conditional on the author again, in case the post changed meanwhile
        updated = await self.post_service.update_post(
            post_id, user_id, title, content
        )
        await self.transaction_manager.commit()

        return UpdatePostResponse(
            post_id=str(updated.id),
            title=updated.title,
            content=updated.content,
            author_id=str(updated.author_id),
            updated_at=updated.updated_at,
        )

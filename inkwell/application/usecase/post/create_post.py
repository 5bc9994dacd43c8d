"""Create post use case."""

from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel

from inkwell.domain.error import NotFoundError, UnauthenticatedError, ValidationError
from inkwell.domain.repository import TransactionManager
from inkwell.domain.service import PostService, UserService
from inkwell.domain.value import UserId

from ..base import BaseUseCase

MAX_TITLE_LENGTH = 100


def clean_post_fields(title: str | None, content: str | None) -> tuple[str, str]:
    """Trim title and content and check they are usable.

    Raises:
        ValidationError: If either is missing or blank, or the title is too
            long
    """
    title = (title or "").strip()
    content = (content or "").strip()

    if not title or not content:
        raise ValidationError("Title and content are required")
    if len(title) > MAX_TITLE_LENGTH:
        raise ValidationError(
            f"Title cannot exceed {MAX_TITLE_LENGTH} characters"
        )

    return title, content


class CreatePostRequest(BaseModel):
    """Create post request."""

    author_id: str  # User ID from the session
    title: str | None = None
    content: str | None = None


class CreatePostResponse(BaseModel):
    """Create post response."""

    post_id: str
    title: str
    created_at: datetime


class CreatePostUseCase(BaseUseCase):
    """Use case for creating a new post."""

    def __init__(
        self,
        post_service: PostService,
        user_service: UserService,
        transaction_manager: TransactionManager,
    ) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
            user_service: User domain service
            transaction_manager: Commits the post and the owned-posts entry
        """
        self.post_service = post_service
        self.user_service = user_service
        self.transaction_manager = transaction_manager

    async def execute(self, request: CreatePostRequest) -> CreatePostResponse:
        """Execute create post flow.

        Steps:
        1. Validate title and content
        2. Check the author still exists
        3. Insert the post and append it to the author's posts
        4. Commit both writes together

        Raises:
            ValidationError: If title or content is missing
            UnauthenticatedError: If the session's user no longer exists
        """
        title, content = clean_post_fields(request.title, request.content)
        author_id = UserId(UUID(request.author_id))

        try:
            await self.user_service.get_by_id(author_id)
        except NotFoundError:
            raise UnauthenticatedError("Session user no longer exists")

        with logfire.span("create_post.execute", author_id=request.author_id):
            post = await self.post_service.create_post(author_id, title, content)
            await self.transaction_manager.commit()

            return CreatePostResponse(
                post_id=str(post.id),
                title=post.title,
                created_at=post.created_at,
            )

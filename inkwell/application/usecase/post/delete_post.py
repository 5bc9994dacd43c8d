"""Delete post use case."""

from uuid import UUID

from pydantic import BaseModel

from inkwell.domain.error import NotAuthorizedError, NotFoundError
from inkwell.domain.repository import TransactionManager
from inkwell.domain.service import PostService
from inkwell.domain.value import PostId, UserId

from ..base import BaseUseCase


class DeletePostRequest(BaseModel):
    """Delete post request."""

    post_id: str
    user_id: str  # Must be the author


class DeletePostResponse(BaseModel):
    """Delete post response."""

    post_id: str


class DeletePostUseCase(BaseUseCase):
    """Use case for deleting a post the user wrote."""

    def __init__(
        self, post_service: PostService, transaction_manager: TransactionManager
    ) -> None:
        self.post_service = post_service
        self.transaction_manager = transaction_manager

    async def execute(self, request: DeletePostRequest) -> DeletePostResponse:
        """Delete the post and drop it from the author's owned posts.

        Both writes commit together or not at all.

        Raises:
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

        await self.post_service.delete_post(post_id, user_id)
        await self.transaction_manager.commit()

        return DeletePostResponse(post_id=request.post_id)

"""Toggle like use case."""

from uuid import UUID

from pydantic import BaseModel

from inkwell.domain.error import NotFoundError, UnauthenticatedError
from inkwell.domain.repository import TransactionManager
from inkwell.domain.service import PostService, UserService
from inkwell.domain.value import PostId, UserId

from ..base import BaseUseCase


class ToggleLikeRequest(BaseModel):
    """Toggle like request."""

    post_id: str
    user_id: str


class ToggleLikeResponse(BaseModel):
    """Toggle like response."""

    post_id: str
    liked: bool  # State after the toggle


class ToggleLikeUseCase(BaseUseCase):
    """Use case for liking or unliking a post.

    Anyone signed in may like any post, their own included.
    """

    def __init__(
        self,
        post_service: PostService,
        user_service: UserService,
        transaction_manager: TransactionManager,
    ) -> None:
        self.post_service = post_service
        self.user_service = user_service
        self.transaction_manager = transaction_manager

    async def execute(self, request: ToggleLikeRequest) -> ToggleLikeResponse:
        """Flip the user's like on the post.

        Raises:
            UnauthenticatedError: If the session user no longer exists
            NotFoundError: If the post doesn't exist
        """
        post_id = PostId(UUID(request.post_id))
        user_id = UserId(UUID(request.user_id))

        try:
            await self.user_service.get_by_id(user_id)
        except NotFoundError:
            raise UnauthenticatedError("Session user no longer exists")

        liked = await self.post_service.toggle_like(post_id, user_id)
        await self.transaction_manager.commit()

        return ToggleLikeResponse(post_id=request.post_id, liked=liked)

"""Get user profile use case."""

from uuid import UUID

from pydantic import BaseModel

from inkwell.domain.error import NotFoundError, UnauthenticatedError
from inkwell.domain.service import PostService, UserService
from inkwell.domain.value import UserId

from ..base import BaseUseCase
from ..dto import PostInfo, UserInfo


class GetUserProfileRequest(BaseModel):
    """Get user profile request."""

    user_id: str  # Session user


class GetUserProfileResponse(BaseModel):
    """Get user profile response."""

    user: UserInfo
    posts: list[PostInfo]  # In owned-posts order


class GetUserProfileUseCase(BaseUseCase):
    """Use case for the profile page: the user's own posts."""

    def __init__(self, user_service: UserService, post_service: PostService) -> None:
        """Initialize get user profile use case.

        Args:
            user_service: User domain service
            post_service: Post domain service
        """
        self.user_service = user_service
        self.post_service = post_service

    async def execute(self, request: GetUserProfileRequest) -> GetUserProfileResponse:
        """Execute get user profile flow.

        Raises:
            UnauthenticatedError: If the session user no longer exists
        """
        user_id = UserId(UUID(request.user_id))
        try:
            user = await self.user_service.get_by_id(user_id)
        except NotFoundError:
            raise UnauthenticatedError("Session user no longer exists")

        posts = await self.post_service.get_posts_by_ids(user.post_ids)

        return GetUserProfileResponse(
            user=UserInfo.from_user(user),
            posts=[PostInfo.from_post(post, user.id, user) for post in posts],
        )

"""Get dashboard use case."""

from uuid import UUID

from pydantic import BaseModel

from inkwell.domain.error import NotFoundError, UnauthenticatedError
from inkwell.domain.service import PostService, UserService
from inkwell.domain.value import UserId

from ..base import BaseUseCase
from ..dto import PostInfo, UserInfo


class GetDashboardRequest(BaseModel):
    """Get dashboard request."""

    user_id: str  # Session user


class GetDashboardResponse(BaseModel):
    """Get dashboard response."""

    user: UserInfo
    posts: list[PostInfo]


class GetDashboardUseCase(BaseUseCase):
    """Use case for the dashboard: every post, newest first."""

    def __init__(self, user_service: UserService, post_service: PostService) -> None:
        """Initialize get dashboard use case.

        Args:
            user_service: User domain service
            post_service: Post domain service
        """
        self.user_service = user_service
        self.post_service = post_service

    async def execute(self, request: GetDashboardRequest) -> GetDashboardResponse:
        """Execute get dashboard flow.

        Steps:
        1. Load the session user
        2. Load all posts (most recently updated first)
        3. Batch-load their authors

        Raises:
            UnauthenticatedError: If the session user no longer exists
        """
        user_id = UserId(UUID(request.user_id))
        try:
            user = await self.user_service.get_by_id(user_id)
        except NotFoundError:
            raise UnauthenticatedError("Session user no longer exists")

        posts = await self.post_service.list_posts()
        authors = await self.user_service.get_users_by_ids(
            [post.author_id for post in posts]
        )

        return GetDashboardResponse(
            user=UserInfo.from_user(user),
            posts=[
                PostInfo.from_post(post, user.id, authors.get(post.author_id))
                for post in posts
            ],
        )

"""Get current user use case."""

from uuid import UUID

from pydantic import BaseModel

from inkwell.domain.error import NotFoundError, UnauthenticatedError
from inkwell.domain.service import JWTService, UserService
from inkwell.domain.value import UserId
from inkwell.util.jwt import JWTError

from ..base import BaseUseCase
from ..dto import UserInfo


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: str  # JWT token


class GetCurrentUserResponse(BaseModel):
    """Get current user response."""

    user: UserInfo


class GetCurrentUserUseCase(BaseUseCase):
    """Use case for getting the user behind a session token."""

    def __init__(self, jwt_service: JWTService, user_service: UserService) -> None:
        """Initialize get current user use case.

        Args:
            jwt_service: JWT token domain service
            user_service: User domain service
        """
        self.jwt_service = jwt_service
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        """Execute get current user flow.

        Steps:
        1. Verify JWT token via JWT service
        2. Load the user named by the token

        Raises:
            UnauthenticatedError: If the token is invalid or expired, or its
                user no longer exists
        """
        try:
            payload = self.jwt_service.verify_token(request.token)
            user = await self.user_service.get_by_id(UserId(UUID(payload.user_id)))
        except (JWTError, NotFoundError, ValueError) as e:
            raise UnauthenticatedError(str(e))

        return GetCurrentUserResponse(user=UserInfo.from_user(user))

"""Login use case."""

import logfire
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from inkwell.domain.error import InvalidCredentialsError
from inkwell.domain.service import AuthService, JWTService
from inkwell.domain.value import Email

from ..base import BaseUseCase


class LoginRequest(BaseModel):
    """Login request (raw form values)."""

    email: str
    password: str


class LoginResponse(BaseModel):
    """Login response."""

    token: str
    max_age: int
    user_id: str


class LoginUseCase(BaseUseCase):
    """Use case for email/password login."""

    def __init__(self, auth_service: AuthService, jwt_service: JWTService) -> None:
        """Initialize login use case.

        Args:
            auth_service: Authentication domain service
            jwt_service: JWT token domain service
        """
        self.auth_service = auth_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Check credentials and issue a session token.

        Raises:
            InvalidCredentialsError: Unknown email or wrong password (same
                error for both)
        """
        try:
            email = Email(request.email)
        except PydanticValidationError:
            raise InvalidCredentialsError()

        with logfire.span("login.execute"):
            user = await self.auth_service.authenticate(email, request.password)
            token = self.jwt_service.create_token(str(user.id), user.email.root)

            return LoginResponse(
                token=token,
                max_age=self.jwt_service.token_max_age,
                user_id=str(user.id),
            )

"""Register use case."""

import logfire
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from inkwell.domain.error import ValidationError
from inkwell.domain.repository import TransactionManager
from inkwell.domain.service import AuthService, JWTService
from inkwell.domain.value import DisplayName, Email, Username

from ..base import BaseUseCase, first_error_message

MIN_PASSWORD_LENGTH = 6
# bcrypt only looks at the first 72 bytes
MAX_PASSWORD_BYTES = 72


class RegisterRequest(BaseModel):
    """Register request (raw form values)."""

    username: str
    email: str
    password: str
    name: str


class RegisterResponse(BaseModel):
    """Register response."""

    token: str
    max_age: int
    user_id: str
    username: str


class RegisterUseCase(BaseUseCase):
    """Use case for creating an account and starting a session."""

    def __init__(
        self,
        auth_service: AuthService,
        jwt_service: JWTService,
        transaction_manager: TransactionManager,
    ) -> None:
        """Initialize register use case.

        Args:
            auth_service: Authentication domain service
            jwt_service: JWT token domain service
            transaction_manager: Commits the new user
        """
        self.auth_service = auth_service
        self.jwt_service = jwt_service
        self.transaction_manager = transaction_manager

    async def execute(self, request: RegisterRequest) -> RegisterResponse:
        """Execute registration flow.

        Steps:
        1. Normalize and validate the form values
        2. Create the user (conflict check + bcrypt hash)
        3. Commit
        4. Issue a session token

        Raises:
            ValidationError: If a field is missing or malformed
            ConflictError: If the username or email is taken
        """
        try:
            username = Username(request.username)
            email = Email(request.email)
            name = DisplayName(request.name)
        except PydanticValidationError as e:
            raise ValidationError(first_error_message(e))

        if len(request.password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"
            )
        if len(request.password.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValidationError("Password is too long")

        with logfire.span("register.execute", username=username.root):
            user = await self.auth_service.register(
                username, email, request.password, name
            )
            await self.transaction_manager.commit()

            token = self.jwt_service.create_token(str(user.id), user.email.root)

            return RegisterResponse(
                token=token,
                max_age=self.jwt_service.token_max_age,
                user_id=str(user.id),
                username=user.username.root,
            )

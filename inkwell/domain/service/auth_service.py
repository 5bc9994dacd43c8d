"""Authentication domain service.

bcrypt hashing and checking run in the default executor, off the event loop.
"""

import asyncio
from functools import partial
from uuid import uuid4

import logfire

from inkwell.config import AuthSettings
from inkwell.domain.error import ConflictError, InvalidCredentialsError
from inkwell.domain.model import User
from inkwell.domain.repository import UserRepository
from inkwell.domain.value import DisplayName, Email, UserId, Username
from inkwell.util.password import hash_password, verify_password

from .base import Service


class AuthService(Service):
    """Registers users and checks their credentials."""

    def __init__(
        self, user_repository: UserRepository, auth_settings: AuthSettings
    ) -> None:
        """Initialize auth service.

        Args:
            user_repository: User repository
            auth_settings: Authentication settings (bcrypt cost)
        """
        self.user_repository = user_repository
        self.auth_settings = auth_settings

    async def register(
        self,
        username: Username,
        email: Email,
        password: str,
        name: DisplayName,
    ) -> User:
        """Create a new user with a hashed password.

        Args:
            username: Normalized username
            email: Normalized email
            password: Plaintext password
            name: Display name

        Returns:
            The created user

        Raises:
            ConflictError: If the username or email is already taken
        """
        with logfire.span("auth_service.register", username=username.root):
            existing = await self.user_repository.find_by_username_or_email(
                username, email
            )
            if existing:
                logfire.warn("Registration conflict", username=username.root)
                raise ConflictError("User with this email or username already exists")

            loop = asyncio.get_running_loop()
            password_hash = await loop.run_in_executor(
                None,
                partial(hash_password, password, rounds=self.auth_settings.bcrypt_rounds),
            )

            user = User(
                id=UserId(uuid4()),
                username=username,
                email=email,
                password_hash=password_hash,
                name=name,
            )

            # save() raises ConflictError if a concurrent registration won
            saved = await self.user_repository.save(user)
            logfire.info("User registered", user_id=str(saved.id))
            return saved

    async def authenticate(self, email: Email, password: str) -> User:
        """Check an email/password pair.

        Args:
            email: Normalized email
            password: Plaintext password

        Returns:
            The matching user

        Raises:
            InvalidCredentialsError: If the email is unknown or the password
                does not match
        """
        with logfire.span("auth_service.authenticate"):
            user = await self.user_repository.find_by_email(email)
            matches = False
            if user is not None:
                loop = asyncio.get_running_loop()
                matches = await loop.run_in_executor(
                    None, verify_password, password, user.password_hash
                )
            if not matches:
                logfire.warn("Login failed")
                raise InvalidCredentialsError()

            logfire.info("User authenticated", user_id=str(user.id))
            return user

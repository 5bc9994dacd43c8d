"""JWT token domain service."""

import logfire

from inkwell.config import AuthSettings
from inkwell.util.jwt import TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for session token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    @property
    def token_max_age(self) -> int:
        """Token lifetime in seconds, used as the session cookie max-age."""
        return int(self.auth_settings.jwt_ttl.total_seconds())

    def create_token(self, user_id: str, email: str) -> str:
        """Create JWT token for user.

        Args:
            user_id: User ID
            email: User email

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", user_id=user_id):
            token = create_token(user_id, email, self.auth_settings)
            logfire.info("JWT token created", user_id=user_id)
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Args:
            token: JWT token string

        Returns:
            Token payload

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
                logfire.debug("JWT token verified", user_id=payload.user_id)
                return payload
            except Exception as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise

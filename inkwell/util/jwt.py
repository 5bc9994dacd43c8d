"""JWT token utilities."""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from inkwell.config import AuthSettings


class TokenPayload(BaseModel):
    """JWT token payload."""

    user_id: str
    email: str
    exp: datetime


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_token(
    user_id: str,
    email: str,
    settings: AuthSettings,
    ttl: timedelta | None = None,
) -> str:
    """Create a JWT token for the user.

    Args:
        user_id: User ID
        email: User email
        settings: Authentication settings
        ttl: Token lifetime (defaults to settings.jwt_ttl)

    Returns:
        Encoded JWT token
    """
    expiry = datetime.now(timezone.utc) + (ttl if ttl is not None else settings.jwt_ttl)

    payload = {
        "user_id": user_id,
        "email": email,
        "exp": expiry,
    }

    token = jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)

    return token


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a JWT token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["exp"]},
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")
    except PydanticValidationError:
        raise JWTError("Token is missing required claims")

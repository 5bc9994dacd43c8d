"""Session cookie handling.

``require_session`` guards protected routes: without a valid token it
raises UnauthenticatedError, which the error handlers turn into a redirect
to the login page. Tokens are re-verified on every request.
"""

import logging

from fastapi import Request
from pydantic import BaseModel
from starlette.responses import Response

from inkwell.config import AuthSettings
from inkwell.domain.error import UnauthenticatedError
from inkwell.domain.service import JWTService
from inkwell.util.jwt import JWTError

logger = logging.getLogger(__name__)


class SessionSubject(BaseModel):
    """Who the request is from, as carried by the token."""

    user_id: str
    email: str


async def _subject_from_request(request: Request) -> SessionSubject:
    container = request.state.dishka_container
    auth_settings = await container.get(AuthSettings)

    token = request.cookies.get(auth_settings.cookie_name)
    if not token:
        raise UnauthenticatedError("No session token")

    jwt_service = await container.get(JWTService)
    try:
        payload = jwt_service.verify_token(token)
    except JWTError as e:
        raise UnauthenticatedError(str(e))

    return SessionSubject(user_id=payload.user_id, email=payload.email)


async def require_session(request: Request) -> SessionSubject:
    """FastAPI dependency for protected routes.

    Raises:
        UnauthenticatedError: If the token cookie is missing, malformed,
            tampered with or expired
    """
    try:
        return await _subject_from_request(request)
    except UnauthenticatedError as e:
        logger.info(f"Unauthenticated request to {request.url.path}: {e.reason}")
        raise


async def optional_session(request: Request) -> SessionSubject | None:
    """Like require_session, but returns None instead of redirecting."""
    try:
        return await _subject_from_request(request)
    except UnauthenticatedError:
        return None


def set_session_cookie(
    response: Response, token: str, max_age: int, auth_settings: AuthSettings
) -> None:
    """Attach the session token to a response."""
    response.set_cookie(
        key=auth_settings.cookie_name,
        value=token,
        httponly=True,
        secure=auth_settings.cookie_secure,
        samesite="lax",
        path="/",
        max_age=max_age,
    )


def clear_session_cookie(response: Response, auth_settings: AuthSettings) -> None:
    """Remove the session token (logout). The token itself stays valid."""
    response.delete_cookie(
        key=auth_settings.cookie_name,
        httponly=True,
        secure=auth_settings.cookie_secure,
        samesite="lax",
        path="/",
    )

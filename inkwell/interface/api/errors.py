"""Mapping of errors to HTTP responses.

Routes never build error responses themselves; use cases raise domain
errors and the handlers registered here render them.
"""

import logging

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import RedirectResponse
from pydantic import ValidationError as PydanticValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response

from inkwell.config import Settings
from inkwell.domain.error import (
    ConflictError,
    InvalidCredentialsError,
    NotAuthorizedError,
    NotFoundError,
    UnauthenticatedError,
    ValidationError,
)
from inkwell.interface.api.templating import render

logger = logging.getLogger(__name__)


def error_page(request: Request, status_code: int, message: str) -> Response:
    """Render the generic error page."""
    if status_code == status.HTTP_404_NOT_FOUND:
        return render(request, "404.html", {"message": message}, status_code=404)

    return render(
        request,
        "error.html",
        {"status_code": status_code, "message": message},
        status_code=status_code,
    )


def _validation_message(errors: list) -> str:
    if not errors:
        return "Invalid request"
    first = errors[0]
    field = ".".join(str(part) for part in first.get("loc", ()) if part not in ("body", "path"))
    message = first.get("msg", "Invalid value").removeprefix("Value error, ")
    return f"{field}: {message}" if field else message


def register_error_handlers(app: FastAPI, settings: Settings) -> None:
    """Install the exception handlers on the app.

    Args:
        app: FastAPI application
        settings: Settings (error detail is hidden in production)
    """

    @app.exception_handler(UnauthenticatedError)
    async def handle_unauthenticated(request: Request, exc: UnauthenticatedError):
        return RedirectResponse("/login", status_code=status.HTTP_302_FOUND)

    @app.exception_handler(ValidationError)
    async def handle_validation(request: Request, exc: ValidationError):
        return error_page(request, status.HTTP_400_BAD_REQUEST, str(exc))

    @app.exception_handler(InvalidCredentialsError)
    async def handle_invalid_credentials(
        request: Request, exc: InvalidCredentialsError
    ):
        return error_page(request, status.HTTP_400_BAD_REQUEST, str(exc))

    @app.exception_handler(ConflictError)
    async def handle_conflict(request: Request, exc: ConflictError):
        return error_page(request, status.HTTP_400_BAD_REQUEST, str(exc))

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        message = _validation_message(list(exc.errors()))
        logger.info(f"Rejected request to {request.url.path}: {message}")
        return error_page(request, status.HTTP_400_BAD_REQUEST, message)

    @app.exception_handler(PydanticValidationError)
    async def handle_pydantic_validation(
        request: Request, exc: PydanticValidationError
    ):
        return error_page(
            request, status.HTTP_400_BAD_REQUEST, _validation_message(exc.errors())
        )

    @app.exception_handler(NotAuthorizedError)
    async def handle_not_authorized(request: Request, exc: NotAuthorizedError):
        logfire.warn(
            "Forbidden mutation attempt",
            resource=exc.resource,
            resource_id=exc.resource_id,
            user_id=exc.user_id,
        )
        return error_page(
            request,
            status.HTTP_403_FORBIDDEN,
            f"You are not allowed to modify this {exc.resource}",
        )

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return error_page(request, status.HTTP_404_NOT_FOUND, f"{exc.resource} not found")

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            return error_page(request, exc.status_code, "Page not found")
        return error_page(request, exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception):
        logfire.error(
            "Unhandled error",
            path=request.url.path,
            error_type=type(exc).__name__,
            _exc_info=exc,
        )
        detail = None if settings.is_production else f"{type(exc).__name__}: {exc}"
        return render(
            request,
            "500.html",
            {"detail": detail},
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

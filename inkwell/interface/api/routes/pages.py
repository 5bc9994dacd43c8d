"""Public page routes."""

import logging
from typing import Annotated

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Request
from starlette.responses import Response

from inkwell.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
)
from inkwell.config import AuthSettings
from inkwell.domain.error import UnauthenticatedError
from inkwell.interface.api.session import SessionSubject, optional_session
from inkwell.interface.api.templating import render

logger = logging.getLogger(__name__)

router = APIRouter(tags=["pages"], route_class=DishkaRoute)


@router.get("/")
async def home(
    request: Request,
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_settings: FromDishka[AuthSettings],
) -> Response:
    """Home page. Greets the user by name when a valid session exists."""
    user = None
    token = request.cookies.get(auth_settings.cookie_name)
    if token:
        try:
            result = await get_current_user_use_case.execute(
                GetCurrentUserRequest(token=token)
            )
            user = result.user
        except UnauthenticatedError as e:
            logger.debug(f"Ignoring stale session on home page: {e.reason}")

    return render(request, "index.html", {"title": "Home Page", "user": user})


@router.get("/login")
async def login_page(
    request: Request,
    subject: Annotated[SessionSubject | None, Depends(optional_session)],
) -> Response:
    """Login form."""
    return render(
        request, "login.html", {"title": "Login Page", "logged_in": subject is not None}
    )


@router.get("/register")
async def register_page(
    request: Request,
    subject: Annotated[SessionSubject | None, Depends(optional_session)],
) -> Response:
    """Registration form."""
    return render(
        request,
        "register.html",
        {"title": "Register Page", "logged_in": subject is not None},
    )

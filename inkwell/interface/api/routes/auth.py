"""Authentication routes."""

import logging
from typing import Annotated

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Form, status
from fastapi.responses import RedirectResponse
from pydantic import BaseModel, ConfigDict

from inkwell.application.usecase.auth import (
    LoginRequest,
    LoginUseCase,
    RegisterRequest,
    RegisterUseCase,
)
from inkwell.config import AuthSettings
from inkwell.interface.api.session import clear_session_cookie, set_session_cookie

logger = logging.getLogger(__name__)

router = APIRouter(tags=["authentication"], route_class=DishkaRoute)


class RegisterForm(BaseModel):
    """Registration form body."""

    model_config = ConfigDict(extra="forbid")

    username: str
    email: str
    password: str
    name: str


class LoginForm(BaseModel):
    """Login form body."""

    model_config = ConfigDict(extra="forbid")

    email: str
    password: str


@router.post("/register")
async def register(
    form: Annotated[RegisterForm, Form()],
    register_use_case: FromDishka[RegisterUseCase],
    auth_settings: FromDishka[AuthSettings],
) -> RedirectResponse:
    """Create an account, start a session and go to the dashboard.

    Duplicate username/email and invalid fields are rendered as 400 pages
    by the error handlers.
    """
    logger.info(f"Registering user: {form.username}")

    result = await register_use_case.execute(
        RegisterRequest(
            username=form.username,
            email=form.email,
            password=form.password,
            name=form.name,
        )
    )

    response = RedirectResponse("/dashboard", status_code=status.HTTP_302_FOUND)
    set_session_cookie(response, result.token, result.max_age, auth_settings)
    logger.info(f"Registration successful for user: {result.username}")
    return response


@router.post("/login")
async def login(
    form: Annotated[LoginForm, Form()],
    login_use_case: FromDishka[LoginUseCase],
    auth_settings: FromDishka[AuthSettings],
) -> RedirectResponse:
    """Check credentials, start a session and go to the dashboard."""
    result = await login_use_case.execute(
        LoginRequest(email=form.email, password=form.password)
    )

    response = RedirectResponse("/dashboard", status_code=status.HTTP_302_FOUND)
    set_session_cookie(response, result.token, result.max_age, auth_settings)
    logger.info(f"Login successful for user: {result.user_id}")
    return response


@router.get("/logout")
async def logout(auth_settings: FromDishka[AuthSettings]) -> RedirectResponse:
    """Clear the session cookie.

    Tokens are stateless, so a copied token stays valid until it expires.
    """
    response = RedirectResponse("/login", status_code=status.HTTP_302_FOUND)
    clear_session_cookie(response, auth_settings)
    return response

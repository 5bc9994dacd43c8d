"""Dashboard and profile routes."""

from typing import Annotated

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Request
from starlette.responses import Response

from inkwell.application.usecase.user import (
    GetDashboardRequest,
    GetDashboardUseCase,
    GetUserProfileRequest,
    GetUserProfileUseCase,
)
from inkwell.interface.api.session import SessionSubject, require_session
from inkwell.interface.api.templating import render

router = APIRouter(tags=["users"], route_class=DishkaRoute)


@router.get("/dashboard")
async def dashboard(
    request: Request,
    subject: Annotated[SessionSubject, Depends(require_session)],
    get_dashboard_use_case: FromDishka[GetDashboardUseCase],
) -> Response:
    """All posts, newest first, with like and edit controls."""
    result = await get_dashboard_use_case.execute(
        GetDashboardRequest(user_id=subject.user_id)
    )
    return render(
        request,
        "dashboard.html",
        {"title": "Dashboard", "user": result.user, "posts": result.posts},
    )


@router.get("/profile")
async def profile(
    request: Request,
    subject: Annotated[SessionSubject, Depends(require_session)],
    get_user_profile_use_case: FromDishka[GetUserProfileUseCase],
) -> Response:
    """The current user's own posts."""
    result = await get_user_profile_use_case.execute(
        GetUserProfileRequest(user_id=subject.user_id)
    )
    return render(
        request,
        "profile.html",
        {"title": "Profile Page", "user": result.user, "posts": result.posts},
    )

"""Post mutation routes.

All routes require a session. Ownership is checked by the use cases.
"""

import logging
from typing import Annotated
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Form, status
from fastapi.responses import RedirectResponse
from pydantic import BaseModel, ConfigDict

from inkwell.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostUseCase,
    ToggleLikeRequest,
    ToggleLikeUseCase,
    UpdatePostRequest,
    UpdatePostUseCase,
)
from inkwell.interface.api.session import SessionSubject, require_session

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


class PostForm(BaseModel):
    """Create/edit form body. Blank values are rejected by the use cases."""

    model_config = ConfigDict(extra="forbid")

    title: str = ""
    content: str = ""


@router.post("/create")
async def create_post(
    form: Annotated[PostForm, Form()],
    subject: Annotated[SessionSubject, Depends(require_session)],
    create_post_use_case: FromDishka[CreatePostUseCase],
) -> RedirectResponse:
    """Create a post written by the session user."""
    result = await create_post_use_case.execute(
        CreatePostRequest(
            author_id=subject.user_id, title=form.title, content=form.content
        )
    )
    logger.info(f"Post {result.post_id} created by {subject.user_id}")
    return RedirectResponse("/dashboard", status_code=status.HTTP_302_FOUND)


@router.post("/{post_id}/edit")
async def edit_post(
    post_id: UUID,
    form: Annotated[PostForm, Form()],
    subject: Annotated[SessionSubject, Depends(require_session)],
    update_post_use_case: FromDishka[UpdatePostUseCase],
) -> RedirectResponse:
    """Edit a post. Only its author may do so."""
    await update_post_use_case.execute(
        UpdatePostRequest(
            post_id=str(post_id),
            user_id=subject.user_id,
            title=form.title,
            content=form.content,
        )
    )
    return RedirectResponse("/profile", status_code=status.HTTP_302_FOUND)


@router.post("/{post_id}/delete")
async def delete_post(
    post_id: UUID,
    subject: Annotated[SessionSubject, Depends(require_session)],
    delete_post_use_case: FromDishka[DeletePostUseCase],
) -> RedirectResponse:
    """Delete a post. Only its author may do so."""
    await delete_post_use_case.execute(
        DeletePostRequest(post_id=str(post_id), user_id=subject.user_id)
    )
    logger.info(f"Post {post_id} deleted by {subject.user_id}")
    return RedirectResponse("/profile", status_code=status.HTTP_302_FOUND)


@router.post("/{post_id}/like")
async def like_post(
    post_id: UUID,
    subject: Annotated[SessionSubject, Depends(require_session)],
    toggle_like_use_case: FromDishka[ToggleLikeUseCase],
) -> RedirectResponse:
    """Like the post, or unlike it if already liked."""
    await toggle_like_use_case.execute(
        ToggleLikeRequest(post_id=str(post_id), user_id=subject.user_id)
    )
    return RedirectResponse("/dashboard", status_code=status.HTTP_302_FOUND)

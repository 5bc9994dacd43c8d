"""Post use cases."""

from .create_post import CreatePostRequest, CreatePostResponse, CreatePostUseCase
from .delete_post import DeletePostRequest, DeletePostResponse, DeletePostUseCase
from .toggle_like import ToggleLikeRequest, ToggleLikeResponse, ToggleLikeUseCase
from .update_post import UpdatePostRequest, UpdatePostResponse, UpdatePostUseCase

__all__ = [
    "CreatePostRequest",
    "CreatePostResponse",
    "CreatePostUseCase",
    "DeletePostRequest",
    "DeletePostResponse",
    "DeletePostUseCase",
    "ToggleLikeRequest",
    "ToggleLikeResponse",
    "ToggleLikeUseCase",
    "UpdatePostRequest",
    "UpdatePostResponse",
    "UpdatePostUseCase",
]

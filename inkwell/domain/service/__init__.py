"""Domain services."""

from .auth_service import AuthService
from .base import Service
from .jwt_service import JWTService
from .post_service import PostService
from .user_service import UserService

__all__ = [
    "AuthService",
    "JWTService",
    "PostService",
    "Service",
    "UserService",
]

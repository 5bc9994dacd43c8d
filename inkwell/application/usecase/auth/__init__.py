"""Authentication use cases."""

from .get_current_user import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
)
from .login import LoginRequest, LoginResponse, LoginUseCase
from .register import RegisterRequest, RegisterResponse, RegisterUseCase

__all__ = [
    "GetCurrentUserRequest",
    "GetCurrentUserResponse",
    "GetCurrentUserUseCase",
    "LoginRequest",
    "LoginResponse",
    "LoginUseCase",
    "RegisterRequest",
    "RegisterResponse",
    "RegisterUseCase",
]

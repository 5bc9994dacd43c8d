"""User use cases."""

from .get_dashboard import GetDashboardRequest, GetDashboardResponse, GetDashboardUseCase
from .get_user_profile import (
    GetUserProfileRequest,
    GetUserProfileResponse,
    GetUserProfileUseCase,
)

__all__ = [
    "GetDashboardRequest",
    "GetDashboardResponse",
    "GetDashboardUseCase",
    "GetUserProfileRequest",
    "GetUserProfileResponse",
    "GetUserProfileUseCase",
]

"""Domain layer DI providers."""

from dishka import Scope, provide

from inkwell.config import AuthSettings
from inkwell.domain.repository import PostRepository, UserRepository
from inkwell.domain.service import AuthService, JWTService, PostService, UserService
from inkwell.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_auth_service(
        self, user_repository: UserRepository, auth_settings: AuthSettings
    ) -> AuthService:
        """Provide authentication domain service."""
        return AuthService(user_repository=user_repository, auth_settings=auth_settings)

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_post_service(
        self, post_repository: PostRepository, user_repository: UserRepository
    ) -> PostService:
        """Provide post domain service."""
        return PostService(
            post_repository=post_repository, user_repository=user_repository
        )

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

"""Application layer DI providers."""

from dishka import Scope, provide

from inkwell.application.usecase.auth import (
    GetCurrentUserUseCase,
    LoginUseCase,
    RegisterUseCase,
)
from inkwell.application.usecase.post import (
    CreatePostUseCase,
    DeletePostUseCase,
    ToggleLikeUseCase,
    UpdatePostUseCase,
)
from inkwell.application.usecase.user import GetDashboardUseCase, GetUserProfileUseCase
from inkwell.domain.repository import TransactionManager
from inkwell.domain.service import AuthService, JWTService, PostService, UserService
from inkwell.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_register_use_case(
        self,
        auth_service: AuthService,
        jwt_service: JWTService,
        transaction_manager: TransactionManager,
    ) -> RegisterUseCase:
        """Provide register use case."""
        return RegisterUseCase(
            auth_service=auth_service,
            jwt_service=jwt_service,
            transaction_manager=transaction_manager,
        )

    @provide(scope=Scope.REQUEST)
    def get_login_use_case(
        self, auth_service: AuthService, jwt_service: JWTService
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(auth_service=auth_service, jwt_service=jwt_service)

    @provide(scope=Scope.REQUEST)
    def get_current_user_use_case(
        self, jwt_service: JWTService, user_service: UserService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(jwt_service=jwt_service, user_service=user_service)

    # Post use cases
    @provide(scope=Scope.REQUEST)
    def get_create_post_use_case(
        self,
        post_service: PostService,
        user_service: UserService,
        transaction_manager: TransactionManager,
    ) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(
            post_service=post_service,
            user_service=user_service,
            transaction_manager=transaction_manager,
        )

    @provide(scope=Scope.REQUEST)
    def get_update_post_use_case(
        self, post_service: PostService, transaction_manager: TransactionManager
    ) -> UpdatePostUseCase:
        """Provide update post use case."""
        return UpdatePostUseCase(
            post_service=post_service, transaction_manager=transaction_manager
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_post_use_case(
        self, post_service: PostService, transaction_manager: TransactionManager
    ) -> DeletePostUseCase:
        """Provide delete post use case."""
        return DeletePostUseCase(
            post_service=post_service, transaction_manager=transaction_manager
        )

    @provide(scope=Scope.REQUEST)
    def get_toggle_like_use_case(
        self,
        post_service: PostService,
        user_service: UserService,
        transaction_manager: TransactionManager,
    ) -> ToggleLikeUseCase:
        """Provide toggle like use case."""
        return ToggleLikeUseCase(
            post_service=post_service,
            user_service=user_service,
            transaction_manager=transaction_manager,
        )

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_dashboard_use_case(
        self, user_service: UserService, post_service: PostService
    ) -> GetDashboardUseCase:
        """Provide dashboard use case."""
        return GetDashboardUseCase(user_service=user_service, post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_user_profile_use_case(
        self, user_service: UserService, post_service: PostService
    ) -> GetUserProfileUseCase:
        """Provide user profile use case."""
        return GetUserProfileUseCase(
            user_service=user_service, post_service=post_service
        )

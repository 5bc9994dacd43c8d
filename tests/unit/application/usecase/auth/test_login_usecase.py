"""Unit tests for LoginUseCase."""

import pytest

from inkwell.application.usecase.auth import LoginRequest, LoginUseCase
from inkwell.domain.error import InvalidCredentialsError
from inkwell.domain.repository import UserRepository
from inkwell.domain.service import JWTService
from tests.conftest import DEFAULT_PASSWORD, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestLoginUseCase:
    @pytest.mark.asyncio
    async def test_login_issues_token(self, unit_env):
        # Arrange
        usecase = await unit_env.get(LoginUseCase)
        jwt_service = await unit_env.get(JWTService)
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.save(make_user("alice"))

        # Act
        response = await usecase.execute(
            LoginRequest(email="ALICE@example.com", password=DEFAULT_PASSWORD)
        )

        # Assert
        assert response.user_id == str(user.id)
        assert jwt_service.verify_token(response.token).user_id == str(user.id)

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "email,password",
        [
            ("alice@example.com", "wrong-password"),
            ("nobody@example.com", DEFAULT_PASSWORD),
            ("not-an-email", DEFAULT_PASSWORD),
        ],
    )
    async def test_login_failures_share_one_error(self, unit_env, email, password):
        # Arrange
        usecase = await unit_env.get(LoginUseCase)
        user_repo = await unit_env.get(UserRepository)
        await user_repo.save(make_user("alice"))

        # Act & Assert
        with pytest.raises(InvalidCredentialsError) as exc_info:
            await usecase.execute(LoginRequest(email=email, password=password))

        assert str(exc_info.value) == "Invalid email or password"

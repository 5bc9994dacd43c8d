"""Unit tests for GetUserProfileUseCase."""

from uuid import uuid4

import pytest

from inkwell.application.usecase.user import (
    GetUserProfileRequest,
    GetUserProfileUseCase,
)
from inkwell.domain.error import UnauthenticatedError
from inkwell.domain.repository import UserRepository
from inkwell.domain.service import PostService
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestGetUserProfileUseCase:
    @pytest.mark.asyncio
    async def test_shows_only_own_posts_in_creation_order(self, unit_env):
        # Arrange
        usecase = await unit_env.get(GetUserProfileUseCase)
        post_service = await unit_env.get(PostService)
        user_repo = await unit_env.get(UserRepository)
        alice = await user_repo.save(make_user("alice"))
        bob = await user_repo.save(make_user("bob"))
        first = await post_service.create_post(alice.id, "First", "Body")
        await post_service.create_post(bob.id, "Not mine", "Body")
        second = await post_service.create_post(alice.id, "Second", "Body")

        # Act
        response = await usecase.execute(GetUserProfileRequest(user_id=str(alice.id)))

        # Assert
        assert response.user.post_count == 2
        assert [p.post_id for p in response.posts] == [str(first.id), str(second.id)]
        assert all(p.is_owner for p in response.posts)

    @pytest.mark.asyncio
    async def test_unknown_user_is_unauthenticated(self, unit_env):
        usecase = await unit_env.get(GetUserProfileUseCase)

        with pytest.raises(UnauthenticatedError):
            await usecase.execute(GetUserProfileRequest(user_id=str(uuid4())))

"""Unit tests for UserService."""

from uuid import uuid4

import pytest

from inkwell.domain.error import NotFoundError
from inkwell.domain.repository import UserRepository
from inkwell.domain.service import UserService
from inkwell.domain.value import UserId
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestGetById:
    @pytest.mark.asyncio
    async def test_returns_user(self, unit_env):
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.save(make_user("alice"))

        assert await user_service.get_by_id(user.id) == user

    @pytest.mark.asyncio
    async def test_missing_user_raises(self, unit_env):
        user_service = await unit_env.get(UserService)

        with pytest.raises(NotFoundError):
            await user_service.get_by_id(UserId(uuid4()))


class TestGetUsersByIds:
    @pytest.mark.asyncio
    async def test_maps_found_users_and_ignores_duplicates(self, unit_env):
        # Arrange
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        alice = await user_repo.save(make_user("alice"))
        bob = await user_repo.save(make_user("bob"))

        # Act
        users = await user_service.get_users_by_ids(
            [alice.id, bob.id, alice.id, UserId(uuid4())]
        )

        # Assert
        assert users == {alice.id: alice, bob.id: bob}

    @pytest.mark.asyncio
    async def test_empty_input(self, unit_env):
        user_service = await unit_env.get(UserService)

        assert await user_service.get_users_by_ids([]) == {}

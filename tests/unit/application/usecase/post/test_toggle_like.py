"""Unit tests for ToggleLikeUseCase."""

from uuid import uuid4

import pytest

from inkwell.application.usecase.post import ToggleLikeRequest, ToggleLikeUseCase
from inkwell.domain.error import NotFoundError, UnauthenticatedError
from inkwell.domain.repository import PostRepository, TransactionManager, UserRepository
from inkwell.domain.service import PostService
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestToggleLikeUseCase:
    @pytest.mark.asyncio
    async def test_like_then_unlike(self, unit_env):
        # Arrange
        usecase = await unit_env.get(ToggleLikeUseCase)
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        user_repo = await unit_env.get(UserRepository)
        tx = await unit_env.get(TransactionManager)
        alice = await user_repo.save(make_user("alice"))
        bob = await user_repo.save(make_user("bob"))
        post = await post_service.create_post(alice.id, "Title", "Body")
        request = ToggleLikeRequest(post_id=str(post.id), user_id=str(bob.id))

        # Act
        first = await usecase.execute(request)
        second = await usecase.execute(request)

        # Assert
        assert first.liked is True
        assert second.liked is False
        assert (await post_repo.find_by_id(post.id)).like_count == 0
        assert tx.commits == 2

    @pytest.mark.asyncio
    async def test_author_may_like_own_post(self, unit_env):
        usecase = await unit_env.get(ToggleLikeUseCase)
        post_service = await unit_env.get(PostService)
        user_repo = await unit_env.get(UserRepository)
        alice = await user_repo.save(make_user("alice"))
        post = await post_service.create_post(alice.id, "Title", "Body")

        response = await usecase.execute(
            ToggleLikeRequest(post_id=str(post.id), user_id=str(alice.id))
        )

        assert response.liked is True

    @pytest.mark.asyncio
    async def test_missing_post(self, unit_env):
        usecase = await unit_env.get(ToggleLikeUseCase)
        user_repo = await unit_env.get(UserRepository)
        alice = await user_repo.save(make_user("alice"))

        with pytest.raises(NotFoundError):
            await usecase.execute(
                ToggleLikeRequest(post_id=str(uuid4()), user_id=str(alice.id))
            )

    @pytest.mark.asyncio
    async def test_deleted_session_user_is_unauthenticated(self, unit_env):
        """A valid token for a user that no longer exists changes nothing."""
        # Arrange
        usecase = await unit_env.get(ToggleLikeUseCase)
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        user_repo = await unit_env.get(UserRepository)
        tx = await unit_env.get(TransactionManager)
        alice = await user_repo.save(make_user("alice"))
        post = await post_service.create_post(alice.id, "Title", "Body")

        # Act & Assert
        with pytest.raises(UnauthenticatedError):
            await usecase.execute(
                ToggleLikeRequest(post_id=str(post.id), user_id=str(uuid4()))
            )

        assert (await post_repo.find_by_id(post.id)).likes == frozenset()
        assert tx.commits == 0

"""Integration tests for post use cases against a real database.

Each step runs in its own request scope, as separate HTTP requests would,
so only committed data is visible to the next step.

Requires a migrated database at DATABASE__URL (``alembic upgrade head``).
"""

import asyncio
from uuid import UUID

import pytest
import pytest_asyncio
from dishka import AsyncContainer
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from inkwell.application.usecase.auth import RegisterRequest, RegisterUseCase
from inkwell.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostUseCase,
    ToggleLikeRequest,
    ToggleLikeUseCase,
)
from inkwell.domain.repository import PostRepository, TransactionManager, UserRepository
from inkwell.domain.service import PostService, UserService
from inkwell.domain.value import PostId, UserId
from inkwell.persistence.repository import PostgresUserRepository
from tests.di import build_test_container

pytestmark = pytest.mark.integration


class _OwnedPostsUnavailable(PostgresUserRepository):
    """User repository whose owned-posts writes always fail."""

    async def append_post(self, user_id, post_id):
        raise RuntimeError("owned posts unavailable")

    async def remove_post(self, user_id, post_id):
        raise RuntimeError("owned posts unavailable")


@pytest_asyncio.fixture
async def app_container():
    """Container with real persistence and empty tables."""
    container = build_test_container(unmock={"persistence"})

    async with container() as scope:
        session = await scope.get(AsyncSession)
        await session.execute(
            text("TRUNCATE TABLE post_likes, user_posts, posts, users CASCADE")
        )
        await session.commit()

    yield container

    await container.close()


async def _register(container: AsyncContainer, username: str) -> UserId:
    async with container() as scope:
        usecase = await scope.get(RegisterUseCase)
        response = await usecase.execute(
            RegisterRequest(
                username=username,
                email=f"{username}@example.com",
                password="secret123",
                name=username.title(),
            )
        )
    return UserId(UUID(response.user_id))


async def _create_post(container: AsyncContainer, author_id: UserId) -> PostId:
    async with container() as scope:
        usecase = await scope.get(CreatePostUseCase)
        response = await usecase.execute(
            CreatePostRequest(author_id=str(author_id), title="Title", content="Body")
        )
    return PostId(UUID(response.post_id))


async def _usecase_with_failing_owned_posts(scope, usecase_class):
    """Build a post use case whose owned-posts step raises."""
    session = await scope.get(AsyncSession)
    post_service = PostService(
        post_repository=await scope.get(PostRepository),
        user_repository=_OwnedPostsUnavailable(session),
    )
    transaction_manager = await scope.get(TransactionManager)
    if usecase_class is CreatePostUseCase:
        return CreatePostUseCase(
            post_service, await scope.get(UserService), transaction_manager
        )
    return DeletePostUseCase(post_service, transaction_manager)


class TestCreateAndDeleteAreAllOrNothing:
    @pytest.mark.asyncio
    async def test_failed_owned_posts_append_leaves_no_post(self, app_container):
        # Arrange
        alice_id = await _register(app_container, "alice")

        # Act
        async with app_container() as scope:
            usecase = await _usecase_with_failing_owned_posts(scope, CreatePostUseCase)
            with pytest.raises(RuntimeError):
                await usecase.execute(
                    CreatePostRequest(author_id=str(alice_id), title="Lost", content="Body")
                )

        # Assert
        async with app_container() as scope:
            post_repo = await scope.get(PostRepository)
            user_repo = await scope.get(UserRepository)
            assert await post_repo.find_all() == []
            assert (await user_repo.find_by_id(alice_id)).post_ids == []

    @pytest.mark.asyncio
    async def test_failed_owned_posts_removal_keeps_post(self, app_container):
        # Arrange
        alice_id = await _register(app_container, "alice")
        post_id = await _create_post(app_container, alice_id)

        # Act
        async with app_container() as scope:
            usecase = await _usecase_with_failing_owned_posts(scope, DeletePostUseCase)
            with pytest.raises(RuntimeError):
                await usecase.execute(
                    DeletePostRequest(post_id=str(post_id), user_id=str(alice_id))
                )

        # Assert
        async with app_container() as scope:
            post_repo = await scope.get(PostRepository)
            user_repo = await scope.get(UserRepository)
            assert await post_repo.find_by_id(post_id) is not None
            assert (await user_repo.find_by_id(alice_id)).post_ids == [post_id]


class TestConcurrentLikeToggles:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("initially_liked", [False, True])
    async def test_two_simultaneous_toggles_cancel_out(
        self, app_container, initially_liked
    ):
        """Two toggles racing on separate sessions leave the likes unchanged."""
        # Arrange
        alice_id = await _register(app_container, "alice")
        bob_id = await _register(app_container, "bob")
        post_id = await _create_post(app_container, alice_id)
        request = ToggleLikeRequest(post_id=str(post_id), user_id=str(bob_id))

        async def toggle():
            async with app_container() as scope:
                usecase = await scope.get(ToggleLikeUseCase)
                return await usecase.execute(request)

        if initially_liked:
            await toggle()

        # Act
        results = await asyncio.gather(toggle(), toggle())

        # Assert
        assert sorted(r.liked for r in results) == [False, True]
        async with app_container() as scope:
            post = await (await scope.get(PostRepository)).find_by_id(post_id)
            expected = frozenset({bob_id}) if initially_liked else frozenset()
            assert post.likes == expected

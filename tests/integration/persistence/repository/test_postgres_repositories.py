"""Integration tests for the PostgreSQL repositories.

Requires a migrated database at DATABASE__URL (``alembic upgrade head``).
Nothing is committed: each test's writes are rolled back when its request
scope closes.
"""

from datetime import timedelta
from uuid import uuid4

import pytest

from inkwell.domain.error import ConflictError, NotFoundError
from inkwell.domain.model.common import utc_now
from inkwell.domain.repository import PostRepository, UserRepository
from inkwell.domain.value import Email, PostId, Username
from tests.conftest import make_post, make_user
from tests.harness import create_env_fixture

pytestmark = pytest.mark.integration

# Integration test fixture
integration_env = create_env_fixture(unmock={"persistence"})


def _unique(prefix: str) -> str:
    return f"{prefix}{uuid4().hex[:8]}"


class TestUserRepositoryIntegration:
    @pytest.mark.asyncio
    async def test_save_and_find(self, integration_env):
        # Arrange
        user_repo = await integration_env.get(UserRepository)
        user = make_user(_unique("alice"))

        # Act
        await user_repo.save(user)

        # Assert
        found = await user_repo.find_by_email(user.email)
        assert found.id == user.id
        assert found.username == user.username
        assert found.password_hash == user.password_hash
        assert found.post_ids == []
        assert await user_repo.find_by_username_or_email(
            user.username, Email("nobody@example.com")
        ) == found

    @pytest.mark.asyncio
    async def test_duplicate_username_conflicts(self, integration_env):
        # Arrange
        user_repo = await integration_env.get(UserRepository)
        name = _unique("bob")
        await user_repo.save(make_user(name))

        # Act & Assert
        with pytest.raises(ConflictError):
            await user_repo.save(make_user(name, email=f"{_unique('x')}@example.com"))

        # The session is still usable after the failed insert
        assert await user_repo.find_by_username_or_email(
            Username(name), Email("nobody@example.com")
        ) is not None

    @pytest.mark.asyncio
    async def test_owned_posts_keep_insertion_order(self, integration_env):
        # Arrange
        user_repo = await integration_env.get(UserRepository)
        post_repo = await integration_env.get(PostRepository)
        user = await user_repo.save(make_user(_unique("carol")))
        posts = [await post_repo.save(make_post(user.id, title=f"P{i}")) for i in range(3)]

        # Act
        for post in posts:
            await user_repo.append_post(user.id, post.id)
        await user_repo.append_post(user.id, posts[0].id)
        await user_repo.remove_post(user.id, posts[1].id)

        # Assert
        found = await user_repo.find_by_id(user.id)
        assert found.post_ids == [posts[0].id, posts[2].id]


class TestPostRepositoryIntegration:
    @pytest.mark.asyncio
    async def test_conditional_update_and_delete(self, integration_env):
        # Arrange
        user_repo = await integration_env.get(UserRepository)
        post_repo = await integration_env.get(PostRepository)
        author = await user_repo.save(make_user(_unique("dave")))
        other = await user_repo.save(make_user(_unique("erin")))
        post = await post_repo.save(make_post(author.id))
        later = utc_now() + timedelta(seconds=1)

        # Act & Assert
        assert await post_repo.update(post.id, other.id, "X", "X", later) is None
        updated = await post_repo.update(post.id, author.id, "New", "Body", later)
        assert updated.title == "New"
        assert updated.updated_at == later

        assert await post_repo.delete(post.id, other.id) is False
        assert await post_repo.delete(post.id, author.id) is True
        assert await post_repo.find_by_id(post.id) is None

    @pytest.mark.asyncio
    async def test_toggle_like(self, integration_env):
        # Arrange
        user_repo = await integration_env.get(UserRepository)
        post_repo = await integration_env.get(PostRepository)
        author = await user_repo.save(make_user(_unique("fay")))
        post = await post_repo.save(make_post(author.id))

        # Act & Assert
        assert await post_repo.toggle_like(post.id, author.id) is True
        assert (await post_repo.find_by_id(post.id)).likes == frozenset({author.id})
        assert await post_repo.toggle_like(post.id, author.id) is False
        assert (await post_repo.find_by_id(post.id)).likes == frozenset()

    @pytest.mark.asyncio
    async def test_toggle_like_on_missing_post(self, integration_env):
        user_repo = await integration_env.get(UserRepository)
        post_repo = await integration_env.get(PostRepository)
        user = await user_repo.save(make_user(_unique("gus")))

        with pytest.raises(NotFoundError):
            await post_repo.toggle_like(PostId(uuid4()), user.id)

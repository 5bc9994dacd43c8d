"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, Iterable
from uuid import UUID

from inkwell.domain.model import Post, User
from inkwell.domain.value import DisplayName, Email, PostId, UserId, Username


def _as_uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any], post_ids: Iterable[UUID] = ()) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict
        post_ids: Owned post IDs from user_posts, already in position order

    Returns:
        User domain model
    """
    return User(
        id=UserId(_as_uuid(row["id"])),
        username=Username(row["username"]),
        email=Email(row["email"]),
        password_hash=row["password_hash"],
        name=DisplayName(row["name"]),
        post_ids=[PostId(_as_uuid(post_id)) for post_id in post_ids],
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to a users-table dict.

    ``post_ids`` live in user_posts and are excluded.
    """
    return {
        "id": user.id,
        "username": user.username.root,
        "email": user.email.root,
        "password_hash": user.password_hash,
        "name": user.name.root,
        "created_at": user.created_at,
    }


def row_to_post(row: Dict[str, Any], likes: Iterable[UUID] = ()) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict
        likes: IDs of users who like the post (from post_likes)

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(_as_uuid(row["id"])),
        title=row["title"],
        content=row["content"],
        author_id=UserId(_as_uuid(row["author_id"])),
        likes=frozenset(UserId(_as_uuid(user_id)) for user_id in likes),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to a posts-table dict.

    Likes live in post_likes and are excluded.
    """
    return post.model_dump(exclude={"likes"})

"""Test configuration and fixtures."""

import os
from uuid import uuid4

# Must be set before any Settings() is built
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("AUTH__BCRYPT_ROUNDS", "4")

import logfire  # noqa: E402

from inkwell.domain.model import Post, User  # noqa: E402
from inkwell.domain.value import (  # noqa: E402
    DisplayName,
    Email,
    PostId,
    UserId,
    Username,
)
from inkwell.util.password import hash_password  # noqa: E402

logfire.configure(send_to_logfire=False, console=False)

DEFAULT_PASSWORD = "secret123"


def make_user(
    username: str = "alice",
    email: str | None = None,
    password: str = DEFAULT_PASSWORD,
    name: str = "Alice",
) -> User:
    """Helper to build a valid user with a real bcrypt hash."""
    return User(
        id=UserId(uuid4()),
        username=Username(username),
        email=Email(email or f"{username}@example.com"),
        password_hash=hash_password(password, rounds=4),
        name=DisplayName(name),
    )


def make_post(
    author_id: UserId, title: str = "Hello", content: str = "First post"
) -> Post:
    """Helper to build a valid post."""
    return Post(
        id=PostId(uuid4()),
        title=title,
        content=content,
        author_id=author_id,
    )

"""Response items shared by the read use cases."""

from datetime import datetime

from pydantic import BaseModel

from inkwell.domain.model import Post, User
from inkwell.domain.value import UserId


class UserInfo(BaseModel):
    """A user as shown on pages (never includes the password hash)."""

    user_id: str
    username: str
    email: str
    name: str
    post_count: int
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserInfo":
        return cls(
            user_id=str(user.id),
            username=user.username.root,
            email=user.email.root,
            name=user.name.root,
            post_count=len(user.post_ids),
            created_at=user.created_at,
        )


class PostInfo(BaseModel):
    """A post as seen by a particular viewer."""

    post_id: str
    title: str
    content: str
    author_id: str
    author_username: str | None
    author_name: str | None
    like_count: int
    liked: bool
    is_owner: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_post(
        cls, post: Post, viewer_id: UserId, author: User | None = None
    ) -> "PostInfo":
        return cls(
            post_id=str(post.id),
            title=post.title,
            content=post.content,
            author_id=str(post.author_id),
            author_username=author.username.root if author else None,
            author_name=author.name.root if author else None,
            like_count=post.like_count,
            liked=post.is_liked_by(viewer_id),
            is_owner=post.author_id == viewer_id,
            created_at=post.created_at,
            updated_at=post.updated_at,
        )

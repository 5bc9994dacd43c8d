"""User aggregate root.

Users register with a username, email and password, and own the posts
they write.
"""

from datetime import datetime

from pydantic import Field, field_validator

from inkwell.domain.model.common import DomainModel, utc_now
from inkwell.domain.value import DisplayName, Email, PostId, UserId, Username


class User(DomainModel):
    """User aggregate root.

    ``post_ids`` is the owned-posts set in insertion order. It must contain
    exactly the ids of the posts this user has created and not deleted.
    """

    id: UserId
    username: Username
    email: Email
    password_hash: str = Field(min_length=1)
    name: DisplayName
    post_ids: list[PostId] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=utc_now)

    @field_validator("post_ids")
    @classmethod
    def validate_unique_posts(cls, v: list[PostId]) -> list[PostId]:
        """Owned posts form a set."""
        if len(set(v)) != len(v):
            raise ValueError("Duplicate post in owned posts")
        return v

    def owns(self, post_id: PostId) -> bool:
        return post_id in self.post_ids

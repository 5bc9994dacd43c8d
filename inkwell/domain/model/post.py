"""Post aggregate root."""

from datetime import datetime

from pydantic import Field

from inkwell.domain.model.common import DomainModel, utc_now
from inkwell.domain.value import PostId, UserId


class Post(DomainModel):
    """Post aggregate root.

    ``updated_at`` starts equal to ``created_at`` and is refreshed on every
    edit; listings are ordered by it. ``author_id`` never changes after
    creation.
    """

    id: PostId
    title: str = Field(min_length=1, max_length=100)
    content: str = Field(min_length=1)
    author_id: UserId
    likes: frozenset[UserId] = Field(default_factory=frozenset)
    created_at: datetime = Field(default_factory=utc_now)
    # Defaults to the (already validated) creation time
    updated_at: datetime = Field(default_factory=lambda data: data["created_at"])

    @property
    def like_count(self) -> int:
        return len(self.likes)

    def is_liked_by(self, user_id: UserId) -> bool:
        return user_id in self.likes

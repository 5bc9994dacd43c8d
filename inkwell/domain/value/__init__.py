"""Domain value objects for Inkwell."""

from inkwell.domain.value.identifiers import PostId, UserId
from inkwell.domain.value.types import DisplayName, Email, Username

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    # Types
    "Username",
    "Email",
    "DisplayName",
]

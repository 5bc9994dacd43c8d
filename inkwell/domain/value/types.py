"""Domain value objects for Inkwell.

Each value normalizes its input (trimming, lowercasing) before validating,
so two spellings of the same username or email compare equal.
"""

import re

from pydantic import field_validator

from inkwell.domain.value.common import RootValueObject

EMAIL_PATTERN = re.compile(r".+@.+\..+")


class Username(RootValueObject[str]):
    """Unique login handle.

    Trimmed and lowercased, 3-30 characters.
    """

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        v = v.strip().lower()
        if len(v) < 3:
            raise ValueError("Username must be at least 3 characters long")
        if len(v) > 30:
            raise ValueError("Username cannot exceed 30 characters")
        return v


class Email(RootValueObject[str]):
    """Email address, trimmed and lowercased."""

    @field_validator("root")
    @classmethod
    def validate_email(cls, v: str) -> str:
        v = v.strip().lower()
        if not EMAIL_PATTERN.fullmatch(v):
            raise ValueError("Please fill a valid email address")
        return v


class DisplayName(RootValueObject[str]):
    """Name shown next to a user's posts, 1-50 characters after trimming."""

    @field_validator("root")
    @classmethod
    def validate_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Name is required")
        if len(v) > 50:
            raise ValueError("Name cannot exceed 50 characters")
        return v

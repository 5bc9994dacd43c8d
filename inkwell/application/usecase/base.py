"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any

from pydantic import ValidationError as PydanticValidationError


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


def first_error_message(error: PydanticValidationError) -> str:
    """Human-readable message of the first error in a pydantic ValidationError."""
    errors = error.errors()
    if not errors:
        return str(error)

    message = errors[0]["msg"]
    # Errors raised from our own validators come back as "Value error, <msg>"
    return message.removeprefix("Value error, ")

"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class UnauthenticatedError(DomainError):
    """Raised when a request carries no valid session."""

    def __init__(self, reason: str = "Authentication required"):
        self.reason = reason
        super().__init__(reason)


class InvalidCredentialsError(DomainError):
    """Raised when a login email/password pair does not match."""

    def __init__(self) -> None:
        super().__init__("Invalid email or password")


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to change content they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(
            f"User {user_id} is not authorized to modify {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ConflictError(DomainError):
    """Raised when a unique field (username, email) is already taken."""

    pass

"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold business logic that spans repositories, such as
    keeping a post and its author's owned-posts set in step.
    """

    pass

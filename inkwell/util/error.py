"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""

    pass


class ConfigurationError(UtilError, ValueError):
    """Configuration error.

    Subclasses ValueError so pydantic reports it as a settings validation
    failure.
    """

    pass

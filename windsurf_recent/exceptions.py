"""
Custom exceptions for the application.
"""


class BaseAppError(Exception):
    """Base exception class for application errors."""

    pass


class StorageError(BaseAppError):
    """Exception raised when the Windsurf storage file cannot be read or parsed."""

    pass


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass


class LaunchError(BaseAppError):
    """Exception raised when a project cannot be opened in Windsurf."""

    pass

"""
Custom exceptions for the application.
"""


class BaseAppError(Exception):
    """Base exception class for application errors."""

    pass


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass


class ArchiveError(BaseAppError):
    """Exception raised when the archive cannot be opened or read."""

    pass


class EntryNotFoundError(ArchiveError):
    """Exception raised when a path has no matching entry in the archive."""

    pass


class EntryDecodeError(ArchiveError):
    """Exception raised when an entry's content is not valid text."""

    pass


class SessionStoreError(BaseAppError):
    """Exception raised when the session log cannot be persisted."""

    pass

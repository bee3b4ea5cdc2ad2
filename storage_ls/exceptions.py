"""
Custom exceptions for the application.
"""


class BaseAppError(Exception):
    """Base exception class for application errors."""

    pass


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass


class InvalidDiskError(BaseAppError):
    """Exception raised when a disk name is not configured."""

    def __init__(self, disk: str):
        super().__init__(f'Selected disk "{disk}" does not exist')
        self.disk = disk


class BackendListingError(BaseAppError):
    """Exception raised when a storage backend cannot list a directory."""

    pass


class PathNotFoundError(BackendListingError):
    """Exception raised when a directory does not exist on the disk."""

    pass


class MetadataFetchError(BaseAppError):
    """Exception raised when a follow-up size or timestamp lookup fails."""

    pass

"""
Exception classes for panaddr.

This module defines custom exceptions used throughout the panaddr library.
Entry-level problems never raise; they become skip comments in the result.
"""

class PANAddrError(Exception):
    """
    Base exception class for all panaddr errors.

    All custom exceptions in the library should inherit from this class.
    """
    pass

class ConfigError(PANAddrError):
    """Exception raised when a profile cannot be loaded or is invalid."""
    pass

class ValidationError(PANAddrError):
    """Exception raised when a request fails its precondition checks."""

    def __init__(self, message, field=None):
        """
        Initialize a ValidationError.

        Args:
            message: Error message
            field: Name of the request field that failed (optional)
        """
        super().__init__(message)
        self.field = field

class FileOperationError(PANAddrError):
    """Exception raised when reading entries or writing output fails."""
    pass

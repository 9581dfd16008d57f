"""
Common exception classes for host failover.

Only configuration problems are raised by this package itself. Failures
coming from the downstream executor are never wrapped in these classes:
they reach the caller exactly as they were raised.
"""

from __future__ import annotations


class HostFailoverError(Exception):
    """Base exception class for all host failover errors."""

    def __init__(self, message: str, details: dict | None = None):
        """Initialize the exception.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error details
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict:
        return {
            "error": {
                "message": self.message,
                "type": self.__class__.__name__,
                "details": self.details,
            }
        }


class ConfigurationError(HostFailoverError):
    """Raised when the failover configuration is missing or invalid."""

    def __init__(
        self,
        message: str = "Configuration error",
        details: dict | None = None,
    ):
        super().__init__(message, details)

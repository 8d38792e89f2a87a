"""Typed failures raised by the domain, application and infrastructure layers.

Lower layers raise these and never format user-facing responses; the
presentation layer translates them to HTTP statuses in one place.
"""

from typing import Any, Optional


class DirectoryError(Exception):
    """Base exception for all employee directory errors."""

    retryable: bool = False

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(DirectoryError):
    """Input violates a business rule; the caller can fix and resubmit."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class NotFoundError(DirectoryError):
    """Requested resource does not exist."""

    def __init__(self, resource: str, identifier: Any):
        super().__init__(f"{resource} {identifier} not found")
        self.resource = resource
        self.identifier = identifier


class RouteNotFoundError(DirectoryError):
    """No handler is registered for the request method and path."""

    def __init__(self, method: str, path: str):
        super().__init__(f"No route for {method} {path}")
        self.method = method
        self.path = path


class DecodeError(DirectoryError):
    """Request payload or parameters could not be decoded."""

    def __init__(self, message: str = "Malformed request", details: Optional[list] = None):
        super().__init__(message)
        self.details = details or []


class StorageError(DirectoryError):
    """Backing store failed; the operation may succeed if retried."""

    retryable = True

    def __init__(self, message: str, operation: Optional[str] = None):
        super().__init__(message)
        self.operation = operation

from typing import Any


class UsersAPIError(Exception):
    """Base exception for errors rendered to API clients"""

    status_code: int = 500

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ValidationError(UsersAPIError):
    """Raised when client input is malformed"""

    status_code = 400


class InternalError(UsersAPIError):
    """Raised when the store fails. Only the generic message reaches the client."""

    status_code = 500

    def __init__(self, details: dict[str, Any] | None = None):
        super().__init__("Internal server error", details)

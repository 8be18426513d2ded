"""
Custom exceptions for the AccessGrid client library.
"""


class AccessGridError(Exception):
    """Raised when an API call fails."""

    def __init__(self, message, status_code=None, response_body=None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response_body = response_body


class AuthenticationError(AccessGridError):
    """Raised when the service rejects the account credentials (HTTP 401)."""
    pass


class SigningError(Exception):
    """Raised when the payload signature cannot be computed."""
    pass


class ConfigurationError(ValueError):
    """Raised when client configuration is invalid."""
    pass

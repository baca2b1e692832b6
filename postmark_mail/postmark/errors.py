"""
Exception classes for the Postmark client.
"""

from typing import Optional


class PostmarkError(Exception):
    """Base exception for Postmark client failures."""
    pass


class ValidationError(PostmarkError, ValueError):
    """Raised before any request is sent when inputs break Postmark's rules."""

    def __init__(self, code: str, message: Optional[str] = None):
        self.code = code
        super().__init__(message or code)


class AuthenticationError(PostmarkError):
    """Raised when Postmark rejects the server token (HTTP 401)."""

    def __init__(self, message: str = 'authentication error'):
        super().__init__(message)


class ApiValidationError(PostmarkError):
    """Raised for a structured 422 response; carries Postmark's error code and message."""

    def __init__(self, error_code: Optional[int], message: str):
        self.error_code = error_code
        self.message = message
        super().__init__(f'api error code {error_code} ({message})')


class ServerError(PostmarkError):
    """Raised when Postmark answers with HTTP 500."""

    def __init__(self, message: str = 'Postmark server error'):
        super().__init__(message)


class UnknownError(PostmarkError):
    """Raised for any other unsuccessful status code."""

    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(
            f'Unknown error during request to Postmark server (status {status_code})'
        )


class MalformedResponseError(PostmarkError):
    """Raised when a successful response carries a body that is not JSON."""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f'Malformed response from Postmark (status {status_code})')

"""Postmark REST API client: request building, transport and response classification."""

from postmark_mail.postmark.client import PostmarkClient
from postmark_mail.postmark.errors import (
    PostmarkError,
    ValidationError,
    AuthenticationError,
    ApiValidationError,
    ServerError,
    UnknownError,
    MalformedResponseError,
)

__all__ = [
    'PostmarkClient',
    'PostmarkError',
    'ValidationError',
    'AuthenticationError',
    'ApiValidationError',
    'ServerError',
    'UnknownError',
    'MalformedResponseError',
]

"""
Response Classifier - turns Postmark HTTP responses into results or errors
"""

import json
from typing import Any, Union

from postmark_mail.postmark.errors import (
    ApiValidationError,
    AuthenticationError,
    MalformedResponseError,
    ServerError,
    UnknownError,
)


def _decode(body: Union[bytes, str, None]) -> Any:
    if isinstance(body, bytes):
        body = body.decode('utf-8')
    if not body:
        return None
    return json.loads(body)


def classify_response(status_code: int, body: Union[bytes, str, None]) -> Any:
    """
    Return the decoded JSON body of a successful response.

    Raises:
        MalformedResponseError: on a 2xx whose body is not valid JSON
        AuthenticationError: on 401
        ApiValidationError: on 422, with Postmark's ErrorCode and Message
        ServerError: on 500
        UnknownError: on any other non-2xx status
    """
    if 200 <= status_code < 300:
        try:
            return _decode(body)
        except ValueError:
            text = body.decode('utf-8', errors='replace') if isinstance(body, bytes) else body
            raise MalformedResponseError(status_code, text)

    if status_code == 401:
        raise AuthenticationError()

    if status_code == 422:
        try:
            error = _decode(body)
        except ValueError:
            error = None

        if not isinstance(error, dict):
            text = body.decode('utf-8', errors='replace') if isinstance(body, bytes) else body
            raise ApiValidationError(None, text or '')

        raise ApiValidationError(error.get('ErrorCode'), error.get('Message', ''))

    if status_code == 500:
        raise ServerError()

    raise UnknownError(status_code)

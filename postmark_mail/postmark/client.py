"""
Postmark API client

Wires the request builder, the HTTP transport and the response classifier
together. One client owns one transport handle, created on first use and
reused for every call.
"""

from typing import Optional, Any

from postmark_mail import config, logger
from postmark_mail.providers.email_adapter import EmailMessage
from postmark_mail.postmark import request_builder
from postmark_mail.postmark.request_builder import ApiRequest
from postmark_mail.postmark.response_classifier import classify_response
from postmark_mail.postmark.transport import HttpTransport, RequestsTransport


class PostmarkClient:
    """Synchronous client for the Postmark email and bounce APIs."""

    def __init__(
        self,
        api_key: str,
        transport: Optional[HttpTransport] = None,
        base_uri: str = config.POSTMARK_API_URI
    ):
        if not api_key:
            raise ValueError('Missing Postmark API key')

        self.api_key = api_key
        self.base_uri = base_uri
        self._transport = transport

    @property
    def transport(self) -> HttpTransport:
        if self._transport is None:
            self._transport = RequestsTransport(headers={
                'Accept': 'application/json',
                'X-Postmark-Server-Token': self.api_key
            })
        return self._transport

    def _uri(self, path: str) -> str:
        return self.base_uri.rstrip('/') + '/' + path.lstrip('/')

    def _execute(self, api_request: ApiRequest) -> Any:
        logger.debug(
            'Sending request to Postmark',
            method=api_request.method,
            path=api_request.path
        )

        response = self.transport.request(
            api_request.method,
            self._uri(api_request.path),
            body=api_request.body,
            params=api_request.params
        )

        logger.debug(
            'Postmark responded',
            method=api_request.method,
            path=api_request.path,
            status_code=response.status_code
        )

        return classify_response(response.status_code, response.body)

    def send_email(self, message: EmailMessage) -> Any:
        """
        Send a message through Postmark.

        Returns:
            Decoded Postmark response (contains MessageID, SubmittedAt, ...)
        """
        return self._execute(request_builder.build_send_email(message))

    def get_bounces(
        self,
        count: int,
        offset: int,
        type: Optional[str] = None,
        inactive: Optional[bool] = None,
        email_filter: Optional[str] = None
    ) -> Any:
        """Get a page of bounces matching the given filters."""
        return self._execute(request_builder.build_bounce_query(
            count, offset, type=type, inactive=inactive, email_filter=email_filter
        ))

    def get_bounce(self, bounce_id) -> Any:
        return self._execute(request_builder.build_get_bounce(bounce_id))

    def get_bounce_dump(self, bounce_id) -> Optional[str]:
        """Get the raw source of a bounce as Postmark accepted it."""
        result = self._execute(request_builder.build_bounce_dump(bounce_id))
        if not isinstance(result, dict):
            return None
        return result.get('Body')

    def get_bounce_tags(self) -> Any:
        return self._execute(request_builder.build_bounce_tags())

    def activate_bounce(self, bounce_id) -> Any:
        return self._execute(request_builder.build_activate_bounce(bounce_id))

    def get_delivery_stats(self) -> Any:
        """Get a summary of inactive emails and bounces by type."""
        return self._execute(request_builder.build_delivery_stats())

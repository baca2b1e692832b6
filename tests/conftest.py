"""Shared fixtures for the Postmark client tests."""

import json

import pytest

from postmark_mail.postmark.transport import HttpTransport, HttpResponse
from postmark_mail.providers.email_adapter import EmailMessage


class FakeTransport(HttpTransport):
    """In-memory transport recording every request and replaying queued responses."""

    def __init__(self, responses=None):
        self.responses = list(responses or [])
        self.calls = []

    def queue(self, status_code, payload=None, raw=None):
        if raw is None:
            raw = json.dumps(payload).encode('utf-8') if payload is not None else b''
        self.responses.append(HttpResponse(status_code=status_code, body=raw))

    def request(self, method, uri, body=None, params=None):
        self.calls.append({
            'method': method,
            'uri': uri,
            'body': body,
            'params': params,
        })
        return self.responses.pop(0)


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def message():
    return EmailMessage(
        subject='Welcome',
        body='Hello there',
        html_body='<p>Hello there</p>',
        to=['Jane Doe <jane@example.com>', 'bob@example.com'],
        from_email=['Sender <sender@example.com>'],
    )

"""
HTTP transport used by the Postmark client.

The client only depends on HttpTransport; RequestsTransport is the default
implementation on top of a requests session.
"""

from abc import ABC, abstractmethod
from typing import Optional, Dict, Any, NamedTuple

import requests

from postmark_mail import config


class HttpResponse(NamedTuple):
    """Status code and raw body of an HTTP exchange."""
    status_code: int
    body: bytes


class HttpTransport(ABC):
    """Performs a single HTTP exchange. Retries, timeouts and TLS live here."""

    @abstractmethod
    def request(
        self,
        method: str,
        uri: str,
        body: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None
    ) -> HttpResponse:
        pass


class RequestsTransport(HttpTransport):
    """requests-based transport holding a reusable session with fixed headers."""

    def __init__(self, headers: Dict[str, str], timeout: int = config.POSTMARK_TIMEOUT_SECONDS):
        self.headers = dict(headers)
        self.timeout = timeout
        self._session: Optional[requests.Session] = None

    @property
    def session(self) -> requests.Session:
        if self._session is None:
            self._session = requests.Session()
            self._session.headers.update(self.headers)
        return self._session

    def request(
        self,
        method: str,
        uri: str,
        body: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None
    ) -> HttpResponse:
        response = self.session.request(
            method,
            uri,
            json=body,
            params=params,
            timeout=self.timeout
        )
        return HttpResponse(status_code=response.status_code, body=response.content)

    def close(self):
        if self._session is not None:
            self._session.close()
            self._session = None

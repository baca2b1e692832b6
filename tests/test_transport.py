"""Tests for the requests-based transport."""

from unittest.mock import MagicMock, patch

from postmark_mail.postmark.transport import RequestsTransport


class TestRequestsTransport:

    @patch('postmark_mail.postmark.transport.requests.Session')
    def test_session_created_once_with_headers(self, mock_session_cls):
        session = MagicMock()
        session.headers = {}
        session.request.return_value = MagicMock(status_code=200, content=b'{}')
        mock_session_cls.return_value = session

        transport = RequestsTransport(headers={'X-Postmark-Server-Token': 'abc'}, timeout=5)
        transport.request('GET', 'http://api.postmarkapp.com/bounces/tags')
        transport.request('GET', 'http://api.postmarkapp.com/deliverystats')

        mock_session_cls.assert_called_once()
        assert session.headers == {'X-Postmark-Server-Token': 'abc'}
        assert session.request.call_count == 2

    @patch('postmark_mail.postmark.transport.requests.Session')
    def test_request_passes_body_params_and_timeout(self, mock_session_cls):
        session = MagicMock()
        session.headers = {}
        session.request.return_value = MagicMock(status_code=422, content=b'{"ErrorCode":300}')
        mock_session_cls.return_value = session

        transport = RequestsTransport(headers={}, timeout=7)
        response = transport.request(
            'POST', 'http://api.postmarkapp.com/email',
            body={'Subject': 'Hi'}, params=None
        )

        session.request.assert_called_once_with(
            'POST',
            'http://api.postmarkapp.com/email',
            json={'Subject': 'Hi'},
            params=None,
            timeout=7
        )
        assert response.status_code == 422
        assert response.body == b'{"ErrorCode":300}'

    @patch('postmark_mail.postmark.transport.requests.Session')
    def test_close_discards_session(self, mock_session_cls):
        session = MagicMock()
        session.headers = {}
        mock_session_cls.return_value = session

        transport = RequestsTransport(headers={})
        transport.session
        transport.close()

        session.close.assert_called_once()
        assert transport._session is None

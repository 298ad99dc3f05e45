"""
Unit tests for the requests-based transport.
"""

from unittest.mock import MagicMock

import pytest
import requests

from utils.errors import TransportError
from utils.transport import RequestsTransport, TransportResult


class TestRequestsTransport:
    """HTTP POST through a requests session."""

    @pytest.fixture
    def session(self):
        """Mock requests.Session."""
        session = MagicMock(spec=requests.Session)
        response = MagicMock()
        response.status_code = 200
        response.content = b'{"value": "ok"}'
        session.post.return_value = response
        return session

    def test_send_posts_body_and_headers(self, session):
        """Test the POST call made for a send."""
        transport = RequestsTransport(timeout=5, session=session)

        result = transport.send('https://example.test/create', b'{}', {'signature': 'sig'})

        session.post.assert_called_once_with(
            'https://example.test/create', data=b'{}', headers={'signature': 'sig'}, timeout=5
        )
        assert result.status_code == 200
        assert result.body == b'{"value": "ok"}'
        assert result.ok is True

    def test_error_status_is_returned(self, session):
        """Test that error statuses are returned, not raised."""
        session.post.return_value.status_code = 401
        transport = RequestsTransport(session=session)

        result = transport.send('https://example.test/create', b'{}', {})

        assert result.ok is False

    def test_request_exception_becomes_transport_error(self, session):
        """Test wrapping of requests exceptions."""
        failure = requests.ConnectionError("connection refused")
        session.post.side_effect = failure
        transport = RequestsTransport(session=session)

        with pytest.raises(TransportError) as exc_info:
            transport.send('https://example.test/create', b'{}', {})

        assert exc_info.value.cause is failure
        assert exc_info.value.code == 'TRANSPORT_ERROR'

    def test_close_closes_session(self, session):
        """Test that close() closes the session."""
        RequestsTransport(session=session).close()

        session.close.assert_called_once()


class TestTransportResult:
    """Result wrapper."""

    @pytest.mark.parametrize("status_code,ok", [(200, True), (201, True), (302, False), (500, False)])
    def test_ok(self, status_code, ok):
        """Test the ok flag for several status codes."""
        assert TransportResult(status_code).ok is ok

# transport.py

import logging

import requests

from utils.errors import TransportError


class TransportResult:
    def __init__(self, status_code, body=b''):
        self.status_code = status_code
        self.body = body

    @property
    def ok(self):
        return 200 <= self.status_code < 300

    def __repr__(self):
        return f"TransportResult(status_code={self.status_code})"


class RequestsTransport:
    def __init__(self, timeout=30, session=None):
        self.timeout = timeout
        self.session = session or requests.Session()

    def send(self, url, body, headers):
        try:
            response = self.session.post(url, data=body, headers=headers, timeout=self.timeout)
        except requests.RequestException as e:
            logging.error(f"Failed to send request to {url}: {e}")
            raise TransportError(f"Failed to send request to {url}: {e}", cause=e) from e

        return TransportResult(response.status_code, response.content)

    def close(self):
        self.session.close()

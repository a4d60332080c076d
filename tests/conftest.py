"""Pytest configuration and fixtures."""

import json

import aiohttp
import pytest

from krakenspot import Client, KrakenAuthorizer


class FakeContent:
    """Stands in for `aiohttp.StreamReader`."""

    def __init__(self, response):
        self._response = response

    async def read(self):
        return self._response._consume()

    async def iter_chunked(self, n):
        body = self._response._consume()

        for i in range(0, len(body), n):
            yield body[i:i + n]


class FakeResponse:
    """Stands in for `aiohttp.ClientResponse`. Reads fail once closed."""

    def __init__(self, status=200, body=b"", content_type="application/json"):
        self.status = status
        self.headers = {}
        self.close_calls = 0
        self.closed = False
        self.content = FakeContent(self)

        if content_type is not None:
            self.headers["Content-Type"] = content_type

        self._body = body

    def _consume(self):
        if self.closed:
            raise aiohttp.ClientConnectionError("Connection closed")
        return self._body

    async def read(self):
        return self._consume()

    def close(self):
        self.closed = True
        self.close_calls += 1


class FakeSession:
    """Records every request, and answers with the queued responses."""

    def __init__(self, *responses, error=None):
        self.calls = []
        self.closed = False
        self.error = error
        self.responses = list(responses)

    async def request(self, method, url, **kwargs):
        self.calls.append({"method": method, "url": url, **kwargs})

        if self.error is not None:
            raise self.error

        return self.responses.pop(0)

    async def close(self):
        self.closed = True


@pytest.fixture
def api_key():
    """Test API key."""
    return "test_api_key_123456"


@pytest.fixture
def api_secret():
    """Test API secret (base64 of 'testsecret')."""
    return "dGVzdHNlY3JldA=="


@pytest.fixture
def make_response():
    """Build a fake response, JSON encoding `payload` if given."""

    def _make(payload=None, *, status=200, body=b"", content_type="application/json"):
        if payload is not None:
            body = json.dumps(payload).encode()
        return FakeResponse(status, body, content_type)

    return _make


@pytest.fixture
def make_session():
    def _make(*responses, error=None):
        return FakeSession(*responses, error=error)

    return _make


@pytest.fixture
def make_client(api_key, api_secret, make_session):
    """Build a signing client over a fake session answering `responses`."""

    def _make(*responses, **kwargs):
        kwargs.setdefault("authorizer", KrakenAuthorizer(api_key, api_secret))
        return Client(session=make_session(*responses), **kwargs)

    return _make


@pytest.fixture
def envelope():
    """Wrap a result in a Kraken response envelope."""

    def _make(result=None, error=None):
        return {"error": error or [], "result": result}

    return _make

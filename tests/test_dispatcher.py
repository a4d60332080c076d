"""Tests for `Client.send_json` and `Client.send_stream`."""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest

from krakenspot import Client, Context, KrakenResponse, Request
from krakenspot.errors import (
    APIRequestError, ContextExpired, ResponseFormatError, ResponseParseError, TransportError,
    UnsupportedContentType
)


def time_request():
    return Request("GET", "https://api.kraken.com/0/public/Time")


def export_request():
    return Request(
        "POST",
        "https://api.kraken.com/0/private/RetrieveExport",
        body=b"nonce=1&id=TCJA",
        form={"nonce": ["1"], "id": ["TCJA"]}
    )


class TestSendJSON:

    @pytest.mark.asyncio
    async def test_parses_into_receiver(self, make_response, make_session, envelope):
        response = make_response(envelope({"unixtime": 1688669448}))
        session = make_session(response)
        client = Client(session=session)

        parsed = await client.send_json(time_request(), KrakenResponse)

        assert parsed.error == []
        assert parsed.result == {"unixtime": 1688669448}
        assert parsed.raw is response
        assert response.close_calls == 1
        assert session.calls[0]["method"] == "GET"
        assert session.calls[0]["url"] == "https://api.kraken.com/0/public/Time"
        assert "timeout" not in session.calls[0]

    @pytest.mark.asyncio
    async def test_content_type_parameters_ignored(self, make_response, make_session, envelope):
        response = make_response(envelope("ok"), content_type="Application/JSON; charset=utf-8")
        client = Client(session=make_session(response))

        parsed = await client.send_json(time_request(), KrakenResponse)

        assert parsed.result == "ok"

    @pytest.mark.asyncio
    async def test_envelope_errors_delivered_as_is(self, make_response, make_session, envelope):
        response = make_response(envelope(error=["EAPI:Invalid key"]))
        client = Client(session=make_session(response))

        parsed = await client.send_json(time_request(), KrakenResponse)

        assert parsed.error == ["EAPI:Invalid key"]
        assert parsed.result is None

    @pytest.mark.asyncio
    async def test_malformed_json_closes_body(self, make_response, make_session):
        response = make_response(body=b'{"error": [], "result": ')
        client = Client(session=make_session(response))

        with pytest.raises(ResponseParseError) as exc_info:
            await client.send_json(time_request(), KrakenResponse)

        assert exc_info.value.response is response
        assert exc_info.value.__cause__ is not None
        assert response.closed

        with pytest.raises(aiohttp.ClientConnectionError):
            await response.read()

    @pytest.mark.asyncio
    async def test_receiver_rejects_payload(self, make_response, make_session):
        response = make_response(["not", "an", "object"])
        client = Client(session=make_session(response))

        with pytest.raises(ResponseParseError):
            await client.send_json(time_request(), KrakenResponse)

        assert response.closed

    @pytest.mark.asyncio
    async def test_non_json_content_type(self, make_response, make_session):
        response = make_response(body=b"<html></html>", content_type="text/html")
        client = Client(session=make_session(response))

        with pytest.raises(UnsupportedContentType) as exc_info:
            await client.send_json(time_request(), KrakenResponse)

        assert exc_info.value.content_type == "text/html"
        assert exc_info.value.response is response
        assert response.close_calls == 1

    @pytest.mark.asyncio
    async def test_zip_is_not_json(self, make_response, make_session):
        response = make_response(body=b"PK\x03\x04", content_type="application/zip")
        client = Client(session=make_session(response))

        with pytest.raises(UnsupportedContentType):
            await client.send_json(export_request(), KrakenResponse)

        assert response.closed


class TestSendStream:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("content_type", ["application/zip", "application/octet-stream"])
    async def test_body_stays_open(self, make_response, make_session, content_type):
        response = make_response(body=b"PK\x03\x04data", content_type=content_type)
        client = Client(session=make_session(response))

        streamed = await client.send_stream(export_request())

        assert streamed is response
        assert not response.closed
        assert await streamed.read() == b"PK\x03\x04data"

    @pytest.mark.asyncio
    async def test_json_error_envelope(self, make_response, make_session, envelope):
        response = make_response(envelope(error=["EGeneral:Invalid arguments"]))
        client = Client(session=make_session(response))

        with pytest.raises(UnsupportedContentType) as exc_info:
            await client.send_stream(export_request())

        assert b"EGeneral:Invalid arguments" in exc_info.value.body
        assert response.close_calls == 1

    @pytest.mark.asyncio
    async def test_other_content_type(self, make_response, make_session):
        response = make_response(body=b"hello", content_type="text/plain")
        client = Client(session=make_session(response))

        with pytest.raises(UnsupportedContentType) as exc_info:
            await client.send_stream(export_request())

        assert exc_info.value.body is None
        assert response.closed


class TestDispatch:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("send", ["send_json", "send_stream"])
    async def test_expired_context_sends_nothing(self, make_response, make_session, send):
        session = make_session(make_response({}))
        limiter = MagicMock()
        limiter.acquire = AsyncMock()
        client = Client(session=session, rate_limiter=limiter)
        ctx = Context()
        ctx.cancel()

        args = (KrakenResponse,) if send == "send_json" else ()

        with pytest.raises(ContextExpired):
            await getattr(client, send)(time_request(), *args, ctx=ctx)

        assert session.calls == []
        limiter.acquire.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_deadline_exceeded_sends_nothing(self, make_response, make_session):
        session = make_session(make_response({}))
        client = Client(session=session)

        with pytest.raises(ContextExpired):
            await client.send_json(time_request(), KrakenResponse, ctx=Context(timeout=0))

        assert session.calls == []

    @pytest.mark.asyncio
    async def test_deadline_bounds_transport_timeout(self, make_response, make_session, envelope):
        session = make_session(make_response(envelope({})))
        client = Client(session=session)

        await client.send_json(time_request(), KrakenResponse, ctx=Context(timeout=30))

        timeout = session.calls[0]["timeout"]
        assert isinstance(timeout, aiohttp.ClientTimeout)
        assert 0 < timeout.total <= 30

    @pytest.mark.asyncio
    async def test_rate_limiter_acquired(self, make_response, make_session, envelope):
        limiter = MagicMock()
        limiter.acquire = AsyncMock()
        client = Client(session=make_session(make_response(envelope({}))), rate_limiter=limiter)

        await client.send_json(time_request(), KrakenResponse)

        limiter.acquire.assert_awaited_once()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [429, 500, 502])
    @pytest.mark.parametrize("send", ["send_json", "send_stream"])
    async def test_error_status_keeps_response(self, make_response, make_session, envelope, status, send):
        response = make_response(envelope(error=["EAPI:Rate limit exceeded"]), status=status)
        client = Client(session=make_session(response))

        args = (KrakenResponse,) if send == "send_json" else ()

        with pytest.raises(APIRequestError) as exc_info:
            await getattr(client, send)(time_request(), *args)

        assert exc_info.value.status == status
        assert exc_info.value.response is response
        assert b"EAPI:Rate limit exceeded" in exc_info.value.body
        assert response.close_calls == 1

    @pytest.mark.asyncio
    async def test_error_status_with_unreadable_body(self, make_response, make_session):
        response = make_response({}, status=502)
        response.read = AsyncMock(side_effect=aiohttp.ClientPayloadError("truncated"))
        client = Client(session=make_session(response))

        with pytest.raises(APIRequestError) as exc_info:
            await client.send_json(time_request(), KrakenResponse)

        assert exc_info.value.body is None
        assert response.close_calls == 1

    @pytest.mark.asyncio
    @pytest.mark.parametrize("content_type", [None, "", "json", "application/json; charset"])
    async def test_unparseable_content_type(self, make_response, make_session, content_type):
        response = make_response({}, content_type=content_type)
        client = Client(session=make_session(response))

        with pytest.raises(ResponseFormatError) as exc_info:
            await client.send_json(time_request(), KrakenResponse)

        assert exc_info.value.response is response
        assert response.closed

    @pytest.mark.asyncio
    @pytest.mark.parametrize("error", [aiohttp.ClientConnectionError("reset"), asyncio.TimeoutError()])
    async def test_transport_failure(self, make_session, error):
        client = Client(session=make_session(error=error))

        with pytest.raises(TransportError) as exc_info:
            await client.send_json(time_request(), KrakenResponse)

        assert exc_info.value.__cause__ is error

    @pytest.mark.asyncio
    async def test_none_request(self, make_session):
        session = make_session()

        with pytest.raises(TypeError):
            await Client(session=session).send_json(None, KrakenResponse)

        assert session.calls == []

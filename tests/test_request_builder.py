"""Tests for `Client.build_request`."""

from unittest.mock import AsyncMock

import pytest

from krakenspot import API_KEY_HEADER, API_SIGN_HEADER, Client, Context, KrakenAuthorizer
from krakenspot.errors import ContextExpired, RequestConstructionError
from krakenspot.util.enums import Paths


@pytest.mark.asyncio
async def test_public_request_with_query():
    client = Client()

    request = await client.build_request(
        Paths.TICKER, query={"pair": ["XBTUSD", "ETHUSD"], "unused": None}
    )

    assert request.method == "GET"
    assert request.url == "https://api.kraken.com/0/public/Ticker?pair=XBTUSD%2CETHUSD"
    assert request.path == "/0/public/Ticker"
    assert request.body is None
    assert request.headers == {"User-Agent": "krakenspot-python"}


@pytest.mark.asyncio
async def test_empty_query_adds_no_separator():
    request = await Client().build_request("/public/Time", query={"since": None})

    assert request.url == "https://api.kraken.com/0/public/Time"


@pytest.mark.asyncio
async def test_form_body_from_mapping():
    client = Client()

    request = await client.build_request(
        Paths.OPEN_ORDERS,
        "post",
        body={"nonce": 1700000000000, "trades": True, "userref": None, "txid": ["A", "B"]}
    )

    assert request.method == "POST"
    assert request.body == b"nonce=1700000000000&trades=true&txid=A%2CB"
    assert request.form == {"nonce": ["1700000000000"], "trades": ["true"], "txid": ["A,B"]}
    assert request.headers["Content-Type"] == "application/x-www-form-urlencoded"


@pytest.mark.asyncio
@pytest.mark.parametrize("body", ["nonce=42&asset=", b"nonce=42&asset="])
async def test_form_body_already_encoded(body):
    request = await Client().build_request(Paths.TRADE_BALANCE, "POST", body=body)

    assert request.body == b"nonce=42&asset="
    assert request.form_value("nonce") == "42"
    assert request.form_value("asset") == ""


@pytest.mark.asyncio
async def test_custom_agent_and_base_url():
    client = Client(agent="my-bot/1.0", base_url="http://localhost:8080/0/")

    request = await client.build_request(Paths.SERVER_TIME)

    assert request.url == "http://localhost:8080/0/public/Time"
    assert request.headers["User-Agent"] == "my-bot/1.0"


@pytest.mark.asyncio
async def test_delegates_to_authorizer(api_key, api_secret):
    client = Client(KrakenAuthorizer(api_key, api_secret))

    request = await client.build_request(Paths.BALANCE, "POST", body={"nonce": 1})

    assert request.headers[API_KEY_HEADER] == api_key
    assert API_SIGN_HEADER in request.headers


@pytest.mark.asyncio
async def test_authorizer_receives_context():
    authorizer = AsyncMock()
    authorizer.authorize.side_effect = lambda ctx, request: request
    ctx = Context(timeout=10)

    await Client(authorizer).build_request(Paths.BALANCE, "POST", body={"nonce": 1}, ctx=ctx)

    assert authorizer.authorize.await_args.args[0] is ctx


@pytest.mark.asyncio
@pytest.mark.parametrize("method", ["", "GE T", "GET\r\n", None])
async def test_invalid_method(method):
    with pytest.raises(RequestConstructionError):
        await Client().build_request(Paths.SERVER_TIME, method)


@pytest.mark.asyncio
@pytest.mark.parametrize("base_url", ["api.kraken.com/0", "ftp://api.kraken.com/0", "https://"])
async def test_invalid_url(base_url):
    with pytest.raises(RequestConstructionError):
        await Client(base_url=base_url).build_request(Paths.SERVER_TIME)


@pytest.mark.asyncio
@pytest.mark.parametrize("body", [42, b"\xff\xfe"])
async def test_invalid_body(body):
    with pytest.raises(RequestConstructionError) as exc_info:
        await Client().build_request(Paths.BALANCE, "POST", body=body)

    assert exc_info.value.__cause__ is not None


@pytest.mark.asyncio
async def test_expired_context():
    ctx = Context(timeout=0)

    with pytest.raises(ContextExpired):
        await Client().build_request(Paths.SERVER_TIME, ctx=ctx)

import asyncio
import json
import logging
import re
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Literal, Mapping, Sequence, Type, TypeVar, Union
from urllib.parse import parse_qs, urlencode, urlsplit

import aiohttp
from aiolimiter import AsyncLimiter

from .account import (
    AccountBalanceResponse, ClosedOrdersResponse, DataExport, DeleteExportReportResponse,
    ExportReportStatusResponse, ExtendedBalanceResponse, LedgersInfoResponse, OpenOrdersResponse,
    OpenPositionsResponse, QueryLedgersResponse, QueryOrdersInfoResponse, QueryTradesInfoResponse,
    RequestExportReportResponse, TradeBalanceResponse, TradesHistoryResponse, TradeVolumeResponse
)
from .auth import Authorizer, KrakenAuthorizer
from .common import KrakenResponse, SecurityOptions
from .earn import (
    AllocateEarnFundsResponse, AllocationStatusResponse, DeallocateEarnFundsResponse,
    DeallocationStatusResponse, ListEarnAllocationsResponse, ListEarnStrategiesResponse
)
from .errors import *
from .funding import (
    DepositAddressesResponse, DepositMethodsResponse, RecentDepositsResponse,
    RecentWithdrawalsResponse, WalletTransferResponse, WithdrawalAddressesResponse,
    WithdrawalCancellationResponse, WithdrawalInformationResponse, WithdrawalMethodsResponse,
    WithdrawFundsResponse
)
from .instrumentation import InstrumentedAuthorizer
from .market import (
    AssetInfoResponse, OHLCDataResponse, OrderBookResponse, RecentSpreadsResponse,
    RecentTradesResponse, ServerTimeResponse, SystemStatusResponse, TickerInformationResponse,
    TradableAssetPairsResponse
)
from .nonce import HighFrequencyNonceGenerator, NonceGenerator, UnixMillisNonceGenerator
from .trading import (
    AddOrderBatchResponse, AddOrderResponse, CancelAllOrdersAfterResponse, CancelAllOrdersResponse,
    CancelOrderBatchResponse, CancelOrderResponse, EditOrderResponse
)
from .util.context import Context
from .util.enums import Endpoints as ENDPOINT
from .util.enums import MimeTypes as MIME
from .util.enums import Paths as PATH
from .util.helpers import encode_params, parse_media_type, raise_errors_in, validate_timestamp
from .util.request import Request
from .websocket import WebsocketTokenResponse

logger = logging.getLogger(__name__)

DEFAULT_AGENT = "krakenspot-python"

_METHOD = re.compile(r"[A-Za-z]+")

_NONCE_GENERATORS = {
    "high_frequency": HighFrequencyNonceGenerator,
    "unix_millis": UnixMillisNonceGenerator
}

_ASSET_CLASS = Literal["currency", "tokenized_asset"]
_CLOSETIME = Literal["open", "close", "both"]
_INFO = Literal["info", "leverage", "fees", "margin"]
_INTERVALS = Literal[1, 5, 15, 30, 60, 240, 1440, 10080, 21600]
_LEDGER_TYPE = Literal[
    "all", "trade", "deposit", "withdrawal", "transfer", "margin", "adjustment",
    "rollover", "credit", "settled", "staking", "dividend", "sale", "nft_rebate"
]
_ORDER_TYPE = Literal[
    "market", "limit", "iceberg", "stop-loss", "take-profit", "stop-loss-limit",
    "take-profit-limit", "trailing-stop", "trailing-stop-limit", "settle-position"
]
_REPORT = Literal["trades", "ledgers"]
_SIDE = Literal["buy", "sell"]
_TIMESTAMP = Union[int, str, datetime]

R = TypeVar("R")


class Client:
    """The main class interacting with Kraken's spot REST API.

    Requests are built by :meth:`build_request`, authorized by the client's
    :class:`~krakenspot.auth.Authorizer`, then sent by either
    :meth:`send_json` or :meth:`send_stream`.  Every endpoint method is a thin
    wrapper around those.

    .. _Examples: quickstart.html

    Args:
        authorizer (:class:`~krakenspot.auth.Authorizer`): Authorizes every \
            outgoing request.  Without one, requests are sent as they are, \
            which is only useful for public endpoints.
        agent (str): The `User-Agent` header sent with every request.
        base_url (str): The versioned API base URL.  Defaults to \
            :attr:`~krakenspot.util.enums.Endpoints.PRODUCTION`.
        handle_errors (bool): Whether the client should raise the errors \
            returned in API responses.  `False` means the response is returned \
            as it is, errors included.
        nonce_generator (:class:`~krakenspot.nonce.NonceGenerator`): Supplies \
            the nonce of private calls made without an explicit `nonce`.
        rate_limiter (:class:`~aiolimiter.AsyncLimiter`): Throttles outgoing \
            requests on the client side.
        session (:class:`~aiohttp.ClientSession`): The session used to send \
            requests.  The client creates (and closes) its own if none is given.
        **config (dict): A dictionary-based version of the keyword arguments, \
            which may also hold `api_key`, `api_secret` and `instrumented` to \
            build the authorizer.  It may be preferred to use this method, as \
            shown in the `Examples`_.

    Raises:
        InvalidArguments: An API key was configured without its secret.
        InvalidSecret: The configured secret couldn't be base64 decoded.

    """

    agent: str
    authorizer: Authorizer
    base_url: str
    nonce_generator: NonceGenerator

    def __init__(self,
            authorizer: Authorizer=None,
            *,
            agent: str=None,
            base_url: str=None,
            handle_errors: bool=False,
            nonce_generator: NonceGenerator=None,
            rate_limiter: AsyncLimiter=None,
            session: aiohttp.ClientSession=None,
            **config
        ):
        cfg = config.get("config", {})

        base_url = cfg.get("base_url", base_url) or ENDPOINT.PRODUCTION

        if isinstance(base_url, Enum):
            base_url = base_url.value

        self.agent    = cfg.get("agent", agent) or DEFAULT_AGENT
        self.base_url = base_url.rstrip("/")

        self.__handle_errors = bool(cfg.get("handle_errors", handle_errors))

        if authorizer is None and cfg.get("api_key"):
            if not cfg.get("api_secret"):
                raise InvalidArguments("Missing API secret from config.")

            authorizer = KrakenAuthorizer(cfg["api_key"], cfg["api_secret"])

            if cfg.get("instrumented"):
                authorizer = InstrumentedAuthorizer(authorizer)

        if nonce_generator is None and cfg.get("nonce_generator"):
            try:
                nonce_generator = _NONCE_GENERATORS[cfg["nonce_generator"]]()
            except KeyError:
                raise InvalidArguments(
                    f"Unknown nonce generator '{cfg['nonce_generator']}' in config."
                ) from None

        if rate_limiter is None and cfg.get("rate_limit"):
            rate_limiter = AsyncLimiter(cfg["rate_limit"], 1)

        self.authorizer      = authorizer
        self.nonce_generator = nonce_generator

        self._rate_limiter = rate_limiter
        self._session = session
        self._owns_session = session is None

    @classmethod
    def from_config(cls, config: Mapping[str, Any], **kwargs) -> "Client":
        """Create a client from a configuration mapping (e.g. loaded from JSON).

        Examples:
            >>> with open("account.json") as fp:
            ...     client = Client.from_config(json.load(fp))

        """

        return cls(config=dict(config), **kwargs)

    @property
    def handle_errors(self) -> bool:
        """A flag denoting whether errors should be raised from API responses.

        .. _documentation page: https://docs.kraken.com/api/docs/guides/spot-errors

        If set to `False`, you will receive the response envelope with its
        `error` list, which you will then need to deal with yourself.  You'll
        be able to find the error codes from the `documentation page`_.
        However, if set to `True`, the first error of the envelope is raised
        as the matching :exc:`~krakenspot.errors.KrakenAPIError`.  Warnings
        are never raised.

        .. seealso:: :class:`~krakenspot.util.mappings.Mappings.ERROR_MAPPINGS`
            in case you wish to handle the raw error list yourself.

        """
        return self.__handle_errors

    def _ensure_session(self) -> aiohttp.ClientSession:
        if self._session is None:
            logger.debug("Opening client session...")
            self._session = aiohttp.ClientSession()
            self._owns_session = True

        return self._session

    async def close(self) -> None:
        """Close the client's session, if the client created it."""

        if not self._owns_session or self._session is None:
            return

        if not self._session.closed:
            await self._session.close()
            logger.debug("Closed client session.")

        self._session = None

    async def __aenter__(self) -> "Client":
        return self

    async def __aexit__(self, *exc) -> None:
        await self.close()

    async def build_request(self,
            path: Union[str, PATH],
            method: str="GET",
            *,
            query: Mapping[str, Any]=None,
            body: Union[bytes, str, Mapping[str, Any]]=None,
            ctx: Context=None
        ) -> Request:
        """Build a request to the API and hand it to the client's authorizer.

        Args:
            path: The endpoint's path, relative to the base URL.
            method: The HTTP method.
            query: Query string parameters.  `None` values are dropped.
            body: The form body, either already encoded or as a mapping, \
                which is encoded in insertion order.
            ctx: The call's context.

        Returns:
            The authorized request.

        Raises:
            ContextExpired: The context expired before the request was built.
            RequestConstructionError: The method, URL or body is malformed.

        """

        if ctx is not None:
            ctx.raise_if_expired("failed to build request")

        if isinstance(path, Enum):
            path = path.value

        if not isinstance(method, str) or not _METHOD.fullmatch(method):
            raise RequestConstructionError(f"failed to build request: invalid method {method!r}")

        url = self.base_url + path

        encoded_query = urlencode(encode_params(query or {}))

        if encoded_query:
            url += "?" + encoded_query

        try:
            parts = urlsplit(url)
        except ValueError as e:
            raise RequestConstructionError(f"failed to build request: invalid URL '{url}'") from e

        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise RequestConstructionError(f"failed to build request: invalid URL '{url}'")

        headers = {"User-Agent": self.agent}
        encoded = None
        form = None

        if body is not None:
            try:
                if isinstance(body, Mapping):
                    encoded = urlencode(encode_params(body)).encode()
                elif isinstance(body, str):
                    encoded = body.encode()
                elif isinstance(body, (bytes, bytearray)):
                    encoded = bytes(body)
                else:
                    raise TypeError(f"unsupported body type '{type(body).__name__}'")

                form = parse_qs(encoded.decode(), keep_blank_values=True)

            except (TypeError, ValueError) as e:
                raise RequestConstructionError(f"failed to build request: invalid body: {e}") from e

            headers["Content-Type"] = MIME.FORM.value

        request = Request(method, url, headers=headers, body=encoded, form=form)

        if self.authorizer is None:
            return request

        return await self.authorizer.authorize(ctx, request)

    async def _dispatch(self, request: Request, ctx: Context):
        if request is None:
            raise TypeError("cannot send request: provided request is None")

        if ctx is not None:
            ctx.raise_if_expired("failed to send request")

        if self._rate_limiter is not None:
            await self._rate_limiter.acquire()

            if ctx is not None:
                ctx.raise_if_expired("failed to send request")

        session = self._ensure_session()

        kwargs = {}

        if ctx is not None and ctx.remaining() is not None:
            kwargs["timeout"] = aiohttp.ClientTimeout(total=ctx.remaining())

        try:
            response = await session.request(
                request.method,
                request.url,
                data=request.body,
                headers=request.headers,
                **kwargs
            )
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise TransportError(f"failed to send request to {request.path}: {e}") from e

        logger.debug("%s %s -> %s", request.method, request.path, response.status)

        if response.status != 200:
            body = None
            try:
                body = await response.read()
            except (aiohttp.ClientError, asyncio.TimeoutError) as e:
                logger.debug("could not read %s body from %s: %s", response.status, request.path, e)
            finally:
                response.close()
            raise APIRequestError(response.status, body=body, response=response)

        try:
            media_type = parse_media_type(response.headers.get("Content-Type"))
        except ValueError as e:
            response.close()
            raise ResponseFormatError(
                f"failed to parse Content-Type of response from {request.path}: {e}",
                response=response
            ) from e

        return response, media_type

    async def send_json(self, request: Request, receiver: Type[R], *, ctx: Context=None) -> R:
        """Send a request and parse its JSON response into `receiver`.

        The response body is always read and closed before returning.

        Args:
            request: The request to send, usually from :meth:`build_request`.
            receiver: Called with the decoded JSON object as keyword \
                arguments (e.g. a :class:`~krakenspot.common.KrakenResponse` \
                subclass).
            ctx: The call's context.

        Returns:
            The `receiver` instance.  Its `raw` attribute holds the HTTP \
                response when it is a :class:`~krakenspot.common.KrakenResponse`.

        Raises:
            APIRequestError: The response status isn't 200.
            ContextExpired: The context expired before the request was sent.
            ResponseFormatError: The `Content-Type` header couldn't be parsed.
            ResponseParseError: The body couldn't be parsed into `receiver`.
            TransportError: The request couldn't be sent or its body read.
            UnsupportedContentType: The response isn't JSON.

        """

        response, media_type = await self._dispatch(request, ctx)

        if media_type != MIME.JSON.value:
            response.close()
            raise UnsupportedContentType(media_type, response=response)

        try:
            raw_content = await response.read()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise TransportError(f"failed to read response from {request.path}: {e}") from e
        finally:
            response.close()

        try:
            content = json.loads(raw_content)
            parsed = receiver(**content)
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise ResponseParseError(
                f"failed to parse response from {request.path}: {e}",
                response=response
            ) from e

        if isinstance(parsed, KrakenResponse):
            parsed.raw = response

        return parsed

    async def send_stream(self, request: Request, *, ctx: Context=None) -> aiohttp.ClientResponse:
        """Send a request expecting a binary response, and return it unread.

        Note:
            The body of the returned response is left open: closing it is up
            to the caller.

        Raises:
            APIRequestError: The response status isn't 200.
            ContextExpired: The context expired before the request was sent.
            ResponseFormatError: The `Content-Type` header couldn't be parsed.
            TransportError: The request couldn't be sent.
            UnsupportedContentType: The response isn't binary.  If it was \
                JSON (e.g. an error envelope), its body is attached to the error.

        """

        response, media_type = await self._dispatch(request, ctx)

        if media_type in (MIME.OCTET_STREAM.value, MIME.ZIP.value):
            return response

        body = None

        try:
            if media_type == MIME.JSON.value:
                body = await response.read()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise TransportError(f"failed to read response from {request.path}: {e}") from e
        finally:
            response.close()

        raise UnsupportedContentType(media_type, body=body, response=response)

    def _private_form(self, nonce: int, security: SecurityOptions, **params) -> Dict[str, Any]:
        if nonce is None and self.nonce_generator is not None:
            nonce = self.nonce_generator.generate_nonce()

        form = {"nonce": nonce}

        if security is not None:
            form["otp"] = security.second_factor

        form.update(params)

        return form

    def _handle(self, response: KrakenResponse) -> KrakenResponse:
        if self.handle_errors:
            raise_errors_in(response)

        return response

    async def _get(self, path: PATH, receiver, *, query: dict=None, ctx: Context=None):
        request = await self.build_request(path, "GET", query=query, ctx=ctx)

        return self._handle(await self.send_json(request, receiver, ctx=ctx))

    async def _post(self, path: PATH, receiver, *, form: dict, ctx: Context=None):
        request = await self.build_request(path, "POST", body=form, ctx=ctx)

        return self._handle(await self.send_json(request, receiver, ctx=ctx))

    # Market data

    async def get_server_time(self, *, ctx: Context=None) -> ServerTimeResponse:
        """Get the server's time."""

        return await self._get(PATH.SERVER_TIME, ServerTimeResponse, ctx=ctx)

    async def get_system_status(self, *, ctx: Context=None) -> SystemStatusResponse:
        """Get the current system status or trading mode."""

        return await self._get(PATH.SYSTEM_STATUS, SystemStatusResponse, ctx=ctx)

    async def get_asset_info(self,
            asset: Union[str, Sequence[str]]=None,
            *,
            aclass: _ASSET_CLASS=None,
            ctx: Context=None
        ) -> AssetInfoResponse:
        """Get information about the assets available for deposit, withdrawal,
        trading and earn.

        Args:
            asset: The asset(s) to get information about.  Defaults to all.
            aclass: The asset class.  Defaults to '`currency`'.

        Returns:
            Assets keyed by name.

        """

        query = {
            "asset": asset,
            "aclass": aclass
        }

        return await self._get(PATH.ASSET_INFO, AssetInfoResponse, query=query, ctx=ctx)

    async def get_tradable_asset_pairs(self,
            pair: Union[str, Sequence[str]]=None,
            *,
            country_code: str=None,
            info: _INFO=None,
            ctx: Context=None
        ) -> TradableAssetPairsResponse:
        """Get tradable asset pairs.

        Args:
            pair: The asset pair(s) to get data for.  Defaults to all.
            info: The info to retrieve.  Defaults to '`info`'.
            country_code: Filter for pairs available in the given country or \
                region (e.g. '`GB`').

        """

        query = {
            "pair": pair,
            "info": info,
            "country_code": country_code
        }

        return await self._get(
            PATH.TRADABLE_ASSET_PAIRS, TradableAssetPairsResponse, query=query, ctx=ctx
        )

    async def get_ticker_information(self,
            pair: Union[str, Sequence[str]]=None,
            *,
            ctx: Context=None
        ) -> TickerInformationResponse:
        """Get ticker information for one or more pairs.

        Note:
            Today's prices start at midnight UTC.  Leaving `pair` blank returns
            tickers for all tradable pairs.

        Args:
            pair: A pair, or multiple pairs, whose ticker(s) you want to \
                receive (e.g. `["XBTUSD", "ETHUSD"]`).

        Returns:
            Tickers keyed by pair.

        """

        query = {"pair": pair}

        return await self._get(PATH.TICKER, TickerInformationResponse, query=query, ctx=ctx)

    async def get_ohlc_data(self,
            pair: str,
            interval: _INTERVALS=None,
            *,
            since: _TIMESTAMP=None,
            ctx: Context=None
        ) -> OHLCDataResponse:
        """Get candlestick data for a given `pair`.

        Only the 720 most recent entries are returned, whatever `since` is.

        Args:
            pair: The asset pair to get data for.
            interval: The time frame interval in minutes.  Defaults to 1.
            since: Return data since the given timestamp.

        Returns:
            Candlesticks keyed by pair, and the `last` timestamp to poll from.

        Raises:
            TypeError: From timestamp validation.
            ValidationException: From timestamp validation.

        """

        query = {
            "pair": pair,
            "interval": interval,
            "since": validate_timestamp(since)
        }

        return await self._get(PATH.OHLC, OHLCDataResponse, query=query, ctx=ctx)

    async def get_order_book(self,
            pair: str,
            *,
            count: int=None,
            ctx: Context=None
        ) -> OrderBookResponse:
        """Get the order book of a specific pair.

        Args:
            pair: The asset pair whose order book you want to receive.
            count: The maximum number of asks/bids (1-500).  Defaults to 100.

        """

        query = {
            "pair": pair,
            "count": count
        }

        return await self._get(PATH.ORDER_BOOK, OrderBookResponse, query=query, ctx=ctx)

    async def get_recent_trades(self,
            pair: str,
            *,
            count: int=None,
            since: _TIMESTAMP=None,
            ctx: Context=None
        ) -> RecentTradesResponse:
        """Get up to the last 1000 trades of a pair.

        Args:
            pair: The asset pair to get data for.
            since: Return trades since the given timestamp.
            count: The maximum number of trades to return (1-1000).

        """

        query = {
            "pair": pair,
            "since": validate_timestamp(since),
            "count": count
        }

        return await self._get(PATH.RECENT_TRADES, RecentTradesResponse, query=query, ctx=ctx)

    async def get_recent_spreads(self,
            pair: str,
            *,
            since: _TIMESTAMP=None,
            ctx: Context=None
        ) -> RecentSpreadsResponse:
        """Get the last ~200 top-of-book spreads of a pair."""

        query = {
            "pair": pair,
            "since": validate_timestamp(since)
        }

        return await self._get(PATH.RECENT_SPREADS, RecentSpreadsResponse, query=query, ctx=ctx)

    # Account data

    async def get_account_balance(self,
            *,
            nonce: int=None,
            security: SecurityOptions=None,
            ctx: Context=None
        ) -> AccountBalanceResponse:
        """Get all cash balances, net of pending withdrawals.

        Every private method takes the following keyword arguments.

        Args:
            nonce: The nonce of the call.  Defaults to one from the client's \
                nonce generator.
            security: The second factor to use for this call, if the API key \
                has one.
            ctx: The call's context.

        Returns:
            Balances keyed by asset.

        Raises:
            APIRequestError: The response status isn't 200.
            ContextExpired: The context expired before the request was sent.
            InvalidKey: An invalid API key was supplied.
            InvalidNonce: The nonce wasn't greater than the previous one.
            MalformedRequest: No nonce was given, and the client has no \
                nonce generator.
            PermissionDenied: The API key lacks the required permission.

        """

        form = self._private_form(nonce, security)

        return await self._post(PATH.BALANCE, AccountBalanceResponse, form=form, ctx=ctx)

    async def get_extended_balance(self,
            *,
            nonce: int=None,
            security: SecurityOptions=None,
            ctx: Context=None
        ) -> ExtendedBalanceResponse:
        """Get all extended account balances, including credits and held amounts."""

        form = self._private_form(nonce, security)

        return await self._post(PATH.EXTENDED_BALANCE, ExtendedBalanceResponse, form=form, ctx=ctx)

    async def get_trade_balance(self,
            asset: str=None,
            *,
            nonce: int=None,
            security: SecurityOptions=None,
            ctx: Context=None
        ) -> TradeBalanceResponse:
        """Get a summary of collateral balances, margin position valuations,
        equity and margin level.

        Args:
            asset: The base asset used to determine the balance.  Defaults to \
                '`ZUSD`'.

        """

        form = self._private_form(nonce, security, asset=asset)

        return await self._post(PATH.TRADE_BALANCE, TradeBalanceResponse, form=form, ctx=ctx)

    async def get_open_orders(self,
            *,
            trades: bool=None,
            userref: int=None,
            nonce: int=None,
            security: SecurityOptions=None,
            ctx: Context=None
        ) -> OpenOrdersResponse:
        """Get information about the currently open orders.

        Args:
            trades: Whether to include trades related to the orders.
            userref: Restrict results to the given user reference ID.

        """

        form = self._private_form(nonce, security, trades=trades, userref=userref)

        return await self._post(PATH.OPEN_ORDERS, OpenOrdersResponse, form=form, ctx=ctx)

    async def get_closed_orders(self,
            *,
            closetime: _CLOSETIME=None,
            consolidate_taker: bool=None,
            end: _TIMESTAMP=None,
            ofs: int=None,
            start: _TIMESTAMP=None,
            trades: bool=None,
            userref: int=None,
            nonce: int=None,
            security: SecurityOptions=None,
            ctx: Context=None
        ) -> ClosedOrdersResponse:
        """Get information about orders that have been closed (filled or
        cancelled).  50 results are returned at a time, the most recent first.

        Args:
            trades: Whether to include trades related to the orders.
            userref: Restrict results to the given user reference ID.
            start: Starting timestamp or order transaction ID (exclusive).
            end: Ending timestamp or order transaction ID (inclusive).
            ofs: The result offset, for pagination.
            closetime: Which time to use to search.  Defaults to '`both`'.
            consolidate_taker: Whether to consolidate trades by individual \
                taker trades.

        Raises:
            TypeError: From timestamp validation.
            ValidationException: From timestamp validation.

        """

        form = self._private_form(
            nonce,
            security,
            trades=trades,
            userref=userref,
            start=validate_timestamp(start),
            end=validate_timestamp(end),
            ofs=ofs,
            closetime=closetime,
            consolidate_taker=consolidate_taker
        )

        return await self._post(PATH.CLOSED_ORDERS, ClosedOrdersResponse, form=form, ctx=ctx)

    async def query_orders_info(self,
            txid: Union[str, Sequence[str]],
            *,
            consolidate_taker: bool=None,
            trades: bool=None,
            userref: int=None,
            nonce: int=None,
            security: SecurityOptions=None,
            ctx: Context=None
        ) -> QueryOrdersInfoResponse:
        """Get information about specific orders.

        Args:
            txid: Up to 50 transaction IDs to query.

        """

        form = self._private_form(
            nonce,
            security,
            txid=txid,
            trades=trades,
            userref=userref,
            consolidate_taker=consolidate_taker
        )

        return await self._post(PATH.QUERY_ORDERS, QueryOrdersInfoResponse, form=form, ctx=ctx)

    async def get_trades_history(self,
            *,
            consolidate_taker: bool=None,
            end: _TIMESTAMP=None,
            ofs: int=None,
            start: _TIMESTAMP=None,
            trades: bool=None,
            type: str=None,
            nonce: int=None,
            security: SecurityOptions=None,
            ctx: Context=None
        ) -> TradesHistoryResponse:
        """Get information about trades/fills.  50 results are returned at a
        time, the most recent first.

        Args:
            type: The type of trade.  Defaults to '`all`'.
            trades: Whether to include trades related to position in output.
            start: Starting timestamp or trade transaction ID (exclusive).
            end: Ending timestamp or trade transaction ID (inclusive).
            ofs: The result offset, for pagination.
            consolidate_taker: Whether to consolidate trades by individual \
                taker trades.

        """

        form = self._private_form(
            nonce,
            security,
            type=type,
            trades=trades,
            start=validate_timestamp(start),
            end=validate_timestamp(end),
            ofs=ofs,
            consolidate_taker=consolidate_taker
        )

        return await self._post(PATH.TRADES_HISTORY, TradesHistoryResponse, form=form, ctx=ctx)

    async def query_trades_info(self,
            txid: Union[str, Sequence[str]],
            *,
            trades: bool=None,
            nonce: int=None,
            security: SecurityOptions=None,
            ctx: Context=None
        ) -> QueryTradesInfoResponse:
        form = self._private_form(nonce, security, txid=txid, trades=trades)

        return await self._post(PATH.QUERY_TRADES, QueryTradesInfoResponse, form=form, ctx=ctx)

    async def get_open_positions(self,
            txid: Union[str, Sequence[str]]=None,
            *,
            consolidation: Literal["market"]=None,
            docalcs: bool=None,
            nonce: int=None,
            security: SecurityOptions=None,
            ctx: Context=None
        ) -> OpenPositionsResponse:
        """Get information about open margin positions.

        Args:
            txid: Restrict results to the given transaction IDs.
            docalcs: Whether to include profit/loss calculations.
            consolidation: Consolidate positions by market/pair.

        """

        form = self._private_form(
            nonce,
            security,
            txid=txid,
            docalcs=docalcs,
            consolidation=consolidation
        )

        return await self._post(PATH.OPEN_POSITIONS, OpenPositionsResponse, form=form, ctx=ctx)

    async def get_ledgers_info(self,
            asset: Union[str, Sequence[str]]=None,
            *,
            aclass: _ASSET_CLASS=None,
            end: _TIMESTAMP=None,
            ofs: int=None,
            start: _TIMESTAMP=None,
            type: _LEDGER_TYPE=None,
            without_count: bool=None,
            nonce: int=None,
            security: SecurityOptions=None,
            ctx: Context=None
        ) -> LedgersInfoResponse:
        """Get information about ledger entries.  50 results are returned at a
        time, the most recent first.

        Args:
            asset: Filter output by asset(s).  Defaults to all.
            aclass: Filter output by asset class.
            type: The type of ledger to retrieve.  Defaults to '`all`'.
            start: Starting timestamp or ledger ID (exclusive).
            end: Ending timestamp or ledger ID (inclusive).
            ofs: The result offset, for pagination.
            without_count: Whether to skip counting the entries, which \
                speeds up requests on large ledgers.

        """

        form = self._private_form(
            nonce,
            security,
            asset=asset,
            aclass=aclass,
            type=type,
            start=validate_timestamp(start),
            end=validate_timestamp(end),
            ofs=ofs,
            without_count=without_count
        )

        return await self._post(PATH.LEDGERS, LedgersInfoResponse, form=form, ctx=ctx)

    async def query_ledgers(self,
            id: Union[str, Sequence[str]],
            *,
            trades: bool=None,
            nonce: int=None,
            security: SecurityOptions=None,
            ctx: Context=None
        ) -> QueryLedgersResponse:
        """Get information about specific ledger entries (up to 20)."""

        form = self._private_form(nonce, security, id=id, trades=trades)

        return await self._post(PATH.QUERY_LEDGERS, QueryLedgersResponse, form=form, ctx=ctx)

    async def get_trade_volume(self,
            pair: Union[str, Sequence[str]]=None,
            *,
            nonce: int=None,
            security: SecurityOptions=None,
            ctx: Context=None
        ) -> TradeVolumeResponse:
        """Get the 30 day USD trading volume and the resulting fee schedule.

        Args:
            pair: The pair(s) to get fee info on.

        """

        form = self._private_form(nonce, security, pair=pair)

        return await self._post(PATH.TRADE_VOLUME, TradeVolumeResponse, form=form, ctx=ctx)

    async def request_export_report(self,
            report: _REPORT,
            description: str,
            *,
            endtm: _TIMESTAMP=None,
            fields: Union[str, Sequence[str]]=None,
            format: Literal["CSV", "TSV"]=None,
            starttm: _TIMESTAMP=None,
            nonce: int=None,
            security: SecurityOptions=None,
            ctx: Context=None
        ) -> RequestExportReportResponse:
        """Request an export of trades or ledgers.

        Args:
            report: The type of data to export.
            description: The description of the export.
            format: The file format.  Defaults to '`CSV`'.
            fields: Fields to include.  Defaults to all.
            starttm: UNIX timestamp for report start time.
            endtm: UNIX timestamp for report end time.

        Returns:
            The report's `id`.

        """

        form = self._private_form(
            nonce,
            security,
            report=report,
            description=description,
            format=format,
            fields=fields,
            starttm=validate_timestamp(starttm),
            endtm=validate_timestamp(endtm)
        )

        return await self._post(PATH.ADD_EXPORT, RequestExportReportResponse, form=form, ctx=ctx)

    async def get_export_report_status(self,
            report: _REPORT,
            *,
            nonce: int=None,
            security: SecurityOptions=None,
            ctx: Context=None
        ) -> ExportReportStatusResponse:
        """Get the status of the requested data exports."""

        form = self._private_form(nonce, security, report=report)

        return await self._post(PATH.EXPORT_STATUS, ExportReportStatusResponse, form=form, ctx=ctx)

    async def retrieve_data_export(self,
            id: str,
            *,
            nonce: int=None,
            security: SecurityOptions=None,
            ctx: Context=None
        ) -> DataExport:
        """Download a processed data export.

        Note:
            The report is streamed: its body stays open until the returned
            :class:`~krakenspot.account.DataExport` is closed, which is best
            done with `async with`.

        Args:
            id: The report ID to retrieve.

        Returns:
            The report, ready to be read.

        Raises:
            UnsupportedContentType: Kraken didn't answer with a zip archive. \
                If it answered with an error envelope, it is attached to the \
                exception's `body`.

        """

        form = self._private_form(nonce, security, id=id)

        request = await self.build_request(PATH.RETRIEVE_EXPORT, "POST", body=form, ctx=ctx)
        response = await self.send_stream(request, ctx=ctx)

        return DataExport(id, response)

    async def delete_export_report(self,
            id: str,
            type: Literal["cancel", "delete"]="delete",
            *,
            nonce: int=None,
            security: SecurityOptions=None,
            ctx: Context=None
        ) -> DeleteExportReportResponse:
        """Delete an exported report, or cancel it while it is still queued.

        Args:
            id: The ID of the report to delete or cancel.
            type: '`delete`' can only be used for reports which have already \
                been processed.  Use '`cancel`' for queued or processing reports.

        """

        form = self._private_form(nonce, security, id=id, type=type)

        return await self._post(PATH.REMOVE_EXPORT, DeleteExportReportResponse, form=form, ctx=ctx)

    # Trading

    async def add_order(self,
            pair: str,
            type: _SIDE,
            ordertype: _ORDER_TYPE,
            volume: str,
            *,
            close: Dict[str, str]=None,
            cl_ord_id: str=None,
            deadline: datetime=None,
            displayvol: str=None,
            expiretm: str=None,
            leverage: str=None,
            oflags: Union[str, Sequence[str]]=None,
            price: str=None,
            price2: str=None,
            reduce_only: bool=None,
            starttm: str=None,
            stptype: Literal["cancel-newest", "cancel-oldest", "cancel-both"]=None,
            timeinforce: Literal["GTC", "IOC", "GTD"]=None,
            trigger: Literal["index", "last"]=None,
            userref: int=None,
            validate: bool=None,
            nonce: int=None,
            security: SecurityOptions=None,
            ctx: Context=None
        ) -> AddOrderResponse:
        """Place a new order.

        Prices and volumes are strings, to be passed exactly as Kraken
        expects them (e.g. '`+5%`' or '`#10`' for relative prices).

        Examples:
            >>> await client.add_order("XBTUSD", "buy", "limit", "1.25",
            ...     price="37500", close={"ordertype": "stop-loss", "price": "35000"})

        Args:
            pair: The asset pair of the order.
            type: The order direction.
            ordertype: The execution model of the order.
            volume: The order quantity in terms of the base asset.
            price: The limit price for `limit` orders, or the trigger price \
                for `stop-loss`, `take-profit`...
            price2: The limit price for `stop-loss-limit` and \
                `take-profit-limit` orders.
            trigger: The price signal used to trigger stop and take-profit \
                orders.  Defaults to '`last`'.
            leverage: The amount of leverage desired.
            reduce_only: Whether the order can only reduce a margin position.
            stptype: The self trade prevention behaviour.
            oflags: Order flags (e.g. `["post", "fciq"]`).
            timeinforce: Defaults to '`GTC`'.
            starttm: The scheduled start time.
            expiretm: The expiration time.
            close: The conditional close order, as `ordertype`, `price` and \
                optionally `price2`.
            deadline: The time after which the matching engine should reject \
                the order.
            validate: Whether to only validate inputs, without submitting the \
                order.
            userref: A user reference ID for the order.
            cl_ord_id: A client order ID.  Mutually exclusive with `userref`.
            displayvol: The visible quantity of `iceberg` orders.

        Returns:
            The order's description and transaction ID(s).

        Raises:
            InsufficientFunds: Not enough funds to place the order.
            InvalidArguments: Supplied arguments are invalid.
            InvalidOrder: The order was rejected.
            ServiceUnavailable: The market is in `cancel_only` or `post_only` mode.

        """

        form = self._private_form(
            nonce,
            security,
            userref=userref,
            cl_ord_id=cl_ord_id,
            ordertype=ordertype,
            type=type,
            volume=volume,
            displayvol=displayvol,
            pair=pair,
            price=price,
            price2=price2,
            trigger=trigger,
            leverage=leverage,
            reduce_only=reduce_only,
            stptype=stptype,
            oflags=oflags,
            timeinforce=timeinforce,
            starttm=starttm,
            expiretm=expiretm,
            close=close,
            deadline=deadline,
            validate=validate
        )

        return await self._post(PATH.ADD_ORDER, AddOrderResponse, form=form, ctx=ctx)

    async def add_order_batch(self,
            pair: str,
            orders: List[Dict[str, Any]],
            *,
            deadline: datetime=None,
            validate: bool=None,
            nonce: int=None,
            security: SecurityOptions=None,
            ctx: Context=None
        ) -> AddOrderBatchResponse:
        """Place a batch of 2 to 15 orders on a single pair.

        Args:
            pair: The asset pair of all the orders.
            orders: The orders, each one being a mapping of the parameters \
                accepted by :meth:`add_order` (e.g. `{"ordertype": "limit", \
                "type": "buy", "volume": "1.25", "price": "27500"}`).
            deadline: The time after which the matching engine should reject \
                the batch.
            validate: Whether to only validate inputs.

        """

        form = self._private_form(
            nonce,
            security,
            pair=pair,
            orders=orders,
            deadline=deadline,
            validate=validate
        )

        return await self._post(PATH.ADD_ORDER_BATCH, AddOrderBatchResponse, form=form, ctx=ctx)

    async def edit_order(self,
            txid: Union[str, int],
            pair: str,
            *,
            cancel_response: bool=None,
            deadline: datetime=None,
            oflags: Union[str, Sequence[str]]=None,
            price: str=None,
            price2: str=None,
            userref: int=None,
            validate: bool=None,
            volume: str=None,
            nonce: int=None,
            security: SecurityOptions=None,
            ctx: Context=None
        ) -> EditOrderResponse:
        """Edit the volume and price of an open order.

        The original order is cancelled, and a new one is placed with a new
        transaction ID.

        Args:
            txid: The transaction ID or user reference of the order to edit.
            pair: The asset pair of the order.

        """

        form = self._private_form(
            nonce,
            security,
            txid=txid,
            pair=pair,
            userref=userref,
            volume=volume,
            price=price,
            price2=price2,
            oflags=oflags,
            deadline=deadline,
            cancel_response=cancel_response,
            validate=validate
        )

        return await self._post(PATH.EDIT_ORDER, EditOrderResponse, form=form, ctx=ctx)

    async def cancel_order(self,
            txid: Union[str, int],
            *,
            nonce: int=None,
            security: SecurityOptions=None,
            ctx: Context=None
        ) -> CancelOrderResponse:
        """Cancel a particular open order (or set of orders) by transaction ID,
        user reference or client order ID.

        Raises:
            OrderNotFound: No order could be found matching `txid`.

        """

        form = self._private_form(nonce, security, txid=txid)

        return await self._post(PATH.CANCEL_ORDER, CancelOrderResponse, form=form, ctx=ctx)

    async def cancel_all_orders(self,
            *,
            nonce: int=None,
            security: SecurityOptions=None,
            ctx: Context=None
        ) -> CancelAllOrdersResponse:
        """Cancel all open orders."""

        form = self._private_form(nonce, security)

        return await self._post(PATH.CANCEL_ALL, CancelAllOrdersResponse, form=form, ctx=ctx)

    async def cancel_all_orders_after(self,
            timeout: int,
            *,
            nonce: int=None,
            security: SecurityOptions=None,
            ctx: Context=None
        ) -> CancelAllOrdersAfterResponse:
        """Arm, extend or disarm the "Dead Man's Switch".

        All orders are cancelled once `timeout` seconds have elapsed without
        the switch being extended.

        Args:
            timeout: Duration (in seconds) to set/extend the timer by.  `0` \
                disables the switch.

        """

        form = self._private_form(nonce, security, timeout=timeout)

        return await self._post(
            PATH.CANCEL_ALL_AFTER, CancelAllOrdersAfterResponse, form=form, ctx=ctx
        )

    async def cancel_order_batch(self,
            orders: Sequence[Union[str, int]],
            *,
            nonce: int=None,
            security: SecurityOptions=None,
            ctx: Context=None
        ) -> CancelOrderBatchResponse:
        """Cancel multiple open orders by transaction ID or user reference
        (maximum 50 total unique IDs/references)."""

        form = self._private_form(nonce, security, orders=orders)

        return await self._post(PATH.CANCEL_ORDER_BATCH, CancelOrderBatchResponse, form=form, ctx=ctx)

    # Funding

    async def get_deposit_methods(self,
            asset: str,
            *,
            aclass: _ASSET_CLASS=None,
            nonce: int=None,
            security: SecurityOptions=None,
            ctx: Context=None
        ) -> DepositMethodsResponse:
        """Get the methods available for depositing a particular asset."""

        form = self._private_form(nonce, security, asset=asset, aclass=aclass)

        return await self._post(PATH.DEPOSIT_METHODS, DepositMethodsResponse, form=form, ctx=ctx)

    async def get_deposit_addresses(self,
            asset: str,
            method: str,
            *,
            amount: str=None,
            new: bool=None,
            nonce: int=None,
            security: SecurityOptions=None,
            ctx: Context=None
        ) -> DepositAddressesResponse:
        """Get (or generate) deposit addresses for a particular asset and method.

        Args:
            asset: The asset being deposited.
            method: The name of the deposit method.
            new: Whether to generate a new address.
            amount: The amount to deposit (required for Lightning deposits).

        """

        form = self._private_form(
            nonce,
            security,
            asset=asset,
            method=method,
            new=new,
            amount=amount
        )

        return await self._post(
            PATH.DEPOSIT_ADDRESSES, DepositAddressesResponse, form=form, ctx=ctx
        )

    async def get_status_of_recent_deposits(self,
            *,
            asset: str=None,
            cursor: str=None,
            end: _TIMESTAMP=None,
            limit: int=None,
            method: str=None,
            start: _TIMESTAMP=None,
            nonce: int=None,
            security: SecurityOptions=None,
            ctx: Context=None
        ) -> RecentDepositsResponse:
        """Get the status of recent deposits, the most recent first.

        Pagination is always enabled, so the result is a
        :class:`~krakenspot.funding.RecentDeposits` page carrying the cursor
        to the next one.

        Args:
            asset: Filter for a specific asset.
            method: Filter for a specific deposit method.
            start: Start timestamp (exclusive).
            end: End timestamp (inclusive).
            cursor: The `next_cursor` of the previous page.
            limit: The number of results per page.

        """

        form = self._private_form(
            nonce,
            security,
            asset=asset,
            method=method,
            start=validate_timestamp(start),
            end=validate_timestamp(end),
            cursor=cursor or True,
            limit=limit
        )

        return await self._post(PATH.DEPOSIT_STATUS, RecentDepositsResponse, form=form, ctx=ctx)

    async def get_withdrawal_methods(self,
            *,
            aclass: _ASSET_CLASS=None,
            asset: str=None,
            network: str=None,
            nonce: int=None,
            security: SecurityOptions=None,
            ctx: Context=None
        ) -> WithdrawalMethodsResponse:
        """Get the methods available for withdrawing assets."""

        form = self._private_form(nonce, security, asset=asset, aclass=aclass, network=network)

        return await self._post(
            PATH.WITHDRAW_METHODS, WithdrawalMethodsResponse, form=form, ctx=ctx
        )

    async def get_withdrawal_addresses(self,
            *,
            aclass: _ASSET_CLASS=None,
            asset: str=None,
            key: str=None,
            method: str=None,
            verified: bool=None,
            nonce: int=None,
            security: SecurityOptions=None,
            ctx: Context=None
        ) -> WithdrawalAddressesResponse:
        """Get the withdrawal addresses (keys) configured on the account.

        Args:
            asset: Filter addresses for a specific asset.
            aclass: Filter addresses for a specific asset class.
            method: Filter addresses for a specific method.
            key: Find the address for a specific withdrawal key name.
            verified: Filter by verification status.  Only `True` is \
                supported by Kraken.

        """

        form = self._private_form(
            nonce,
            security,
            asset=asset,
            aclass=aclass,
            method=method,
            key=key,
            verified=verified
        )

        return await self._post(
            PATH.WITHDRAW_ADDRESSES, WithdrawalAddressesResponse, form=form, ctx=ctx
        )

    async def get_withdrawal_information(self,
            asset: str,
            key: str,
            amount: str,
            *,
            nonce: int=None,
            security: SecurityOptions=None,
            ctx: Context=None
        ) -> WithdrawalInformationResponse:
        """Get fee information about a potential withdrawal."""

        form = self._private_form(nonce, security, asset=asset, key=key, amount=amount)

        return await self._post(
            PATH.WITHDRAW_INFO, WithdrawalInformationResponse, form=form, ctx=ctx
        )

    async def withdraw_funds(self,
            asset: str,
            key: str,
            amount: str,
            *,
            address: str=None,
            max_fee: str=None,
            nonce: int=None,
            security: SecurityOptions=None,
            ctx: Context=None
        ) -> WithdrawFundsResponse:
        """Make a withdrawal request.

        Args:
            asset: The asset being withdrawn.
            key: The withdrawal key name, as set up on the account.
            amount: The amount to be withdrawn.
            address: Optional, used to confirm the address matches the key.
            max_fee: The withdrawal fails if the fee is higher than this.

        Returns:
            The `refid` of the withdrawal.

        Raises:
            FundingError: The withdrawal was rejected.

        """

        form = self._private_form(
            nonce,
            security,
            asset=asset,
            key=key,
            amount=amount,
            address=address,
            max_fee=max_fee
        )

        return await self._post(PATH.WITHDRAW, WithdrawFundsResponse, form=form, ctx=ctx)

    async def get_status_of_recent_withdrawals(self,
            *,
            asset: str=None,
            end: _TIMESTAMP=None,
            method: str=None,
            start: _TIMESTAMP=None,
            nonce: int=None,
            security: SecurityOptions=None,
            ctx: Context=None
        ) -> RecentWithdrawalsResponse:
        """Get the status of recent withdrawals, the most recent first.

        Pagination is always disabled: the result is a plain list.

        """

        form = self._private_form(
            nonce,
            security,
            asset=asset,
            method=method,
            start=validate_timestamp(start),
            end=validate_timestamp(end),
            cursor=False
        )

        return await self._post(PATH.WITHDRAW_STATUS, RecentWithdrawalsResponse, form=form, ctx=ctx)

    async def request_withdrawal_cancellation(self,
            asset: str,
            refid: str,
            *,
            nonce: int=None,
            security: SecurityOptions=None,
            ctx: Context=None
        ) -> WithdrawalCancellationResponse:
        """Cancel a recently requested withdrawal, if it has not already been
        successfully processed."""

        form = self._private_form(nonce, security, asset=asset, refid=refid)

        return await self._post(
            PATH.WITHDRAW_CANCEL, WithdrawalCancellationResponse, form=form, ctx=ctx
        )

    async def request_wallet_transfer(self,
            asset: str,
            amount: str,
            *,
            from_wallet: str="Spot Wallet",
            to_wallet: str="Futures Wallet",
            nonce: int=None,
            security: SecurityOptions=None,
            ctx: Context=None
        ) -> WalletTransferResponse:
        """Transfer from a Kraken spot wallet to a Kraken Futures wallet.

        Note:
            A transfer in the other direction must be requested through the
            Kraken Futures API.

        """

        form = self._private_form(
            nonce,
            security,
            asset=asset,
            to=to_wallet,
            amount=amount,
            **{"from": from_wallet}
        )

        return await self._post(PATH.WALLET_TRANSFER, WalletTransferResponse, form=form, ctx=ctx)

    # Earn

    async def allocate_earn_funds(self,
            strategy_id: str,
            amount: str,
            *,
            nonce: int=None,
            security: SecurityOptions=None,
            ctx: Context=None
        ) -> AllocateEarnFundsResponse:
        """Allocate funds to an earn strategy.

        Allocation is asynchronous: poll :meth:`get_allocation_status` until
        it is no longer pending.

        """

        form = self._private_form(nonce, security, amount=amount, strategy_id=strategy_id)

        return await self._post(PATH.EARN_ALLOCATE, AllocateEarnFundsResponse, form=form, ctx=ctx)

    async def deallocate_earn_funds(self,
            strategy_id: str,
            amount: str,
            *,
            nonce: int=None,
            security: SecurityOptions=None,
            ctx: Context=None
        ) -> DeallocateEarnFundsResponse:
        form = self._private_form(nonce, security, amount=amount, strategy_id=strategy_id)

        return await self._post(
            PATH.EARN_DEALLOCATE, DeallocateEarnFundsResponse, form=form, ctx=ctx
        )

    async def get_allocation_status(self,
            strategy_id: str,
            *,
            nonce: int=None,
            security: SecurityOptions=None,
            ctx: Context=None
        ) -> AllocationStatusResponse:
        """Get the status of the last allocation request."""

        form = self._private_form(nonce, security, strategy_id=strategy_id)

        return await self._post(
            PATH.EARN_ALLOCATE_STATUS, AllocationStatusResponse, form=form, ctx=ctx
        )

    async def get_deallocation_status(self,
            strategy_id: str,
            *,
            nonce: int=None,
            security: SecurityOptions=None,
            ctx: Context=None
        ) -> DeallocationStatusResponse:
        """Get the status of the last deallocation request."""

        form = self._private_form(nonce, security, strategy_id=strategy_id)

        return await self._post(
            PATH.EARN_DEALLOCATE_STATUS, DeallocationStatusResponse, form=form, ctx=ctx
        )

    async def list_earn_strategies(self,
            *,
            ascending: bool=None,
            asset: str=None,
            cursor: str=None,
            limit: int=None,
            lock_type: Sequence[Literal["flex", "bonded", "timed", "instant"]]=None,
            nonce: int=None,
            security: SecurityOptions=None,
            ctx: Context=None
        ) -> ListEarnStrategiesResponse:
        """List the earn strategies available to the account.

        Args:
            ascending: Whether to sort ascending.
            asset: Filter strategies by asset.
            cursor: The `next_cursor` of the previous page.
            limit: The number of results per page.
            lock_type: Filter strategies by lock type.

        """

        form = self._private_form(
            nonce,
            security,
            ascending=ascending,
            asset=asset,
            cursor=cursor,
            limit=limit,
            lock_type=lock_type
        )

        return await self._post(
            PATH.EARN_STRATEGIES, ListEarnStrategiesResponse, form=form, ctx=ctx
        )

    async def list_earn_allocations(self,
            *,
            ascending: bool=None,
            converted_asset: str=None,
            hide_zero_allocations: bool=None,
            nonce: int=None,
            security: SecurityOptions=None,
            ctx: Context=None
        ) -> ListEarnAllocationsResponse:
        """List all allocations of the account.

        Args:
            ascending: Whether to sort ascending.
            converted_asset: The asset used to denominate total amounts. \
                Defaults to '`USD`'.
            hide_zero_allocations: Whether to hide strategies without \
                allocation.

        """

        form = self._private_form(
            nonce,
            security,
            ascending=ascending,
            converted_asset=converted_asset,
            hide_zero_allocations=hide_zero_allocations
        )

        return await self._post(
            PATH.EARN_ALLOCATIONS, ListEarnAllocationsResponse, form=form, ctx=ctx
        )

    # Websocket

    async def get_websocket_token(self,
            *,
            nonce: int=None,
            security: SecurityOptions=None,
            ctx: Context=None
        ) -> WebsocketTokenResponse:
        """Get a token to connect to the private websocket feeds.

        The token must be used within 15 minutes of creation, but it doesn't
        expire once a connection is established.

        """

        form = self._private_form(nonce, security)

        return await self._post(PATH.WEBSOCKETS_TOKEN, WebsocketTokenResponse, form=form, ctx=ctx)

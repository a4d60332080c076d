from datetime import datetime, timezone
from typing import Dict, List

from .common import KrakenResponse, Model
from .util import auto_repr


class ServerTime(Model):

    rfc1123: str
    unixtime: int

    @property
    def time(self) -> datetime:
        return datetime.fromtimestamp(self.unixtime, tz=timezone.utc)

    def __str__(self) -> str:
        return self.rfc1123


class SystemStatus(Model):
    """The current system status or trading mode.

    Attributes:
        status (str): One of `online`, `maintenance`, `cancel_only` or
            `post_only`.
        timestamp (str): The current timestamp (RFC3339).

    """

    status: str
    timestamp: str

    def __str__(self) -> str:
        return self.status


class Asset(Model):

    aclass: str
    altname: str
    decimals: int
    display_decimals: int
    status: str

    def __str__(self) -> str:
        return self.altname


class AssetPair(Model):

    altname: str
    base: str
    quote: str
    wsname: str

    def __str__(self) -> str:
        return self.altname


class TickerInfo(Model):
    """Ticker information for a pair, using Kraken's single letter keys.

    Attributes:
        a (list[str]): Ask `[price, whole lot volume, lot volume]`.
        b (list[str]): Bid `[price, whole lot volume, lot volume]`.
        c (list[str]): Last trade closed `[price, lot volume]`.
        v (list[str]): Volume `[today, last 24 hours]`.
        p (list[str]): Volume weighted average price `[today, last 24 hours]`.
        t (list[int]): Number of trades `[today, last 24 hours]`.
        l (list[str]): Low `[today, last 24 hours]`.
        h (list[str]): High `[today, last 24 hours]`.
        o (str): Today's opening price.

    """

    a: List[str]
    b: List[str]
    c: List[str]
    o: str

    @property
    def ask(self) -> str:
        return self.a[0]

    @property
    def bid(self) -> str:
        return self.b[0]

    @property
    def last(self) -> str:
        return self.c[0]

    def __str__(self) -> str:
        return f"Bid: {self.bid}, Ask: {self.ask}, Last: {self.last}"


class Candlestick:

    """A candlestick model class.

    Attributes:
        close (str): ...
        count (int): Number of trades.
        high (str): ...
        low (str): ...
        open (str): ...
        time (:class:`~datetime.datetime`): ...
        volume (str): ...
        vwap (str): Volume weighted average price.

    """

    close: str
    count: int
    high: str
    low: str
    open: str
    time: datetime
    volume: str
    vwap: str

    def __init__(self,
    time,
    open,
    high,
    low,
    close,
    vwap,
    volume,
    count):
        self.close = close
        self.count = int(count)
        self.high = high
        self.low = low
        self.open = open
        self.time = datetime.fromtimestamp(int(time), tz=timezone.utc)
        self.volume = volume
        self.vwap = vwap

    def __repr__(self) -> str:
        return auto_repr(self)

    def __str__(self) -> str:
        return f"High: {self.high} Low: {self.low} " + \
            f"Open: {self.open} Close: {self.close}"


class OrderBookEntry:

    price: str
    timestamp: int
    volume: str

    def __init__(self, price, volume, timestamp):
        self.price = price
        self.timestamp = int(timestamp)
        self.volume = volume

    def __repr__(self) -> str:
        return auto_repr(self)


class OrderBook:

    asks: List[OrderBookEntry]
    bids: List[OrderBookEntry]

    def __init__(self, asks, bids):
        self.asks = [OrderBookEntry(*a) for a in asks]
        self.bids = [OrderBookEntry(*b) for b in bids]

    def __repr__(self) -> str:
        return auto_repr(self)


class PairSeries:
    """A per-pair series, as returned by the OHLC, trades and spread endpoints.

    Attributes:
        data (dict[str, list]): Entries keyed by pair.
        last (str): ID to be used as `since` when polling for new data.

    """

    data: Dict[str, list]
    last: str

    def __init__(self, last=None, **data):
        self.data = data
        self.last = str(last) if last is not None else None

    def __getitem__(self, pair: str) -> list:
        return self.data[pair]

    def __repr__(self) -> str:
        return auto_repr(self)


class OHLCData(PairSeries):

    data: Dict[str, List[Candlestick]]

    def __init__(self, last=None, **data):
        super().__init__(last, **{
            pair: [Candlestick(*c) for c in sticks] for pair, sticks in data.items()
        })


class ServerTimeResponse(KrakenResponse):
    result_type = ServerTime
    result: ServerTime


class SystemStatusResponse(KrakenResponse):
    result_type = SystemStatus
    result: SystemStatus


class AssetInfoResponse(KrakenResponse):
    result_type = Asset
    result_mapping = True
    result: Dict[str, Asset]


class TradableAssetPairsResponse(KrakenResponse):
    result_type = AssetPair
    result_mapping = True
    result: Dict[str, AssetPair]


class TickerInformationResponse(KrakenResponse):
    result_type = TickerInfo
    result_mapping = True
    result: Dict[str, TickerInfo]


class OHLCDataResponse(KrakenResponse):
    result_type = OHLCData
    result: OHLCData


class OrderBookResponse(KrakenResponse):
    result_type = OrderBook
    result_mapping = True
    result: Dict[str, OrderBook]


class RecentTradesResponse(KrakenResponse):
    """Trades are kept as Kraken returns them:
    `[price, volume, time, buy/sell, market/limit, miscellaneous, trade_id]`."""

    result_type = PairSeries
    result: PairSeries


class RecentSpreadsResponse(KrakenResponse):
    """Spreads are kept as Kraken returns them: `[time, bid, ask]`."""

    result_type = PairSeries
    result: PairSeries

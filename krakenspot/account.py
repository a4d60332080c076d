from pathlib import Path
from typing import AsyncIterator, Dict, List, Union

from .common import KrakenResponse, Model
from .util import auto_repr


class ExtendedBalance(Model):

    balance: str
    credit: str
    credit_used: str
    hold_trade: str

    def __str__(self) -> str:
        return self.balance


class TradeBalance(Model):
    """A summary of collateral balances, margin position valuations, equity
    and margin level.

    Attributes:
        eb (str): Equivalent balance (combined balance of all currencies).
        tb (str): Trade balance (combined balance of all equity currencies).
        m (str): Margin amount of open positions.
        n (str): Unrealized net profit/loss of open positions.
        c (str): Cost basis of open positions.
        v (str): Current floating valuation of open positions.
        e (str): Equity: `trade balance + unrealized net profit/loss`.
        mf (str): Free margin: `equity - initial margin`.
        ml (str): Margin level: `(equity / initial margin) * 100`.

    """

    eb: str
    tb: str
    e: str
    mf: str


class OrderInfo(Model):

    refid: str
    userref: int
    status: str
    opentm: float
    descr: dict
    vol: str
    vol_exec: str
    cost: str
    fee: str
    price: str

    def __str__(self) -> str:
        return self.descr.get("order", "") if isinstance(self.descr, dict) else str(self.descr)


class TradeInfo(Model):

    ordertxid: str
    pair: str
    time: float
    type: str
    ordertype: str
    price: str
    cost: str
    fee: str
    vol: str


class Position(Model):

    ordertxid: str
    pair: str
    type: str
    cost: str
    fee: str
    vol: str
    margin: str


class LedgerEntry(Model):

    refid: str
    time: float
    type: str
    asset: str
    amount: str
    fee: str
    balance: str


class TradeVolume(Model):

    currency: str
    volume: str
    fees: dict
    fees_maker: dict


class ExportReport(Model):

    id: str
    descr: str
    format: str
    report: str
    status: str
    createdtm: str

    def __str__(self) -> str:
        return self.id


class Paginated:
    """A page of entries keyed by ID, along with the total count of entries.

    Kraken wraps these pages under a different key for each endpoint
    (`closed`, `trades`, `ledger`...).

    """

    count: int
    entries: dict

    def __init__(self, entries: dict, count: int=None):
        self.count = count
        self.entries = entries

    def __len__(self) -> int:
        return len(self.entries)

    def __repr__(self) -> str:
        return auto_repr(self)


class DataExport:
    """A report being downloaded from :meth:`~krakenspot.client.Client.retrieve_data_export`.

    The HTTP body is left open, and is released once the context manager
    exits (or :meth:`close` is called).

    Examples:
        >>> async with await client.retrieve_data_export(report_id, nonce=nonce) as export:
        ...     await export.save("report.zip")

    """

    def __init__(self, report_id: str, response):
        self.raw = response
        self.report_id = report_id

    @property
    def closed(self) -> bool:
        return self.raw.closed

    @property
    def content_type(self) -> str:
        return self.raw.headers.get("Content-Type")

    async def iter_chunks(self, chunk_size: int=65536) -> AsyncIterator[bytes]:
        async for chunk in self.raw.content.iter_chunked(chunk_size):
            yield chunk

    async def read(self) -> bytes:
        """Read the whole report into memory."""

        return await self.raw.content.read()

    async def save(self, path: Union[str, Path], chunk_size: int=65536) -> Path:
        """Stream the report into a file, then release the body."""

        path = Path(path)

        try:
            with path.open("wb") as fp:
                async for chunk in self.iter_chunks(chunk_size):
                    fp.write(chunk)
        finally:
            self.close()

        return path

    def close(self) -> None:
        self.raw.close()

    async def __aenter__(self) -> "DataExport":
        return self

    async def __aexit__(self, *exc) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"<DataExport report_id='{self.report_id}' closed={self.closed}>"


class AccountBalanceResponse(KrakenResponse):
    """Balances keyed by asset, as strings (e.g. `{"ZUSD": "171288.6158"}`)."""

    result: Dict[str, str]


class ExtendedBalanceResponse(KrakenResponse):
    result_type = ExtendedBalance
    result_mapping = True
    result: Dict[str, ExtendedBalance]


class TradeBalanceResponse(KrakenResponse):
    result_type = TradeBalance
    result: TradeBalance


class OpenOrdersResponse(KrakenResponse):
    result: Paginated

    def parse_result(self, result) -> Paginated:
        return Paginated({k: OrderInfo(**v) for k, v in result["open"].items()})


class ClosedOrdersResponse(KrakenResponse):
    result: Paginated

    def parse_result(self, result) -> Paginated:
        return Paginated(
            {k: OrderInfo(**v) for k, v in result["closed"].items()},
            result.get("count")
        )


class QueryOrdersInfoResponse(KrakenResponse):
    result_type = OrderInfo
    result_mapping = True
    result: Dict[str, OrderInfo]


class TradesHistoryResponse(KrakenResponse):
    result: Paginated

    def parse_result(self, result) -> Paginated:
        return Paginated(
            {k: TradeInfo(**v) for k, v in result["trades"].items()},
            result.get("count")
        )


class QueryTradesInfoResponse(KrakenResponse):
    result_type = TradeInfo
    result_mapping = True
    result: Dict[str, TradeInfo]


class OpenPositionsResponse(KrakenResponse):
    result_type = Position
    result_mapping = True
    result: Dict[str, Position]


class LedgersInfoResponse(KrakenResponse):
    result: Paginated

    def parse_result(self, result) -> Paginated:
        return Paginated(
            {k: LedgerEntry(**v) for k, v in result["ledger"].items()},
            result.get("count")
        )


class QueryLedgersResponse(KrakenResponse):
    result_type = LedgerEntry
    result_mapping = True
    result: Dict[str, LedgerEntry]


class TradeVolumeResponse(KrakenResponse):
    result_type = TradeVolume
    result: TradeVolume


class RequestExportReportResponse(KrakenResponse):
    result_type = Model
    result: Model


class ExportReportStatusResponse(KrakenResponse):
    result_type = ExportReport
    result: List[ExportReport]


class DeleteExportReportResponse(KrakenResponse):
    result_type = Model
    result: Model

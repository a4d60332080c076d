__version__ = "0.1.0"

from .account import DataExport, ExportReport, LedgerEntry, OrderInfo, Paginated, Position, TradeBalance, TradeInfo, TradeVolume
from .auth import API_KEY_HEADER, API_SIGN_HEADER, Authorizer, Credentials, KrakenAuthorizer, PassThroughAuthorizer, sign
from .client import Client
from .common import KrakenResponse, Model, SecurityOptions
from .earn import EarnAllocation, EarnAllocations, EarnStrategies, EarnStrategy, OperationStatus
from .errors import *
from .funding import DepositAddress, DepositMethod, RecentDeposits, ReferenceID, TransferStatus, WithdrawalAddress, WithdrawalInformation, WithdrawalMethod
from .instrumentation import InstrumentedAuthorizer
from .market import Asset, AssetPair, Candlestick, OHLCData, OrderBook, OrderBookEntry, PairSeries, ServerTime, SystemStatus, TickerInfo
from .nonce import HighFrequencyNonceGenerator, NonceGenerator, UnixMillisNonceGenerator
from .trading import AddedOrder, AddedOrderBatch, CancelledOrders, DeadManSwitch, EditedOrder, OrderDescription
from .util.context import Context
from .util.enums import Endpoints, Paths
from .util.request import Request
from .websocket import WebsocketToken

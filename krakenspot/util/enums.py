from enum import Enum


class Endpoints(str, Enum):
    PRODUCTION = "https://api.kraken.com/0"


class ErrorCodes(str, Enum):
    """An Enumeration class containing the error codes returned in the `error`
    list of Kraken API responses.

    Errors are formatted as `<severity><category>:<message>`, sometimes
    followed by extra details (e.g. `EGeneral:Invalid arguments:volume`),
    which is why they are matched by prefix.

    Examples:
        Letting `resp` be a returned response from the API;

        >>> resp = {"error": ["EAPI:Invalid nonce"], "result": {}}
        >>> resp["error"][0].startswith(ErrorCodes.INVALID_NONCE)
        True

    """

    # General
    INVALID_ARGUMENTS = "EGeneral:Invalid arguments"
    PERMISSION_DENIED = "EGeneral:Permission denied"
    TOO_MANY_REQUESTS = "EGeneral:Too many requests"
    UNKNOWN_METHOD = "EGeneral:Unknown method"
    INTERNAL_ERROR = "EGeneral:Internal error"

    # Authentication
    INVALID_KEY = "EAPI:Invalid key"
    INVALID_SIGNATURE = "EAPI:Invalid signature"
    INVALID_NONCE = "EAPI:Invalid nonce"
    BAD_REQUEST = "EAPI:Bad request"
    FEATURE_DISABLED = "EAPI:Feature disabled"
    RATE_LIMIT_EXCEEDED = "EAPI:Rate limit exceeded"
    INVALID_OTP = "EAuth:Invalid OTP"  # Undocumented, returned for bad 2FA

    # Market data
    UNKNOWN_ASSET = "EQuery:Unknown asset"
    UNKNOWN_ASSET_PAIR = "EQuery:Unknown asset pair"

    # Orders
    CANNOT_OPEN_POSITION = "EOrder:Cannot open position"
    INSUFFICIENT_FUNDS = "EOrder:Insufficient funds"
    INSUFFICIENT_MARGIN = "EOrder:Insufficient margin"
    INVALID_ORDER = "EOrder:Invalid order"
    INVALID_PRICE = "EOrder:Invalid price"
    ORDER_MINIMUM_NOT_MET = "EOrder:Order minimum not met"
    ORDER_RATE_LIMIT_EXCEEDED = "EOrder:Rate limit exceeded"
    ORDERS_LIMIT_EXCEEDED = "EOrder:Orders limit exceeded"
    UNKNOWN_ORDER = "EOrder:Unknown order"

    # Funding
    UNKNOWN_REFERENCE_ID = "EFunding:Unknown reference id"
    UNKNOWN_WITHDRAW_KEY = "EFunding:Unknown withdraw key"
    INVALID_AMOUNT = "EFunding:Invalid amount"
    FUNDING_INSUFFICIENT = "EFunding:Insufficient funds"

    # Service
    SERVICE_UNAVAILABLE = "EService:Unavailable"
    SERVICE_BUSY = "EService:Busy"
    MARKET_CANCEL_ONLY = "EService:Market in cancel_only mode"
    MARKET_POST_ONLY = "EService:Market in post_only mode"
    DEADLINE_ELAPSED = "EService:Deadline elapsed"


class MimeTypes(str, Enum):
    """Media types the dispatcher knows how to handle."""

    FORM = "application/x-www-form-urlencoded"
    JSON = "application/json"
    OCTET_STREAM = "application/octet-stream"
    ZIP = "application/zip"


class Paths(str, Enum):
    """All paths available on the API, relative to the versioned base URL."""

    # Market data
    SERVER_TIME = "/public/Time"
    SYSTEM_STATUS = "/public/SystemStatus"
    ASSET_INFO = "/public/Assets"
    TRADABLE_ASSET_PAIRS = "/public/AssetPairs"
    TICKER = "/public/Ticker"
    OHLC = "/public/OHLC"
    ORDER_BOOK = "/public/Depth"
    RECENT_TRADES = "/public/Trades"
    RECENT_SPREADS = "/public/Spread"

    # Account data
    BALANCE = "/private/Balance"
    EXTENDED_BALANCE = "/private/BalanceEx"
    TRADE_BALANCE = "/private/TradeBalance"
    OPEN_ORDERS = "/private/OpenOrders"
    CLOSED_ORDERS = "/private/ClosedOrders"
    QUERY_ORDERS = "/private/QueryOrders"
    TRADES_HISTORY = "/private/TradesHistory"
    QUERY_TRADES = "/private/QueryTrades"
    OPEN_POSITIONS = "/private/OpenPositions"
    LEDGERS = "/private/Ledgers"
    QUERY_LEDGERS = "/private/QueryLedgers"
    TRADE_VOLUME = "/private/TradeVolume"
    ADD_EXPORT = "/private/AddExport"
    EXPORT_STATUS = "/private/ExportStatus"
    RETRIEVE_EXPORT = "/private/RetrieveExport"
    REMOVE_EXPORT = "/private/RemoveExport"

    # Trading
    ADD_ORDER = "/private/AddOrder"
    ADD_ORDER_BATCH = "/private/AddOrderBatch"
    EDIT_ORDER = "/private/EditOrder"
    CANCEL_ORDER = "/private/CancelOrder"
    CANCEL_ALL = "/private/CancelAll"
    CANCEL_ALL_AFTER = "/private/CancelAllOrdersAfter"
    CANCEL_ORDER_BATCH = "/private/CancelOrderBatch"

    # Funding
    DEPOSIT_METHODS = "/private/DepositMethods"
    DEPOSIT_ADDRESSES = "/private/DepositAddresses"
    DEPOSIT_STATUS = "/private/DepositStatus"
    WITHDRAW_METHODS = "/private/WithdrawMethods"
    WITHDRAW_ADDRESSES = "/private/WithdrawAddresses"
    WITHDRAW_INFO = "/private/WithdrawInfo"
    WITHDRAW = "/private/Withdraw"
    WITHDRAW_STATUS = "/private/WithdrawStatus"
    WITHDRAW_CANCEL = "/private/WithdrawCancel"
    WALLET_TRANSFER = "/private/WalletTransfer"

    # Earn
    EARN_ALLOCATE = "/private/Earn/Allocate"
    EARN_DEALLOCATE = "/private/Earn/Deallocate"
    EARN_ALLOCATE_STATUS = "/private/Earn/AllocateStatus"
    EARN_DEALLOCATE_STATUS = "/private/Earn/DeallocateStatus"
    EARN_STRATEGIES = "/private/Earn/Strategies"
    EARN_ALLOCATIONS = "/private/Earn/Allocations"

    # Websocket
    WEBSOCKETS_TOKEN = "/private/GetWebSocketsToken"

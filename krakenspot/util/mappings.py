from krakenspot.errors import *

from .enums import ErrorCodes as ERR


class Mappings:

    """A class containing some useful dictionaries.

    These shouldn't be any real reason to be using this, unless
    you've disabled :obj:`~krakenspot.client.Client.handle_errors` \
    and want to map the returned error strings yourself.

    """

    ERROR_MAPPINGS = {
        ERR.INVALID_ARGUMENTS: InvalidArguments,
        ERR.PERMISSION_DENIED: PermissionDenied,
        ERR.TOO_MANY_REQUESTS: RateLimitExceeded,
        ERR.UNKNOWN_METHOD: InvalidArguments,
        ERR.INTERNAL_ERROR: UnknownError,

        ERR.INVALID_KEY: InvalidKey,
        ERR.INVALID_SIGNATURE: InvalidSignature,
        ERR.INVALID_NONCE: InvalidNonce,
        ERR.BAD_REQUEST: InvalidArguments,
        ERR.FEATURE_DISABLED: PermissionDenied,
        ERR.RATE_LIMIT_EXCEEDED: RateLimitExceeded,
        ERR.INVALID_OTP: InvalidOTP,

        ERR.UNKNOWN_ASSET: UnknownAsset,
        ERR.UNKNOWN_ASSET_PAIR: UnknownAssetPair,

        ERR.CANNOT_OPEN_POSITION: InvalidOrder,
        ERR.INSUFFICIENT_FUNDS: InsufficientFunds,
        ERR.INSUFFICIENT_MARGIN: InsufficientFunds,
        ERR.INVALID_ORDER: InvalidOrder,
        ERR.INVALID_PRICE: InvalidOrder,
        ERR.ORDER_MINIMUM_NOT_MET: InvalidOrder,
        ERR.ORDER_RATE_LIMIT_EXCEEDED: RateLimitExceeded,
        ERR.ORDERS_LIMIT_EXCEEDED: RateLimitExceeded,
        ERR.UNKNOWN_ORDER: OrderNotFound,

        ERR.UNKNOWN_REFERENCE_ID: FundingError,
        ERR.UNKNOWN_WITHDRAW_KEY: FundingError,
        ERR.INVALID_AMOUNT: FundingError,
        ERR.FUNDING_INSUFFICIENT: InsufficientFunds,

        ERR.SERVICE_UNAVAILABLE: ServiceUnavailable,
        ERR.SERVICE_BUSY: ServiceUnavailable,
        ERR.MARKET_CANCEL_ONLY: ServiceUnavailable,
        ERR.MARKET_POST_ONLY: ServiceUnavailable,
        ERR.DEADLINE_ELAPSED: ServiceUnavailable
    }
    """dict[:class:`~krakenspot.util.enums.ErrorCodes`, \
    :exc:`~krakenspot.errors.KrakenAPIError`]"""

# Transport and pipeline errors carry the raw aiohttp response (when one was
# received) so callers can still inspect its headers.

class KrakenError(Exception):
    """The default base class for all krakenspot exceptions."""
    pass


class InvalidSecret(KrakenError):

    def __init__(self, message: str=None):
        if not message:
            message = "Could not base64 decode the provided API secret."
        super().__init__(message)


class MalformedRequest(KrakenError):
    """The request cannot be signed: no form body or no nonce in it.

    This is a caller bug (the nonce must be encoded in the form before
    authorization) and must not be retried.

    """

    def __init__(self, message: str=None):
        if not message:
            message = "Request has no form body or no nonce to sign."
        super().__init__(message)


class RequestConstructionError(KrakenError):

    def __init__(self, message: str=None):
        if not message:
            message = "Failed to forge HTTP request for Kraken API."
        super().__init__(message)


class ContextExpired(KrakenError):

    def __init__(self, message: str=None):
        if not message:
            message = "Context has expired."
        super().__init__(message)


class TransportError(KrakenError):

    def __init__(self, message: str=None):
        if not message:
            message = "Failed to process HTTP request."
        super().__init__(message)


class ResponseError(KrakenError):
    """Base class for errors raised once a response has been received.

    Attributes:
        response (:class:`aiohttp.ClientResponse`): The raw response. Its body
            has already been closed.

    """

    def __init__(self, message: str=None, *, response=None):
        self.response = response
        super().__init__(message)


class APIRequestError(ResponseError):
    """The API answered with a status other than 200.

    Attributes:
        status (int): The HTTP status code.
        body (bytes): The error body, read before the response was closed,
            or `None` if it couldn't be read.

    """

    def __init__(self, status: int, message: str=None, *, body: bytes=None, response=None):
        self.status = status
        self.body = body
        if not message:
            message = f"Unexpected status code received from Kraken API: {status}."
        super().__init__(message, response=response)


class ResponseFormatError(ResponseError):

    def __init__(self, message: str=None, *, response=None):
        if not message:
            message = "Could not decode the response Content-Type header."
        super().__init__(message, response=response)


class ResponseParseError(ResponseError):

    def __init__(self, message: str=None, *, response=None):
        if not message:
            message = "Failed to parse JSON response."
        super().__init__(message, response=response)


class UnsupportedContentType(ResponseError):

    def __init__(self, content_type: str, message: str=None, *, body: bytes=None, response=None):
        self.content_type = content_type
        self.body = body
        if not message:
            message = f"Unexpected response Content-Type '{content_type}'."
        super().__init__(message, response=response)


class ValidationException(KrakenError):

    def __init__(self, message: str):
        super().__init__(message)


# Errors returned by the exchange inside the response envelope. Only raised
# when the client is created with `handle_errors=True`.

class KrakenAPIError(KrakenError):
    """An error returned in the `error` list of a Kraken API response.

    Attributes:
        errors (list[str]): All the error strings returned with the response.

    """

    def __init__(self, message: str=None, *, errors: list=None):
        self.errors = errors or []
        if not message:
            message = "Kraken API returned an error."
        super().__init__(message)


class InvalidArguments(KrakenAPIError):

    def __init__(self, message: str=None, **kwargs):
        if not message:
            message = "Invalid arguments supplied."
        super().__init__(message, **kwargs)


class InvalidKey(KrakenAPIError):

    def __init__(self, message: str=None, **kwargs):
        if not message:
            message = "Invalid API key."
        super().__init__(message, **kwargs)


class InvalidSignature(KrakenAPIError):

    def __init__(self, message: str=None, **kwargs):
        if not message:
            message = "Incorrect signature supplied."
        super().__init__(message, **kwargs)


class InvalidNonce(KrakenAPIError):

    def __init__(self, message: str=None, **kwargs):
        if not message:
            message = "Invalid nonce."
        super().__init__(message, **kwargs)


class InvalidOTP(KrakenAPIError):

    def __init__(self, message: str=None, **kwargs):
        if not message:
            message = "Invalid or missing second factor."
        super().__init__(message, **kwargs)


class PermissionDenied(KrakenAPIError):

    def __init__(self, message: str=None, **kwargs):
        if not message:
            message = "API key doesn't have permission for this request."
        super().__init__(message, **kwargs)


class RateLimitExceeded(KrakenAPIError):

    def __init__(self, message: str=None, **kwargs):
        if not message:
            message = "Rate limit exceeded."
        super().__init__(message, **kwargs)


class InsufficientFunds(KrakenAPIError):

    def __init__(self, message: str=None, **kwargs):
        if not message:
            message = "Insufficient funds."
        super().__init__(message, **kwargs)


class InvalidOrder(KrakenAPIError):

    def __init__(self, message: str=None, **kwargs):
        if not message:
            message = "Invalid order."
        super().__init__(message, **kwargs)


class OrderNotFound(KrakenAPIError):

    def __init__(self, message: str=None, **kwargs):
        if not message:
            message = "Unknown order."
        super().__init__(message, **kwargs)


class UnknownAsset(KrakenAPIError):

    def __init__(self, message: str=None, **kwargs):
        if not message:
            message = "Unknown asset."
        super().__init__(message, **kwargs)


class UnknownAssetPair(KrakenAPIError):

    def __init__(self, message: str=None, **kwargs):
        if not message:
            message = "Unknown asset pair."
        super().__init__(message, **kwargs)


class ServiceUnavailable(KrakenAPIError):

    def __init__(self, message: str=None, **kwargs):
        if not message:
            message = "Kraken service is unavailable or busy."
        super().__init__(message, **kwargs)


class FundingError(KrakenAPIError):

    def __init__(self, message: str=None, **kwargs):
        if not message:
            message = "Funding request failed."
        super().__init__(message, **kwargs)


class UnknownError(KrakenAPIError):

    def __init__(self, message: str=None, **kwargs):
        if not message:
            message = "An unknown error occured."
        super().__init__(message, **kwargs)

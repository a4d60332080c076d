import base64
import binascii
import hashlib
import hmac
import logging
from abc import ABC, abstractmethod
from typing import Union

from .errors import InvalidSecret, MalformedRequest
from .util.context import Context
from .util.request import Request

logger = logging.getLogger(__name__)

# Headers managed by the authorizer
API_KEY_HEADER = "API-Key"
API_SIGN_HEADER = "API-Sign"


class Credentials:
    """An API key and its decoded secret.

    Args:
        key: The API key, as displayed by Kraken.
        secret: The base64 encoded secret, as displayed by Kraken when the
            key was created.

    Raises:
        InvalidSecret: The secret couldn't be base64 decoded.

    """

    __slots__ = [
        "_key",
        "_secret"
    ]

    def __init__(self, key: str, secret: str):
        try:
            decoded = base64.b64decode(secret, validate=True)
        except (binascii.Error, TypeError, ValueError) as e:
            raise InvalidSecret(
                f"Could not base64 decode provided secret for Kraken spot API: {e}"
            ) from e

        self._key = key
        self._secret = decoded

    @property
    def key(self) -> str:
        return self._key

    @property
    def secret(self) -> bytes:
        return self._secret

    def __repr__(self) -> str:
        return f"<Credentials key='{self._key}' secret=***>"


def sign(path: str, nonce: Union[int, str], body: Union[bytes, str], secret: bytes) -> str:
    """Forge the signature for a Kraken spot REST API request.

    The signature is ``base64(HMAC-SHA512(secret, path + SHA256(nonce + body)))``
    where `body` is the URL-encoded form, exactly as sent on the wire.

    Examples:
        >>> secret = base64.b64decode("dGVzdHNlY3JldA==")
        >>> sign("/0/private/Balance", 1700000000000, b"nonce=1700000000000", secret)
        'DLZh84JEMeXY62GpdT6j9VYjz5XDOT62sOmrY+eaQyLFEASBYZn34rkT6RHb7mwdvVFDxZgCL2qMDaSsPxTfVg=='

    Args:
        path: The URI path of the request, including the API version prefix.
        nonce: The nonce encoded in the form body.
        body: The encoded form body.
        secret: The decoded API secret.

    Returns:
        str: The base64 encoded signature, to be used as the `API-Sign` header.

    """

    if isinstance(body, str):
        body = body.encode()

    message = str(nonce).encode() + body
    sha = hashlib.sha256(message).digest()
    mac = hmac.new(secret, path.encode() + sha, hashlib.sha512)

    return base64.b64encode(mac.digest()).decode()


class Authorizer(ABC):
    """Interface for a component which authorizes requests to the Kraken spot REST API.

    The client hands every request it forges to its authorizer before sending
    it. Implementations can sign the request, send it unsigned to an egress
    gateway which will sign it, filter outgoing requests...

    If :meth:`authorize` raises, the request must not be sent.

    """

    @abstractmethod
    async def authorize(self, ctx: Context, request: Request) -> Request:
        """Authorize and post-process an outgoing request.

        Args:
            ctx: The call's context. Can be `None`.
            request: The request to authorize. Must not be `None`.

        Returns:
            The request to send.

        """
        ...


class PassThroughAuthorizer(Authorizer):
    """An authorizer which leaves requests untouched.

    Useful when only the public endpoints are used, or when signing is
    delegated to a proxy.

    """

    async def authorize(self, ctx: Context, request: Request) -> Request:
        if request is None:
            raise TypeError("cannot authorize request: provided request is None")

        return request


class KrakenAuthorizer(Authorizer):
    """Signs outgoing requests to private Kraken spot REST API endpoints.

    The nonce (and the optional OTP) must already be encoded in the request's
    form body: the authorizer only reads them back to forge the signature.
    Requests to public endpoints are returned as they are.

    Args:
        key: The API key used to sign requests.
        secret: The base64 encoded secret used to sign requests.

    Raises:
        InvalidSecret: The secret couldn't be base64 decoded.

    """

    def __init__(self, key: str, secret: str):
        self._credentials = Credentials(key, secret)

    @property
    def key(self) -> str:
        return self._credentials.key

    async def authorize(self, ctx: Context, request: Request) -> Request:
        """Sign the request and set the `API-Key` and `API-Sign` headers.

        Raises:
            ContextExpired: The context expired before the request was signed.
            MalformedRequest: The request has no form body, or no nonce in it.
            TypeError: `request` is `None`.

        """

        if request is None:
            raise TypeError("cannot authorize request: provided request is None")

        if ctx is not None:
            ctx.raise_if_expired("failed to authorize request")

        if "/public" in request.path:
            return request

        if request.body is None:
            raise MalformedRequest(
                f"failed to authorize request to {request.path}: request has no form body"
            )

        nonce = request.form_value("nonce")

        if nonce is None:
            raise MalformedRequest(
                f"failed to authorize request to {request.path}: no nonce in form body"
            )

        signature = sign(request.path, nonce, request.body, self._credentials.secret)

        request.headers[API_KEY_HEADER] = self._credentials.key
        request.headers[API_SIGN_HEADER] = signature

        logger.debug("Signed request to %s with nonce %s", request.path, nonce)

        return request

    def __repr__(self) -> str:
        return f"<KrakenAuthorizer key='{self._credentials.key}'>"

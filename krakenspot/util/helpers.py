import re
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Mapping, Union

from ..errors import KrakenAPIError, ValidationException
from ..util.mappings import Mappings


# RFC 7230 token characters, as accepted in media types and their parameters
_TOKEN = r"[!#$%&'*+.^_`|~0-9A-Za-z-]+"
_MEDIA_TYPE = re.compile(rf"^{_TOKEN}/{_TOKEN}$")
_PARAM_NAME = re.compile(rf"^{_TOKEN}$")


def auto_repr(obj: object) -> str:
    """A lazy '__repr__()' substitute."""
    attrs = []
    annotations = {}

    # Subclasses only carry their own annotations
    for cls in reversed(type(obj).__mro__):
        annotations.update(getattr(cls, "__annotations__", {}))

    for a in annotations.keys():
        try:
            if isinstance(getattr(obj, a), datetime):
                attrs.append(f"{a}='{getattr(obj, a)}'")
            else:
                attrs.append(f"{a}={repr(getattr(obj, a))}")

        except AttributeError:
            continue

    return f"<{type(obj).__name__} {' '.join(attrs)}>"


def clean_params(params: dict) -> dict:
    """Clean all NoneType parameters from a given dict.

    The API doesn't always require all the possible parameters to be passed
    to it when making a request, so this helper function should help to
    remove any paramaters that won't be needed.

    Note:
        This will only remove all values whose object evaluation returns True
        for `None`. In other words, all falsy values other than `None` will
        remain, so `False` is still sent as ``"false"``.

    Returns:
        dict: A clean parameter dictionary, removing all pairs with `None` values.

    """

    return {k: v for k, v in params.items() if v is not None}


def encode_value(value: Any) -> str:
    """Format a single parameter the way Kraken expects it in a query or form.

    Examples:
        >>> encode_value(True)
        'true'
        >>> encode_value(["XBTUSD", "ETHUSD"])
        'XBTUSD,ETHUSD'

    """

    if isinstance(value, Enum):
        value = value.value

    if isinstance(value, bool):
        return "true" if value else "false"

    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc).isoformat(timespec="seconds").replace("+00:00", "Z")

    if isinstance(value, (list, tuple, set)):
        return ",".join(encode_value(v) for v in value)

    return str(value)


def flatten_params(params: dict, prefix: str=None) -> dict:
    """Flatten nested mappings, and lists of mappings, into bracketed keys.

    Examples:
        >>> flatten_params({"pair": "XBTUSD", "orders": [{"type": "buy"}]})
        {'pair': 'XBTUSD', 'orders[0][type]': 'buy'}

    """

    flat = {}

    for k, v in params.items():
        key = f"{prefix}[{k}]" if prefix else str(k)

        if isinstance(v, Mapping):
            flat.update(flatten_params(v, key))
        elif isinstance(v, (list, tuple)) and v and all(isinstance(i, Mapping) for i in v):
            flat.update(flatten_params(dict(enumerate(v)), key))
        else:
            flat[key] = v

    return flat


def encode_params(params: dict) -> Dict[str, str]:
    """Flatten `params`, drop `None` values and format everything else with
    :func:`encode_value`."""

    return {k: encode_value(v) for k, v in clean_params(flatten_params(params)).items()}


def parse_media_type(content_type: str) -> str:
    """Extract the media type from a `Content-Type` header value.

    Parameters (e.g. `charset`) are validated but ignored, and the media type
    is lower-cased.

    Raises:
        ValueError: The header is missing, empty or malformed.

    """

    if not content_type:
        raise ValueError("no media type")

    media_type, *params = content_type.split(";")
    media_type = media_type.strip().lower()

    if not _MEDIA_TYPE.match(media_type):
        raise ValueError(f"invalid media type '{media_type}'")

    for p in params:
        if not p.strip():
            continue

        name, sep, _ = p.partition("=")

        if not sep or not _PARAM_NAME.match(name.strip()):
            raise ValueError(f"invalid media parameter '{p.strip()}'")

    return media_type


def raise_errors_in(content) -> None:
    """Raise the appropriate error from an API response envelope.

    Kraken returns a list of strings in the `error` field of every
    response. Entries starting with `W` are warnings and are ignored;
    the first entry starting with `E` is raised, using the exception
    mapped to its code, or :exc:`~krakenspot.errors.KrakenAPIError` if
    the code isn't known.

    Raises:
        KrakenAPIError: The default base class for all API-returned errors.

    """

    errors = list(getattr(content, "error", None) or [])

    for error in errors:
        if not error.startswith("E"):
            continue

        # Longest code first: "EQuery:Unknown asset" prefixes "...asset pair"
        for code, exc in sorted(
                Mappings.ERROR_MAPPINGS.items(), key=lambda kv: len(kv[0].value), reverse=True):
            if error.startswith(code.value):
                raise exc(error, errors=errors)

        raise KrakenAPIError(error, errors=errors)


def to_snake_case(camel: str) -> str:
    """Take a 'camelCase' string and return its 'snake_case' format.

    This is primarily used in conjunction with :py:func:`setattr()`
    when dynamically instantiating classes when interacting with the
    API.  Dashes (e.g. `status-prop`) are turned into underscores too.

    Examples:
        >>> to_snake_case("triggerTime")
        'trigger_time'
        >>> to_snake_case("status-prop")
        'status_prop'

    Args:
        camel (str): The target camelCase string to turn into snake_case.

    Returns:
        str: The snake_case equivalent of the `camel` input.

    """

    snake = ""

    for _ in camel.replace("-", "_"):
        if _.isupper():
            snake += f"_{_.lower()}"
            continue
        snake += _

    return snake.lstrip("_")


def validate_timestamp(timestamp: Union[int, str, datetime]) -> Union[int, str]:
    """Validate whether the given time will be suitable for the API.

    Kraken takes UNIX timestamps in seconds for most range filters (`start`,
    `end`, `since`...), but some of them also accept a transaction ID in
    place of a timestamp, which is passed through unchanged.

    Args:
        timestamp (Union[int, str, :obj:`~datetime.datetime`]): The value to
            be validated.

    Returns:
        Union[int, str]: A timestamp in seconds, or the given
            transaction ID.

    Raises:
        ValidationException: The int was negative.
        TypeError: The `timestamp` wasn't of the expected type.

    """
    if timestamp is None:
        return None

    if isinstance(timestamp, datetime):
        return int(timestamp.timestamp())

    if isinstance(timestamp, bool):
        raise TypeError("Invalid type. Expected 'int', 'str' or 'datetime.datetime', got 'bool'.")

    if isinstance(timestamp, int):
        if timestamp < 0:
            raise ValidationException(
                f"Invalid timestamp (received `{timestamp}`). Timestamps can't be negative."
            )
        return timestamp

    if isinstance(timestamp, str):
        return timestamp

    raise TypeError(
        f"Invalid type. Expected 'int', 'str' or 'datetime.datetime', got '{type(timestamp)}'."
    )

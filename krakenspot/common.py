from typing import Any, List

from .util.helpers import auto_repr, to_snake_case


class SecurityOptions:
    """Security options to use for a single private API call.

    Args:
        second_factor: The second factor (authenticator app code or password)
            configured for the API key.

    """

    __slots__ = ["second_factor"]

    def __init__(self, second_factor: str):
        self.second_factor = second_factor

    def __repr__(self) -> str:
        return "<SecurityOptions second_factor=***>"


class Model:
    """Base class for result models.

    Every key of the JSON object becomes a snake_case attribute.

    """

    def __init__(self, **data):
        for k in data.keys():
            setattr(self, to_snake_case(k), data[k])

    def __repr__(self) -> str:
        return auto_repr(self)


class KrakenResponse:
    """Base layout for Kraken spot REST API responses.

    Subclasses type the `result` by setting `result_type`: JSON objects are
    turned into a `result_type`, lists into a list of them and, if
    `result_mapping` is set, an object of objects (e.g. keyed by asset or
    transaction ID) into a dict of them. Without a `result_type`, the decoded
    JSON is kept as it is.

    Note:
        An empty `error` list doesn't guarantee `result` is set, and a
        response can carry warnings (entries starting with `W`) alongside a
        result.

    Attributes:
        error (list[str]): Errors returned with the response.
        result: The result of the request, if any.
        raw (:class:`aiohttp.ClientResponse`): The raw HTTP response. Its body
            has already been read and closed.

    """

    result_type = None
    result_mapping = False

    error: List[str]
    result: Any

    def __init__(self, **data):
        error = data.get("error") or []

        if not isinstance(error, list):
            raise TypeError(f"'error' must be a list, got '{type(error).__name__}'")

        self.error = error
        self.raw = None

        result = data.get("result")
        self.result = self.parse_result(result) if result is not None else None

    def parse_result(self, result: Any) -> Any:
        if self.result_type is None:
            return result

        if isinstance(result, list):
            return [self.result_type(**r) for r in result]

        if self.result_mapping:
            return {k: self.result_type(**v) for k, v in result.items()}

        return self.result_type(**result)

    def __repr__(self) -> str:
        return auto_repr(self)

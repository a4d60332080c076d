from typing import Dict, List, Optional
from urllib.parse import urlsplit


class Request:
    """A fully-formed HTTP request, ready to be authorized and sent.

    Attributes:
        method (str): The upper-cased HTTP method.
        url (str): The full URL, query string included.
        path (str): The URL path (e.g. `/0/private/Balance`). This is the
            path covered by the signature.
        headers (dict[str, str]): Request headers.
        body (bytes): The encoded form body, exactly as it will be sent.
        form (dict[str, list[str]]): The parsed form body, used to read
            back values such as the nonce.

    """

    __slots__ = [
        "body",
        "form",
        "headers",
        "method",
        "path",
        "url"
    ]

    def __init__(
        self,
        method: str,
        url: str,
        *,
        headers: Dict[str, str]=None,
        body: bytes=None,
        form: Dict[str, List[str]]=None
    ):
        self.body = body
        self.form = form or {}
        self.headers = headers or {}
        self.method = method.upper()
        self.path = urlsplit(url).path
        self.url = url

    def form_value(self, key: str) -> Optional[str]:
        """Get the first value of a form field, or `None` if it isn't set."""

        values = self.form.get(key)

        if not values:
            return None

        return values[0]

    def __repr__(self) -> str:
        # Headers and body may carry the signature and OTP; keep them out
        return f"<Request method='{self.method}' url='{self.url}'>"

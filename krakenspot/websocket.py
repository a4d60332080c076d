from .common import KrakenResponse, Model


class WebsocketToken(Model):
    """A token to authenticate private websocket feeds.

    Attributes:
        token (str): The token to pass when subscribing.
        expires (int): Seconds before the token expires if it isn't used
            to establish a connection.

    """

    token: str
    expires: int

    def __str__(self) -> str:
        return self.token

    def __repr__(self) -> str:
        return f"<WebsocketToken token=*** expires={getattr(self, 'expires', None)}>"


class WebsocketTokenResponse(KrakenResponse):
    result_type = WebsocketToken
    result: WebsocketToken

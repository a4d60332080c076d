import time
from typing import Optional

from ..errors import ContextExpired


class Context:
    """A cancellation token threaded through a single API call.

    The same context is handed to the request builder, the authorizer and the
    dispatcher. Each of them checks it before doing any work that can be
    aborted; a request which has already been sent isn't interrupted, but its
    aiohttp timeout is bounded by :meth:`remaining`.

    Examples:
        >>> ctx = Context(timeout=5)
        >>> balance = await client.get_account_balance(nonce=nonce, ctx=ctx)

    Args:
        timeout: Seconds before the context expires. `None` means it only
            expires when :meth:`cancel` is called.

    """

    __slots__ = [
        "_cancelled",
        "_deadline"
    ]

    def __init__(self, timeout: float=None):
        self._cancelled = False
        self._deadline = None

        if timeout is not None:
            self._deadline = time.monotonic() + timeout

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def expired(self) -> bool:
        """Whether the context was cancelled or its deadline has passed."""

        if self._cancelled:
            return True

        return self._deadline is not None and time.monotonic() >= self._deadline

    def cancel(self) -> None:
        self._cancelled = True

    def remaining(self) -> Optional[float]:
        """Seconds left before the deadline, or `None` without a deadline."""

        if self._deadline is None:
            return None

        return max(0.0, self._deadline - time.monotonic())

    def raise_if_expired(self, action: str) -> None:
        """Raise :exc:`~krakenspot.errors.ContextExpired` if the context has expired.

        Args:
            action: What was being attempted, used in the error message.

        """

        if self.expired:
            reason = "cancelled" if self._cancelled else "deadline exceeded"
            raise ContextExpired(f"{action}: context {reason}.")

    def __repr__(self) -> str:
        return f"<Context cancelled={self._cancelled} remaining={self.remaining()}>"

import threading
import time
from abc import ABC, abstractmethod


class NonceGenerator(ABC):
    """Produces nonces for private API calls.

    Kraken rejects a nonce lower than or equal to the last one it saw for the
    same API key, so generators must be strictly increasing across all the
    processes sharing a key.

    """

    @abstractmethod
    def generate_nonce(self) -> int:
        ...


class UnixMillisNonceGenerator(NonceGenerator):
    """Uses the number of milliseconds elapsed since the UNIX epoch.

    Warning:
        Two calls within the same millisecond return the same nonce. Use
        :class:`HighFrequencyNonceGenerator` if requests can be sent faster.

    """

    def generate_nonce(self) -> int:
        return time.time_ns() // 1_000_000


class HighFrequencyNonceGenerator(NonceGenerator):
    """A nanosecond timestamp taken once, then incremented on every call.

    Safe to share between threads and tasks. The API key must be configured
    with a nonce window large enough for nanosecond nonces.

    """

    def __init__(self):
        self._base = time.time_ns()
        self._inc = 0
        self._lock = threading.Lock()

    def generate_nonce(self) -> int:
        with self._lock:
            nonce = self._base + self._inc
            self._inc += 1

        return nonce

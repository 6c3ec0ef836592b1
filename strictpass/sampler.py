"""
strictpass.sampler
Unbiased random indices from a buffered random-byte source.

Each call pulls bytes from an internal buffer and rejects values falling in the
incomplete top range, so `next_index(n)` is exactly uniform over [0, n) even
when n does not divide 256. The buffer is refilled in batches of
RANDOM_BATCH_SIZE bytes and survives across calls.
"""

import logging
import secrets
import threading
from typing import Callable, List, Optional

logger = logging.getLogger(__name__)

RANDOM_BATCH_SIZE = 256

# fill(n) -> n uniformly random bytes
ByteSource = Callable[[int], bytes]


class IndexSampler:
    """
    Owns a byte buffer and read cursor over a random-byte source.

    >>> sampler = IndexSampler()
    >>> sampler.next_index(10)      # unbiased integer in [0, 10)
    """

    def __init__(self, source: Optional[ByteSource] = None, batch_size: int = RANDOM_BATCH_SIZE):
        if batch_size <= 0:
            raise ValueError("batch_size must be > 0")
        self.source: ByteSource = source or secrets.token_bytes
        self.batch_size = batch_size
        self._buffer = b""
        self._cursor = 0
        self._lock = threading.Lock()

    def _refill(self) -> None:
        data = bytes(self.source(self.batch_size))
        if not data:
            raise RuntimeError("random byte source returned no data")
        self._buffer = data
        self._cursor = 0
        logger.debug("refilled sampler buffer with %d bytes", len(data))

    def _next_byte(self) -> int:
        if self._cursor >= len(self._buffer):
            self._refill()
        value = self._buffer[self._cursor]
        self._cursor += 1
        return value

    def _next_uint(self, width: int) -> int:
        value = 0
        for _ in range(width):
            value = (value << 8) | self._next_byte()
        return value

    def next_index(self, max_value: int) -> int:
        """
        Uniform integer in [0, max_value).

        - Read `width` bytes, the fewest whose range 256**width covers max_value
          (one byte for any max_value <= 256).
        - Accept only values below limit = range - range % max_value.
        - Return value % max_value.
        """
        if max_value <= 0:
            raise ValueError("max_value must be > 0")

        width = 1
        while 256 ** width < max_value:
            width += 1
        span = 256 ** width
        limit = span - (span % max_value)

        with self._lock:
            value = self._next_uint(width)
            while value >= limit:
                value = self._next_uint(width)
        return value % max_value

    def next_indices(self, max_value: int, size: int) -> List[int]:
        if size < 0:
            raise ValueError("size must be >= 0")
        return [self.next_index(max_value) for _ in range(size)]


_default_sampler: Optional[IndexSampler] = None
_default_lock = threading.Lock()


def default_sampler() -> IndexSampler:
    """Lazily create (and reuse) the process-wide sampler backed by `secrets`."""
    global _default_sampler
    with _default_lock:
        if _default_sampler is None:
            _default_sampler = IndexSampler()
    return _default_sampler

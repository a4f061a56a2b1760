from __future__ import annotations

import struct

from tdcache_core.protocol import LENGTH_FMT

from .errors import TruncatedError


class ByteCursor:
    """Forward-only reader over an immutable buffer.

    - Reads never go backwards and never zero-fill.
    - A short read raises TruncatedError at the offset it started from.
    """

    def __init__(self, data: bytes):
        self._data = bytes(data)
        self._pos = 0

    @property
    def position(self) -> int:
        return self._pos

    def remaining(self) -> int:
        return len(self._data) - self._pos

    def at_end(self) -> bool:
        return self._pos >= len(self._data)

    def read_fixed(self, length: int) -> bytes:
        """Read exactly ``length`` bytes."""
        available = self.remaining()
        if length > available:
            raise TruncatedError(self._pos, length, available)
        start = self._pos
        self._pos += length
        return self._data[start:self._pos]

    def unpack(self, fmt: str) -> tuple:
        return struct.unpack(fmt, self.read_fixed(struct.calcsize(fmt)))

    def read_length_prefixed(self) -> bytes:
        """Read an i32 length then that many bytes.

        A negative length is an explicitly empty field: only the prefix is
        consumed.
        """
        (length,) = self.unpack(LENGTH_FMT)
        if length < 0:
            return b""
        return self.read_fixed(length)

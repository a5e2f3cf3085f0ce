"""A cursor over an immutable byte buffer with little-endian primitive readers."""

from __future__ import annotations

import struct


class PdbError(Exception):
    """Base class for all errors raised while reading PDB data."""


class UnexpectedEofError(PdbError, EOFError):
    """Raised when data ends before a complete value could be read."""


_U8 = struct.Struct("<B")
_U16 = struct.Struct("<H")
_I16 = struct.Struct("<h")
_U32 = struct.Struct("<I")
_I32 = struct.Struct("<i")
_U64 = struct.Struct("<Q")
_I64 = struct.Struct("<q")


class ParseBuffer:
    """Sequential reader over a block of bytes.

    ``len()`` gives the number of bytes not yet consumed.
    """

    __slots__ = ("_data", "_pos")

    def __init__(self, data: bytes | bytearray | memoryview = b"") -> None:
        self._data = bytes(data)
        self._pos = 0

    def __len__(self) -> int:
        return len(self._data) - self._pos

    def __repr__(self) -> str:
        return f"ParseBuffer(pos={self._pos}, remaining={len(self)})"

    def pos(self) -> int:
        """Return the current read position."""
        return self._pos

    def seek(self, pos: int) -> None:
        """Move the read position, clamped to the bounds of the buffer."""
        self._pos = max(0, min(pos, len(self._data)))

    def take(self, count: int) -> bytes:
        """Consume and return exactly ``count`` bytes."""
        if count < 0:
            raise ValueError("count must not be negative")
        end = self._pos + count
        if end > len(self._data):
            raise UnexpectedEofError(
                f"needed {count} bytes at offset {self._pos}, only {len(self)} left"
            )
        chunk = self._data[self._pos:end]
        self._pos = end
        return chunk

    def _unpack(self, fmt: struct.Struct) -> int:
        return fmt.unpack(self.take(fmt.size))[0]

    def parse_u8(self) -> int:
        return self._unpack(_U8)

    def parse_u16(self) -> int:
        return self._unpack(_U16)

    def parse_i16(self) -> int:
        return self._unpack(_I16)

    def parse_u32(self) -> int:
        return self._unpack(_U32)

    def parse_i32(self) -> int:
        return self._unpack(_I32)

    def parse_u64(self) -> int:
        return self._unpack(_U64)

    def parse_i64(self) -> int:
        return self._unpack(_I64)

    def parse_cstring(self) -> bytes:
        """Read a NUL-terminated string, consuming the terminator."""
        end = self._data.find(b"\0", self._pos)
        if end < 0:
            raise UnexpectedEofError("unterminated string")
        value = self._data[self._pos:end]
        self._pos = end + 1
        return value

    def parse_u8_pascal_string(self) -> bytes:
        """Read a string prefixed with a one-byte length."""
        length = self.parse_u8()
        return self.take(length)
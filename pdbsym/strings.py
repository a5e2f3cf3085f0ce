"""The global string (name) table of a PDB."""

from __future__ import annotations

import enum
import struct

from .buffer import ParseBuffer, PdbError, UnexpectedEofError

PDB_NMT_HDR = 0xEFFE_EFFE

_HEADER = struct.Struct("<III")


class StringTableHashVersion(enum.IntEnum):
    """Hash method used by the reverse lookup table after the names."""

    LONG_HASH = 1
    LONG_HASH_V2 = 2


class StringTable:
    """Maps offsets into the names buffer to their NUL-terminated strings."""

    def __init__(self, data: bytes, names_size: int, hash_version: StringTableHashVersion) -> None:
        self._data = data
        self.names_size = names_size
        self.hash_version = hash_version

    def __repr__(self) -> str:
        return (
            f"StringTable(names_size={self.names_size}, "
            f"hash_version={self.hash_version.name})"
        )

    @property
    def _names_start(self) -> int:
        return _HEADER.size

    @property
    def _names_end(self) -> int:
        return _HEADER.size + self.names_size

    @classmethod
    def parse(cls, data: bytes) -> "StringTable":
        """Parse a string table stream."""
        data = bytes(data)
        buf = ParseBuffer(data)
        magic = buf.parse_u32()
        raw_hash_version = buf.parse_u32()
        names_size = buf.parse_u32()

        if magic != PDB_NMT_HDR:
            raise PdbError("invalid string table signature")

        if len(data) < _HEADER.size + names_size:
            raise UnexpectedEofError("string table is shorter than its names buffer")

        try:
            hash_version = StringTableHashVersion(raw_hash_version)
        except ValueError:
            raise PdbError("unknown string table hash version") from None

        return cls(data, names_size, hash_version)

    def get(self, offset: int) -> bytes:
        """Return the raw string stored at ``offset`` in the names buffer."""
        if offset < 0 or offset >= self.names_size:
            raise UnexpectedEofError(f"string offset {offset} is out of bounds")
        start = self._names_start + offset
        return ParseBuffer(self._data[start:self._names_end]).parse_cstring()

    def get_string(self, offset: int) -> str:
        """Return the string at ``offset`` decoded as UTF-8, replacing bad bytes."""
        return self.get(offset).decode("utf-8", errors="replace")
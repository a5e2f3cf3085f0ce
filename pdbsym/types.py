"""Small value types shared by symbol records: indices, offsets and numeric variants."""

from __future__ import annotations

from dataclasses import dataclass

from .buffer import ParseBuffer, PdbError

LF_NUMERIC = 0x8000
LF_CHAR = 0x8000
LF_SHORT = 0x8001
LF_USHORT = 0x8002
LF_LONG = 0x8003
LF_ULONG = 0x8004
LF_QUADWORD = 0x8009
LF_UQUADWORD = 0x800A


class _Index(int):
    """An unsigned integer index of a fixed bit width."""

    __slots__ = ()
    _bits = 32

    def __new__(cls, value: int = 0) -> "_Index":
        value = int(value)
        if not 0 <= value < (1 << cls._bits):
            raise ValueError(f"{cls.__name__} out of range: {value}")
        return super().__new__(cls, value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({int(self):#x})"


class SymbolIndex(_Index):
    """Byte offset of a symbol record within its symbol stream."""

    __slots__ = ()


class TypeIndex(_Index):
    """Index of a record in the type stream."""

    __slots__ = ()


class IdIndex(_Index):
    """Index of a record in the ID stream."""

    __slots__ = ()


class FileIndex(_Index):
    """Index of a source file in a module's file checksum table."""

    __slots__ = ()


class Register(_Index):
    """A CPU register identifier."""

    __slots__ = ()
    _bits = 16


@dataclass(frozen=True)
class PdbInternalSectionOffset:
    """An offset relative to the start of a PE section."""

    offset: int = 0
    section: int = 0

    @classmethod
    def parse(cls, buf: ParseBuffer) -> "PdbInternalSectionOffset":
        """Read a 32-bit offset followed by a 16-bit section number."""
        offset = buf.parse_u32()
        section = buf.parse_u16()
        return cls(offset=offset, section=section)

    def __str__(self) -> str:
        return f"{self.section:#06x}:{self.offset:#010x}"


_VARIANT_RANGES = {
    "U8": (0, 1 << 8),
    "U16": (0, 1 << 16),
    "U32": (0, 1 << 32),
    "U64": (0, 1 << 64),
    "I8": (-(1 << 7), 1 << 7),
    "I16": (-(1 << 15), 1 << 15),
    "I32": (-(1 << 31), 1 << 31),
    "I64": (-(1 << 63), 1 << 63),
}


@dataclass(frozen=True)
class Variant:
    """A typed numeric constant; ``kind`` is one of U8..U64 or I8..I64."""

    kind: str
    value: int

    def __post_init__(self) -> None:
        try:
            low, high = _VARIANT_RANGES[self.kind]
        except KeyError:
            raise ValueError(f"unknown variant kind {self.kind!r}") from None
        if not low <= self.value < high:
            raise ValueError(f"{self.value} does not fit in {self.kind}")

    def __str__(self) -> str:
        return str(self.value)


def parse_variant(buf: ParseBuffer) -> Variant:
    """Read a numeric leaf: a small literal or a prefixed wider value."""
    leaf = buf.parse_u16()
    if leaf < LF_NUMERIC:
        return Variant("U16", leaf)
    readers = {
        LF_CHAR: ("U8", buf.parse_u8),
        LF_SHORT: ("I16", buf.parse_i16),
        LF_USHORT: ("U16", buf.parse_u16),
        LF_LONG: ("I32", buf.parse_i32),
        LF_ULONG: ("U32", buf.parse_u32),
        LF_QUADWORD: ("I64", buf.parse_i64),
        LF_UQUADWORD: ("U64", buf.parse_u64),
    }
    try:
        kind, read = readers[leaf]
    except KeyError:
        raise PdbError(f"unexpected numeric prefix {leaf:#x}") from None
    return Variant(kind, read())
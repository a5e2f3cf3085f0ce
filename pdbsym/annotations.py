"""Binary annotations: the compact line programs of inline call sites."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterator

from .buffer import ParseBuffer, PdbError
from .types import FileIndex


class BinaryAnnotationKind(enum.IntEnum):
    """Opcodes of binary annotations; opcode 0 marks the end and has no kind."""

    CODE_OFFSET = 1
    CHANGE_CODE_OFFSET_BASE = 2
    CHANGE_CODE_OFFSET = 3
    CHANGE_CODE_LENGTH = 4
    CHANGE_FILE = 5
    CHANGE_LINE_OFFSET = 6
    CHANGE_LINE_END_DELTA = 7
    CHANGE_RANGE_KIND = 8
    CHANGE_COLUMN_START = 9
    CHANGE_COLUMN_END_DELTA = 10
    CHANGE_CODE_OFFSET_AND_LINE_OFFSET = 11
    CHANGE_CODE_LENGTH_AND_CODE_OFFSET = 12
    CHANGE_COLUMN_END = 13


_EOF_OPCODE = 0

_EMITTING = frozenset(
    {
        BinaryAnnotationKind.CHANGE_CODE_OFFSET,
        BinaryAnnotationKind.CHANGE_CODE_OFFSET_AND_LINE_OFFSET,
        BinaryAnnotationKind.CHANGE_CODE_LENGTH_AND_CODE_OFFSET,
    }
)

_SIGNED = frozenset(
    {
        BinaryAnnotationKind.CHANGE_LINE_OFFSET,
        BinaryAnnotationKind.CHANGE_COLUMN_END_DELTA,
    }
)


@dataclass(frozen=True)
class BinaryAnnotation:
    """One decoded annotation: its kind and its operands."""

    kind: BinaryAnnotationKind
    operands: tuple

    def emits_line_info(self) -> bool:
        """Whether this annotation emits a line record."""
        return self.kind in _EMITTING


def decode_signed_operand(value: int) -> int:
    """Decode a signed operand whose lowest bit carries the sign."""
    magnitude = value >> 1
    return -magnitude if value & 1 else magnitude


def _uncompress(buf: ParseBuffer) -> int:
    b1 = buf.parse_u8()
    if b1 & 0x80 == 0x00:
        return b1
    b2 = buf.parse_u8()
    if b1 & 0xC0 == 0x80:
        return (b1 & 0x3F) << 8 | b2
    b3 = buf.parse_u8()
    b4 = buf.parse_u8()
    if b1 & 0xE0 == 0xC0:
        return ((b1 & 0x1F) << 24) | (b2 << 16) | (b3 << 8) | b4
    raise PdbError("invalid compressed annotation")


@dataclass(frozen=True)
class BinaryAnnotations:
    """The raw annotation bytes of a symbol; iterate to decode them."""

    data: bytes = b""

    def __init__(self, data: bytes = b"") -> None:
        object.__setattr__(self, "data", bytes(data))

    def __iter__(self) -> Iterator[BinaryAnnotation]:
        buf = ParseBuffer(self.data)
        while len(buf):
            op = _uncompress(buf)
            if op == _EOF_OPCODE:
                return
            try:
                kind = BinaryAnnotationKind(op)
            except ValueError:
                raise PdbError(f"unknown binary annotation {op}") from None

            if kind is BinaryAnnotationKind.CHANGE_CODE_OFFSET_AND_LINE_OFFSET:
                operand = _uncompress(buf)
                operands: tuple = (operand & 0xF, decode_signed_operand(operand >> 4))
            elif kind is BinaryAnnotationKind.CHANGE_CODE_LENGTH_AND_CODE_OFFSET:
                length = _uncompress(buf)
                offset = _uncompress(buf)
                operands = (length, offset)
            elif kind is BinaryAnnotationKind.CHANGE_FILE:
                operands = (FileIndex(_uncompress(buf)),)
            elif kind in _SIGNED:
                operands = (decode_signed_operand(_uncompress(buf)),)
            else:
                operands = (_uncompress(buf),)
            yield BinaryAnnotation(kind, operands)
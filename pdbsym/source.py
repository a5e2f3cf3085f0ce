"""Reading byte ranges from a seekable binary stream."""

from __future__ import annotations

import io
from dataclasses import dataclass
from typing import BinaryIO, Iterable

from .buffer import UnexpectedEofError


@dataclass(frozen=True)
class SourceSlice:
    """An offset and size within the source file."""

    offset: int
    size: int


class ReadSource:
    """Provides contiguous views of a readable, seekable binary stream."""

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream

    def __repr__(self) -> str:
        return f"ReadSource({self._stream!r})"

    def view(self, slices: Iterable[SourceSlice]) -> bytes:
        """Read every slice in order and return their bytes joined together.

        Raises :class:`UnexpectedEofError` if any slice reaches past the end
        of the stream.
        """
        out = bytearray()
        for piece in slices:
            self._stream.seek(piece.offset, io.SEEK_SET)
            out += self._read_exact(piece.size)
        return bytes(out)

    def _read_exact(self, size: int) -> bytes:
        chunks = bytearray()
        while len(chunks) < size:
            chunk = self._stream.read(size - len(chunks))
            if not chunk:
                raise UnexpectedEofError("failed to fill whole buffer")
            chunks += chunk
        return bytes(chunks)
import struct

import pytest

from pdbsym.buffer import ParseBuffer, PdbError, UnexpectedEofError


def test_symbol_kind_is_little_endian_u16():
    buf = ParseBuffer(bytes([1, 17, 0, 0]))
    assert buf.parse_u16() == 0x1101
    assert buf.pos() == 2
    assert len(buf) == 2


def test_scope_end_kind():
    buf = ParseBuffer(bytes([6, 0]))
    assert buf.parse_u16() == 0x0006
    assert len(buf) == 0


@pytest.mark.parametrize(
    "fmt, method, value",
    [
        ("<B", "parse_u8", 200),
        ("<H", "parse_u16", 0xBEEF),
        ("<h", "parse_i16", -12345),
        ("<I", "parse_u32", 0xEFFEEFFE),
        ("<i", "parse_i32", -7),
        ("<Q", "parse_u64", 2**63 + 5),
        ("<q", "parse_i64", -(2**40)),
    ],
)
def test_integer_round_trip(fmt, method, value):
    buf = ParseBuffer(struct.pack(fmt, value))
    assert getattr(buf, method)() == value
    assert len(buf) == 0


def test_short_read_raises_and_does_not_advance():
    buf = ParseBuffer(b"\x01\x02\x03")
    with pytest.raises(UnexpectedEofError):
        buf.parse_u32()
    assert buf.pos() == 0
    assert buf.parse_u16() == struct.unpack("<H", b"\x01\x02")[0]


def test_unexpected_eof_is_pdb_error_and_eof_error():
    buf = ParseBuffer(b"")
    with pytest.raises(PdbError):
        buf.parse_u8()
    with pytest.raises(EOFError):
        buf.parse_u8()


def test_cstring_consumes_terminator():
    buf = ParseBuffer(b"* CIL *\x00rest")
    assert buf.parse_cstring() == b"* CIL *"
    assert buf.take(len(buf)) == b"rest"


def test_empty_cstring():
    buf = ParseBuffer(b"\x00\x00")
    assert buf.parse_cstring() == b""
    assert len(buf) == 1


def test_unterminated_cstring_raises():
    buf = ParseBuffer(b"this")
    with pytest.raises(UnexpectedEofError):
        buf.parse_cstring()
    assert buf.pos() == 0


def test_pascal_string():
    name = b"va_list"
    buf = ParseBuffer(bytes([len(name)]) + name + b"\xff")
    assert buf.parse_u8_pascal_string() == name
    assert len(buf) == 1


def test_pascal_string_too_long_raises():
    buf = ParseBuffer(bytes([10]) + b"abc")
    with pytest.raises(UnexpectedEofError):
        buf.parse_u8_pascal_string()


def test_seek_and_clamp():
    data = bytes(range(8))
    buf = ParseBuffer(data)
    buf.seek(4)
    assert buf.take(2) == data[4:6]
    buf.seek(100)
    assert buf.pos() == len(data)
    assert len(buf) == 0
    buf.seek(-3)
    assert buf.pos() == 0


def test_take_negative_rejected():
    with pytest.raises(ValueError):
        ParseBuffer(b"abc").take(-1)


def test_take_zero_is_empty():
    buf = ParseBuffer(b"abc")
    assert buf.take(0) == b""
    assert buf.pos() == 0
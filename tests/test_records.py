import struct

import pytest

from pdbsym.buffer import ParseBuffer, UnexpectedEofError
from pdbsym.kinds import (
    S_CONSTANT,
    S_GDATA32,
    S_GTHREAD32,
    S_LDATA32,
    S_LTHREAD32,
    S_MANCONSTANT,
    S_MANYREG,
    S_MANYREG2,
    S_OBJNAME,
    S_PUB32,
    S_REGISTER,
    S_UDT,
    S_UDT_ST,
    S_UNAMESPACE,
    S_UNAMESPACE_ST,
    S_PROCREF,
    S_PROCREF_ST,
)
from pdbsym.records import (
    ConstantSymbol,
    DataSymbol,
    MultiRegisterVariableSymbol,
    ObjNameSymbol,
    PublicSymbol,
    RegisterVariableSymbol,
    ThreadStorageSymbol,
    UserDefinedTypeSymbol,
    UsingNamespaceSymbol,
    parse_optional_index,
    parse_optional_name,
    parse_symbol_name,
)
from pdbsym.types import (
    PdbInternalSectionOffset,
    Register,
    SymbolIndex,
    TypeIndex,
    Variant,
)


def body(raw):
    """Drop the two-byte kind that precedes every record body."""
    return bytes(raw[2:])


def test_kind_1101_objname():
    data = [1, 17, 0, 0, 0, 0, 42, 32, 67, 73, 76, 32, 42, 0]
    assert ObjNameSymbol.parse(body(data), S_OBJNAME) == ObjNameSymbol(
        signature=0, name=b"* CIL *"
    )


def test_kind_1106_register_variable():
    data = [6, 17, 120, 34, 0, 0, 18, 0, 116, 104, 105, 115, 0, 0]
    assert RegisterVariableSymbol.parse(body(data), S_REGISTER) == RegisterVariableSymbol(
        type_index=TypeIndex(8824), register=Register(18), name=b"this"
    )


def test_kind_110e_public():
    data = [
        14, 17, 2, 0, 0, 0, 192, 85, 0, 0, 1, 0, 95, 95, 108, 111, 99, 97, 108, 95, 115,
        116, 100, 105, 111, 95, 112, 114, 105, 110, 116, 102, 95, 111, 112, 116, 105, 111,
        110, 115, 0, 0,
    ]
    assert PublicSymbol.parse(body(data), S_PUB32) == PublicSymbol(
        code=False,
        function=True,
        managed=False,
        msil=False,
        offset=PdbInternalSectionOffset(offset=21952, section=1),
        name=b"__local_stdio_printf_options",
    )


def test_kind_1124_using_namespace():
    data = [36, 17, 115, 116, 100, 0]
    assert UsingNamespaceSymbol.parse(body(data), S_UNAMESPACE) == UsingNamespaceSymbol(
        name=b"std"
    )


def test_kind_1108_udt():
    data = [8, 17, 112, 6, 0, 0, 118, 97, 95, 108, 105, 115, 116, 0]
    assert UserDefinedTypeSymbol.parse(body(data), S_UDT) == UserDefinedTypeSymbol(
        type_index=TypeIndex(1648), name=b"va_list"
    )


def test_kind_1107_constant():
    data = [
        7, 17, 201, 18, 0, 0, 1, 0, 95, 95, 73, 83, 65, 95, 65, 86, 65, 73, 76, 65, 66, 76,
        69, 95, 83, 83, 69, 50, 0, 0,
    ]
    assert ConstantSymbol.parse(body(data), S_CONSTANT) == ConstantSymbol(
        managed=False,
        type_index=TypeIndex(4809),
        value=Variant("U16", 1),
        name=b"__ISA_AVAILABLE_SSE2",
    )


def test_managed_constant_sets_flag():
    data = [
        7, 17, 201, 18, 0, 0, 1, 0, 95, 95, 73, 83, 65, 95, 65, 86, 65, 73, 76, 65, 66, 76,
        69, 95, 83, 83, 69, 50, 0, 0,
    ]
    assert ConstantSymbol.parse(body(data), S_MANCONSTANT).managed is True


def test_kind_110d_global_data():
    data = [
        13, 17, 116, 0, 0, 0, 16, 0, 0, 0, 3, 0, 95, 95, 105, 115, 97, 95, 97, 118, 97,
        105, 108, 97, 98, 108, 101, 0, 0, 0,
    ]
    assert DataSymbol.parse(body(data), S_GDATA32) == DataSymbol(
        is_global=True,
        managed=False,
        type_index=TypeIndex(116),
        offset=PdbInternalSectionOffset(offset=16, section=3),
        name=b"__isa_available",
    )


def test_kind_110c_local_data():
    data = [
        12, 17, 32, 0, 0, 0, 240, 36, 1, 0, 2, 0, 36, 120, 100, 97, 116, 97, 115, 121, 109,
        0,
    ]
    assert DataSymbol.parse(body(data), S_LDATA32) == DataSymbol(
        is_global=False,
        managed=False,
        type_index=TypeIndex(32),
        offset=PdbInternalSectionOffset(offset=74992, section=2),
        name=b"$xdatasym",
    )


def test_st_kind_uses_pascal_name():
    data = struct.pack("<IB", 1648, 7) + b"va_list"
    assert UserDefinedTypeSymbol.parse(data, S_UDT_ST) == UserDefinedTypeSymbol(
        type_index=TypeIndex(1648), name=b"va_list"
    )


def test_multi_register_u8_count():
    data = struct.pack("<IB", 0x74, 2) + struct.pack("<H", 17) + b"hi\0" + struct.pack("<H", 18) + b"lo\0"
    symbol = MultiRegisterVariableSymbol.parse(data, S_MANYREG)
    assert symbol.type_index == TypeIndex(0x74)
    assert symbol.registers == ((Register(17), b"hi"), (Register(18), b"lo"))


def test_multi_register_u16_count():
    data = struct.pack("<IH", 0x74, 1) + struct.pack("<H", 17) + b"x\0"
    symbol = MultiRegisterVariableSymbol.parse(data, S_MANYREG2)
    assert symbol.registers == ((Register(17), b"x"),)


def test_thread_storage_global_and_local():
    data = struct.pack("<IIH", 0x30, 8, 4) + b"tls\0"
    global_sym = ThreadStorageSymbol.parse(data, S_GTHREAD32)
    local_sym = ThreadStorageSymbol.parse(data, S_LTHREAD32)
    assert global_sym.is_global is True
    assert local_sym.is_global is False
    assert global_sym.offset == PdbInternalSectionOffset(offset=8, section=4)
    assert global_sym.name == b"tls"


def test_parse_optional_index_zero_is_none():
    assert parse_optional_index(ParseBuffer(b"\0\0\0\0")) is None


def test_parse_optional_index_nonzero():
    assert parse_optional_index(ParseBuffer(struct.pack("<I", 108))) == SymbolIndex(108)


def test_parse_optional_name_st_kind_is_none():
    buf = ParseBuffer(b"abc\0")
    assert parse_optional_name(buf, S_PROCREF_ST) is None
    assert buf.pos() == 0


def test_parse_optional_name_sz_kind():
    assert parse_optional_name(ParseBuffer(b"abc\0"), S_PROCREF) == b"abc"


def test_parse_symbol_name_consumes_terminator():
    buf = ParseBuffer(b"std\0rest")
    assert parse_symbol_name(buf, S_UNAMESPACE) == b"std"
    assert buf.pos() == 4


def test_parse_symbol_name_pascal():
    buf = ParseBuffer(b"\x03stdrest")
    assert parse_symbol_name(buf, S_UNAMESPACE_ST) == b"std"
    assert len(buf) == 4


def test_truncated_record_raises():
    with pytest.raises(UnexpectedEofError):
        RegisterVariableSymbol.parse(b"\x78\x22", S_REGISTER)


def test_unterminated_name_raises():
    with pytest.raises(UnexpectedEofError):
        UsingNamespaceSymbol.parse(b"std", S_UNAMESPACE)
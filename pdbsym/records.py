"""Data-describing symbol records: registers, publics, data, constants and names."""

from __future__ import annotations

from dataclasses import dataclass

from .buffer import ParseBuffer
from .kinds import (
    S_GDATA32,
    S_GDATA32_ST,
    S_GMANDATA,
    S_GMANDATA_ST,
    S_GTHREAD32,
    S_GTHREAD32_ST,
    S_LMANDATA,
    S_LMANDATA_ST,
    S_MANCONSTANT,
    S_MANYREG2,
    S_MANYREG2_ST,
    has_pascal_name,
)
from .types import (
    PdbInternalSectionOffset,
    Register,
    SymbolIndex,
    TypeIndex,
    Variant,
    parse_variant,
)

# CV_PUBSYMFLAGS_e
CVPSF_CODE = 0x1
CVPSF_FUNCTION = 0x2
CVPSF_MANAGED = 0x4
CVPSF_MSIL = 0x8


def parse_symbol_name(buf: ParseBuffer, kind: int) -> bytes:
    """Read a name: length-prefixed for old kinds, NUL-terminated otherwise."""
    if has_pascal_name(kind):
        return buf.parse_u8_pascal_string()
    return buf.parse_cstring()


def parse_optional_name(buf: ParseBuffer, kind: int) -> bytes | None:
    """Read a NUL-terminated name; old kinds carry no name and give ``None``."""
    if has_pascal_name(kind):
        return None
    return buf.parse_cstring()


def parse_optional_index(buf: ParseBuffer) -> SymbolIndex | None:
    """Read a symbol index where zero means "none"."""
    value = buf.parse_u32()
    return SymbolIndex(value) if value else None


def _type_index(buf: ParseBuffer) -> TypeIndex:
    return TypeIndex(buf.parse_u32())


def _register(buf: ParseBuffer) -> Register:
    return Register(buf.parse_u16())


@dataclass(frozen=True)
class RegisterVariableSymbol:
    """A register variable (``S_REGISTER``, ``S_REGISTER_ST``)."""

    type_index: TypeIndex
    register: Register
    name: bytes

    @classmethod
    def parse(cls, data: bytes, kind: int) -> "RegisterVariableSymbol":
        buf = ParseBuffer(data)
        return cls(
            type_index=_type_index(buf),
            register=_register(buf),
            name=parse_symbol_name(buf, kind),
        )


@dataclass(frozen=True)
class MultiRegisterVariableSymbol:
    """A variable spanning several registers, most significant first."""

    type_index: TypeIndex
    registers: tuple[tuple[Register, bytes], ...]

    @classmethod
    def parse(cls, data: bytes, kind: int) -> "MultiRegisterVariableSymbol":
        buf = ParseBuffer(data)
        type_index = _type_index(buf)
        if kind in (S_MANYREG2, S_MANYREG2_ST):
            count = buf.parse_u16()
        else:
            count = buf.parse_u8()
        registers = tuple(
            (_register(buf), parse_symbol_name(buf, kind)) for _ in range(count)
        )
        return cls(type_index=type_index, registers=registers)


@dataclass(frozen=True)
class PublicSymbol:
    """A public symbol with a mangled name (``S_PUB32``, ``S_PUB32_ST``)."""

    code: bool
    function: bool
    managed: bool
    msil: bool
    offset: PdbInternalSectionOffset
    name: bytes

    @classmethod
    def parse(cls, data: bytes, kind: int) -> "PublicSymbol":
        buf = ParseBuffer(data)
        flags = buf.parse_u32()
        return cls(
            code=bool(flags & CVPSF_CODE),
            function=bool(flags & CVPSF_FUNCTION),
            managed=bool(flags & CVPSF_MANAGED),
            msil=bool(flags & CVPSF_MSIL),
            offset=PdbInternalSectionOffset.parse(buf),
            name=parse_symbol_name(buf, kind),
        )


@dataclass(frozen=True)
class DataSymbol:
    """Static data such as a global variable, local or global, managed or not."""

    is_global: bool
    managed: bool
    type_index: TypeIndex
    offset: PdbInternalSectionOffset
    name: bytes

    @classmethod
    def parse(cls, data: bytes, kind: int) -> "DataSymbol":
        buf = ParseBuffer(data)
        return cls(
            is_global=kind in (S_GDATA32, S_GDATA32_ST, S_GMANDATA, S_GMANDATA_ST),
            managed=kind in (S_LMANDATA, S_LMANDATA_ST, S_GMANDATA, S_GMANDATA_ST),
            type_index=_type_index(buf),
            offset=PdbInternalSectionOffset.parse(buf),
            name=parse_symbol_name(buf, kind),
        )


@dataclass(frozen=True)
class ConstantSymbol:
    """A named constant value (``S_CONSTANT``, ``S_CONSTANT_ST``, ``S_MANCONSTANT``)."""

    managed: bool
    type_index: TypeIndex
    value: Variant
    name: bytes

    @classmethod
    def parse(cls, data: bytes, kind: int) -> "ConstantSymbol":
        buf = ParseBuffer(data)
        return cls(
            managed=kind == S_MANCONSTANT,
            type_index=_type_index(buf),
            value=parse_variant(buf),
            name=parse_symbol_name(buf, kind),
        )


@dataclass(frozen=True)
class UserDefinedTypeSymbol:
    """A user defined type name (``S_UDT``, ``S_UDT_ST``, ``S_COBOLUDT``...)."""

    type_index: TypeIndex
    name: bytes

    @classmethod
    def parse(cls, data: bytes, kind: int) -> "UserDefinedTypeSymbol":
        buf = ParseBuffer(data)
        return cls(type_index=_type_index(buf), name=parse_symbol_name(buf, kind))


@dataclass(frozen=True)
class ThreadStorageSymbol:
    """A thread-local variable, local or global."""

    is_global: bool
    type_index: TypeIndex
    offset: PdbInternalSectionOffset
    name: bytes

    @classmethod
    def parse(cls, data: bytes, kind: int) -> "ThreadStorageSymbol":
        buf = ParseBuffer(data)
        return cls(
            is_global=kind in (S_GTHREAD32, S_GTHREAD32_ST),
            type_index=_type_index(buf),
            offset=PdbInternalSectionOffset.parse(buf),
            name=parse_symbol_name(buf, kind),
        )


@dataclass(frozen=True)
class UsingNamespaceSymbol:
    """A using namespace directive (``S_UNAMESPACE``, ``S_UNAMESPACE_ST``)."""

    name: bytes

    @classmethod
    def parse(cls, data: bytes, kind: int) -> "UsingNamespaceSymbol":
        buf = ParseBuffer(data)
        return cls(name=parse_symbol_name(buf, kind))


@dataclass(frozen=True)
class ObjNameSymbol:
    """Path of the object file of a module (``S_OBJNAME``, ``S_OBJNAME_ST``)."""

    signature: int
    name: bytes

    @classmethod
    def parse(cls, data: bytes, kind: int) -> "ObjNameSymbol":
        buf = ParseBuffer(data)
        return cls(signature=buf.parse_u32(), name=parse_symbol_name(buf, kind))
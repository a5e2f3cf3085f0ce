# pdbsym

`pdbsym` decodes pieces of the debug information found in PDB files. It uses only the
standard library. It provides:

- `pdbsym.buffer`: `ParseBuffer`, a little-endian reader over bytes, and the errors
  `PdbError` and `UnexpectedEofError`;
- `pdbsym.source`: `ReadSource` and `SourceSlice`, for reading byte ranges from a
  seekable binary stream;
- `pdbsym.strings`: `StringTable`, the global name table;
- `pdbsym.annotations`: `BinaryAnnotations`, the line programs of inline call sites;
- `pdbsym.kinds`: the numeric symbol kinds (`S_GPROC32`, `S_UDT`, ...), with
  `kind_name()` and `has_pascal_name()`;
- `pdbsym.types`: index types (`SymbolIndex`, `TypeIndex`, `IdIndex`, `FileIndex`,
  `Register`), `PdbInternalSectionOffset`, and numeric constants (`Variant`,
  `parse_variant()`);
- `pdbsym.records`: decoders for data-describing symbol records.

## Installation

```
pip install .
```

Python 3.10 or newer is required.

## Reading from files

```python
from pdbsym.source import ReadSource, SourceSlice

with open("example.pdb", "rb") as fh:
    source = ReadSource(fh)
    page = source.view([SourceSlice(offset=0, size=4096)])
```

The slices are read in the order given and joined into one `bytes` value. A slice that
runs past the end of the stream raises `UnexpectedEofError`.

## String table

```python
from pdbsym.strings import StringTable

strings = StringTable.parse(names_stream_bytes)
raw = strings.get(offset)           # bytes, up to the NUL terminator
text = strings.get_string(offset)   # decoded as UTF-8, bad bytes replaced
```

`parse()` raises `PdbError` for a wrong signature or an unknown hash version, and
`UnexpectedEofError` when the stream is shorter than its names buffer. An offset outside
the names buffer raises `UnexpectedEofError`.

## Symbol records

Each record class in `pdbsym.records` has a `parse(data, kind)` class method. `data` is the
record body that follows the two-byte kind, and `kind` is that kind. Kinds below
`S_ST_MAX` store names with a one-byte length prefix; later kinds use NUL-terminated names.

```python
from pdbsym.kinds import S_UDT, kind_name
from pdbsym.records import UserDefinedTypeSymbol

udt = UserDefinedTypeSymbol.parse(b"\x70\x06\x00\x00va_list\x00", S_UDT)
# UserDefinedTypeSymbol(type_index=TypeIndex(0x670), name=b'va_list')
kind_name(S_UDT)  # "S_UDT"
```

The classes are `RegisterVariableSymbol`, `MultiRegisterVariableSymbol`, `PublicSymbol`,
`DataSymbol`, `ConstantSymbol`, `UserDefinedTypeSymbol`, `ThreadStorageSymbol`,
`UsingNamespaceSymbol` and `ObjNameSymbol`. Names are returned as raw `bytes`.

## Inline-site line programs

```python
from pdbsym.annotations import BinaryAnnotations

for annotation in BinaryAnnotations(b"\x0b\x03\x06\n\x00"):
    print(annotation.kind.name, annotation.operands, annotation.emits_line_info())
# CHANGE_CODE_OFFSET_AND_LINE_OFFSET (3, 0) True
# CHANGE_LINE_OFFSET (5,) False
```

Decoding stops at opcode 0 or at the end of the data. An unknown opcode or a badly
compressed number raises `PdbError`.

## What it does not do

`pdbsym` does not walk a whole symbol stream, and it has no single entry point that picks
the decoder for a record from its kind. It does not decode procedures, blocks, labels,
thunks, inline sites, references, trampolines, exports, locals, build info, separated code
or compile-flag records, nor the procedure, local-variable and export flag words. It does
not open PDB files or follow their multi-stream layout; the caller supplies the bytes of
each stream. There is no command-line tool.

## Running the tests

```
pip install .[test]
pytest
```
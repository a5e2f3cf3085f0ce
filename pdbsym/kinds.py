"""Numeric kinds of CodeView symbol records."""

from __future__ import annotations

_NAMES: dict[int, str] = {}


def _kind(name: str, value: int) -> int:
    _NAMES[value] = name
    return value


S_COMPILE = _kind("S_COMPILE", 0x0001)
S_REGISTER_16t = _kind("S_REGISTER_16t", 0x0002)
S_CONSTANT_16t = _kind("S_CONSTANT_16t", 0x0003)
S_UDT_16t = _kind("S_UDT_16t", 0x0004)
S_SSEARCH = _kind("S_SSEARCH", 0x0005)
S_END = _kind("S_END", 0x0006)
S_SKIP = _kind("S_SKIP", 0x0007)
S_CVRESERVE = _kind("S_CVRESERVE", 0x0008)
S_OBJNAME_ST = _kind("S_OBJNAME_ST", 0x0009)
S_ENDARG = _kind("S_ENDARG", 0x000A)
S_COBOLUDT_16t = _kind("S_COBOLUDT_16t", 0x000B)
S_MANYREG_16t = _kind("S_MANYREG_16t", 0x000C)
S_RETURN = _kind("S_RETURN", 0x000D)
S_ENTRYTHIS = _kind("S_ENTRYTHIS", 0x000E)

S_BPREL16 = _kind("S_BPREL16", 0x0100)
S_LDATA16 = _kind("S_LDATA16", 0x0101)
S_GDATA16 = _kind("S_GDATA16", 0x0102)
S_PUB16 = _kind("S_PUB16", 0x0103)
S_LPROC16 = _kind("S_LPROC16", 0x0104)
S_GPROC16 = _kind("S_GPROC16", 0x0105)
S_THUNK16 = _kind("S_THUNK16", 0x0106)
S_BLOCK16 = _kind("S_BLOCK16", 0x0107)
S_WITH16 = _kind("S_WITH16", 0x0108)
S_LABEL16 = _kind("S_LABEL16", 0x0109)
S_CEXMODEL16 = _kind("S_CEXMODEL16", 0x010A)
S_VFTABLE16 = _kind("S_VFTABLE16", 0x010B)
S_REGREL16 = _kind("S_REGREL16", 0x010C)

S_BPREL32_16t = _kind("S_BPREL32_16t", 0x0200)
S_LDATA32_16t = _kind("S_LDATA32_16t", 0x0201)
S_GDATA32_16t = _kind("S_GDATA32_16t", 0x0202)
S_PUB32_16t = _kind("S_PUB32_16t", 0x0203)
S_LPROC32_16t = _kind("S_LPROC32_16t", 0x0204)
S_GPROC32_16t = _kind("S_GPROC32_16t", 0x0205)
S_THUNK32_ST = _kind("S_THUNK32_ST", 0x0206)
S_BLOCK32_ST = _kind("S_BLOCK32_ST", 0x0207)
S_WITH32_ST = _kind("S_WITH32_ST", 0x0208)
S_LABEL32_ST = _kind("S_LABEL32_ST", 0x0209)
S_CEXMODEL32 = _kind("S_CEXMODEL32", 0x020A)
S_VFTABLE32_16t = _kind("S_VFTABLE32_16t", 0x020B)
S_REGREL32_16t = _kind("S_REGREL32_16t", 0x020C)
S_LTHREAD32_16t = _kind("S_LTHREAD32_16t", 0x020D)
S_GTHREAD32_16t = _kind("S_GTHREAD32_16t", 0x020E)
S_SLINK32 = _kind("S_SLINK32", 0x020F)

S_LPROCMIPS_16t = _kind("S_LPROCMIPS_16t", 0x0300)
S_GPROCMIPS_16t = _kind("S_GPROCMIPS_16t", 0x0301)

S_PROCREF_ST = _kind("S_PROCREF_ST", 0x0400)
S_DATAREF_ST = _kind("S_DATAREF_ST", 0x0401)
S_ALIGN = _kind("S_ALIGN", 0x0402)
S_LPROCREF_ST = _kind("S_LPROCREF_ST", 0x0403)
S_OEM = _kind("S_OEM", 0x0404)

# Records with 32-bit type indices all have the 0x1000 bit set.
S_TI16_MAX = _kind("S_TI16_MAX", 0x1000)

S_REGISTER_ST = _kind("S_REGISTER_ST", 0x1001)
S_CONSTANT_ST = _kind("S_CONSTANT_ST", 0x1002)
S_UDT_ST = _kind("S_UDT_ST", 0x1003)
S_COBOLUDT_ST = _kind("S_COBOLUDT_ST", 0x1004)
S_MANYREG_ST = _kind("S_MANYREG_ST", 0x1005)
S_BPREL32_ST = _kind("S_BPREL32_ST", 0x1006)
S_LDATA32_ST = _kind("S_LDATA32_ST", 0x1007)
S_GDATA32_ST = _kind("S_GDATA32_ST", 0x1008)
S_PUB32_ST = _kind("S_PUB32_ST", 0x1009)
S_LPROC32_ST = _kind("S_LPROC32_ST", 0x100A)
S_GPROC32_ST = _kind("S_GPROC32_ST", 0x100B)
S_VFTABLE32 = _kind("S_VFTABLE32", 0x100C)
S_REGREL32_ST = _kind("S_REGREL32_ST", 0x100D)
S_LTHREAD32_ST = _kind("S_LTHREAD32_ST", 0x100E)
S_GTHREAD32_ST = _kind("S_GTHREAD32_ST", 0x100F)

S_LPROCMIPS_ST = _kind("S_LPROCMIPS_ST", 0x1010)
S_GPROCMIPS_ST = _kind("S_GPROCMIPS_ST", 0x1011)

S_FRAMEPROC = _kind("S_FRAMEPROC", 0x1012)
S_COMPILE2_ST = _kind("S_COMPILE2_ST", 0x1013)

S_MANYREG2_ST = _kind("S_MANYREG2_ST", 0x1014)
S_LPROCIA64_ST = _kind("S_LPROCIA64_ST", 0x1015)
S_GPROCIA64_ST = _kind("S_GPROCIA64_ST", 0x1016)

S_LOCALSLOT_ST = _kind("S_LOCALSLOT_ST", 0x1017)
S_PARAMSLOT_ST = _kind("S_PARAMSLOT_ST", 0x1018)

S_ANNOTATION = _kind("S_ANNOTATION", 0x1019)

S_GMANPROC_ST = _kind("S_GMANPROC_ST", 0x101A)
S_LMANPROC_ST = _kind("S_LMANPROC_ST", 0x101B)
S_RESERVED1 = _kind("S_RESERVED1", 0x101C)
S_RESERVED2 = _kind("S_RESERVED2", 0x101D)
S_RESERVED3 = _kind("S_RESERVED3", 0x101E)
S_RESERVED4 = _kind("S_RESERVED4", 0x101F)
S_LMANDATA_ST = _kind("S_LMANDATA_ST", 0x1020)
S_GMANDATA_ST = _kind("S_GMANDATA_ST", 0x1021)
S_MANFRAMEREL_ST = _kind("S_MANFRAMEREL_ST", 0x1022)
S_MANREGISTER_ST = _kind("S_MANREGISTER_ST", 0x1023)
S_MANSLOT_ST = _kind("S_MANSLOT_ST", 0x1024)
S_MANMANYREG_ST = _kind("S_MANMANYREG_ST", 0x1025)
S_MANREGREL_ST = _kind("S_MANREGREL_ST", 0x1026)
S_MANMANYREG2_ST = _kind("S_MANMANYREG2_ST", 0x1027)
S_MANTYPREF = _kind("S_MANTYPREF", 0x1028)
S_UNAMESPACE_ST = _kind("S_UNAMESPACE_ST", 0x1029)

# Records from here on carry NUL-terminated UTF-8 names.
S_ST_MAX = _kind("S_ST_MAX", 0x1100)

S_OBJNAME = _kind("S_OBJNAME", 0x1101)
S_THUNK32 = _kind("S_THUNK32", 0x1102)
S_BLOCK32 = _kind("S_BLOCK32", 0x1103)
S_WITH32 = _kind("S_WITH32", 0x1104)
S_LABEL32 = _kind("S_LABEL32", 0x1105)
S_REGISTER = _kind("S_REGISTER", 0x1106)
S_CONSTANT = _kind("S_CONSTANT", 0x1107)
S_UDT = _kind("S_UDT", 0x1108)
S_COBOLUDT = _kind("S_COBOLUDT", 0x1109)
S_MANYREG = _kind("S_MANYREG", 0x110A)
S_BPREL32 = _kind("S_BPREL32", 0x110B)
S_LDATA32 = _kind("S_LDATA32", 0x110C)
S_GDATA32 = _kind("S_GDATA32", 0x110D)
S_PUB32 = _kind("S_PUB32", 0x110E)
S_LPROC32 = _kind("S_LPROC32", 0x110F)
S_GPROC32 = _kind("S_GPROC32", 0x1110)
S_REGREL32 = _kind("S_REGREL32", 0x1111)
S_LTHREAD32 = _kind("S_LTHREAD32", 0x1112)
S_GTHREAD32 = _kind("S_GTHREAD32", 0x1113)

S_LPROCMIPS = _kind("S_LPROCMIPS", 0x1114)
S_GPROCMIPS = _kind("S_GPROCMIPS", 0x1115)
S_COMPILE2 = _kind("S_COMPILE2", 0x1116)
S_MANYREG2 = _kind("S_MANYREG2", 0x1117)
S_LPROCIA64 = _kind("S_LPROCIA64", 0x1118)
S_GPROCIA64 = _kind("S_GPROCIA64", 0x1119)
S_LOCALSLOT = _kind("S_LOCALSLOT", 0x111A)
S_PARAMSLOT = _kind("S_PARAMSLOT", 0x111B)

S_LMANDATA = _kind("S_LMANDATA", 0x111C)
S_GMANDATA = _kind("S_GMANDATA", 0x111D)
S_MANFRAMEREL = _kind("S_MANFRAMEREL", 0x111E)
S_MANREGISTER = _kind("S_MANREGISTER", 0x111F)
S_MANSLOT = _kind("S_MANSLOT", 0x1120)
S_MANMANYREG = _kind("S_MANMANYREG", 0x1121)
S_MANREGREL = _kind("S_MANREGREL", 0x1122)
S_MANMANYREG2 = _kind("S_MANMANYREG2", 0x1123)
S_UNAMESPACE = _kind("S_UNAMESPACE", 0x1124)

S_PROCREF = _kind("S_PROCREF", 0x1125)
S_DATAREF = _kind("S_DATAREF", 0x1126)
S_LPROCREF = _kind("S_LPROCREF", 0x1127)
S_ANNOTATIONREF = _kind("S_ANNOTATIONREF", 0x1128)
S_TOKENREF = _kind("S_TOKENREF", 0x1129)

S_GMANPROC = _kind("S_GMANPROC", 0x112A)
S_LMANPROC = _kind("S_LMANPROC", 0x112B)

S_TRAMPOLINE = _kind("S_TRAMPOLINE", 0x112C)
S_MANCONSTANT = _kind("S_MANCONSTANT", 0x112D)

S_ATTR_FRAMEREL = _kind("S_ATTR_FRAMEREL", 0x112E)
S_ATTR_REGISTER = _kind("S_ATTR_REGISTER", 0x112F)
S_ATTR_REGREL = _kind("S_ATTR_REGREL", 0x1130)
S_ATTR_MANYREG = _kind("S_ATTR_MANYREG", 0x1131)

S_SEPCODE = _kind("S_SEPCODE", 0x1132)

S_LOCAL_2005 = _kind("S_LOCAL_2005", 0x1133)
S_DEFRANGE_2005 = _kind("S_DEFRANGE_2005", 0x1134)
S_DEFRANGE2_2005 = _kind("S_DEFRANGE2_2005", 0x1135)

S_SECTION = _kind("S_SECTION", 0x1136)
S_COFFGROUP = _kind("S_COFFGROUP", 0x1137)
S_EXPORT = _kind("S_EXPORT", 0x1138)

S_CALLSITEINFO = _kind("S_CALLSITEINFO", 0x1139)
S_FRAMECOOKIE = _kind("S_FRAMECOOKIE", 0x113A)

S_DISCARDED = _kind("S_DISCARDED", 0x113B)

S_COMPILE3 = _kind("S_COMPILE3", 0x113C)
S_ENVBLOCK = _kind("S_ENVBLOCK", 0x113D)

S_LOCAL = _kind("S_LOCAL", 0x113E)
S_DEFRANGE = _kind("S_DEFRANGE", 0x113F)
S_DEFRANGE_SUBFIELD = _kind("S_DEFRANGE_SUBFIELD", 0x1140)

S_DEFRANGE_REGISTER = _kind("S_DEFRANGE_REGISTER", 0x1141)
S_DEFRANGE_FRAMEPOINTER_REL = _kind("S_DEFRANGE_FRAMEPOINTER_REL", 0x1142)
S_DEFRANGE_SUBFIELD_REGISTER = _kind("S_DEFRANGE_SUBFIELD_REGISTER", 0x1143)
S_DEFRANGE_FRAMEPOINTER_REL_FULL_SCOPE = _kind(
    "S_DEFRANGE_FRAMEPOINTER_REL_FULL_SCOPE", 0x1144
)
S_DEFRANGE_REGISTER_REL = _kind("S_DEFRANGE_REGISTER_REL", 0x1145)

S_LPROC32_ID = _kind("S_LPROC32_ID", 0x1146)
S_GPROC32_ID = _kind("S_GPROC32_ID", 0x1147)
S_LPROCMIPS_ID = _kind("S_LPROCMIPS_ID", 0x1148)
S_GPROCMIPS_ID = _kind("S_GPROCMIPS_ID", 0x1149)
S_LPROCIA64_ID = _kind("S_LPROCIA64_ID", 0x114A)
S_GPROCIA64_ID = _kind("S_GPROCIA64_ID", 0x114B)

S_BUILDINFO = _kind("S_BUILDINFO", 0x114C)
S_INLINESITE = _kind("S_INLINESITE", 0x114D)
S_INLINESITE_END = _kind("S_INLINESITE_END", 0x114E)
S_PROC_ID_END = _kind("S_PROC_ID_END", 0x114F)

S_DEFRANGE_HLSL = _kind("S_DEFRANGE_HLSL", 0x1150)
S_GDATA_HLSL = _kind("S_GDATA_HLSL", 0x1151)
S_LDATA_HLSL = _kind("S_LDATA_HLSL", 0x1152)

S_FILESTATIC = _kind("S_FILESTATIC", 0x1153)

S_LOCAL_DPC_GROUPSHARED = _kind("S_LOCAL_DPC_GROUPSHARED", 0x1154)
S_LPROC32_DPC = _kind("S_LPROC32_DPC", 0x1155)
S_LPROC32_DPC_ID = _kind("S_LPROC32_DPC_ID", 0x1156)
S_DEFRANGE_DPC_PTR_TAG = _kind("S_DEFRANGE_DPC_PTR_TAG", 0x1157)
S_DPC_SYM_TAG_MAP = _kind("S_DPC_SYM_TAG_MAP", 0x1158)

S_ARMSWITCHTABLE = _kind("S_ARMSWITCHTABLE", 0x1159)
S_CALLEES = _kind("S_CALLEES", 0x115A)
S_CALLERS = _kind("S_CALLERS", 0x115B)
S_POGODATA = _kind("S_POGODATA", 0x115C)
S_INLINESITE2 = _kind("S_INLINESITE2", 0x115D)

S_HEAPALLOCSITE = _kind("S_HEAPALLOCSITE", 0x115E)

S_MOD_TYPEREF = _kind("S_MOD_TYPEREF", 0x115F)

S_REF_MINIPDB = _kind("S_REF_MINIPDB", 0x1160)
S_PDBMAP = _kind("S_PDBMAP", 0x1161)

S_GDATA_HLSL32 = _kind("S_GDATA_HLSL32", 0x1162)
S_LDATA_HLSL32 = _kind("S_LDATA_HLSL32", 0x1163)

S_GDATA_HLSL32_EX = _kind("S_GDATA_HLSL32_EX", 0x1164)
S_LDATA_HLSL32_EX = _kind("S_LDATA_HLSL32_EX", 0x1165)

S_FASTLINK = _kind("S_FASTLINK", 0x1167)
S_INLINEES = _kind("S_INLINEES", 0x1168)


def kind_name(kind: int) -> str:
    """Return the name of a symbol kind, such as ``"S_GPROC32"``.

    Raises :class:`ValueError` for a kind that is not known.
    """
    try:
        return _NAMES[kind]
    except KeyError:
        raise ValueError(f"unknown symbol kind {kind:#06x}") from None


def has_pascal_name(kind: int) -> bool:
    """Whether records of this kind store names with a one-byte length prefix."""
    return kind < S_ST_MAX
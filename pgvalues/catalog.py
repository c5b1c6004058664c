"""Catalog of the PostgreSQL types that are built into the server."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional


class KindTag(enum.Enum):
    """Shape of a built-in type."""

    SIMPLE = "simple"
    PSEUDO = "pseudo"
    ARRAY = "array"
    RANGE = "range"


@dataclass(frozen=True)
class BuiltinEntry:
    """One built-in type: its constant name, OID, server name and kind.

    ``element`` is the OID of the member type for arrays and ranges and
    ``None`` for every other kind.
    """

    constant: str
    oid: int
    name: str
    kind: KindTag
    element: Optional[int] = None

    @property
    def element_entry(self) -> Optional["BuiltinEntry"]:
        """The catalog entry of the member type, if there is one."""
        if self.element is None:
            return None
        return _BY_OID[self.element]


_S = KindTag.SIMPLE
_P = KindTag.PSEUDO
_A = KindTag.ARRAY
_R = KindTag.RANGE

_ROWS: tuple[tuple, ...] = (
    ("BOOL", 16, "bool", _S),
    ("BYTEA", 17, "bytea", _S),
    ("CHAR", 18, "char", _S),
    ("NAME", 19, "name", _S),
    ("INT8", 20, "int8", _S),
    ("INT2", 21, "int2", _S),
    ("INT2_VECTOR", 22, "int2vector", _A, 21),
    ("INT4", 23, "int4", _S),
    ("REGPROC", 24, "regproc", _S),
    ("TEXT", 25, "text", _S),
    ("OID", 26, "oid", _S),
    ("TID", 27, "tid", _S),
    ("XID", 28, "xid", _S),
    ("CID", 29, "cid", _S),
    ("OID_VECTOR", 30, "oidvector", _A, 26),
    ("PG_DDL_COMMAND", 32, "pg_ddl_command", _P),
    ("JSON", 114, "json", _S),
    ("XML", 142, "xml", _S),
    ("XML_ARRAY", 143, "_xml", _A, 142),
    ("PG_NODE_TREE", 194, "pg_node_tree", _S),
    ("JSON_ARRAY", 199, "_json", _A, 114),
    ("TABLE_AM_HANDLER", 269, "table_am_handler", _P),
    ("XID8_ARRAY", 271, "_xid8", _A, 5069),
    ("INDEX_AM_HANDLER", 325, "index_am_handler", _P),
    ("POINT", 600, "point", _S),
    ("LSEG", 601, "lseg", _S),
    ("PATH", 602, "path", _S),
    ("BOX", 603, "box", _S),
    ("POLYGON", 604, "polygon", _S),
    ("LINE", 628, "line", _S),
    ("LINE_ARRAY", 629, "_line", _A, 628),
    ("CIDR", 650, "cidr", _S),
    ("CIDR_ARRAY", 651, "_cidr", _A, 650),
    ("FLOAT4", 700, "float4", _S),
    ("FLOAT8", 701, "float8", _S),
    ("UNKNOWN", 705, "unknown", _S),
    ("CIRCLE", 718, "circle", _S),
    ("CIRCLE_ARRAY", 719, "_circle", _A, 718),
    ("MACADDR8", 774, "macaddr8", _S),
    ("MACADDR8_ARRAY", 775, "_macaddr8", _A, 774),
    ("MONEY", 790, "money", _S),
    ("MONEY_ARRAY", 791, "_money", _A, 790),
    ("MACADDR", 829, "macaddr", _S),
    ("INET", 869, "inet", _S),
    ("BOOL_ARRAY", 1000, "_bool", _A, 16),
    ("BYTEA_ARRAY", 1001, "_bytea", _A, 17),
    ("CHAR_ARRAY", 1002, "_char", _A, 18),
    ("NAME_ARRAY", 1003, "_name", _A, 19),
    ("INT2_ARRAY", 1005, "_int2", _A, 21),
    ("INT2_VECTOR_ARRAY", 1006, "_int2vector", _A, 22),
    ("INT4_ARRAY", 1007, "_int4", _A, 23),
    ("REGPROC_ARRAY", 1008, "_regproc", _A, 24),
    ("TEXT_ARRAY", 1009, "_text", _A, 25),
    ("TID_ARRAY", 1010, "_tid", _A, 27),
    ("XID_ARRAY", 1011, "_xid", _A, 28),
    ("CID_ARRAY", 1012, "_cid", _A, 29),
    ("OID_VECTOR_ARRAY", 1013, "_oidvector", _A, 30),
    ("BPCHAR_ARRAY", 1014, "_bpchar", _A, 1042),
    ("VARCHAR_ARRAY", 1015, "_varchar", _A, 1043),
    ("INT8_ARRAY", 1016, "_int8", _A, 20),
    ("POINT_ARRAY", 1017, "_point", _A, 600),
    ("LSEG_ARRAY", 1018, "_lseg", _A, 601),
    ("PATH_ARRAY", 1019, "_path", _A, 602),
    ("BOX_ARRAY", 1020, "_box", _A, 603),
    ("FLOAT4_ARRAY", 1021, "_float4", _A, 700),
    ("FLOAT8_ARRAY", 1022, "_float8", _A, 701),
    ("POLYGON_ARRAY", 1027, "_polygon", _A, 604),
    ("OID_ARRAY", 1028, "_oid", _A, 26),
    ("ACLITEM", 1033, "aclitem", _S),
    ("ACLITEM_ARRAY", 1034, "_aclitem", _A, 1033),
    ("MACADDR_ARRAY", 1040, "_macaddr", _A, 829),
    ("INET_ARRAY", 1041, "_inet", _A, 869),
    ("BPCHAR", 1042, "bpchar", _S),
    ("VARCHAR", 1043, "varchar", _S),
    ("DATE", 1082, "date", _S),
    ("TIME", 1083, "time", _S),
    ("TIMESTAMP", 1114, "timestamp", _S),
    ("TIMESTAMP_ARRAY", 1115, "_timestamp", _A, 1114),
    ("DATE_ARRAY", 1182, "_date", _A, 1082),
    ("TIME_ARRAY", 1183, "_time", _A, 1083),
    ("TIMESTAMPTZ", 1184, "timestamptz", _S),
    ("TIMESTAMPTZ_ARRAY", 1185, "_timestamptz", _A, 1184),
    ("INTERVAL", 1186, "interval", _S),
    ("INTERVAL_ARRAY", 1187, "_interval", _A, 1186),
    ("NUMERIC_ARRAY", 1231, "_numeric", _A, 1700),
    ("CSTRING_ARRAY", 1263, "_cstring", _A, 2275),
    ("TIMETZ", 1266, "timetz", _S),
    ("TIMETZ_ARRAY", 1270, "_timetz", _A, 1266),
    ("BIT", 1560, "bit", _S),
    ("BIT_ARRAY", 1561, "_bit", _A, 1560),
    ("VARBIT", 1562, "varbit", _S),
    ("VARBIT_ARRAY", 1563, "_varbit", _A, 1562),
    ("NUMERIC", 1700, "numeric", _S),
    ("REFCURSOR", 1790, "refcursor", _S),
    ("REFCURSOR_ARRAY", 2201, "_refcursor", _A, 1790),
    ("REGPROCEDURE", 2202, "regprocedure", _S),
    ("REGOPER", 2203, "regoper", _S),
    ("REGOPERATOR", 2204, "regoperator", _S),
    ("REGCLASS", 2205, "regclass", _S),
    ("REGTYPE", 2206, "regtype", _S),
    ("REGPROCEDURE_ARRAY", 2207, "_regprocedure", _A, 2202),
    ("REGOPER_ARRAY", 2208, "_regoper", _A, 2203),
    ("REGOPERATOR_ARRAY", 2209, "_regoperator", _A, 2204),
    ("REGCLASS_ARRAY", 2210, "_regclass", _A, 2205),
    ("REGTYPE_ARRAY", 2211, "_regtype", _A, 2206),
    ("RECORD", 2249, "record", _P),
    ("CSTRING", 2275, "cstring", _P),
    ("ANY", 2276, "any", _P),
    ("ANYARRAY", 2277, "anyarray", _P),
    ("VOID", 2278, "void", _P),
    ("TRIGGER", 2279, "trigger", _P),
    ("LANGUAGE_HANDLER", 2280, "language_handler", _P),
    ("INTERNAL", 2281, "internal", _P),
    ("ANYELEMENT", 2283, "anyelement", _P),
    ("RECORD_ARRAY", 2287, "_record", _P),
    ("ANYNONARRAY", 2776, "anynonarray", _P),
    ("TXID_SNAPSHOT_ARRAY", 2949, "_txid_snapshot", _A, 2970),
    ("UUID", 2950, "uuid", _S),
    ("UUID_ARRAY", 2951, "_uuid", _A, 2950),
    ("TXID_SNAPSHOT", 2970, "txid_snapshot", _S),
    ("FDW_HANDLER", 3115, "fdw_handler", _P),
    ("PG_LSN", 3220, "pg_lsn", _S),
    ("PG_LSN_ARRAY", 3221, "_pg_lsn", _A, 3220),
    ("TSM_HANDLER", 3310, "tsm_handler", _P),
    ("PG_NDISTINCT", 3361, "pg_ndistinct", _S),
    ("PG_DEPENDENCIES", 3402, "pg_dependencies", _S),
    ("ANYENUM", 3500, "anyenum", _P),
    ("TS_VECTOR", 3614, "tsvector", _S),
    ("TSQUERY", 3615, "tsquery", _S),
    ("GTS_VECTOR", 3642, "gtsvector", _S),
    ("TS_VECTOR_ARRAY", 3643, "_tsvector", _A, 3614),
    ("GTS_VECTOR_ARRAY", 3644, "_gtsvector", _A, 3642),
    ("TSQUERY_ARRAY", 3645, "_tsquery", _A, 3615),
    ("REGCONFIG", 3734, "regconfig", _S),
    ("REGCONFIG_ARRAY", 3735, "_regconfig", _A, 3734),
    ("REGDICTIONARY", 3769, "regdictionary", _S),
    ("REGDICTIONARY_ARRAY", 3770, "_regdictionary", _A, 3769),
    ("JSONB", 3802, "jsonb", _S),
    ("JSONB_ARRAY", 3807, "_jsonb", _A, 3802),
    ("ANY_RANGE", 3831, "anyrange", _P),
    ("EVENT_TRIGGER", 3838, "event_trigger", _P),
    ("INT4_RANGE", 3904, "int4range", _R, 23),
    ("INT4_RANGE_ARRAY", 3905, "_int4range", _A, 3904),
    ("NUM_RANGE", 3906, "numrange", _R, 1700),
    ("NUM_RANGE_ARRAY", 3907, "_numrange", _A, 3906),
    ("TS_RANGE", 3908, "tsrange", _R, 1114),
    ("TS_RANGE_ARRAY", 3909, "_tsrange", _A, 3908),
    ("TSTZ_RANGE", 3910, "tstzrange", _R, 1184),
    ("TSTZ_RANGE_ARRAY", 3911, "_tstzrange", _A, 3910),
    ("DATE_RANGE", 3912, "daterange", _R, 1082),
    ("DATE_RANGE_ARRAY", 3913, "_daterange", _A, 3912),
    ("INT8_RANGE", 3926, "int8range", _R, 20),
    ("INT8_RANGE_ARRAY", 3927, "_int8range", _A, 3926),
    ("JSONPATH", 4072, "jsonpath", _S),
    ("JSONPATH_ARRAY", 4073, "_jsonpath", _A, 4072),
    ("REGNAMESPACE", 4089, "regnamespace", _S),
    ("REGNAMESPACE_ARRAY", 4090, "_regnamespace", _A, 4089),
    ("REGROLE", 4096, "regrole", _S),
    ("REGROLE_ARRAY", 4097, "_regrole", _A, 4096),
    ("REGCOLLATION", 4191, "regcollation", _S),
    ("REGCOLLATION_ARRAY", 4192, "_regcollation", _A, 4191),
    ("PG_MCV_LIST", 5017, "pg_mcv_list", _S),
    ("PG_SNAPSHOT", 5038, "pg_snapshot", _S),
    ("PG_SNAPSHOT_ARRAY", 5039, "_pg_snapshot", _A, 5038),
    ("XID8", 5069, "xid8", _S),
    ("ANYCOMPATIBLE", 5077, "anycompatible", _P),
    ("ANYCOMPATIBLEARRAY", 5078, "anycompatiblearray", _P),
    ("ANYCOMPATIBLENONARRAY", 5079, "anycompatiblenonarray", _P),
    ("ANYCOMPATIBLE_RANGE", 5080, "anycompatiblerange", _P),
)

_ENTRIES: tuple[BuiltinEntry, ...] = tuple(BuiltinEntry(*row) for row in _ROWS)
_BY_OID: dict[int, BuiltinEntry] = {entry.oid: entry for entry in _ENTRIES}
_BY_NAME: dict[str, BuiltinEntry] = {entry.name: entry for entry in _ENTRIES}


def lookup_oid(oid: int) -> Optional[BuiltinEntry]:
    """Return the built-in type with this OID, or ``None`` if there is none."""
    return _BY_OID.get(oid)


def lookup_name(name: str) -> Optional[BuiltinEntry]:
    """Return the built-in type with this server name, or ``None``."""
    return _BY_NAME.get(name)


def all_entries() -> tuple[BuiltinEntry, ...]:
    """Every built-in type, in OID order."""
    return _ENTRIES
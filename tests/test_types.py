import pytest
from hypothesis import given, strategies as st

from pgvalues.catalog import all_entries
from pgvalues.types import Field, Kind, Type


def test_builtin_constants_match_from_oid():
    assert Type.from_oid(20) == Type.INT8
    assert Type.from_oid(23) == Type.INT4
    assert Type.from_oid(25) == Type.TEXT


def test_builtin_attributes():
    assert Type.INT8.name == "int8"
    assert Type.INT8.oid == 20
    assert Type.INT8.schema == "pg_catalog"
    assert Type.INT8.kind == Kind.simple()
    assert Type.INT8.is_builtin is True


def test_unknown_oid_is_none():
    assert Type.from_oid(1) is None
    assert Type.from_oid(99999) is None


def test_array_kind_of_builtin():
    assert Type.INT4_ARRAY.kind == Kind.array(Type.INT4)
    assert Type.INT2_VECTOR_ARRAY.kind.member.kind == Kind.array(Type.INT2)


def test_range_kind_of_builtin():
    assert Type.INT4_RANGE.kind == Kind.range(Type.INT4)
    assert Type.NUM_RANGE.kind.member == Type.NUMERIC


def test_pseudo_kind_of_builtin():
    assert Type.RECORD.kind == Kind.pseudo()
    assert Type.RECORD_ARRAY.kind.name == "pseudo"


def test_display_of_builtin_hides_schema():
    ty = Type.from_oid(23)
    assert str(ty) == "int4"
    assert ty.__str__() == "int4"


def test_display_of_public_and_custom_schema():
    public = Type("mood", 50000, Kind.simple(), "public")
    custom = Type("mood", 50001, Kind.simple(), "pg_temp_3")
    assert str(public) == "mood"
    assert str(custom) == "pg_temp_3.mood"


def test_custom_type_never_equals_builtin():
    fake = Type("int4", 23, Kind.simple(), "pg_catalog")
    assert (fake == Type.INT4) is False
    assert fake.is_builtin is False


def test_custom_types_compare_by_value():
    a = Type("mood", 50000, Kind.enum(["sad", "ok", "happy"]), "public")
    b = Type("mood", 50000, Kind.enum(["sad", "ok", "happy"]), "public")
    c = Type("mood", 50000, Kind.enum(["sad", "happy"]), "public")
    assert a == b
    assert hash(a) == hash(b)
    assert (a == c) is False
    assert len({a, b, c}) == 2


def test_pipelined_prepare_type_names():
    element = Type("hstore", 60000, Kind.simple(), "public")
    hstore_array = Type("_hstore", 60001, Kind.array(element), "public")
    assert hstore_array.name == "_hstore"
    assert Type.from_oid(20) == Type.INT8


def test_custom_enum():
    ty = Type("mood", 70000, Kind.enum(["sad", "ok", "happy"]), "pg_temp_1")
    assert ty.name == "mood"
    assert ty.kind == Kind.enum(["sad", "ok", "happy"])
    assert ty.kind.variants == ("sad", "ok", "happy")


def test_custom_domain():
    ty = Type("session_id", 70001, Kind.domain(Type.BYTEA), "pg_temp_1")
    assert ty.name == "session_id"
    assert ty.kind == Kind.domain(Type.BYTEA)
    assert ty.kind.member == Type.BYTEA


def test_custom_array():
    element = Type("hstore", 70002, Kind.simple(), "public")
    ty = Type("_hstore", 70003, Kind.array(element), "public")
    assert ty.kind.name == "array"
    assert ty.kind.member.name == "hstore"
    assert ty.kind.member.kind == Kind.simple()


def test_custom_composite():
    fields = [
        Field("name", Type.TEXT),
        Field("supplier", Type.INT4),
        Field("price", Type.NUMERIC),
    ]
    ty = Type("inventory_item", 70004, Kind.composite(fields), "pg_temp_1")
    assert ty.name == "inventory_item"
    got = ty.kind.fields
    assert got[0].name == "name"
    assert got[0].type == Type.TEXT
    assert got[1].name == "supplier"
    assert got[1].type == Type.INT4
    assert got[2].name == "price"
    assert got[2].type == Type.NUMERIC


def test_custom_range():
    ty = Type("floatrange", 70005, Kind.range(Type.FLOAT8), "pg_temp_1")
    assert ty.name == "floatrange"
    assert ty.kind == Kind.range(Type.FLOAT8)


def test_kinds_differ_by_shape():
    assert Kind.array(Type.INT4) != Kind.range(Type.INT4)
    assert Kind.domain(Type.INT4) != Kind.array(Type.INT4)
    assert Kind.simple() != Kind.pseudo()


def test_repr_of_builtin():
    assert repr(Type.from_oid(1184)) == "Type.TIMESTAMPTZ"


@pytest.mark.parametrize(
    "constant, oid, name",
    [
        ("BOOL", 16, "bool"),
        ("JSONB", 3802, "jsonb"),
        ("PG_LSN", 3220, "pg_lsn"),
        ("ANYCOMPATIBLE_RANGE", 5080, "anycompatiblerange"),
    ],
)
def test_selected_constants(constant, oid, name):
    ty = Type.from_oid(oid)
    assert ty == getattr(Type, constant)
    assert ty.oid == oid
    assert ty.name == name


@given(st.sampled_from(all_entries()))
def test_from_oid_round_trips(entry):
    ty = Type.from_oid(entry.oid)
    assert ty.oid == entry.oid
    assert ty.name == entry.name
    assert ty == getattr(Type, entry.constant)
    assert ty.kind.name == entry.kind.value
import pytest

from pgvalues.errors import ConversionError, WasNull, WrongType


class _FakeType:
    def __init__(self, text):
        self.text = text

    def __str__(self):
        return self.text


def test_was_null_message():
    err = WasNull()
    assert str(err) == "a Postgres value was `NULL`"
    assert isinstance(err, ConversionError)


def test_was_null_raises():
    err = WasNull()
    with pytest.raises(ConversionError) as info:
        raise err
    assert info.value is err
    assert str(info.value) == "a Postgres value was `NULL`"


def test_wrong_type_uses_class_name():
    pg = _FakeType("int4range")
    err = WrongType(pg, int)
    assert err.postgres is pg
    assert err.python_type is int
    assert "`int`" in str(err)
    assert "`int4range`" in str(err)


def test_wrong_type_accepts_string_name():
    err = WrongType(_FakeType("myschema.mood"), "list[str]")
    assert err.python_name == "list[str]"
    assert str(err).endswith("`myschema.mood`")


def test_wrong_type_is_conversion_error():
    err = WrongType(_FakeType("text"), bytes)
    assert isinstance(err, ConversionError)
    assert err.python_name == "bytes"
    assert "`bytes`" in str(err)
    assert "`text`" in str(err)
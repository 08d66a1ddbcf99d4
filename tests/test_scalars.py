import math

import pytest

from jsonmodel.scalars import (
    JsonBoolean,
    JsonInteger,
    JsonNull,
    JsonReal,
    JsonString,
    JsonType,
    boolean,
    false,
    null,
    number_value,
    sprintf,
    true,
)


# numbers

def test_integer_and_real_values():
    integer = JsonInteger(5)
    real = JsonReal(100.1)
    assert integer.value == 5
    assert real.value == 100.1
    assert number_value(integer) == 5.0
    assert number_value(real) == 100.1


def test_real_rejects_nan():
    with pytest.raises(ValueError):
        JsonReal(math.nan)
    real = JsonReal(1.0)
    with pytest.raises(ValueError):
        real.value = math.nan
    assert real.value == 1.0


def test_real_rejects_infinity():
    with pytest.raises(ValueError):
        JsonReal(math.inf)
    with pytest.raises(ValueError):
        JsonReal(-math.inf)
    real = JsonReal(1.0)
    with pytest.raises(ValueError):
        real.value = math.inf
    assert real.value == 1.0


def test_number_value_of_non_numbers_is_zero():
    txt = JsonString("test")
    assert number_value(None) == 0.0
    assert number_value(txt) == 0.0
    assert number_value(true()) == 0.0


def test_integer_rejects_non_integers():
    with pytest.raises(TypeError):
        JsonInteger("5")
    with pytest.raises(TypeError):
        JsonInteger(True)
    value = JsonInteger(1)
    with pytest.raises(TypeError):
        value.value = 2.5
    assert value.value == 1


def test_real_rejects_non_numbers():
    with pytest.raises(TypeError):
        JsonReal("1.0")
    value = JsonReal(2.0)
    with pytest.raises(TypeError):
        value.value = None
    assert value.value == 2.0


def test_integer_set():
    value = JsonInteger(123)
    assert value.value == 123
    assert number_value(value) == 123.0
    value.value = 321
    assert value.value == 321
    assert number_value(value) == 321.0


def test_real_set():
    value = JsonReal(123.123)
    assert value.value == 123.123
    assert number_value(value) == 123.123
    value.value = 321.321
    assert value.value == 321.321
    assert number_value(value) == 321.321


# booleans and null

@pytest.mark.parametrize("flag", [1, -123, True, "x"])
def test_boolean_truthy(flag):
    value = boolean(flag)
    assert value is true()
    assert value.type is JsonType.TRUE
    assert value.value is True


def test_boolean_false():
    value = boolean(0)
    assert value is false()
    assert value.type is JsonType.FALSE
    assert value.value is False
    assert bool(value) is False


def test_singletons_are_unique():
    assert JsonBoolean(True) is true()
    assert JsonBoolean(False) is false()
    assert JsonNull() is null()
    assert null().type is JsonType.NULL
    assert true() is not false()


def test_singleton_copies_are_identical():
    for value in (true(), false(), null()):
        assert value.copy() is value
        assert value.deep_copy() is value


def test_typeof_integer():
    value = JsonInteger(1)
    assert value.type is JsonType.INTEGER
    assert not isinstance(value, (JsonString, JsonReal, JsonBoolean, JsonNull))
    assert number_value(value) == 1.0


# strings

def test_string_value_and_length():
    value = JsonString("foo")
    assert value.value == "foo"
    assert len(value) == 3
    assert value.type is JsonType.STRING

    value.set("barr")
    assert value.value == "barr"
    assert len(value) == 4

    value.set(b"hi\0ho")
    assert value.data == b"hi\0ho"
    assert len(value) == 5


def test_string_nocheck():
    value = JsonString("foo", check=False)
    assert value.value == "foo"
    assert len(value) == 3

    value.set_nocheck("barr")
    assert value.value == "barr"
    assert len(value) == 4

    value.set_nocheck(b"hi\0ho")
    assert value.data == b"hi\0ho"
    assert len(value) == 5


def test_string_nocheck_accepts_invalid_utf8():
    value = JsonString(b"qu\xff", check=False)
    assert value.data == b"qu\xff"
    assert len(value) == 3

    value.set_nocheck(b"\xfd\xfe\xff")
    assert value.data == b"\xfd\xfe\xff"
    assert len(value) == 3


def test_string_rejects_invalid_utf8():
    with pytest.raises(ValueError):
        JsonString(b"a\xefz")


def test_string_set_rejects_invalid_utf8_and_keeps_value():
    value = JsonString("keep")
    with pytest.raises(ValueError):
        value.set(b"\xff")
    assert value.value == "keep"


def test_string_none_arguments():
    with pytest.raises(TypeError):
        JsonString(None)
    with pytest.raises(TypeError):
        JsonString(None, check=False)
    txt = JsonString("test")
    with pytest.raises(TypeError):
        txt.set(None)
    with pytest.raises(TypeError):
        txt.set_nocheck(None)
    assert txt.value == "test"


def test_string_multibyte_length_is_in_bytes():
    assert len(JsonString("\u00e9")) == 2
    assert len(JsonString("\u20ac")) == 3


# equality and copying of scalars

def test_scalar_equality():
    assert JsonInteger(1) == JsonInteger(1)
    assert JsonInteger(1) != JsonInteger(2)
    assert JsonReal(1.2) == JsonReal(1.2)
    assert JsonReal(1.2) != JsonReal(3.141592)
    assert JsonString("foo") == JsonString("foo")
    assert JsonString("foo") != JsonString("bar")
    assert JsonString("foo") != JsonString("bar2")
    assert JsonInteger(1) != JsonReal(1.0)


@pytest.mark.parametrize(
    "value", [JsonString("foo"), JsonInteger(543), JsonReal(123e9)]
)
def test_scalar_copy(value):
    shallow = value.copy()
    deep = value.deep_copy()
    assert shallow is not value
    assert deep is not value
    assert shallow == value
    assert deep == value


def test_string_copy_is_independent():
    value = JsonString("foo")
    duplicate = value.copy()
    duplicate.set("bar")
    assert value.value == "foo"
    assert duplicate.value == "bar"


# sprintf

def test_sprintf_formats():
    result = sprintf("foo bar %d", 42)
    assert isinstance(result, JsonString)
    assert result.value == "foo bar 42"


def test_sprintf_empty():
    result = sprintf("%s", "")
    assert len(result) == 0
    assert result.value == ""


def test_sprintf_rejects_invalid_utf8():
    with pytest.raises(ValueError):
        sprintf(b"%s", b"\xff\xff")
import pytest

from argvtree.values import (
    ValueKind,
    coerce_flag,
    coerce_value,
    is_number,
    kind_of,
    to_number,
)


@pytest.mark.parametrize(
    "value",
    [1234, 5.5, "1234", "-12", "+3", "5.67", ".5", "5.", "1e7", "-1e-3", "0xdeadbeef", "0XFF"],
)
def test_is_number_true(value):
    assert is_number(value) is True


@pytest.mark.parametrize(
    "value", ["", "10f", "1E5", "0x", "-0x10", "abc", " 1", "1 ", "1\n", True, False, None]
)
def test_is_number_false(value):
    assert is_number(value) is False


def test_to_number():
    assert to_number("0xff") == 255
    assert to_number("0001234") == 1234
    assert isinstance(to_number("42"), int)
    assert to_number("5.67") == 5.67
    assert to_number("1e7") == 1e7
    assert to_number(12) == 12


def test_to_number_rejects_text():
    with pytest.raises(ValueError):
        to_number("ten")


def test_coerce_value():
    assert coerce_value("55") == 55
    assert coerce_value("55", string_typed=True) == "55"
    assert coerce_value(True) is True
    assert coerce_value("abc") == "abc"


def test_coerce_flag():
    assert coerce_flag("false") is False
    assert coerce_flag("true") is True
    assert coerce_flag("False") is True
    assert coerce_flag("") is True


def test_kind_of():
    assert kind_of(True) is ValueKind.BOOLEAN
    assert kind_of(3) is ValueKind.NUMBER
    assert kind_of(3.5) is ValueKind.NUMBER
    assert kind_of("x") is ValueKind.TEXT
    assert kind_of([1]) is ValueKind.LIST
    assert kind_of({}) is ValueKind.OTHER
    assert str(ValueKind.LIST) == "list"

"""Value-type name validation."""

import pytest

from indexdef.tree.types import InvalidArgumentError, PropertyType, ValueType


@pytest.mark.parametrize(
    "name",
    ["String", "Binary", "Long", "Double", "Date", "Boolean", "Name", "Path",
     "Reference", "WeakReference", "URI", "Decimal", "undefined"],
)
def test_from_name_accepts_recognized_names(name):
    assert ValueType.from_name(name).value == name


@pytest.mark.parametrize("name", ["NotAType", "string", "LONG", "", "Strings"])
def test_from_name_rejects_unknown_names(name):
    with pytest.raises(InvalidArgumentError):
        ValueType.from_name(name)


def test_invalid_argument_is_a_value_error():
    with pytest.raises(ValueError):
        ValueType.from_name("NotAType")


def test_names_lists_every_member():
    names = ValueType.names()
    assert "WeakReference" in names
    assert len(names) == len(ValueType)


def test_only_strings_is_an_array_type():
    assert PropertyType.STRINGS.is_array
    assert not PropertyType.STRING.is_array
    assert not PropertyType.NAME.is_array


def test_unknown_name_error_lists_recognized_names():
    with pytest.raises(InvalidArgumentError) as excinfo:
        ValueType.from_name("NotAType")
    message = str(excinfo.value)
    assert "'NotAType'" in message
    assert all(name in message for name in ValueType.names())

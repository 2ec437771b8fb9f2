"""Contains tests for classes and functions stored inside the jaml_values module of the data_model package."""

import pytest
from ataraxis_base_utilities import error_format

from ataraxis_jaml.data_model import Array, String, Boolean, Integer, Section, to_python, from_python


def test_value_equality():
    """Verifies that value equality is structural and takes the variant into account."""
    assert String("a") == String("a")
    assert Integer(1) == Integer(1)
    assert Integer(1) != Boolean(True)
    assert Integer(0) != String("0")
    assert Array([Integer(1), String("x")]) == Array([Integer(1), String("x")])
    assert Array([Integer(1), Integer(2)]) != Array([Integer(2), Integer(1)])
    assert Section({"a": Section({"b": Boolean(False)})}) == Section({"a": Section({"b": Boolean(False)})})


def test_array_accepts_iterables():
    """Verifies that Array converts any iterable of values into a list and defaults to an empty list."""
    array = Array((Integer(1), Integer(2)))
    assert array.items == [Integer(1), Integer(2)]
    assert Array().items == []
    assert Section().entries == {}


@pytest.mark.parametrize(
    "value_class, argument",
    [
        (String, 5),
        (Integer, "5"),
        (Integer, True),
        (Integer, 1.0),
        (Boolean, 1),
        (Boolean, "true"),
        (Array, "abc"),
        (Array, [1, 2]),
        (Section, [("a", Integer(1))]),
        (Section, {"a": 1}),
        (Section, {1: Integer(1)}),
    ],
)
def test_value_construction_errors(value_class, argument):
    """Verifies that value variants reject arguments of unsupported types.

    Evaluates:
        0 - String from an integer.
        1 - Integer from a string.
        2 - Integer from a boolean.
        3 - Integer from a float.
        4 - Boolean from an integer.
        5 - Boolean from a string.
        6 - Array from a string.
        7 - Array of native (non-JAML) values.
        8 - Section from a list of pairs.
        9 - Section holding a native value.
        10 - Section with a non-string key.
    """
    with pytest.raises(TypeError):
        value_class(argument)


@pytest.mark.parametrize("number", [2**63, -(2**63) - 1])
def test_integer_range_error(number):
    """Verifies that Integer rejects values outside the signed 64-bit range."""
    message = (
        f"Unable to initialize Integer instance. Expected a 'value' argument within the signed 64-bit range "
        f"[{-(2**63)}, {2**63 - 1}], but encountered {number}."
    )
    with pytest.raises(ValueError, match=error_format(message)):
        Integer(number)


def test_integer_range_limits():
    """Verifies that Integer accepts both ends of the signed 64-bit range."""
    assert Integer(2**63 - 1).value == 2**63 - 1
    assert Integer(-(2**63)).value == -(2**63)


def test_to_python():
    """Verifies the conversion of value trees (and root dictionaries) into native Python objects."""
    root = {
        "name": String("Jan"),
        "age": Integer(22),
        "settings": Section(
            {
                "dark_mode": Boolean(True),
                "languages": Array([String("rust"), String("c")]),
                "ui": Section({"font_size": Integer(14)}),
            }
        ),
    }
    expected = {
        "name": "Jan",
        "age": 22,
        "settings": {"dark_mode": True, "languages": ["rust", "c"], "ui": {"font_size": 14}},
    }
    result = to_python(root)
    assert result == expected
    assert list(result["settings"]) == ["dark_mode", "languages", "ui"]
    assert to_python(Boolean(False)) is False


def test_to_python_error():
    """Verifies that to_python rejects objects that are not JAML values."""
    message = (
        "Unable to convert the input to a native Python object. Expected a JAML value or a dictionary of JAML values, "
        "but encountered 1.5 of type float."
    )
    with pytest.raises(TypeError, match=error_format(message)):
        # noinspection PyTypeChecker
        to_python(1.5)


@pytest.mark.parametrize(
    "native, expected",
    [
        ("text", String("text")),
        (7, Integer(7)),
        (True, Boolean(True)),
        (False, Boolean(False)),
        ([1, "a", False], Array([Integer(1), String("a"), Boolean(False)])),
        ((1, 2), Array([Integer(1), Integer(2)])),
        ({"a": {"b": 1}}, Section({"a": Section({"b": Integer(1)})})),
        (Integer(3), Integer(3)),
        ([Integer(1), 2], Array([Integer(1), Integer(2)])),
    ],
)
def test_from_python(native, expected):
    """Verifies the conversion of native Python objects into JAML values.

    Evaluates:
        0 - String conversion.
        1 - Integer conversion.
        2 - True conversion (booleans take precedence over integers).
        3 - False conversion.
        4 - List conversion.
        5 - Tuple conversion.
        6 - Nested dictionary conversion.
        7 - JAML values are passed through unchanged.
        8 - Lists mixing JAML and native values.
    """
    assert from_python(native) == expected


@pytest.mark.parametrize("native", [1.5, None, {1, 2}, b"bytes"])
def test_from_python_error(native):
    """Verifies that from_python rejects objects the format cannot represent."""
    message = (
        f"Unable to convert the input to a JAML value. Expected a string, integer, boolean, list, tuple, or "
        f"dictionary, but encountered {native} of type {type(native).__name__}."
    )
    with pytest.raises(TypeError, match=error_format(message)):
        from_python(native)

"""Contains tests for classes stored inside the value_converters module of the data_converters package."""

import pytest
from ataraxis_base_utilities import error_format

from ataraxis_jaml.data_model import Array, String, Boolean, Integer
from ataraxis_jaml.data_converters import (
    ArrayConverter,
    StringConverter,
    BooleanConverter,
    IntegerConverter,
    JamlValueConverter,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("true", Boolean(True)),
        ("false", Boolean(False)),
        ("True", None),
        ("FALSE", None),
        ("1", None),
        ("yes", None),
    ],
)
def test_boolean_converter(raw, expected):
    """Verifies that BooleanConverter only recognizes the exact lower-case literals."""
    assert BooleanConverter().validate_value(raw) == expected


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("0", Integer(0)),
        ("42", Integer(42)),
        ("-17", Integer(-17)),
        ("007", Integer(7)),
        ("-0", Integer(0)),
        ("9223372036854775807", Integer(2**63 - 1)),
        ("-9223372036854775808", Integer(-(2**63))),
        ("9223372036854775808", None),
        ("+7", None),
        ("1_000", None),
        ("1.5", None),
        ("", None),
        ("-", None),
        ("12a", None),
        (" 12", None),
    ],
)
def test_integer_converter(raw, expected):
    """Verifies the integer recognition rules of IntegerConverter.

    Evaluates:
        0-2 - Plain, multi-digit, and negative integers.
        3 - Leading zeros are accepted.
        4 - Negative zero is accepted.
        5-6 - Both ends of the signed 64-bit range are accepted.
        7 - Values past the signed 64-bit range are rejected.
        8 - A leading '+' is rejected.
        9 - Digit separators are rejected.
        10 - Floats are rejected.
        11-14 - Empty, sign-only, partially numeric, and whitespace-padded text is rejected.
    """
    assert IntegerConverter().validate_value(raw) == expected


def test_string_converter():
    """Verifies that StringConverter keeps the text verbatim, including quotes."""
    converter = StringConverter()
    assert converter.validate_value("hello") == String("hello")
    assert converter.validate_value('"quoted"') == String('"quoted"')
    assert converter.validate_value("") == String("")
    assert converter.validate_value(5) is None


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("[1, 2, 3]", Array([Integer(1), Integer(2), Integer(3)])),
        ("[rust, c, python]", Array([String("rust"), String("c"), String("python")])),
        ("[true,false , 5, x]", Array([Boolean(True), Boolean(False), Integer(5), String("x")])),
        ("[]", Array([])),
        ("[   ]", Array([])),
        ("[a]", Array([String("a")])),
        ("[a,,b]", Array([String("a"), String(""), String("b")])),
        ("[[1, 2]]", Array([String("[1"), String("2]")])),
        ("[[x]]", Array([String("[x]")])),
        ("1, 2", None),
        ("[1, 2", None),
        ("[", None),
    ],
)
def test_array_converter(raw, expected):
    """Verifies the array recognition rules of ArrayConverter.

    Evaluates:
        0 - An integer array.
        1 - A string array.
        2 - A mixed array with irregular spacing.
        3-4 - Empty arrays, with and without padding.
        5 - A single-element array.
        6 - Empty elements become empty strings.
        7 - Commas are split naively, without regard for nested brackets.
        8 - Bracketed elements stay strings, so arrays remain flat.
        9-11 - Text that is not fully enclosed in brackets is rejected.
    """
    assert ArrayConverter().validate_value(raw) == expected


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("true", Boolean(True)),
        ("false", Boolean(False)),
        ("007", Integer(7)),
        ("-5", Integer(-5)),
        ("+5", String("+5")),
        ("[1, 2, 3]", Array([Integer(1), Integer(2), Integer(3)])),
        ("hello", String("hello")),
        ("dark mode", String("dark mode")),
        ("[1, 2", String("[1, 2")),
        ("", String("")),
    ],
)
def test_jaml_value_converter_precedence(raw, expected):
    """Verifies that JamlValueConverter applies the Boolean > Integer > Array > String precedence."""
    assert JamlValueConverter().validate_value(raw) == expected


def test_jaml_value_converter_errors():
    """Verifies that JamlValueConverter rejects non-string inputs."""
    message = "Unable to classify the raw value. Expected a string, but encountered 5 of type int."
    with pytest.raises(TypeError, match=error_format(message)):
        # noinspection PyTypeChecker
        JamlValueConverter().validate_value(5)

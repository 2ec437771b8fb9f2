"""Provides the converter classes used to classify raw value text extracted from .jaml files into typed JAML values.

Each 'base' converter recognizes a single value variant and returns None when the input does not match it. The
JamlValueConverter chains the base converters in the fixed precedence order Boolean > Integer > Array > String, which
makes the classification of any raw text total and deterministic.
"""

import re
from typing import Any

from ataraxis_base_utilities import console

from ..data_model.jaml_values import INTEGER_MAXIMUM, INTEGER_MINIMUM, Array, String, Boolean, Integer, JamlValue

# Base-10 signed integers: optional leading minus, ASCII digits only. Leading '+' and digit separators are rejected.
_INTEGER_PATTERN = re.compile(r"-?[0-9]+")


class BooleanConverter:
    """A factory-like class for recognizing JAML boolean literals.

    Only the exact, case-sensitive literals 'true' and 'false' are recognized. Equivalents such as 'True', 'yes' or '1'
    are not booleans in the format and are left for the other converters.

    Attributes:
        _true_literal: The literal that represents a True value.
        _false_literal: The literal that represents a False value.
    """

    _true_literal: str = "true"
    _false_literal: str = "false"

    def __repr__(self) -> str:
        """Returns a string representation of the BooleanConverter instance."""
        return f"BooleanConverter(true_literal={self._true_literal}, false_literal={self._false_literal})"

    def validate_value(self, value: str) -> Boolean | None:
        """Converts the input text to a Boolean value if it is one of the boolean literals.

        Notes:
            Since this class is intended to be used together with other converter classes, when conversion fails for
            any reason, it returns None instead of raising an error.

        Args:
            value: The raw value text to convert.

        Returns:
            The Boolean value if the input is a boolean literal. None otherwise.
        """
        if value == self._true_literal:
            return Boolean(True)
        if value == self._false_literal:
            return Boolean(False)
        return None


class IntegerConverter:
    """A factory-like class for recognizing base-10 signed integer literals.

    Notes:
        Leading zeros are accepted ('007' is the integer 7), as they are by any standard base-10 integer parser. Digit
        strings that do not fit into the signed 64-bit range are not integers and are left for the other converters.

    Attributes:
        _lower_limit: The smallest integer the converter accepts.
        _upper_limit: The largest integer the converter accepts.
    """

    _lower_limit: int = INTEGER_MINIMUM
    _upper_limit: int = INTEGER_MAXIMUM

    def __repr__(self) -> str:
        """Returns a string representation of the IntegerConverter instance."""
        return f"IntegerConverter(lower_limit={self._lower_limit}, upper_limit={self._upper_limit})"

    def validate_value(self, value: str) -> Integer | None:
        """Converts the input text to an Integer value if the whole text is a base-10 integer within the limits.

        Args:
            value: The raw value text to convert.

        Returns:
            The Integer value if conversion succeeds. None, if conversion fails for any reason.
        """
        if _INTEGER_PATTERN.fullmatch(value) is None:
            return None

        number = int(value)
        if not self._lower_limit <= number <= self._upper_limit:
            return None
        return Integer(number)


class StringConverter:
    """A factory-like class that wraps any raw value text into a String value.

    This converter is the fallback of the classification chain and never fails for string inputs. The text is stored
    verbatim: surrounding quotes are not stripped.
    """

    def __repr__(self) -> str:
        """Returns a string representation of the StringConverter instance."""
        return "StringConverter()"

    def validate_value(self, value: Any) -> String | None:
        """Wraps the input text into a String value.

        Args:
            value: The raw value text to convert.

        Returns:
            The String value if the input is a string. None otherwise.
        """
        if not isinstance(value, str):
            return None
        return String(value)


class ArrayConverter:
    """A factory-like class for recognizing bracketed, comma-separated arrays of scalar values.

    Notes:
        The interior of the brackets is split on every comma, without regard for nesting. Each element is stripped and
        classified with the Boolean > Integer > String chain, so array elements are never arrays themselves. An
        interior that is empty after stripping produces an empty array.

    Attributes:
        _element_converters: The converters used to classify array elements, in precedence order.
    """

    def __init__(self) -> None:
        self._element_converters = (BooleanConverter(), IntegerConverter(), StringConverter())

    def __repr__(self) -> str:
        """Returns a string representation of the ArrayConverter instance."""
        return f"ArrayConverter(element_converters={self._element_converters})"

    def validate_value(self, value: str) -> Array | None:
        """Converts the input text to an Array value if it is enclosed in square brackets.

        Args:
            value: The raw value text to convert.

        Returns:
            The Array value if the input is a bracketed list. None otherwise.
        """
        if len(value) < 2 or not value.startswith("[") or not value.endswith("]"):
            return None

        interior = value[1:-1]
        if not interior.strip():
            return Array([])

        items: list[JamlValue] = []
        for element in interior.split(","):
            element = element.strip()
            for converter in self._element_converters:
                item = converter.validate_value(element)
                if item is not None:
                    items.append(item)
                    break
        return Array(items)


class JamlValueConverter:
    """Classifies raw value text into JAML values using a fixed chain of converters.

    The chain applies the converters in the order Boolean > Integer > Array > String. Since the String converter accepts
    any text, the classification always succeeds.

    Attributes:
        _converters: The converters that make up the classification chain, in precedence order.
    """

    def __init__(self) -> None:
        self._converters = (BooleanConverter(), IntegerConverter(), ArrayConverter(), StringConverter())

    def __repr__(self) -> str:
        """Returns a string representation of the JamlValueConverter instance."""
        return f"JamlValueConverter(converters={self._converters})"

    def validate_value(self, value: str) -> JamlValue:
        """Classifies the input raw value text.

        Args:
            value: The raw value text, already stripped of surrounding whitespace.

        Returns:
            The JAML value produced by the first converter in the chain that accepts the input.

        Raises:
            TypeError: If the input is not a string.
        """
        if not isinstance(value, str):
            message = (
                f"Unable to classify the raw value. Expected a string, but encountered {value} of type "
                f"{type(value).__name__}."
            )
            console.error(message=message, error=TypeError)

        for converter in self._converters:
            result = converter.validate_value(value)
            if result is not None:
                return result

        # Fallback, should not be reachable: the chain always ends with the StringConverter.
        return String(value)

"""Provides the dataclasses that make up the JAML value tree and the functions that convert the tree to and from
native Python objects.

A parsed .jaml file is represented by a root dictionary that maps entry names to one of the five value variants
defined here. Section values own further dictionaries, which allows nesting the data to any depth.
"""

from typing import Any, TypeAlias
from dataclasses import field, dataclass
from collections.abc import Iterable

from ataraxis_base_utilities import console

# The range of a signed 64-bit integer, which is the only integer type supported by the format.
INTEGER_MINIMUM = -(2**63)
INTEGER_MAXIMUM = 2**63 - 1


@dataclass
class String:
    """Stores a string value. Strings are kept verbatim, the format has no quoting or escaping syntax."""

    text: str
    """The stored text."""

    def __post_init__(self) -> None:
        if not isinstance(self.text, str):
            message = (
                f"Unable to initialize String instance. Expected a string 'text' argument value, but encountered "
                f"{self.text} of type {type(self.text).__name__}."
            )
            console.error(message=message, error=TypeError)


@dataclass
class Integer:
    """Stores a signed 64-bit integer value."""

    value: int
    """The stored integer."""

    def __post_init__(self) -> None:
        # Booleans are a subclass of int, but are a separate variant of the format.
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            message = (
                f"Unable to initialize Integer instance. Expected an integer 'value' argument, but encountered "
                f"{self.value} of type {type(self.value).__name__}."
            )
            console.error(message=message, error=TypeError)
        if not INTEGER_MINIMUM <= self.value <= INTEGER_MAXIMUM:
            message = (
                f"Unable to initialize Integer instance. Expected a 'value' argument within the signed 64-bit range "
                f"[{INTEGER_MINIMUM}, {INTEGER_MAXIMUM}], but encountered {self.value}."
            )
            console.error(message=message, error=ValueError)


@dataclass
class Boolean:
    """Stores a boolean value."""

    value: bool
    """The stored boolean."""

    def __post_init__(self) -> None:
        if not isinstance(self.value, bool):
            message = (
                f"Unable to initialize Boolean instance. Expected a boolean 'value' argument, but encountered "
                f"{self.value} of type {type(self.value).__name__}."
            )
            console.error(message=message, error=TypeError)


@dataclass
class Array:
    """Stores an ordered sequence of values.

    Notes:
        Only String, Integer, and Boolean elements can be written as JAML text. Arrays holding other arrays or sections
        can be constructed, but fail to serialize.
    """

    items: list["JamlValue"] = field(default_factory=list)
    """The stored elements, in order."""

    def __post_init__(self) -> None:
        if isinstance(self.items, (str, dict)) or not isinstance(self.items, Iterable):
            message = (
                f"Unable to initialize Array instance. Expected an iterable of JAML values as 'items' argument, but "
                f"encountered {self.items} of type {type(self.items).__name__}."
            )
            console.error(message=message, error=TypeError)
        self.items = list(self.items)
        for item in self.items:
            if not isinstance(item, _VALUE_TYPES):
                message = (
                    f"Unable to initialize Array instance. Expected all elements to be JAML values, but encountered "
                    f"{item} of type {type(item).__name__}."
                )
                console.error(message=message, error=TypeError)


@dataclass
class Section:
    """Stores a named nested scope that maps entry names to values.

    Notes:
        The entry order is the order in which the entries are written back to text. Re-assigning an existing key keeps
        its original position.
    """

    entries: dict[str, "JamlValue"] = field(default_factory=dict)
    """The stored entries, in insertion order."""

    def __post_init__(self) -> None:
        if not isinstance(self.entries, dict):
            message = (
                f"Unable to initialize Section instance. Expected a dictionary 'entries' argument, but encountered "
                f"{self.entries} of type {type(self.entries).__name__}."
            )
            console.error(message=message, error=TypeError)
        for key, value in self.entries.items():
            if not isinstance(key, str) or not isinstance(value, _VALUE_TYPES):
                message = (
                    f"Unable to initialize Section instance. Expected string keys mapped to JAML values, but "
                    f"encountered the key {key!r} mapped to {value} of type {type(value).__name__}."
                )
                console.error(message=message, error=TypeError)


JamlValue: TypeAlias = String | Integer | Boolean | Array | Section
"""The union of all value variants supported by the format."""

_VALUE_TYPES = (String, Integer, Boolean, Array, Section)


def to_python(value: JamlValue | dict[str, JamlValue]) -> Any:
    """Recursively converts a JAML value (or a root dictionary of values) into native Python objects.

    Strings, integers, and booleans become str, int, and bool; arrays become lists; sections and root dictionaries
    become dicts that preserve the entry order.

    Args:
        value: The value or root dictionary to convert.

    Returns:
        The native Python representation of the input.

    Raises:
        TypeError: If the input (or any nested element) is not a JAML value.
    """
    if isinstance(value, dict):
        return {key: to_python(item) for key, item in value.items()}
    if isinstance(value, String):
        return value.text
    if isinstance(value, (Integer, Boolean)):
        return value.value
    if isinstance(value, Array):
        return [to_python(item) for item in value.items]
    if isinstance(value, Section):
        return {key: to_python(item) for key, item in value.entries.items()}

    message = (
        f"Unable to convert the input to a native Python object. Expected a JAML value or a dictionary of JAML values, "
        f"but encountered {value} of type {type(value).__name__}."
    )
    console.error(message=message, error=TypeError)
    raise TypeError(message)  # Fallback, should not be reachable


def from_python(value: Any) -> JamlValue:
    """Recursively converts a native Python object into the matching JAML value.

    Notes:
        Booleans are checked before integers, since bool is a subclass of int. Existing JAML values are returned
        unchanged, which allows mixing native and JAML objects inside lists and dictionaries.

    Args:
        value: The str, int, bool, list, tuple, or dict to convert. Dictionary keys must be strings.

    Returns:
        The JAML value that represents the input.

    Raises:
        TypeError: If the input (or any nested element) has a type that the format cannot represent.
    """
    if isinstance(value, _VALUE_TYPES):
        return value
    if isinstance(value, bool):
        return Boolean(value)
    if isinstance(value, int):
        return Integer(value)
    if isinstance(value, str):
        return String(value)
    if isinstance(value, (list, tuple)):
        return Array([from_python(item) for item in value])
    if isinstance(value, dict):
        return Section({key: from_python(item) for key, item in value.items()})

    message = (
        f"Unable to convert the input to a JAML value. Expected a string, integer, boolean, list, tuple, or "
        f"dictionary, but encountered {value} of type {type(value).__name__}."
    )
    console.error(message=message, error=TypeError)
    raise TypeError(message)  # Fallback, should not be reachable

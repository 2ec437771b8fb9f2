"""This package provides the value model of the JAML format and the exception classes raised by the library.

Currently, it exposes the following assets:
    - String, Integer, Boolean, Array, Section: The dataclasses that make up a JAML value tree.
    - to_python, from_python: Functions that convert value trees to and from native Python objects.
    - JamlError and its subclasses: The exceptions raised when parsing, serializing, or accessing JAML data.

See individual package modules for more details on each of the exposed assets.
"""

from .jaml_errors import (
    JamlError,
    JamlIOError,
    JamlKeyError,
    JamlSyntaxError,
    JamlStructureError,
    JamlSerializationError,
)
from .jaml_values import (
    Array,
    String,
    Boolean,
    Integer,
    Section,
    JamlValue,
    to_python,
    from_python,
)

__all__ = [
    "Array",
    "Boolean",
    "Integer",
    "JamlError",
    "JamlIOError",
    "JamlKeyError",
    "JamlSerializationError",
    "JamlStructureError",
    "JamlSyntaxError",
    "JamlValue",
    "Section",
    "String",
    "from_python",
    "to_python",
]

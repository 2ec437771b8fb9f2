"""A small, line-oriented configuration format with typed values and dotted-path access to nested sections.

See the data_model, data_converters, and data_structures packages for more details on the exposed assets.
"""

from .data_model import (
    Array,
    String,
    Boolean,
    Integer,
    Section,
    JamlError,
    JamlValue,
    JamlIOError,
    JamlKeyError,
    JamlSyntaxError,
    JamlStructureError,
    JamlSerializationError,
    to_python,
    from_python,
)
from .data_converters import parse, serialize
from .data_structures import JamlStore

__all__ = [
    "Array",
    "Boolean",
    "Integer",
    "JamlError",
    "JamlIOError",
    "JamlKeyError",
    "JamlSerializationError",
    "JamlStore",
    "JamlStructureError",
    "JamlSyntaxError",
    "JamlValue",
    "Section",
    "String",
    "from_python",
    "parse",
    "serialize",
    "to_python",
]

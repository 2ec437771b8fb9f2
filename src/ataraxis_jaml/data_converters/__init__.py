"""This package provides the assets that convert JAML text to value trees and back.

Currently, it exposes the following assets:
    - parse: Parses JAML text into a root dictionary of typed values.
    - serialize: Serializes a root dictionary of typed values into canonical JAML text.
    - BooleanConverter, IntegerConverter, ArrayConverter, StringConverter: Classify raw value text into a single
        value variant.
    - JamlValueConverter: Chains the base converters to classify any raw value text.

See individual package modules for more details on each of the exposed assets.
"""

from .jaml_parser import parse
from .jaml_serializer import serialize
from .value_converters import (
    ArrayConverter,
    StringConverter,
    BooleanConverter,
    IntegerConverter,
    JamlValueConverter,
)

__all__ = [
    "ArrayConverter",
    "BooleanConverter",
    "IntegerConverter",
    "JamlValueConverter",
    "StringConverter",
    "parse",
    "serialize",
]

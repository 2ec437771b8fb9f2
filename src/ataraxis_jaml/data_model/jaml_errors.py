"""Provides the exception classes raised by the library and the helper used to raise them through the shared console.

Notes:
    All recoverable errors derive from JamlError. JamlStructureError is deliberately kept outside that hierarchy, as it
    signals a caller contract violation (an attempt to treat a scalar value as a section) rather than bad input.
"""

from typing import Any, NoReturn

from ataraxis_base_utilities import console


class JamlError(Exception):
    """The base class for all recoverable errors raised while parsing, serializing, or accessing JAML data."""


class JamlSyntaxError(JamlError, ValueError):
    """Raised when a line of the parsed text is neither blank, a comment, a section header, nor a key-value pair.

    Attributes:
        line_number: The 1-based number of the offending line.
    """

    line_number: int | None = None


class JamlKeyError(JamlError, KeyError):
    """Raised when a dotted path cannot be resolved to a stored value.

    Attributes:
        path: The full dotted path originally requested by the caller.
    """

    path: str | None = None

    def __str__(self) -> str:
        # KeyError wraps its message in quotes, which breaks multi-line console messages.
        return str(self.args[0]) if self.args else ""


class JamlIOError(JamlError, OSError):
    """Raised when reading or writing a .jaml file fails for any reason other than the file being absent during load.

    Attributes:
        operation: The name of the failed operation, either 'load' or 'save'.
        file_path: The path to the file the operation was working with.
    """

    operation: str | None = None
    file_path: Any = None


class JamlSerializationError(JamlError, ValueError):
    """Raised when a value tree cannot be rendered as JAML text, for example, when an array contains another array.

    Attributes:
        path: The dotted path of the entry that could not be rendered.
    """

    path: str | None = None


class JamlStructureError(TypeError):
    """Raised when a dotted path descends through a stored value that is not a section.

    This is a programming error on the caller side: the library never converts existing scalar data into a section.
    """

    path: str | None = None


def raise_error(error: type[Exception], message: str, **details: Any) -> NoReturn:
    """Raises the requested exception through the shared console and attaches the provided details to it.

    Args:
        error: The exception class to raise.
        message: The human-readable error message. The console formats and, if enabled, logs it before raising.
        **details: Additional attributes to set on the raised exception instance (for example, 'line_number').

    Raises:
        The requested exception class, carrying the formatted message and the provided details.
    """
    try:
        console.error(message=message, error=error)
    except error as exception:
        for name, value in details.items():
            setattr(exception, name, value)
        raise

    # Fallback, should not be reachable
    exception = error(message)
    for name, value in details.items():
        setattr(exception, name, value)
    raise exception

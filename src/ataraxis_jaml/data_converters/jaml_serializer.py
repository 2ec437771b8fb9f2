"""Provides the serialize() function that converts a root dictionary of typed values into canonical JAML text."""

from ..data_model.jaml_errors import JamlSerializationError, raise_error
from ..data_model.jaml_values import Array, String, Boolean, Integer, Section, JamlValue


def _render_scalar(value: JamlValue, path: str) -> str:
    """Renders a String, Integer, or Boolean value as JAML text.

    Args:
        value: The value to render.
        path: The dotted path of the entry that holds the value. Only used for error messages.

    Returns:
        The text form of the value.

    Raises:
        JamlSerializationError: If the value is not a scalar.
    """
    if isinstance(value, String):
        return value.text
    if isinstance(value, Boolean):
        return "true" if value.value else "false"
    if isinstance(value, Integer):
        return str(value.value)

    message = (
        f"Unable to serialize the entry '{path}'. Arrays can only contain String, Integer, and Boolean values, but "
        f"encountered a nested {type(value).__name__} value."
    )
    raise_error(JamlSerializationError, message, path=path)


def _render_value(value: JamlValue, path: str) -> str:
    """Renders a non-section value as the right-hand side of a key-value line."""
    if isinstance(value, Array):
        return "[" + ", ".join(_render_scalar(item, path) for item in value.items) + "]"
    if isinstance(value, (String, Boolean, Integer)):
        return _render_scalar(value, path)

    message = (
        f"Unable to serialize the entry '{path}'. Expected a JAML value, but encountered {value} of type "
        f"{type(value).__name__}."
    )
    raise_error(JamlSerializationError, message, path=path)


def _serialize_entries(entries: dict[str, JamlValue], prefix: str | None, lines: list[str]) -> None:
    """Appends the lines for one entry dictionary and, recursively, all of its sections to the output list.

    Non-section entries are always written before any sub-section header, so that all keys of a section stay directly
    under its header.

    Args:
        entries: The entry dictionary to serialize.
        prefix: The dotted path of the section that owns the entries, or None for the root dictionary.
        lines: The output list. Each element is a full line, including the terminating newline.
    """
    for key, value in entries.items():
        if not isinstance(value, Section):
            path = key if prefix is None else f"{prefix}.{key}"
            lines.append(f"{key} = {_render_value(value, path)}\n")

    for key, value in entries.items():
        if isinstance(value, Section):
            section_path = key if prefix is None else f"{prefix}.{key}"
            lines.append(f"\n[{section_path}]\n")
            _serialize_entries(value.entries, section_path, lines)


def serialize(root: dict[str, JamlValue]) -> str:
    """Serializes a root dictionary of typed values into canonical JAML text.

    The output lists the scalar and array entries of each level first, followed by a blank line and a
    '[full.dotted.path]' header for every section, in insertion order and depth-first. Parsing the output reproduces an
    equal root dictionary.

    Notes:
        Comments and the original key layout of parsed text are not preserved.

    Args:
        root: The root dictionary to serialize.

    Returns:
        The JAML text.

    Raises:
        JamlSerializationError: If an array contains an array or a section, or the tree contains non-JAML objects.
    """
    lines: list[str] = []
    _serialize_entries(entries=root, prefix=None, lines=lines)
    return "".join(lines)

"""Provides the parse() function that converts JAML text into a root dictionary of typed values."""

from ..data_model.jaml_errors import JamlSyntaxError, raise_error
from ..data_model.jaml_values import Section, JamlValue
from .value_converters import JamlValueConverter

# Classifies the raw value text of every key-value line.
_value_converter = JamlValueConverter()


def _enter_section(root: dict[str, JamlValue], section_path: str, line_number: int) -> dict[str, JamlValue]:
    """Finds or creates the chain of sections addressed by a section header and returns the innermost entry dictionary.

    Args:
        root: The root dictionary of the parsed document.
        section_path: The dotted path enclosed in the header brackets.
        line_number: The 1-based number of the header line. Only used for error messages.

    Returns:
        The live entry dictionary of the addressed section.

    Raises:
        JamlSyntaxError: If any segment of the path already holds a non-section value.
    """
    current = root
    for segment in section_path.split("."):
        if segment not in current:
            current[segment] = Section()

        child = current[segment]
        if not isinstance(child, Section):
            message = (
                f"Unable to parse JAML text: syntax error in line {line_number}. The section header '[{section_path}]' "
                f"descends through the key '{segment}', which already holds a value of type {type(child).__name__}."
            )
            raise_error(JamlSyntaxError, message, line_number=line_number)
        current = child.entries
    return current


def parse(text: str) -> dict[str, JamlValue]:
    """Parses JAML text into a root dictionary of typed values.

    Blank lines and full-line '#' comments are skipped. A '[dotted.path]' line makes the addressed section (created if
    missing) the target of the following key-value lines; before the first header, key-value lines go to the root.
    A line with exactly one '=' is a key-value pair: both sides are stripped and the value is classified as a boolean,
    integer, array, or string, in that order. Assigning an existing key replaces its value in place.

    Notes:
        Parsing stops at the first invalid line. No partial result is returned.

    Args:
        text: The full JAML text to parse.

    Returns:
        The root dictionary that maps top-level entry names to values, in document order.

    Raises:
        JamlSyntaxError: If a non-blank, non-comment line is neither a section header nor a line with exactly one '='.
    """
    root: dict[str, JamlValue] = {}
    current = root

    for line_number, line in enumerate(text.split("\n"), start=1):
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if line.startswith("[") and line.endswith("]"):
            current = _enter_section(root=root, section_path=line[1:-1], line_number=line_number)
        elif line.count("=") == 1:
            key, raw_value = line.split("=")
            current[key.strip()] = _value_converter.validate_value(raw_value.strip())
        else:
            message = (
                f"Unable to parse JAML text: syntax error in line {line_number}. Expected a section header, a comment, "
                f"or a line with exactly one '=' separating a key from its value, but encountered '{line}'."
            )
            raise_error(JamlSyntaxError, message, line_number=line_number)

    return root

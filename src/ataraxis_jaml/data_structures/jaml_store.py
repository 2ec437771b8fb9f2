"""Provides the JamlStore class, which wraps a JAML value tree and exposes dotted-path access to its values, as well as
methods to load and save the tree as a .jaml file.
"""

import os
import copy
from typing import Any, Self
from pathlib import Path

from filelock import FileLock
from ataraxis_base_utilities import LogLevel, console, ensure_directory_exists

from ..data_model.jaml_errors import JamlIOError, JamlKeyError, JamlStructureError, raise_error
from ..data_model.jaml_values import Section, JamlValue, to_python, from_python
from ..data_converters.jaml_parser import parse
from ..data_converters.jaml_serializer import serialize

# The maximum time, in seconds, to wait for the .lock file of the target .jaml file during load() and save() calls.
_LOCK_TIMEOUT = 10.0


class JamlStore:
    """Wraps a JAML value tree and provides methods for reading and writing its values using dotted paths.

    The store exclusively owns one root dictionary. Reading a path never modifies the tree, while writing a path creates
    any missing intermediate sections on demand. Values written to the store are copied, so that no two paths (and no
    outside object) ever share a section or an array with the managed tree.

    Notes:
        The class does not synchronize access to its in-memory data. If the same instance is shared between threads,
        the caller has to guard every method call with its own lock. The save() method (and the load() method, for
        existing files in writable directories), however, acquires a .lock file next to the target .jaml file, so that
        independent processes never read a partially written file.

        Paths always use dots to separate section names, which matches the section headers of .jaml files. Therefore,
        a key that contains a dot can only be reached as a chain of nested sections.

    Args:
        seed_data: An optional dictionary used as the initial tree. Values can be JAML values or native Python objects
            (str, int, bool, list, dict), which are converted on initialization. If not provided, the store starts
            empty.

    Attributes:
        _data: The managed root dictionary. This object should never be replaced directly!

    Raises:
        TypeError: If the seed_data is not a dictionary (or None).
    """

    def __init__(self, seed_data: dict[str, Any] | None = None) -> None:
        if seed_data is not None and not isinstance(seed_data, dict):
            message = (
                f"A dictionary or None 'seed_data' expected when initializing JamlStore class instance, but "
                f"encountered '{type(seed_data).__name__}' instead."
            )
            console.error(message=message, error=TypeError)

        # The seed is copied, so that the store never shares objects with the caller. Converting it through a Section
        # validates the keys and converts any native Python values.
        seed = copy.deepcopy(seed_data) if seed_data is not None else {}
        self._data: dict[str, JamlValue] = from_python(seed).entries

    def __repr__(self) -> str:
        """Returns a string representation of the class instance."""
        return f"JamlStore(data={self._data})"

    @classmethod
    def from_string(cls, text: str) -> Self:
        """Creates a new store that wraps the tree parsed from the input JAML text.

        Raises:
            JamlSyntaxError: If the text contains an invalid line.
        """
        store = cls()
        store._data = parse(text)
        return store

    @classmethod
    def from_file(cls, file_path: Path) -> Self:
        """Creates a new store and loads its tree from the specified .jaml file.

        See the load() method for details on how missing files and errors are handled.
        """
        store = cls()
        store.load(file_path)
        return store

    @property
    def data(self) -> dict[str, JamlValue]:
        """Returns the managed root dictionary.

        The returned object is the live tree, not a copy: modifying it modifies the store.
        """
        return self._data

    @staticmethod
    def _split_path(path: str) -> list[str]:
        """Splits the input dotted path into section names, ensuring the path is a string."""
        if not isinstance(path, str):
            message = (
                f"A string 'path' expected when accessing JamlStore values, but encountered '{path}' of type "
                f"'{type(path).__name__}' instead."
            )
            console.error(message=message, error=TypeError)
        return path.split(".")

    def _resolve_parent(self, path: str) -> tuple[dict[str, JamlValue], str]:
        """Resolves the entry dictionary that holds the final segment of the input path.

        Args:
            path: The full path to resolve.

        Returns:
            A tuple of the live entry dictionary of the parent section and the name of the final segment.

        Raises:
            JamlKeyError: If any intermediate segment is missing or does not hold a section.
        """
        *sections, key = self._split_path(path)
        current = self._data
        for name in sections:
            child = current.get(name)
            if not isinstance(child, Section):
                message = (
                    f"Unable to find the value at path '{path}'. The intermediate key '{name}' is missing or does not "
                    f"hold a section."
                )
                raise_error(JamlKeyError, message, path=path)
            current = child.entries
        return current, key

    def get_value(self, path: str) -> JamlValue:
        """Reads the value stored at the specified dotted path.

        Args:
            path: The path to the value, for example 'settings.ui.theme'. The last segment can name a section, in which
                case the Section value itself is returned.

        Returns:
            The stored value object. This is not a copy: modifying a returned Section or Array modifies the store.

        Raises:
            JamlKeyError: If any segment of the path cannot be resolved. The error names the full requested path.
        """
        entries, key = self._resolve_parent(path)
        if key not in entries:
            message = f"Unable to find the value at path '{path}'. The key '{key}' does not exist."
            raise_error(JamlKeyError, message, path=path)
        return entries[key]

    def set_value(self, path: str, value: JamlValue | Any) -> None:
        """Writes the input value to the specified dotted path.

        Missing intermediate sections are created. If the final key already exists, its value is replaced in place,
        keeping the key's position in the output file.

        Args:
            path: The path to write, for example 'settings.ui.theme'.
            value: The value to write. The store keeps a copy of the value. Native Python values (str, int, bool, list,
                dict) are converted to JAML values.

        Raises:
            JamlStructureError: If an intermediate segment of the path holds a non-section value. Existing data is never
                converted into a section.
            TypeError: If the value cannot be represented in JAML.
        """
        # The stored value never shares objects with the caller or with other paths of the tree.
        value = from_python(copy.deepcopy(value))

        *sections, key = self._split_path(path)
        current = self._data
        for name in sections:
            if name not in current:
                current[name] = Section()

            child = current[name]
            if not isinstance(child, Section):
                message = (
                    f"Unable to write the value at path '{path}'. The intermediate key '{name}' holds a "
                    f"{type(child).__name__} value, which cannot be used as a section."
                )
                raise_error(JamlStructureError, message, path=path)
            current = child.entries

        current[key] = value

    def delete_value(self, path: str) -> None:
        """Removes the value (or the whole section) stored at the specified dotted path.

        Raises:
            JamlKeyError: If any segment of the path cannot be resolved.
        """
        entries, key = self._resolve_parent(path)
        if key not in entries:
            message = f"Unable to delete the value at path '{path}'. The key '{key}' does not exist."
            raise_error(JamlKeyError, message, path=path)
        del entries[key]

    def extract_value_paths(self) -> tuple[str, ...]:
        """Crawls the managed tree and returns the path to every non-section value.

        The paths are listed in the order the values appear in the saved file: the values of each level first, followed
        by the contents of its sections. Empty sections do not contribute any paths.
        """

        def _inner_extract(entries: dict[str, JamlValue], prefix: list[str]) -> list[str]:
            paths = [
                ".".join(prefix + [key])
                for key, value in entries.items()
                if not isinstance(value, Section)
            ]
            for key, value in entries.items():
                if isinstance(value, Section):
                    paths.extend(_inner_extract(value.entries, prefix + [key]))
            return paths

        return tuple(_inner_extract(self._data, []))

    def to_string(self) -> str:
        """Serializes the managed tree into canonical JAML text.

        Raises:
            JamlSerializationError: If any array in the tree contains an array or a section.
        """
        return serialize(self._data)

    def to_python(self) -> dict[str, Any]:
        """Returns the managed tree converted to native Python objects."""
        return to_python(self._data)

    def load(self, file_path: Path) -> None:
        """Replaces the managed tree with the tree parsed from the specified .jaml file.

        Notes:
            If the file does not exist, the store is reset to an empty tree instead of raising an error. All other
            read failures are reported as JamlIOError.

            The .lock file is only used when the file exists and its directory is writable. Missing files never leave
            a .lock file (or any directory) behind, and files inside read-only directories are read without the lock.

        Args:
            file_path: The path to the .jaml file to read.

        Raises:
            JamlIOError: If the file exists but cannot be read or decoded as UTF-8, or its .lock file cannot be
                acquired in time.
            JamlSyntaxError: If the file contains an invalid line.
        """
        file_path = Path(file_path)
        try:
            if file_path.exists() and os.access(file_path.parent, os.W_OK):
                lock = FileLock(str(file_path.with_suffix(file_path.suffix + ".lock")))
                with lock.acquire(timeout=_LOCK_TIMEOUT):
                    text = file_path.read_text(encoding="utf-8")
            else:
                text = file_path.read_text(encoding="utf-8")
        except FileNotFoundError:
            console.echo(
                message=f"The file {file_path} does not exist. Starting with an empty JAML store.",
                level=LogLevel.INFO,
            )
            self._data = {}
            return
        except (OSError, UnicodeDecodeError) as exception:
            message = f"Unable to load the JAML data from the file {file_path}: {exception}"
            raise_error(JamlIOError, message, operation="load", file_path=file_path)

        self._data = parse(text)

    def save(self, file_path: Path) -> None:
        """Serializes the managed tree and writes it to the specified .jaml file, replacing any existing content.

        Notes:
            Missing parent directories are created. The file always receives the canonical layout, so saving a loaded
            file is not guaranteed to reproduce its original text.

        Args:
            file_path: The path to the .jaml file to write.

        Raises:
            JamlIOError: If the file cannot be written, or its .lock file cannot be acquired in time.
            JamlSerializationError: If any array in the tree contains an array or a section.
        """
        file_path = Path(file_path)

        # Serializes before touching the file, so that invalid trees never truncate existing data.
        text = serialize(self._data)

        try:
            ensure_directory_exists(file_path)
            lock = FileLock(str(file_path.with_suffix(file_path.suffix + ".lock")))
            with lock.acquire(timeout=_LOCK_TIMEOUT):
                with file_path.open("w", encoding="utf-8") as jaml_file:
                    jaml_file.write(text)
        except OSError as exception:
            message = f"Unable to save the JAML data to the file {file_path}: {exception}"
            raise_error(JamlIOError, message, operation="save", file_path=file_path)

        console.echo(message=f"JAML data saved to the file {file_path}.", level=LogLevel.INFO)

"""This package provides the JamlStore class, which wraps a JAML value tree and exposes methods to manipulate its
values using dotted paths and to load and save the tree as a .jaml file.

See the jaml_store.py module for more details on the exposed class.
"""

from .jaml_store import JamlStore

__all__ = ["JamlStore"]

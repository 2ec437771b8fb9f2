from pathlib import Path
import tempfile

from ataraxis_base_utilities import console
from ataraxis_jaml import Array, String, Integer, Boolean, JamlStore, JamlError, parse, serialize

# Enables the console, so that the messages emitted by the store (e.g., when saving data) are printed to the terminal.
console.enable()

# JAML text is parsed into a root dictionary of typed values. Section headers use dotted paths to nest sections.
text = """
name = Jan
age = 22

[settings]
dark_mode = true
refresh_rate = 144

[settings.ui]
font_size = 14
theme = dark
languages = [rust, c, python]
"""
parsed = parse(text)
print(f"Parsed:\n{parsed}")

# Serializing the tree produces the canonical text: keys of each section first, followed by its sub-sections.
print(f"\nSerialized:\n{serialize(parsed)}")

# The store wraps a tree and provides dotted-path access. Loading a missing file starts with an empty store.
tempdir = tempfile.TemporaryDirectory()  # Creates a temporary directory for illustration purposes
config_path = Path(tempdir.name) / "config.jaml"
store = JamlStore.from_file(config_path)

# Writing a value creates all missing intermediate sections. Native Python values are converted automatically.
store.set_value("settings.ui.theme", String("dark"))
store.set_value("settings.ui.font_size", Integer(14))
store.set_value("settings.ui.languages", Array([String("rust"), String("c++"), String("python")]))
store.set_value("settings.refresh_rate", 144)
store.set_value("settings.dark_mode", Boolean(True))

# Reading a value returns the stored JAML value.
assert store.get_value("settings.ui.theme") == String("dark")
print(f"UI theme: {store.get_value('settings.ui.theme')}")
print(f"Languages: {store.get_value('settings.ui.languages')}")

# Unresolvable paths raise JamlKeyError, which (like all recoverable library errors) derives from JamlError.
try:
    store.get_value("settings.missing")
except JamlError as error:
    print(f"Lookup failed: {error}")

# Saves the store and reloads it into a new instance.
store.save(config_path)
reloaded = JamlStore.from_file(config_path)
assert reloaded.data == store.data
print(f"\nCurrent configuration:\n{reloaded.to_python()}")

tempdir.cleanup()

"""modern-cli: scaffold and rename projects built from the fullstack boilerplate."""

__version__ = "1.0.0"

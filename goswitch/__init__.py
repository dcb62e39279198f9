"""goswitch - download, cache and switch between Go toolchain releases."""

__version__ = "0.1.0"

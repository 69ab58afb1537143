"""dbgc - find and toggle leftover debug output statements in source code."""

__version__ = "0.3.0"

"""bff - command-line buffer editor."""

__version__ = "0.1.0"

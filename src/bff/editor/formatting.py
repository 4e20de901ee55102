"""Numbered line display."""

from __future__ import annotations


def format_line(number: int, content: str, width: int = 4, pad_char: str = "0") -> str:
    """Render ``content`` prefixed by its 1-based number, e.g. ``0007: foo``.

    Numbers wider than ``width`` are shown in full.
    """
    return f"{str(number).rjust(width, pad_char)}: {content}"

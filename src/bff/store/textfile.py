"""Verbatim newline-delimited text file I/O."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Iterable

ENCODING = "utf-8"
ERRORS = "surrogateescape"


def read_lines(path: Path | str) -> list[str]:
    """Read a file as ``\\n``-delimited records.

    A trailing newline does not produce an empty last record. Undecodable
    bytes survive a read/write cycle via ``surrogateescape``.
    """
    with open(path, "r", encoding=ENCODING, errors=ERRORS, newline="") as f:
        text = f.read()
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def render_lines(lines: Iterable[str]) -> str:
    return "".join(f"{line}\n" for line in lines)


def write_lines(path: Path | str, lines: Iterable[str], atomic: bool = False) -> None:
    """Write each line followed by ``\\n``, replacing the file's content.

    With ``atomic`` the data goes to a sibling temp file that is renamed over
    the target, so readers see either the old or the new content.
    Raises OSError if the target cannot be written.
    """
    content = render_lines(lines)
    if not atomic:
        with open(path, "w", encoding=ENCODING, errors=ERRORS, newline="") as f:
            f.write(content)
        return

    target = Path(path)
    fd, tmp_path = tempfile.mkstemp(dir=target.parent, prefix=f".{target.name}.")
    try:
        with os.fdopen(fd, "w", encoding=ENCODING, errors=ERRORS, newline="") as f:
            f.write(content)
        os.replace(tmp_path, target)
    except BaseException:
        try:
            os.unlink(tmp_path)
        except OSError:
            pass
        raise

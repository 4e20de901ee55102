"""Line editor: 1-based line operations against stored buffers."""

from __future__ import annotations

import logging
from typing import Callable

import click

from bff.editor.formatting import format_line
from bff.store.buffer import Buffer
from bff.store.buffer_store import BufferStore

logger = logging.getLogger(__name__)

Emitter = Callable[[str], None]


def _echo_err(message: str) -> None:
    click.echo(message, err=True)


class LineEditor:
    """Read and mutate buffer lines by 1-based address.

    Every call re-resolves the buffer through the store. Mutations validate
    before touching the buffer, and persist its snapshot only on success.
    Print operations write numbered lines through ``emit`` and diagnostics
    through ``report``.
    """

    def __init__(
        self,
        store: BufferStore,
        *,
        number_width: int = 4,
        pad_char: str = "0",
        emit: Emitter | None = None,
        report: Emitter | None = None,
    ) -> None:
        self.store = store
        self.number_width = number_width
        self.pad_char = pad_char
        self.emit = emit or click.echo
        self.report = report or _echo_err

    def _commit(self, buf: Buffer, action: str) -> bool:
        buf.is_modified = True
        self.store.persist(buf)
        logger.debug("%s on buffer '%s' (%d lines)", action, buf.name, len(buf.lines))
        return True

    def _valid_content(self, buf: Buffer, content: str) -> bool:
        if "\n" in content:
            logger.debug("Rejected content with embedded newline for buffer '%s'", buf.name)
            return False
        return True

    def replace(self, name: str, number: int, content: str) -> bool:
        buf = self.store.resolve(name)
        if not buf.has_line(number) or not self._valid_content(buf, content):
            return False
        buf.lines[number - 1] = content
        return self._commit(buf, f"replace line {number}")

    def insert(self, name: str, number: int, content: str) -> bool:
        """Insert before line ``number``; past the end means append."""
        buf = self.store.resolve(name)
        if number < 1 or not self._valid_content(buf, content):
            return False
        if number > len(buf.lines):
            buf.lines.append(content)
        else:
            buf.lines.insert(number - 1, content)
        return self._commit(buf, f"insert at {number}")

    def append(self, name: str, content: str) -> bool:
        buf = self.store.resolve(name)
        if not self._valid_content(buf, content):
            return False
        buf.lines.append(content)
        return self._commit(buf, "append")

    def delete(self, name: str, number: int) -> bool:
        buf = self.store.resolve(name)
        if not buf.has_line(number):
            return False
        del buf.lines[number - 1]
        return self._commit(buf, f"delete line {number}")

    def move(self, name: str, src: int, dst: int) -> bool:
        """Move line ``src`` so it lands before original line ``dst``.

        Moving backward puts the line exactly at ``dst``; moving forward
        puts it just before what was line ``dst``.
        """
        buf = self.store.resolve(name)
        if not (buf.has_line(src) and buf.has_line(dst)):
            return False
        content = buf.lines.pop(src - 1)
        target = dst - 1 if dst > src else dst
        buf.lines.insert(target - 1, content)
        return self._commit(buf, f"move line {src} to {dst}")

    def copy(self, name: str, src: int, dst: int) -> bool:
        buf = self.store.resolve(name)
        if not (buf.has_line(src) and buf.has_line(dst)):
            return False
        buf.lines.insert(dst - 1, buf.lines[src - 1])
        return self._commit(buf, f"copy line {src} to {dst}")

    def get(self, name: str, number: int) -> str:
        """Return line ``number``, or an empty string if there is no such line."""
        buf = self.store.resolve(name)
        if not buf.has_line(number):
            return ""
        return buf.lines[number - 1]

    def _emit_line(self, number: int, content: str) -> None:
        self.emit(format_line(number, content, self.number_width, self.pad_char))

    def print_one(self, name: str, number: int) -> bool:
        buf = self.store.resolve(name)
        if not buf.has_line(number):
            self.report(f"Line {number} not found in buffer '{name}'")
            return False
        self._emit_line(number, buf.lines[number - 1])
        return True

    def print_range(self, name: str, start: int, end: int) -> bool:
        """Print lines ``start``..``end`` inclusive, clamped to the buffer.

        An empty range after clamping prints nothing and still succeeds.
        """
        buf = self.store.resolve(name)
        start = max(start, 1)
        end = min(end, len(buf.lines))
        for number in range(start, end + 1):
            self._emit_line(number, buf.lines[number - 1])
        return True

    def print_all(self, name: str) -> bool:
        buf = self.store.resolve(name)
        if not buf.lines:
            self.report(f"Buffer '{name}' not found or empty.")
            return True
        for number, content in enumerate(buf.lines, start=1):
            self._emit_line(number, content)
        return True

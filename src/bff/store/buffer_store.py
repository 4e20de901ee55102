"""Buffer store: name -> Buffer resolution backed by snapshots."""

from __future__ import annotations

import logging
from pathlib import Path

from bff.store.buffer import Buffer
from bff.store.snapshot import SnapshotStore
from bff.store.textfile import read_lines, write_lines

logger = logging.getLogger(__name__)


class BufferStore:
    """Owns every resident buffer and keeps its snapshot current.

    A fresh process starts with nothing resident; ``resolve`` falls back to
    the snapshot port so edits made by earlier invocations are visible.
    """

    def __init__(self, snapshots: SnapshotStore) -> None:
        self.snapshots = snapshots
        self._buffers: dict[str, Buffer] = {}

    def __enter__(self) -> BufferStore:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def is_resident(self, name: str) -> bool:
        return name in self._buffers

    def resolve(self, name: str) -> Buffer:
        """Return the buffer for ``name``, rehydrating or creating it."""
        buf = self._buffers.get(name)
        if buf is not None:
            return buf

        buf = Buffer(name=name)
        snap = self.snapshots.load(name)
        if snap is not None:
            buf.lines = snap.lines
            buf.source_path = snap.source_path
            logger.debug("Rehydrated buffer '%s' from snapshot (%d lines)", name, len(snap.lines))
        else:
            logger.debug("Created empty buffer '%s'", name)
        self._buffers[name] = buf
        return buf

    def persist(self, buf: Buffer) -> None:
        """Rewrite the snapshot for ``buf``. Failures are logged, never raised."""
        try:
            self.snapshots.save(buf.name, buf.lines, source_path=buf.source_path)
        except OSError as e:
            logger.warning("Snapshot write failed for buffer '%s': %s", buf.name, e)

    def open_file(self, name: str, path: Path | str) -> bool:
        """Load ``path`` into buffer ``name``. Returns True on success."""
        buf = self.resolve(name)
        try:
            lines = read_lines(path)
        except OSError as e:
            logger.warning("Cannot open %s: %s", path, e)
            return False

        buf.lines = lines
        buf.source_path = str(path)
        buf.is_modified = False
        self.persist(buf)
        logger.debug("Opened %s into buffer '%s' (%d lines)", path, name, len(lines))
        return True

    def save_file(self, name: str, path: Path | str | None = None) -> bool:
        """Write buffer ``name`` to ``path`` or its source path."""
        buf = self.resolve(name)
        target = str(path) if path else buf.source_path
        if not target:
            logger.debug("Buffer '%s' has no path to save to", name)
            return False

        try:
            write_lines(target, buf.lines)
        except OSError as e:
            logger.warning("Cannot save buffer '%s' to %s: %s", name, target, e)
            return False

        buf.is_modified = False
        if path:
            buf.source_path = str(path)
        self.persist(buf)
        logger.debug("Saved buffer '%s' to %s", name, target)
        return True

    def create_new(self, name: str, path: Path | str | None = None) -> bool:
        """Reset buffer ``name`` to empty, optionally bound to ``path``."""
        buf = self.resolve(name)
        buf.lines = []
        buf.source_path = str(path) if path else ""
        buf.is_modified = False
        self.persist(buf)
        return True

    def close(self) -> None:
        """Flush every resident buffer to its snapshot."""
        for buf in self._buffers.values():
            self.persist(buf)

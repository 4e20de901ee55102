"""Snapshot persistence for buffers.

A snapshot is the full line sequence of a buffer, rewritten after every
mutation so that a later, separate invocation can pick the buffer up again.
On disk it lives at ``<directory>/<encoded name>.tmp``; the buffer's source
path, when it has one, sits next to it in ``<encoded name>.path``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol, Sequence
from urllib.parse import quote

from bff.store.textfile import read_lines, write_lines

logger = logging.getLogger(__name__)

SNAPSHOT_SUFFIX = ".tmp"
SOURCE_SUFFIX = ".path"


@dataclass
class Snapshot:
    lines: list[str] = field(default_factory=list)
    source_path: str = ""


class SnapshotStore(Protocol):
    """Persistence port used by BufferStore."""

    def load(self, name: str) -> Snapshot | None:
        """Return the snapshot for ``name``, or None if there is none."""
        ...

    def save(self, name: str, lines: Sequence[str], source_path: str = "") -> None:
        """Replace the snapshot for ``name``. Raises OSError on failure."""
        ...


class FileSnapshotStore:
    """Snapshots stored as plain text files, one per buffer name."""

    def __init__(self, directory: Path | str, atomic: bool = True) -> None:
        self.directory = Path(directory).expanduser()
        self.atomic = atomic
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            # Saves will fail and be logged by the store; loads find nothing.
            logger.warning("Cannot create snapshot directory %s: %s", self.directory, e)

    def _encode_name(self, name: str) -> str:
        """Encode a buffer name as a single, reversible filename component."""
        return quote(name, safe="", errors="surrogateescape")

    def path_for(self, name: str) -> Path:
        return self.directory / f"{self._encode_name(name)}{SNAPSHOT_SUFFIX}"

    def source_path_for(self, name: str) -> Path:
        return self.directory / f"{self._encode_name(name)}{SOURCE_SUFFIX}"

    def load(self, name: str) -> Snapshot | None:
        path = self.path_for(name)
        try:
            lines = read_lines(path)
        except FileNotFoundError:
            return None
        except OSError as e:
            logger.warning("Cannot read snapshot %s: %s", path, e)
            return None

        source_path = ""
        try:
            recorded = read_lines(self.source_path_for(name))
        except FileNotFoundError:
            recorded = []
        except OSError as e:
            logger.warning("Cannot read source path for buffer '%s': %s", name, e)
            recorded = []
        if recorded:
            source_path = recorded[0]
        return Snapshot(lines=lines, source_path=source_path)

    def save(self, name: str, lines: Sequence[str], source_path: str = "") -> None:
        # Source path first: if it fails, the old lines stay paired with it.
        source = self.source_path_for(name)
        if source_path:
            write_lines(source, [source_path], atomic=self.atomic)
        else:
            source.unlink(missing_ok=True)
        write_lines(self.path_for(name), lines, atomic=self.atomic)


class MemorySnapshotStore:
    """Dict-backed snapshots, shared between BufferStore instances in tests."""

    def __init__(self) -> None:
        self.snapshots: dict[str, Snapshot] = {}
        self.saves = 0

    def load(self, name: str) -> Snapshot | None:
        snap = self.snapshots.get(name)
        if snap is None:
            return None
        return Snapshot(lines=list(snap.lines), source_path=snap.source_path)

    def save(self, name: str, lines: Sequence[str], source_path: str = "") -> None:
        self.snapshots[name] = Snapshot(lines=list(lines), source_path=source_path)
        self.saves += 1

"""Named line buffers and their snapshot persistence."""

from bff.store.buffer import Buffer
from bff.store.buffer_store import BufferStore
from bff.store.snapshot import FileSnapshotStore, MemorySnapshotStore, Snapshot, SnapshotStore

__all__ = [
    "Buffer",
    "BufferStore",
    "Snapshot",
    "SnapshotStore",
    "FileSnapshotStore",
    "MemorySnapshotStore",
]

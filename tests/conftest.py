"""Shared test fixtures."""

import logging
from pathlib import Path

import pytest

from bff.editor import LineEditor
from bff.store import BufferStore, MemorySnapshotStore


@pytest.fixture(autouse=True)
def _reset_bff_logging():
    """Drop handlers installed by CLI runs so later tests don't log to closed streams."""
    yield
    logging.getLogger("bff").handlers.clear()


@pytest.fixture
def sample_config_yaml(tmp_path: Path) -> Path:
    """Create a minimal valid config YAML file."""
    config = tmp_path / "bff.yaml"
    config.write_text(
        """\
snapshots:
  directory: "/tmp/bff-test-snapshots"
  atomic: false
display:
  number_width: 3
"""
    )
    return config


@pytest.fixture
def empty_config_yaml(tmp_path: Path) -> Path:
    """Create an empty config YAML file."""
    config = tmp_path / "bff.yaml"
    config.write_text("{}\n")
    return config


@pytest.fixture
def snapshots() -> MemorySnapshotStore:
    return MemorySnapshotStore()


@pytest.fixture
def store(snapshots: MemorySnapshotStore) -> BufferStore:
    return BufferStore(snapshots)


class Captured:
    def __init__(self) -> None:
        self.out: list[str] = []
        self.err: list[str] = []


@pytest.fixture
def captured() -> Captured:
    return Captured()


@pytest.fixture
def editor(store: BufferStore, captured: Captured) -> LineEditor:
    return LineEditor(store, emit=captured.out.append, report=captured.err.append)

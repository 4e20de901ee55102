"""Tests for snapshot adapters."""

import logging
import os
from pathlib import Path

import pytest

from bff.store.snapshot import FileSnapshotStore, MemorySnapshotStore, Snapshot
from bff.store.textfile import read_lines


class TestFileSnapshotStore:
    def test_creates_directory(self, tmp_path: Path):
        directory = tmp_path / "a" / "b" / "snaps"
        FileSnapshotStore(directory)
        assert directory.is_dir()

    def test_load_missing_returns_none(self, tmp_path: Path):
        snaps = FileSnapshotStore(tmp_path)
        assert snaps.load("nothing") is None

    def test_save_writes_one_record_per_line(self, tmp_path: Path):
        snaps = FileSnapshotStore(tmp_path)
        snaps.save("t", ["a", "", "c"])
        assert (tmp_path / "t.tmp").read_bytes() == b"a\n\nc\n"

    def test_save_load_keeps_source_path(self, tmp_path: Path):
        snaps = FileSnapshotStore(tmp_path)
        snaps.save("t", ["x"], source_path="/tmp/x.txt")
        assert snaps.load("t") == Snapshot(lines=["x"], source_path="/tmp/x.txt")

    def test_clearing_source_path_removes_sidecar(self, tmp_path: Path):
        snaps = FileSnapshotStore(tmp_path)
        snaps.save("t", ["x"], source_path="/tmp/x.txt")
        snaps.save("t", ["x"])
        assert not snaps.source_path_for("t").exists()
        assert snaps.load("t").source_path == ""

    def test_empty_buffer_snapshot(self, tmp_path: Path):
        snaps = FileSnapshotStore(tmp_path)
        snaps.save("t", [])
        assert (tmp_path / "t.tmp").read_bytes() == b""
        assert snaps.load("t") == Snapshot(lines=[], source_path="")

    def test_full_rewrite(self, tmp_path: Path):
        snaps = FileSnapshotStore(tmp_path, atomic=False)
        snaps.save("t", ["1", "2", "3"])
        snaps.save("t", ["only"])
        assert snaps.load("t").lines == ["only"]

    def test_name_encoding_stays_in_directory(self, tmp_path: Path):
        snaps = FileSnapshotStore(tmp_path / "snaps")
        path = snaps.path_for("../escape/me")
        assert path.parent == tmp_path / "snaps"
        assert "/" not in path.name
        snaps.save("../escape/me", ["x"])
        assert snaps.load("../escape/me").lines == ["x"]

    def test_save_into_missing_directory_raises(self, tmp_path: Path):
        snaps = FileSnapshotStore(tmp_path / "snaps")
        (tmp_path / "snaps").rmdir()
        with pytest.raises(OSError):
            snaps.save("t", ["x"])

    def test_distinct_names_get_distinct_snapshots(self, tmp_path: Path):
        snaps = FileSnapshotStore(tmp_path)
        names = ["a/b", "a--b", "a\\b", "a%2Fb"]
        for name in names:
            snaps.save(name, [f"from {name}"])
        assert len({snaps.path_for(name) for name in names}) == len(names)
        for name in names:
            assert snaps.load(name).lines == [f"from {name}"]

    def test_plain_names_keep_their_filename(self, tmp_path: Path):
        snaps = FileSnapshotStore(tmp_path)
        assert snaps.path_for("notes").name == "notes.tmp"

    def test_non_utf8_source_path_round_trips(self, tmp_path: Path):
        snaps = FileSnapshotStore(tmp_path / "snaps")
        source = os.fsdecode(os.fsencode(str(tmp_path)) + b"/caf\xe9.txt")
        snaps.save("t", ["x"], source_path=source)
        assert FileSnapshotStore(tmp_path / "snaps").load("t").source_path == source

    def test_overlong_name_loads_as_missing(self, tmp_path: Path, caplog):
        snaps = FileSnapshotStore(tmp_path)
        with caplog.at_level(logging.WARNING, logger="bff"):
            assert snaps.load("n" * 300) is None
        assert "Cannot read snapshot" in caplog.text
        with pytest.raises(OSError):
            snaps.save("n" * 300, ["x"])

    def test_failed_source_write_keeps_previous_lines(self, tmp_path: Path):
        snaps = FileSnapshotStore(tmp_path)
        snaps.save("t", ["old"], source_path="/tmp/old.txt")
        snaps.source_path_for("t").unlink()
        snaps.source_path_for("t").mkdir()
        with pytest.raises(OSError):
            snaps.save("t", ["new"], source_path="/tmp/new.txt")
        assert read_lines(snaps.path_for("t")) == ["old"]


class TestMemorySnapshotStore:
    def test_round_trip_is_a_copy(self):
        snaps = MemorySnapshotStore()
        lines = ["a"]
        snaps.save("t", lines, source_path="p")
        lines.append("b")
        loaded = snaps.load("t")
        assert loaded == Snapshot(lines=["a"], source_path="p")
        loaded.lines.append("c")
        assert snaps.load("t").lines == ["a"]

    def test_counts_saves(self):
        snaps = MemorySnapshotStore()
        snaps.save("t", [])
        snaps.save("t", ["a"])
        assert snaps.saves == 2

    def test_missing(self):
        assert MemorySnapshotStore().load("t") is None

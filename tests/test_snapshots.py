"""Tests for mozlz4 sidebar snapshots."""

import lz4.block
import pytest

from arcsidebar.arc_parser import ArcDataError
from arcsidebar.snapshots import (
    MAGIC,
    SNAPSHOT_PREFIX,
    delete_snapshots,
    list_snapshots,
    read_snapshot,
    write_snapshot,
)


class TestWriteSnapshot:
    def test_file_layout(self, tmp_path, sidebar_document):
        path = write_snapshot(sidebar_document, tmp_path, timestamp="20260102_030405")

        assert path.name == f"{SNAPSHOT_PREFIX}20260102_030405"
        raw = path.read_bytes()
        assert raw.startswith(MAGIC)
        assert read_snapshot(path) == sidebar_document

    def test_creates_directory(self, tmp_path):
        target = tmp_path / "a" / "b"
        write_snapshot({"sidebar": {}}, target)
        assert len(list_snapshots(target)) == 1


class TestReadSnapshot:
    def test_bad_magic(self, tmp_path):
        path = tmp_path / "plain.json"
        path.write_bytes(b'{"sidebar": {}}')
        with pytest.raises(ArcDataError, match="Invalid mozlz4"):
            read_snapshot(path)

    def test_corrupt_payload(self, tmp_path):
        path = tmp_path / "bad"
        path.write_bytes(MAGIC + b"\x10\x00\x00\x00" + b"\xff" * 4)
        with pytest.raises(ArcDataError, match="Corrupt snapshot"):
            read_snapshot(path)

    def test_payload_not_json(self, tmp_path):
        path = tmp_path / "text"
        path.write_bytes(MAGIC + lz4.block.compress(b"hello"))
        with pytest.raises(ArcDataError):
            read_snapshot(path)


class TestSnapshotDirectory:
    def test_newest_first(self, tmp_path):
        for ts in ["20250101_000000", "20260301_101010", "20251231_235959"]:
            write_snapshot({}, tmp_path, timestamp=ts)
        (tmp_path / "unrelated.txt").write_text("x")

        timestamps = [ts for _, ts in list_snapshots(tmp_path)]
        assert timestamps == ["20260301_101010", "20251231_235959", "20250101_000000"]

    def test_missing_directory(self, tmp_path):
        assert list_snapshots(tmp_path / "none") == []

    def test_delete(self, tmp_path):
        write_snapshot({}, tmp_path, timestamp="20250101_000000")
        write_snapshot({}, tmp_path, timestamp="20250102_000000")
        (tmp_path / "keep.txt").write_text("x")

        assert delete_snapshots(tmp_path) == 2
        assert list_snapshots(tmp_path) == []
        assert (tmp_path / "keep.txt").exists()

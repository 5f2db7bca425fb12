"""Tests for locating and reading the sidebar file."""

import pytest

from arcsidebar.arc_parser import ArcDataError
from arcsidebar.arc_reader import ArcDataReader, get_pinned_items, get_spaces, load_sidebar
from arcsidebar.snapshots import write_snapshot


@pytest.fixture
def no_arc_install(tmp_path, monkeypatch):
    """Point Arc's data directory somewhere empty."""
    missing = tmp_path / "arc-home" / ArcDataReader.FILENAME
    monkeypatch.setattr(ArcDataReader, "get_arc_data_path", classmethod(lambda cls: missing))
    return missing


class TestLocate:
    def test_explicit_path(self, sidebar_file):
        assert ArcDataReader.locate(sidebar_file) == sidebar_file

    def test_explicit_path_missing(self, tmp_path):
        with pytest.raises(ArcDataError, match="not found"):
            ArcDataReader.locate(tmp_path / "nope.json")

    def test_current_directory(self, sidebar_file, monkeypatch, no_arc_install):
        monkeypatch.chdir(sidebar_file.parent)
        assert ArcDataReader.locate().name == ArcDataReader.FILENAME

    def test_arc_directory(self, sidebar_file, tmp_path, monkeypatch):
        empty = tmp_path / "empty"
        empty.mkdir()
        monkeypatch.chdir(empty)
        monkeypatch.setattr(ArcDataReader, "get_arc_data_path", classmethod(lambda cls: sidebar_file))
        assert ArcDataReader.locate() == sidebar_file

    def test_nothing_found(self, tmp_path, monkeypatch, no_arc_install):
        monkeypatch.chdir(tmp_path)
        with pytest.raises(ArcDataError, match="File not found"):
            ArcDataReader.locate()


class TestReadData:
    def test_plain_json(self, sidebar_file, sidebar_document):
        assert ArcDataReader.read_data(sidebar_file) == sidebar_document

    def test_snapshot(self, tmp_path, sidebar_document):
        path = write_snapshot(sidebar_document, tmp_path / "snaps", timestamp="20260101_120000")
        assert ArcDataReader.read_data(path) == sidebar_document

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ArcDataError, match="Invalid JSON"):
            ArcDataReader.read_data(path)


class TestLoadSidebar:
    def test_spaces(self, sidebar_file):
        model = load_sidebar(sidebar_file)
        assert model.ok
        assert [s.title for s in model.spaces] == ["Dev Tools!", "Reading"]

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(ArcDataError):
            load_sidebar(tmp_path / "missing.json")

    def test_undecodable_file_reported(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("[1, 2", encoding="utf-8")
        model = load_sidebar(path)
        assert not model.ok
        assert model.spaces == []
        assert "Invalid JSON" in model.error

    def test_wrong_shape_reported(self, tmp_path):
        path = tmp_path / "other.json"
        path.write_text('{"version": 2}', encoding="utf-8")
        model = load_sidebar(path)
        assert not model.ok

    def test_get_spaces(self, sidebar_file):
        assert [s.id for s in get_spaces(sidebar_file)] == ["space-dev", "space-read"]

    def test_get_pinned_items(self, sidebar_file):
        items = get_pinned_items(["Reading"], sidebar_file)
        assert [i.url for i in items] == ["https://arxiv.org/abs/1706.03762"]

"""Tests for the filesystem facade."""

import pytest

from memfs import (
    DirEntry,
    FileSystem,
    FSConfig,
    InvalidMove,
    NodeKind,
    NotADirectory,
    NotAFile,
    NotFound,
)


class TestCreate:
    """Creating directories and files."""

    def test_fresh_ids(self, fs):
        seen = {fs.root}
        for i in range(20):
            new_id = fs.create_directory(fs.root, f"d{i}")
            assert new_id not in seen
            seen.add(new_id)

    def test_listing_gains_one_entry_per_create(self, fs, documents):
        fs.create_directory(documents, "same")
        before = [e.name for e in fs.list_directory(documents)].count("same")
        fs.create_directory(documents, "same")
        after = [e.name for e in fs.list_directory(documents)].count("same")
        assert after == before + 1

    def test_listing_entries(self, fs, documents):
        file_id = fs.create_file(documents, "notes.txt")
        sub_id = fs.create_directory(documents, "old")
        assert fs.list_directory(documents) == [
            DirEntry("notes.txt", NodeKind.FILE, file_id),
            DirEntry("old", NodeKind.DIRECTORY, sub_id),
        ]

    def test_listing_is_a_snapshot(self, fs, documents):
        listing = fs.list_directory(documents)
        fs.create_file(documents, "later.txt")
        assert listing == []

    def test_create_in_file_fails_without_recording(self, fs, documents):
        file_id = fs.create_file(documents, "notes.txt")
        journal_size = len(fs.journal)
        with pytest.raises(NotADirectory):
            fs.create_directory(file_id, "x")
        with pytest.raises(NotFound):
            fs.create_file(1000, "x")
        assert len(fs.journal) == journal_size

    def test_list_errors(self, fs, documents):
        file_id = fs.create_file(documents, "notes.txt")
        with pytest.raises(NotADirectory):
            fs.list_directory(file_id)
        with pytest.raises(NotFound):
            fs.list_directory(1000)


class TestReadWrite:
    """File content round trips."""

    def test_read_returns_last_write(self, fs, documents):
        file_id = fs.create_file(documents, "notes.txt")
        for payload in [b"Hello, world!", b"", b"\x00\xff" * 10, b"Hello, world!"]:
            fs.write_to_file(file_id, payload)
            assert fs.read_file(file_id) == payload
            assert fs.read_file(file_id) == payload

    def test_write_returns_none(self, fs, documents):
        file_id = fs.create_file(documents, "notes.txt")
        assert fs.write_to_file(file_id, b"x") is None

    def test_write_to_directory(self, fs, documents):
        with pytest.raises(NotAFile):
            fs.write_to_file(documents, b"x")
        with pytest.raises(NotAFile):
            fs.read_file(documents)
        assert len(fs.journal) == 1

    def test_stat_size(self, fs, documents):
        file_id = fs.create_file(documents, "notes.txt")
        fs.write_to_file(file_id, b"12345")
        stat = fs.stat(file_id)
        assert stat.size == 5
        assert stat.parent == documents
        assert stat.kind is NodeKind.FILE
        assert fs.stat(documents).size == 0


class TestPaths:
    """Path resolution and naming helpers."""

    def test_resolve(self, fs, documents):
        file_id = fs.create_file(documents, "notes.txt")
        assert fs.resolve("/") == fs.root
        assert fs.resolve("") == fs.root
        assert fs.resolve("/Documents") == documents
        assert fs.resolve("/Documents/notes.txt") == file_id
        assert fs.path_of(file_id) == "/Documents/notes.txt"

    def test_resolve_missing(self, fs, documents):
        with pytest.raises(NotFound):
            fs.resolve("/Documents/missing.txt")

    def test_resolve_through_file(self, fs, documents):
        fs.create_file(documents, "notes.txt")
        with pytest.raises(NotADirectory):
            fs.resolve("/Documents/notes.txt/deeper")

    def test_lookup(self, fs, documents):
        assert fs.lookup(fs.root, "Documents") == documents

    def test_walk(self, fs, documents):
        file_id = fs.create_file(documents, "notes.txt")
        assert [(path, node.id) for path, node in fs.walk()] == [
            ("/", fs.root),
            ("/Documents", documents),
            ("/Documents/notes.txt", file_id),
        ]

    def test_config_root_name(self):
        fs = FileSystem(FSConfig(root_name="volume"))
        assert fs.stat(fs.root).name == "volume"
        assert fs.path_of(fs.root) == "/"


class TestMove:
    """Moving nodes between directories."""

    def test_move_appends_to_destination(self, fs, documents):
        pictures = fs.create_directory(fs.root, "Pictures")
        existing = fs.create_file(pictures, "pic1.jpg")
        file_id = fs.create_file(documents, "doc.txt")
        fs.move_node(file_id, pictures)
        assert [e.id for e in fs.list_directory(pictures)] == [existing, file_id]
        assert fs.list_directory(documents) == []
        assert fs.path_of(file_id) == "/Pictures/doc.txt"

    def test_invalid_moves_are_not_recorded(self, fs, documents):
        file_id = fs.create_file(documents, "doc.txt")
        journal_size = len(fs.journal)
        with pytest.raises(InvalidMove):
            fs.move_node(fs.root, documents)
        with pytest.raises(InvalidMove):
            fs.move_node(documents, documents)
        with pytest.raises(NotADirectory):
            fs.move_node(documents, file_id)
        with pytest.raises(NotFound):
            fs.move_node(1000, documents)
        assert len(fs.journal) == journal_size
        assert fs.path_of(file_id) == "/Documents/doc.txt"


class TestIsolation:
    """Instances share no state."""

    def test_independent_instances(self):
        a = FileSystem()
        b = FileSystem()
        a.create_directory(a.root, "only-in-a")
        assert b.list_directory(b.root) == []
        assert len(b.journal) == 0

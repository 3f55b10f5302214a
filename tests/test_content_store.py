"""Tests for file content storage."""

import pytest

from memfs import ContentStore, NodeKind, NodeStore, NotAFile, NotFound


@pytest.fixture()
def store():
    nodes = NodeStore()
    return ContentStore(nodes)


def make_file(store: ContentStore, name: str = "f") -> int:
    node = store.nodes.create_node(store.nodes.root_id, name, NodeKind.FILE)
    store.create(node.id)
    return node.id


def test_new_file_is_empty(store):
    file_id = make_file(store)
    assert store.read(file_id) == b""
    assert store.size(file_id) == 0


def test_write_returns_previous_content(store):
    file_id = make_file(store)
    assert store.write(file_id, b"one") == b""
    assert store.write(file_id, b"two") == b"one"
    assert store.read(file_id) == b"two"


def test_written_buffer_is_copied(store):
    file_id = make_file(store)
    buf = bytearray(b"abc")
    store.write(file_id, buf)
    buf[0] = ord("z")
    assert store.read(file_id) == b"abc"


def test_directory_is_not_a_file(store):
    with pytest.raises(NotAFile):
        store.write(store.nodes.root_id, b"x")
    with pytest.raises(NotAFile):
        store.read(store.nodes.root_id)


def test_unknown_id(store):
    with pytest.raises(NotFound):
        store.read(99)
    with pytest.raises(NotFound):
        store.write(99, b"x")


def test_delete(store):
    file_id = make_file(store)
    assert store.delete(file_id)
    assert file_id not in store
    assert not store.delete(file_id)

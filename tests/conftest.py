"""Shared fixtures for the filesystem tests."""

import pytest

from memfs import FileSystem


@pytest.fixture()
def fs() -> FileSystem:
    """A fresh filesystem with an empty journal."""
    return FileSystem()


@pytest.fixture()
def documents(fs: FileSystem) -> int:
    """Id of a /Documents directory."""
    return fs.create_directory(fs.root, "Documents")

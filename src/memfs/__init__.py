"""
In-memory hierarchical filesystem with an undo journal.
This module provides the node tree, file contents store and journal.
"""

from .errors import (
    DirectoryNotEmpty,
    EmptyJournal,
    FSError,
    InvalidMove,
    NotADirectory,
    NotAFile,
    NotFound,
)
from .fs_tree import DirEntry, Node, NodeKind, NodeStore
from .content_store import ContentStore
from .journal import Journal, JournalEntry, Operation
from .config import FSConfig, load_config
from .fs_operations import FileSystem, NodeStat

__all__ = [
    'FileSystem', 'NodeStat', 'NodeStore', 'Node', 'NodeKind', 'DirEntry',
    'ContentStore', 'Journal', 'JournalEntry', 'Operation', 'FSConfig', 'load_config',
    'FSError', 'NotFound', 'NotADirectory', 'NotAFile', 'DirectoryNotEmpty',
    'InvalidMove', 'EmptyJournal',
]

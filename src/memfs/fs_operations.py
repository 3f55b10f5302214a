"""
Implementation of high-level filesystem operations.
This module ties together the node tree, the content store and the journal.
"""
from typing import Iterator, List, NamedTuple, Optional, Tuple
import logging

from .config import FSConfig
from .content_store import ContentStore
from .fs_tree import DirEntry, Node, NodeKind, NodeStore
from .journal import Journal, JournalEntry, Operation

logger = logging.getLogger(__name__)


class NodeStat(NamedTuple):
    id: int
    name: str
    kind: NodeKind
    parent: Optional[int]
    size: int


class FileSystem:
    """
    In-memory filesystem with an undo journal.
    Every mutating call validates first, mutates, and only then records a
    journal entry, so a failed call leaves no trace in the tree or the log.
    """
    def __init__(self, config: Optional[FSConfig] = None):
        self.config = config or FSConfig()
        self.nodes = NodeStore(self.config.root_name)
        self.contents = ContentStore(self.nodes)
        self.journal = Journal(self.nodes, self.contents)

    @property
    def root(self) -> int:
        return self.nodes.root_id

    def create_directory(self, parent_id: int, name: str) -> int:
        """
        Create a directory.

        Args:
            parent_id: Id of the directory to create it in
            name: Name of the new directory

        Returns:
            The new directory's id
        """
        node = self.nodes.create_node(parent_id, name, NodeKind.DIRECTORY)
        self.journal.record(JournalEntry(
            op=Operation.CREATE_DIRECTORY, target=node.id, name=name, parent=parent_id
        ))
        return node.id

    def create_file(self, parent_id: int, name: str) -> int:
        """
        Create an empty file.

        Args:
            parent_id: Id of the directory to create it in
            name: Name of the new file

        Returns:
            The new file's id
        """
        node = self.nodes.create_node(parent_id, name, NodeKind.FILE)
        self.contents.create(node.id)
        self.journal.record(JournalEntry(
            op=Operation.CREATE_FILE, target=node.id, name=name, parent=parent_id
        ))
        return node.id

    def write_to_file(self, file_id: int, data: bytes) -> None:
        """Replace the whole content of a file."""
        previous = self.contents.write(file_id, data)
        node = self.nodes.get(file_id)
        self.journal.record(JournalEntry.for_write(file_id, node.name, previous))

    def read_file(self, file_id: int) -> bytes:
        return self.contents.read(file_id)

    def list_directory(self, dir_id: int) -> List[DirEntry]:
        return self.nodes.list_directory(dir_id)

    def move_node(self, node_id: int, new_parent_id: int) -> None:
        """
        Move a file or directory to the end of another directory.

        Args:
            node_id: Id of the node to move
            new_parent_id: Id of the destination directory
        """
        previous_parent, previous_index = self.nodes.move_node(node_id, new_parent_id)
        node = self.nodes.get(node_id)
        self.journal.record(JournalEntry(
            op=Operation.MOVE_NODE,
            target=node_id,
            name=node.name,
            parent=new_parent_id,
            previous_parent=previous_parent,
            previous_index=previous_index,
        ))

    def undo(self) -> JournalEntry:
        return self.journal.undo()

    def lookup(self, parent_id: int, name: str) -> int:
        return self.nodes.lookup(parent_id, name)

    def resolve(self, path: str) -> int:
        """
        Convert an absolute path to a node id.

        Args:
            path: Slash separated path; "" and "/" are the root

        Returns:
            Id of the node at that path
        """
        current = self.root
        for part in [p for p in path.split('/') if p]:
            current = self.nodes.lookup(current, part)
        return current

    def path_of(self, node_id: int) -> str:
        return self.nodes.path_of(node_id)

    def stat(self, node_id: int) -> NodeStat:
        node = self.nodes.get(node_id)
        size = 0 if node.is_directory else self.contents.size(node_id)
        return NodeStat(node.id, node.name, node.kind, node.parent, size)

    def walk(self) -> Iterator[Tuple[str, Node]]:
        """Yield (path, node) for every node in creation order."""
        return self.nodes.walk()

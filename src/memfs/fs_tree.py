"""
Implementation of the filesystem tree structure.
Nodes live in a single arena keyed by id; parent and child links are ids,
never object references, so every structural edit goes through the store.
"""
from typing import Iterator, List, NamedTuple, Optional, Tuple
from dataclasses import dataclass
from enum import Enum
import logging

from sortedcontainers import SortedDict

from .errors import DirectoryNotEmpty, InvalidMove, NotADirectory, NotFound

logger = logging.getLogger(__name__)

ROOT_ID = 0


class NodeKind(str, Enum):
    DIRECTORY = "directory"
    FILE = "file"


@dataclass
class Node:
    """Represents a node in the filesystem tree."""
    id: int
    name: str
    kind: NodeKind
    parent: Optional[int] = None
    children: Optional[List[int]] = None  # Ordered child ids, directories only

    def __post_init__(self):
        if self.kind is NodeKind.DIRECTORY and self.children is None:
            self.children = []

    @property
    def is_directory(self) -> bool:
        return self.kind is NodeKind.DIRECTORY


class DirEntry(NamedTuple):
    name: str
    kind: NodeKind
    id: int


class NodeStore:
    """
    Arena of filesystem nodes.
    This holds only the hierarchy and names; file contents are stored separately.
    Ids are handed out in increasing order and never reused, so iterating the
    arena yields nodes in creation order.
    """
    def __init__(self, root_name: str = "/"):
        self.nodes: SortedDict = SortedDict()
        self.next_id = ROOT_ID

        # Create root directory
        self._create_root(root_name)

    def _create_root(self, name: str) -> None:
        """Create the root directory node."""
        root = Node(id=self._allocate_id(), name=name, kind=NodeKind.DIRECTORY)
        self.nodes[root.id] = root

    def _allocate_id(self) -> int:
        node_id = self.next_id
        self.next_id += 1
        return node_id

    @property
    def root_id(self) -> int:
        return ROOT_ID

    def __contains__(self, node_id: int) -> bool:
        return node_id in self.nodes

    def __len__(self) -> int:
        return len(self.nodes)

    def get(self, node_id: int) -> Node:
        """Get a node by id, raising NotFound if it does not exist."""
        node = self.nodes.get(node_id)
        if node is None:
            raise NotFound(f"no node with id {node_id}", node_id)
        return node

    def get_directory(self, node_id: int) -> Node:
        node = self.get(node_id)
        if not node.is_directory:
            raise NotADirectory(f"{node.name!r} (id {node_id}) is not a directory", node_id)
        return node

    def create_node(self, parent_id: int, name: str, kind: NodeKind) -> Node:
        """
        Create a new node at the end of a directory.

        Args:
            parent_id: Id of the parent directory
            name: Name of the new node; siblings may share a name
            kind: Whether the new node is a directory or a file

        Returns:
            The newly created node

        Raises:
            NotFound: parent_id does not exist
            NotADirectory: parent_id is a file
        """
        parent = self.get_directory(parent_id)

        node = Node(id=self._allocate_id(), name=name, kind=kind, parent=parent_id)
        self.nodes[node.id] = node
        parent.children.append(node.id)

        logger.debug(f"Created {kind.value} {name!r} (id {node.id}) in {parent_id}")
        return node

    def remove_node(self, node_id: int) -> Node:
        """
        Detach a node from its parent and discard it.
        Does not recurse: a directory that still has children is refused.

        Returns:
            The removed node
        """
        node = self.get(node_id)
        if node.parent is None:
            raise InvalidMove("cannot remove the root directory", node_id)
        if node.is_directory and node.children:
            raise DirectoryNotEmpty(
                f"{node.name!r} (id {node_id}) still has {len(node.children)} children", node_id
            )

        parent = self.nodes[node.parent]
        parent.children.remove(node_id)
        del self.nodes[node_id]

        logger.debug(f"Removed {node.kind.value} {node.name!r} (id {node_id})")
        return node

    def move_node(self, node_id: int, new_parent_id: int, index: Optional[int] = None) -> Tuple[int, int]:
        """
        Move a node under a new parent directory.

        Args:
            node_id: Id of the node to move
            new_parent_id: Id of the destination directory
            index: Position in the destination's children; appended when None

        Returns:
            The previous parent id and the node's previous position in it
        """
        node = self.get(node_id)
        new_parent = self.get_directory(new_parent_id)

        if node.parent is None:
            raise InvalidMove("cannot move the root directory", node_id)
        if self.is_ancestor(node_id, new_parent_id):
            raise InvalidMove(f"cannot move {node.name!r} (id {node_id}) into itself", node_id)

        old_parent = self.nodes[node.parent]
        old_index = old_parent.children.index(node_id)
        del old_parent.children[old_index]

        if index is None:
            new_parent.children.append(node_id)
        else:
            new_parent.children.insert(index, node_id)
        node.parent = new_parent_id

        logger.debug(f"Moved {node.name!r} (id {node_id}) from {old_parent.id} to {new_parent_id}")
        return old_parent.id, old_index

    def is_ancestor(self, ancestor_id: int, node_id: int) -> bool:
        """Whether ancestor_id is node_id itself or one of its ancestors."""
        current = node_id
        while current is not None:
            if current == ancestor_id:
                return True
            current = self.nodes[current].parent
        return False

    def list_directory(self, node_id: int) -> List[DirEntry]:
        """List the contents of a directory in insertion order."""
        node = self.get_directory(node_id)
        entries = []
        for child_id in node.children:
            child = self.nodes[child_id]
            entries.append(DirEntry(child.name, child.kind, child.id))
        return entries

    def lookup(self, parent_id: int, name: str) -> int:
        """
        Look up a node by name in a directory.

        Returns:
            Id of the first child with that name

        Raises:
            NotFound: the parent is missing or has no such child
        """
        parent = self.get_directory(parent_id)
        for child_id in parent.children:
            if self.nodes[child_id].name == name:
                return child_id
        raise NotFound(f"no entry {name!r} in directory {parent_id}", parent_id)

    def path_of(self, node_id: int) -> str:
        node = self.get(node_id)
        parts = []
        while node.parent is not None:
            parts.append(node.name)
            node = self.nodes[node.parent]
        return "/" + "/".join(reversed(parts))

    def walk(self) -> Iterator[Tuple[str, Node]]:
        # Snapshot so callers may mutate the tree while iterating
        for node in list(self.nodes.values()):
            yield self.path_of(node.id), node

"""
Implementation of the content store for file payloads.
"""
from typing import Dict

from .errors import NotAFile, NotFound
from .fs_tree import Node, NodeStore


class ContentStore:
    """
    Store for file contents, keyed by the id of the owning file node.
    Contents are replaced wholesale on every write and never patched in place.
    """
    def __init__(self, nodes: NodeStore):
        self.nodes = nodes
        self.contents: Dict[int, bytes] = {}  # File id -> content

    def _file(self, node_id: int) -> Node:
        node = self.nodes.get(node_id)
        if node.is_directory:
            raise NotAFile(f"{node.name!r} (id {node_id}) is a directory", node_id)
        return node

    def create(self, node_id: int) -> None:
        """Start an empty payload for a newly created file."""
        self._file(node_id)
        self.contents[node_id] = b""

    def write(self, node_id: int, data: bytes) -> bytes:
        """
        Replace the content of a file.

        Args:
            node_id: Id of the file
            data: The new content

        Returns:
            The content the file held before this write

        Raises:
            NotFound: node_id does not exist
            NotAFile: node_id is a directory
        """
        self._file(node_id)
        previous = self.contents.get(node_id, b"")
        self.contents[node_id] = bytes(data)
        return previous

    def read(self, node_id: int) -> bytes:
        """Read the full content of a file."""
        self._file(node_id)
        return self.contents.get(node_id, b"")

    def size(self, node_id: int) -> int:
        return len(self.read(node_id))

    def delete(self, node_id: int) -> bool:
        """Drop a file's payload. Returns True if there was one."""
        if node_id in self.contents:
            del self.contents[node_id]
            return True
        return False

    def __contains__(self, node_id: int) -> bool:
        return node_id in self.contents

"""
Journal of mutating filesystem operations and the undo engine that inverts them.
"""
import base64
import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from serde import serde
from serde.json import to_json

from .content_store import ContentStore
from .errors import EmptyJournal
from .fs_tree import NodeStore

logger = logging.getLogger(__name__)


class Operation(str, Enum):
    CREATE_DIRECTORY = "create_directory"
    CREATE_FILE = "create_file"
    WRITE_FILE = "write_file"
    MOVE_NODE = "move_node"


@serde
@dataclass(frozen=True)
class JournalEntry:
    """
    One recorded operation plus the minimal data needed to invert it.
    Byte payloads are kept as base64 text so entries serialize as plain JSON.
    """
    op: Operation
    target: int
    name: str
    parent: Optional[int] = None
    previous_parent: Optional[int] = None
    previous_index: Optional[int] = None
    previous_content: Optional[str] = None

    @classmethod
    def for_write(cls, target: int, name: str, previous: bytes) -> "JournalEntry":
        return cls(
            op=Operation.WRITE_FILE,
            target=target,
            name=name,
            previous_content=base64.b64encode(previous).decode(),
        )

    def previous_bytes(self) -> bytes:
        if self.previous_content is None:
            return b""
        return base64.b64decode(self.previous_content)

    def describe(self) -> str:
        if self.op is Operation.CREATE_DIRECTORY:
            return f"CREATE DIRECTORY: {self.name} (id {self.target})"
        if self.op is Operation.CREATE_FILE:
            return f"CREATE FILE: {self.name} (id {self.target})"
        if self.op is Operation.WRITE_FILE:
            return f"WRITE TO FILE: {self.name} (id {self.target})"
        return f"MOVE: {self.name} (id {self.target}) FROM {self.previous_parent} TO {self.parent}"


class Journal:
    """
    LIFO log of recorded operations.
    Undo applies inverses straight to the stores, so restoring state never
    records a new entry and the log strictly shrinks.
    """
    entries: List[JournalEntry]

    def __init__(self, nodes: NodeStore, contents: ContentStore):
        self.nodes = nodes
        self.contents = contents
        self.entries = []

    def __len__(self) -> int:
        return len(self.entries)

    def record(self, entry: JournalEntry) -> None:
        self.entries.append(entry)
        logger.debug(f"Journal: {entry.describe()}")

    def log(self) -> Tuple[JournalEntry, ...]:
        return tuple(self.entries)

    def to_json(self) -> str:
        return to_json(self.entries)

    def undo(self) -> JournalEntry:
        """
        Invert the most recent operation and drop it from the journal.

        Returns:
            The entry that was undone

        Raises:
            EmptyJournal: nothing has been recorded
            DirectoryNotEmpty: the entry created a directory that still has
                children; the entry is kept and nothing changes
        """
        if not self.entries:
            raise EmptyJournal()

        entry = self.entries[-1]
        self._invert(entry)
        self.entries.pop()

        logger.debug(f"Undid {entry.describe()}")
        return entry

    def _invert(self, entry: JournalEntry) -> None:
        if entry.op in (Operation.CREATE_DIRECTORY, Operation.CREATE_FILE):
            self.nodes.remove_node(entry.target)
            self.contents.delete(entry.target)
        elif entry.op is Operation.WRITE_FILE:
            self.contents.write(entry.target, entry.previous_bytes())
        elif entry.op is Operation.MOVE_NODE:
            self.nodes.move_node(entry.target, entry.previous_parent, entry.previous_index)
        else:
            raise ValueError(f"Unknown journal operation: {entry.op}")

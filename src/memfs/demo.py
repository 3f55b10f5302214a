"""
Demo entry point: builds a small tree, prints it, then undoes the last change.
"""
import argparse
import logging
from typing import List, Optional

from .config import load_config, save_config
from .errors import EmptyJournal
from .fs_operations import FileSystem

logger = logging.getLogger(__name__)


def print_tree(fs: FileSystem) -> None:
    for path, node in fs.walk():
        if not node.is_directory:
            continue
        print(f"Directory {path} (ID: {node.id}):")
        for entry in fs.list_directory(node.id):
            size = fs.stat(entry.id).size
            print(f"- {entry.kind.value.capitalize()} {entry.name} (ID: {entry.id}, Size: {size} bytes)")


def print_journal(fs: FileSystem) -> None:
    print("Journal Entries:")
    for i, entry in enumerate(fs.journal.log(), start=1):
        print(f"{i}. {entry.describe()}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="In-memory filesystem demo")
    parser.add_argument("--config", help="Path to a JSON config file")
    parser.add_argument("--save-config", help="Write the effective config to this path")
    args = parser.parse_args(argv)

    config = load_config(args.config)
    logging.basicConfig(level=config.log_level)
    if args.save_config:
        save_config(config, args.save_config)

    fs = FileSystem(config)

    documents = fs.create_directory(fs.root, "Documents")
    pictures = fs.create_directory(fs.root, "Pictures")
    doc1 = fs.create_file(documents, "doc1.txt")
    fs.create_file(documents, "doc2.txt")
    fs.create_file(pictures, "pic1.jpg")

    fs.write_to_file(doc1, b"Hello, world!")

    print("\n=== Directory Listing ===")
    print_tree(fs)

    print("\n=== Read File ===")
    print(f"File Data: {fs.read_file(doc1).decode(errors='replace')}")

    print("\n=== Journal ===")
    print_journal(fs)

    print("\n=== Undo Operation ===")
    try:
        undone = fs.undo()
        print(f"Undid operation: {undone.describe()}")
    except EmptyJournal:
        print("Nothing to undo.")

    print("\n=== Final Journal ===")
    print_journal(fs)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

"""Bounded, deterministic directory traversal.

This package builds an in-memory tree of the entries below a root directory,
with optional filters and limits, in an order that is stable across runs.
"""

from importlib.metadata import PackageNotFoundError, version

from dirwalker.entry_tree.dir_entry import DirEntry
from dirwalker.entry_tree.entry_node import EntryNode, FlatItem
from dirwalker.exceptions import ErrorKind, InvalidInputError, WalkError, WalkIOError
from dirwalker.types import EntryKind
from dirwalker.walker import Walker

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("dirwalker")
except PackageNotFoundError:
    __version__ = "unknown"

__all__ = [
    "DirEntry",
    "EntryKind",
    "EntryNode",
    "ErrorKind",
    "FlatItem",
    "InvalidInputError",
    "WalkError",
    "WalkIOError",
    "Walker",
]

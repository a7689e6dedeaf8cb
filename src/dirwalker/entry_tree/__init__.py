"""Directory entry records, the result tree and the builder that assembles it."""

from .dir_entry import DirEntry
from .directory_reader import find_entry, read_entries
from .entry_node import EntryNode, FlatItem
from .tree_builder import TreeBuilder, WalkContext

__all__ = [
    "DirEntry",
    "EntryNode",
    "FlatItem",
    "TreeBuilder",
    "WalkContext",
    "find_entry",
    "read_entries",
]

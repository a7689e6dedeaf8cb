"""Result tree produced by a walk."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, List, Optional

from dirwalker.entry_tree.dir_entry import DirEntry


@dataclass(frozen=True)
class FlatItem:
    """One element of the flat depth-first view of a walk result.

    Attributes:
        entry: The entry record.
        depth: Depth of the node that carried the record.
    """

    entry: DirEntry
    depth: int

    @property
    def path(self) -> Path:
        return self.entry.path


@dataclass
class EntryNode:
    """A node in the tree returned by a walk.

    Each node exclusively owns its children; there are no references back to
    parents. The children of a node are ordered directories first, then files,
    each group sorted by path. The root's immediate children have depth 0, and
    every deeper node has its parent's depth plus one. The top node itself also
    reports depth 0.

    ``entry`` is None only for the synthetic top node a directory walk returns;
    its children are the walked directory's admitted entries.

    Attributes:
        entry (Optional[DirEntry]): Record of this node.
        children (List[EntryNode]): Ordered child nodes.
        depth (int): Depth of the node.

    Example:
        >>> tree = Walker("src").max_depth(1).walk()  # doctest: +SKIP
        >>> for item in tree:  # doctest: +SKIP
        ...     print(item.depth, item.entry.name)
        0 dirwalker
        1 cli
        1 entry_tree
    """

    entry: Optional[DirEntry] = None
    children: List["EntryNode"] = field(default_factory=list)
    depth: int = 0

    @property
    def path(self) -> Optional[Path]:
        return self.entry.path if self.entry is not None else None

    @property
    def name(self) -> Optional[str]:
        return self.entry.name if self.entry is not None else None

    @property
    def is_dir(self) -> bool:
        return self.entry is not None and self.entry.is_dir

    @property
    def is_file(self) -> bool:
        return self.entry is not None and self.entry.is_file

    def _preorder(self) -> Iterator["EntryNode"]:
        # Explicit stack; the first child must be popped next.
        stack: List[EntryNode] = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def __iter__(self) -> Iterator[FlatItem]:
        """Iterate over the records of the tree in depth-first pre-order.

        The order is the order in which the nodes were built: a node comes before
        its descendants and, at each level, directories before files. Nodes
        without a record are not yielded but their children are.

        Yields:
            A FlatItem for every node carrying a record.
        """
        for node in self._preorder():
            if node.entry is not None:
                yield FlatItem(node.entry, node.depth)

    def find(self, name: str) -> Optional["EntryNode"]:
        """Find the first node whose record has the given file name.

        The search follows the same pre-order as iteration, so when several files
        share a name the one that iteration would produce first is returned.

        Args:
            name: File name (final path component) to look for, e.g. "lib.rs".

        Returns:
            The matching node with its subtree, or None if no record matches.
        """
        for node in self._preorder():
            if node.entry is not None and node.entry.name == name:
                return node
        return None

    def entry_count(self) -> int:
        """Number of records in the tree, including this node's own if it has one."""
        return sum(1 for _ in self)

    def file_count(self) -> int:
        return sum(1 for item in self if item.entry.is_file)

    def directory_count(self) -> int:
        """Number of directory records below this node.

        This node itself is not counted, in line with how ``tree`` reports totals.
        """
        return sum(1 for node in self._preorder() if node is not self and node.is_dir)

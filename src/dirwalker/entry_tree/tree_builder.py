"""Recursive construction of the walk result."""

import logging
from pathlib import Path
from typing import List, Optional

from dirwalker.config import WalkConfig
from dirwalker.entry_tree.dir_entry import DirEntry
from dirwalker.entry_tree.directory_reader import find_entry, read_entries
from dirwalker.entry_tree.entry_node import EntryNode
from dirwalker.exceptions import InvalidInputError, WalkIOError
from dirwalker.filter_rules.base_rules import BaseFilterRules
from dirwalker.filter_rules.composite_rules import CompositeFilterRules
from dirwalker.filter_rules.directory_rules import SkipDirectoryRules
from dirwalker.filter_rules.dotted_rules import DottedPathRules
from dirwalker.filter_rules.git_rules import GitIgnoreFilterRules
from dirwalker.types import EntryKind, PathType

logger = logging.getLogger(__name__)


class WalkContext:
    """Mutable state of a single walk.

    Holds the visited-entry counter so that a builder can be reused, or even
    shared, without one walk's count leaking into another.

    Attributes:
        max_entries (int): Number of records the walk may collect.
        visited (int): Number of records collected so far.
    """

    def __init__(self, max_entries: int) -> None:
        self.max_entries = max_entries
        self.visited = 0

    @property
    def exhausted(self) -> bool:
        return self.visited >= self.max_entries

    def consume(self) -> bool:
        """Count one more record, unless the limit has been reached.

        Returns:
            True if the record may be included, False once the limit is reached.
        """
        if self.exhausted:
            return False
        self.visited += 1
        return True


class TreeBuilder:
    """Builds an EntryNode tree from a WalkConfig.

    The builder resolves the root, checks its kind against its parent listing and
    then descends depth-first, reading each directory once. Symbolic links are
    never followed. A file root becomes a single node carrying its record; a
    directory root becomes a synthetic top node (no record) holding the root's
    admitted children.

    Depth semantics: the root's immediate children have depth 0 and a node at
    depth d is included only when d <= max_depth. Directories at max_depth are
    therefore kept but never read.

    Entry semantics: every admitted child counts once against max_entries, in
    pre-order. When the limit is reached the remaining siblings and all unvisited
    subtrees are dropped without error. Since the top node of a directory walk
    carries no record, the tree never holds more than max_entries records.

    Filters apply to descendants only; the root itself is always walked.

    Attributes:
        config (WalkConfig): Configuration of the walk.

    Example:
        >>> tree = TreeBuilder(WalkConfig("src", max_depth=0)).build()  # doctest: +SKIP
        >>> [child.name for child in tree.children]  # doctest: +SKIP
        ['dirwalker']
    """

    def __init__(self, config: WalkConfig) -> None:
        self.config = config

    def build(self) -> EntryNode:
        """Walk the configured root and return the assembled tree.

        Returns:
            The top node. For a file root it carries the file's record and has no
            children; for a directory root it carries no record.

        Raises:
            WalkIOError: If the root can't be resolved or any directory can't be read.
            InvalidInputError: If the root can't be found in its parent's listing,
                or is neither a directory nor a regular file.
        """
        root = self._resolve_root(self.config.root)
        entry = self._root_entry(root)

        if entry is not None and entry.kind is EntryKind.FILE:
            return EntryNode(entry, [], 0)

        rules = self._create_rules(root)
        context = WalkContext(self.config.max_entries)
        children = self._build_children(root, 0, rules, context)
        if context.exhausted:
            logger.debug("Walk of %s stopped at %d entries", root, context.visited)
        return EntryNode(None, children, 0)

    @staticmethod
    def _resolve_root(root: PathType) -> Path:
        try:
            return Path(root).resolve(strict=True)
        except OSError as e:
            raise WalkIOError(root, e) from e

    @staticmethod
    def _root_entry(root: Path) -> Optional[DirEntry]:
        parent = root.parent
        if parent == root:
            # The filesystem root is listed by no directory
            if not root.is_dir():
                raise InvalidInputError(root, "not a directory or regular file")
            return None

        entry = find_entry(parent, root)
        if entry is None:
            raise InvalidInputError(root, f"not found in the listing of {parent}")
        if entry.kind is EntryKind.OTHER:
            raise InvalidInputError(root, "not a directory or regular file")
        return entry

    def _create_rules(self, root: Path) -> Optional[BaseFilterRules]:
        rules = CompositeFilterRules()
        if self.config.skip_directories:
            rules.add_rule_object(SkipDirectoryRules(self.config.skip_directories))
        if self.config.skip_dotted:
            rules.add_rule_object(DottedPathRules())
        if self.config.ignore_patterns:
            rules.add_rule_object(GitIgnoreFilterRules(root, self.config.ignore_patterns))
        return rules if rules.has_rules() else None

    def _build_children(
        self, directory: Path, depth: int, rules: Optional[BaseFilterRules], context: WalkContext
    ) -> List[EntryNode]:
        """Recursively build the nodes for the admitted children of a directory."""
        nodes: List[EntryNode] = []
        for entry in read_entries(directory, rules):
            if not context.consume():
                break

            node = EntryNode(entry, [], depth)
            if entry.is_dir and depth < self.config.max_depth and not context.exhausted:
                node.children = self._build_children(entry.path, depth + 1, rules, context)
            nodes.append(node)
        return nodes

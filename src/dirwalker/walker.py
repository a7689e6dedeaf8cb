"""Fluent facade for configuring and running a directory walk."""

import dataclasses
import logging
from pathlib import Path
from typing import Iterable, Optional

from dirwalker.config import WalkConfig
from dirwalker.entry_tree.entry_node import EntryNode
from dirwalker.entry_tree.tree_builder import TreeBuilder
from dirwalker.exceptions import WalkIOError
from dirwalker.types import PathType

logger = logging.getLogger(__name__)


class Walker:
    """Configure a bounded, deterministic walk of a directory and run it.

    A Walker is a value: every option returns a new Walker with an updated
    configuration and leaves the original untouched, so partially configured
    walkers can be shared and extended freely. Only walk() reads the
    filesystem, apart from skip_directories(), which resolves its arguments
    immediately.

    The result of walk() is an EntryNode tree ordered directories first, then
    files, each group sorted by path. Symbolic links are never followed nor
    reported.

    Attributes:
        config (WalkConfig): The accumulated configuration.

    Example:
        >>> tree = (
        ...     Walker("./src")
        ...     .max_depth(2)
        ...     .skip_dotted()
        ...     .walk()
        ... )  # doctest: +SKIP
        >>> for item in tree:  # doctest: +SKIP
        ...     print(item.entry.path, item.depth)
        >>> tree.find("walker.py")  # doctest: +SKIP
    """

    def __init__(self, root: PathType, config: Optional[WalkConfig] = None) -> None:
        """Create a walker for ``root`` with default settings.

        Args:
            root: Starting path of the walk. Relative paths are resolved against
                the current working directory when the walk runs. A file root
                produces a single-node tree.
            config: Configuration to start from instead of the defaults. Its own
                root is replaced by ``root``.
        """
        if config is None:
            config = WalkConfig(root)
        else:
            config = dataclasses.replace(config, root=root)
        self.config = config

    def __repr__(self) -> str:
        return f"Walker({self.config!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Walker):
            return NotImplemented
        return self.config == other.config

    def __hash__(self) -> int:
        return hash(self.config)

    def _replace(self, **changes: object) -> "Walker":
        return Walker(self.config.root, dataclasses.replace(self.config, **changes))

    def skip_dotted(self) -> "Walker":
        """Skip every file or directory with a path component starting with a dot."""
        return self._replace(skip_dotted=True)

    def skip_directories(self, directories: Iterable[PathType]) -> "Walker":
        """Skip the given directories and everything below them.

        Each path is canonicalized right away, so relative paths are interpreted
        against the current working directory at the time of this call. The
        paths are added to any directories skipped before.

        Args:
            directories: Directories to leave out of the walk.

        Returns:
            A new Walker.

        Raises:
            WalkIOError: If a path cannot be canonicalized, e.g. it doesn't exist.
        """
        skipped = list(self.config.skip_directories)
        for directory in directories:
            try:
                resolved = Path(directory).resolve(strict=True)
            except OSError as e:
                raise WalkIOError(directory, e) from e
            if resolved not in skipped:
                skipped.append(resolved)
        return self._replace(skip_directories=tuple(skipped))

    def skip_patterns(self, patterns: Iterable[str]) -> "Walker":
        """Skip paths matching .gitignore-style patterns.

        Patterns are matched against paths relative to the walk root, in the
        order given, after any patterns set before.

        Args:
            patterns: Pattern lines, e.g. ["*.pyc", "build/", "!keep.pyc"].

        Returns:
            A new Walker.
        """
        return self._replace(ignore_patterns=self.config.ignore_patterns + tuple(patterns))

    def max_depth(self, depth: int) -> "Walker":
        """Limit how deep the walk descends.

        The root's children have depth 0, so ``max_depth(0)`` lists the root's
        children without descending into any of them.

        Raises:
            ValueError: If depth is not a non-negative integer.
        """
        if isinstance(depth, bool) or not isinstance(depth, int) or depth < 0:
            raise ValueError(f"max_depth must be a non-negative integer, got {depth!r}")
        return self._replace(max_depth=depth)

    def max_entries(self, entries: int) -> "Walker":
        """Limit the number of entries collected below the root.

        Reaching the limit is not an error: the walk stops and returns what it
        collected so far, which is always the first ``entries`` records in
        depth-first order.

        Raises:
            ValueError: If entries is not a positive integer.
        """
        if isinstance(entries, bool) or not isinstance(entries, int) or entries < 1:
            raise ValueError(f"max_entries must be a positive integer, got {entries!r}")
        return self._replace(max_entries=entries)

    def walk(self) -> EntryNode:
        """Traverse the filesystem and return the complete tree.

        Returns:
            The root node of the result.

        Raises:
            WalkIOError: If the root or any visited directory can't be read.
            InvalidInputError: If the root can't be represented by a directory entry.
        """
        logger.debug("Walking %s", self.config.root)
        return TreeBuilder(self.config).build()

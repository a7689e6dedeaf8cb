"""Filter rule rejecting an explicit set of directories."""

from pathlib import Path
from typing import FrozenSet, Iterable

from dirwalker.types import PathType

from .base_rules import BaseFilterRules


class SkipDirectoryRules(BaseFilterRules):
    """Reject candidates whose absolute path equals one of the skipped paths.

    The skipped paths must already be canonical (absolute and symlink-free); the
    walker resolves them when they are configured. Matching is an exact
    comparison of absolute paths, so a skipped directory prunes its whole
    subtree simply because the walk never descends into it.

    Attributes:
        directories (FrozenSet[Path]): Canonical paths to reject.

    Example:
        >>> from pathlib import Path
        >>> rules = SkipDirectoryRules(["/project/target"])
        >>> rules.exclude(Path("/project/target"))
        True
        >>> rules.exclude(Path("/project/target-old"))
        False
    """

    def __init__(self, directories: Iterable[PathType]) -> None:
        self.directories: FrozenSet[Path] = frozenset(Path(d) for d in directories)

    def exclude(self, path: Path, is_dir: bool = False) -> bool:
        return Path(path) in self.directories

    def has_rules(self) -> bool:
        return bool(self.directories)

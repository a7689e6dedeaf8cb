"""Immutable configuration of a directory walk."""

from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

from dirwalker.types import PathType

DEFAULT_MAX_DEPTH = 100
DEFAULT_MAX_ENTRIES = 10000


@dataclass(frozen=True)
class WalkConfig:
    """Settings read by a walk.

    Instances are never modified; the Walker facade derives a new one for every
    option it sets.

    Attributes:
        root: Starting path of the walk, as given by the caller.
        skip_dotted: Reject paths with a component starting with a dot.
        skip_directories: Canonical absolute paths of directories to reject.
        ignore_patterns: Gitignore-style patterns matched relative to the root.
        max_depth: Deepest depth included in the result; the root's children are depth 0.
        max_entries: Maximum number of records collected below the root.
    """

    root: PathType
    skip_dotted: bool = False
    skip_directories: Tuple[Path, ...] = ()
    ignore_patterns: Tuple[str, ...] = ()
    max_depth: int = DEFAULT_MAX_DEPTH
    max_entries: int = DEFAULT_MAX_ENTRIES

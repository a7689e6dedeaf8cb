"""Filter rule using .gitignore pattern syntax."""

from pathlib import Path
from typing import Iterable, List, Optional

from pathspec import GitIgnoreSpec

from dirwalker.types import PathType

from .base_rules import BaseFilterRules


class GitIgnoreFilterRules(BaseFilterRules):
    """Reject candidates matching .gitignore-style patterns.

    Patterns are matched against the candidate's path relative to the walk root,
    using forward slashes on every platform, the same way Git matches them. The
    pathspec library does the matching. Directories are matched with a trailing
    slash so that directory-only patterns such as ``build/`` never reject a
    regular file named ``build``.

    The rules support all standard .gitignore syntax including:
    - Basic globs (*, ?, [abc], [0-9], etc.)
    - Directory-specific patterns (ending in /)
    - Negation patterns (starting with !)
    - Double-asterisk matching (**)
    - Comment lines (starting with #)

    Attributes:
        root (Path): Canonical walk root that candidate paths are made relative to.
        patterns (List[str]): Pattern lines in the order they were added.
        spec (GitIgnoreSpec): Compiled pattern matcher.

    Example:
        >>> from pathlib import Path
        >>> rules = GitIgnoreFilterRules("/project", ["*.pyc", "build/"])
        >>> rules.exclude(Path("/project/pkg/mod.pyc"))
        True
        >>> rules.exclude(Path("/project/build"), is_dir=True)
        True
        >>> rules.exclude(Path("/project/build"), is_dir=False)
        False
    """

    def __init__(self, root: PathType, patterns: Optional[Iterable[str]] = None) -> None:
        self.root = Path(root)
        self.patterns: List[str] = []
        self.spec = GitIgnoreSpec.from_lines([])
        if patterns is not None:
            for pattern in patterns:
                self.add_rule(pattern)

    def add_rule(self, rule: str) -> None:
        """Add a single .gitignore pattern.

        Later patterns take precedence over earlier ones, which matters for
        negations (``!keep.log`` after ``*.log``).

        Args:
            rule: A single pattern line, e.g. "*.pyc", "node_modules/" or "!important.txt".
        """
        self.patterns.append(rule)
        self.spec = GitIgnoreSpec.from_lines(self.patterns)

    def exclude(self, path: Path, is_dir: bool = False) -> bool:
        try:
            relative = Path(path).relative_to(self.root).as_posix()
        except ValueError:
            # Outside the root; patterns are anchored to the root only.
            return False
        if relative == ".":
            return False
        if is_dir:
            relative += "/"
        return bool(self.spec.match_file(relative))

    def has_rules(self) -> bool:
        return bool(self.patterns)

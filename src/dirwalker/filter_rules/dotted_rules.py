"""Filter rule rejecting dot-prefixed path components."""

from pathlib import Path

from .base_rules import BaseFilterRules


class DottedPathRules(BaseFilterRules):
    """Reject any candidate whose path has a component starting with a dot.

    Components are split on the host's path separators through pathlib, so on
    Windows both forward and backward slashes act as boundaries. A name that only
    contains a dot somewhere in the middle (``archive.tar.gz``) is admitted.

    Example:
        >>> from pathlib import Path
        >>> rules = DottedPathRules()
        >>> rules.exclude(Path("/project/.git/HEAD"))
        True
        >>> rules.exclude(Path("/project/src/.hidden"))
        True
        >>> rules.exclude(Path("/project/src/main.py"))
        False
    """

    def exclude(self, path: Path, is_dir: bool = False) -> bool:
        return any(part.startswith(".") for part in Path(path).parts)

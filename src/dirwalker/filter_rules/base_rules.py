from abc import ABC, abstractmethod
from pathlib import Path


class BaseFilterRules(ABC):
    """
    Abstract base class defining the interface for traversal filter rules.

    A filter rule is a pure predicate over a candidate path: it decides whether
    the candidate is admitted into the walk result or rejected. Implementations
    must not perform any I/O, so that the outcome depends only on the configured
    rule and the candidate itself.

    Example:
        >>> from pathlib import Path
        >>> class TmpRules(BaseFilterRules):
        ...     def exclude(self, path: Path, is_dir: bool = False) -> bool:
        ...         return path.suffix == ".tmp"
        >>> rules = TmpRules()
        >>> rules.exclude(Path("/build/cache.tmp"))
        True
        >>> rules.exclude(Path("/build/main.py"))
        False
    """

    @abstractmethod
    def exclude(self, path: Path, is_dir: bool = False) -> bool:
        """
        Determine if a candidate should be rejected.

        Args:
            path (Path): Absolute path of the candidate.
            is_dir (bool): Whether the candidate is a directory. Rules that only
                look at the path may ignore it.

        Returns:
            bool: True if the candidate is rejected, False if it is admitted.
        """
        pass

    def has_rules(self) -> bool:
        """
        Check whether this rule can reject anything at all.

        Returns:
            bool: True unless the rule is known to admit every candidate, in which
                case a walk skips filtering altogether.
        """
        return True

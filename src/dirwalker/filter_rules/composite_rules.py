"""Composite filter rules for combining multiple rule types."""

from pathlib import Path
from typing import List, Sequence

from .base_rules import BaseFilterRules


class CompositeFilterRules(BaseFilterRules):
    """Composite filter rules that combine multiple rule types.

    A candidate is rejected if ANY of the constituent rules rejects it. Rules are
    evaluated in the order given, with short-circuiting, so cheaper rules (set
    membership) should come before more expensive ones (pattern matching). An
    empty composite admits everything.

    Attributes:
        rules (List[BaseFilterRules]): Constituent rules.

    Example:
        >>> from pathlib import Path
        >>> from dirwalker.filter_rules.directory_rules import SkipDirectoryRules
        >>> from dirwalker.filter_rules.dotted_rules import DottedPathRules
        >>> rules = CompositeFilterRules([SkipDirectoryRules(["/p/target"]), DottedPathRules()])
        >>> rules.exclude(Path("/p/target"))
        True
        >>> rules.exclude(Path("/p/.env"))
        True
        >>> rules.exclude(Path("/p/src"))
        False
    """

    def __init__(self, rules: Sequence[BaseFilterRules] = ()) -> None:
        """Initialize composite filter rules.

        Args:
            rules: Sequence of filter rules to combine.

        Raises:
            TypeError: If any rule doesn't implement BaseFilterRules.
        """
        for i, rule in enumerate(rules):
            if not isinstance(rule, BaseFilterRules):
                raise TypeError(f"Rule at index {i} must implement BaseFilterRules, got {type(rule)}")

        self.rules: List[BaseFilterRules] = list(rules)

    def exclude(self, path: Path, is_dir: bool = False) -> bool:
        return any(rule.exclude(path, is_dir) for rule in self.rules)

    def has_rules(self) -> bool:
        return any(rule.has_rules() for rule in self.rules)

    def add_rule_object(self, rule: BaseFilterRules) -> None:
        """Append another rule to this composite.

        Raises:
            TypeError: If rule doesn't implement BaseFilterRules.
        """
        if not isinstance(rule, BaseFilterRules):
            raise TypeError(f"Rule must implement BaseFilterRules, got {type(rule)}")
        self.rules.append(rule)

"""Filter rules deciding which paths a walk admits."""

from .base_rules import BaseFilterRules
from .composite_rules import CompositeFilterRules
from .directory_rules import SkipDirectoryRules
from .dotted_rules import DottedPathRules
from .git_rules import GitIgnoreFilterRules

__all__ = [
    "BaseFilterRules",
    "CompositeFilterRules",
    "DottedPathRules",
    "GitIgnoreFilterRules",
    "SkipDirectoryRules",
]

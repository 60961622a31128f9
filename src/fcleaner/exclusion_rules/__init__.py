"""Exclusion rules for skipping files and directories."""

from .base_rules import BaseExclusionRules
from .path_rules import PathExclusionRules

__all__ = [
    "BaseExclusionRules",
    "PathExclusionRules",
]

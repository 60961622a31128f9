"""Literal path exclusion rules."""

import os
from typing import Iterable, Iterator, Optional, Set

from fcleaner.file_system_walk.paths import normalize_path

from .base_rules import BaseExclusionRules


class PathExclusionRules(BaseExclusionRules):
    """Exclusion rules matching exact path strings.

    Each rule names one directory or file. Matching is a literal string comparison
    with no globbing and no prefix matching: excluding ``data/keep`` excludes that
    entry only, and the walkers take care of never descending below it when it is a
    directory. Rules are cleaned on insertion, so ``data/keep/``, ``./data/keep`` and
    ``data/keep`` are the same rule.

    Attributes:
        paths (Set[str]): The normalized excluded paths.

    Example:
        >>> rules = PathExclusionRules(["logs/", "cache/tmp.bin"])
        >>> rules.exclude("logs")
        True
        >>> rules.exclude("logs/app.log")
        False
        >>> rules.add_rule("build")
        >>> sorted(rules)
        ['build', 'cache/tmp.bin', 'logs']
    """

    def __init__(self, paths: Optional[Iterable[str]] = None):
        """Initialize PathExclusionRules.

        Args:
            paths: Paths to exclude. Empty strings are ignored.
        """
        self.paths: Set[str] = set()
        if paths is not None:
            for path in paths:
                self.add_rule(path)

    def exclude(self, path: str) -> bool:
        return path.replace(os.sep, "/") in self.paths

    def add_rule(self, rule: str) -> None:
        """Add a single path to exclude.

        Args:
            rule: The path to exclude. It is cleaned with normalize_path().
        """
        rule = normalize_path(rule).replace(os.sep, "/")
        if rule:
            self.paths.add(rule)

    def has_rules(self) -> bool:
        return bool(self.paths)

    def __iter__(self) -> Iterator[str]:
        return iter(self.paths)

    def __len__(self) -> int:
        return len(self.paths)

    def __repr__(self) -> str:
        return f"PathExclusionRules({sorted(self.paths)!r})"

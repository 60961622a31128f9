from abc import ABC, abstractmethod


class BaseExclusionRules(ABC):
    """
    Abstract base class defining the interface for file/directory exclusion rules.

    This class serves as a contract for the rules that decide which files and
    directories the walkers skip. An excluded directory is pruned (never descended
    into) and an excluded file is never considered for deletion. Individual rule
    addition is an optional capability that depends on the rule type.

    Example:
        >>> from fcleaner.exclusion_rules.path_rules import PathExclusionRules
        >>> rules = PathExclusionRules(["data/keep"])
        >>> rules.exclude("data/keep")
        True
        >>> rules.exclude("data/keep/file.txt")
        False
    """

    @abstractmethod
    def exclude(self, path: str) -> bool:
        """
        Determine if a given path should be excluded based on the configured rules.

        Args:
            path (str): The file or directory path to check, in the form selected by
                the walk's path mode (walked path or root-relative path).

        Returns:
            bool: True if the path should be excluded, False if it should be included.
        """
        pass

    def add_rule(self, rule: str) -> None:
        """
        Add a single exclusion rule directly.

        Rule types that don't support individual rule addition use this default
        implementation, which raises NotImplementedError.

        Args:
            rule (str): The exclusion rule to add.

        Raises:
            NotImplementedError: If this rule type doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")

    def has_rules(self) -> bool:
        """Check if any rules are configured."""
        return False

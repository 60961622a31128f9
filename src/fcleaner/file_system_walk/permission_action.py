"""Permission action enum for handling unreadable directories during traversal."""

from enum import Enum


class PermissionAction(str, Enum):
    """Action to take when a directory below the root cannot be read.

    Values:
        RAISE: Abort the walk with a TraversalError (default behavior)
        IGNORE: Log a warning and continue, treating the directory as unexplored
    """

    RAISE = "raise"
    IGNORE = "ignore"

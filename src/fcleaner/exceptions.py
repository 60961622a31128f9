class FcleanerError(Exception):
    """Base class for all fcleaner errors."""

    pass


class TraversalError(FcleanerError):
    """
    Exception raised when a directory walk cannot proceed.

    This exception is raised when the root path does not exist, is not a directory, or
    when the filesystem reports an error while reading a directory. It is fatal to the
    collection call that raised it: results gathered so far are discarded.

    Attributes:
        path (str): The path at which the walk failed.

    Example:
        >>> error = TraversalError("/missing", "Root path does not exist")
        >>> str(error)
        'Root path does not exist: /missing'
    """

    def __init__(self, path: str, reason: str) -> None:
        """
        Initialize the exception with the failing path and a short reason.

        Args:
            path (str): The path at which the walk failed.
            reason (str): Short description of the failure.
        """
        self.path = path
        super().__init__(f"{reason}: {path}")


class PathResolutionError(FcleanerError):
    """
    Exception raised when an entry's path cannot be expressed relative to the walk root.

    The walkers handle this exception themselves by skipping the entry, so it never
    escapes a collection call.

    Attributes:
        path (str): The entry path that could not be resolved.
        root (str): The root the path was resolved against.

    Example:
        >>> error = PathResolutionError("/elsewhere/file", "/data")
        >>> str(error)
        'Cannot resolve /elsewhere/file relative to /data'
    """

    def __init__(self, path: str, root: str) -> None:
        self.path = path
        self.root = root
        super().__init__(f"Cannot resolve {path} relative to {root}")


class DeletionError(FcleanerError):
    """
    Exception describing a single file or directory that could not be removed.

    Deletion errors are collected per item rather than raised, so one failure never
    stops the remaining deletions.

    Attributes:
        path (str): Path of the item that could not be removed.

    Example:
        >>> error = DeletionError("/data/old.log", "Permission denied")
        >>> str(error)
        "Can't delete /data/old.log: Permission denied"
    """

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        super().__init__(f"Can't delete {path}: {reason}")

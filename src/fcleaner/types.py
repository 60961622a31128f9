from enum import Enum
from os import PathLike
from typing import Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class PathMode(str, Enum):
    """How exclusion entries are compared against entries found during traversal.

    Values:
        FULL: Compare against the walked path, i.e. the cleaned root joined with the entry
            names (e.g. ``data/logs/app.log`` for root ``./data``, ``logs/app.log`` for root ``.``).
        RELATIVE: Compare against the path relative to the root (e.g. ``logs/app.log``).
    """

    FULL = "full"
    RELATIVE = "relative"


class FileType(Enum):
    """Enumeration of entry types met during traversal.

    Attributes:
        FILE: Regular file
        DIRECTORY: Directory
        SYMLINK: Symbolic link (never followed)
        OTHER: Device, socket, FIFO or anything else that is not a regular file
    """

    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    OTHER = "other"

"""Path normalization helpers shared by the tree walkers."""

import os

from fcleaner.exceptions import PathResolutionError
from fcleaner.types import PathMode, PathType


def normalize_path(path: PathType) -> str:
    """Clean a path lexically: drop trailing and duplicate separators, "." and "x/.." parts.

    A leading "./" disappears, so "./data" and "data" name the same entry. The
    filesystem is not consulted and symlinks are not resolved.

    Args:
        path: Path to normalize. Can be any path-like object.

    Returns:
        The cleaned path as a string. An empty path stays empty.

    Example:
        >>> normalize_path("data/logs/")
        'data/logs'
        >>> normalize_path("./data/./logs")
        'data/logs'
        >>> normalize_path("/")
        '/'
    """
    path = os.fspath(path)
    if not path:
        return path
    return os.path.normpath(path)


def join_path(parent: str, name: str) -> str:
    """Build the walked path of an entry named ``name`` inside ``parent``.

    Entries directly under the current directory get their bare name.

    Example:
        >>> join_path(".", "logs")
        'logs'
        >>> join_path("data", "logs") == os.path.join("data", "logs")
        True
    """
    if parent == os.curdir:
        return name
    return os.path.join(parent, name)


def relative_path(root: str, path: str) -> str:
    """Compute the root-relative path of an entry found while walking ``root``.

    The result always uses forward slashes. The root itself maps to an empty string.

    Args:
        root: The normalized walk root.
        path: The walked path of the entry (root joined with entry names).

    Returns:
        The relative path of the entry.

    Raises:
        PathResolutionError: If ``path`` does not lie under ``root``.

    Example:
        >>> relative_path("data", "data/logs/app.log")
        'logs/app.log'
        >>> relative_path("data", "data")
        ''
        >>> relative_path(".", "logs/app.log")
        'logs/app.log'
    """
    if path == root:
        return ""
    if root == os.curdir:
        if os.path.isabs(path) or path == os.pardir or path.startswith(os.pardir + os.sep):
            raise PathResolutionError(path, root)
        return path.replace("\\", "/")
    prefix = root if root.endswith(("/", os.sep)) else root + os.sep
    if not path.startswith(prefix) or len(path) == len(prefix):
        raise PathResolutionError(path, root)
    return path[len(prefix) :].replace("\\", "/")


def exclusion_key(path: str, rel_path: str, path_mode: PathMode) -> str:
    """Pick the form of an entry's path that exclusion entries are compared against."""
    if path_mode == PathMode.RELATIVE:
        return rel_path
    return path

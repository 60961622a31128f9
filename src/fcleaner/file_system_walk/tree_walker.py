"""Depth-first directory walking with exclusion pruning.

This module provides the TreeWalker class, the traversal primitive shared by all
collectors, and collect_deletable(), which gathers the files eligible for deletion.
"""

import logging
import os
import stat
import time
from typing import Iterator, List, Optional

from fcleaner.eligibility import Thresholds, is_eligible
from fcleaner.exceptions import PathResolutionError, TraversalError
from fcleaner.exclusion_rules.base_rules import BaseExclusionRules
from fcleaner.file_system_walk.file_record import FileRecord, WalkEntry
from fcleaner.file_system_walk.paths import exclusion_key, join_path, normalize_path, relative_path
from fcleaner.file_system_walk.permission_action import PermissionAction
from fcleaner.types import FileType, PathMode, PathType

logger = logging.getLogger(__name__)


class TreeWalker:
    """Pre-order, depth-first walker over a directory tree.

    The walker yields every entry below the root exactly once, parents before their
    children and siblings in name order. Before descending into a directory it checks
    the exclusion rules: an excluded directory is neither yielded nor entered, so
    nothing beneath it is ever seen. Excluded files are still yielded; deciding what
    to do with them is up to the caller.

    Symbolic links are reported as SYMLINK entries and never followed.

    Permission Handling:
        A directory below the root that cannot be listed is handled according to
        permission_action:
        - RAISE (default): the walk aborts with TraversalError
        - IGNORE: a warning is logged and the directory is yielded with readable=False

    Attributes:
        root (str): The normalized root path.
        exclusions (Optional[BaseExclusionRules]): Rules for skipping files/directories.
        path_mode (PathMode): Which form of a path exclusion rules are compared against.
        permission_action (PermissionAction): How to handle unreadable directories.

    Example:
        >>> walker = TreeWalker("src")  # doctest: +SKIP
        >>> for entry in walker.walk():  # doctest: +SKIP
        ...     print(entry.relative_path, entry.file_type.value)
        fcleaner directory
        fcleaner/__init__.py file
    """

    def __init__(
        self,
        root: PathType,
        exclusions: Optional[BaseExclusionRules] = None,
        *,
        path_mode: PathMode = PathMode.FULL,
        permission_action: PermissionAction = PermissionAction.RAISE,
    ) -> None:
        self.root = normalize_path(root)
        self.exclusions = exclusions
        self.path_mode = path_mode
        self.permission_action = permission_action

    def walk(self) -> Iterator[WalkEntry]:
        """Yield the entries below the root, pruning excluded directories.

        The root itself is not yielded.

        Raises:
            TraversalError: If the root is missing, is not a directory or cannot be
                read, or if any directory or file cannot be accessed and
                permission_action is RAISE.
        """
        self._check_root()
        children = self._list_directory(self.root, is_root=True)
        if children is not None:
            yield from self._walk_children(self.root, children)

    def _check_root(self) -> None:
        try:
            root_stat = os.stat(self.root)
        except FileNotFoundError as e:
            raise TraversalError(self.root, "Root path does not exist") from e
        except OSError as e:
            raise TraversalError(self.root, f"Can't access root path ({e.strerror or e})") from e
        if not stat.S_ISDIR(root_stat.st_mode):
            raise TraversalError(self.root, "Root path is not a directory")

    def _list_directory(self, path: str, is_root: bool = False) -> Optional[List[os.DirEntry[str]]]:
        try:
            with os.scandir(path) as it:
                return sorted(it, key=lambda e: e.name)
        except OSError as e:
            if is_root or self.permission_action == PermissionAction.RAISE:
                raise TraversalError(path, f"Can't read directory ({e.strerror or e})") from e
            logger.warning("Skipping unreadable directory %s: %s", path, e.strerror or e)
            return None

    def _lstat(self, path: str) -> Optional[os.stat_result]:
        try:
            return os.lstat(path)
        except OSError as e:
            if self.permission_action == PermissionAction.RAISE:
                raise TraversalError(path, f"Can't stat file ({e.strerror or e})") from e
            logger.warning("Skipping inaccessible file %s: %s", path, e.strerror or e)
            return None

    @staticmethod
    def _file_type(entry: os.DirEntry[str]) -> FileType:
        if entry.is_symlink():
            return FileType.SYMLINK
        if entry.is_dir(follow_symlinks=False):
            return FileType.DIRECTORY
        if entry.is_file(follow_symlinks=False):
            return FileType.FILE
        return FileType.OTHER

    def _walk_children(self, parent: str, children: List[os.DirEntry[str]]) -> Iterator[WalkEntry]:
        for child in children:
            path = join_path(parent, child.name)
            try:
                rel_path = relative_path(self.root, path)
            except PathResolutionError as e:
                logger.error("Got invalid path while walking %s: %s", self.root, e)
                continue

            key = exclusion_key(path, rel_path, self.path_mode)
            file_type = self._file_type(child)

            if file_type == FileType.DIRECTORY:
                # Prune before entering: nothing below an excluded directory is visited
                if self.exclusions is not None and self.exclusions.exclude(key):
                    logger.debug("Skipping excluded directory %s", path)
                    continue
                grandchildren = self._list_directory(path)
                yield WalkEntry(path, rel_path, parent, key, file_type, readable=grandchildren is not None)
                if grandchildren is not None:
                    yield from self._walk_children(path, grandchildren)
            elif file_type == FileType.FILE:
                # An unreadable file is still reported so its directory is not taken for empty
                file_stat = self._lstat(path)
                yield WalkEntry(path, rel_path, parent, key, file_type, stat=file_stat)
            else:
                yield WalkEntry(path, rel_path, parent, key, file_type)


def collect_deletable(
    root: PathType,
    thresholds: Thresholds,
    exclusions: Optional[BaseExclusionRules] = None,
    *,
    path_mode: PathMode = PathMode.FULL,
    permission_action: PermissionAction = PermissionAction.RAISE,
    now: Optional[float] = None,
) -> List[FileRecord]:
    """Collect the regular files under root that are eligible for deletion.

    Excluded directories are pruned, excluded files are skipped, and every other
    regular file is checked against the thresholds. Symlinks and special files are
    never collected. The collection is all-or-nothing: if the walk fails, nothing
    is returned.

    Args:
        root: Directory to walk.
        thresholds: Age and size limits.
        exclusions: Optional rules naming paths to skip.
        path_mode: Which form of a path the exclusion rules are expressed in.
        permission_action: How to handle unreadable directories.
        now: Reference time for age checks as a POSIX timestamp. Defaults to the
            time the walk starts.

    Returns:
        FileRecords for the eligible files, in walk order.

    Raises:
        TraversalError: If the walk itself fails.
    """
    if now is None:
        now = time.time()

    walker = TreeWalker(root, exclusions, path_mode=path_mode, permission_action=permission_action)
    records: List[FileRecord] = []
    for entry in walker.walk():
        if entry.file_type != FileType.FILE or entry.stat is None:
            continue
        if is_eligible(entry.key, entry.stat.st_size, entry.stat.st_mtime, thresholds, exclusions, now):
            records.append(FileRecord.from_entry(entry))
    return records

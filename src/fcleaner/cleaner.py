"""Top-level cleanup commands for one configured run."""

import logging
from typing import Iterable, List, Optional, Union

from fcleaner.deletion import DeletionResult, delete_dirs, delete_files
from fcleaner.eligibility import Thresholds
from fcleaner.exclusion_rules.path_rules import PathExclusionRules
from fcleaner.file_system_walk.empty_dir_detector import collect_empty_dirs
from fcleaner.file_system_walk.file_record import FileRecord
from fcleaner.file_system_walk.paths import normalize_path
from fcleaner.file_system_walk.permission_action import PermissionAction
from fcleaner.file_system_walk.tree_walker import collect_deletable
from fcleaner.types import PathMode, PathType

logger = logging.getLogger(__name__)


class Cleaner:
    """Cleanup of a single directory tree.

    A Cleaner holds the configuration of one run (root, thresholds, exclusions,
    path mode and permission handling) and exposes the blocking commands built on
    it. Each command owns its own result containers, so commands can be repeated
    or interleaved with other Cleaner instances freely. Collection never deletes;
    deletion always works on a list collected beforehand.

    Attributes:
        root (str): The normalized root directory.
        thresholds (Thresholds): Age and size limits.
        exclusions (PathExclusionRules): Paths to skip.
        path_mode (PathMode): Which form of a path the exclusions are expressed in.
        permission_action (PermissionAction): How to handle unreadable directories.

    Example:
        >>> cleaner = Cleaner("/var/log/app", Thresholds.from_units(days=30))  # doctest: +SKIP
        >>> files = cleaner.collect_files()  # doctest: +SKIP
        >>> cleaner.delete_files(files).deleted_count  # doctest: +SKIP
        12
    """

    def __init__(
        self,
        root: PathType,
        thresholds: Thresholds,
        exclusions: Iterable[str] = (),
        *,
        path_mode: Union[str, PathMode] = PathMode.FULL,
        permission_action: Union[str, PermissionAction] = PermissionAction.RAISE,
    ) -> None:
        """Initialize a cleanup run.

        Args:
            root: Directory to clean. Can be any path-like object.
            thresholds: Age and size limits a file must exceed to be deleted.
            exclusions: Paths of directories or files to skip. They are cleaned like
                the walked paths, so "./keep/" and "keep" are the same entry.
            path_mode: "full" to compare exclusions with walked paths (root joined
                with entry names) or "relative" to compare them with root-relative paths.
            permission_action: "raise" or "ignore", or a PermissionAction value.

        Raises:
            ValueError: If path_mode or permission_action is not a known value.
        """
        self.root = normalize_path(root)
        self.thresholds = thresholds

        if isinstance(path_mode, str):
            try:
                path_mode = PathMode(path_mode.lower())
            except ValueError:
                raise ValueError(f"Invalid path_mode: {path_mode}. Must be one of: 'full', 'relative'")
        self.path_mode = path_mode

        if isinstance(permission_action, str):
            try:
                permission_action = PermissionAction(permission_action.lower())
            except ValueError:
                raise ValueError(
                    f"Invalid permission_action: {permission_action}. Must be one of: 'raise', 'ignore'"
                )
        self.permission_action = permission_action

        if self.path_mode == PathMode.RELATIVE:
            exclusions = [e.replace("\\", "/") for e in exclusions]
        self.exclusions = PathExclusionRules(exclusions)

        logger.debug("Working dir: %s", self.root)
        logger.debug("Searching files %s", self.thresholds.describe())
        if self.exclusions.has_rules():
            logger.debug("Skipping: %s", ", ".join(sorted(self.exclusions)))

    def collect_files(self, now: Optional[float] = None) -> List[FileRecord]:
        """Collect the files eligible for deletion.

        Raises:
            TraversalError: If the walk fails.
        """
        return collect_deletable(
            self.root,
            self.thresholds,
            self.exclusions,
            path_mode=self.path_mode,
            permission_action=self.permission_action,
            now=now,
        )

    def delete_files(self, records: Iterable[FileRecord]) -> DeletionResult:
        """Delete previously collected files, one at a time."""
        return delete_files(records)

    def collect_empty_dirs(self) -> List[str]:
        """Collect the directories under the root that hold no files.

        Raises:
            TraversalError: If the walk fails.
        """
        return collect_empty_dirs(
            self.root,
            self.exclusions,
            path_mode=self.path_mode,
            permission_action=self.permission_action,
        )

    def delete_empty_dirs(self, paths: Iterable[str]) -> DeletionResult:
        """Remove previously collected empty directories, deepest first."""
        return delete_dirs(paths)

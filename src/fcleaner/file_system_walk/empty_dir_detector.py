"""Detection of directories without files."""

import logging
from typing import Dict, List, Optional

from fcleaner.exclusion_rules.base_rules import BaseExclusionRules
from fcleaner.file_system_walk.permission_action import PermissionAction
from fcleaner.file_system_walk.tree_walker import TreeWalker
from fcleaner.types import FileType, PathMode, PathType

logger = logging.getLogger(__name__)


def collect_empty_dirs(
    root: PathType,
    exclusions: Optional[BaseExclusionRules] = None,
    *,
    path_mode: PathMode = PathMode.FULL,
    permission_action: PermissionAction = PermissionAction.RAISE,
) -> List[str]:
    """Collect the directories under root that contain no files.

    Every directory below the root starts out as a candidate. Each non-directory
    entry (excluded files included) knocks its immediate parent out of the
    candidates. Only the direct parent is removed; the removal does not travel
    further up, so a directory whose sole child is a populated subdirectory is
    still reported. Deleting such a directory later fails as "not empty".

    The root is never a candidate. Excluded directories are pruned and neither
    they nor anything below them are candidates. A directory that could not be
    listed is not a candidate either.

    Args:
        root: Directory to walk.
        exclusions: Optional rules naming paths to skip.
        path_mode: Which form of a path the exclusion rules are expressed in.
        permission_action: How to handle unreadable directories.

    Returns:
        Walked paths of the directories found empty, in walk order.

    Raises:
        TraversalError: If the walk itself fails.

    Example:
        >>> collect_empty_dirs("build")  # doctest: +SKIP
        ['build/cache', 'build/tmp']
    """
    walker = TreeWalker(root, exclusions, path_mode=path_mode, permission_action=permission_action)
    candidates: Dict[str, bool] = {}
    for entry in walker.walk():
        if entry.file_type == FileType.DIRECTORY:
            if entry.readable:
                candidates[entry.path] = True
        elif candidates.pop(entry.parent, False):
            logger.debug("Directory %s is not empty", entry.parent)
    return list(candidates)

"""Sequential, per-item removal of collected files and directories."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterable, List

from fcleaner.exceptions import DeletionError
from fcleaner.file_system_walk.file_record import FileRecord

logger = logging.getLogger(__name__)


@dataclass
class DeletionResult:
    """Outcome of a deletion run.

    Attributes:
        deleted (List[str]): Paths removed successfully, in removal order.
        failures (List[DeletionError]): One error per item that could not be removed.
    """

    deleted: List[str] = field(default_factory=list)
    failures: List[DeletionError] = field(default_factory=list)

    @property
    def deleted_count(self) -> int:
        return len(self.deleted)

    @property
    def failed_count(self) -> int:
        return len(self.failures)


def _remove_each(paths: Iterable[str], remove: Callable[[str], None], kind: str) -> DeletionResult:
    result = DeletionResult()
    for path in paths:
        try:
            remove(path)
        except OSError as e:
            error = DeletionError(path, e.strerror or str(e))
            error.__cause__ = e
            logger.error("%s", error)
            result.failures.append(error)
            continue
        result.deleted.append(path)
        logger.debug("%s deleted: %s", kind, path)
    return result


def delete_files(records: Iterable[FileRecord]) -> DeletionResult:
    """Delete collected files one at a time.

    Every file is attempted exactly once. A failure is logged and recorded, and the
    remaining files are still processed. Nothing is rolled back.

    Args:
        records: Files to delete.

    Returns:
        The paths deleted and the per-file failures.
    """
    return _remove_each((record.path for record in records), os.remove, "File")


def delete_dirs(paths: Iterable[str]) -> DeletionResult:
    """Remove directories one at a time, deepest first.

    Ordering by depth lets a chain of nested empty directories be removed in a
    single pass. A directory that still has content fails with "not empty" and is
    recorded like any other failure.

    Args:
        paths: Directories to remove.

    Returns:
        The paths removed and the per-directory failures.
    """
    ordered = sorted(paths, key=lambda p: len(Path(p).parts), reverse=True)
    return _remove_each(ordered, os.rmdir, "Directory")

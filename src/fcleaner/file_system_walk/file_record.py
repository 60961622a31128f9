"""Records produced by directory traversal."""

import os
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from fcleaner.types import FileType


@dataclass(frozen=True)
class WalkEntry:
    """A single entry met while walking a directory tree.

    Attributes:
        path (str): The walked path: the cleaned root joined with the entry names.
        relative_path (str): Path relative to the root, using forward slashes.
        parent (str): Walked path of the directory containing this entry.
        key (str): The form of the path exclusion rules are compared against.
        file_type (FileType): What kind of entry this is. Symlinks are never followed.
        stat (Optional[os.stat_result]): lstat information for regular files. None for
            other entries and for files that could not be stat-ed.
        readable (bool): False for a directory whose contents could not be listed.
    """

    path: str
    relative_path: str
    parent: str
    key: str
    file_type: FileType
    stat: Optional[os.stat_result] = None
    readable: bool = True


@dataclass(frozen=True)
class FileRecord:
    """A regular file selected for deletion.

    Attributes:
        path (str): The walked path, used to delete the file.
        relative_path (str): Path relative to the walk root.
        size (int): File size in bytes.
        mtime (float): Modification time as a POSIX timestamp.

    Example:
        >>> record = FileRecord("data/old.log", "old.log", 2048, 0.0)
        >>> record.size
        2048
    """

    path: str
    relative_path: str
    size: int
    mtime: float

    @classmethod
    def from_entry(cls, entry: WalkEntry) -> "FileRecord":
        if entry.stat is None:
            raise ValueError(f"No stat information for {entry.path}")
        return cls(entry.path, entry.relative_path, entry.stat.st_size, entry.stat.st_mtime)

    @property
    def modified(self) -> datetime:
        return datetime.fromtimestamp(self.mtime)

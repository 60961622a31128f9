"""Test configuration and fixtures for fcleaner."""

import os
import time

import pytest

DAY = 24 * 60 * 60


@pytest.fixture
def now():
    """A whole-second reference time, so mtimes set from it round-trip exactly."""
    return float(int(time.time()))


@pytest.fixture
def make_file(now):
    """Return a helper creating a file of a given size aged a given number of days."""

    def _make_file(path, days_ago=0, size=0):
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(b"x" * size)
        mtime = now - days_ago * DAY
        os.utime(path, (mtime, mtime))
        return path

    return _make_file


@pytest.fixture
def files_tree(tmp_path, make_file):
    """Create a tree of files aged 0, 2, 3, 10 and 15 days.

    Layout:
        files_del/
        ├── .gitkeep
        ├── today1, today2      (0 days)
        ├── 2daysAgo, 3daysAgo, 10daysAgo
        └── subdir/
            ├── .gitkeep
            ├── today3          (0 days)
            └── 15daysAgo
    """
    root = tmp_path / "files_del"
    make_file(root / ".gitkeep")
    make_file(root / "today1", 0)
    make_file(root / "today2", 0)
    make_file(root / "2daysAgo", 2)
    make_file(root / "3daysAgo", 3)
    make_file(root / "10daysAgo", 10)
    make_file(root / "subdir" / ".gitkeep")
    make_file(root / "subdir" / "today3", 0)
    make_file(root / "subdir" / "15daysAgo", 15)
    return root


@pytest.fixture
def empty_dirs_tree(tmp_path):
    """Create a tree mixing empty and populated directories.

    Layout:
        empty_dirs/
        ├── .gitkeep
        ├── empty1/
        └── notempty1/
            ├── file1, file2
            ├── empty2/
            └── notempty2/
                └── file3, file5
    """
    root = tmp_path / "empty_dirs"
    (root / "empty1").mkdir(parents=True)
    (root / "notempty1" / "notempty2").mkdir(parents=True)
    (root / "notempty1" / "empty2").mkdir()
    (root / ".gitkeep").touch()
    for name in ("notempty1/file1", "notempty1/file2", "notempty1/notempty2/file3", "notempty1/notempty2/file5"):
        (root / name).touch()
    return root

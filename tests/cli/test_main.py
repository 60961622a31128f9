"""Unit tests for the CLI main module."""

import logging
import os
from unittest.mock import patch

import pytest

from fcleaner.cli.argparser import create_parser, validate_args
from fcleaner.cli.main import build_cleaner, main
from fcleaner.file_system_walk.permission_action import PermissionAction
from fcleaner.types import PathMode


@pytest.fixture(autouse=True)
def no_logging_setup():
    """Keep the root logger untouched so caplog sees the records."""
    with patch("fcleaner.cli.main.setup_logging") as mock_setup:
        yield mock_setup


@pytest.fixture
def aged_tree(tmp_path, make_file):
    make_file(tmp_path / "old.log", 10, size=2048)
    make_file(tmp_path / "new.log", 0)
    make_file(tmp_path / "archive" / "old.tar", 10)
    make_file(tmp_path / "keep" / "old.cfg", 10)
    return tmp_path


def parse(argv):
    args = create_parser().parse_args(argv)
    validate_args(args)
    return args


def test_build_cleaner_maps_options(tmp_path):
    cleaner = build_cleaner(parse(["-m", "3", "-s", "2", "-x", "a,b", "-r", "-P", "ignore", str(tmp_path)]))
    assert cleaner.root == str(tmp_path)
    assert cleaner.thresholds.max_age.days == 3
    assert cleaner.thresholds.min_size == 2 * 1024 * 1024
    assert sorted(cleaner.exclusions) == ["a", "b"]
    assert cleaner.path_mode == PathMode.RELATIVE
    assert cleaner.permission_action == PermissionAction.IGNORE


def test_build_cleaner_defaults(tmp_path):
    cleaner = build_cleaner(parse([str(tmp_path)]))
    assert cleaner.path_mode == PathMode.FULL
    assert cleaner.permission_action == PermissionAction.RAISE


def test_main_sets_up_logging(no_logging_setup, tmp_path):
    main(["-v", "--no-colors", str(tmp_path)])
    no_logging_setup.assert_called_once_with(verbose=True, no_colors=True)


def test_check_mode_lists_without_deleting(aged_tree, caplog):
    with caplog.at_level(logging.INFO):
        main(["-m", "5", "--check", str(aged_tree)])

    assert (aged_tree / "old.log").exists()
    assert (aged_tree / "archive" / "old.tar").exists()
    assert "Found 3 files to delete." in caplog.text
    assert "List of files:" in caplog.text
    assert os.path.join(str(aged_tree), "old.log") in caplog.text
    assert "2 KiB" in caplog.text


def test_deletes_matching_files(aged_tree, caplog):
    keep = os.path.join(str(aged_tree), "keep")
    with caplog.at_level(logging.INFO):
        main(["-m", "5", "-x", keep, str(aged_tree)])

    assert not (aged_tree / "old.log").exists()
    assert not (aged_tree / "archive" / "old.tar").exists()
    assert (aged_tree / "new.log").exists()
    assert (aged_tree / "keep" / "old.cfg").exists()
    assert (aged_tree / "archive").is_dir()
    assert "Deleted 2 files" in caplog.text


def test_cleanup_empty_dirs(aged_tree, caplog):
    with caplog.at_level(logging.INFO):
        main(["-m", "5", "-r", "-x", "keep", "-d", str(aged_tree)])

    assert not (aged_tree / "archive").exists()
    assert (aged_tree / "keep").is_dir()
    assert "Found 1 empty dirs to delete." in caplog.text
    assert "Deleted 1 dirs" in caplog.text


def test_nothing_to_delete(aged_tree, caplog):
    with caplog.at_level(logging.INFO):
        main(["-m", "30", "-d", str(aged_tree)])
    assert "No files found to delete" in caplog.text
    assert (aged_tree / "archive" / "old.tar").exists()


def test_no_thresholds_deletes_nothing(aged_tree, caplog):
    with caplog.at_level(logging.INFO):
        main([str(aged_tree)])
    assert "No files found to delete" in caplog.text
    assert len(list(aged_tree.rglob("*"))) == 6


def test_deletion_failure_does_not_fail_run(aged_tree, caplog):
    real_remove = os.remove
    broken = os.path.join(str(aged_tree), "old.log")

    def flaky_remove(path):
        if path == broken:
            raise PermissionError(13, "Permission denied", path)
        real_remove(path)

    with patch("os.remove", side_effect=flaky_remove), patch("sys.exit") as mock_exit:
        with caplog.at_level(logging.INFO):
            main(["-m", "5", str(aged_tree)])

    mock_exit.assert_not_called()
    assert (aged_tree / "old.log").exists()
    assert "Deleted 2 files" in caplog.text
    assert f"Can't delete {broken}" in caplog.text


def test_missing_directory_exits_with_error(tmp_path, caplog):
    with pytest.raises(SystemExit) as exc_info:
        main(["-m", "1", str(tmp_path / "missing")])
    assert exc_info.value.code == 1
    assert "Can't get files to delete" in caplog.text


def test_conflicting_paths_exit_with_syntax_error(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["-p", str(tmp_path), str(tmp_path / "other")])
    assert exc_info.value.code == 2


def test_keyboard_interrupt_exits_130(tmp_path):
    with patch("fcleaner.cli.main.run", side_effect=KeyboardInterrupt):
        with pytest.raises(SystemExit) as exc_info:
            main([str(tmp_path)])
    assert exc_info.value.code == 130


def test_unexpected_error_exits_1(tmp_path, caplog):
    with patch("fcleaner.cli.main.run", side_effect=RuntimeError("boom")):
        with pytest.raises(SystemExit) as exc_info:
            main([str(tmp_path)])
    assert exc_info.value.code == 1
    assert "Error: boom" in caplog.text


def test_whole_path_skip_from_default_root(aged_tree, monkeypatch, caplog):
    monkeypatch.chdir(aged_tree)
    with caplog.at_level(logging.INFO):
        main(["-m", "5", "-x", "keep"])

    assert not (aged_tree / "old.log").exists()
    assert (aged_tree / "keep" / "old.cfg").exists()
    assert "Deleted 2 files" in caplog.text

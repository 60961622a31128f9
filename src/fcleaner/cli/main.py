"""Command-line interface for fcleaner.

This module provides the command-line entry point: it parses the arguments, sets up
logging, runs the collection and deletion commands, and maps their outcome to an
exit code.

Exit Codes:
    0: Successful completion (individual deletion failures only lower the counts)
    1: Runtime error, e.g. the directory walk failed
    2: Command-line syntax error
    130: Interrupted by SIGINT (Ctrl+C)

Example:
    # List files older than 10 days without deleting them
    $ fcleaner -m 10 --check /path/to/dir

    # Delete them and remove directories left empty
    $ fcleaner -m 10 -d /path/to/dir
"""

import argparse
import logging
import sys
from typing import List, Optional, Sequence

from humanfriendly import format_size

from fcleaner.cleaner import Cleaner
from fcleaner.cli.argparser import create_parser, validate_args
from fcleaner.cli.logging_config import setup_logging
from fcleaner.eligibility import Thresholds
from fcleaner.exceptions import TraversalError
from fcleaner.file_system_walk.file_record import FileRecord
from fcleaner.file_system_walk.permission_action import PermissionAction
from fcleaner.types import PathMode

logger = logging.getLogger(__name__)


def build_cleaner(args: argparse.Namespace) -> Cleaner:
    """Turn validated command-line arguments into a configured Cleaner."""
    perm_action = {
        "fail": PermissionAction.RAISE,
        "ignore": PermissionAction.IGNORE,
    }[args.permission_action]

    return Cleaner(
        args.path,
        Thresholds.from_units(days=args.mtime, megabytes=args.size),
        args.skip,
        path_mode=PathMode.RELATIVE if args.relative_skip else PathMode.FULL,
        permission_action=perm_action,
    )


def list_files(records: List[FileRecord]) -> None:
    logger.info("List of files:")
    for record in records:
        logger.info(
            "\t%s (size: %s, modified: %s)",
            record.path,
            format_size(record.size, binary=True),
            record.modified.isoformat(sep=" ", timespec="seconds"),
        )


def run(args: argparse.Namespace) -> int:
    """Run the cleanup described by the parsed arguments.

    Returns:
        The process exit code.
    """
    cleaner = build_cleaner(args)

    try:
        to_delete = cleaner.collect_files()
    except TraversalError as e:
        logger.error("Can't get files to delete: %s", e)
        return 1

    if not to_delete:
        logger.info("No files found to delete")
        return 0
    logger.info("Found %d files to delete.", len(to_delete))

    if args.check:
        list_files(to_delete)
        return 0

    result = cleaner.delete_files(to_delete)
    logger.info("Deleted %d files", result.deleted_count)

    if args.cleanup_empty_dirs:
        try:
            empty_dirs = cleaner.collect_empty_dirs()
        except TraversalError as e:
            logger.error("Can't get empty dirs: %s", e)
            return 1
        logger.info("Found %d empty dirs to delete.", len(empty_dirs))
        dir_result = cleaner.delete_empty_dirs(empty_dirs)
        logger.info("Deleted %d dirs", dir_result.deleted_count)

    return 0


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main entry point for the fcleaner command-line interface.

    Args:
        argv: Arguments to parse. Defaults to sys.argv[1:].

    Exit codes:
        0: Successful completion
        1: Runtime error during execution
        2: Command-line syntax error
        130: Interrupted by SIGINT (Ctrl+C)
    """
    parser = create_parser()
    # argparse calls sys.exit(2) for argument errors or sys.exit(0) for --version
    args = parser.parse_args(argv)

    try:
        validate_args(args)
    except ValueError as e:
        parser.error(str(e))

    setup_logging(verbose=args.verbose, no_colors=args.no_colors)

    try:
        exit_code = run(args)
    except KeyboardInterrupt:
        logger.warning("Interrupted")
        sys.exit(130)
    except Exception as e:
        logger.error("Error: %s", e)
        sys.exit(1)

    if exit_code:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()

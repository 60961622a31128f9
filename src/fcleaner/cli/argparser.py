"""Command-line argument parsing for fcleaner.

This module defines the command-line interface for fcleaner,
handling argument parsing and validation.
"""

import argparse
import math
from typing import Any, List, Optional, Sequence, Union

from fcleaner import __version__
from fcleaner.file_system_walk.paths import normalize_path


class SkipListAction(argparse.Action):
    """Action accumulating comma-separated skip lists.

    Each occurrence of the option may name several paths separated by commas.
    Empty items are dropped and each path is cleaned with normalize_path(), so
    ``-x logs/,cache -x tmp`` yields ``["logs", "cache", "tmp"]``.
    """

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Union[str, Sequence[Any], None],
        option_string: Optional[str] = None,
    ) -> None:
        current: List[str] = list(getattr(namespace, self.dest, None) or [])
        if values is not None:
            for item in str(values).split(","):
                item = normalize_path(item.strip())
                if item:
                    current.append(item)
        setattr(namespace, self.dest, current)


def non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer value: '{value}'")
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {number}")
    return number


def non_negative_float(value: str) -> float:
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: '{value}'")
    if number < 0 or math.isnan(number) or math.isinf(number):
        raise argparse.ArgumentTypeError(f"must be a non-negative number, got {value}")
    return number


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with fcleaner's options.
    """
    description = """
    fcleaner: remove old and/or large files from a directory tree.

    The tool walks the given directory, selects the regular files that are older
    than --mtime days and/or bigger than --size megabytes, and deletes them. When
    both limits are given a file must exceed both. Listed paths can be skipped;
    a skipped directory is not descended into at all. Directories left without
    files can be removed afterwards.
    """

    epilog = """
    Examples:
      # Delete files older than 30 days
      fcleaner -m 30 /var/log/app

      # Only list what would be deleted
      fcleaner -m 30 --check /var/log/app

      # Delete files older than a week and bigger than 100 MB
      fcleaner -m 7 -s 100 /data/dumps

      # Skip a directory and a file (paths as walked, i.e. prefixed with the root)
      fcleaner -m 7 -x /data/dumps/keep,/data/dumps/latest.sql /data/dumps

      # Skip paths given relative to the root
      fcleaner -m 7 -r -x keep,latest.sql /data/dumps

      # Remove directories left empty afterwards
      fcleaner -m 7 -d /data/dumps
    """

    parser = argparse.ArgumentParser(
        prog="fcleaner",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"fcleaner {__version__}", help="Show the version and exit"
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=None,
        help="Working directory to clean (default: current directory).",
    )
    parser.add_argument(
        "-p",
        "--path",
        dest="path_option",
        metavar="PATH",
        help="Working directory to clean. Alternative to the positional argument.",
    )
    parser.add_argument(
        "-m",
        "--mtime",
        type=non_negative_int,
        default=0,
        metavar="DAYS",
        help="Remove files older than DAYS days (0 disables the age check).",
    )
    parser.add_argument(
        "-s",
        "--size",
        type=non_negative_float,
        default=0.0,
        metavar="MB",
        help="Remove files bigger than MB megabytes (0 disables the size check).",
    )
    parser.add_argument(
        "-x",
        "--skip",
        action=SkipListAction,
        default=[],
        metavar="LIST",
        help="Comma-separated list of directories or files to skip (can be specified multiple times).",
    )
    parser.add_argument(
        "-r",
        "--relative-skip",
        action="store_true",
        help="Interpret skip paths relative to the working directory instead of as walked paths.",
    )
    parser.add_argument(
        "-c",
        "--check",
        action="store_true",
        help="Check mode: only list the files that would be deleted.",
    )
    parser.add_argument(
        "-d",
        "--cleanup-empty-dirs",
        action="store_true",
        help="Remove empty directories after the files are deleted.",
    )
    parser.add_argument(
        "-P",
        "--permission-action",
        choices=["fail", "ignore"],
        default="fail",
        help="How to handle unreadable subdirectories (default: fail).",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose (debug) output.")
    parser.add_argument("--no-colors", action="store_true", help="Disable colors in output.")

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Performs additional validation beyond what argparse can handle and resolves the
    working directory from the positional argument or -p/--path.

    Args:
        args: Parsed command-line arguments.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if args.path is not None and args.path_option is not None and args.path != args.path_option:
        raise ValueError("Working directory given both as argument and with -p/--path")
    args.path = normalize_path(args.path or args.path_option or ".")

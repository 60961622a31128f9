"""Logging setup for the fcleaner command-line interface."""

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(verbose: bool = False, no_colors: bool = False) -> None:
    """Configure the root logger to print through a Rich handler on stdout.

    Args:
        verbose: Log DEBUG records when True, INFO and above otherwise.
        no_colors: Disable colors and syntax highlighting.
    """
    level = logging.DEBUG if verbose else logging.INFO

    console = Console(no_color=no_colors, highlight=not no_colors, soft_wrap=True)
    rich_handler = RichHandler(
        console=console,
        show_time=False,
        show_level=True,
        show_path=verbose,
        markup=False,
        rich_tracebacks=True,
        tracebacks_show_locals=False,
    )
    rich_handler.setLevel(level)
    rich_handler.setFormatter(logging.Formatter("%(message)s"))

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Clear any existing handlers to avoid duplicates
    root_logger.handlers.clear()
    root_logger.addHandler(rich_handler)

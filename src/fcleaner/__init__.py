"""Directory tree cleanup utilities.

This package provides tools for finding files that are older and/or bigger than
configured thresholds, removing them, and cleaning up directories left empty.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("fcleaner")
except PackageNotFoundError:
    __version__ = "unknown"

"""Deletion eligibility rules based on file age and size."""

import logging
import time
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional, Union

from humanfriendly import format_size, format_timespan

from fcleaner.exclusion_rules.base_rules import BaseExclusionRules

logger = logging.getLogger(__name__)

BYTES_PER_MEGABYTE = 1024 * 1024


@dataclass(frozen=True)
class Thresholds:
    """Age and size limits a file must exceed to be deleted.

    A zero value disables the corresponding limit. When both limits are disabled no
    file is ever eligible.

    Attributes:
        max_age (timedelta): Files modified longer ago than this are old enough.
        min_size (int): Files bigger than this many bytes are big enough.

    Example:
        >>> t = Thresholds.from_units(days=2, megabytes=1.5)
        >>> t.max_age.days, t.min_size
        (2, 1572864)
        >>> t.is_active()
        True
    """

    max_age: timedelta = timedelta(0)
    min_size: int = 0

    def __post_init__(self) -> None:
        if self.max_age < timedelta(0):
            raise ValueError("Age threshold cannot be negative")
        if self.min_size < 0:
            raise ValueError("Size threshold cannot be negative")

    @classmethod
    def from_units(cls, days: int = 0, megabytes: Union[int, float] = 0) -> "Thresholds":
        """Build thresholds from whole days and (fractional) megabytes.

        Args:
            days: Age threshold in days. 0 disables the age check.
            megabytes: Size threshold in megabytes (1 MB = 1024 * 1024 bytes).
                0 disables the size check.

        Raises:
            ValueError: If either value is negative.
        """
        if days < 0:
            raise ValueError("Age threshold cannot be negative")
        if megabytes < 0:
            raise ValueError("Size threshold cannot be negative")
        return cls(max_age=timedelta(days=days), min_size=int(megabytes * BYTES_PER_MEGABYTE))

    @property
    def age_enabled(self) -> bool:
        return self.max_age > timedelta(0)

    @property
    def size_enabled(self) -> bool:
        return self.min_size > 0

    def is_active(self) -> bool:
        """Check if at least one threshold is set."""
        return self.age_enabled or self.size_enabled

    def describe(self) -> str:
        """Human-readable summary of the active thresholds."""
        parts = []
        if self.age_enabled:
            parts.append(f"older than {format_timespan(self.max_age.total_seconds())}")
        if self.size_enabled:
            parts.append(f"bigger than {format_size(self.min_size, binary=True)}")
        return " and ".join(parts) if parts else "no thresholds"


def is_eligible(
    path: str,
    size: int,
    mtime: float,
    thresholds: Thresholds,
    exclusions: Optional[BaseExclusionRules] = None,
    now: Optional[float] = None,
) -> bool:
    """Decide whether a file qualifies for deletion.

    An excluded path is never eligible. Otherwise the file must exceed every active
    threshold; comparisons are strict, so a file exactly at a limit does not qualify.
    With no active threshold nothing qualifies.

    Args:
        path: Path of the file, in the form the exclusion rules are expressed in.
        size: File size in bytes.
        mtime: Modification time as a POSIX timestamp.
        thresholds: The limits to apply.
        exclusions: Optional exclusion rules.
        now: Reference time as a POSIX timestamp. Defaults to the current time.

    Returns:
        True if the file should be deleted.

    Example:
        >>> t = Thresholds.from_units(days=1)
        >>> is_eligible("a.log", 10, mtime=0.0, thresholds=t, now=86400.0)
        False
        >>> is_eligible("a.log", 10, mtime=0.0, thresholds=t, now=86401.0)
        True
    """
    if exclusions is not None and exclusions.exclude(path):
        logger.debug("Excluded: %s", path)
        return False

    if now is None:
        now = time.time()

    old_enough = now - mtime > thresholds.max_age.total_seconds()
    big_enough = size > thresholds.min_size

    if thresholds.age_enabled and thresholds.size_enabled:
        fits = old_enough and big_enough
    elif thresholds.age_enabled:
        fits = old_enough
    elif thresholds.size_enabled:
        fits = big_enough
    else:
        fits = False

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Processed: %s (size=%d, mod_time=%s, fits=%s)",
            path,
            size,
            datetime.fromtimestamp(mtime).isoformat(sep=" ", timespec="seconds"),
            fits,
        )
    return fits

"""
Date extraction from file modification times.

Every file is bucketed by the year and month of its last modification,
interpreted in UTC so that the same file lands in the same bucket on every
machine.
"""

import logging
import os
from pathlib import Path

import arrow
from arrow.constants import MAX_TIMESTAMP

from .types import TemporalBucket

logger = logging.getLogger(__name__)

NANOSECONDS_PER_SECOND = 1_000_000_000


class DateTimeError(ValueError):
    """A modification time cannot be interpreted as a calendar date."""


def bucket_from_timestamp(seconds: int) -> TemporalBucket:
    """
    Convert seconds since the epoch into a temporal bucket.

    Args:
        seconds: Whole seconds since 1970-01-01T00:00:00Z

    Returns:
        TemporalBucket for the UTC calendar month containing the instant

    Raises:
        DateTimeError: If the value is not a representable instant
    """
    # arrow reinterprets oversized values as milliseconds, so bound them here
    if abs(seconds) > MAX_TIMESTAMP:
        raise DateTimeError(f"timestamp {seconds} is out of range")

    try:
        date = arrow.get(seconds)
    except (ValueError, OverflowError, OSError) as e:
        raise DateTimeError(f"timestamp {seconds} is not a valid date: {e}") from e

    return TemporalBucket(
        year=str(date.year),
        month=date.format("MMMM", locale="en_us").lower(),
    )


def bucket_for(file_path: Path) -> TemporalBucket:
    """
    Get the temporal bucket for a file from its last modification time.

    Args:
        file_path: Path to the file

    Returns:
        TemporalBucket for the file

    Raises:
        OSError: If the file metadata cannot be read
        DateTimeError: If the modification time is not a valid date
    """
    stat = os.stat(file_path)
    seconds = stat.st_mtime_ns // NANOSECONDS_PER_SECOND
    bucket = bucket_from_timestamp(seconds)
    logger.debug(f"Using modification date {bucket.year}/{bucket.month} for {file_path}")
    return bucket

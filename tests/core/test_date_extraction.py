"""
Tests for date_extraction module.
"""

from pathlib import Path

import arrow
import pytest

from media_archiver.core.date_extraction import (
    DateTimeError,
    bucket_for,
    bucket_from_timestamp,
)
from media_archiver.core.types import MONTH_NAMES, TemporalBucket


class TestBucketFromTimestamp:
    """Tests for timestamp conversion."""

    def test_mid_month(self) -> None:
        """Test a timestamp in the middle of a month."""
        seconds = arrow.get("2023-03-15T12:00:00+00:00").int_timestamp

        assert bucket_from_timestamp(seconds) == TemporalBucket(year="2023", month="march")

    def test_epoch(self) -> None:
        """Test the epoch itself."""
        assert bucket_from_timestamp(0) == TemporalBucket(year="1970", month="january")

    def test_interpreted_in_utc(self) -> None:
        """Test that the UTC calendar decides the bucket, not the local one."""
        # New Year's Eve in New York is already January in UTC
        seconds = arrow.get("2022-12-31T23:30:00-05:00").int_timestamp

        bucket = bucket_from_timestamp(seconds)

        assert bucket.year == "2023"
        assert bucket.month == "january"

    @pytest.mark.parametrize("month", range(1, 13))
    def test_every_month_name(self, month: int) -> None:
        """Test that every month maps to its lowercase English name."""
        seconds = arrow.get(2021, month, 1, 6).int_timestamp

        assert bucket_from_timestamp(seconds).month == MONTH_NAMES[month - 1]

    def test_deterministic(self) -> None:
        """Test that the same timestamp always gives the same bucket."""
        seconds = 1_656_000_000

        assert bucket_from_timestamp(seconds) == bucket_from_timestamp(seconds)

    def test_out_of_range(self) -> None:
        """Test that unrepresentable timestamps raise DateTimeError."""
        with pytest.raises(DateTimeError):
            bucket_from_timestamp(10**20)

        with pytest.raises(DateTimeError):
            bucket_from_timestamp(-(10**20))

    def test_error_is_value_error(self) -> None:
        """Test that DateTimeError can be handled as a ValueError."""
        assert issubclass(DateTimeError, ValueError)
        assert not issubclass(DateTimeError, OSError)


class TestBucketFor:
    """Tests for file based bucketing."""

    def test_uses_modification_time(self, temp_dir: Path, make_file) -> None:
        """Test that the file's modification time is used."""
        path = make_file(temp_dir / "photo.jpg", modified="2022-07-10T09:00:00+00:00")

        assert bucket_for(path) == TemporalBucket(year="2022", month="july")

    def test_missing_file_is_io_error(self, temp_dir: Path) -> None:
        """Test that a missing file raises OSError, not DateTimeError."""
        with pytest.raises(FileNotFoundError):
            bucket_for(temp_dir / "missing.jpg")

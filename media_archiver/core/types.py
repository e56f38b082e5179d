"""
Type definitions for the media archiver.
"""

from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

MONTH_NAMES = (
    "january",
    "february",
    "march",
    "april",
    "may",
    "june",
    "july",
    "august",
    "september",
    "october",
    "november",
    "december",
)


def display_text(text: str) -> str:
    """
    Make text holding file system names printable as UTF-8.

    Names that are not valid UTF-8 decode to lone surrogates, which strict
    encoders refuse. Each undecodable byte is shown as U+FFFD instead.
    """
    return text.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


class MediaCategory(Enum):
    """Coarse category of a media file."""

    IMAGE = "image"
    VIDEO = "video"


class IneligibleReason(Enum):
    """Why an entry cannot be relocated."""

    IS_DIRECTORY = "is_directory"
    NO_EXTENSION = "no_extension"
    UNRESOLVABLE_NAME = "unresolvable_name"
    UNKNOWN_TYPE = "unknown_type"
    UNSUPPORTED_TYPE = "unsupported_type"


class EntryStatus(str, Enum):
    """Terminal state of a processed entry."""

    MOVED = "moved"
    PLANNED = "planned"  # dry run
    SKIPPED = "skipped"
    FAILED = "failed"


class ErrorKind(str, Enum):
    """Kind of problem encountered while processing an entry."""

    TRAVERSAL = "traversal"
    IO = "io"
    INELIGIBLE = "ineligible"
    DATETIME = "datetime"
    COLLISION = "collision"


class TemporalBucket(BaseModel):
    """Year and month an entry is archived under."""

    model_config = ConfigDict(frozen=True)

    year: str
    month: str

    @field_validator("year")
    @classmethod
    def _check_year(cls, value: str) -> str:
        if not value.isdigit():
            raise ValueError(f"year must be decimal digits, got {value!r}")
        return value

    @field_validator("month")
    @classmethod
    def _check_month(cls, value: str) -> str:
        if value not in MONTH_NAMES:
            raise ValueError(f"month must be a lowercase English month name, got {value!r}")
        return value


class Target(BaseModel):
    """Fully resolved record for one eligible entry."""

    model_config = ConfigDict(frozen=True)

    source_path: Path = Field(description="Canonical source path")
    category: MediaCategory
    bucket: TemporalBucket
    file_name: str = Field(min_length=1)


class EntryOutcome(BaseModel):
    """Result of processing a single entry."""

    model_config = ConfigDict(frozen=True)

    source: Path
    status: EntryStatus
    destination: Optional[Path] = None
    error_kind: Optional[ErrorKind] = None
    reason: Optional[IneligibleReason] = None
    message: str = ""

    def describe(self) -> str:
        """One-line human readable description, safe to print as UTF-8."""
        if self.destination is not None and self.status in (
            EntryStatus.MOVED,
            EntryStatus.PLANNED,
        ):
            text = f"{self.source} → {self.destination}"
        elif self.message:
            text = f"{self.source}: {self.message}"
        else:
            text = str(self.source)
        return display_text(text)

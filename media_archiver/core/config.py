"""Run configuration and application settings."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    log_level: str = "WARNING"
    log_format: str = "%(levelname)s - %(message)s"
    show_progress: bool = True

    model_config = SettingsConfigDict(
        env_prefix="MEDIA_ARCHIVER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore extra fields from .env
    )


class RunConfig(BaseModel):
    """Immutable configuration for a single archiving run."""

    source_root: Path = Field(description="Root of the tree to scan")
    destination_root: Path = Field(description="Root of the organized archive")
    owner: str = Field(min_length=1, description="Owner path segment")
    dry_run: bool = Field(default=False, description="Report moves without performing them")

    model_config = ConfigDict(frozen=True)

    @field_validator("source_root", "destination_root")
    @classmethod
    def _canonical_directory(cls, value: Path, info: ValidationInfo) -> Path:
        role = info.field_name.removesuffix("_root")
        try:
            resolved = Path(value).expanduser().resolve(strict=True)
        except OSError as e:
            raise ValueError(f"cannot canonicalize {role} {value}: {e}") from e
        if not resolved.is_dir():
            raise ValueError(f"{role} {resolved} is not a directory")
        return resolved

    @field_validator("owner")
    @classmethod
    def _single_segment(cls, value: str) -> str:
        if value in (".", "..") or "/" in value or "\\" in value:
            raise ValueError(f"owner must be a single path segment, got {value!r}")
        return value

"""
Organization strategy for the media archive.

Defines the archive directory layout:

    <root>/{pictures|videos}/<owner>/<year>/<month>/<file name>
"""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from ..core.types import MediaCategory, TemporalBucket, Target

CATEGORY_LABELS = {
    MediaCategory.IMAGE: "pictures",
    MediaCategory.VIDEO: "videos",
}


def category_label(category: MediaCategory) -> str:
    """Top-level archive directory name for a media category."""
    return CATEGORY_LABELS[category]


def resolve(
    destination_root: Path,
    category: MediaCategory,
    owner: str,
    bucket: TemporalBucket,
    file_name: str,
) -> Path:
    """
    Compose the archive path for a file.

    No filesystem access is performed; the directories may not exist yet.

    Args:
        destination_root: Root of the archive
        category: Media category of the file
        owner: Owner path segment
        bucket: Year and month of the file
        file_name: Name of the file

    Returns:
        Complete destination path
    """
    return (
        destination_root
        / category_label(category)
        / owner
        / bucket.year
        / bucket.month
        / file_name
    )


class OrganizationStrategy(BaseModel):
    """Archive layout bound to a destination root and owner."""

    destination_root: Path = Field(description="Root of the archive")
    owner: str = Field(min_length=1, description="Owner path segment")

    model_config = ConfigDict(frozen=True)

    def get_target_directory(self, target: Target) -> Path:
        """
        Get the directory a target is archived in.

        Args:
            target: Resolved target

        Returns:
            Target directory path
        """
        return self.get_target_path(target).parent

    def get_target_path(self, target: Target) -> Path:
        """
        Get the complete archive path for a target.

        Args:
            target: Resolved target

        Returns:
            Complete target path
        """
        return resolve(
            self.destination_root,
            target.category,
            self.owner,
            target.bucket,
            target.file_name,
        )

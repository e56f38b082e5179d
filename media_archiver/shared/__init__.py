"""
Shared utilities for the media archiver.
"""

from .media_utils import (
    # Classification
    IMAGE_OVERRIDES,
    classify,
    get_extension,
    lookup_media_type,
    is_image_file,
    is_video_file,
    get_file_type,
    # Logging
    setup_logging,
)

__all__ = [
    # Constants
    "IMAGE_OVERRIDES",
    # Functions
    "classify",
    "get_extension",
    "lookup_media_type",
    "is_image_file",
    "is_video_file",
    "get_file_type",
    "setup_logging",
]

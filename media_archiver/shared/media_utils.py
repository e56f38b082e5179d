"""
Media file utilities for the media archiver.

Classification of files into images and videos by extension, plus logging
setup shared by the command line tools.
"""

import logging
import mimetypes
import os
from pathlib import Path
from typing import Optional, Union

from ..core.types import IneligibleReason, MediaCategory

logger = logging.getLogger(__name__)

# Extensions with no (or an unhelpful) entry in the general media type table
IMAGE_OVERRIDES = frozenset({"arw", "heic"})

# Built-in defaults only, so classification does not depend on the host's
# mime.types files.
_MIME_TYPES = mimetypes.MimeTypes()


def get_extension(file_path: Path) -> str:
    """
    Return the lowercased extension of the final path component.

    Args:
        file_path: Path to inspect

    Returns:
        Extension without the leading dot, or "" if there is none
    """
    return os.path.splitext(file_path.name)[1][1:].lower()


def lookup_media_type(extension: str) -> Optional[str]:
    """
    Look up the media type for an extension.

    Args:
        extension: Lowercase extension without the leading dot

    Returns:
        Media type such as "image/jpeg", or None if unknown
    """
    media_type, _ = _MIME_TYPES.guess_type(f"file.{extension}", strict=False)
    return media_type


def _is_displayable(name: str) -> bool:
    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def classify(file_path: Path) -> Union[MediaCategory, IneligibleReason]:
    """
    Classify a path as an image or video.

    A name ending in a bare dot, such as "photo.", has an empty extension
    rather than none, and is reported as an unknown type.

    Args:
        file_path: Path to classify

    Returns:
        The media category, or the reason the path is not eligible
    """
    if file_path.is_dir():
        return IneligibleReason.IS_DIRECTORY

    suffix = os.path.splitext(file_path.name)[1]
    if not suffix:
        return IneligibleReason.NO_EXTENSION

    if not _is_displayable(file_path.name):
        return IneligibleReason.UNRESOLVABLE_NAME

    extension = suffix[1:].lower()
    if extension in IMAGE_OVERRIDES:
        return MediaCategory.IMAGE

    media_type = lookup_media_type(extension) if extension else None
    if media_type is None:
        return IneligibleReason.UNKNOWN_TYPE

    if media_type.startswith("image"):
        return MediaCategory.IMAGE
    elif media_type.startswith("video"):
        return MediaCategory.VIDEO
    else:
        return IneligibleReason.UNSUPPORTED_TYPE


def is_image_file(file_path: Path) -> bool:
    """Check if a file is an image based on extension."""
    return classify(file_path) is MediaCategory.IMAGE


def is_video_file(file_path: Path) -> bool:
    """Check if a file is a video based on extension."""
    return classify(file_path) is MediaCategory.VIDEO


def get_file_type(file_path: Path) -> str:
    """
    Determine file type (image, video, or unknown).

    Args:
        file_path: Path to check

    Returns:
        "image", "video", or "unknown"
    """
    result = classify(file_path)
    if isinstance(result, MediaCategory):
        return result.value
    return "unknown"


def setup_logging(
    verbose: bool = False,
    quiet: bool = False,
    level: str = "INFO",
    fmt: str = "%(levelname)s - %(message)s",
) -> None:
    """
    Configure logging for the application.

    Args:
        verbose: If True, set logging level to DEBUG
        quiet: If True, set logging level to WARNING
        level: Level name used when neither flag is set
        fmt: Log record format
    """
    if quiet:
        log_level = logging.WARNING
    elif verbose:
        log_level = logging.DEBUG
    else:
        log_level = logging.getLevelName(level.upper())
        if not isinstance(log_level, int):
            log_level = logging.INFO

    logging.basicConfig(level=log_level, format=fmt)

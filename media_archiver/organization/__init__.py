"""
Organization module for archiving media files.

This module moves images and videos into a chronological archive
structure, one directory per category, owner, year and month, with a
dry-run mode that only reports the planned moves.
"""

from .file_organizer import CollisionError, FileOrganizer, OrganizationResult, move_file
from .strategy import CATEGORY_LABELS, OrganizationStrategy, category_label, resolve

__all__ = [
    "CollisionError",
    "FileOrganizer",
    "OrganizationResult",
    "move_file",
    "CATEGORY_LABELS",
    "OrganizationStrategy",
    "category_label",
    "resolve",
]

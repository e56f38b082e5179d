"""Media archiver: move photos and videos into a dated archive."""

__version__ = "0.1.0"

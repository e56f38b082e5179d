"""
Pytest configuration and fixtures for media_archiver tests.
"""

import os
import tempfile
from pathlib import Path
from typing import Callable, Generator, List

import arrow
import pytest

# ==============================================================================
# File and directory fixtures
# ==============================================================================


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def source_dir(tmp_path: Path) -> Path:
    """Source tree to archive from."""
    path = tmp_path / "source"
    path.mkdir()
    return path


@pytest.fixture
def destination_dir(tmp_path: Path) -> Path:
    """Empty archive root."""
    path = tmp_path / "archive"
    path.mkdir()
    return path


@pytest.fixture
def make_file() -> Callable[..., Path]:
    """
    Factory creating a file with a fixed modification time.

    The modification time is given as an ISO 8601 string.
    """

    def _make_file(
        path: Path,
        content: str = "media",
        modified: str = "2023-03-15T12:00:00+00:00",
    ) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        timestamp = arrow.get(modified).int_timestamp
        os.utime(path, (timestamp, timestamp))
        return path

    return _make_file


@pytest.fixture
def tree_snapshot() -> Callable[[Path], List[str]]:
    """Function listing everything under a directory, for before/after checks."""

    def _snapshot(root: Path) -> List[str]:
        return sorted(str(p.relative_to(root)) for p in root.rglob("*"))

    return _snapshot

"""
File organizer for archiving media files.

Walks a source tree and moves every image and video into the archive layout
defined by the organization strategy. Problems with a single entry are
reported as outcomes and never stop the walk.
"""

import errno
import logging
import os
from pathlib import Path
from typing import Callable, Iterator, List, Optional, Union

from pydantic import BaseModel, Field
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn

from ..core.config import RunConfig
from ..core.date_extraction import DateTimeError, bucket_for
from ..core.types import (
    EntryOutcome,
    EntryStatus,
    ErrorKind,
    IneligibleReason,
    Target,
)
from ..shared.media_utils import classify
from .strategy import OrganizationStrategy

logger = logging.getLogger(__name__)
console = Console()


class CollisionError(FileExistsError):
    """The destination of a move is already occupied."""


class OrganizationResult(BaseModel):
    """Result of an organization run."""

    total_entries: int = 0
    moved: int = 0
    planned: int = 0
    skipped: int = 0
    collisions: int = 0
    failed: int = 0
    dry_run: bool = False
    moves: List[EntryOutcome] = Field(default_factory=list)
    errors: List[str] = Field(default_factory=list)

    def record(self, outcome: EntryOutcome) -> None:
        """Add a single entry outcome to the totals."""
        self.total_entries += 1

        if outcome.status == EntryStatus.MOVED:
            self.moved += 1
            self.moves.append(outcome)
        elif outcome.status == EntryStatus.PLANNED:
            self.planned += 1
            self.moves.append(outcome)
        elif outcome.status == EntryStatus.SKIPPED:
            self.skipped += 1
            if outcome.error_kind == ErrorKind.COLLISION:
                self.collisions += 1
                self.errors.append(outcome.describe())
        else:
            self.failed += 1
            self.errors.append(outcome.describe())


class FileOrganizer:
    """Move media files from a source tree into the archive."""

    def __init__(self, config: RunConfig):
        """
        Initialize file organizer.

        Args:
            config: Run configuration
        """
        self.config = config
        self.strategy = OrganizationStrategy(
            destination_root=config.destination_root,
            owner=config.owner,
        )

    def discover(self) -> Iterator[Union[Path, OSError]]:
        """
        Walk the source tree depth-first.

        Every directory is yielded before the files it contains. Symbolic
        links to directories are yielded as entries but not followed. Errors
        raised while reading the tree are yielded in place of entries.

        Yields:
            Discovered paths, or the error that prevented reading one
        """
        errors: List[OSError] = []
        destination = str(self.config.destination_root)

        for root, dirs, files in os.walk(self.config.source_root, onerror=errors.append):
            while errors:
                yield errors.pop(0)

            root_path = Path(root)
            links = [root_path / d for d in dirs if os.path.islink(root_path / d)]

            # Never walk into the archive itself
            dirs[:] = [
                d for d in dirs if os.path.realpath(root_path / d) != destination
            ]

            yield root_path
            yield from links
            for name in files:
                yield root_path / name

        while errors:
            yield errors.pop(0)

    def run(self) -> Iterator[EntryOutcome]:
        """
        Process every entry of the source tree.

        Yields:
            One outcome per discovered entry
        """
        mode = "DRY RUN" if self.config.dry_run else "LIVE"
        logger.info(
            f"Archiving {self.config.source_root} into "
            f"{self.config.destination_root} ({mode})"
        )

        for entry in self.discover():
            if isinstance(entry, OSError):
                yield self._traversal_failure(entry)
                continue
            yield self.process_entry(entry)

    def organize(
        self,
        show_progress: bool = True,
        on_outcome: Optional[Callable[[EntryOutcome], None]] = None,
    ) -> OrganizationResult:
        """
        Process the whole source tree and collect statistics.

        Args:
            show_progress: Display a progress spinner
            on_outcome: Called with every outcome as it is produced

        Returns:
            Organization result with statistics
        """
        result = OrganizationResult(dry_run=self.config.dry_run)

        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            TextColumn("{task.completed:.0f} entries"),
            console=console,
            disable=not show_progress,
            transient=True,
        ) as progress:
            task = progress.add_task("Organizing files...", total=None)

            for outcome in self.run():
                result.record(outcome)
                if on_outcome:
                    on_outcome(outcome)
                progress.advance(task)

        logger.info(
            f"Finished: {result.moved} moved, {result.planned} planned, "
            f"{result.skipped} skipped, {result.failed} failed"
        )
        return result

    def build_target(self, path: Path) -> Union[Target, IneligibleReason]:
        """
        Build the target record for an entry.

        Args:
            path: Discovered path

        Returns:
            Target, or the reason the entry is not eligible

        Raises:
            OSError: If the path cannot be canonicalized or stat'ed
            DateTimeError: If the modification time is not a valid date
        """
        source_path = Path(os.path.realpath(path, strict=True))

        category = classify(source_path)
        if isinstance(category, IneligibleReason):
            return category

        bucket = bucket_for(source_path)

        return Target(
            source_path=source_path,
            category=category,
            bucket=bucket,
            file_name=source_path.name,
        )

    def process_entry(self, path: Path) -> EntryOutcome:
        """
        Process a single entry.

        Args:
            path: Discovered path

        Returns:
            Outcome of the entry
        """
        try:
            target = self.build_target(path)
        except DateTimeError as e:
            logger.warning(f"Skipping {path}: {e}")
            return EntryOutcome(
                source=path,
                status=EntryStatus.FAILED,
                error_kind=ErrorKind.DATETIME,
                message=str(e),
            )
        except OSError as e:
            logger.error(f"Error reading {path}: {e}")
            return EntryOutcome(
                source=path,
                status=EntryStatus.FAILED,
                error_kind=ErrorKind.IO,
                message=str(e),
            )

        if isinstance(target, IneligibleReason):
            return self._ineligible(path, target)

        destination = self.strategy.get_target_path(target)
        return self._relocate(target, destination)

    def _relocate(self, target: Target, destination: Path) -> EntryOutcome:
        source = target.source_path

        if self.config.dry_run:
            logger.info(f"[DRY RUN] Would move {source} → {destination}")
            return EntryOutcome(
                source=source,
                status=EntryStatus.PLANNED,
                destination=destination,
            )

        try:
            destination.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error(f"Cannot create directory {destination.parent}: {e}")
            return EntryOutcome(
                source=source,
                status=EntryStatus.FAILED,
                destination=destination,
                error_kind=ErrorKind.IO,
                message=f"cannot create directory {destination.parent}: {e}",
            )

        try:
            move_file(source, destination)
        except CollisionError:
            logger.warning(f"File {destination} already exists")
            return EntryOutcome(
                source=source,
                status=EntryStatus.SKIPPED,
                destination=destination,
                error_kind=ErrorKind.COLLISION,
                message=f"{destination} already exists",
            )
        except OSError as e:
            if e.errno == errno.EXDEV:
                message = f"cannot move across filesystems to {destination}"
            else:
                message = f"cannot move to {destination}: {e}"
            logger.error(f"Error moving {source}: {message}")
            return EntryOutcome(
                source=source,
                status=EntryStatus.FAILED,
                destination=destination,
                error_kind=ErrorKind.IO,
                message=message,
            )

        logger.info(f"Moved {source} → {destination}")
        return EntryOutcome(
            source=source,
            status=EntryStatus.MOVED,
            destination=destination,
        )

    def _ineligible(self, path: Path, reason: IneligibleReason) -> EntryOutcome:
        if reason == IneligibleReason.IS_DIRECTORY:
            logger.debug(f"Skipping directory {path}")
        else:
            logger.info(f"Skipping {path}: {reason.value}")

        return EntryOutcome(
            source=path,
            status=EntryStatus.SKIPPED,
            error_kind=ErrorKind.INELIGIBLE,
            reason=reason,
            message=reason.value.replace("_", " "),
        )

    def _traversal_failure(self, error: OSError) -> EntryOutcome:
        path = Path(error.filename) if error.filename else self.config.source_root
        logger.error(f"Error walking {path}: {error}")
        return EntryOutcome(
            source=path,
            status=EntryStatus.FAILED,
            error_kind=ErrorKind.TRAVERSAL,
            message=str(error),
        )


def move_file(source: Path, destination: Path) -> None:
    """
    Rename a file without replacing an existing destination.

    Args:
        source: File to move
        destination: New path of the file

    Raises:
        CollisionError: If the destination already exists
        OSError: If the rename fails for any other reason
    """
    if os.path.lexists(destination):
        raise CollisionError(errno.EEXIST, "File exists", str(destination))

    try:
        os.rename(source, destination)
    except FileExistsError as e:
        raise CollisionError(errno.EEXIST, "File exists", str(destination)) from e

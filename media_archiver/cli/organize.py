"""
CLI command for archiving media files.

Moves images and videos from a source tree into a dated archive structure.
"""

import sys
from pathlib import Path

import click
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .. import __version__
from ..core.config import RunConfig, Settings
from ..core.types import EntryOutcome, EntryStatus, display_text
from ..organization import FileOrganizer, OrganizationResult
from ..shared.media_utils import setup_logging

console = Console()


@click.command()
@click.version_option(__version__, prog_name="media-archive")
@click.option(
    "-s",
    "--source",
    required=True,
    type=click.Path(exists=True, file_okay=False, readable=True, path_type=Path),
    help="Root of the tree to scan",
)
@click.option(
    "-d",
    "--destination",
    required=True,
    type=click.Path(path_type=Path),
    help="Root of the organized archive (must exist)",
)
@click.option(
    "-p",
    "--person",
    required=True,
    help="Owner name inserted between category and year",
)
@click.option(
    "-y",
    "--dry-run",
    is_flag=True,
    default=False,
    help="Preview moves without executing",
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    default=False,
    help="Verbose output",
)
@click.option(
    "-q",
    "--quiet",
    is_flag=True,
    default=False,
    help="Only show warnings and errors",
)
def organize(
    source: Path,
    destination: Path,
    person: str,
    dry_run: bool,
    verbose: bool,
    quiet: bool,
) -> None:
    """
    Move photos and videos from SOURCE into DESTINATION.

    Files are archived by media type, owner, and the year and month of
    their last modification (UTC).

    \b
    Layout:
        DESTINATION/pictures/PERSON/2023/march/IMG_1234.jpg
        DESTINATION/videos/PERSON/2023/march/clip.mov

    \b
    Examples:
        # Preview the moves first
        media-archive -s ~/DCIM -d ~/Archive -p alice --dry-run

        # Move the files
        media-archive -s ~/DCIM -d ~/Archive -p alice

    \b
    Files that already exist in the archive are never overwritten; they are
    reported and left in place.
    """
    settings = Settings()
    setup_logging(
        verbose=verbose,
        quiet=quiet,
        level=settings.log_level,
        fmt=settings.log_format,
    )

    try:
        config = RunConfig(
            source_root=source,
            destination_root=destination,
            owner=person,
            dry_run=dry_run,
        )
    except ValidationError as e:
        messages = "; ".join(error["msg"] for error in e.errors())
        console.print(f"[red]✗ Invalid configuration: {escape(display_text(messages))}[/red]")
        sys.exit(1)

    # Show configuration
    console.print("\n[cyan]Archive Configuration:[/cyan]")
    console.print(f"  Source: {escape(display_text(str(config.source_root)))}")
    console.print(f"  Destination: {escape(display_text(str(config.destination_root)))}")
    console.print(f"  Person: {escape(display_text(config.owner))}")
    console.print(f"  Dry run: {'YES' if config.dry_run else 'NO'}")

    if config.dry_run:
        console.print("\n[yellow]⚠ DRY RUN MODE - No files will be modified[/yellow]")

    console.print()

    organizer = FileOrganizer(config)
    result = organizer.organize(
        show_progress=settings.show_progress and not quiet,
        on_outcome=_print_move,
    )

    _display_result(result)


def _print_move(outcome: EntryOutcome) -> None:
    """Print a moved or planned file."""
    if outcome.status == EntryStatus.MOVED:
        console.print(f"[green]✓[/green] {escape(outcome.describe())}")
    elif outcome.status == EntryStatus.PLANNED:
        console.print(f"[yellow]→[/yellow] {escape(outcome.describe())}")


def _display_result(result: OrganizationResult) -> None:
    """Display organization result."""
    console.print("\n[green]✓ Archiving complete![/green]\n")

    table = Table(title="Results")
    table.add_column("Metric", style="cyan")
    table.add_column("Count", style="green", justify="right")

    table.add_row("Total entries", str(result.total_entries))
    if result.dry_run:
        table.add_row("Planned", str(result.planned))
    else:
        table.add_row("Moved", str(result.moved))
    table.add_row("Skipped", str(result.skipped))
    table.add_row("Already exists", str(result.collisions))
    table.add_row("Failed", str(result.failed))

    console.print(table)

    if result.dry_run:
        console.print("\n[yellow]This was a DRY RUN - no files were modified[/yellow]")
        console.print("Run without --dry-run to move the files.")

    if result.errors:
        console.print("\n[red]Errors:[/red]")
        for error in result.errors[:10]:  # Show first 10
            console.print(f"  [red]• {escape(error)}[/red]")
        if len(result.errors) > 10:
            console.print(f"  [dim]... and {len(result.errors) - 10} more[/dim]")


if __name__ == "__main__":
    organize()

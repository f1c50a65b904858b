"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library.
Everything is printed to stderr: stdout is reserved for the SVG echo
that Inkscape expects from an extension.
"""

from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.text import Text

from svg2librepcb.core.formatting import format_float
from svg2librepcb.domain import Bounds, Document

console = Console(stderr=True)

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]svg2librepcb[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_drawing_info(svg_path: str, polylines: int, points: int, bounds: Bounds | None) -> None:
    """Print information about the loaded drawing.

    Args:
        svg_path: Path to the SVG file
        polylines: Number of polylines after flattening
        points: Total number of points
        bounds: Drawing bounds, None for an empty drawing
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(svg_path)
    console.print(line)
    console.print(f"  {polylines:,} polylines {SYM_DOT} {points:,} points")
    if bounds is None:
        console.print("  [yellow]empty drawing[/yellow]")
    else:
        console.print(
            f"  {format_float(bounds.width)} {SYM_DOT} {format_float(bounds.height)} "
            "(width × height)"
        )


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    return f"{seconds:.1f}s"


def print_success(
    library_path: str,
    documents: list[Document],
    written: list[Path],
    total_time_s: float,
) -> None:
    """Print success message with summary.

    Args:
        library_path: Library root directory
        documents: Generated documents
        written: Paths of the written files, parallel to documents
        total_time_s: Total generation time in seconds
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_time(total_time_s)}")

    line = Text("  ")
    line.append(library_path, style="bold")
    console.print(line)

    for document, path in zip(documents, written):
        entry = Text(f"  {document.kind.directory} {SYM_DOT} ")
        entry.append(document.uuid, style="cyan")
        entry.append(f" {SYM_DOT} {path.name}")
        console.print(entry)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {escape(message)}")
    if details:
        console.print(f"  {escape(details)}")

"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from rendezvous.domain import Coordinate

console = Console()

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
    console.print(f"\n[bold]Rendezvous[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_polygon_info(path: str, vertex_count: int, area_m2: float) -> None:
    """Print one loaded input polygon.

    Args:
        path: Source file
        vertex_count: Number of distinct vertices
        area_m2: Approximate area in square metres
    """
    line = Text("  ")
    line.append(path)
    line.append(f" {SYM_DOT} {vertex_count} vertices {SYM_DOT} {_format_area(area_m2)}")
    console.print(line)


def print_regions(regions: list[tuple[int, float, Coordinate]]) -> None:
    """Print a table of intersection regions.

    Args:
        regions: (vertex_count, area_m2, centroid) per region
    """
    if not regions:
        console.print("  [yellow]No overlap[/yellow]")
        return

    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("#", justify="right")
    table.add_column("Vertices", justify="right")
    table.add_column("Area", justify="right")
    table.add_column("Centroid (lon, lat)")

    for index, (vertex_count, area_m2, c) in enumerate(regions, start=1):
        table.add_row(
            str(index),
            str(vertex_count),
            _format_area(area_m2),
            f"{c.lon:.6f}, {c.lat:.6f}",
        )
    console.print(table)


def _format_area(area_m2: float) -> str:
    """Format an area in m² or km²."""
    if area_m2 < 1_000_000:
        return f"{area_m2:,.0f} m²"
    return f"{area_m2 / 1_000_000:,.2f} km²"


def print_success(message: str, output_path: str | None = None) -> None:
    """Print success message.

    Args:
        message: Summary line
        output_path: File written, if any
    """
    console.print(f"\n[bold green]{SYM_OK} {message}[/bold green]")
    if output_path:
        line = Text("  ")
        line.append(output_path, style="bold")
        console.print(line)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")

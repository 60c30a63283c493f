"""CLI application entry point for rendezvous.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from rendezvous import __version__
from rendezvous.cli.output import (
    console,
    print_error,
    print_header,
    print_polygon_info,
    print_regions,
    print_step,
    print_success,
)
from rendezvous.config import LoggingConfig, get_default_settings
from rendezvous.core import (
    area,
    centroid,
    circle_to_polygon,
    intersect_all,
    intersect_one,
)
from rendezvous.core.geometry import to_open_ring
from rendezvous.exceptions import GeoJSONError, RendezvousError
from rendezvous.io import load_polygon, write_polygons
from rendezvous.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="rendezvous",
    help="Intersect reachability polygons to find where travelers can meet.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Rendezvous[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Intersect reachability polygons to find where travelers can meet."""
    if log_file is not None:
        config = LoggingConfig(log_file=log_file, log_level=log_level)
        configure_logging(
            log_file=config.log_file,
            console_level=config.log_level,
            file_level=config.file_log_level,
        )


@app.command()
def intersect(
    inputs: Annotated[
        list[Path],
        typer.Argument(
            help="GeoJSON files, one polygon each",
            show_default=False,
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Write the regions as a GeoJSON FeatureCollection",
        ),
    ] = None,
    largest: Annotated[
        bool,
        typer.Option(
            "--largest",
            help="Keep only the largest region",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
) -> None:
    """Intersect polygons and report every region they share.

    Example:
        rendezvous intersect alice.geojson bob.geojson -o meet.geojson
    """
    if not quiet:
        print_header(__version__)
        print_step("Loading polygons")

    try:
        polygons = []
        for path in inputs:
            polygon = load_polygon(path)
            polygons.append(polygon)
            if not quiet:
                print_polygon_info(str(path), len(to_open_ring(polygon)), area(polygon))

        if largest:
            best = intersect_one(polygons)
            regions = [best] if best is not None else []
        else:
            regions = intersect_all(polygons)

        if not quiet:
            print_step("Intersection")
            print_regions([(len(r.ring) - 1, area(r), centroid(r)) for r in regions])

        if output is not None:
            write_polygons(output, regions)

        if not quiet:
            plural = "region" if len(regions) == 1 else "regions"
            print_success(f"{len(regions)} {plural}", str(output) if output else None)

    except FileNotFoundError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except GeoJSONError as e:
        print_error("Could not read polygon", details=e.reason)
        raise typer.Exit(code=1)
    except RendezvousError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


@app.command()
def circle(
    lon: Annotated[float, typer.Option("--lon", help="Centre longitude in degrees")],
    lat: Annotated[float, typer.Option("--lat", help="Centre latitude in degrees")],
    radius: Annotated[float, typer.Option("--radius", "-r", help="Radius in metres")],
    segments: Annotated[
        int | None,
        typer.Option(
            "--segments",
            "-s",
            help="Number of circle segments (>= 3) [default: 64]",
            show_default=False,
        ),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Write the circle as GeoJSON (stdout if omitted)",
        ),
    ] = None,
) -> None:
    """Approximate a circle on the Earth's surface with a polygon."""
    if segments is None:
        segments = get_default_settings().geometry.default_circle_segments

    try:
        polygon = circle_to_polygon((lon, lat), radius, segments)
    except RendezvousError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if output is None:
        console.print_json(data=polygon.to_dict())
        return

    write_polygons(output, [polygon])
    print_success(f"Circle with {segments} segments", str(output))


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()

"""Command-line interface for rendezvous.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Intersect GeoJSON polygons and list every shared region
- Generate circle polygons around a point
- Optional detailed log file
"""

from rendezvous.cli.app import cli, main

__all__ = ["cli", "main"]

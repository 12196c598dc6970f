"""
CLI Output Utilities

Rich console formatting utilities for CLI output.
"""

import json
from typing import Any

from rich.console import Console
from rich.table import Table

from digipin.api.core.types import DecodedDigipin, GridBounds


# Create console with unicode detection
# If terminal doesn't support unicode properly, Rich will use ASCII alternatives
console = Console()

_use_unicode = console.is_terminal and not console.legacy_windows


def print_success(message: str) -> None:
    """Print success message in green."""
    console.print(f"[green]✓[/green] {message}")


def print_error(message: str) -> None:
    """Print error message in red."""
    console.print(f"[red]✗[/red] {message}", style="red")


def print_warning(message: str) -> None:
    """Print warning message in yellow."""
    console.print(f"[yellow]⚠[/yellow] {message}")


def print_info(message: str) -> None:
    """Print info message in blue."""
    info_icon = "ℹ" if _use_unicode else "i"
    console.print(f"[blue]{info_icon}[/blue] {message}")


def print_json(data: dict[str, Any] | list[Any]) -> None:
    """Print data as JSON."""
    console.print_json(json.dumps(data))


def format_meters(meters: float) -> str:
    """
    Format a length for display.

    Returns:
        Kilometers above 1 km (e.g., "15.6 km"), meters otherwise (e.g., "3.8 m")
    """
    if meters >= 1000:
        return f"{meters / 1000:.1f} km"
    return f"{meters:.1f} m"


def print_bounds_table(bounds: GridBounds, title: str = "Cell Bounds") -> None:
    table = Table(title=title, show_header=True, header_style="bold magenta")
    table.add_column("Edge", style="cyan")
    table.add_column("Degrees", style="green")

    table.add_row("North", f"{bounds.north:.6f}°")
    table.add_row("South", f"{bounds.south:.6f}°")
    table.add_row("East", f"{bounds.east:.6f}°")
    table.add_row("West", f"{bounds.west:.6f}°")

    console.print(table)


def print_decoded_table(digipin: str, decoded: DecodedDigipin) -> None:
    """
    Print a decoded code in a formatted table.

    Args:
        digipin: Canonical code
        decoded: Decode result
    """
    table = Table(title=f"DIGIPIN {digipin}", show_header=True, header_style="bold magenta")
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Latitude", f"{decoded.latitude:.6f}°")
    table.add_row("Longitude", f"{decoded.longitude:.6f}°")
    table.add_row("Precision", str(decoded.precision))
    table.add_row("Cell Size", f"{decoded.accuracy.lat_degrees:.6f}° x {decoded.accuracy.lon_degrees:.6f}°")
    table.add_row("Accuracy", f"~{format_meters(decoded.accuracy.approximate_meters)}")

    console.print(table)


def print_code_list(codes: list[str], title: str) -> None:
    """Print a count header followed by one code per line."""
    console.print(f"[bold]{title}[/bold] ({len(codes)})")
    for code in codes:
        console.print(f"  {code}")

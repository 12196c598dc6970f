"""
Grid Commands

Enumerate the codes covering a rectangle, a circle or a path.
"""

import typer
from click import Context
from typer.core import TyperGroup

from digipin.api.core.exceptions import DigipinError
from digipin.api.grid import DEFAULT_GRID_PRECISION, generate_circular_grid, generate_grid, generate_line_grid
from digipin.cli.utils.output import print_code_list, print_error, print_json, print_warning


class SortedCommandsGroup(TyperGroup):
    """Custom Typer group that sorts commands alphabetically within each help panel."""

    def list_commands(self, ctx: Context) -> list[str]:
        """Return commands sorted alphabetically."""
        commands = super().list_commands(ctx)
        return sorted(commands)


app = typer.Typer(help="Grid enumeration commands", cls=SortedCommandsGroup)


def _print_codes(codes: list[str], title: str, json_output: bool) -> None:
    if json_output:
        print_json(codes)
    elif not codes:
        print_warning("No cells found")
    else:
        print_code_list(codes, title)


@app.command("box", rich_help_panel="Enumerate")
def box(
    north: float = typer.Option(..., "--north", "-n", help="Northern latitude"),
    south: float = typer.Option(..., "--south", "-s", help="Southern latitude"),
    east: float = typer.Option(..., "--east", "-e", help="Eastern longitude"),
    west: float = typer.Option(..., "--west", "-w", help="Western longitude"),
    precision: int = typer.Option(
        DEFAULT_GRID_PRECISION, "--precision", "-p", help="Code precision (1-10)", envvar="DIGIPIN_GRID_PRECISION"
    ),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
) -> None:
    """
    List the codes covering a bounding box.

    Example:
        digipin grid box --north 28.7 --south 28.6 --east 77.3 --west 77.2
        digipin grid box -n 28.7 -s 28.6 -e 77.3 -w 77.2 --precision 5 --json
    """
    try:
        codes = generate_grid({"north": north, "south": south, "east": east, "west": west}, precision)
    except DigipinError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
    _print_codes(codes, "Cells", json_output)


@app.command("circle", rich_help_panel="Enumerate")
def circle(
    latitude: float = typer.Argument(..., help="Center latitude"),
    longitude: float = typer.Argument(..., help="Center longitude"),
    radius_km: float = typer.Option(1.0, "--radius", "-r", help="Radius in kilometers"),
    precision: int = typer.Option(
        DEFAULT_GRID_PRECISION, "--precision", "-p", help="Code precision (1-10)", envvar="DIGIPIN_GRID_PRECISION"
    ),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
) -> None:
    """
    List the codes whose centers lie within a radius of a point.

    Example:
        digipin grid circle 28.6139 77.2090 --radius 2
    """
    try:
        codes = generate_circular_grid(latitude, longitude, radius_km, precision)
    except (DigipinError, ValueError) as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
    _print_codes(codes, "Cells", json_output)


@app.command("line", rich_help_panel="Enumerate")
def line(
    lat1: float = typer.Argument(..., help="Start latitude"),
    lon1: float = typer.Argument(..., help="Start longitude"),
    lat2: float = typer.Argument(..., help="End latitude"),
    lon2: float = typer.Argument(..., help="End longitude"),
    precision: int = typer.Option(
        DEFAULT_GRID_PRECISION, "--precision", "-p", help="Code precision (1-10)", envvar="DIGIPIN_GRID_PRECISION"
    ),
    steps: int = typer.Option(100, "--steps", help="Interpolation steps"),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
) -> None:
    """
    List the codes along a straight segment.

    Example:
        digipin grid line 28.6139 77.2090 19.0760 72.8777 --precision 4
    """
    try:
        codes = generate_line_grid(lat1, lon1, lat2, lon2, precision, steps)
    except (DigipinError, ValueError) as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
    _print_codes(codes, "Cells along path", json_output)

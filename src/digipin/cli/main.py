"""
DIGIPIN CLI - Main Application

This is the main entry point for the DIGIPIN command-line interface.
"""

import logging

import typer
from click import Context
from dotenv import load_dotenv
from rich.console import Console
from typer.core import TyperGroup

from digipin.cli.commands import codec, grid, hierarchy, measure


class SortedCommandsGroup(TyperGroup):
    """Custom Typer group that sorts commands alphabetically within each help panel."""

    def list_commands(self, ctx: Context) -> list[str]:
        """Return commands sorted alphabetically."""
        commands = super().list_commands(ctx)
        return sorted(commands)


# Create main app
app = typer.Typer(
    name="digipin",
    help="DIGIPIN hierarchical geocoding CLI",
    add_completion=True,
    rich_markup_mode="rich",
    cls=SortedCommandsGroup,
)

# Console for rich output
console = Console()

# Global state for CLI
state: dict[str, bool] = {
    "verbose": False,
}


@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output",
        envvar="DIGIPIN_VERBOSE",
    ),
) -> None:
    """
    DIGIPIN hierarchical geocoding CLI

    Encode coordinates, decode codes, and navigate the grid hierarchy.

    [bold green]Examples:[/bold green]

        digipin encode 28.6139 77.2090
        digipin decode 39J-438-TJC7
        digipin children 39J

    [bold blue]Environment Variables:[/bold blue]

        DIGIPIN_PRECISION      - Default precision for encode
        DIGIPIN_GRID_PRECISION - Default precision for grid commands
        DIGIPIN_VERBOSE        - Enable verbose output
    """
    load_dotenv()

    state["verbose"] = verbose
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
        console.print("[dim]Verbose mode enabled[/dim]")


# Codec
app.command("encode", rich_help_panel="Codec")(codec.encode_command)
app.command("decode", rich_help_panel="Codec")(codec.decode_command)
app.command("validate", rich_help_panel="Codec")(codec.validate_command)
app.command("bounds", rich_help_panel="Codec")(codec.bounds_command)

# Hierarchy
app.command("parent", rich_help_panel="Hierarchy")(hierarchy.parent_command)
app.command("children", rich_help_panel="Hierarchy")(hierarchy.children_command)
app.command("siblings", rich_help_panel="Hierarchy")(hierarchy.siblings_command)
app.command("neighbors", rich_help_panel="Hierarchy")(hierarchy.neighbors_command)

# Measurement
app.command("distance", rich_help_panel="Measurement")(measure.distance_command)
app.command("bearing", rich_help_panel="Measurement")(measure.bearing_command)

app.add_typer(grid.app, name="grid", rich_help_panel="Grid")


@app.command(rich_help_panel="Utilities")
def version() -> None:
    """Show the CLI version."""
    from digipin.cli import __version__

    console.print(f"[bold]DIGIPIN CLI[/bold] version [cyan]{__version__}[/cyan]")


@app.command(rich_help_panel="Utilities")
def examples() -> None:
    """Show usage examples."""
    console.print(
        """[bold]DIGIPIN CLI Examples[/bold]

Encode coordinates:
  digipin encode 12.9716 77.5946
  digipin encode 12.9716 77.5946 --raw

Decode DIGIPIN:
  digipin decode 4P3-JK8-52C9
  digipin decode 4P3JK852C9 --json

Navigate the hierarchy:
  digipin parent 4P3JK852C9
  digipin children 4P3JK8
  digipin neighbors 4P3-JK8-52C9 --symbolic

Enumerate a grid:
  digipin grid box --north 28.7 --south 28.6 --east 77.3 --west 77.2

Measure:
  digipin distance 4P3-JK8-52C9 39J-438-TJC7 --unit miles
  digipin bearing 4P3-JK8-52C9 39J-438-TJC7
""",
        highlight=False,
    )


if __name__ == "__main__":
    app()

"""
Measurement Commands

Distance and bearing between the centers of two cells.
"""

from typing import Literal

import typer

from digipin.api.core.exceptions import DigipinError
from digipin.api.distance import calculate_digipin_bearing, calculate_digipin_distance
from digipin.cli.utils.output import console, print_error


def distance_command(
    start: str = typer.Argument(..., help="First DIGIPIN"),
    end: str = typer.Argument(..., help="Second DIGIPIN"),
    unit: Literal["m", "km", "miles"] = typer.Option("km", "--unit", "-u", help="Output unit"),
) -> None:
    """
    Calculate the great-circle distance between two DIGIPINs.

    Example:
        digipin distance 4P3-JK8-52C9 39J-438-TJC7
        digipin distance 4P3-JK8-52C9 39J-438-TJC7 --unit miles
    """
    try:
        distance = calculate_digipin_distance(start, end)
    except DigipinError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if unit == "m":
        console.print(f"{distance.meters} meters")
    elif unit == "miles":
        console.print(f"{distance.miles} miles")
    else:
        console.print(f"{distance.kilometers} km")


def bearing_command(
    start: str = typer.Argument(..., help="First DIGIPIN"),
    end: str = typer.Argument(..., help="Second DIGIPIN"),
) -> None:
    """
    Calculate the initial and final bearing between two DIGIPINs.

    Example:
        digipin bearing 4P3-JK8-52C9 39J-438-TJC7
    """
    try:
        bearing = calculate_digipin_bearing(start, end)
    except DigipinError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    console.print(f"Initial bearing: {bearing.initial}°")
    console.print(f"Final bearing: {bearing.final}°")

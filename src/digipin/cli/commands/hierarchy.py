"""
Hierarchy Commands

Commands for moving between levels and finding adjacent cells.
"""

import typer

from digipin.api.core.exceptions import DigipinError
from digipin.api.hierarchy import (
    get_children,
    get_neighbors,
    get_neighbors_in_radius,
    get_parent,
    get_siblings,
    get_symbolic_neighbors,
)
from digipin.cli.utils.output import console, print_code_list, print_error, print_info, print_json


def parent_command(digipin: str = typer.Argument(..., help="DIGIPIN at precision 2 or more")) -> None:
    """
    Show the code one level up.

    Example:
        digipin parent 39J438
    """
    try:
        console.print(get_parent(digipin))
    except DigipinError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


def children_command(
    digipin: str = typer.Argument(..., help="DIGIPIN below full precision"),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
) -> None:
    """
    List the 16 codes one level down.

    Example:
        digipin children 39J
    """
    try:
        children = get_children(digipin)
    except DigipinError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if json_output:
        print_json(children)
    else:
        print_code_list(children, "Children")


def siblings_command(
    digipin: str = typer.Argument(..., help="DIGIPIN"),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
) -> None:
    """
    List the other children of this code's parent.

    Example:
        digipin siblings 39J4
    """
    try:
        siblings = get_siblings(digipin)
    except DigipinError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if json_output:
        print_json(siblings)
    else:
        print_code_list(siblings, "Siblings")


def neighbors_command(
    digipin: str = typer.Argument(..., help="DIGIPIN"),
    radius: int = typer.Option(1, "--radius", "-r", min=1, help="Ring radius in cells"),
    symbolic: bool = typer.Option(
        False, "--symbolic", "-s", help="Use exact row/column arithmetic (immediate neighbors only)"
    ),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
) -> None:
    """
    List neighboring codes at the same precision.

    Example:
        digipin neighbors 4P3-JK8-52C9
        digipin neighbors 4P3JK8 --radius 2
        digipin neighbors 4P3JK8 --symbolic --json
    """
    if symbolic and radius != 1:
        print_error("--symbolic only supports --radius 1")
        raise typer.Exit(code=1)

    try:
        if symbolic:
            neighbors = get_symbolic_neighbors(digipin)
        elif radius == 1:
            neighbors = get_neighbors(digipin)
        else:
            neighbors = get_neighbors_in_radius(digipin, radius)
    except DigipinError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if json_output:
        print_json(neighbors)
    else:
        print_code_list(neighbors, "Neighbors")
        if radius == 1 and len(neighbors) < 8:
            print_info("Cell touches the edge of the grid; outside neighbors are omitted")

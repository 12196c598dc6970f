"""
Codec Commands

Commands for encoding coordinates and decoding codes.
"""

import typer

from digipin.api.codec import decode, encode, format_digipin, get_bounds, validate_digipin
from digipin.api.core.constants import DEFAULT_PRECISION
from digipin.api.core.exceptions import DigipinError
from digipin.cli.utils.output import (
    console,
    print_bounds_table,
    print_decoded_table,
    print_error,
    print_json,
    print_success,
    print_warning,
)


def encode_command(
    latitude: float = typer.Argument(..., help="Latitude in decimal degrees"),
    longitude: float = typer.Argument(..., help="Longitude in decimal degrees"),
    precision: int = typer.Option(
        DEFAULT_PRECISION,
        "--precision",
        "-p",
        help="Number of symbols (1-10)",
        envvar="DIGIPIN_PRECISION",
    ),
    raw: bool = typer.Option(False, "--raw", "-r", help="Output without hyphens"),
) -> None:
    """
    Encode coordinates to a DIGIPIN.

    Example:
        digipin encode 12.9716 77.5946
        digipin encode 12.9716 77.5946 --raw
        digipin encode 12.9716 77.5946 --precision 6
    """
    try:
        console.print(encode(latitude, longitude, precision, grouped=not raw))
    except DigipinError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


def decode_command(
    digipin: str = typer.Argument(..., help="DIGIPIN (hyphens optional)"),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
) -> None:
    """
    Decode a DIGIPIN to the center of its cell.

    Example:
        digipin decode 4P3-JK8-52C9
        digipin decode 4P3JK852C9 --json
    """
    try:
        decoded = decode(digipin)
    except DigipinError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if json_output:
        print_json(decoded.to_dict())
    else:
        print_decoded_table(format_digipin(digipin), decoded)


def validate_command(
    digipin: str = typer.Argument(..., help="DIGIPIN to validate"),
    full: bool = typer.Option(False, "--full", help="Require all 10 symbols"),
) -> None:
    """
    Validate DIGIPIN format.

    Exits with status 1 when the code is invalid.

    Example:
        digipin validate 4P3-JK8-52C9
        digipin validate 4P3 --full
    """
    result = validate_digipin(digipin, require_full_precision=full)
    if not result.is_valid:
        for error in result.errors:
            print_error(error)
        raise typer.Exit(code=1)

    for warning in result.warnings:
        print_warning(warning)
    print_success(f"Valid DIGIPIN (precision {result.precision})")


def bounds_command(
    digipin: str = typer.Argument(..., help="DIGIPIN (hyphens optional)"),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
) -> None:
    """
    Show the rectangle a DIGIPIN denotes.

    Example:
        digipin bounds 39J438
    """
    try:
        bounds = get_bounds(digipin)
    except DigipinError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if json_output:
        print_json(bounds.to_dict())
    else:
        print_bounds_table(bounds, title=f"Bounds of {format_digipin(digipin)}")

"""
Hierarchy Navigation

Moves between codes using the nested-quadrant structure of the grid:
parent/children/siblings are prefix operations on the symbol sequence,
neighbors are found either by re-encoding offset coordinates (the
compatibility behaviour) or by exact row/column arithmetic.

The two neighbor techniques are not interchangeable at cell edges near the
root boundary or under floating-point drift. ``get_neighbors``,
``get_neighbors_in_radius``, ``are_neighbors`` and ``get_border_digipins``
all use coordinate offsets; ``get_symbolic_neighbors`` is the exact
alternative and is never mixed into the others.
"""

from __future__ import annotations

import itertools
import logging
import numbers
from collections.abc import Iterable

import deal

from digipin.api.codec import DigipinCodec, get_codec
from digipin.api.core.constants import DEFAULT_PRECISION, GRID_SIZE
from digipin.api.core.exceptions import DigipinError, FormatError, PrecisionError


logger = logging.getLogger(__name__)

__all__ = [
    "COMPASS_OFFSETS",
    "MAX_SUBDIVISION_DEPTH",
    "are_neighbors",
    "find_nearest",
    "get_border_digipins",
    "get_children",
    "get_neighborhood_grid",
    "get_neighbors",
    "get_neighbors_in_radius",
    "get_parent",
    "get_siblings",
    "get_subdivisions",
    "get_symbolic_neighbors",
]


# (lat_steps, lon_steps) in order N, NE, E, SE, S, SW, W, NW
COMPASS_OFFSETS: tuple[tuple[int, int], ...] = (
    (1, 0),
    (1, 1),
    (0, 1),
    (-1, 1),
    (-1, 0),
    (-1, -1),
    (0, -1),
    (1, -1),
)

MAX_SUBDIVISION_DEPTH = 3
"""Deepest expansion get_subdivisions will produce (16**3 = 4096 codes)."""


@deal.raises(FormatError, PrecisionError)
def get_parent(digipin: str, codec: DigipinCodec | None = None) -> str:
    """
    Get the code one level up (the input minus its last symbol).

    Args:
        digipin: Code at level 2 or deeper
        codec: Codec to use (default: national grid)

    Returns:
        Parent code (never grouped, since it is shorter than full precision)

    Raises:
        PrecisionError: If the code has a single symbol
    """
    codec = get_codec(codec)
    indices = codec.to_indices(digipin)
    if len(indices) <= 1:
        raise PrecisionError(
            "Cannot get parent of minimum precision DIGIPIN", {"digipin": digipin, "precision": len(indices)}
        )
    return codec.render(indices[:-1])


@deal.raises(FormatError, PrecisionError)
@deal.post(lambda result: len(result) == GRID_SIZE * GRID_SIZE)
def get_children(digipin: str, codec: DigipinCodec | None = None) -> list[str]:
    """
    Get the 16 codes one level down, in row-major alphabet order.

    Children are formed by appending each symbol; a parent cell lies inside
    the root rectangle, so every child does too.

    Raises:
        PrecisionError: If the code is already at full precision
    """
    codec = get_codec(codec)
    indices = codec.to_indices(digipin)
    if len(indices) >= codec.spec.max_level:
        raise PrecisionError(
            "Cannot get children of maximum precision DIGIPIN", {"digipin": digipin, "precision": len(indices)}
        )
    return [codec.render((*indices, index)) for index in range(GRID_SIZE * GRID_SIZE)]


@deal.raises(FormatError)
def get_siblings(digipin: str, codec: DigipinCodec | None = None) -> list[str]:
    """
    Get the other 15 children of this code's parent.

    A single-symbol code has no parent and therefore no siblings; an empty
    list is returned instead of raising.
    """
    codec = get_codec(codec)
    indices = codec.to_indices(digipin)
    if len(indices) <= 1:
        return []
    own = codec.render(indices)
    return [child for child in get_children(codec.render(indices[:-1]), codec) if child != own]


def _offset_codes(
    digipin: str,
    offsets: Iterable[tuple[int, int]],
    codec: DigipinCodec,
) -> list[str]:
    """Re-encode the cell center shifted by whole cell extents; drop offsets that leave the grid."""
    decoded = codec.decode(digipin)
    lat_step = decoded.bounds.lat_extent
    lon_step = decoded.bounds.lon_extent
    root = codec.spec.root

    codes = []
    for lat_offset, lon_offset in offsets:
        latitude = decoded.latitude + lat_offset * lat_step
        longitude = decoded.longitude + lon_offset * lon_step
        if not root.contains(latitude, longitude):
            continue
        try:
            codes.append(codec.encode(latitude, longitude, decoded.precision))
        except DigipinError:
            continue
    return codes


@deal.raises(FormatError)
@deal.post(lambda result: len(result) <= 8)
def get_neighbors(digipin: str, codec: DigipinCodec | None = None) -> list[str]:
    """
    Get the up to 8 surrounding codes at the same precision (N, NE, E, SE, S, SW, W, NW).

    Each neighbor is found by moving the cell center one cell height/width
    and re-encoding. Offsets that fall outside the root rectangle are
    dropped, so cells on the coverage edge have fewer than 8 neighbors.

    Args:
        digipin: Code at any precision
        codec: Codec to use (default: national grid)

    Returns:
        List of 0 to 8 neighbor codes
    """
    return _offset_codes(digipin, COMPASS_OFFSETS, get_codec(codec))


@deal.raises(FormatError, ValueError)
def get_neighbors_in_radius(digipin: str, radius: int = 1, codec: DigipinCodec | None = None) -> list[str]:
    """
    Get all codes within ``radius`` cells of this one (a square ring, not a circle).

    Scans latitude offsets from south to north and, within each, longitude
    offsets from west to east, skipping the cell itself.

    Raises:
        ValueError: If radius is not an integer of at least 1
    """
    if isinstance(radius, bool) or not isinstance(radius, numbers.Integral):
        raise ValueError(f"Radius must be an integer, got {type(radius).__name__}")
    if radius < 1:
        raise ValueError(f"Radius must be at least 1, got {radius}")
    offsets = (
        (lat_offset, lon_offset)
        for lat_offset in range(-radius, radius + 1)
        for lon_offset in range(-radius, radius + 1)
        if (lat_offset, lon_offset) != (0, 0)
    )
    return _offset_codes(digipin, offsets, get_codec(codec))


@deal.raises(FormatError)
def are_neighbors(first: str, second: str, codec: DigipinCodec | None = None) -> bool:
    """Return True if ``second`` is among the coordinate-offset neighbors of ``first``."""
    codec = get_codec(codec)
    return codec.format(second) in get_neighbors(first, codec)


def _global_position(indices: tuple[int, ...]) -> tuple[int, int]:
    row = col = 0
    for index in indices:
        digit_row, digit_col = divmod(index, GRID_SIZE)
        row = row * GRID_SIZE + digit_row
        col = col * GRID_SIZE + digit_col
    return row, col


def _indices_at(row: int, col: int, level: int) -> tuple[int, ...]:
    indices = []
    for _ in range(level):
        row, digit_row = divmod(row, GRID_SIZE)
        col, digit_col = divmod(col, GRID_SIZE)
        indices.append(digit_row * GRID_SIZE + digit_col)
    return tuple(reversed(indices))


@deal.raises(FormatError)
@deal.post(lambda result: len(result) <= 8)
def get_symbolic_neighbors(digipin: str, codec: DigipinCodec | None = None) -> list[str]:
    """
    Get the up to 8 surrounding codes by exact row/column arithmetic.

    The code is read as a global (row, column) address at its level, row 0
    being the northernmost band of the root. Neighbors are the addresses
    one step away, so the result never contains the input cell and never
    skips an adjacent cell because of floating-point drift. Order matches
    get_neighbors: N, NE, E, SE, S, SW, W, NW.
    """
    codec = get_codec(codec)
    indices = codec.to_indices(digipin)
    level = len(indices)
    size = GRID_SIZE**level
    row, col = _global_position(indices)

    neighbors = []
    for lat_offset, lon_offset in COMPASS_OFFSETS:
        # Rows count southward
        neighbor_row = row - lat_offset
        neighbor_col = col + lon_offset
        if 0 <= neighbor_row < size and 0 <= neighbor_col < size:
            neighbors.append(codec.render(_indices_at(neighbor_row, neighbor_col, level)))
    return neighbors


@deal.raises(FormatError, ValueError)
def get_neighborhood_grid(digipin: str, size: int = 3, codec: DigipinCodec | None = None) -> list[list[str | None]]:
    """
    Get a size x size block of codes centered on this one.

    Rows run north to south and columns west to east. Positions outside the
    root rectangle are None.

    Raises:
        ValueError: If size is not a positive odd number
    """
    if size < 1 or size % 2 == 0:
        raise ValueError(f"Grid size must be a positive odd number, got {size}")

    codec = get_codec(codec)
    decoded = codec.decode(digipin)
    lat_step = decoded.bounds.lat_extent
    lon_step = decoded.bounds.lon_extent
    root = codec.spec.root
    radius = size // 2

    grid: list[list[str | None]] = []
    for lat_offset in range(radius, -radius - 1, -1):
        row: list[str | None] = []
        for lon_offset in range(-radius, radius + 1):
            latitude = decoded.latitude + lat_offset * lat_step
            longitude = decoded.longitude + lon_offset * lon_step
            code = None
            if root.contains(latitude, longitude):
                try:
                    code = codec.encode(latitude, longitude, decoded.precision)
                except DigipinError:
                    code = None
            row.append(code)
        grid.append(row)
    return grid


@deal.raises(FormatError)
def get_border_digipins(digipins: Iterable[str], codec: DigipinCodec | None = None) -> list[str]:
    """
    Get the codes of a region that touch at least one cell outside it.

    Args:
        digipins: Codes making up the region (any case or grouping)
        codec: Codec to use (default: national grid)

    Returns:
        Canonical codes of border cells, in input order
    """
    codec = get_codec(codec)
    region = list(dict.fromkeys(codec.format(code) for code in digipins))
    members = set(region)
    border = [code for code in region if any(neighbor not in members for neighbor in get_neighbors(code, codec))]
    logger.debug(f"{len(border)} of {len(region)} cells are on the region border")
    return border


def find_nearest(
    latitude: float,
    longitude: float,
    precision: int = DEFAULT_PRECISION,
    codec: DigipinCodec | None = None,
) -> str:
    """Get the code of the cell containing a coordinate (same as encode)."""
    return get_codec(codec).encode(latitude, longitude, precision)


@deal.raises(FormatError, PrecisionError)
def get_subdivisions(digipin: str, target_precision: int, codec: DigipinCodec | None = None) -> list[str]:
    """
    Get every descendant of a code at a deeper precision.

    Args:
        digipin: Ancestor code
        target_precision: Level of the descendants, at most 3 levels deeper
        codec: Codec to use (default: national grid)

    Returns:
        16 ** (target_precision - len(digipin)) codes in lexicographic index order

    Raises:
        PrecisionError: If target_precision is not deeper than the code,
            beyond full precision, or too many levels deeper
    """
    codec = get_codec(codec)
    indices = codec.to_indices(digipin)
    target_precision = codec.validate_precision(target_precision)
    depth = target_precision - len(indices)
    if depth < 1:
        raise PrecisionError(
            "Target precision must be greater than current DIGIPIN precision",
            {"digipin": digipin, "target_precision": target_precision},
        )
    if depth > MAX_SUBDIVISION_DEPTH:
        raise PrecisionError(
            f"Cannot expand more than {MAX_SUBDIVISION_DEPTH} levels at once, requested {depth}",
            {"digipin": digipin, "target_precision": target_precision},
        )
    return [
        codec.render(indices + suffix) for suffix in itertools.product(range(GRID_SIZE * GRID_SIZE), repeat=depth)
    ]

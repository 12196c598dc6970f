"""
Bounded Grid Enumeration

Lists the codes covering a region by sampling a regular lattice of points
and encoding each one.

The base enumerator samples points spaced one cell apart, starting at the
southwest corner of the requested rectangle. The result is the set of
unique cells that contain a sample point; it is an approximation of the
cover, not an exact one: a cell that only overlaps the rectangle's edge may
be left out if no sample point lands in it. Callers needing an exact cover
should over-sample (a finer precision, then get_parent) or post-filter by
cell bounds.

The circular, line, polygon, sparse and systematic variants filter or
resample the base grid.
"""

from __future__ import annotations

import logging
import math
import random
from collections.abc import Iterable, Mapping, Sequence

import deal

from digipin.api.codec import DigipinCodec, get_codec
from digipin.api.core.constants import METERS_PER_DEGREE
from digipin.api.core.exceptions import BoundsError, DigipinError, PrecisionError
from digipin.api.core.types import Coordinates, GridBounds
from digipin.api.distance import haversine_km


logger = logging.getLogger(__name__)

__all__ = [
    "DEFAULT_GRID_PRECISION",
    "LARGE_GRID_WARNING",
    "generate_circular_grid",
    "generate_grid",
    "generate_hierarchical_grid",
    "generate_line_grid",
    "generate_polygon_grid",
    "generate_sparse_grid",
    "generate_systematic_grid",
    "is_point_in_polygon",
]


DEFAULT_GRID_PRECISION = 6

LARGE_GRID_WARNING = 1_000_000
"""Sample count above which generate_grid logs a warning."""

BoundsLike = GridBounds | Mapping[str, float]
VertexLike = Coordinates | tuple[float, float]


def _as_bounds(bounds: BoundsLike) -> GridBounds:
    if isinstance(bounds, GridBounds):
        result = bounds
    else:
        try:
            result = GridBounds(
                south=float(bounds["south"]),
                north=float(bounds["north"]),
                west=float(bounds["west"]),
                east=float(bounds["east"]),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise BoundsError(f"Bounding box needs numeric north, south, east and west: {e}", {"bounds": bounds}) from e

    if not result.is_valid:
        raise BoundsError(
            "Invalid bounding box coordinates: south must be below north and west below east",
            {"bounds": result.to_dict()},
        )
    return result


def _as_coordinates(vertex: VertexLike) -> Coordinates:
    if isinstance(vertex, Coordinates):
        return vertex
    latitude, longitude = vertex
    return Coordinates(float(latitude), float(longitude))


@deal.raises(BoundsError, PrecisionError)
def generate_grid(
    bounds: BoundsLike,
    precision: int = DEFAULT_GRID_PRECISION,
    codec: DigipinCodec | None = None,
) -> list[str]:
    """
    List the unique codes whose cells contain a lattice point inside ``bounds``.

    Args:
        bounds: GridBounds or mapping with north, south, east, west
        precision: Code precision (1-10, default: 6)
        codec: Codec to use (default: national grid)

    Returns:
        Unique codes, ordered south to north then west to east

    Raises:
        BoundsError: If the rectangle is empty or inverted
        PrecisionError: If precision is outside 1-10
    """
    codec = get_codec(codec)
    precision = codec.validate_precision(precision)
    box = _as_bounds(bounds)
    root = codec.spec.root
    lat_pitch, lon_pitch = codec.spec.cell_extent(precision)

    lat_samples = math.floor(box.lat_extent / lat_pitch) + 1
    lon_samples = math.floor(box.lon_extent / lon_pitch) + 1
    total = lat_samples * lon_samples
    if total > LARGE_GRID_WARNING:
        logger.warning(f"Sampling {total} points at precision {precision}; consider a coarser precision")

    codes: dict[str, None] = {}
    skipped = 0
    for i in range(lat_samples):
        latitude = box.south + i * lat_pitch
        if latitude > box.north:
            break
        for j in range(lon_samples):
            longitude = box.west + j * lon_pitch
            if longitude > box.east:
                break
            if not root.contains(latitude, longitude):
                skipped += 1
                continue
            try:
                codes[codec.encode(latitude, longitude, precision)] = None
            except DigipinError:
                skipped += 1

    logger.debug(f"Grid at precision {precision}: {total} samples, {skipped} skipped, {len(codes)} unique cells")
    return list(codes)


@deal.raises(BoundsError, PrecisionError, ValueError)
def generate_circular_grid(
    latitude: float,
    longitude: float,
    radius_km: float,
    precision: int = DEFAULT_GRID_PRECISION,
    codec: DigipinCodec | None = None,
) -> list[str]:
    """
    List the codes whose cell centers are within ``radius_km`` of a point.

    The base grid covers the circle's bounding rectangle; cells are kept by
    haversine distance from their center.

    Raises:
        ValueError: If radius_km is not positive
    """
    if radius_km <= 0:
        raise ValueError(f"Radius must be positive, got {radius_km}")

    codec = get_codec(codec)
    lat_radius = radius_km / (METERS_PER_DEGREE / 1000.0)
    lon_radius = lat_radius / max(math.cos(math.radians(latitude)), 1e-9)
    box = GridBounds(
        south=latitude - lat_radius,
        north=latitude + lat_radius,
        west=longitude - lon_radius,
        east=longitude + lon_radius,
    )

    result = []
    for code in generate_grid(box, precision, codec):
        center = codec.decode(code)
        if haversine_km(latitude, longitude, center.latitude, center.longitude) <= radius_km:
            result.append(code)
    return result


@deal.raises(PrecisionError, ValueError)
def generate_line_grid(
    lat1: float,
    lon1: float,
    lat2: float,
    lon2: float,
    precision: int = DEFAULT_GRID_PRECISION,
    steps: int = 100,
    codec: DigipinCodec | None = None,
) -> list[str]:
    """
    List the codes along a straight (in degrees) segment between two points.

    Samples ``steps + 1`` evenly spaced points including both ends. Points
    outside the grid are skipped.

    Returns:
        Unique codes in path order
    """
    if steps < 1:
        raise ValueError(f"Steps must be at least 1, got {steps}")

    codec = get_codec(codec)
    precision = codec.validate_precision(precision)
    root = codec.spec.root

    codes: dict[str, None] = {}
    for step in range(steps + 1):
        t = step / steps
        latitude = lat1 + t * (lat2 - lat1)
        longitude = lon1 + t * (lon2 - lon1)
        if not root.contains(latitude, longitude):
            continue
        try:
            codes[codec.encode(latitude, longitude, precision)] = None
        except DigipinError:
            continue
    return list(codes)


def is_point_in_polygon(latitude: float, longitude: float, vertices: Sequence[VertexLike]) -> bool:
    """
    Ray casting point-in-polygon test.

    Vertices may be Coordinates or (latitude, longitude) tuples; the
    polygon is closed implicitly. Points exactly on an edge may fall either
    way.
    """
    points = [_as_coordinates(vertex) for vertex in vertices]
    inside = False
    j = len(points) - 1
    for i, current in enumerate(points):
        previous = points[j]
        if (current.latitude > latitude) != (previous.latitude > latitude):
            crossing = (previous.longitude - current.longitude) * (latitude - current.latitude) / (
                previous.latitude - current.latitude
            ) + current.longitude
            if longitude < crossing:
                inside = not inside
        j = i
    return inside


@deal.raises(BoundsError, PrecisionError, ValueError)
def generate_polygon_grid(
    vertices: Sequence[VertexLike],
    precision: int = DEFAULT_GRID_PRECISION,
    codec: DigipinCodec | None = None,
) -> list[str]:
    """
    List the codes whose cell centers fall inside a polygon.

    Raises:
        ValueError: If fewer than 3 vertices are given
    """
    if len(vertices) < 3:
        raise ValueError("Polygon must have at least 3 vertices")

    codec = get_codec(codec)
    points = [_as_coordinates(vertex) for vertex in vertices]
    box = GridBounds(
        south=min(point.latitude for point in points),
        north=max(point.latitude for point in points),
        west=min(point.longitude for point in points),
        east=max(point.longitude for point in points),
    )

    result = []
    for code in generate_grid(box, precision, codec):
        center = codec.decode(code)
        if is_point_in_polygon(center.latitude, center.longitude, points):
            result.append(code)
    return result


@deal.raises(BoundsError, PrecisionError, ValueError)
def generate_sparse_grid(
    bounds: BoundsLike,
    precision: int = DEFAULT_GRID_PRECISION,
    density: float = 0.1,
    seed: int | None = None,
    codec: DigipinCodec | None = None,
) -> list[str]:
    """
    Randomly sample ``floor(n * density)`` cells of the base grid.

    Args:
        density: Fraction of cells to keep, in (0, 1]
        seed: Seed for a reproducible sample

    Raises:
        ValueError: If density is outside (0, 1]
    """
    if not 0 < density <= 1:
        raise ValueError(f"Density must be between 0 and 1, got {density}")

    full_grid = generate_grid(bounds, precision, codec)
    sample_size = math.floor(len(full_grid) * density)
    return random.Random(seed).sample(full_grid, sample_size)


@deal.raises(BoundsError, PrecisionError, ValueError)
def generate_systematic_grid(
    bounds: BoundsLike,
    precision: int = DEFAULT_GRID_PRECISION,
    spacing: int = 2,
    codec: DigipinCodec | None = None,
) -> list[str]:
    """
    Keep every ``spacing``-th cell of the base grid, in grid order.

    Raises:
        ValueError: If spacing is less than 1
    """
    if spacing < 1:
        raise ValueError(f"Spacing must be at least 1, got {spacing}")
    return generate_grid(bounds, precision, codec)[::spacing]


@deal.raises(BoundsError, PrecisionError)
def generate_hierarchical_grid(
    bounds: BoundsLike,
    precision_levels: Iterable[int] = (4, 6, 8),
    codec: DigipinCodec | None = None,
) -> dict[int, list[str]]:
    """Generate the base grid at several precisions, keyed by precision."""
    return {precision: generate_grid(bounds, precision, codec) for precision in precision_levels}

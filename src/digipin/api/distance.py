"""
Distance and Bearing

Great-circle measurements between coordinates and between codes. Code
variants measure between cell centers, so their error is at most half a
cell diagonal at each end.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from digipin.api.codec import DigipinCodec, get_codec
from digipin.api.core.constants import EARTH_RADIUS_METERS, METERS_TO_MILES
from digipin.api.core.types import Coordinates


__all__ = [
    "BearingResult",
    "DistanceResult",
    "calculate_bearing",
    "calculate_digipin_bearing",
    "calculate_digipin_distance",
    "calculate_digipin_midpoint",
    "calculate_distance",
    "calculate_midpoint",
    "haversine_km",
]


@dataclass(frozen=True)
class DistanceResult:
    """Great-circle distance in several units, rounded to 2 decimals."""

    meters: float
    kilometers: float
    miles: float


@dataclass(frozen=True)
class BearingResult:
    """Initial and final bearing in degrees (0-360, clockwise from north), rounded to 2 decimals."""

    initial: float
    final: float


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    Great-circle distance between two points, unrounded.

    Args:
        lat1: First latitude in degrees
        lon1: First longitude in degrees
        lat2: Second latitude in degrees
        lon2: Second longitude in degrees

    Returns:
        Distance in kilometers
    """
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    delta_phi = math.radians(lat2 - lat1)
    delta_lambda = math.radians(lon2 - lon1)

    a = math.sin(delta_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(delta_lambda / 2) ** 2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_METERS * c / 1000.0


def calculate_distance(start: Coordinates, end: Coordinates) -> DistanceResult:
    """Haversine distance between two coordinates."""
    meters = haversine_km(start.latitude, start.longitude, end.latitude, end.longitude) * 1000.0
    return DistanceResult(
        meters=round(meters, 2),
        kilometers=round(meters / 1000.0, 2),
        miles=round(meters * METERS_TO_MILES, 2),
    )


def _initial_bearing(start: Coordinates, end: Coordinates) -> float:
    phi1 = math.radians(start.latitude)
    phi2 = math.radians(end.latitude)
    delta_lambda = math.radians(end.longitude - start.longitude)

    y = math.sin(delta_lambda) * math.cos(phi2)
    x = math.cos(phi1) * math.sin(phi2) - math.sin(phi1) * math.cos(phi2) * math.cos(delta_lambda)
    return (math.degrees(math.atan2(y, x)) + 360.0) % 360.0


def calculate_bearing(start: Coordinates, end: Coordinates) -> BearingResult:
    """
    Initial and final bearing from ``start`` to ``end``.

    The final bearing is the reverse of the initial bearing from ``end``
    back to ``start``; on a great circle the two generally differ.
    """
    initial = _initial_bearing(start, end)
    final = (_initial_bearing(end, start) + 180.0) % 360.0
    return BearingResult(initial=round(initial, 2), final=round(final, 2))


def calculate_midpoint(start: Coordinates, end: Coordinates) -> Coordinates:
    """Geographic midpoint along the great circle between two coordinates."""
    phi1 = math.radians(start.latitude)
    lambda1 = math.radians(start.longitude)
    phi2 = math.radians(end.latitude)
    delta_lambda = math.radians(end.longitude - start.longitude)

    bx = math.cos(phi2) * math.cos(delta_lambda)
    by = math.cos(phi2) * math.sin(delta_lambda)
    phi3 = math.atan2(math.sin(phi1) + math.sin(phi2), math.sqrt((math.cos(phi1) + bx) ** 2 + by**2))
    lambda3 = lambda1 + math.atan2(by, math.cos(phi1) + bx)
    return Coordinates(round(math.degrees(phi3), 6), round(math.degrees(lambda3), 6))


def calculate_digipin_distance(start: str, end: str, codec: DigipinCodec | None = None) -> DistanceResult:
    """Distance between the centers of two code cells."""
    codec = get_codec(codec)
    return calculate_distance(codec.decode(start).coordinates, codec.decode(end).coordinates)


def calculate_digipin_bearing(start: str, end: str, codec: DigipinCodec | None = None) -> BearingResult:
    codec = get_codec(codec)
    return calculate_bearing(codec.decode(start).coordinates, codec.decode(end).coordinates)


def calculate_digipin_midpoint(start: str, end: str, codec: DigipinCodec | None = None) -> Coordinates:
    codec = get_codec(codec)
    return calculate_midpoint(codec.decode(start).coordinates, codec.decode(end).coordinates)

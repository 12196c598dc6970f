"""
Grid and Geodesy Constants

Constants shared by the codec, the hierarchy navigator and the grid
enumerator. The alphabet and root bounds here are the national grid; they
must not change once codes have been issued.
"""

from typing import Final


__all__ = [
    "DEFAULT_PRECISION",
    "DIGIPIN_ALPHABET",
    "DIGIPIN_FORMATTED_LENGTH",
    "DIGIPIN_LENGTH",
    "DIGIPIN_SEPARATOR",
    "EARTH_RADIUS_KM",
    "EARTH_RADIUS_METERS",
    "GRID_SIZE",
    "GRID_SIZES_METERS",
    "INDIA_BOUNDS",
    "KM_TO_MILES",
    "MAX_LEVEL",
    "METERS_PER_DEGREE",
    "METERS_TO_MILES",
    "MIN_LEVEL",
    "SEPARATOR_POSITIONS",
]


DIGIPIN_ALPHABET: Final[tuple[tuple[str, ...], ...]] = (
    ("F", "C", "9", "8"),
    ("J", "3", "2", "7"),
    ("K", "4", "5", "6"),
    ("L", "M", "P", "T"),
)
"""Symbol matrix. Row 0 is the northernmost latitude band, column 0 the westernmost."""

INDIA_BOUNDS: Final[tuple[float, float, float, float]] = (2.5, 38.5, 63.5, 99.5)
"""Root rectangle as (south, north, west, east) in decimal degrees."""

GRID_SIZE: Final[int] = 4
"""Subdivisions per axis at every level."""

MIN_LEVEL: Final[int] = 1
MAX_LEVEL: Final[int] = 10
"""Deepest precision level (number of symbols in a full code)."""

DEFAULT_PRECISION: Final[int] = 10

DIGIPIN_LENGTH: Final[int] = 10
"""Symbols in a full-precision code."""

DIGIPIN_FORMATTED_LENGTH: Final[int] = 12
"""Characters in a full-precision code with separators (XXX-XXX-XXXX)."""

DIGIPIN_SEPARATOR: Final[str] = "-"

SEPARATOR_POSITIONS: Final[tuple[int, ...]] = (3, 6)
"""Symbol counts after which a separator is written in a full-precision code."""

# Geodesy
METERS_PER_DEGREE: Final[float] = 111000.0
"""Approximate meters per degree of latitude (and of longitude at the equator)."""

EARTH_RADIUS_METERS: Final[float] = 6371000.0
EARTH_RADIUS_KM: Final[float] = 6371.0

METERS_TO_MILES: Final[float] = 0.000621371
KM_TO_MILES: Final[float] = 0.621371

GRID_SIZES_METERS: Final[tuple[float, ...]] = (
    1000000,  # Level 1: ~1000 km
    250000,  # Level 2: ~250 km
    62500,  # Level 3: ~62.5 km
    15625,  # Level 4: ~15.6 km
    3906,  # Level 5: ~3.9 km
    977,  # Level 6: ~977 m
    244,  # Level 7: ~244 m
    61,  # Level 8: ~61 m
    15,  # Level 9: ~15 m
    3.8,  # Level 10: ~3.8 m
)
"""Nominal cell edge per level, rounded. Used for display and sanity checks only."""

"""
Type definitions for the DIGIPIN grid toolkit.

Immutable value types shared by the codec, the hierarchy navigator and the
grid enumerator, plus the GridSpec configuration object that carries the
alphabet and root bounds.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from digipin.api.core.constants import (
    DIGIPIN_ALPHABET,
    DIGIPIN_SEPARATOR,
    GRID_SIZE,
    INDIA_BOUNDS,
    MAX_LEVEL,
    SEPARATOR_POSITIONS,
)


__all__ = [
    "DEFAULT_GRID_SPEC",
    "Accuracy",
    "Coordinates",
    "DecodedDigipin",
    "GridBounds",
    "GridCell",
    "GridSpec",
    "ValidationResult",
]


@dataclass(frozen=True)
class Coordinates:
    """
    Geographic coordinate in decimal degrees.

    Attributes:
        latitude: Latitude in degrees (positive=North)
        longitude: Longitude in degrees (positive=East)
    """

    latitude: float
    longitude: float

    def __str__(self) -> str:
        lat_dir = "N" if self.latitude >= 0 else "S"
        lon_dir = "E" if self.longitude >= 0 else "W"
        return f"{abs(self.latitude):.6f}°{lat_dir}, {abs(self.longitude):.6f}°{lon_dir}"

    def to_dict(self) -> dict[str, float]:
        return {"latitude": self.latitude, "longitude": self.longitude}


@dataclass(frozen=True)
class GridBounds:
    """
    Axis-aligned rectangle in decimal degrees.

    Attributes:
        south: Minimum latitude
        north: Maximum latitude
        west: Minimum longitude
        east: Maximum longitude
    """

    south: float
    north: float
    west: float
    east: float

    @property
    def lat_extent(self) -> float:
        return self.north - self.south

    @property
    def lon_extent(self) -> float:
        return self.east - self.west

    @property
    def center(self) -> Coordinates:
        return Coordinates((self.south + self.north) / 2, (self.west + self.east) / 2)

    @property
    def is_valid(self) -> bool:
        return self.south < self.north and self.west < self.east

    def contains(self, latitude: float, longitude: float) -> bool:
        """Closed containment test (edges count as inside)."""
        return self.south <= latitude <= self.north and self.west <= longitude <= self.east

    def contains_bounds(self, other: GridBounds) -> bool:
        return (
            self.south <= other.south
            and other.north <= self.north
            and self.west <= other.west
            and other.east <= self.east
        )

    def intersects(self, other: GridBounds) -> bool:
        return not (
            other.north < self.south or other.south > self.north or other.east < self.west or other.west > self.east
        )

    def to_dict(self) -> dict[str, float]:
        return {"north": self.north, "south": self.south, "east": self.east, "west": self.west}

    def __str__(self) -> str:
        return f"N {self.north:.6f}, S {self.south:.6f}, E {self.east:.6f}, W {self.west:.6f}"


@dataclass(frozen=True)
class GridSpec:
    """
    Alphabet and root rectangle that define one hierarchical grid.

    The alphabet is a 4x4 matrix of distinct single-character symbols.
    Row 0 maps to the northernmost band of a cell and column 0 to the
    westernmost. Changing either field produces an incompatible grid, so
    specs are immutable and injected rather than mutated.

    Attributes:
        alphabet: 4 rows of 4 symbols
        root: Rectangle subdivided by the first symbol
        max_level: Deepest precision level
        separator: Character used to group full-precision codes
    """

    alphabet: tuple[tuple[str, ...], ...] = DIGIPIN_ALPHABET
    root: GridBounds = field(default_factory=lambda: GridBounds(*INDIA_BOUNDS))
    max_level: int = MAX_LEVEL
    separator: str = DIGIPIN_SEPARATOR
    separator_positions: tuple[int, ...] = SEPARATOR_POSITIONS
    _positions: dict[str, tuple[int, int]] = field(init=False, repr=False, compare=False)
    _symbols: tuple[str, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if len(self.alphabet) != GRID_SIZE or any(len(row) != GRID_SIZE for row in self.alphabet):
            raise ValueError(f"Alphabet must be a {GRID_SIZE}x{GRID_SIZE} matrix")
        symbols = tuple(symbol for row in self.alphabet for symbol in row)
        if any(len(symbol) != 1 for symbol in symbols):
            raise ValueError("Alphabet symbols must be single characters")
        if len({symbol.upper() for symbol in symbols}) != len(symbols):
            raise ValueError("Alphabet symbols must be distinct")
        if self.separator in symbols:
            raise ValueError(f"Separator {self.separator!r} collides with an alphabet symbol")
        if not self.root.is_valid:
            raise ValueError(f"Root bounds are empty or inverted: {self.root}")
        if self.max_level < 1:
            raise ValueError("max_level must be at least 1")

        positions = {symbol.upper(): divmod(index, GRID_SIZE) for index, symbol in enumerate(symbols)}
        object.__setattr__(self, "_symbols", tuple(symbol.upper() for symbol in symbols))
        object.__setattr__(self, "_positions", positions)

    @property
    def symbols(self) -> tuple[str, ...]:
        """All symbols in row-major order (index = row * 4 + col)."""
        return self._symbols

    def position(self, symbol: str) -> tuple[int, int] | None:
        """Return (row, col) of an upper-case symbol, or None if unknown."""
        return self._positions.get(symbol)

    def cell_extent(self, level: int) -> tuple[float, float]:
        """Return (lat_extent, lon_extent) of a cell at the given level."""
        divisor = GRID_SIZE**level
        return self.root.lat_extent / divisor, self.root.lon_extent / divisor


DEFAULT_GRID_SPEC = GridSpec()
"""The national grid every issued code refers to."""


@dataclass(frozen=True)
class Accuracy:
    """
    Real-world size of a decoded cell.

    Attributes:
        lat_degrees: Cell height in degrees
        lon_degrees: Cell width in degrees
        approximate_meters: Larger of the two extents converted to meters
    """

    lat_degrees: float
    lon_degrees: float
    approximate_meters: float

    def to_dict(self) -> dict[str, float]:
        return {
            "latDegrees": self.lat_degrees,
            "lonDegrees": self.lon_degrees,
            "approximateMeters": self.approximate_meters,
        }


@dataclass(frozen=True)
class DecodedDigipin:
    """Result of decoding a code: cell center, precision, bounds and accuracy."""

    latitude: float
    longitude: float
    precision: int
    bounds: GridBounds
    accuracy: Accuracy

    @property
    def coordinates(self) -> Coordinates:
        return Coordinates(self.latitude, self.longitude)

    def to_dict(self) -> dict[str, Any]:
        return {
            "latitude": self.latitude,
            "longitude": self.longitude,
            "precision": self.precision,
            "bounds": self.bounds.to_dict(),
            "accuracy": self.accuracy.to_dict(),
        }


@dataclass(frozen=True)
class GridCell:
    """A code together with the rectangle it denotes."""

    digipin: str
    bounds: GridBounds
    center: Coordinates
    level: int


@dataclass(frozen=True)
class ValidationResult:
    """
    Outcome of a non-raising code validation.

    Attributes:
        is_valid: True when the code decodes
        errors: Problems that make the code undecodable
        warnings: Problems that decode fine but are not canonical
        precision: Symbol count after stripping separators
    """

    is_valid: bool
    errors: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()
    precision: int = 0

"""
DIGIPIN Codec

Encodes a coordinate inside the root rectangle into a hierarchical code and
decodes a code back to its cell. Every symbol picks one of 16 sub-cells
(4 latitude bands x 4 longitude columns) of the current cell, so a code of
length n denotes a cell 4**n times smaller than the root along each axis.

Boundary convention: within a cell, each latitude band is half-open
``[south, north)`` and each longitude column ``[west, east)``. The
northernmost band and the easternmost column of the root are closed on both
ends. A point on an interior edge belongs to the cell north or east of it.
Encode and decode share the same narrowing arithmetic, so the bounds
returned by decode are bit-identical to the rectangle encode narrowed to.

Canonical wire format: a full-precision (10 symbol) code is grouped 3/3/4
with "-" (``39J-438-TJC7``); shorter codes are never grouped. Decode accepts
any separator placement and any case.

Example:
    >>> encode(28.6139, 77.2090)
    '39J-438-TJC7'
    >>> decode("39J-438-TJC7").bounds.contains(28.6139, 77.2090)
    True
"""

from __future__ import annotations

import math
import numbers

import deal

from digipin.api.core.constants import DEFAULT_PRECISION, GRID_SIZE, METERS_PER_DEGREE
from digipin.api.core.exceptions import BoundsError, CoordinatesError, FormatError, PrecisionError
from digipin.api.core.types import (
    DEFAULT_GRID_SPEC,
    Accuracy,
    Coordinates,
    DecodedDigipin,
    GridBounds,
    GridCell,
    GridSpec,
    ValidationResult,
)


__all__ = [
    "DigipinCodec",
    "decode",
    "encode",
    "format_digipin",
    "get_bounds",
    "get_codec",
    "get_grid_cell",
    "sanitize_digipin",
    "validate_coordinates",
    "validate_digipin",
    "validate_precision",
]


def _narrow(bounds: GridBounds, row: int, col: int) -> GridBounds:
    """Return the sub-cell of ``bounds`` at (row, col), row 0 being the northernmost band."""
    lat_div = (bounds.north - bounds.south) / GRID_SIZE
    lon_div = (bounds.east - bounds.west) / GRID_SIZE
    west = bounds.west + lon_div * col
    return GridBounds(
        south=bounds.south + lat_div * (GRID_SIZE - 1 - row),
        north=bounds.south + lat_div * (GRID_SIZE - row),
        west=west,
        east=west + lon_div,
    )


class DigipinCodec:
    """
    Encoder/decoder bound to one GridSpec.

    The codec holds no mutable state; a single instance can be shared
    between threads. Codes are handled internally as tuples of symbol
    indices (``row * 4 + col``) and only rendered to symbols at the edges.

    Example:
        >>> codec = DigipinCodec()
        >>> codec.encode(12.9716, 77.5946, 6)
        '4P3JK8'
    """

    def __init__(self, spec: GridSpec = DEFAULT_GRID_SPEC) -> None:
        self.spec = spec

    def __repr__(self) -> str:
        return f"DigipinCodec(root={self.spec.root}, max_level={self.spec.max_level})"

    # ------------------------------------------------------------------
    # Input validation
    # ------------------------------------------------------------------

    @deal.raises(CoordinatesError, BoundsError)
    def validate_coordinates(self, latitude: float, longitude: float) -> Coordinates:
        """
        Check that a coordinate is a pair of finite numbers inside the root bounds.

        Raises:
            CoordinatesError: If either value is not a finite real number
            BoundsError: If the point lies outside the root rectangle
        """
        for name, value in (("latitude", latitude), ("longitude", longitude)):
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise CoordinatesError(
                    f"{name.capitalize()} must be a number, got {type(value).__name__}",
                    {name: value},
                )
            if not math.isfinite(value):
                raise CoordinatesError(f"{name.capitalize()} must be finite, got {value}", {name: value})

        root = self.spec.root
        if not root.south <= latitude <= root.north:
            raise BoundsError(
                f"Latitude {latitude} is outside grid bounds ({root.south} to {root.north})",
                {"latitude": latitude, "bounds": root.to_dict()},
            )
        if not root.west <= longitude <= root.east:
            raise BoundsError(
                f"Longitude {longitude} is outside grid bounds ({root.west} to {root.east})",
                {"longitude": longitude, "bounds": root.to_dict()},
            )
        return Coordinates(float(latitude), float(longitude))

    @deal.raises(PrecisionError)
    def validate_precision(self, precision: int) -> int:
        """Return ``precision`` if it is an integer in 1..max_level, else raise PrecisionError."""
        if isinstance(precision, bool) or not isinstance(precision, numbers.Integral):
            raise PrecisionError(
                f"Precision must be an integer, got {type(precision).__name__}", {"precision": precision}
            )
        if not 1 <= precision <= self.spec.max_level:
            raise PrecisionError(
                f"Precision must be between 1 and {self.spec.max_level}, got {precision}",
                {"precision": precision},
            )
        return int(precision)

    @deal.raises(FormatError)
    def sanitize(self, digipin: str) -> str:
        """
        Strip separators and whitespace, upper-case, and check length and symbols.

        Returns:
            The bare code (no separators)

        Raises:
            FormatError: If the code is empty, too long, or has unknown symbols
        """
        return self.render(self.to_indices(digipin), grouped=False)

    @deal.raises(FormatError)
    def to_indices(self, digipin: str) -> tuple[int, ...]:
        """Parse a code (any case, any separator placement) into symbol indices."""
        if not isinstance(digipin, str):
            raise FormatError(f"DIGIPIN must be a string, got {type(digipin).__name__}", {"input": digipin})

        clean = digipin.strip().upper().replace(self.spec.separator, "")
        if not clean:
            raise FormatError("DIGIPIN cannot be empty", {"input": digipin})
        if len(clean) > self.spec.max_level:
            raise FormatError(
                f"Invalid DIGIPIN length: {len(clean)}. Must be 1-{self.spec.max_level} characters",
                {"input": digipin, "length": len(clean)},
            )

        indices = []
        for position, symbol in enumerate(clean, start=1):
            cell = self.spec.position(symbol)
            if cell is None:
                raise FormatError(
                    f"Invalid character '{symbol}' at position {position}",
                    {"character": symbol, "position": position, "input": digipin},
                )
            row, col = cell
            indices.append(row * GRID_SIZE + col)
        return tuple(indices)

    def render(self, indices: tuple[int, ...] | list[int], grouped: bool = True) -> str:
        """Render symbol indices, grouping only full-precision codes."""
        symbols = self.spec.symbols
        code = "".join(symbols[index] for index in indices)
        if grouped and len(code) == self.spec.max_level:
            return self._group(code)
        return code

    def _group(self, code: str) -> str:
        parts = []
        start = 0
        for stop in self.spec.separator_positions:
            parts.append(code[start:stop])
            start = stop
        parts.append(code[start:])
        return self.spec.separator.join(part for part in parts if part)

    @deal.raises(FormatError)
    def format(self, digipin: str) -> str:
        """Return the canonical rendering of a code (grouped only at full precision)."""
        return self.render(self.to_indices(digipin))

    # ------------------------------------------------------------------
    # Encode / decode
    # ------------------------------------------------------------------

    def locate(self, latitude: float, longitude: float, precision: int) -> tuple[int, ...]:
        """
        Compute symbol indices for an already validated coordinate.

        The clamp into 0..3 only resolves floating-point ties on the root
        edges; out-of-range input is rejected before reaching here.
        """
        bounds = self.spec.root
        last = GRID_SIZE - 1
        indices = []
        for _ in range(precision):
            lat_div = (bounds.north - bounds.south) / GRID_SIZE
            lon_div = (bounds.east - bounds.west) / GRID_SIZE
            row = max(0, min(last, last - math.floor((latitude - bounds.south) / lat_div)))
            col = max(0, min(last, math.floor((longitude - bounds.west) / lon_div)))
            indices.append(row * GRID_SIZE + col)
            bounds = _narrow(bounds, row, col)
        return tuple(indices)

    def bounds_of(self, indices: tuple[int, ...] | list[int]) -> GridBounds:
        """Narrow the root rectangle by each symbol index in turn."""
        bounds = self.spec.root
        for index in indices:
            row, col = divmod(index, GRID_SIZE)
            bounds = _narrow(bounds, row, col)
        return bounds

    @deal.raises(CoordinatesError, BoundsError, PrecisionError)
    def encode(
        self,
        latitude: float,
        longitude: float,
        precision: int = DEFAULT_PRECISION,
        grouped: bool = True,
    ) -> str:
        """
        Encode a coordinate into a code.

        Args:
            latitude: Latitude in decimal degrees
            longitude: Longitude in decimal degrees
            precision: Number of symbols (1-10, default: 10)
                      - 1: ~1000 km cells
                      - 6: ~1 km cells
                      - 10: ~3.8 m cells
            grouped: Group a full-precision code as XXX-XXX-XXXX (default: True)

        Returns:
            Code string

        Raises:
            CoordinatesError: If latitude or longitude is not a finite number
            BoundsError: If the coordinate is outside the root bounds
            PrecisionError: If precision is outside 1-10
        """
        precision = self.validate_precision(precision)
        coords = self.validate_coordinates(latitude, longitude)
        return self.render(self.locate(coords.latitude, coords.longitude, precision), grouped=grouped)

    @deal.raises(FormatError)
    def decode(self, digipin: str) -> DecodedDigipin:
        """
        Decode a code into its cell center, bounds and accuracy.

        Args:
            digipin: Code string, separators optional, case-insensitive

        Returns:
            DecodedDigipin with the cell center as latitude/longitude

        Raises:
            FormatError: If the code is empty, too long, or has unknown symbols
        """
        indices = self.to_indices(digipin)
        bounds = self.bounds_of(indices)
        center = bounds.center
        return DecodedDigipin(
            latitude=center.latitude,
            longitude=center.longitude,
            precision=len(indices),
            bounds=bounds,
            accuracy=self._accuracy(bounds, center.latitude),
        )

    @staticmethod
    def _accuracy(bounds: GridBounds, center_latitude: float) -> Accuracy:
        lat_degrees = bounds.lat_extent
        lon_degrees = bounds.lon_extent
        approximate_meters = max(
            lat_degrees * METERS_PER_DEGREE,
            lon_degrees * METERS_PER_DEGREE * math.cos(math.radians(center_latitude)),
        )
        return Accuracy(lat_degrees=lat_degrees, lon_degrees=lon_degrees, approximate_meters=approximate_meters)

    @deal.raises(FormatError)
    def get_bounds(self, digipin: str) -> GridBounds:
        """Return the rectangle a code denotes."""
        return self.bounds_of(self.to_indices(digipin))

    @deal.raises(FormatError)
    def get_grid_cell(self, digipin: str) -> GridCell:
        """Return the canonical code, bounds, center and level of a code."""
        indices = self.to_indices(digipin)
        bounds = self.bounds_of(indices)
        return GridCell(digipin=self.render(indices), bounds=bounds, center=bounds.center, level=len(indices))

    def validate(self, digipin: object, require_full_precision: bool = False) -> ValidationResult:
        """
        Validate a code without raising.

        Collects every problem rather than stopping at the first one, so a
        caller can show them all at once.

        Args:
            digipin: Candidate code
            require_full_precision: Reject codes shorter than 10 symbols

        Returns:
            ValidationResult with errors and warnings
        """
        if not isinstance(digipin, str):
            return ValidationResult(False, errors=("DIGIPIN must be a string",))

        trimmed = digipin.strip().upper()
        clean = trimmed.replace(self.spec.separator, "")
        errors: list[str] = []
        warnings: list[str] = []

        if not clean:
            return ValidationResult(False, errors=("DIGIPIN cannot be empty",))
        if len(clean) > self.spec.max_level:
            errors.append(f"DIGIPIN too long: {len(clean)} characters (maximum {self.spec.max_level})")
        if require_full_precision and len(clean) != self.spec.max_level:
            errors.append(f"Full precision required: expected {self.spec.max_level} characters, got {len(clean)}")

        for position, symbol in enumerate(clean, start=1):
            if self.spec.position(symbol) is None:
                errors.append(f"Invalid character '{symbol}' at position {position}")

        if not errors and self.spec.separator in trimmed:
            canonical = self.render(self.to_indices(clean))
            if trimmed != canonical:
                warnings.append(f"Non-canonical grouping, expected {canonical}")

        return ValidationResult(
            is_valid=not errors,
            errors=tuple(errors),
            warnings=tuple(warnings),
            precision=len(clean),
        )


_default_codec = DigipinCodec()


def get_codec(codec: DigipinCodec | None = None) -> DigipinCodec:
    """Return ``codec`` or the shared codec for the national grid."""
    return codec if codec is not None else _default_codec


def encode(
    latitude: float,
    longitude: float,
    precision: int = DEFAULT_PRECISION,
    grouped: bool = True,
) -> str:
    """
    Encode latitude and longitude into a code on the national grid.

    Example:
        >>> encode(19.0760, 72.8777)
        '4FK-595-8823'
        >>> encode(19.0760, 72.8777, 4)
        '4FK5'
    """
    return _default_codec.encode(latitude, longitude, precision, grouped=grouped)


def decode(digipin: str) -> DecodedDigipin:
    """
    Decode a code on the national grid.

    Example:
        >>> result = decode("4P3-JK8-52C9")
        >>> round(result.latitude, 4), round(result.longitude, 4)
        (12.9716, 77.5946)
    """
    return _default_codec.decode(digipin)


def get_bounds(digipin: str) -> GridBounds:
    return _default_codec.get_bounds(digipin)


def get_grid_cell(digipin: str) -> GridCell:
    return _default_codec.get_grid_cell(digipin)


def sanitize_digipin(digipin: str) -> str:
    """Return the bare upper-case code without separators."""
    return _default_codec.sanitize(digipin)


def format_digipin(digipin: str) -> str:
    """Return the canonical form (XXX-XXX-XXXX for full precision, bare otherwise)."""
    return _default_codec.format(digipin)


def validate_digipin(digipin: object, require_full_precision: bool = False) -> ValidationResult:
    return _default_codec.validate(digipin, require_full_precision=require_full_precision)


def validate_coordinates(latitude: float, longitude: float) -> Coordinates:
    return _default_codec.validate_coordinates(latitude, longitude)


def validate_precision(precision: int) -> int:
    return _default_codec.validate_precision(precision)

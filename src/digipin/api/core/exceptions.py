"""
Custom exception classes for the DIGIPIN grid toolkit.

Every error raised by the codec, the hierarchy navigator, the grid
enumerator and the batch layer derives from DigipinError, so callers can
catch a single base class and map it to an exit code or HTTP status.
"""

from __future__ import annotations

from typing import Any


__all__ = [
    "BatchError",
    "BoundsError",
    "CoordinatesError",
    # Base exception
    "DigipinError",
    "FormatError",
    "PrecisionError",
]


class DigipinError(Exception):
    """
    Base exception for all DIGIPIN errors.

    Carries an optional ``details`` mapping describing the offending input
    (coordinate, position of a bad symbol, requested level, ...).
    """

    code = "DIGIPIN_ERROR"

    def __init__(self, message: str = "", details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.details: dict[str, Any] = dict(details or {})


class CoordinatesError(DigipinError):
    """
    Raised when latitude or longitude is not a finite number.

    This occurs for:
    - Non-numeric values (strings, None, booleans)
    - NaN or infinite values
    """

    code = "COORDINATES_ERROR"


class BoundsError(DigipinError):
    """
    Raised when a coordinate or rectangle falls outside the grid.

    This occurs when:
    - A coordinate lies outside the root bounds
    - A requested rectangle is empty or inverted (south >= north, west >= east)
    """

    code = "BOUNDS_ERROR"


class PrecisionError(DigipinError):
    """
    Raised when a precision level is out of range.

    This occurs when:
    - The requested precision is not an integer in 1-10
    - The parent of a single-symbol code is requested
    - The children of a full-precision code are requested
    """

    code = "PRECISION_ERROR"


class FormatError(DigipinError):
    """Raised when a code has an invalid length or contains a symbol outside the alphabet."""

    code = "FORMAT_ERROR"


class BatchError(DigipinError):
    """Raised when a batch run with the "stop" error strategy hits a failing item."""

    code = "BATCH_ERROR"

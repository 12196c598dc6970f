"""Core subpackage for constants, value types, and exceptions."""

from digipin.api.core.exceptions import (
    BatchError,
    BoundsError,
    CoordinatesError,
    DigipinError,
    FormatError,
    PrecisionError,
)
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
    "DEFAULT_GRID_SPEC",
    "Accuracy",
    "BatchError",
    "BoundsError",
    "Coordinates",
    "CoordinatesError",
    "DecodedDigipin",
    "DigipinError",
    "FormatError",
    "GridBounds",
    "GridCell",
    "GridSpec",
    "PrecisionError",
    "ValidationResult",
]

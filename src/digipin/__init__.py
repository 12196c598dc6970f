"""
DIGIPIN Grid Toolkit

Hierarchical geocoding for a fixed national bounding box. A coordinate is
encoded into a code of up to 10 symbols; each symbol narrows the cell by 4
in latitude and in longitude, so every prefix of a code is the code of a
larger cell containing it.

Example:
    >>> from digipin import decode, encode, get_children
    >>> encode(28.6139, 77.2090)
    '39J-438-TJC7'
    >>> decode("39J-438-TJC7").precision
    10
    >>> len(get_children("39J"))
    16
"""

from digipin.api.batch import BatchResult, batch_decode, batch_encode, batch_validate
from digipin.api.codec import (
    DigipinCodec,
    decode,
    encode,
    format_digipin,
    get_bounds,
    get_grid_cell,
    sanitize_digipin,
    validate_digipin,
)
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
from digipin.api.distance import (
    calculate_bearing,
    calculate_digipin_bearing,
    calculate_digipin_distance,
    calculate_distance,
    calculate_midpoint,
)
from digipin.api.grid import (
    generate_circular_grid,
    generate_grid,
    generate_hierarchical_grid,
    generate_line_grid,
    generate_polygon_grid,
    generate_sparse_grid,
    generate_systematic_grid,
)
from digipin.api.hierarchy import (
    are_neighbors,
    get_children,
    get_neighbors,
    get_neighbors_in_radius,
    get_parent,
    get_siblings,
    get_symbolic_neighbors,
)


__version__ = "0.1.0"

__all__ = [
    "DEFAULT_GRID_SPEC",
    "Accuracy",
    "BatchError",
    "BatchResult",
    "BoundsError",
    "Coordinates",
    "CoordinatesError",
    "DecodedDigipin",
    "DigipinCodec",
    "DigipinError",
    "FormatError",
    "GridBounds",
    "GridCell",
    "GridSpec",
    "PrecisionError",
    "ValidationResult",
    "are_neighbors",
    "batch_decode",
    "batch_encode",
    "batch_validate",
    "calculate_bearing",
    "calculate_digipin_bearing",
    "calculate_digipin_distance",
    "calculate_distance",
    "calculate_midpoint",
    "decode",
    "encode",
    "format_digipin",
    "generate_circular_grid",
    "generate_grid",
    "generate_hierarchical_grid",
    "generate_line_grid",
    "generate_polygon_grid",
    "generate_sparse_grid",
    "generate_systematic_grid",
    "get_bounds",
    "get_children",
    "get_grid_cell",
    "get_neighbors",
    "get_neighbors_in_radius",
    "get_parent",
    "get_siblings",
    "get_symbolic_neighbors",
    "sanitize_digipin",
    "validate_digipin",
]

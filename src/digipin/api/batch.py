"""
Batch Processing

Runs encode/decode/validate over many inputs on a bounded thread pool. Each
item produces a ``returns`` Result so one bad input never hides the others;
with the "stop" strategy the first failure aborts the run instead.

The codec is pure, so items are independent and results keep input order
regardless of completion order.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any, Generic, Literal, TypeVar

from returns.pipeline import is_successful
from returns.result import Failure, Result, Success

from digipin.api.codec import DigipinCodec, get_codec
from digipin.api.core.constants import DEFAULT_PRECISION
from digipin.api.core.exceptions import BatchError, CoordinatesError, DigipinError
from digipin.api.core.types import Coordinates, DecodedDigipin, ValidationResult


logger = logging.getLogger(__name__)

__all__ = [
    "DEFAULT_CONCURRENCY",
    "BatchItemError",
    "BatchResult",
    "BatchStats",
    "ErrorStrategy",
    "batch_decode",
    "batch_encode",
    "batch_validate",
    "process_batch",
]


DEFAULT_CONCURRENCY = 10

ErrorStrategy = Literal["continue", "stop"]
ProgressCallback = Callable[[int, int], None]

T = TypeVar("T")
R = TypeVar("R")


@dataclass(frozen=True)
class BatchItemError(Generic[T]):
    """A failed item: its position, the input and the error it raised."""

    index: int
    input: T
    error: DigipinError


@dataclass(frozen=True)
class BatchStats:
    total: int
    successful: int
    failed: int
    duration: float  # seconds


@dataclass
class BatchResult(Generic[T, R]):
    """
    Outcome of a batch run.

    Attributes:
        results: One Result per input, in input order
        errors: Failed items with their index and input
        stats: Counts and wall-clock duration
    """

    results: list[Result[R, DigipinError]] = field(default_factory=list)
    errors: list[BatchItemError[T]] = field(default_factory=list)
    stats: BatchStats = field(default_factory=lambda: BatchStats(0, 0, 0, 0.0))

    @property
    def values(self) -> list[R]:
        """Successful values only, in input order."""
        return [result.unwrap() for result in self.results if is_successful(result)]


def process_batch(
    items: Sequence[T],
    processor: Callable[[T], R],
    concurrency: int = DEFAULT_CONCURRENCY,
    error_strategy: ErrorStrategy = "continue",
    on_progress: ProgressCallback | None = None,
) -> BatchResult[T, R]:
    """
    Apply ``processor`` to every item with at most ``concurrency`` running at once.

    Args:
        items: Inputs
        processor: Function raising DigipinError on bad input
        concurrency: Worker threads (default: 10)
        error_strategy: "continue" to collect failures, "stop" to raise on the first
        on_progress: Called with (processed, total) after each item

    Returns:
        BatchResult with per-item Results in input order

    Raises:
        BatchError: With "stop", at the first failing index
        ValueError: If concurrency is less than 1
    """
    if concurrency < 1:
        raise ValueError(f"Concurrency must be at least 1, got {concurrency}")

    def run(item: T) -> Result[R, DigipinError]:
        try:
            return Success(processor(item))
        except DigipinError as e:
            return Failure(e)

    start = time.perf_counter()
    total = len(items)
    results: list[Result[R, DigipinError]] = []
    errors: list[BatchItemError[T]] = []

    with ThreadPoolExecutor(max_workers=concurrency) as executor:
        for index, result in enumerate(executor.map(run, items)):
            if not is_successful(result):
                error = result.failure()
                errors.append(BatchItemError(index=index, input=items[index], error=error))
                if error_strategy == "stop":
                    raise BatchError(
                        f"Processing stopped at index {index}: {error}",
                        {"index": index, "error": str(error), "processed": index, "total": total},
                    ) from error
            results.append(result)
            if on_progress is not None:
                on_progress(index + 1, total)

    stats = BatchStats(
        total=total,
        successful=total - len(errors),
        failed=len(errors),
        duration=time.perf_counter() - start,
    )
    logger.debug(f"Batch finished: {stats.successful}/{stats.total} succeeded in {stats.duration:.3f}s")
    return BatchResult(results=results, errors=errors, stats=stats)


def batch_encode(
    coordinates: Sequence[Coordinates | tuple[float, float]],
    precision: int = DEFAULT_PRECISION,
    grouped: bool = True,
    codec: DigipinCodec | None = None,
    **options: Any,
) -> BatchResult[Coordinates | tuple[float, float], str]:
    """
    Encode many coordinates.

    Extra keyword arguments (concurrency, error_strategy, on_progress) are
    passed to process_batch.

    Example:
        >>> result = batch_encode([(28.6139, 77.2090), (91.0, 77.0)])
        >>> result.stats.successful, result.stats.failed
        (1, 1)
    """
    codec = get_codec(codec)

    def encode_one(item: Coordinates | tuple[float, float]) -> str:
        if isinstance(item, Coordinates):
            latitude, longitude = item.latitude, item.longitude
        else:
            try:
                latitude, longitude = item
            except (TypeError, ValueError) as e:
                raise CoordinatesError(
                    f"Expected a (latitude, longitude) pair, got {item!r}", {"input": item}
                ) from e
        return codec.encode(latitude, longitude, precision, grouped=grouped)

    return process_batch(coordinates, encode_one, **options)


def batch_decode(
    digipins: Sequence[str],
    codec: DigipinCodec | None = None,
    **options: Any,
) -> BatchResult[str, DecodedDigipin]:
    """Decode many codes."""
    codec = get_codec(codec)
    return process_batch(digipins, codec.decode, **options)


def batch_validate(
    digipins: Sequence[str],
    require_full_precision: bool = False,
    codec: DigipinCodec | None = None,
    **options: Any,
) -> BatchResult[str, ValidationResult]:
    """Validate many codes. Validation never raises, so every item is a Success."""
    codec = get_codec(codec)
    return process_batch(
        digipins,
        lambda digipin: codec.validate(digipin, require_full_precision=require_full_precision),
        **options,
    )

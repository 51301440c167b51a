"""Type-agnostic windowing of anything indexable, by length alone."""

import logging
from typing import Iterator

from core.idx_range import IdxRange

LOGGER = logging.getLogger(__name__)


def _check_step(step: int) -> None:
    if step <= 0:
        raise ValueError(f"step must be positive when size is positive, got {step}")


def _num_full_windows(length: int, size: int, step: int) -> int:
    # Full windows emitted before the remainder check. A window that ends
    # exactly at `length` is left to the remainder, which yields the same range.
    if length <= size:
        return 0
    return (length - size + step - 1) // step


def _generate(length: int, size: int, step: int) -> Iterator[IdxRange]:
    num_full = _num_full_windows(length, size, step)
    LOGGER.debug(
        "Windowing length=%d size=%d step=%d (%d full windows)",
        length,
        size,
        step,
        num_full,
    )

    start = 0
    for _ in range(num_full):
        yield IdxRange(start, start + size)
        start += step

    if start < length:  # left over
        yield IdxRange(start, length)


def produce_ranges(length: int, size: int, step: int) -> Iterator[IdxRange]:
    """
    Lazily yield increasing index ranges of width `size`, `step` apart.

    Depending on `step`, ranges overlap (`step < size`), leave gaps
    (`step > size`) or tile the collection exactly (`step == size`). The final
    range may be narrower than `size`; a remainder starting at or past
    `length` is dropped.

    For example, length 8, size 3 and step 2 yields:
    {0, 3}, {2, 5}, {4, 7}, {6, 8}

    Nothing is yielded if `size` is non-positive or `length` is non-positive.
    If `size` exceeds `length` the single range covers the whole collection.

    Raises:
        ValueError: if `size` is positive and `step` is not. Raised at call
            time, before any iteration.
    """
    if size <= 0:
        return iter(())
    _check_step(step)
    return _generate(length, size, step)


def partition(length: int, size: int) -> Iterator[IdxRange]:
    """
    Lazily yield consecutive, non-overlapping ranges of width `size`.

    For example, length 8 and size 3 yields: {0, 3}, {3, 6}, {6, 8}
    """
    return produce_ranges(length, size, size)


def window_count(length: int, size: int, step: int) -> int:
    """Number of ranges `produce_ranges` yields, without iterating."""
    if size <= 0:
        return 0
    _check_step(step)
    if length <= 0:
        return 0

    num_full = _num_full_windows(length, size, step)
    return num_full + (1 if num_full * step < length else 0)

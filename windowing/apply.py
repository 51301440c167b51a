"""Apply index ranges to concrete sequences and numpy arrays."""

from typing import Any, Iterator, List, Optional, Sequence, Tuple

import numpy as np

from core.idx_range import IdxRange
from windowing.ranges import produce_ranges


def iter_windows(
    items: Sequence[Any],
    size: int,
    step: Optional[int] = None,
) -> Iterator[Tuple[IdxRange, Any]]:
    """
    Yield (range, window) pairs over anything supporting len() and slicing.

    `step` defaults to `size`. Windows of a numpy array are views into it.
    """
    step = size if step is None else step
    for rng in produce_ranges(len(items), size, step):
        yield rng, items[rng.as_slice()]


def split(items: Sequence[Any], size: int, step: Optional[int] = None) -> List[Any]:
    """Return the windows of `items` as a list."""
    return [window for _, window in iter_windows(items, size, step)]


def stack_full_windows(array: np.ndarray, size: int, step: Optional[int] = None) -> np.ndarray:
    """
    Stack the full-width windows of `array` along a new leading axis.

    Returns shape (n_windows, size, *array.shape[1:]); a narrower remainder
    window is dropped.
    """
    array = np.asarray(array)
    if size <= 0:
        raise ValueError("size must be positive to stack windows")

    windows = [window for rng, window in iter_windows(array, size, step) if rng.width == size]
    if not windows:
        return np.empty((0, size) + array.shape[1:], dtype=array.dtype)
    return np.stack(windows)

"""Run a function over index ranges on a thread pool."""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Callable, List, Optional, TypeVar

from core.idx_range import IdxRange
from windowing.ranges import produce_ranges

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")


def map_partitions(
    func: Callable[[IdxRange], T],
    length: int,
    size: int,
    step: Optional[int] = None,
    max_workers: int = 4,
) -> List[T]:
    """
    Call `func` for every range in parallel and return results in range order.

    `step` defaults to `size`. The first failing range is logged and its
    exception re-raised once the pool has shut down.
    """
    step = size if step is None else step
    ranges = list(produce_ranges(length, size, step))
    if not ranges:
        return []

    results: List[Optional[T]] = [None] * len(ranges)
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        future_to_pos = {executor.submit(func, rng): pos for pos, rng in enumerate(ranges)}
        for future in as_completed(future_to_pos):
            pos = future_to_pos[future]
            try:
                results[pos] = future.result()
            except Exception:
                LOGGER.error("Failed on range %s", ranges[pos])
                for pending in future_to_pos:
                    pending.cancel()
                raise

    LOGGER.debug("Mapped %d ranges with %d workers", len(ranges), max_workers)
    return results

"""Bounded parallel map over a list.

Runs a unit of work per item on at most `workers` threads and returns the
results in input order, independent of completion order.
"""

import logging
from collections.abc import Callable, Sequence
from concurrent.futures import Future, ThreadPoolExecutor
from typing import TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


def bounded_parallel_map(
    func: Callable[[T, int], R],
    items: Sequence[T],
    workers: int,
) -> list[R]:
    """Apply func(item, index) to every item with bounded concurrency.

    Args:
        func: Unit of work, called with the item and its position
        items: Work items
        workers: Maximum concurrent calls (capped at len(items))

    Returns:
        Results where results[i] belongs to items[i]

    Raises:
        ValueError: workers < 1
        Exception: The first failure by item index, re-raised once every
            submitted call has finished
    """
    if workers < 1:
        raise ValueError(f"workers must be >= 1, got {workers}")
    if not items:
        return []

    pool_size = min(workers, len(items))
    futures: list[Future] = []
    with ThreadPoolExecutor(max_workers=pool_size, thread_name_prefix="fixturelink") as executor:
        for index, item in enumerate(items):
            futures.append(executor.submit(func, item, index))

    logger.debug("[PARALLEL] Completed %d items on %d workers", len(items), pool_size)
    return [future.result() for future in futures]

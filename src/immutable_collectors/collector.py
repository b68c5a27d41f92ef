"""
Generic accumulate/combine/finish contract and the drivers that run it.

A Collector bundles four functions:
1. supplier creates an empty accumulator
2. accumulator folds one element into it
3. combiner merges two accumulators from different partitions
4. finisher turns the accumulator into the result

collect() runs a sequential single-pass fold. collect_parallel() splits the
input into contiguous partitions, folds each in its own worker thread with
its own accumulator, then merges partition results as a balanced tree whose
merges on each level also run in worker threads.
"""

from __future__ import annotations
from collections.abc import Callable, Iterable, Sequence
from typing import TypeVar, Generic
from dataclasses import dataclass
import asyncio
import logging
import os

logger = logging.getLogger(__name__)

T = TypeVar("T")
A = TypeVar("A")
R = TypeVar("R")


def _identity(accumulator):
    return accumulator


@dataclass(frozen=True)
class Collector(Generic[T, A, R]):
    """
    Reusable, stateless strategy for reducing a sequence to a result.

    Each use creates fresh accumulators through supplier, so one Collector
    can drive any number of collections, concurrently or not.

    Example:
        joining = Collector.of(list, list.append, list.__add__, "".join)
        collect("abc", joining)  # "abc"
    """

    supplier: Callable[[], A]
    accumulator: Callable[[A, T], object]
    combiner: Callable[[A, A], A]
    finisher: Callable[[A], R] = _identity

    @classmethod
    def of(
        cls,
        supplier: Callable[[], A],
        accumulator: Callable[[A, T], object],
        combiner: Callable[[A, A], A],
        finisher: Callable[[A], R] | None = None,
    ) -> Collector[T, A, R]:
        return cls(supplier, accumulator, combiner, finisher or _identity)

    def fold(self, items: Iterable[T]) -> A:
        """Fold items into a new accumulator without finishing it."""
        container = self.supplier()
        for item in items:
            self.accumulator(container, item)
        return container


def collect(items: Iterable[T], collector: Collector[T, A, R]) -> R:
    """Sequentially collect items into a result."""
    return collector.finisher(collector.fold(items))


def _partition(items: Sequence[T], partitions: int) -> list[Sequence[T]]:
    """Split items into at most `partitions` contiguous, near-equal slices."""
    count = min(partitions, len(items))
    size, extra = divmod(len(items), count)
    slices = []
    start = 0
    for index in range(count):
        stop = start + size + (1 if index < extra else 0)
        slices.append(items[start:stop])
        start = stop
    return slices


async def collect_parallel(
    items: Iterable[T],
    collector: Collector[T, A, R],
    partitions: int | None = None,
) -> R:
    """
    Collect items using parallel partition folds and a tree of merges.

    Args:
        items: Finite input; materialized before partitioning.
        collector: Strategy to run. Each partition gets its own accumulator.
        partitions: Number of partitions. Defaults to the CPU count, and is
                    capped by the number of items.

    Merges always combine a lower-index partition (left) with the next
    higher-index one (right), so ordered results follow input order.
    Any error raised while folding or merging aborts the whole operation.
    """
    if partitions is None:
        partitions = os.cpu_count() or 1
    if not isinstance(partitions, int) or isinstance(partitions, bool):
        raise TypeError(f"partitions must be an int, got {type(partitions).__name__}")
    if partitions < 1:
        raise ValueError(f"partitions must be at least 1, got {partitions}")

    items = items if isinstance(items, Sequence) else list(items)
    if not items:
        return collector.finisher(collector.supplier())

    slices = _partition(items, partitions)
    logger.debug("Folding %d items in %d partitions", len(items), len(slices))

    level = list(
        await asyncio.gather(
            *[asyncio.to_thread(collector.fold, part) for part in slices]
        )
    )

    while len(level) > 1:
        logger.debug("Merging %d partition results", len(level))
        merged = list(
            await asyncio.gather(
                *[
                    asyncio.to_thread(collector.combiner, level[i], level[i + 1])
                    for i in range(0, len(level) - 1, 2)
                ]
            )
        )
        if len(level) % 2:
            merged.append(level[-1])
        level = merged

    return collector.finisher(level[0])

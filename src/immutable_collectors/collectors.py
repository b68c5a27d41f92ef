"""Collectors that accumulate elements into immutable lists, sets and maps."""

from __future__ import annotations
from typing import TypeVar, Callable

from .collector import Collector
from .immutable import (
    ImmutableList,
    ImmutableListBuilder,
    ImmutableMap,
    ImmutableMapBuilder,
    ImmutableSet,
    ImmutableSetBuilder,
)

T = TypeVar("T")
K = TypeVar("K")
V = TypeVar("V")


def to_immutable_list() -> Collector[T, ImmutableListBuilder[T], ImmutableList[T]]:
    """
    Collect elements into an ImmutableList in encounter order.

    Raises NullElementError if any collected element is None.
    """

    def combine(left: ImmutableListBuilder[T], right: ImmutableListBuilder[T]):
        return left.add_all(right.build())

    return Collector.of(
        ImmutableList.builder,
        ImmutableListBuilder.add,
        combine,
        ImmutableListBuilder.build,
    )


def to_immutable_set() -> Collector[T, ImmutableSetBuilder[T], ImmutableSet[T]]:
    """
    Collect elements into an ImmutableSet.

    Duplicate elements are ignored: only the first one encountered is kept.
    Raises NullElementError if any collected element is None.
    """

    def combine(left: ImmutableSetBuilder[T], right: ImmutableSetBuilder[T]):
        return left.add_all(right.build())

    return Collector.of(
        ImmutableSet.builder,
        ImmutableSetBuilder.add,
        combine,
        ImmutableSetBuilder.build,
    )


def to_immutable_map(
    key_of: Callable[[T], K],
    value_of: Callable[[T], V],
) -> Collector[T, ImmutableMapBuilder[K, V], ImmutableMap[K, V]]:
    """
    Collect elements into an ImmutableMap of key_of(e) -> value_of(e).

    Duplicate keys are not allowed: they raise DuplicateKeyError when
    partitions are merged or the map is built. Exceptions raised by key_of
    or value_of propagate unchanged.
    """
    if not callable(key_of) or not callable(value_of):
        raise TypeError("key_of and value_of must be callable")

    def accumulate(builder: ImmutableMapBuilder[K, V], element: T) -> None:
        builder.put(key_of(element), value_of(element))

    def combine(left: ImmutableMapBuilder[K, V], right: ImmutableMapBuilder[K, V]):
        return left.put_all(right.build())

    return Collector.of(
        ImmutableMap.builder,
        accumulate,
        combine,
        ImmutableMapBuilder.build,
    )


to_list = to_immutable_list
to_set = to_immutable_set
to_map = to_immutable_map

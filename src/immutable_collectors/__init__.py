"""
Immutable collectors: fold sequences into immutable lists, sets and maps.

Provides collectors built on a generic accumulate/combine/finish contract,
with sequential and parallel drivers.

Usage:
    from immutable_collectors import collect, collect_parallel, to_list, to_set, to_map

    names = collect(customers, to_map(lambda c: c.id, lambda c: c.name))

    # Partitions are folded in worker threads and merged in input order
    numbers = await collect_parallel(range(1000), to_list(), partitions=8)
"""

from .collector import Collector, collect, collect_parallel
from .collectors import (
    to_immutable_list,
    to_immutable_set,
    to_immutable_map,
    to_list,
    to_set,
    to_map,
)
from .errors import CollectorError, NullElementError, DuplicateKeyError
from .immutable import ImmutableList, ImmutableSet, ImmutableMap

__version__ = "0.1.0"
__all__ = [
    # Contract and drivers
    "Collector",
    "collect",
    "collect_parallel",
    # Collectors
    "to_immutable_list",
    "to_immutable_set",
    "to_immutable_map",
    "to_list",
    "to_set",
    "to_map",
    # Results
    "ImmutableList",
    "ImmutableSet",
    "ImmutableMap",
    # Errors
    "CollectorError",
    "NullElementError",
    "DuplicateKeyError",
]

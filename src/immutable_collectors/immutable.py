"""
Immutable list, set and map values and the builders that produce them.

Builders are the mutable accumulators used while folding; the values they
build are never mutated afterwards and can be shared freely between threads.

Example:
    builder = ImmutableMap.builder()
    builder.put("a", 1).put("b", 2)
    mapping = builder.build()   # ImmutableMap({'a': 1, 'b': 2})
"""

from __future__ import annotations
from collections.abc import Hashable, Iterable, Iterator, Mapping, Set
from typing import Any, Generic, TypeVar

from .errors import DuplicateKeyError, NullElementError

T = TypeVar("T")
K = TypeVar("K")
V = TypeVar("V")


def _require_present(value: Any, role: str = "element") -> None:
    if value is None:
        raise NullElementError(role)


class ImmutableList(tuple, Generic[T]):
    """Ordered, hashable sequence that never contains None."""

    __slots__ = ()

    def __new__(cls, items: Iterable[T] = ()) -> ImmutableList[T]:
        items = tuple(items)
        for item in items:
            _require_present(item)
        return super().__new__(cls, items)

    @classmethod
    def of(cls, *items: T) -> ImmutableList[T]:
        return cls(items)

    @staticmethod
    def builder() -> ImmutableListBuilder[Any]:
        return ImmutableListBuilder()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class ImmutableSet(Set, Hashable, Generic[T]):
    """
    Insertion-ordered, hashable set that never contains None.

    Iteration follows first-seen order. Equality is plain set equality, so an
    ImmutableSet compares equal to a set or frozenset with the same members.
    """

    __slots__ = ("_data",)

    _data: dict[T, None]

    def __init__(self, items: Iterable[T] = ()):
        data: dict[T, None] = {}
        for item in items:
            _require_present(item)
            data.setdefault(item, None)
        self._data = data

    @classmethod
    def _wrap(cls, data: dict[T, None]) -> ImmutableSet[T]:
        instance = cls.__new__(cls)
        instance._data = data
        return instance

    @classmethod
    def _from_iterable(cls, it: Iterable[T]) -> ImmutableSet[T]:
        return cls(it)

    @classmethod
    def of(cls, *items: T) -> ImmutableSet[T]:
        return cls(items)

    @classmethod
    def copy_of(cls, items: Iterable[T]) -> ImmutableSet[T]:
        if isinstance(items, cls):
            return items
        return cls(items)

    @staticmethod
    def builder() -> ImmutableSetBuilder[Any]:
        return ImmutableSetBuilder()

    def __contains__(self, item: object) -> bool:
        return item in self._data

    def __iter__(self) -> Iterator[T]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __hash__(self) -> int:
        return self._hash()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._data)!r})"


class ImmutableMap(Mapping[K, V], Hashable, Generic[K, V]):
    """
    Insertion-ordered, hashable mapping with no None keys or values.

    Built from a mapping or an iterable of (key, value) pairs. Pairs that
    repeat a key raise DuplicateKeyError instead of overwriting.
    """

    __slots__ = ("_data",)

    _data: dict[K, V]

    def __init__(self, entries: Mapping[K, V] | Iterable[tuple[K, V]] = ()):
        self._data = ImmutableMapBuilder().put_all(entries).build()._data

    @classmethod
    def _wrap(cls, data: dict[K, V]) -> ImmutableMap[K, V]:
        instance = cls.__new__(cls)
        instance._data = data
        return instance

    @classmethod
    def copy_of(
        cls, entries: Mapping[K, V] | Iterable[tuple[K, V]]
    ) -> ImmutableMap[K, V]:
        if isinstance(entries, cls):
            return entries
        return cls(entries)

    @staticmethod
    def builder() -> ImmutableMapBuilder[Any, Any]:
        return ImmutableMapBuilder()

    def __getitem__(self, key: K) -> V:
        return self._data[key]

    def __iter__(self) -> Iterator[K]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __hash__(self) -> int:
        return hash(frozenset(self._data.items()))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"


class ImmutableListBuilder(Generic[T]):
    """Growable buffer that builds an ImmutableList."""

    __slots__ = ("_items",)

    def __init__(self) -> None:
        self._items: list[T] = []

    def add(self, item: T) -> ImmutableListBuilder[T]:
        _require_present(item)
        self._items.append(item)
        return self

    def add_all(self, items: Iterable[T]) -> ImmutableListBuilder[T]:
        for item in items:
            self.add(item)
        return self

    def build(self) -> ImmutableList[T]:
        return tuple.__new__(ImmutableList, self._items)

    def __len__(self) -> int:
        return len(self._items)


class ImmutableSetBuilder(Generic[T]):
    """Builds an ImmutableSet; later duplicates are ignored."""

    __slots__ = ("_data",)

    def __init__(self) -> None:
        self._data: dict[T, None] = {}

    def add(self, item: T) -> ImmutableSetBuilder[T]:
        _require_present(item)
        self._data.setdefault(item, None)
        return self

    def add_all(self, items: Iterable[T]) -> ImmutableSetBuilder[T]:
        for item in items:
            self.add(item)
        return self

    def build(self) -> ImmutableSet[T]:
        return ImmutableSet._wrap(dict(self._data))

    def __len__(self) -> int:
        return len(self._data)


class ImmutableMapBuilder(Generic[K, V]):
    """
    Builds an ImmutableMap.

    Entries are recorded in encounter order and key uniqueness is checked
    by build(), which raises DuplicateKeyError on the first repeated key.
    """

    __slots__ = ("_entries",)

    def __init__(self) -> None:
        self._entries: list[tuple[K, V]] = []

    def put(self, key: K, value: V) -> ImmutableMapBuilder[K, V]:
        _require_present(key, "key")
        _require_present(value, "value")
        self._entries.append((key, value))
        return self

    def put_all(
        self, entries: Mapping[K, V] | Iterable[tuple[K, V]]
    ) -> ImmutableMapBuilder[K, V]:
        pairs = entries.items() if isinstance(entries, Mapping) else entries
        for key, value in pairs:
            self.put(key, value)
        return self

    def build(self) -> ImmutableMap[K, V]:
        data: dict[K, V] = {}
        for key, value in self._entries:
            if key in data:
                raise DuplicateKeyError(key, data[key], value)
            data[key] = value
        return ImmutableMap._wrap(data)

    def __len__(self) -> int:
        return len(self._entries)

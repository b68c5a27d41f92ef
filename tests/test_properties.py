"""Property tests for the collectors over arbitrary inputs."""

import asyncio
from collections import Counter

import pytest
from hypothesis import given, strategies as st
from immutable_collectors import (
    DuplicateKeyError,
    NullElementError,
    collect,
    collect_parallel,
    to_list,
    to_map,
    to_set,
)

elements = st.lists(st.integers())
partition_counts = st.integers(min_value=1, max_value=16)


@given(elements)
def test_list_keeps_every_element(items):
    result = collect(items, to_list())
    assert len(result) == len(items)
    assert Counter(result) == Counter(items)


@given(elements)
def test_set_keeps_distinct_elements_in_first_seen_order(items):
    result = collect(items, to_set())
    assert list(result) == list(dict.fromkeys(items))


@given(st.lists(st.integers(), unique=True))
def test_map_has_one_entry_per_unique_key(items):
    result = collect(items, to_map(str, lambda x: x * 2))
    assert len(result) == len(items)
    for item in items:
        assert result[str(item)] == item * 2


@given(st.lists(st.integers(), min_size=1), st.data())
def test_map_fails_on_repeated_key(items, data):
    repeated = data.draw(st.sampled_from(items))
    position = data.draw(st.integers(min_value=0, max_value=len(items)))
    items = items[:position] + [repeated] + items[position:]
    with pytest.raises(DuplicateKeyError):
        collect(items, to_map(lambda x: x, str))


@given(elements, st.data())
def test_null_element_fails(items, data):
    position = data.draw(st.integers(min_value=0, max_value=len(items)))
    items = items[:position] + [None] + items[position:]
    with pytest.raises(NullElementError):
        collect(items, to_list())
    with pytest.raises(NullElementError):
        collect(items, to_set())


@given(elements, partition_counts)
def test_parallel_matches_sequential(items, partitions):
    for collector in (to_list(), to_set()):
        parallel = asyncio.run(collect_parallel(items, collector, partitions))
        assert parallel == collect(items, collector)


@given(st.lists(st.integers(), unique=True), partition_counts)
def test_parallel_map_matches_sequential(items, partitions):
    collector = to_map(str, abs)
    parallel = asyncio.run(collect_parallel(items, collector, partitions))
    assert parallel == collect(items, collector)


@given(elements, st.data(), partition_counts)
def test_parallel_null_element_fails(items, data, partitions):
    position = data.draw(st.integers(min_value=0, max_value=len(items)))
    items = items[:position] + [None] + items[position:]
    for collector in (to_list(), to_set()):
        with pytest.raises(NullElementError):
            asyncio.run(collect_parallel(items, collector, partitions))

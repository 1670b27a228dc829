import operator

import pytest

from lfc.hashing import int_simple_hash
from lfc.hashmap import HashMap
from lfc.hashset import DEFAULT_BUCKETS
from lfc.ownedstr import Str


def make_map(hash_fn=int_simple_hash, n_buckets=DEFAULT_BUCKETS):
    return HashMap(n_buckets, hash_fn, operator.eq)


def assert_state(hashmap, size, n_buckets=DEFAULT_BUCKETS):
    assert hashmap.n_buckets() == n_buckets
    assert len(hashmap) == size
    assert hashmap.load_factor() == size / n_buckets
    assert bool(hashmap.is_empty()) is (size == 0)


@pytest.mark.parametrize("hash_fn", [int_simple_hash, Str.simple_hash])
def test_init_correctly(hash_fn):
    assert_state(make_map(hash_fn), 0)


def test_init_non_positive_buckets_rejected():
    with pytest.raises(ValueError):
        make_map(n_buckets=0)


@pytest.mark.parametrize(
    "hash_fn, key, probe, value",
    [
        (int_simple_hash, 5, 5, "hello"),
        (Str.simple_hash, Str("hello world"), Str("hello world"), 0),
    ],
)
def test_elem_inserted_correctly_on_empty(hash_fn, key, probe, value):
    hashmap = make_map(hash_fn)
    assert hashmap.insert(key, value)
    assert hashmap.get(probe) == value
    assert hashmap.contains(probe)
    assert probe in hashmap
    assert_state(hashmap, 1)


def test_elem_inserted_twice_doesnt_overwrite():
    hashmap = make_map()
    assert hashmap.insert(5, 8)
    assert not hashmap.insert(5, 6)
    assert hashmap.get(5) == 8
    assert_state(hashmap, 1)


def test_multiple_distinct_values_inserted_correctly():
    hashmap = make_map()
    length = DEFAULT_BUCKETS + 1
    for i in range(length):
        assert hashmap.insert(i, f"v{i}")
        assert hashmap.contains(i % 5)
        assert len(hashmap) == i + 1
        assert hashmap.load_factor() == (i + 1.0) / hashmap.n_buckets()
        assert not hashmap.is_empty()
    assert hashmap.n_buckets() == DEFAULT_BUCKETS * 2
    assert dict(hashmap.items()) == {i: f"v{i}" for i in range(length)}


def test_value_set_correctly_no_overwrite():
    hashmap = make_map()
    assert not hashmap.set(5, 7)
    assert hashmap.get(5) == 7
    assert_state(hashmap, 1)


@pytest.mark.parametrize(
    "hash_fn, key, first, second",
    [
        (int_simple_hash, 5, "asg", "acya"),
        (Str.simple_hash, Str("asg"), object(), object()),
    ],
)
def test_value_set_correctly_with_overwrite(hash_fn, key, first, second):
    hashmap = make_map(hash_fn)
    hashmap.insert(key, first)
    assert hashmap.set(key, second)
    assert hashmap.get(key) is second
    assert hashmap.contains(key)
    assert_state(hashmap, 1)


def test_remove_on_empty_maintains_empty():
    hashmap = make_map()
    assert hashmap.remove(5) is False
    assert_state(hashmap, 0)


@pytest.mark.parametrize(
    "hash_fn, key, probe, value",
    [
        (int_simple_hash, 5, 5, "hello world"),
        (Str.simple_hash, Str("hello world"), Str("hello world"), 5),
    ],
)
def test_remove_with_one_elem_makes_empty(hash_fn, key, probe, value):
    hashmap = make_map(hash_fn)
    hashmap.insert(key, value)
    assert hashmap.remove(probe) is True
    assert not hashmap.contains(probe)
    assert_state(hashmap, 0)


@pytest.mark.parametrize(
    "values",
    [["hello"[i:] for i in range(5)], [Str("hello") for _ in range(5)]],
)
def test_value_removed_from_many_elems(values):
    hashmap = make_map()
    for i, value in enumerate(values):
        hashmap.insert(i, value)
    hashmap.remove(0)
    assert not hashmap.contains(0)
    assert_state(hashmap, len(values) - 1)
    assert hashmap.get(1) == values[1]


def test_none_value_counts_as_absent():
    hashmap = make_map()
    assert hashmap.insert(3, None)
    assert not hashmap.contains(3)
    assert hashmap.get(3) is None
    assert len(hashmap) == 1


def test_set_does_not_rehash():
    hashmap = make_map(n_buckets=2)
    for i in range(5):
        hashmap.set(i, i)
    assert_state(hashmap, 5, 2)
    assert dict(hashmap.items()) == {i: i for i in range(5)}


def test_rehash_keeps_all_pairs_reachable():
    hashmap = make_map(n_buckets=1)
    for i in range(10):
        hashmap.insert(i, str(i))
    assert hashmap.n_buckets() > 1
    assert all(hashmap.get(i) == str(i) for i in range(10))
    assert len(hashmap) == 10
    assert hashmap.load_factor() <= 1.0
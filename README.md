# lfc

A small library of hand-built collections and helpers, with no
dependencies outside the standard library.

## Modules

- `lfc.array` – `Array`, a fixed-length, bounds-checked sequence built from
  any iterable, with `find(target, elem_eq)` returning the index of the first
  match or `-1`; and `DynArray(length, fill=None)`, an `Array` with every slot
  set to `fill`.
- `lfc.vector` – `Vector(capacity=20)`, a growable list mutated at the tail.
  `push` doubles `capacity` when the vector is full; `pop` removes and returns
  the last value and keeps the capacity.
- `lfc.linkedlist` – `LinkedList`, a singly-linked list with `append`,
  `prepend`, `first`, `last`, `pop_first`, `find(target, elem_eq)` (a bool)
  and `remove(target, elem_eq)` (the removed element or `None`).
- `lfc.fifo` – `Queue`, first in, first out: `push`, `pop` and `peek`, the
  last two returning `None` when the queue is empty.
- `lfc.stack` – `Stack`, last in, first out: `push`, `pop` and `peek`;
  `peek` returns `None` when empty, `pop` raises `IndexError`.
- `lfc.hashset` – `HashSet(n_buckets=20, hash_fn=hash, elem_eq=operator.eq)`,
  separately chained, with `insert`, `remove` (returns the removed element or
  `None`), `contains` / `in`, `load_factor()` and `n_buckets()`. When an
  insertion finds the load factor at or above `MAX_LOAD_FACTOR` (0.5), the
  bucket count doubles.
- `lfc.hashmap` – `HashMap(n_buckets=20, hash_fn=hash, key_eq=operator.eq)`,
  separately chained. `insert` stores a value only for a new key and returns
  whether it did; `set` overwrites and returns whether the key already existed;
  `get` returns the value or `None`; `remove` returns whether a pair was
  removed; `items()` yields `(key, value)` pairs. A key whose value is `None`
  counts as absent for `contains` and `in`. When an insertion finds the load
  factor above 0.5, the bucket count doubles.
- `lfc.mapbucket` – `Pair` and `MapBucket`, the chains of key-value pairs the
  hash map stores in each bucket.
- `lfc.ownedstr` – `Str`, a mutable string that tracks its own `capacity`
  (32 when created empty, the text's length when created from text). It offers
  `push`, `push_str`, `pop_last`, `get`, `set`, indexing, `starts_with`,
  `ends_with` and `simple_hash`.
- `lfc.hashing` – `int_simple_hash(x)` returns the integer reduced to an
  unsigned 64-bit word; `str_simple_hash(text)` adds the first character code
  and 31 times each following code.
- `lfc.convert` – `itoa(n)` returns the decimal text of a 32-bit signed
  integer (raising `OverflowError` outside that range); `itos(n)` returns it
  as a `Str`.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from lfc.hashing import int_simple_hash, str_simple_hash
from lfc.hashmap import HashMap
from lfc.hashset import HashSet
from lfc.ownedstr import Str

assert str_simple_hash("hello") == 13372

numbers = HashSet(20, int_simple_hash, lambda a, b: a == b)
numbers.insert(3)
assert 3 in numbers
assert numbers.load_factor() == 1 / 20

greetings = HashMap(20, int_simple_hash, lambda a, b: a == b)
assert greetings.insert(5, "hello")
assert greetings.get(5) == "hello"
assert greetings.set(5, "hi")
assert greetings.get(5) == "hi"

text = Str("hello")
text.push("!")
assert str(text) == "hello!"
assert text.ends_with("!")
```

## Errors

Indexing an `Array`, `Vector` or `Str` out of bounds raises `IndexError`.
Popping from an empty `Vector`, `Stack` or `Str` raises `IndexError`, while
`Queue.pop` and `LinkedList.pop_first` return `None`.

## What it does not do

`lfc` is a library only: it has no command-line tool, and its collections
live in memory with no persistence.
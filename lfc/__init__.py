"""Hand-built collections (arrays, vectors, lists, queues, stacks, hash sets, hash maps, strings) and small helpers."""

__version__ = "0.1.0"

__all__ = [
    "array",
    "convert",
    "fifo",
    "hashing",
    "hashmap",
    "hashset",
    "linkedlist",
    "mapbucket",
    "ownedstr",
    "stack",
    "vector",
]
"""Separate-chaining hash table with a randomised universal hash."""

from __future__ import annotations

import random
from typing import Any, Callable, Generic, Iterator, Optional, TypeVar

K = TypeVar("K")
V = TypeVar("V")

PRIME = 1_000_000_007
INITIAL_CAPACITY = 100
MAX_LOAD = 0.75


class HashTable(Generic[K, V]):
    """A hash map whose table doubles once the load factor exceeds 0.75."""

    def __init__(
        self,
        default_factory: Optional[Callable[[], V]] = None,
        seed: Optional[int] = None,
    ) -> None:
        rng = random.Random(seed)
        self._a = rng.randint(1, PRIME - 1)
        self._b = rng.randint(0, PRIME - 1)
        self.default_factory = default_factory
        self._buckets: list[list[list[Any]]] = [[] for _ in range(INITIAL_CAPACITY)]
        self._count = 0

    def _index(self, key: K, capacity: int) -> int:
        if isinstance(key, str):
            h = 0
            for char in key:
                h = (h * self._a + ord(char)) % PRIME
            return h % capacity
        number = key if isinstance(key, int) else hash(key)
        return ((self._a * number + self._b) % PRIME) % capacity

    def _find(self, key: K) -> Optional[list[Any]]:
        for entry in self._buckets[self._index(key, len(self._buckets))]:
            if entry[0] == key:
                return entry
        return None

    def _rehash(self) -> None:
        old = self._buckets
        capacity = len(old) * 2
        self._buckets = [[] for _ in range(capacity)]
        for bucket in old:
            for entry in bucket:
                self._buckets[self._index(entry[0], capacity)].append(entry)

    def _entry(self, key: K, create: Callable[[], V]) -> list[Any]:
        if self.load_factor() > MAX_LOAD:
            self._rehash()
        bucket = self._buckets[self._index(key, len(self._buckets))]
        for entry in bucket:
            if entry[0] == key:
                return entry
        entry = [key, create()]
        bucket.append(entry)
        self._count += 1
        return entry

    def __getitem__(self, key: K) -> V:
        """Return the value for key; a missing key gets a default if a factory is set."""
        if self.default_factory is None:
            entry = self._find(key)
            if entry is None:
                raise KeyError(key)
            return entry[1]
        return self._entry(key, self.default_factory)[1]

    def __setitem__(self, key: K, value: V) -> None:
        self._entry(key, lambda: None)[1] = value

    def __contains__(self, key: object) -> bool:
        return self._find(key) is not None

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[K]:
        for bucket in self._buckets:
            for key, _ in bucket:
                yield key

    def clear(self) -> None:
        """Drop every entry, keeping the current capacity."""
        self._buckets = [[] for _ in range(len(self._buckets))]
        self._count = 0

    def load_factor(self) -> float:
        capacity = len(self._buckets)
        return self._count / capacity if capacity else 0.0

    def capacity(self) -> int:
        return len(self._buckets)

    def __repr__(self) -> str:
        items = ", ".join(f"{key!r}: {self._find(key)[1]!r}" for key in self)
        return f"HashTable({{{items}}})"
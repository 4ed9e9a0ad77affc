"""Tracking of the best key/value pair seen so far."""

from __future__ import annotations

from typing import Any, Generic, Iterable, Mapping, TypeVar

K = TypeVar("K")
V = TypeVar("V")

_MISSING: Any = object()


class TopResult(Generic[K, V]):
    """Remembers one key/value pair chosen by a running max/min comparison.

    A candidate replaces the stored pair only when nothing is stored yet or
    when it is strictly better, so on ties the earliest candidate wins.
    """

    __slots__ = ("key", "value", "is_set")

    def __init__(self, key: K = _MISSING, value: V = _MISSING) -> None:
        if (key is _MISSING) != (value is _MISSING):
            raise TypeError("key and value must be given together")
        self.is_set = key is not _MISSING
        self.key: K | None = None if key is _MISSING else key
        self.value: V | None = None if value is _MISSING else value

    def __repr__(self) -> str:
        if not self.is_set:
            return "TopResult()"
        return f"TopResult(key={self.key!r}, value={self.value!r})"

    def _store(self, key: K, value: V) -> bool:
        self.is_set = True
        self.key = key
        self.value = value
        return True

    def add_max_key(self, key: K, value: V) -> bool:
        """Keep the pair if its key is greater than the stored key."""
        if not self.is_set or key > self.key:
            return self._store(key, value)
        return False

    def add_min_key(self, key: K, value: V) -> bool:
        """Keep the pair if its key is less than the stored key."""
        if not self.is_set or key < self.key:
            return self._store(key, value)
        return False

    def add_max_value(self, key: K, value: V) -> bool:
        """Keep the pair if its value is greater than the stored value."""
        if not self.is_set or value > self.value:
            return self._store(key, value)
        return False

    def add_min_value(self, key: K, value: V) -> bool:
        """Keep the pair if its value is less than the stored value."""
        if not self.is_set or value < self.value:
            return self._store(key, value)
        return False

    @staticmethod
    def _pairs(mapping: Mapping[K, V] | Iterable[tuple[K, V]]) -> Iterable[tuple[K, V]]:
        if isinstance(mapping, Mapping):
            return mapping.items()
        return mapping

    def add_max_key_by_map(self, mapping: Mapping[K, V]) -> None:
        """Apply add_max_key to every item of the mapping, in order."""
        for key, value in self._pairs(mapping):
            self.add_max_key(key, value)

    def add_min_key_by_map(self, mapping: Mapping[K, V]) -> None:
        """Apply add_min_key to every item of the mapping, in order."""
        for key, value in self._pairs(mapping):
            self.add_min_key(key, value)

    def add_max_value_by_map(self, mapping: Mapping[K, V]) -> None:
        """Apply add_max_value to every item of the mapping, in order."""
        for key, value in self._pairs(mapping):
            self.add_max_value(key, value)

    def add_min_value_by_map(self, mapping: Mapping[K, V]) -> None:
        """Apply add_min_value to every item of the mapping, in order."""
        for key, value in self._pairs(mapping):
            self.add_min_value(key, value)
"""Hash maps keyed by integers or strings, built on the open-addressing map."""

import operator
from dataclasses import dataclass
from typing import Any

from reactorkit.openmap import OpenMap


@dataclass(eq=False)
class Entry:
    """A key/value pair; entries compare and hash by key only."""

    key: Any
    value: Any = None

    def __eq__(self, other):
        if not isinstance(other, Entry):
            return NotImplemented
        return self.key == other.key

    def __hash__(self):
        return hash(self.key)


def _value_of(entry):
    return None if entry is None else entry.value


def _int_key(key):
    key = operator.index(key)
    if key == 0:
        raise ValueError("key 0 is reserved")
    return key


def _str_key(key):
    if not isinstance(key, str):
        raise TypeError(f"key must be a string, not {type(key).__name__}")
    return key


class IntMap:
    """Map from non-zero integer keys to values; zero is reserved for empty slots."""

    def __init__(self):
        self._map = OpenMap(hash)

    def __len__(self):
        return len(self._map)

    def __iter__(self):
        return iter(self._map)

    def capacity(self):
        return self._map.capacity()

    def reserve(self, size):
        self._map.reserve(size)

    def at(self, key):
        """Return the value stored for ``key``, or None if there is none."""
        return _value_of(self._map.at(Entry(key)))

    def insert(self, key, value, release=None):
        """Store ``value`` under ``key`` unless the key exists; then pass the new entry to ``release``."""
        return self._map.insert(Entry(_int_key(key), value), release)

    def erase(self, key, release=None):
        """Remove ``key``, passing its entry to ``release``; return True if it was present."""
        return self._map.erase(Entry(key), release)

    def clear(self, release=None):
        self._map.clear(release)


class StrMap:
    """Map from string keys to values."""

    def __init__(self):
        self._map = OpenMap(hash)

    def __len__(self):
        return len(self._map)

    def __iter__(self):
        return iter(self._map)

    def capacity(self):
        return self._map.capacity()

    def reserve(self, size):
        self._map.reserve(size)

    def at(self, key):
        """Return the value stored for ``key``, or None if there is none."""
        return _value_of(self._map.at(Entry(key)))

    def insert(self, key, value, release=None):
        """Store ``value`` under ``key`` unless the key exists; then pass the new entry to ``release``."""
        return self._map.insert(Entry(_str_key(key), value), release)

    def erase(self, key, release=None):
        """Remove ``key``, passing its entry to ``release``; return True if it was present."""
        return self._map.erase(Entry(key), release)

    def clear(self, release=None):
        self._map.clear(release)
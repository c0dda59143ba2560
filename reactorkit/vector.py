"""A growable sequence with explicit capacity management."""


class Vector:
    """Sequence of values with positional insert and erase and a tracked capacity."""

    def __init__(self):
        self._items = []
        self._capacity = 0

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        return iter(self._items)

    def __getitem__(self, position):
        return self._items[position]

    def empty(self):
        return not self._items

    def capacity(self):
        return self._capacity

    def reserve(self, capacity):
        if capacity > self._capacity:
            self._capacity = capacity

    def shrink_to_fit(self):
        self._capacity = len(self._items)

    def _grow(self, required):
        if required > self._capacity:
            self._capacity = max(required, 2 * self._capacity)

    def _check_insert_position(self, position):
        if not 0 <= position <= len(self._items):
            raise IndexError(f"insert position {position} out of range")

    def front(self):
        if not self._items:
            raise IndexError("front of empty vector")
        return self._items[0]

    def back(self):
        if not self._items:
            raise IndexError("back of empty vector")
        return self._items[-1]

    def insert(self, position, value):
        self._check_insert_position(position)
        self._grow(len(self._items) + 1)
        self._items.insert(position, value)

    def insert_range(self, position, values):
        self._check_insert_position(position)
        values = list(values)
        self._grow(len(self._items) + len(values))
        self._items[position:position] = values

    def insert_fill(self, position, count, value):
        """Insert ``count`` copies of ``value`` at ``position``."""
        if count < 0:
            raise ValueError("count must not be negative")
        self.insert_range(position, [value] * count)

    def erase(self, position, release=None):
        if not 0 <= position < len(self._items):
            raise IndexError(f"erase position {position} out of range")
        value = self._items.pop(position)
        if release is not None:
            release(value)

    def erase_range(self, first, last, release=None):
        """Remove the values in ``[first, last)``, passing each to ``release``."""
        if not 0 <= first <= last <= len(self._items):
            raise IndexError(f"erase range [{first}, {last}) out of range")
        removed = self._items[first:last]
        del self._items[first:last]
        if release is not None:
            for value in removed:
                release(value)

    def clear(self, release=None):
        self.erase_range(0, len(self._items), release)

    def push_back(self, value):
        self.insert(len(self._items), value)

    def pop_back(self, release=None):
        if not self._items:
            raise IndexError("pop from empty vector")
        self.erase(len(self._items) - 1, release)
"""Open-addressing hash set with linear probing and backward-shift deletion."""

MIN_CAPACITY = 16

_EMPTY = object()


def _roundup(size):
    return 1 << max(size - 1, 0).bit_length()


class OpenMap:
    """Hash set of elements stored in a power-of-two table kept at most half full."""

    def __init__(self, hash_function=hash):
        self._hash = hash_function
        self._slots = [_EMPTY] * MIN_CAPACITY
        self._count = 0

    def __len__(self):
        return self._count

    def __iter__(self):
        return (slot for slot in list(self._slots) if slot is not _EMPTY)

    def __contains__(self, element):
        return self._slots[self._probe(element)] is not _EMPTY

    def capacity(self):
        """Return the number of slots in the table."""
        return len(self._slots)

    def _mask(self):
        return len(self._slots) - 1

    def _probe(self, element):
        mask = self._mask()
        i = self._hash(element) & mask
        while True:
            slot = self._slots[i]
            if slot is _EMPTY or slot == element:
                return i
            i = (i + 1) & mask

    def _rehash(self, size):
        old = self._slots
        self._slots = [_EMPTY] * _roundup(size)
        for slot in old:
            if slot is not _EMPTY:
                self._slots[self._probe(slot)] = slot

    def reserve(self, size):
        """Make room for ``size`` elements without the table becoming more than half full."""
        size *= 2
        if size > len(self._slots):
            self._rehash(size)

    def at(self, element):
        """Return the stored element equal to ``element``, or None."""
        slot = self._slots[self._probe(element)]
        return None if slot is _EMPTY else slot

    def insert(self, element, release=None):
        """Add ``element`` unless an equal one is stored; then pass it to ``release``.

        Returns True if the element was added.
        """
        self.reserve(self._count + 1)
        i = self._probe(element)
        if self._slots[i] is _EMPTY:
            self._slots[i] = element
            self._count += 1
            return True
        if release is not None:
            release(element)
        return False

    def erase(self, element, release=None):
        """Remove the element equal to ``element``; return True if one was found."""
        mask = self._mask()
        i = self._hash(element) & mask
        while True:
            slot = self._slots[i]
            if slot is _EMPTY:
                return False
            if slot == element:
                break
            i = (i + 1) & mask

        if release is not None:
            release(slot)
        self._count -= 1

        j = i
        while True:
            j = (j + 1) & mask
            moved = self._slots[j]
            if moved is _EMPTY:
                break
            k = self._hash(moved) & mask
            if (i < j and (k <= i or k > j)) or (i > j and k <= i and k > j):
                self._slots[i] = moved
                i = j

        self._slots[i] = _EMPTY
        return True

    def clear(self, release=None):
        """Remove every element, passing each to ``release`` if given."""
        if release is not None:
            for element in self:
                release(element)
        self._slots = [_EMPTY] * MIN_CAPACITY
        self._count = 0
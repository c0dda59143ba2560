"""A growable byte string with tracked capacity and search/replace helpers."""

import os

_READ_SIZE = 4096


class Text:
    """Mutable byte string whose capacity grows exactly to what is asked for."""

    def __init__(self, data=b""):
        self._data = bytearray(data)
        self._capacity = len(self._data)

    def __len__(self):
        return len(self._data)

    def __eq__(self, other):
        if isinstance(other, Text):
            return self._data == other._data
        if isinstance(other, (bytes, bytearray, memoryview)):
            return self._data == bytes(other)
        return NotImplemented

    __hash__ = None

    def __bytes__(self):
        return bytes(self._data)

    def __repr__(self):
        return f"Text({bytes(self._data)!r})"

    @classmethod
    def read(cls, stream):
        """Read a binary stream to its end and return its contents."""
        text = cls()
        while chunk := stream.read(_READ_SIZE):
            text.append(chunk)
        return text

    @classmethod
    def load(cls, path):
        """Return the contents of the file at ``path``, or an empty text if it cannot be opened."""
        try:
            stream = open(path, "rb")
        except OSError:
            return cls()
        with stream:
            return cls.read(stream)

    def copy(self):
        return Text(self._data)

    def capacity(self):
        return self._capacity

    def empty(self):
        return not self._data

    def allocate(self, capacity):
        """Grow the capacity to at least ``capacity`` bytes."""
        if capacity > self._capacity:
            self._capacity = capacity

    def resize(self, size):
        """Set the size, truncating or padding with zero bytes."""
        if size < 0:
            raise ValueError("size must not be negative")
        self.allocate(size)
        current = len(self._data)
        if size < current:
            del self._data[size:]
        else:
            self._data.extend(bytes(size - current))

    def find(self, data, position=0):
        """Return the offset of ``data`` at or after ``position``, or -1; empty data is never found."""
        if not 0 <= position <= len(self._data):
            raise IndexError(f"position {position} out of range")
        data = bytes(data)
        if not data:
            return -1
        return self._data.find(data, position)

    def insert(self, offset, data):
        if not 0 <= offset <= len(self._data):
            raise IndexError(f"offset {offset} out of range")
        data = bytes(data)
        self.allocate(len(self._data) + len(data))
        self._data[offset:offset] = data

    def prepend(self, data):
        self.insert(0, data)

    def append(self, data):
        self.insert(len(self._data), data)

    def erase(self, offset, size):
        """Remove ``size`` bytes starting at ``offset``."""
        if size == 0:
            return
        if size < 0 or not 0 <= offset <= offset + size <= len(self._data):
            raise IndexError(f"range at {offset} of size {size} out of range")
        del self._data[offset:offset + size]

    def replace(self, match, replacement):
        """Replace the first occurrence of ``match``; return True if one was found."""
        match = bytes(match)
        position = self.find(match)
        if position < 0:
            return False
        self.erase(position, len(match))
        self.insert(position, replacement)
        return True

    def replace_all(self, match, replacement):
        """Replace every occurrence of ``match``, scanning past each replacement."""
        match = bytes(match)
        replacement = bytes(replacement)
        count = 0
        position = 0
        while position < len(self._data):
            position = self.find(match, position)
            if position < 0:
                break
            self.erase(position, len(match))
            self.insert(position, replacement)
            position += len(replacement)
            count += 1
        return count

    def write(self, stream):
        """Write the whole contents to a binary stream."""
        view = memoryview(bytes(self._data))
        while view:
            written = stream.write(view)
            if written is None:
                written = len(view)
            if written <= 0:
                raise OSError("stream accepted no data")
            view = view[written:]

    def save(self, path):
        """Write the contents over the start of the existing file at ``path``."""
        fd = os.open(path, os.O_WRONLY)
        with os.fdopen(fd, "wb") as stream:
            self.write(stream)
"""A circular doubly linked list with a sentinel end node."""


class Node:
    """A list node holding one value."""

    __slots__ = ("value", "_next", "_previous")

    def __init__(self, value=None):
        self.value = value
        self._next = self
        self._previous = self

    def next(self):
        """Return the following node (the end node after the last one)."""
        return self._next

    def previous(self):
        """Return the preceding node (the end node before the first one)."""
        return self._previous

    def _unlink(self):
        self._previous._next = self._next
        self._next._previous = self._previous
        self._next = self
        self._previous = self

    def _link_before(self, after):
        self._previous = after._previous
        self._next = after
        self._previous._next = self
        after._previous = self

    def __repr__(self):
        return f"Node({self.value!r})"


class LinkedList:
    """Doubly linked list whose nodes stay valid while others are added or removed."""

    def __init__(self):
        self._end = Node()

    def _nodes(self):
        node = self._end._next
        while node is not self._end:
            following = node._next
            yield node
            node = following

    def __iter__(self):
        return (node.value for node in self._nodes())

    def __reversed__(self):
        node = self._end._previous
        while node is not self._end:
            preceding = node._previous
            yield node.value
            node = preceding

    def __len__(self):
        return sum(1 for _ in self._nodes())

    def empty(self):
        return self._end._next is self._end

    def front(self):
        """Return the first node, or the end node when the list is empty."""
        return self._end._next

    def back(self):
        """Return the last node, or the end node when the list is empty."""
        return self._end._previous

    def end(self):
        """Return the sentinel node that marks the end of the list."""
        return self._end

    def push_front(self, value):
        return self.insert(self.front(), value)

    def push_back(self, value):
        return self.insert(self._end, value)

    def insert(self, before, value):
        """Insert ``value`` in a new node placed before ``before``; return the node."""
        node = Node(value)
        node._link_before(before)
        return node

    def splice(self, before, node):
        """Move ``node``, possibly from another list, to just before ``before``."""
        if before is node:
            return
        node._unlink()
        node._link_before(before)

    def erase(self, node, release=None):
        """Remove ``node``, passing its value to ``release`` if given."""
        if node is self._end:
            raise ValueError("the end node cannot be erased")
        node._unlink()
        if release is not None:
            release(node.value)

    def clear(self, release=None):
        while not self.empty():
            self.erase(self.front(), release)

    def find(self, value, compare=None):
        """Return the first node whose value matches ``value``, or None.

        ``compare(value, item)`` returns 0 on a match; without it, equality is used.
        """
        for node in self._nodes():
            if compare is None:
                if node.value == value:
                    return node
            elif compare(value, node.value) == 0:
                return node
        return None
"""An ordered mapping backed by a red-black tree, with bidirectional cursors."""

import operator

from railledger.errors import IndexOutOfBound, InvalidIterator
from railledger.rbtree import RedBlackTree


class MapCursor:
    """A position in a RedBlackMap: an entry, or the past-the-end position."""

    __slots__ = ("_map", "_node")

    def __init__(self, owner, node):
        self._map = owner
        self._node = node

    def advance(self):
        """Move to the next entry; past the last one is the end position."""
        if self._node is None:
            raise InvalidIterator("cannot advance past the end")
        self._node = self._map._tree.successor(self._node)
        return self

    def retreat(self):
        """Move to the previous entry; from the end position, to the last entry."""
        tree = self._map._tree
        if tree.root is None:
            raise InvalidIterator("map is empty")
        if self._node is None:
            self._node = tree.back()
            return self
        previous = tree.predecessor(self._node)
        if previous is None:
            raise InvalidIterator("cannot retreat before the first entry")
        self._node = previous
        return self

    def item(self):
        """The ``(key, value)`` pair at this position."""
        if self._node is None:
            raise InvalidIterator("the end position holds no entry")
        return self._node.key, self._node.value

    def is_end(self):
        return self._node is None

    def __eq__(self, other):
        if not isinstance(other, MapCursor):
            return NotImplemented
        return self._map is other._map and self._node is other._node

    __hash__ = None

    def __repr__(self):
        if self._node is None:
            return "MapCursor(end)"
        return f"MapCursor({self._node.key!r})"


class RedBlackMap:
    """A mapping with unique keys kept in the order given by ``less``."""

    def __init__(self, items=None, less=operator.lt):
        self._tree = RedBlackTree(less)
        if items is not None:
            if hasattr(items, "items"):
                items = items.items()
            for key, value in items:
                self._tree.insert(key, value)

    def at(self, key):
        """The value for ``key``; raises IndexOutOfBound when it is absent."""
        node = self._tree.find(key)
        if node is None:
            raise IndexOutOfBound(f"no key {key!r}")
        return node.value

    def __getitem__(self, key):
        return self.at(key)

    def __setitem__(self, key, value):
        node, inserted = self._tree.insert(key, value)
        if not inserted:
            node.value = value

    def setdefault(self, key, default=None):
        """The value for ``key``, inserting ``default`` first when it is absent."""
        node, _ = self._tree.insert(key, default)
        return node.value

    def insert(self, key, value):
        """Insert unless the key exists; return ``(cursor, inserted)``."""
        node, inserted = self._tree.insert(key, value)
        return MapCursor(self, node), inserted

    def __delitem__(self, key):
        if not self._tree.remove(key):
            raise IndexOutOfBound(f"no key {key!r}")

    def erase(self, cursor):
        """Remove the entry a cursor of this map points at."""
        if cursor._map is not self or cursor._node is None:
            raise InvalidIterator("cursor does not point at an entry of this map")
        self._tree.remove(cursor._node.key)

    def __contains__(self, key):
        return self._tree.find(key) is not None

    def count(self, key):
        """1 when ``key`` is present, otherwise 0."""
        return 1 if key in self else 0

    def __len__(self):
        return len(self._tree)

    def _nodes(self):
        node = self._tree.front()
        while node is not None:
            yield node
            node = self._tree.successor(node)

    def __iter__(self):
        for node in self._nodes():
            yield node.key

    def items(self):
        """Yield ``(key, value)`` pairs in key order."""
        for node in self._nodes():
            yield node.key, node.value

    def clear(self):
        self._tree.clear()

    def copy(self):
        """An independent map with the same entries."""
        other = RedBlackMap(less=self._tree.less)
        other._tree = self._tree.copy()
        return other

    def find(self, key):
        """A cursor at ``key``, or the end cursor when it is absent."""
        return MapCursor(self, self._tree.find(key))

    def begin(self):
        return MapCursor(self, self._tree.front())

    def end(self):
        return MapCursor(self, None)

    def is_valid(self):
        """Check the red-black invariants of the underlying tree."""
        return self._tree.is_valid()

    def __repr__(self):
        inner = ", ".join(f"{k!r}: {v!r}" for k, v in self.items())
        return f"RedBlackMap({{{inner}}})"
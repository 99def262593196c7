"""A growable sequence with bounds-checked access."""

from railledger.errors import ContainerIsEmpty, IndexOutOfBound


class Vector:
    """A sequence that raises container errors instead of wrapping or clamping.

    Positions are plain non-negative indices; negative positions are
    rejected rather than counted from the end.
    """

    def __init__(self, items=None):
        self._data = list(items) if items is not None else []

    def _check(self, pos, limit):
        if not isinstance(pos, int) or isinstance(pos, bool):
            raise TypeError(f"position must be an int, got {type(pos).__name__}")
        if pos < 0 or pos >= limit:
            raise IndexOutOfBound(f"position {pos} outside [0, {limit})")

    def at(self, pos):
        """The element at ``pos``; raises IndexOutOfBound outside ``[0, len)``."""
        self._check(pos, len(self._data))
        return self._data[pos]

    def __getitem__(self, pos):
        return self.at(pos)

    def __setitem__(self, pos, value):
        self._check(pos, len(self._data))
        self._data[pos] = value

    def front(self):
        """The first element; raises ContainerIsEmpty when there is none."""
        if not self._data:
            raise ContainerIsEmpty("vector is empty")
        return self._data[0]

    def back(self):
        """The last element; raises ContainerIsEmpty when there is none."""
        if not self._data:
            raise ContainerIsEmpty("vector is empty")
        return self._data[-1]

    def __len__(self):
        return len(self._data)

    def __iter__(self):
        return iter(self._data)

    def insert(self, index, value):
        """Insert ``value`` so that it ends up at ``index``; ``index`` may equal the length."""
        self._check(index, len(self._data) + 1)
        self._data.insert(index, value)
        return index

    def erase(self, index):
        """Remove and return the element at ``index``."""
        self._check(index, len(self._data))
        return self._data.pop(index)

    def append(self, value):
        self._data.append(value)

    def pop(self):
        """Remove and return the last element; raises ContainerIsEmpty when empty."""
        if not self._data:
            raise ContainerIsEmpty("vector is empty")
        return self._data.pop()

    def clear(self):
        self._data.clear()

    def __eq__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self._data == other._data

    __hash__ = None

    def __repr__(self):
        return f"Vector({self._data!r})"
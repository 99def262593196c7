"""A stack of fixed-size byte records kept in a file."""

import struct
from pathlib import Path

from railledger.errors import ContainerIsEmpty

_COUNT = struct.Struct("<Q")


class DiskStack:
    """A LIFO stack stored on disk.

    The file starts with the element count as an unsigned 64-bit integer,
    followed by the records in push order. The count is written back when
    the stack is closed.
    """

    def __init__(self, path, record_size):
        self.path = Path(path)
        if "." not in self.path.name:
            raise ValueError("wrong file format")
        if record_size <= 0:
            raise ValueError("record_size must be positive")
        self.record_size = record_size
        if self.path.exists():
            self._file = self.path.open("r+b")
            head = self._file.read(_COUNT.size)
            self._size = _COUNT.unpack(head)[0] if len(head) == _COUNT.size else 0
        else:
            self._file = self.path.open("w+b")
            self._size = 0

    def _offset(self, position):
        return _COUNT.size + self.record_size * position

    def _require_open(self):
        if self._file is None:
            raise ValueError("stack is closed")

    def push(self, value):
        """Put a record of exactly ``record_size`` bytes on top."""
        self._require_open()
        data = bytes(value)
        if len(data) != self.record_size:
            raise ValueError(f"record must be {self.record_size} bytes, got {len(data)}")
        self._file.seek(self._offset(self._size))
        self._file.write(data)
        self._size += 1

    def pop(self):
        """Remove and return the top record."""
        self._require_open()
        if self._size == 0:
            raise ContainerIsEmpty("stack is empty")
        self._file.seek(self._offset(self._size - 1))
        data = self._file.read(self.record_size)
        if len(data) != self.record_size:
            raise OSError("I/O error while reading")
        self._size -= 1
        return data

    def __len__(self):
        return self._size

    def is_empty(self):
        return self._size == 0

    def close(self):
        """Write the element count back and close the file."""
        if self._file is None:
            return
        self._file.seek(0)
        self._file.write(_COUNT.pack(self._size))
        self._file.close()
        self._file = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
"""A file of fixed-size records with a small integer header and a free list."""

import struct
from pathlib import Path

_INT = struct.Struct("<i")


class MemoryRiver:
    """Stores fixed-size byte records in one file.

    The header holds ``info_len`` integers; the first counts writes, the
    second heads a chain of freed record slots that new writes reuse.
    """

    def __init__(self, path, record_size, info_len=2):
        if record_size < _INT.size:
            raise ValueError("record_size must hold at least one integer")
        if info_len < 2:
            raise ValueError("info_len must be at least 2")
        self.record_size = record_size
        self.info_len = info_len
        self.path = Path(path)
        self.initialise()

    @property
    def header_size(self):
        return self.info_len * _INT.size

    def initialise(self, path=None):
        """Create the file with a zeroed header unless it already exists."""
        if path is not None:
            self.path = Path(path)
        if not self.path.exists():
            self.path.write_bytes(_INT.pack(0) * self.info_len)

    def _check_info(self, n):
        if not 1 <= n <= self.info_len:
            raise IndexError(f"header slot {n} outside 1..{self.info_len}")

    def _read_at(self, offset, size):
        with self.path.open("rb") as fh:
            fh.seek(offset)
            data = fh.read(size)
        if len(data) != size:
            raise EOFError(f"no record of {size} bytes at offset {offset}")
        return data

    def _write_at(self, offset, data):
        with self.path.open("r+b") as fh:
            fh.seek(offset)
            fh.write(data)

    def _as_record(self, record):
        data = bytes(record)
        if len(data) != self.record_size:
            raise ValueError(f"record must be {self.record_size} bytes, got {len(data)}")
        return data

    def get_info(self, n):
        """Return the n-th header integer (1-based)."""
        self._check_info(n)
        return _INT.unpack(self._read_at((n - 1) * _INT.size, _INT.size))[0]

    def write_info(self, value, n):
        """Store ``value`` as the n-th header integer (1-based)."""
        self._check_info(n)
        self._write_at((n - 1) * _INT.size, _INT.pack(value))

    def write(self, record):
        """Store a new record and return its offset."""
        data = self._as_record(record)
        count = self.get_info(1)
        free_head = self.get_info(2)
        if free_head == 0:
            index = self.header_size + count * self.record_size
        else:
            index = free_head
            free_head = _INT.unpack(self._read_at(index, _INT.size))[0]
        self._write_at(index, data)
        self.write_info(count + 1, 1)
        self.write_info(free_head, 2)
        return index

    def update(self, record, index):
        """Overwrite the record at ``index``."""
        self._write_at(index, self._as_record(record))

    def read(self, index):
        """Return the record stored at ``index``."""
        return self._read_at(index, self.record_size)

    def delete(self, index):
        """Put the slot at ``index`` on the free chain."""
        free_head = self.get_info(2)
        self._write_at(index, _INT.pack(free_head))
        self.write_info(index, 2)

    def clear(self):
        """Drop every record and reset the header."""
        self.path.write_bytes(b"")
        self.path.unlink()
        self.initialise()
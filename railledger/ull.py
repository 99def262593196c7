"""An unrolled linked list of sorted (key, value) nodes stored block by block in a file."""

import bisect
import struct
from dataclasses import dataclass, field

from railledger.filestorage import MemoryRiver

KEY_BYTES = 64
BLOCK_SIZE = 500
BLOCK_SPLIT_THRESHOLD = BLOCK_SIZE << 1
BLOCK_MERGE_THRESHOLD = 250
BLOCK_CAPACITY = (BLOCK_SIZE << 1) + 10

_HEADER = struct.Struct("<iiii")  # nxt, pre, pos, size
_NODE = struct.Struct("<ii64s")  # offset, value, key
RECORD_SIZE = _HEADER.size + _NODE.size * BLOCK_CAPACITY


@dataclass(frozen=True, order=True)
class UllNode:
    """A key with an integer value; ordered by key, then value."""

    key: str
    value: int
    offset: int = field(default=0, compare=False)

    def __post_init__(self):
        if len(self.key.encode()) >= KEY_BYTES:
            raise ValueError(f"key longer than {KEY_BYTES - 1} bytes: {self.key!r}")


@dataclass
class UllBlock:
    """A sorted run of nodes linked to its neighbours by file offsets."""

    nodes: list = field(default_factory=list)
    nxt: int = 0
    pre: int = 0
    pos: int = 0

    def front(self):
        """The smallest node, or None when the block is empty."""
        return self.nodes[0] if self.nodes else None

    def back(self):
        """The largest node, or None when the block is empty."""
        return self.nodes[-1] if self.nodes else None

    def add(self, node):
        """Insert ``node`` in order; return False when it is already present."""
        i = bisect.bisect_left(self.nodes, node)
        if i < len(self.nodes) and self.nodes[i] == node:
            return False
        self.nodes.insert(i, node)
        return True

    def remove(self, node):
        """Remove ``node``; return False when it is absent."""
        i = bisect.bisect_left(self.nodes, node)
        if i >= len(self.nodes) or self.nodes[i] != node:
            return False
        del self.nodes[i]
        return True

    def search(self, key):
        """The values of the nodes whose key equals ``key``, in order."""
        return [node.value for node in self.nodes if node.key == key]

    def _encode(self):
        if len(self.nodes) > BLOCK_CAPACITY:
            raise ValueError("block holds more nodes than fit in a record")
        parts = [_HEADER.pack(self.nxt, self.pre, self.pos, len(self.nodes))]
        parts.extend(_NODE.pack(n.offset, n.value, n.key.encode()) for n in self.nodes)
        data = b"".join(parts)
        return data + bytes(RECORD_SIZE - len(data))

    @classmethod
    def _decode(cls, data):
        nxt, pre, pos, size = _HEADER.unpack_from(data)
        body = data[_HEADER.size:_HEADER.size + size * _NODE.size]
        nodes = [
            UllNode(raw.split(b"\0", 1)[0].decode(), value, offset)
            for offset, value, raw in _NODE.iter_unpack(body)
        ]
        return cls(nodes, nxt, pre, pos)


class Ull:
    """A file-backed sorted multimap from string keys to integer values."""

    def __init__(self, path):
        self._river = MemoryRiver(path, RECORD_SIZE)
        self._head = self._river.header_size

    def _load(self, pos):
        return UllBlock._decode(self._river.read(pos))

    def _store(self, block):
        self._river.update(block._encode(), block.pos)

    def _blocks(self):
        if self._river.get_info(1) == 0:
            return
        pos = self._head
        while pos:
            block = self._load(pos)
            yield block
            pos = block.nxt

    def find(self, key):
        """The values stored under ``key``, in ascending order."""
        found = []
        for block in self._blocks():
            if block.nodes and block.front().key <= key <= block.back().key:
                found.extend(block.search(key))
        return found

    def add(self, node):
        """Insert ``node``; return False when an equal node is already stored."""
        target = None
        for block in self._blocks():
            if (block.nodes and node < block.back()) or block.nxt == 0:
                target = block
                break
        if target is None:
            block = UllBlock([node])
            block.pos = self._river.write(block._encode())
            self._store(block)
            return True
        if not target.add(node):
            return False
        if len(target.nodes) > BLOCK_SPLIT_THRESHOLD:
            self._split(target)
        else:
            self._store(target)
        return True

    def remove(self, node):
        """Remove ``node``; return False when it is not stored."""
        for block in self._blocks():
            if not block.nodes or node < block.front() or node > block.back():
                continue
            if not block.remove(node):
                return False
            if block.pos != self._head and len(block.nodes) <= BLOCK_MERGE_THRESHOLD:
                self._merge(block)
            else:
                self._store(block)
            return True
        return False

    def _split(self, block):
        half = len(block.nodes) // 2
        new = UllBlock(block.nodes[half:], nxt=block.nxt, pre=block.pos)
        block.nodes = block.nodes[:half]
        new.pos = self._river.write(new._encode())
        if new.nxt:
            after = self._load(new.nxt)
            after.pre = new.pos
            self._store(after)
        block.nxt = new.pos
        self._store(block)
        self._store(new)

    def _merge(self, block):
        pre = self._load(block.pre)
        if block.nxt:
            after = self._load(block.nxt)
            after.pre = pre.pos
            self._store(after)
        pre.nxt = block.nxt
        pre.nodes.extend(block.nodes)
        self._river.delete(block.pos)
        if len(pre.nodes) > BLOCK_SPLIT_THRESHOLD:
            self._split(pre)
        else:
            self._store(pre)

    def find_all(self):
        """Every stored value, in node order."""
        return [node.value for block in self._blocks() for node in block.nodes]

    def clear(self):
        self._river.clear()

    def __len__(self):
        return len(self.find_all())
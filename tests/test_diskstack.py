import struct

import pytest

from railledger.diskstack import DiskStack
from railledger.errors import ContainerIsEmpty


def test_push_pop_is_lifo(tmp_path):
    with DiskStack(tmp_path / "log.dat", 4) as stack:
        for word in (b"aaaa", b"bbbb", b"cccc"):
            stack.push(word)
        assert len(stack) == 3
        assert [stack.pop() for _ in range(3)] == [b"cccc", b"bbbb", b"aaaa"]
        assert stack.is_empty()


def test_contents_survive_reopen(tmp_path):
    path = tmp_path / "log.dat"
    with DiskStack(path, 2) as stack:
        stack.push(b"xy")
        stack.push(b"zw")
    with DiskStack(path, 2) as stack:
        assert len(stack) == 2
        assert stack.pop() == b"zw"
        assert stack.pop() == b"xy"


def test_header_holds_count(tmp_path):
    path = tmp_path / "log.dat"
    with DiskStack(path, 3) as stack:
        stack.push(b"abc")
        stack.push(b"def")
    raw = path.read_bytes()
    assert raw[:8] == struct.pack("<Q", 2)
    assert raw[8:] == b"abcdef"


def test_pop_empty_raises(tmp_path):
    with DiskStack(tmp_path / "log.dat", 4) as stack:
        with pytest.raises(ContainerIsEmpty):
            stack.pop()


def test_name_without_extension_rejected(tmp_path):
    with pytest.raises(ValueError):
        DiskStack(tmp_path / "stackfile", 4)


def test_wrong_record_size_rejected(tmp_path):
    with DiskStack(tmp_path / "log.dat", 4) as stack:
        with pytest.raises(ValueError):
            stack.push(b"too long")
        assert len(stack) == 0


def test_pop_then_push_overwrites(tmp_path):
    path = tmp_path / "log.dat"
    with DiskStack(path, 1) as stack:
        stack.push(b"a")
        stack.push(b"b")
        stack.pop()
        stack.push(b"c")
    with DiskStack(path, 1) as stack:
        assert stack.pop() == b"c"
        assert stack.pop() == b"a"
        assert stack.is_empty()
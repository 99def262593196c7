# railledger

Storage building blocks and record types for a small railway ticketing
database: ordered containers, files of fixed-size records, page
replacement policies, and the train, station and order records a ticket
system works with. It has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `railledger.timetype`
  - `TimeType`: a frozen, ordered dataclass holding minutes counted from
    06-01 00:00, covering June, July and August.
    `TimeType.from_string("MM-DD HH:MM")` parses; `format()` and `str()`
    render back to `MM-DD HH:MM`. Adding an `int` or another `TimeType`
    gives a `TimeType`; subtracting a `TimeType` gives minutes as an `int`,
    subtracting an `int` gives a `TimeType`. `date()` is the start of the
    day, `time_of_day()` the minutes since the start of the day, and
    `int(t)` the raw minute count.
  - `parse_int(text)`: reads a string of decimal digits as an integer.
- `railledger.command`
  - `Command(text, delimiter)`: walks a line token by token with
    `next_token()` (an empty string once the line is used up) or by
    iteration. Runs of the delimiter are skipped, and a carriage return
    ends the line. `count()` stores and returns the number of tokens in
    `cnt`; `clear()` and `set_delimiter()` reset or change the state.
- `railledger.filestorage`
  - `MemoryRiver(path, record_size, info_len=2)`: a file of fixed-size
    byte records behind a header of `info_len` integers. `write()` returns
    the offset of the stored record and reuses slots freed by `delete()`;
    `read()`, `update()`, `get_info()`, `write_info()` and `clear()` work
    on offsets and 1-based header slots.
- `railledger.diskstack`
  - `DiskStack(path, record_size)`: a stack of fixed-size byte records in
    a file whose name must contain a dot. `push()`, `pop()` (raises
    `ContainerIsEmpty` when empty), `len()`, `is_empty()`. The element
    count is written to the file by `close()`, which the context manager
    calls on exit; reopening the file picks the stack up again.
- `railledger.replacer`
  - `LRUReplacer(num_pages)`: `unpin()` makes a frame evictable, `pin()`
    withdraws it, `victim()` removes and returns the least recently
    unpinned frame or `None`. `len()` and `clear()`.
  - `InnodbReplacer(num_pages)`: the same interface, keeping an old half
    and a young half; newly unpinned frames enter the young half and
    `victim()` takes from the old one.
- `railledger.rbtree`
  - `RedBlackTree(less)`: a red-black tree of `Node` objects (key, value,
    `Color`, parent and child links) with unique keys ordered by the
    `less` function. `insert()` returns `(node, inserted)`, `remove()`
    returns whether the key was present; also `find()`, `front()`,
    `back()`, `successor()`, `predecessor()`, `copy()`, `clear()`,
    `len()` and `is_valid()`, which checks ordering, colours, parent links
    and the stored size.
- `railledger.rbmap`
  - `RedBlackMap(items=None, less=operator.lt)`: an ordered mapping on the
    tree. `m[key]` and `at()` raise `IndexOutOfBound` for a missing key;
    `m[key] = value`, `setdefault()`, `insert()` (leaves an existing key
    alone and returns `(cursor, inserted)`), `del m[key]`, `erase(cursor)`,
    `in`, `count()`, iteration over keys in order, `items()`, `clear()`,
    `copy()` and `is_valid()`.
  - `MapCursor`: returned by `find()`, `begin()`, `end()` and `insert()`.
    `advance()`, `retreat()` and `item()` raise `InvalidIterator` when
    moved or read where that is not allowed; `is_end()` tells whether it
    is past the last entry.
- `railledger.ull`
  - `Ull(path)`: a file-backed sorted multimap from string keys (under 64
    bytes) to integer values, kept as linked blocks that split when they
    grow past 1000 nodes and merge into the block before them when they
    shrink to 250. `add(node)` and `remove(node)` return whether anything
    changed; `find(key)` returns the values under a key in ascending
    order, `find_all()` every value, plus `clear()` and `len()`.
  - `UllNode(key, value)`: ordered by key, then value.
  - `UllBlock`: one sorted block, with `front()`, `back()`, `add()`,
    `remove()` and `search()`.
- `railledger.vector`
  - `Vector(items=None)`: a growable sequence that raises
    `IndexOutOfBound` for any position outside range (negative positions
    included) and `ContainerIsEmpty` from `front()`, `back()` and `pop()`
    when empty. Also `at()`, `insert(index, value)` (index may equal the
    length), `erase(index)`, `append()`, `clear()`, `len()` and iteration.
- `railledger.records`
  - `User`, ordered by user name.
  - `Train`, with `Train.build(...)` turning the `|`-separated fields of
    an add-train request into station names, price prefix sums, and
    arrival and departure times relative to the first departure; ordered
    by train id.
  - `DayTrain`: seats left per leg, with `query_seat(left, right)` and
    `modify_seat(left, right, delta)` over 1-based station ranges.
  - `Station`, `Ticket` (with `cost()` and `time()`), `Status`
    (`SUCCESS`, `PENDING`, `REFUNDED`), `Order` and `PendingOrder`.
- `railledger.errors`
  - `ContainerError` and its subclasses `IndexOutOfBound` (also an
    `IndexError`), `InvalidIterator` and `ContainerIsEmpty`.

## Examples

```python
from railledger.timetype import TimeType

t = TimeType.from_string("07-02 08:05")
print(t.format())           # 07-02 08:05
print((t + 1440).format())  # 07-03 08:05
```

```python
from railledger.rbmap import RedBlackMap

m = RedBlackMap()
m["b"] = 2
m["a"] = 1
print(list(m))    # ['a', 'b']
print(m.at("a"))  # 1
```

```python
from railledger.command import Command

cmd = Command("-u alice -p password", " ")
print(list(cmd))  # ['-u', 'alice', '-p', 'password']
```

```python
from railledger.records import Train

train = Train.build(
    "G1", 3, 100, "A|B|C", "10|20", "08:00",
    "60|90", "5", "06-01|06-30", "G",
)
print(train.price_sums)  # [0, 10, 30]
```

## What this package does not do

There is no command to run and no interpreter for ticket-system requests:
adding users and trains, logging in, querying and buying tickets, refunds
and waiting lists are not implemented here. The records in
`railledger.records` are plain in-memory dataclasses; nothing in the
package stores them to disk. Persistent storage is limited to byte records
in `MemoryRiver` and `DiskStack` and to string-to-integer entries in
`Ull`. There is no B+ tree index and no buffer pool manager; the
replacers only decide which frame to evict.
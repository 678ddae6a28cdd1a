# iterkit

Small iterator adaptors for everyday Python. The package has no dependencies
outside the standard library.

## Installation

```
pip install iterkit
```

To run the test suite, install the test extra and run pytest:

```
pip install "iterkit[test]"
pytest
```

## Modules

### Fixed-size tuples and windows: `iterkit.tuples`

```python
from iterkit.tuples import tuples, tuple_windows, circular_tuple_windows

it = tuples(range(5), 3)
list(it)                    # [(0, 1, 2)]
list(it.into_buffer())      # [3, 4], the leftover items

list(tuple_windows([1, 2, 3, 4], 2))           # [(1, 2), (2, 3), (3, 4)]
list(circular_tuple_windows([1, 2, 3], 2))     # [(1, 2), (2, 3), (3, 1)]
```

- `tuples(iterable, n)` returns a `Tuples` iterator that yields
  non-overlapping tuples of `n` items. Once the source runs out, the items
  that were too few to fill a last tuple are kept. `into_buffer()` returns
  them as a `TupleBuffer`, an iterator that also supports `len()`.
- `tuple_windows(iterable, n)` yields every contiguous window of `n` items.
  If the input has fewer than `n` items, it yields nothing.
- `circular_tuple_windows(iterable, n)` reads the whole input. It then yields
  one window starting at each item, wrapping around to the start.

All three raise `ValueError` when `n` is less than 1.

### Removing duplicates: `iterkit.unique`

```python
from iterkit.unique import unique, unique_by

list(unique([0, 1, 2, 3, 2, 1, 3]))                       # [0, 1, 2, 3]
list(unique_by(["aaa", "bbbbb", "aa"], lambda s: s[:2]))  # ["aaa", "bbbbb"]
```

Both functions return a `UniqueBy` iterator. It yields an item only if no
item with the same key has been yielded before. Keys must be hashable.

- `next_back()` returns the last remaining item whose key has not been seen,
  and raises `StopIteration` when there is none. The first call reads the rest
  of the source into memory. `reversed()` on a `UniqueBy` takes items from the
  back in the same way.
- `count()` consumes the rest of the iterator and returns how many new
  distinct keys it held.

### Position tags: `iterkit.with_position`

```python
from iterkit.with_position import with_position, Position

for pos, value in with_position("abc"):
    print(pos, value)   # Position.FIRST a / Position.MIDDLE b / Position.LAST c
```

`with_position(iterable)` yields `(Position, item)` pairs. If the input has a
single item, that item is tagged `Position.ONLY`.

### Zipping

```python
from iterkit.zip_eq import zip_eq, ZipLengthError
from iterkit.zip_longest import zip_longest, Left, Right, Both
from iterkit.ziptuple import multizip

list(zip_eq([1, 2], "ab"))       # [(1, 'a'), (2, 'b')]
list(zip_eq([1, 2], [1]))        # raises ZipLengthError

list(zip_longest([1, 2, 3], "a"))
# [Both(left=1, right='a'), Left(value=2), Left(value=3)]

list(multizip(range(3), range(2), "xyz"))   # [(0, 0, 'x'), (1, 1, 'y')]
```

- `zip_eq(a, b)` yields pairs. It yields every pair that can be formed, and
  raises `ZipLengthError` (a subclass of `ValueError`) when one input runs out
  before the other.
- `zip_longest(a, b)` returns a `ZipLongest` iterator. It keeps going until
  both inputs are exhausted. Each element is a frozen dataclass: `Both`
  (fields `left` and `right`), or `Left` or `Right` (field `value`).
- `multizip(*iterables)` returns a `MultiZip` iterator. It stops as soon as
  any input is exhausted. It raises `TypeError` when it is given no
  iterables.

`ZipLongest` and `MultiZip` also provide `next_back()` and support
`reversed()`. The first call reads the remaining items of every input into
memory. `MultiZip.next_back()` first drops the surplus items at the end of
the longer inputs, so the tuples taken from the back are the same ones that
would come from the front.
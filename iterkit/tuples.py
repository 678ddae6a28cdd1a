"""Group the items of an iterable into fixed-size tuples."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from itertools import cycle, islice
from typing import Any, Generic, TypeVar

T = TypeVar("T")

__all__ = [
    "Tuples",
    "TupleBuffer",
    "tuples",
    "tuple_windows",
    "circular_tuple_windows",
]


def _check_size(n: int) -> None:
    if n < 1:
        raise ValueError(f"tuple size must be at least 1, got {n}")


class TupleBuffer(Generic[T]):
    """Iterator over the items that were too few to fill a last tuple."""

    def __init__(self, items: Iterable[T]) -> None:
        self._items: deque[T] = deque(items)

    def __iter__(self) -> TupleBuffer[T]:
        return self

    def __next__(self) -> T:
        if not self._items:
            raise StopIteration
        return self._items.popleft()

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"TupleBuffer({list(self._items)!r})"


class Tuples(Generic[T]):
    """Iterator yielding consecutive, non-overlapping tuples of ``n`` items.

    Items left over at the end, fewer than ``n``, are kept and can be
    retrieved with :meth:`into_buffer`.
    """

    def __init__(self, iterable: Iterable[T], n: int) -> None:
        _check_size(n)
        self._iter = iter(iterable)
        self._n = n
        self._buffer: tuple[T, ...] = ()
        self._exhausted = False

    def __iter__(self) -> Tuples[T]:
        return self

    def __next__(self) -> tuple[T, ...]:
        chunk: tuple[T, ...] = () if self._exhausted else tuple(islice(self._iter, self._n))
        if len(chunk) == self._n:
            return chunk
        # The source is treated as fused from here on; the partial chunk
        # read by this call replaces whatever the buffer held before.
        self._exhausted = True
        self._buffer = chunk
        raise StopIteration

    def into_buffer(self) -> TupleBuffer[T]:
        """Return the items read that were not enough to form a tuple."""
        return TupleBuffer(self._buffer)


def tuples(iterable: Iterable[T], n: int) -> Tuples[T]:
    """Group ``iterable`` into tuples of ``n`` items each."""
    return Tuples(iterable, n)


def _windows(iterable: Iterable[Any], n: int) -> Iterator[tuple[Any, ...]]:
    it = iter(iterable)
    window: deque[Any] = deque(islice(it, n), maxlen=n)
    if len(window) < n:
        return
    yield tuple(window)
    for item in it:
        window.append(item)
        yield tuple(window)


def tuple_windows(iterable: Iterable[T], n: int) -> Iterator[tuple[T, ...]]:
    """Yield every contiguous window of ``n`` items as a tuple."""
    _check_size(n)
    return _windows(iterable, n)


def circular_tuple_windows(iterable: Iterable[T], n: int) -> Iterator[tuple[T, ...]]:
    """Yield one window of ``n`` items starting at each item, wrapping around."""
    _check_size(n)
    items = list(iterable)
    return islice(_windows(cycle(items), n), len(items))
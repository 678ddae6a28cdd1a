"""Iterate two iterables together until both are exhausted."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

A = TypeVar("A")
B = TypeVar("B")

__all__ = ["Left", "Right", "Both", "ZipLongest", "zip_longest"]

_MISSING: Any = object()


@dataclass(frozen=True)
class Left(Generic[A]):
    """Only the first iterable had an item."""

    value: A


@dataclass(frozen=True)
class Right(Generic[B]):
    """Only the second iterable had an item."""

    value: B


@dataclass(frozen=True)
class Both(Generic[A, B]):
    """Both iterables had an item."""

    left: A
    right: B


EitherOrBoth = Union[Left[A], Right[B], Both[A, B]]


class _Side:
    """A fused source that can be read into memory for access from the back."""

    __slots__ = ("_iter", "_items")

    def __init__(self, iterable: Iterable[Any]) -> None:
        self._iter: Iterator[Any] | None = iter(iterable)
        self._items: deque[Any] | None = None

    def front(self) -> Any:
        if self._items is not None:
            return self._items.popleft() if self._items else _MISSING
        if self._iter is None:
            return _MISSING
        try:
            return next(self._iter)
        except StopIteration:
            self._iter = None
            return _MISSING

    def materialize(self) -> deque[Any]:
        if self._items is None:
            self._items = deque(self._iter) if self._iter is not None else deque()
            self._iter = None
        return self._items


class ZipLongest(Generic[A, B]):
    """Fused iterator over two iterables yielding Left, Right or Both.

    :meth:`next_back` reads the remaining items of both sources into memory
    the first time it is called.
    """

    def __init__(self, a: Iterable[A], b: Iterable[B]) -> None:
        self._a = _Side(a)
        self._b = _Side(b)

    def __iter__(self) -> ZipLongest[A, B]:
        return self

    def __next__(self) -> EitherOrBoth[A, B]:
        x = self._a.front()
        y = self._b.front()
        if x is _MISSING and y is _MISSING:
            raise StopIteration
        if y is _MISSING:
            return Left(x)
        if x is _MISSING:
            return Right(y)
        return Both(x, y)

    def next_back(self) -> EitherOrBoth[A, B]:
        """Return the last remaining element; raise StopIteration if none."""
        a = self._a.materialize()
        b = self._b.materialize()
        if len(a) == len(b):
            if not a:
                raise StopIteration
            return Both(a.pop(), b.pop())
        if len(a) > len(b):
            return Left(a.pop())
        return Right(b.pop())

    def __reversed__(self) -> Iterator[EitherOrBoth[A, B]]:
        while True:
            try:
                yield self.next_back()
            except StopIteration:
                return


def zip_longest(a: Iterable[A], b: Iterable[B]) -> ZipLongest[A, B]:
    """Zip ``a`` and ``b`` until both are exhausted."""
    return ZipLongest(a, b)
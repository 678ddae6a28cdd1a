"""Filter out items whose key has already been seen."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Hashable, Iterable, Iterator
from typing import Any, Generic, TypeVar

T = TypeVar("T")

__all__ = ["UniqueBy", "unique", "unique_by"]


def _identity(item: Any) -> Any:
    return item


class UniqueBy(Generic[T]):
    """Iterator yielding only items whose key has not been produced before.

    Items can be taken from both ends; :meth:`next_back` reads the rest of
    the source into memory the first time it is called.  Keys must be
    hashable.
    """

    def __init__(
        self,
        iterable: Iterable[T],
        key: Callable[[T], Hashable] | None = None,
    ) -> None:
        self._items: Iterator[T] | deque[T] = iter(iterable)
        self._key = key if key is not None else _identity
        self._seen: set[Hashable] = set()

    def __iter__(self) -> UniqueBy[T]:
        return self

    def _accept(self, item: T) -> bool:
        key = self._key(item)
        if key in self._seen:
            return False
        self._seen.add(key)
        return True

    def __next__(self) -> T:
        items = self._items
        if isinstance(items, deque):
            while items:
                item = items.popleft()
                if self._accept(item):
                    return item
            raise StopIteration
        for item in items:
            if self._accept(item):
                return item
        raise StopIteration

    def next_back(self) -> T:
        """Return the last remaining item with an unseen key.

        Raises StopIteration when there is none.
        """
        if not isinstance(self._items, deque):
            self._items = deque(self._items)
        items = self._items
        while items:
            item = items.pop()
            if self._accept(item):
                return item
        raise StopIteration

    def __reversed__(self) -> Iterator[T]:
        while True:
            try:
                yield self.next_back()
            except StopIteration:
                return

    def count(self) -> int:
        """Consume the rest and return how many new distinct keys it held."""
        before = len(self._seen)
        self._seen.update(self._key(item) for item in self._items)
        if isinstance(self._items, deque):
            self._items.clear()
        return len(self._seen) - before


def unique_by(iterable: Iterable[T], key: Callable[[T], Hashable]) -> UniqueBy[T]:
    """Yield the items of ``iterable`` whose ``key`` has not been seen yet."""
    return UniqueBy(iterable, key)


def unique(iterable: Iterable[T]) -> UniqueBy[T]:
    """Yield the distinct items of ``iterable`` in first-seen order."""
    return UniqueBy(iterable)
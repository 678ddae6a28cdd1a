"""Run any number of iterables in lock step."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from typing import Any

__all__ = ["MultiZip", "multizip"]


class MultiZip:
    """Iterator yielding tuples of one item from each source.

    Stops as soon as any source is exhausted; sources are advanced in order,
    so earlier ones may have given one more item than later ones.
    :meth:`next_back` reads every source into memory the first time it is
    called.
    """

    def __init__(self, *iterables: Iterable[Any]) -> None:
        if not iterables:
            raise TypeError("multizip needs at least one iterable")
        self._sources: list[Iterator[Any] | deque[Any]] = [iter(i) for i in iterables]

    def __iter__(self) -> MultiZip:
        return self

    def __next__(self) -> tuple[Any, ...]:
        items = []
        for source in self._sources:
            if isinstance(source, deque):
                if not source:
                    raise StopIteration
                items.append(source.popleft())
            else:
                items.append(next(source))
        return tuple(items)

    def next_back(self) -> tuple[Any, ...]:
        """Return the last tuple, dropping surplus items of longer sources."""
        sources = [s if isinstance(s, deque) else deque(s) for s in self._sources]
        self._sources = list(sources)
        size = min(len(s) for s in sources)
        for source in sources:
            while len(source) > size:
                source.pop()
        if size == 0:
            raise StopIteration
        return tuple(source.pop() for source in sources)

    def __reversed__(self) -> Iterator[tuple[Any, ...]]:
        while True:
            try:
                yield self.next_back()
            except StopIteration:
                return


def multizip(*args: Iterable[Any]) -> MultiZip:
    """Zip the given iterables into tuples."""
    return MultiZip(*args)
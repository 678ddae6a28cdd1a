"""Tag each item of an iterable with its position in the sequence."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Iterator
from typing import TypeVar

T = TypeVar("T")

__all__ = ["Position", "with_position"]


class Position(enum.Enum):
    """Where an item sits among the items of an iterable."""

    FIRST = "first"
    MIDDLE = "middle"
    LAST = "last"
    ONLY = "only"


def with_position(iterable: Iterable[T]) -> Iterator[tuple[Position, T]]:
    """Yield ``(position, item)`` pairs for each item of ``iterable``."""
    it = iter(iterable)
    try:
        current = next(it)
    except StopIteration:
        return
    position = Position.FIRST
    for following in it:
        yield position, current
        current = following
        position = Position.MIDDLE
    yield (Position.ONLY if position is Position.FIRST else Position.LAST), current
"""Iterate two iterables in lock step, requiring equal lengths."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import TypeVar

A = TypeVar("A")
B = TypeVar("B")

__all__ = ["ZipLengthError", "zip_eq"]

_MISSING = object()


class ZipLengthError(ValueError):
    """Raised when one iterable ends before the other."""


def _zip_eq(ita: Iterator[A], itb: Iterator[B]) -> Iterator[tuple[A, B]]:
    for x in ita:
        y = next(itb, _MISSING)
        if y is _MISSING:
            raise ZipLengthError("zip_eq: first iterable is longer than the second")
        yield x, y  # type: ignore[misc]
    if next(itb, _MISSING) is not _MISSING:
        raise ZipLengthError("zip_eq: second iterable is longer than the first")


def zip_eq(a: Iterable[A], b: Iterable[B]) -> Iterator[tuple[A, B]]:
    """Yield pairs from ``a`` and ``b``; raise ZipLengthError if lengths differ.

    The error is raised when the shorter iterable runs out, after the pairs
    that could be formed have been yielded.
    """
    return _zip_eq(iter(a), iter(b))
"""Iterate a sequence together with everything that comes after each element."""

from __future__ import annotations

from typing import Iterator, Sequence, TypeVar

T = TypeVar("T")


def iter_with_following(items: Sequence[T]) -> Iterator[tuple[T, Sequence[T]]]:
    """Yield ``(item, items[i + 1:])`` for every position ``i``.

    The last element is paired with an empty slice.
    """
    for i, item in enumerate(items):
        yield item, items[i + 1:]

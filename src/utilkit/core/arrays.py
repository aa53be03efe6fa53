"""Sequence helpers.

Pure functions; list and tuple are the "array" shapes.  Strings are
scalars here, never sequences of characters.
"""

from __future__ import annotations

import random
from collections.abc import Iterable, Mapping, Sequence
from typing import Any, TypeVar

from utilkit.core.types import Choice, Maybe, is_absent

T = TypeVar("T")


def first_or_self(value: Maybe[T | Sequence[T]]) -> T | None:
    """Return the first element of a list/tuple, or the value itself.

    Examples:
        >>> first_or_self(["Hello", "World"])
        'Hello'
        >>> first_or_self("Hello")
        'Hello'
        >>> first_or_self([]) is None
        True
        >>> first_or_self(0)
        0
    """
    if is_absent(value):
        return None
    if isinstance(value, (list, tuple)):
        return value[0] if value else None
    return value  # type: ignore[return-value]


def intersperse(sequence: Sequence[T], separator: T) -> list[T]:
    """Insert *separator* between every pair of adjacent elements.

    Examples:
        >>> intersperse(["a", "b", "c"], "-")
        ['a', '-', 'b', '-', 'c']
        >>> intersperse([], "-")
        []
    """
    result: list[T] = []
    for i, item in enumerate(sequence):
        if i:
            result.append(separator)
        result.append(item)
    return result


def random_item(sequence: Sequence[T]) -> T:
    """Return a uniformly random element.

    *sequence* must be non-empty; an empty one raises ``IndexError``.
    """
    return random.choice(sequence)


class IndexMeta:
    """Read-only position metadata for an item in a list.

    Every property is computed on access from the captured index and
    list, so it follows later changes to the list.
    """

    __slots__ = ("_index", "_items")

    def __init__(self, index: int, items: Sequence[Any]) -> None:
        self._index = index
        self._items = items

    @property
    def count(self) -> int:
        """Total number of items in the list."""
        return len(self._items)

    @property
    def current(self) -> int:
        """The 1-based position."""
        return self._index + 1

    @property
    def first(self) -> bool:
        return self._index == 0

    @property
    def last(self) -> bool:
        return self._index == len(self._items) - 1

    @property
    def odd(self) -> bool:
        """Whether the 0-based index is odd."""
        return self._index % 2 == 1

    @property
    def even(self) -> bool:
        """Whether the 0-based index is even."""
        return self._index % 2 == 0

    def __repr__(self) -> str:
        return f"IndexMeta(current={self.current}, count={self.count})"


def get_index_meta(index: int, items: Sequence[Any]) -> IndexMeta:
    """Describe *index* within *items*.

    Examples:
        >>> meta = get_index_meta(1, ["apple", "banana", "cherry"])
        >>> meta.count, meta.current, meta.first, meta.last, meta.odd
        (3, 2, False, False, True)
    """
    return IndexMeta(index, items)


def choices_to_record(choices: Maybe[Iterable[Choice | Mapping[str, Any]]]) -> dict[str, str]:
    """Map each choice id to its name.

    Mappings are validated into :class:`Choice` first.  Ids become string
    keys; a repeated id keeps the last name seen.
    """
    if is_absent(choices):
        return {}
    record: dict[str, str] = {}
    for raw in choices:  # type: ignore[union-attr]
        choice = raw if isinstance(raw, Choice) else Choice.model_validate(raw)
        record[str(choice.id)] = choice.name
    return record


__all__ = [
    "IndexMeta",
    "choices_to_record",
    "first_or_self",
    "get_index_meta",
    "intersperse",
    "random_item",
]

"""Mapping helpers."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from utilkit.core.types import UNDEFINED, Choice, Maybe, is_absent

V = TypeVar("V")


def filter_undefined(mapping: Mapping[str, V]) -> dict[str, V]:
    """Drop entries whose value is ``UNDEFINED``; ``None`` values are kept.

    Examples:
        >>> filter_undefined({"a": 1, "b": UNDEFINED, "c": None})
        {'a': 1, 'c': None}
    """
    return {key: value for key, value in mapping.items() if value is not UNDEFINED}


def has_own_keys(mapping: Maybe[Mapping[str, Any]]) -> bool:
    """Return True if *mapping* has at least one key, whatever its value."""
    if is_absent(mapping):
        return False
    return len(mapping) > 0  # type: ignore[arg-type]


def has_own_defined_keys(mapping: Maybe[Mapping[str, Any]]) -> bool:
    """Return True if at least one value is not ``UNDEFINED`` (``None`` counts)."""
    if is_absent(mapping):
        return False
    return bool(filter_undefined(mapping))  # type: ignore[arg-type]


def record_to_choices(record: Maybe[Mapping[str, str]]) -> list[Choice]:
    """Turn an ``{id: name}`` mapping into choices, in insertion order."""
    if is_absent(record):
        return []
    return [Choice(id=key, name=name) for key, name in record.items()]  # type: ignore[union-attr]


__all__ = [
    "filter_undefined",
    "has_own_defined_keys",
    "has_own_keys",
    "record_to_choices",
]

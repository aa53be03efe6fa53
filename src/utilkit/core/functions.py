"""Placeholder callables for default callbacks."""

from __future__ import annotations

from typing import Any, TypeVar

from utilkit.core.types import UNDEFINED, UndefinedType

T = TypeVar("T")


def noop(*args: Any, **kwargs: Any) -> None:
    """Accept anything and do nothing."""


def identity(value: T) -> T:
    return value


def false_fn(*args: Any, **kwargs: Any) -> bool:
    return False


def true_fn(*args: Any, **kwargs: Any) -> bool:
    return True


def null_fn(*args: Any, **kwargs: Any) -> None:
    return None


def undefined_fn(*args: Any, **kwargs: Any) -> UndefinedType:
    """Return the ``UNDEFINED`` marker."""
    return UNDEFINED


__all__ = ["false_fn", "identity", "noop", "null_fn", "true_fn", "undefined_fn"]

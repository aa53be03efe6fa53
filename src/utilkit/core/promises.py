"""Single-awaitable result helpers.

:func:`settled` and :func:`try_catch` await exactly one awaitable and turn
an ``Exception`` it raises into a tagged value instead of propagating it.
``BaseException`` subclasses such as ``asyncio.CancelledError`` are not
captured, so cancelling the caller still cancels the await.

INVARIANT: exactly one side of a result is set.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, Literal, TypeAlias, TypeGuard, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")
E = TypeVar("E", bound=BaseException)


@dataclass(frozen=True)
class Fulfilled(Generic[T]):
    """Settled outcome of an awaitable that returned."""

    value: T
    status: Literal["fulfilled"] = "fulfilled"


@dataclass(frozen=True)
class Rejected:
    """Settled outcome of an awaitable that raised."""

    reason: BaseException
    status: Literal["rejected"] = "rejected"


SettledResult: TypeAlias = Fulfilled[T] | Rejected


@dataclass(frozen=True)
class Success(Generic[T]):
    """Successful :func:`try_catch` result; unpacks as ``(data, None)``."""

    data: T
    error: None = None

    def __iter__(self) -> Iterator[Any]:
        yield self.data
        yield self.error


@dataclass(frozen=True)
class Failure(Generic[E]):
    """Failed :func:`try_catch` result; unpacks as ``(None, error)``."""

    error: E
    data: None = None

    def __iter__(self) -> Iterator[Any]:
        yield self.data
        yield self.error


Result: TypeAlias = Success[T] | Failure[E]


def is_fulfilled(result: SettledResult[T]) -> TypeGuard[Fulfilled[T]]:
    """Narrow a settled outcome to :class:`Fulfilled`.

    Works as a filter predicate::

        values = [r.value for r in outcomes if is_fulfilled(r)]
    """
    return result.status == "fulfilled"


def is_rejected(result: SettledResult[Any]) -> TypeGuard[Rejected]:
    """Narrow a settled outcome to :class:`Rejected`."""
    return result.status == "rejected"


async def settled(awaitable: Awaitable[T]) -> SettledResult[T]:
    """Await *awaitable* and report how it settled.

    Examples:
        >>> import asyncio
        >>> async def done(): return "done"
        >>> asyncio.run(settled(done()))
        Fulfilled(value='done', status='fulfilled')
    """
    try:
        value = await awaitable
    except Exception as exc:
        logger.debug("Awaitable rejected: %r", exc)
        return Rejected(reason=exc)
    return Fulfilled(value=value)


async def try_catch(awaitable: Awaitable[T]) -> Result[T, Exception]:
    """Await *awaitable* and return its data or error.

    The result unpacks like a pair::

        data, error = await try_catch(fetch())
        if error is not None:
            ...
    """
    try:
        data = await awaitable
    except Exception as exc:
        logger.debug("Awaitable failed: %r", exc)
        return Failure(error=exc)
    return Success(data=data)


__all__ = [
    "Failure",
    "Fulfilled",
    "Rejected",
    "Result",
    "SettledResult",
    "Success",
    "is_fulfilled",
    "is_rejected",
    "settled",
    "try_catch",
]

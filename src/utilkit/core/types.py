"""Shared absence markers, type aliases, and structural models.

Python has a single native absence value, ``None``.  The second absence form
("present key, undefined value") is the :data:`UNDEFINED` singleton.  Helpers
accept either as "absent" and always *return* ``None`` for absence.
"""

from __future__ import annotations

from typing import Any, Final, Literal, TypeAlias, TypeVar, Union

from pydantic import BaseModel

T = TypeVar("T")


class UndefinedType:
    """Type of the :data:`UNDEFINED` singleton."""

    _instance: UndefinedType | None = None

    def __new__(cls) -> UndefinedType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> UndefinedType:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> UndefinedType:
        return self

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED: Final = UndefinedType()

Nullable: TypeAlias = Union[T, None]
Undefinable: TypeAlias = Union[T, UndefinedType]
Maybe: TypeAlias = Union[T, None, UndefinedType]

ID: TypeAlias = str | int

PayRateUnit: TypeAlias = Literal["hour", "day", "week", "month", "year"]


def is_absent(value: object) -> bool:
    """Return True for either absence marker (``None`` or ``UNDEFINED``)."""
    return value is None or value is UNDEFINED


class Choice(BaseModel):
    """A labelled option, optionally holding nested sub-options.

    ``id`` uniqueness is the caller's responsibility.
    """

    model_config = {"frozen": True}

    id: ID
    name: str
    children: tuple[Choice, ...] | None = None


# Deprecated: shadows the common "option" vocabulary; use Choice.
Option = Choice


class PayRate(BaseModel):
    """A numeric amount tagged with the time unit it is paid per."""

    model_config = {"frozen": True}

    value: float
    unit: PayRateUnit


__all__ = [
    "ID",
    "UNDEFINED",
    "Choice",
    "Maybe",
    "Nullable",
    "Option",
    "PayRate",
    "PayRateUnit",
    "Undefinable",
    "UndefinedType",
    "is_absent",
]

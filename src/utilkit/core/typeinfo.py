"""Runtime type classification with a fixed lowercase tag vocabulary.

Tags follow the names JavaScript's ``Object.prototype.toString`` reports
(``"array"``, ``"map"``, ``"regexp"``, ...) so tags stay stable across
implementations.  Python values are mapped onto that vocabulary by an
explicit dispatch; classes with no mapping report their own class name,
lower-cased.
"""

from __future__ import annotations

import array
import inspect
import numbers
import re
import types
import weakref
from collections.abc import Awaitable, Callable, Iterator, Mapping
from datetime import date, time
from typing import Any
from urllib.parse import ParseResult, SplitResult

from utilkit.core.types import UNDEFINED

# Typed-array tags by (array.array typecode kind, item size in bytes).
_TYPED_ARRAY_TAGS: dict[tuple[str, int], str] = {
    ("signed", 1): "int8array",
    ("unsigned", 1): "uint8array",
    ("signed", 2): "int16array",
    ("unsigned", 2): "uint16array",
    ("signed", 4): "int32array",
    ("unsigned", 4): "uint32array",
    ("signed", 8): "bigint64array",
    ("unsigned", 8): "biguint64array",
    ("float", 4): "float32array",
    ("float", 8): "float64array",
}

_SIGNED_TYPECODES = frozenset("bhilq")
_UNSIGNED_TYPECODES = frozenset("BHILQ")

# Listed in get_type's dispatch order: the first entry whose types match a
# value gives its tag.  Typed arrays resolve through _TYPED_ARRAY_TAGS.
TYPE_MAP: dict[str, tuple[type, ...]] = {
    "undefined": (type(UNDEFINED),),
    "null": (type(None),),
    "boolean": (bool,),
    "number": (numbers.Number,),
    "string": (str,),
    "url": (SplitResult, ParseResult),
    "array": (list, tuple),
    "arraybuffer": (bytes, bytearray),
    "dataview": (memoryview,),
    "weakmap": (weakref.WeakKeyDictionary, weakref.WeakValueDictionary),
    "map": (Mapping,),
    "weakset": (weakref.WeakSet,),
    "set": (set, frozenset),
    "date": (date, time),
    "regexp": (re.Pattern,),
    "error": (BaseException,),
    "generator": (types.GeneratorType, types.AsyncGeneratorType),
    "promise": (Awaitable,),
    "function": (types.FunctionType, types.BuiltinFunctionType, types.MethodType, type),
    "iterator": (Iterator,),
    "object": (object,),
}


def _typed_array_tag(value: array.array[Any]) -> str:
    code = value.typecode
    if code in _SIGNED_TYPECODES:
        kind = "signed"
    elif code in _UNSIGNED_TYPECODES:
        kind = "unsigned"
    elif code in "fd":
        kind = "float"
    else:
        return "array"
    return _TYPED_ARRAY_TAGS.get((kind, value.itemsize), "array")


def get_type(value: Any) -> str:
    """Return the lowercase type tag of *value*.

    Examples:
        >>> get_type("hello"), get_type(42), get_type(True)
        ('string', 'number', 'boolean')
        >>> get_type([]), get_type({}), get_type(None), get_type(UNDEFINED)
        ('array', 'map', 'null', 'undefined')
        >>> get_type(re.compile("x")), get_type(ValueError())
        ('regexp', 'error')
    """
    # Order matters: bool is an int, a class is callable, a weak dict is a Mapping.
    if value is UNDEFINED:
        return "undefined"
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, numbers.Number):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (SplitResult, ParseResult)):
        return "url"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, array.array):
        return _typed_array_tag(value)
    if isinstance(value, (bytes, bytearray)):
        return "arraybuffer"
    if isinstance(value, memoryview):
        return "dataview"
    if isinstance(value, (weakref.WeakKeyDictionary, weakref.WeakValueDictionary)):
        return "weakmap"
    if isinstance(value, Mapping):
        return "map"
    if isinstance(value, weakref.WeakSet):
        return "weakset"
    if isinstance(value, (set, frozenset)):
        return "set"
    if isinstance(value, (date, time)):
        return "date"
    if isinstance(value, re.Pattern):
        return "regexp"
    if isinstance(value, BaseException):
        return "error"
    if isinstance(value, (types.GeneratorType, types.AsyncGeneratorType)):
        return "generator"
    if inspect.isawaitable(value):
        return "promise"
    if isinstance(value, type) or inspect.isroutine(value):
        return "function"
    if type(value) in (object, types.SimpleNamespace):
        return "object"
    if isinstance(value, Iterator):
        return "iterator"
    if isinstance(value, Callable):  # type: ignore[arg-type]
        return "function"
    return type(value).__name__.lower()


def is_type(value: Any, tag: str) -> bool:
    """Return True if ``get_type(value) == tag``.

    Examples:
        >>> is_type({}, "map")
        True
        >>> is_type(None, "null")
        True
    """
    return get_type(value) == tag


__all__ = ["TYPE_MAP", "get_type", "is_type"]

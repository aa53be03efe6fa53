"""String helpers."""

from __future__ import annotations

import json
import logging
import math
from typing import Any

from utilkit.core.types import Maybe, is_absent

logger = logging.getLogger(__name__)

DEFAULT_TRUNCATION_MARKER = "&hellip;"


def capitalize(text: str) -> str:
    """Upper-case the first character and leave the rest untouched.

    Unlike :meth:`str.capitalize`, the remainder is not lower-cased.

    Examples:
        >>> capitalize("hello World")
        'Hello World'
        >>> capitalize("")
        ''
    """
    return text[:1].upper() + text[1:]


def initials(name: Maybe[str]) -> str | None:
    """Return the upper-cased first letter of each word in *name*.

    Examples:
        >>> initials("  ada   lovelace ")
        'AL'
        >>> initials("   ") is None
        True
    """
    if not isinstance(name, str) or not name.strip():
        return None
    parts = [token[0] for token in name.split() if token]
    if not parts:
        return None
    return "".join(parts).upper()


def truncate_middle(
    text: Maybe[str],
    front_len: float = 0,
    back_len: float = 0,
    marker: str = DEFAULT_TRUNCATION_MARKER,
) -> str | None:
    """Keep the start and end of *text*, joined by *marker*.

    Lengths are rounded half-up.  *text* is returned unchanged when both
    lengths are zero or when either length, or their sum, reaches the
    length of *text*.  A back length of zero keeps only the front slice.

    Examples:
        >>> truncate_middle("Hello, world!", 5, 0)
        'Hello&hellip;'
        >>> truncate_middle("0x1234567890abcdef", 4, 4, "...")
        '0x12...cdef'
    """
    if is_absent(text):
        return None
    front = math.floor(front_len + 0.5)
    back = math.floor(back_len + 0.5)
    length = len(text)  # type: ignore[arg-type]

    if front == 0 and back == 0:
        return text
    if front >= length or back >= length or front + back >= length:
        return text
    if back == 0:
        return f"{text[:front]}{marker}"  # type: ignore[index]
    return f"{text[:front]}{marker}{text[-back:]}"  # type: ignore[index]


def _reject_constant(name: str) -> Any:
    msg = f"{name} is not valid JSON"
    raise ValueError(msg)


def safe_parse(text: object) -> Any:
    """Decode JSON *text*, returning None for non-strings and bad input.

    Only strict JSON is accepted: ``NaN`` and ``Infinity`` are rejected, and
    input nested too deeply to decode counts as bad input.  The decoded
    value is not validated; callers own its shape.
    """
    if not isinstance(text, str):
        return None
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as exc:
        logger.debug("JSON decode failed: %s", exc)
        return None


__all__ = [
    "DEFAULT_TRUNCATION_MARKER",
    "capitalize",
    "initials",
    "safe_parse",
    "truncate_middle",
]

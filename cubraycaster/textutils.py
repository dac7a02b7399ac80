"""Strict integer parsing and separator-preserving splitting."""

from __future__ import annotations

import re

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

_INTEGER = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]+)")


def atoi_safe(text: str) -> int:
    """Parse a 32-bit signed integer.

    Leading whitespace and one sign are allowed; the rest must be digits
    up to the end of the string. Raises ``ValueError`` otherwise, or when
    the value does not fit in a 32-bit signed integer.
    """
    match = _INTEGER.fullmatch(text)
    if match is None:
        raise ValueError(f"not an integer: {text!r}")
    sign, digits = match.groups()
    value = -int(digits) if sign == "-" else int(digits)
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value


def split_with_sep(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, keeping each separator as its own token.

    Empty fields between separators are dropped, so ``"a,,b"`` gives
    ``["a", ",", ",", "b"]``.
    """
    if not sep:
        raise ValueError("separator must not be empty")
    parts = re.split(f"({re.escape(sep)})", text)
    return [part for part in parts if part]
"""A small printf supporting the conversions s, c, d, i, u, x, X and p."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any

_UINT_MASK = 0xFFFFFFFF
_ULONG_MASK = 0xFFFFFFFFFFFFFFFF
_INT_RANGE = 1 << 32
_INT_HALF = 1 << 31

_CONVERSIONS_WITH_ARGUMENT = frozenset("scdiuxXp")


def _as_int32(value: Any) -> int:
    """Wrap an integer to a signed 32-bit value."""
    return (int(value) + _INT_HALF) % _INT_RANGE - _INT_HALF


def _as_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(int(value) & 0xFF)


def _pointer(value: Any) -> str:
    if value is None or not int(value):
        return "(nil)"
    return "0x" + format(int(value) & _ULONG_MASK, "x")


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec not in _CONVERSIONS_WITH_ARGUMENT:
        return spec
    missing = object()
    value = next(args, missing)
    if value is missing:
        raise TypeError(f"not enough arguments for conversion %{spec}")
    if spec == "s":
        return "(null)" if value is None else str(value)
    if spec == "c":
        return _as_char(value)
    if spec in "di":
        return str(_as_int32(value))
    if spec == "u":
        return str(int(value) & _UINT_MASK)
    if spec == "x":
        return format(int(value) & _UINT_MASK, "x")
    if spec == "X":
        return format(int(value) & _UINT_MASK, "X")
    return _pointer(value)


def format_printf(fmt: str, *args: Any) -> str:
    """Format ``args`` according to ``fmt`` and return the text.

    A ``%`` followed by a character that is not a known conversion
    yields that character, so ``%%`` gives a single percent sign.
    Arguments left over after the format is consumed are ignored.
    """
    remaining = iter(args)
    chars = iter(fmt)
    out: list[str] = []
    for ch in chars:
        if ch != "%":
            out.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            raise ValueError("format string ends with a lone '%'")
        out.append(_convert(spec, remaining))
    return "".join(out)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output; return its length."""
    text = format_printf(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)
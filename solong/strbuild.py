"""Building new strings out of existing ones: slicing, joining, trimming, splitting."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Any


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` starting at ``start``.

    A start past the end of the string gives the empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(s):
        return ""
    return s[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return the concatenation of two strings."""
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """Remove every character of ``charset`` from both ends of ``s``."""
    if not charset:
        return s
    return s.strip(charset)


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on the character ``sep``, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [word for word in s.split(sep) if word]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` applied to each character."""
    return "".join(func(index, ch) for index, ch in enumerate(s))


def striteri(s: MutableSequence[Any], func: Callable[[int, Any], Any]) -> None:
    """Apply ``func(index, item)`` to each item of ``s`` in place.

    Whatever ``func`` returns replaces the item; returning None leaves it
    as it was.
    """
    for index, item in enumerate(s):
        replacement = func(index, item)
        if replacement is not None:
            s[index] = replacement


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` slots, one kept for the terminator.

    Returns the text that fits and the full length of ``src``, which
    exceeds the copied length when the copy was truncated.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    copied = src[: size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` slots.

    Returns the resulting text and the length the full concatenation would
    have had. When ``size`` is smaller than ``dest``, nothing is appended
    and the length reported is ``len(src) + size``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size < len(dest):
        return dest, len(src) + size
    room = max(size - 1 - len(dest), 0)
    return dest + src[:room], len(dest) + len(src)
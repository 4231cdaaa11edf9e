"""Character classification and C-style string searching helpers."""

from __future__ import annotations

_WHITESPACE = "\t\n\f\v\r "


def _code(c: int | str) -> int:
    """Return the code point of a single character or pass an int through."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an int, got {type(c).__name__}")
    return c


def is_alpha(c: int | str) -> bool:
    """True for the ASCII letters A-Z and a-z."""
    code = _code(c)
    return 65 <= code <= 90 or 97 <= code <= 122


def is_digit(c: int | str) -> bool:
    """True for the ASCII digits 0-9."""
    return 48 <= _code(c) <= 57


def is_alnum(c: int | str) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """True for code points 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """True for printable ASCII, space through tilde."""
    return 32 <= _code(c) <= 126


def to_upper(c: int | str) -> int | str:
    """Upper-case an ASCII letter; anything else comes back unchanged.

    The result has the same type as the argument.
    """
    code = _code(c)
    if 97 <= code <= 122:
        code -= 32
    return chr(code) if isinstance(c, str) else code


def to_lower(c: int | str) -> int | str:
    """Lower-case an ASCII letter; anything else comes back unchanged.

    The result has the same type as the argument.
    """
    code = _code(c)
    if 65 <= code <= 90:
        code += 32
    return chr(code) if isinstance(c, str) else code


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way C's atoi does.

    Leading whitespace is skipped, one optional sign is accepted, and
    parsing stops at the first non-digit. No digits gives 0.
    """
    stripped = text.lstrip(_WHITESPACE)
    sign = 1
    if stripped[:1] in ("-", "+"):
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]
    digits = []
    for ch in stripped:
        if not "0" <= ch <= "9":
            break
        digits.append(ch)
    if not digits:
        return 0
    return sign * int("".join(digits))


def itoa(n: int) -> str:
    """Render an integer in decimal."""
    return str(n)


def strchr(s: str, c: int | str) -> str | None:
    """Return the part of ``s`` from the first occurrence of ``c`` on.

    Searching for the NUL character yields the empty tail; a character
    that does not occur yields None.
    """
    ch = chr(_code(c))
    if ch == "\0":
        return ""
    index = s.find(ch)
    return None if index < 0 else s[index:]


def strrchr(s: str, c: int | str) -> str | None:
    """Return the part of ``s`` from the last occurrence of ``c`` on.

    Searching for the NUL character yields the empty tail; a character
    that does not occur yields None.
    """
    ch = chr(_code(c))
    if ch == "\0":
        return ""
    index = s.rfind(ch)
    return None if index < 0 else s[index:]


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns zero when they match, otherwise the difference between the
    first pair of differing characters, a string's end counting as 0.
    """
    for i in range(n):
        a = ord(s1[i]) if i < len(s1) else 0
        b = ord(s2[i]) if i < len(s2) else 0
        if a != b or a == 0:
            return a - b
    return 0


def strnstr(haystack: str, needle: str, n: int) -> str | None:
    """Find ``needle`` wholly within the first ``n`` characters of ``haystack``.

    Returns the tail of ``haystack`` starting at the match, ``haystack``
    itself for an empty needle, or None when there is no match.
    """
    if not needle:
        return haystack
    index = haystack[: max(n, 0)].find(needle)
    return None if index < 0 else haystack[index:]
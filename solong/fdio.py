"""Writing characters, strings and numbers straight to file descriptors."""

from __future__ import annotations

import os


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def put_char_fd(c: str | int, fd: int) -> None:
    """Write one character, given as a string or a code point, to ``fd``."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        char = c
    elif isinstance(c, int) and not isinstance(c, bool):
        char = chr(c)
    else:
        raise TypeError(f"expected a character or an int, got {type(c).__name__}")
    _write_all(fd, char.encode("utf-8"))


def put_str_fd(s: str, fd: int) -> None:
    """Write a string to ``fd``."""
    _write_all(fd, s.encode("utf-8"))


def put_endl_fd(s: str, fd: int) -> None:
    """Write a string followed by a newline to ``fd``."""
    _write_all(fd, (s + "\n").encode("utf-8"))


def put_nbr_fd(n: int, fd: int) -> None:
    """Write an integer in decimal to ``fd``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    _write_all(fd, str(n).encode("ascii"))
import os

import pytest

from solong.fdio import put_char_fd, put_endl_fd, put_nbr_fd, put_str_fd


def _capture(write):
    read_fd, write_fd = os.pipe()
    try:
        write(write_fd)
    finally:
        os.close(write_fd)
    with os.fdopen(read_fd, "rb") as reader:
        return reader.read().decode("utf-8")


def test_put_char_from_string():
    assert _capture(lambda fd: put_char_fd("x", fd)) == "x"


def test_put_char_from_code_point():
    assert _capture(lambda fd: put_char_fd(ord("Z"), fd)) == "Z"


def test_put_char_rejects_long_string():
    with pytest.raises(ValueError):
        put_char_fd("ab", 1)


def test_put_str_round_trip():
    text = "Moves: 12"
    assert _capture(lambda fd: put_str_fd(text, fd)) == text


def test_put_str_empty_writes_nothing():
    assert _capture(lambda fd: put_str_fd("", fd)) == ""


def test_put_endl_appends_newline():
    text = "abc"
    assert _capture(lambda fd: put_endl_fd(text, fd)) == text + "\n"


@pytest.mark.parametrize("n", [0, 7, 42, -5, 2147483647])
def test_put_nbr_round_trip(n):
    assert int(_capture(lambda fd: put_nbr_fd(n, fd))) == n


def test_put_nbr_int_minimum():
    assert _capture(lambda fd: put_nbr_fd(-2147483648, fd)) == "-2147483648"


def test_put_nbr_rejects_non_int():
    with pytest.raises(TypeError):
        put_nbr_fd("12", 1)
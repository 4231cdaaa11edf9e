import io

import pytest

from solong.lines import BUFFER_SIZE, LineReader, read_lines


def test_lines_keep_newlines_last_without():
    reader = LineReader(io.StringIO("111\n1P1\n111"))
    assert reader.read_line() == "111\n"
    assert reader.read_line() == "1P1\n"
    assert reader.read_line() == "111"
    assert reader.read_line() is None


def test_trailing_newline_gives_no_extra_line():
    assert list(LineReader(io.StringIO("a\nb\n"))) == ["a\n", "b\n"]


def test_empty_stream():
    assert LineReader(io.StringIO("")).read_line() is None


def test_lines_longer_than_buffer():
    long_line = "1" * (BUFFER_SIZE * 3 + 1) + "\n"
    text = long_line + "0" * (BUFFER_SIZE * 2)
    lines = list(LineReader(io.StringIO(text)))
    assert lines == [long_line, "0" * (BUFFER_SIZE * 2)]


def test_bytes_stream():
    reader = LineReader(io.BytesIO(b"ab\ncd"))
    assert reader.read_line() == b"ab\n"
    assert reader.read_line() == b"cd"
    assert reader.read_line() is None


def test_empty_lines_are_returned():
    assert list(LineReader(io.StringIO("\n\nx"))) == ["\n", "\n", "x"]


@pytest.mark.parametrize("size", [1, 2, 3, 7, 10, 64])
@pytest.mark.parametrize(
    "text",
    ["", "\n", "single", "1111\n1PC1\n1E01\n1111\n", "a\n\n\nb", "no newline at end"],
)
def test_round_trip_any_buffer_size(text, size):
    lines = list(LineReader(io.StringIO(text), buffer_size=size))
    assert "".join(lines) == text
    assert all(line.endswith("\n") for line in lines[:-1])
    assert all(line.count("\n") <= 1 for line in lines)


def test_read_lines_generator():
    text = "10\n01\n"
    assert list(read_lines(io.StringIO(text))) == text.splitlines(keepends=True)


@pytest.mark.parametrize("size", [0, -1])
def test_invalid_buffer_size(size):
    with pytest.raises(ValueError):
        LineReader(io.StringIO("x"), buffer_size=size)
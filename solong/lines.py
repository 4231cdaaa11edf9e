"""Reading a stream one line at a time through a small fixed-size buffer."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr, Generic

BUFFER_SIZE = 10


class LineReader(Generic[AnyStr]):
    """Hand out the lines of a text or binary stream one by one.

    Each line keeps its trailing newline; the last line may lack one.
    Data is pulled from the stream ``buffer_size`` units at a time.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: AnyStr | None = None

    def read_line(self) -> AnyStr | None:
        """Return the next line, or None once the stream is exhausted."""
        pending = self._pending
        while pending is None or self._newline(pending) not in pending:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            pending = chunk if pending is None else pending + chunk
        if not pending:
            self._pending = None
            return None
        newline = self._newline(pending)
        index = pending.find(newline)
        if index < 0:
            self._pending = None
            return pending
        self._pending = pending[index + 1 :]
        return pending[: index + 1]

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line

    @staticmethod
    def _newline(data: AnyStr) -> AnyStr:
        return b"\n" if isinstance(data, bytes) else "\n"  # type: ignore[return-value]


def read_lines(stream: IO[AnyStr]) -> Iterator[AnyStr]:
    """Yield every line of ``stream``, newlines kept."""
    yield from LineReader(stream)
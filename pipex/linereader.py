"""Buffered line-by-line reading from a stream."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator


class LineReader(Generic[AnyStr]):
    """Read lines from ``stream`` in chunks of ``buffer_size``.

    Each line keeps its trailing newline; the final line may lack one.
    Works with both text and binary streams.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = 1) -> None:
        if buffer_size < 1:
            raise ValueError("buffer_size must be at least 1")
        self.stream = stream
        self.buffer_size = buffer_size
        self._pending: AnyStr | None = None

    @staticmethod
    def _newline_index(data: AnyStr) -> int:
        """Index of the first newline in ``data``, or -1 if there is none."""
        if isinstance(data, bytes):
            return data.find(b"\n")
        return data.find("\n")

    def _fill(self) -> None:
        while self._pending is None or self._newline_index(self._pending) == -1:
            chunk = self.stream.read(self.buffer_size)
            if not chunk:
                return
            self._pending = chunk if self._pending is None else self._pending + chunk

    def read_line(self) -> AnyStr | None:
        """Return the next line, or None once the stream is exhausted."""
        self._fill()
        pending = self._pending
        if not pending:
            self._pending = None
            return None
        cut = self._newline_index(pending)
        if cut == -1:
            self._pending = None
            return pending
        self._pending = pending[cut + 1 :]
        return pending[: cut + 1]

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line
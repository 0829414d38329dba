"""Reading newline-terminated lines from streams in fixed-size chunks."""

from __future__ import annotations

from typing import IO, Any, Iterator, Optional

BUFF_SIZE = 1000


class LineReader:
    """Split streams into lines, keeping unread text per stream.

    Text read past the end of a line is kept and served first on the
    next call for the same stream, so one reader can serve several
    streams in turn. Binary streams are decoded as Latin-1. Where a
    stream offers ``read1`` it is used, so an interactive pipe yields
    whatever is available instead of blocking for a full chunk.
    """

    def __init__(self, buffer_size: int = BUFF_SIZE) -> None:
        if buffer_size < 1:
            raise ValueError("buffer_size must be at least 1")
        self.buffer_size = buffer_size
        self._pending: dict[Any, str] = {}

    def _read_chunk(self, stream: IO[Any]) -> str:
        reader = getattr(stream, "read1", None) or stream.read
        data = reader(self.buffer_size)
        if isinstance(data, (bytes, bytearray)):
            return bytes(data).decode("latin-1")
        return data

    def read_line(self, stream: IO[Any]) -> Optional[str]:
        """Return the next line of ``stream`` without its newline.

        A final line without a newline is returned as it is. ``None``
        means the stream is exhausted.
        """
        parts: list[str] = []
        chunk = self._pending.pop(stream, "")
        while True:
            head, sep, rest = chunk.partition("\n")
            parts.append(head)
            if sep:
                if rest:
                    self._pending[stream] = rest
                return "".join(parts)
            chunk = self._read_chunk(stream)
            if not chunk:
                line = "".join(parts)
                return line or None

    def lines(self, stream: IO[Any]) -> Iterator[str]:
        """Yield the lines of ``stream`` until it is exhausted."""
        while (line := self.read_line(stream)) is not None:
            yield line
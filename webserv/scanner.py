"""Character sources for the request and configuration scanners."""

from __future__ import annotations

from typing import TextIO


class ScannerBuffer:
    """Reads bytes one at a time from a shared, mutable byte buffer."""

    def __init__(self, buffer: bytearray) -> None:
        self._buffer = buffer
        self._idx = 0
        self._c = 0

    def get(self) -> int:
        """Return the next byte, 0 once at the end, then raise IndexError."""
        if self._idx < len(self._buffer):
            self._c = self._buffer[self._idx]
            self._idx += 1
        elif self._idx == len(self._buffer):
            self._idx += 1
            self._c = 0
        else:
            raise IndexError("cannot read past the end of the buffer")
        return self._c

    def unget(self) -> None:
        """Step back one byte; raise IndexError at the start."""
        if not self._idx:
            raise IndexError("cannot step back: already at index 0")
        self._idx -= 1

    def remain_char_count(self) -> int:
        """Return how many bytes are left to read."""
        return max(0, len(self._buffer) - self._idx)

    def erase_before_current_index(self) -> None:
        """Drop the bytes already read from the shared buffer."""
        del self._buffer[: self._idx]
        self._idx = 0

    def __str__(self) -> str:
        return self._buffer.decode("latin-1")


class ScannerStream:
    """Reads characters from a text stream, tracking line and column."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pushed: list[str] = []
        self._line = 1
        self._column = 0
        self._last_column = 0
        self._c = ""

    @property
    def line(self) -> int:
        return self._line

    @property
    def column(self) -> int:
        return self._column

    def get(self) -> str:
        """Return the next character, or an empty string at end of input."""
        if self._c == "\n":
            self._line += 1
            self._last_column = self._column
            self._column = 1
        else:
            self._column += 1
        self._c = self._pushed.pop() if self._pushed else self._stream.read(1)
        return self._c

    def putback(self, c: str) -> None:
        """Return ``c`` to the stream so the next get yields it."""
        if c == "\n":
            self._line -= 1
            self._column = self._last_column
        else:
            self._column -= 1
        self._pushed.append(c)
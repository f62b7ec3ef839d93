"""Reading one line of input for the read builtin."""

from __future__ import annotations

from typing import IO, Any

__all__ = ["ReadLineError", "read_line"]


class ReadLineError(Exception):
    """Raised when no line can be read."""


def _read_byte(stream: IO[Any]) -> bytes:
    chunk = stream.read(1)
    if isinstance(chunk, str):
        return chunk.encode()
    return chunk or b""


def read_line(stream: IO[Any] | None, raw: bool) -> bytes:
    """Read one line from stream, one byte at a time, without its newline.

    Unless raw is set, a backslash escapes the next byte and a backslash
    before a newline continues the line. Raises ReadLineError if there is
    no stream or it ends before any byte of the line was read.
    """
    if stream is None:
        raise ReadLineError("can't read, there's no stdin")

    line = bytearray()
    esc = False
    while True:
        chunk = _read_byte(stream)
        if not chunk:
            if line:
                return bytes(line)
            raise ReadLineError("end of input")
        for b in chunk:
            if not raw and b == ord("\\"):
                line.append(b)
                esc = not esc
            elif not raw and b == ord("\n") and esc:
                # line continuation
                del line[:-1]
                esc = False
            elif b == ord("\n"):
                return bytes(line)
            else:
                line.append(b)
                esc = False
"""A small buffered reader and line-reading helpers."""

from __future__ import annotations

from typing import Protocol

__all__ = ["BufReader", "InvalidUtf8Error", "read_until", "read_line"]

_BUF_SIZE = 64


class _RawReader(Protocol):
    def read(self, size: int) -> bytes: ...


class _BufRead(Protocol):
    def fill_buf(self) -> bytes: ...

    def consume(self, amount: int) -> None: ...


class InvalidUtf8Error(ValueError):
    """Raised when a line read from a stream is not valid UTF-8."""


class BufReader:
    """Buffers reads from ``inner`` in chunks of 64 bytes."""

    def __init__(self, inner: _RawReader) -> None:
        self._inner = inner
        self._buf = b""
        self._pos = 0

    def fill_buf(self) -> bytes:
        """Return buffered data, refilling from the inner reader when empty."""
        if self._pos >= len(self._buf):
            self._buf = bytes(self._inner.read(_BUF_SIZE) or b"")
            self._pos = 0
        return self._buf[self._pos:]

    def consume(self, amount: int) -> None:
        """Mark ``amount`` bytes of the buffer as used."""
        self._pos += amount

    def read(self, size: int) -> bytes:
        """Read at most ``size`` bytes; an empty result means end of stream."""
        data = self.fill_buf()[:size]
        self.consume(len(data))
        return data

    def into_inner(self) -> _RawReader:
        """Return the wrapped reader."""
        return self._inner


def _delimiter(delim: int | bytes) -> bytes:
    if isinstance(delim, int):
        return bytes([delim])
    if len(delim) != 1:
        raise ValueError("delimiter must be a single byte")
    return bytes(delim)


def read_until(reader: _BufRead, delim: int | bytes) -> bytes:
    """Read up to and including ``delim``, or to end of stream."""
    marker = _delimiter(delim)
    chunks: list[bytes] = []
    while True:
        data = reader.fill_buf()
        if not data:
            break
        index = data.find(marker)
        if index >= 0:
            chunks.append(data[: index + 1])
            reader.consume(index + 1)
            break
        chunks.append(data)
        reader.consume(len(data))
    return b"".join(chunks)


def read_line(reader: _BufRead) -> str:
    """Read one line, newline included; an empty string means end of stream."""
    raw = read_until(reader, b"\n")
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidUtf8Error("Invalid UTF-8 Text") from exc
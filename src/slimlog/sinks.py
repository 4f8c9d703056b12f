"""
Log sink abstractions and concrete implementations.

A sink is any destination that can take a rendered line and be closed.
The logger owns exactly one sink and serializes writes to it.
"""

from __future__ import annotations

import io
import socket
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

# =============================================================================
# Sink Abstraction (Strategy Pattern)
# =============================================================================


class BaseSink(ABC):
    """Abstract base class for log sinks."""

    @abstractmethod
    def write(self, data: str) -> None:
        """Write one rendered log line."""
        ...

    @abstractmethod
    def close(self) -> None:
        """Close the sink and release resources."""
        ...


class StreamSink(BaseSink):
    """Text stream sink (``sys.stderr``, ``io.StringIO``, a text-mode file).

    Args:
        stream: Writable text stream.
        close_stream: Whether ``close()`` also closes the stream.
    """

    def __init__(self, stream: Any, *, close_stream: bool = True):
        self._stream = stream
        self._close_stream = close_stream

    @property
    def stream(self) -> Any:
        return self._stream

    def write(self, data: str) -> None:
        self._stream.write(data)
        flush = getattr(self._stream, "flush", None)
        if flush is not None:
            flush()

    def close(self) -> None:
        if self._close_stream:
            self._stream.close()


class BytesSink(BaseSink):
    """Binary stream sink; lines are encoded before writing."""

    def __init__(self, stream: Any, *, encoding: str = "utf-8"):
        self._stream = stream
        self._encoding = encoding

    def write(self, data: str) -> None:
        self._stream.write(data.encode(self._encoding))
        flush = getattr(self._stream, "flush", None)
        if flush is not None:
            flush()

    def close(self) -> None:
        self._stream.close()


class SocketSink(BaseSink):
    """Connected socket sink."""

    def __init__(self, sock: socket.socket, *, encoding: str = "utf-8"):
        self._sock = sock
        self._encoding = encoding

    def write(self, data: str) -> None:
        self._sock.sendall(data.encode(self._encoding))

    def close(self) -> None:
        self._sock.close()


class FileSink(BaseSink):
    """Local file sink, opened for append. No rotation."""

    def __init__(self, path: str | Path, *, encoding: str = "utf-8"):
        self._path = Path(path)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._file = open(self._path, "a", encoding=encoding)

    @property
    def path(self) -> Path:
        return self._path

    def write(self, data: str) -> None:
        self._file.write(data)
        self._file.flush()

    def close(self) -> None:
        self._file.close()


def as_sink(target: Any) -> BaseSink:
    """Wrap ``target`` in the matching sink type."""
    if isinstance(target, BaseSink):
        return target
    if isinstance(target, socket.socket):
        return SocketSink(target)
    if isinstance(target, (io.RawIOBase, io.BufferedIOBase)):
        return BytesSink(target)
    # File-likes that wrap a binary file (tempfile wrappers) only expose the mode.
    if "b" in str(getattr(target, "mode", "")):
        return BytesSink(target)
    if callable(getattr(target, "write", None)):
        return StreamSink(target)
    raise TypeError(f"cannot log to {type(target).__name__!r}: no write() method")

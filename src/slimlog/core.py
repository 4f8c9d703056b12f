"""
The Logger, the process-wide default instance and its module-level wrappers.
"""

from __future__ import annotations

import inspect
import os
import sys
import threading
from typing import Any, Callable, NoReturn

from structlog.typing import EventDict

from .config import LoggingSettings
from .errors import LoggedError
from .formatters import UNKNOWN_FILE, render_line, timestamper
from .levels import Level, parse_level
from .sinks import BaseSink, FileSink, StreamSink, as_sink

Location = tuple[str, int]
WriteErrorHook = Callable[[Exception], None]


def _sprintf(fmt: str, args: tuple[Any, ...]) -> str:
    # Without args the format is used verbatim, so a bare "%" is safe.
    if not args:
        return str(fmt)
    return fmt % args


def _find_caller(depth: int) -> Location:
    """Return ``(filename, lineno)`` of the frame ``depth`` levels above the caller."""
    frame = inspect.currentframe()
    for _ in range(depth + 1):
        if frame is None:
            break
        frame = frame.f_back
    if frame is None:
        return UNKNOWN_FILE, 0
    return frame.f_code.co_filename, frame.f_lineno


class Logger:
    """A leveled logger writing to a single owned sink.

    Lines look like::

        2026/10/18 14:03:59 E server.py:42       listen failed: port in use

    ``level`` and ``time`` are plain attributes meant to be set once at
    startup; they are read without locking on every call. Sink writes are
    serialized by an internal lock.

    Writes are best-effort: an exception raised by the sink is never
    propagated to the code that logged. If ``on_write_error`` is set it is
    called with the exception (outside the lock); anything it raises is
    discarded as well.

    The timestamp is taken before the write lock, so under contention the
    order of lines in the sink may not match their timestamps.

    Args:
        sink: Destination; any object accepted by :func:`slimlog.sinks.as_sink`.
        level: Threshold; messages less severe than this are dropped.
        time: Prefix lines with a local timestamp.
        on_write_error: Observer for sink failures.
    """

    def __init__(
        self,
        sink: Any,
        *,
        level: int = Level.ERROR,
        time: bool = True,
        on_write_error: WriteErrorHook | None = None,
    ) -> None:
        self.level = level
        self.time = time
        self.on_write_error = on_write_error
        self._sink: BaseSink = as_sink(sink)
        self._lock = threading.Lock()
        self._timestamper = timestamper()

    @classmethod
    def from_settings(cls, settings: LoggingSettings) -> Logger:
        """Build a logger from :class:`LoggingSettings`.

        Logs to ``settings.file_path`` when set, otherwise to stderr (which is
        left open on close).
        """
        if settings.file_path:
            sink: BaseSink = FileSink(settings.file_path)
        else:
            sink = StreamSink(sys.stderr, close_stream=False)
        return cls(sink, level=parse_level(settings.level.value), time=settings.time)

    @property
    def sink(self) -> BaseSink:
        return self._sink

    def close(self) -> None:
        """Close the sink. Stop logging before calling this; the write lock is not taken."""
        self._sink.close()

    def __enter__(self) -> Logger:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    # -------------------------------------------------------------------------
    # Emission
    # -------------------------------------------------------------------------

    def log(
        self,
        level: int,
        fmt: str,
        *args: Any,
        stacklevel: int = 1,
        location: Location | None = None,
    ) -> None:
        """Log ``fmt % args`` at ``level``.

        ``stacklevel`` counts frames above this call used for the reported
        location, as in :meth:`logging.Logger.log`. ``location`` skips the
        frame walk entirely.
        """
        if level > self.level:
            return
        body = _sprintf(fmt, args)
        self._emit(level, body, location or _find_caller(stacklevel))

    def _emit(self, level: int, body: str, location: Location) -> None:
        filename, lineno = location
        event_dict: EventDict = {
            "event": body,
            "level": level,
            "filename": filename,
            "lineno": lineno,
        }
        if self.time:
            event_dict = self._timestamper(self, "log", event_dict)
        line = render_line(self, "log", event_dict)

        failure: Exception | None = None
        with self._lock:
            try:
                self._sink.write(line)
            except Exception as exc:
                failure = exc

        if failure is not None and self.on_write_error is not None:
            try:
                self.on_write_error(failure)
            except Exception:
                pass  # Never let the observer break the caller

    # -------------------------------------------------------------------------
    # Level methods
    # -------------------------------------------------------------------------

    def debugf(self, fmt: str, *args: Any, stacklevel: int = 1) -> None:
        """Log at DEBUG level."""
        self.log(Level.DEBUG, fmt, *args, stacklevel=stacklevel + 1)

    def infof(self, fmt: str, *args: Any, stacklevel: int = 1) -> None:
        """Log at INFO level."""
        self.log(Level.INFO, fmt, *args, stacklevel=stacklevel + 1)

    def errorf(self, fmt: str, *args: Any, stacklevel: int = 1) -> LoggedError:
        """Log at ERROR level and return a :class:`LoggedError` with the same message.

        The error is returned even when the threshold drops the message.
        """
        message = _sprintf(fmt, args)
        if Level.ERROR <= self.level:
            self._emit(Level.ERROR, message, _find_caller(stacklevel))
        return LoggedError(message, level=Level.ERROR)

    def error(self, err: BaseException, *, stacklevel: int = 1) -> BaseException:
        """Log ``err`` at ERROR level and hand it back unchanged."""
        self.log(Level.ERROR, "Error: %s", err, stacklevel=stacklevel + 1)
        return err

    def fatalf(self, fmt: str, *args: Any, stacklevel: int = 1) -> NoReturn:
        """Log at FATAL level, then exit the process with status 1.

        Exits through :func:`os._exit`: no cleanup handlers run and the sink
        is not closed. The exit happens even if formatting the message fails.
        """
        try:
            self.log(Level.FATAL, fmt, *args, stacklevel=stacklevel + 1)
        finally:
            os._exit(1)

    def fatal(self, err: BaseException, *, stacklevel: int = 1) -> NoReturn:
        """Log ``err`` at FATAL level, then exit the process with status 1."""
        try:
            self.log(Level.FATAL, "Error: %s", err, stacklevel=stacklevel + 1)
        finally:
            os._exit(1)


# =============================================================================
# Default Logger
# =============================================================================

# Process-wide instance used by the functions below. Created at import,
# never closed. Adjust with attribute assignment, e.g.
# ``slimlog.default.level = Level.DEBUG`` or ``slimlog.default.time = False``.
default = Logger(StreamSink(sys.stderr, close_stream=False))


def configure(settings: LoggingSettings | None = None) -> Logger:
    """
    Apply settings to the default logger. Call once at startup.

    Args:
        settings: Settings to apply; read from the environment when omitted.

    Returns:
        The default logger.
    """
    settings = settings or LoggingSettings()
    default.level = parse_level(settings.level.value)
    default.time = settings.time
    if settings.file_path:
        new_sink = FileSink(settings.file_path)
        with default._lock:
            old_sink, default._sink = default._sink, new_sink
        old_sink.close()
    return default


def debugf(fmt: str, *args: Any) -> None:
    """Wrapper for ``default.debugf``."""
    default.debugf(fmt, *args, stacklevel=2)


def infof(fmt: str, *args: Any) -> None:
    """Wrapper for ``default.infof``."""
    default.infof(fmt, *args, stacklevel=2)


def errorf(fmt: str, *args: Any) -> LoggedError:
    """Wrapper for ``default.errorf``."""
    return default.errorf(fmt, *args, stacklevel=2)


def error(err: BaseException) -> BaseException:
    """Wrapper for ``default.error``."""
    return default.error(err, stacklevel=2)


def fatalf(fmt: str, *args: Any) -> NoReturn:
    """Wrapper for ``default.fatalf``."""
    default.fatalf(fmt, *args, stacklevel=2)


def fatal(err: BaseException) -> NoReturn:
    """Wrapper for ``default.fatal``."""
    default.fatal(err, stacklevel=2)

"""
Slimlog: a small leveled logger.

Formats each message with a severity marker, the caller's file and line and
a local timestamp, then writes it to one sink under a lock.

Default level is ERROR, so only FATAL and ERROR messages are logged.
Use DEBUG during development and INFO for extra detail in production logs.

    import slimlog

    slimlog.default.level = slimlog.Level.DEBUG  # log everything
    slimlog.default.time = False  # e.g. under systemd, which timestamps itself
    slimlog.infof("listening on %s:%d", host, port)

Library: structlog processors for rendering, pydantic-settings for config.
"""

from .config import LoggingSettings, LogLevel
from .core import Logger, configure, debugf, default, error, errorf, fatal, fatalf, infof
from .errors import LoggedError, SlimlogError
from .interceptors import LoggerHandler
from .levels import Level, marker, parse_level
from .sinks import BaseSink, BytesSink, FileSink, SocketSink, StreamSink, as_sink

__all__ = [
    "BaseSink",
    "BytesSink",
    "FileSink",
    "Level",
    "LogLevel",
    "LoggedError",
    "LoggerHandler",
    "Logger",
    "LoggingSettings",
    "SlimlogError",
    "SocketSink",
    "StreamSink",
    "as_sink",
    "configure",
    "debugf",
    "default",
    "error",
    "errorf",
    "fatal",
    "fatalf",
    "infof",
    "marker",
    "parse_level",
]

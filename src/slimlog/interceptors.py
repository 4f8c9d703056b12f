"""
Bridge from the standard library ``logging`` module into a slimlog Logger.
"""

from __future__ import annotations

import logging

from .core import Logger
from .levels import Level


class LoggerHandler(logging.Handler):
    """
    Forward standard library log records to a :class:`Logger`.

    Lets third-party packages that use ``logging`` share the same sink and
    line format. The record's own file and line are reported, and the
    target logger's threshold still applies. CRITICAL records are logged
    at FATAL but never terminate the process.
    """

    def __init__(self, target: Logger, level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self.target = target

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self.target.log(
                self.map_level(record.levelno),
                record.getMessage(),
                location=(record.pathname, record.lineno),
            )
        except Exception:
            self.handleError(record)

    @staticmethod
    def map_level(levelno: int) -> Level:
        """
        Map a stdlib level number onto a slimlog level.

        Rules:
        - CRITICAL and above -> FATAL
        - WARNING, ERROR -> ERROR
        - INFO -> INFO
        - anything lower -> DEBUG
        """
        if levelno >= logging.CRITICAL:
            return Level.FATAL
        if levelno >= logging.WARNING:
            return Level.ERROR
        if levelno >= logging.INFO:
            return Level.INFO
        return Level.DEBUG


def install(target: Logger, name: str | None = None) -> LoggerHandler:
    """Attach a :class:`LoggerHandler` for ``target`` to a stdlib logger (root by default)."""
    handler = LoggerHandler(target)
    logging.getLogger(name).addHandler(handler)
    return handler

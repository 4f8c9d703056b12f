"""
Exception types handed back to callers by the logger.
"""

from __future__ import annotations


class SlimlogError(Exception):
    """Base class for errors produced by slimlog."""


class LoggedError(SlimlogError):
    """An error whose message was also sent to a logger.

    Returned by ``Logger.errorf`` so the caller can record a failure and
    propagate it in one step::

        raise log.errorf("open %s: %s", path, reason)

    ``level`` is the severity the message was logged at. The error is built
    whether or not the threshold let the message through.
    """

    def __init__(self, message: str, *, level: int) -> None:
        super().__init__(message)
        self.message = message
        self.level = level

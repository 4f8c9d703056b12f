"""
Severity levels and their one-character markers.
"""

from __future__ import annotations

from enum import IntEnum


class Level(IntEnum):
    """Logging levels, most severe first.

    A message is emitted when its level is less than or equal to the
    logger's threshold, so FATAL always passes and DEBUG passes only when
    the threshold is DEBUG.
    """

    FATAL = 0
    ERROR = 1
    INFO = 2
    DEBUG = 3


_MARKERS: dict[int, str] = {
    Level.FATAL: "F",
    Level.ERROR: "E",
    Level.INFO: "_",
    Level.DEBUG: ".",
}


def marker(level: int) -> str:
    """Return the display marker for ``level``, or its decimal value if unknown."""
    return _MARKERS.get(level, str(int(level)))


def parse_level(value: Level | int | str) -> Level:
    """Coerce a level name, number or enum member into a :class:`Level`."""
    if isinstance(value, Level):
        return value
    if isinstance(value, str):
        text = value.strip()
        if text.isdigit():
            value = int(text)
        else:
            try:
                return Level[text.upper()]
            except KeyError:
                raise ValueError(f"unknown log level: {value!r}") from None
    try:
        return Level(value)
    except ValueError:
        raise ValueError(f"unknown log level: {value!r}") from None

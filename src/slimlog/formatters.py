"""
Line formatting: location column, timestamp processor and final renderer.
"""

from __future__ import annotations

import os

import structlog
from structlog.typing import EventDict, Processor, WrappedLogger

from .levels import marker

# =============================================================================
# Layout
# =============================================================================

TIMESTAMP_FORMAT = "%Y/%m/%d %H:%M:%S"
LOCATION_WIDTH = 18
LINE_WIDTH = 4
UNKNOWN_FILE = "unknown"


def _fit_left(text: str, width: int) -> str:
    """Keep the trailing ``width`` characters and left-justify to ``width``."""
    if len(text) > width:
        text = text[-width:]
    return f"{text:<{width}}"


def format_location(filename: str, lineno: int) -> str:
    """Render ``basename:line`` as a fixed 18-character column."""
    rendered = f"{os.path.basename(filename)}:{lineno:<{LINE_WIDTH}d}"
    return _fit_left(rendered, LOCATION_WIDTH)


# =============================================================================
# Processors
# =============================================================================


def timestamper() -> Processor:
    """Local-time timestamp in ``YYYY/MM/DD HH:MM:SS`` form."""
    return structlog.processors.TimeStamper(fmt=TIMESTAMP_FORMAT, utc=False, key="timestamp")


def render_line(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> str:
    """Render an event dict into a single newline-terminated log line."""
    location = format_location(
        event_dict.get("filename", UNKNOWN_FILE),
        event_dict.get("lineno", 0),
    )
    line = f"{marker(event_dict['level'])} {location} {event_dict['event']}"

    timestamp = event_dict.get("timestamp")
    if timestamp:
        line = f"{timestamp} {line}"

    if not line.endswith("\n"):
        line += "\n"
    return line

import io
import typing as t

import pytest

from slimlog import core
from slimlog.core import Logger
from slimlog.levels import Level


@pytest.fixture
def buffer() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def logger(buffer: io.StringIO) -> t.Iterator[Logger]:
    """
    DEBUG-level logger without timestamps writing into an in-memory buffer.
    """
    log = Logger(buffer, level=Level.DEBUG, time=False)
    yield log


@pytest.fixture
def default_logger(monkeypatch: pytest.MonkeyPatch, buffer: io.StringIO) -> Logger:
    """
    Replaces the process-wide default logger so module-level functions write
    into the test buffer instead of stderr.
    """
    log = Logger(buffer, level=Level.DEBUG, time=False)
    monkeypatch.setattr(core, "default", log)
    return log

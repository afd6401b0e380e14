from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures: a fixed clock, an in-memory console stream and a
   logger factory writing under a temporary directory.
"""

import io
import os
import sys
from datetime import datetime
from typing import Callable, Iterator, List

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from tinylog import TinyLog  # noqa: E402

FIXED_INSTANT = datetime(2024, 3, 9, 14, 5, 7, 42_999)
FIXED_STAMP = "2024-03-09 14:05:07.042"


class FixedClock:
    """Clock frozen at a single instant."""

    def __init__(self, instant: datetime = FIXED_INSTANT) -> None:
        self.instant = instant

    def now(self) -> datetime:
        return self.instant


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def fixed_clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def fixed_stamp() -> str:
    """Header timestamp rendered from the fixed clock."""
    return FIXED_STAMP


@pytest.fixture
def console() -> io.StringIO:
    """In-memory stream standing in for stdout."""
    return io.StringIO()


@pytest.fixture
def log_dir(tmp_path) -> str:
    """Log directory under pytest's temporary path, with a trailing slash."""
    return str(tmp_path / "logs") + "/"


@pytest.fixture
def make_logger(log_dir, console, fixed_clock) -> Iterator[Callable[..., TinyLog]]:
    """
    Factory building loggers bound to the temporary directory, the in-memory
    console and the fixed clock. Every logger built is closed on teardown.
    """
    created: List[TinyLog] = []

    def _factory(name: str = "Test", **kwargs) -> TinyLog:
        kwargs.setdefault("log_path", log_dir)
        kwargs.setdefault("stream", console)
        kwargs.setdefault("clock", fixed_clock)
        lg = TinyLog(name, **kwargs)
        created.append(lg)
        return lg

    yield _factory

    for lg in created:
        lg.close()


from __future__ import annotations

"""
Wall-Clock Time Source.

Abstracts the current instant behind a single `now()` capability so the
logger header can be produced from an injectable clock.
"""

from datetime import datetime
from typing import Protocol

from tinylog.domain.constants import TIMESTAMP_FMT


class Clock(Protocol):
    """Capability interface producing the current wall-clock instant."""

    def now(self) -> datetime:
        ...


class SystemClock:
    """Local wall-clock time as reported by the operating system."""

    def now(self) -> datetime:
        return datetime.now()


def format_timestamp(instant: datetime) -> str:
    """
    Render an instant as `YYYY-MM-DD HH:MM:SS.mmm`.

    Args:
        instant: The instant to render.

    Returns:
        str: Timestamp with millisecond precision (truncated, not rounded).
    """
    return f"{instant.strftime(TIMESTAMP_FMT)}.{instant.microsecond // 1000:03d}"

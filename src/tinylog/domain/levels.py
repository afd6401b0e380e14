from __future__ import annotations

"""
Severity Level Registry.

Closed set of severities attached to every log line. Numeric values are
bit-flag style discriminators kept for compatibility with mask-based
filtering; no filtering is performed on them.
"""

from enum import IntEnum
from typing import Any


class Level(IntEnum):
    """Severity discriminator attached to a log line."""
    GLOBAL = 1
    TRACE = 2
    DEBUG = 4
    FATAL = 8
    ERROR = 16
    WARNING = 32
    VERBOSE = 64
    INFO = 128
    UNKNOWN = 1010


UNKNOWN_NAME = "UNKNOWN"


def level_name(level: Any) -> str:
    """
    Return the canonical uppercase name of a severity level.

    Total over any input: values outside the defined set, including the
    UNKNOWN sentinel itself, map to "UNKNOWN".

    Args:
        level: A Level member or its integer value.

    Returns:
        str: Uppercase level name.
    """
    if isinstance(level, bool):
        return UNKNOWN_NAME
    try:
        member = Level(level)
    except (ValueError, TypeError):
        return UNKNOWN_NAME
    if member is Level.UNKNOWN:
        return UNKNOWN_NAME
    return member.name

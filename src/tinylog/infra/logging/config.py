from __future__ import annotations

"""
Diagnostics Configuration Models.

Defines the settings for the library's own diagnostics channel: the
stdlib logger namespace that reports file open failures and malformed
templates. Diagnostics never go to the log files the library writes.
"""

import logging
from dataclasses import dataclass
from typing import Dict

DIAGNOSTICS_LOGGER_NAME = "tinylog"

# Mapping of string identifiers to native logging constants
_LEVEL_MAP: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


@dataclass(frozen=True)
class DiagnosticsConfig:
    """
    Immutable settings for the diagnostics channel.

    Attributes:
        level: Minimum severity level reported.
        fmt: Structural format for diagnostic entries.
    """
    level: str = "WARNING"
    fmt: str = "%(levelname)s | %(name)s | %(message)s"

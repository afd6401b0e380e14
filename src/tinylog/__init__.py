from __future__ import annotations

"""
tinylog: named, leveled, line-oriented logging to console and file.
"""

from tinylog.config import LoggerConfig, validate_config
from tinylog.core.formatter import expand, format_message
from tinylog.core.logger import TinyLog
from tinylog.domain.errors import FilesystemError, FormatUnderflow, TinyLogError
from tinylog.domain.levels import Level, level_name
from tinylog.infra.clock import Clock, SystemClock, format_timestamp
from tinylog.infra.logging import DiagnosticsConfig, configure_diagnostics

__version__ = "0.1.0"

__all__ = [
    "Clock",
    "DiagnosticsConfig",
    "FilesystemError",
    "FormatUnderflow",
    "Level",
    "LoggerConfig",
    "SystemClock",
    "TinyLog",
    "TinyLogError",
    "configure_diagnostics",
    "expand",
    "format_message",
    "format_timestamp",
    "level_name",
    "validate_config",
]

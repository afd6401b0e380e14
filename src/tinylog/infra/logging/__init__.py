from __future__ import annotations

from .config import DIAGNOSTICS_LOGGER_NAME, DiagnosticsConfig
from .core import configure_diagnostics, get_logger
from .handlers import (
    DestinationFileHandler,
    DestinationStreamHandler,
    LineFormatter,
    create_console_handler,
    create_file_handler,
)

__all__ = [
    "DIAGNOSTICS_LOGGER_NAME",
    "DiagnosticsConfig",
    "DestinationFileHandler",
    "DestinationStreamHandler",
    "LineFormatter",
    "configure_diagnostics",
    "create_console_handler",
    "create_file_handler",
    "get_logger",
]

from __future__ import annotations

"""
Destination Handlers and Low-Level Utilities.

Provides the handler factories behind a logger's console and file
destinations, the header formatter shared by both, and the tagging
mechanism that distinguishes the library's own handlers from handlers
installed by the host application.
"""

import logging
import sys
from typing import Optional, TextIO

from tinylog.domain.constants import FILE_ENCODING, LINE_FMT, LINE_TERMINATOR
from tinylog.domain.errors import FilesystemError

# Internal attribute used to tag and identify our own handlers
_HANDLER_TAG_ATTR: str = "_tinylog_handler"


# ==============================================================================
# FORMATTING
# ==============================================================================

class LineFormatter(logging.Formatter):
    """
    Render `<timestamp> [<name>] <LEVEL> <message>` lines.

    The timestamp is precomputed by the logger from its own clock and
    carried on the record, so no stdlib time formatting is involved.
    """

    def __init__(self) -> None:
        super().__init__(LINE_FMT)


# ==============================================================================
# HANDLERS
# ==============================================================================

class DestinationStreamHandler(logging.StreamHandler):
    """
    Console handler that remembers its first write failure.

    The stdlib reports emit errors through `handleError`, printing a
    traceback to stderr on every call; here the failure is kept instead so
    the owning logger can drop the destination.
    """

    def __init__(self, stream: TextIO) -> None:
        super().__init__(stream)
        self.terminator = LINE_TERMINATOR
        self.failure: Optional[BaseException] = None

    def handleError(self, record: logging.LogRecord) -> None:
        if self.failure is None:
            self.failure = sys.exc_info()[1]


class DestinationFileHandler(logging.FileHandler):
    """
    Append-mode file handler that remembers its first write failure.

    The stdlib reports emit errors through `handleError` and carries on;
    here the failure is kept so the owning logger can drop the destination.
    """

    def __init__(self, filename: str) -> None:
        super().__init__(filename, mode="a", encoding=FILE_ENCODING)
        self.terminator = LINE_TERMINATOR
        self.failure: Optional[BaseException] = None

    def handleError(self, record: logging.LogRecord) -> None:
        if self.failure is None:
            self.failure = sys.exc_info()[1]


def create_console_handler(stream: TextIO) -> DestinationStreamHandler:
    """
    Build the console destination for a logger.

    Args:
        stream: Text stream receiving the lines.

    Returns:
        DestinationStreamHandler: Tagged handler with the line formatter.
    """
    sh = DestinationStreamHandler(stream)
    sh.setFormatter(LineFormatter())
    _tag_handler(sh)
    return sh


def create_file_handler(log_file: str) -> DestinationFileHandler:
    """
    Open the file destination for a logger in append mode.

    Args:
        log_file: Resolved path of the log file.

    Returns:
        DestinationFileHandler: Tagged handler with the line formatter.

    Raises:
        FilesystemError: If the file cannot be opened for append.
    """
    try:
        fh = DestinationFileHandler(log_file)
    except OSError as e:
        raise FilesystemError(f"Cannot open log file '{log_file}': {e}", path=log_file) from e

    fh.setFormatter(LineFormatter())
    _tag_handler(fh)
    return fh


# ==============================================================================
# INTERNAL LOGGING UTILITIES
# ==============================================================================

def _tag_handler(handler: logging.Handler) -> None:
    """
    Mark a handler as an internally-managed library handler.

    Args:
        handler: The logging handler instance to tag.
    """
    setattr(handler, _HANDLER_TAG_ATTR, True)


def _is_our_handler(handler: logging.Handler) -> bool:
    """
    Verify if a handler was initialized by this library.

    Args:
        handler: The handler to inspect.

    Returns:
        bool: True if the handler carries our internal tag.
    """
    return bool(getattr(handler, _HANDLER_TAG_ATTR, False))

from __future__ import annotations

"""
Domain Constants.

Centralizes the default destinations, naming and formatting conventions
shared by the path resolver, the clock and the logger.
"""

# -----------------------------------------------------------------------------
# DESTINATION DEFAULTS
# -----------------------------------------------------------------------------

DEFAULT_LOGGER_NAME = "TinyLog"
DEFAULT_LOG_DIR = "./logs/"
DEFAULT_BASE_NAME = "tinylog"
LOG_FILE_SUFFIX = ".log"

# Both separators are accepted regardless of platform
PATH_SEPARATORS = ("/", "\\")

# -----------------------------------------------------------------------------
# LINE FORMAT
# -----------------------------------------------------------------------------

TIMESTAMP_FMT = "%Y-%m-%d %H:%M:%S"
LINE_FMT = "%(timestamp)s [%(name)s] %(levelname)s %(message)s"
LINE_TERMINATOR = "\n"
FILE_ENCODING = "utf-8"

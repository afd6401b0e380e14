from __future__ import annotations

"""
Programmatic Configuration Surface.

Describes a logger's settings as an immutable value and validates loosely
typed mappings (camelCase or snake_case keys) into it. Validation never
touches the filesystem; path resolution belongs to the logger.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Tuple

from tinylog.domain.constants import (
    DEFAULT_BASE_NAME,
    DEFAULT_LOG_DIR,
    DEFAULT_LOGGER_NAME,
)

logger = logging.getLogger(__name__)

# Accepted external keys mapped onto LoggerConfig fields
_KEY_ALIASES: Dict[str, str] = {
    "logPath": "log_path",
    "loggerName": "logger_name",
    "fileName": "file_name",
    "toConsole": "to_console",
    "toFile": "to_file",
    "log_path": "log_path",
    "logger_name": "logger_name",
    "file_name": "file_name",
    "to_console": "to_console",
    "to_file": "to_file",
}

_TRUE_STRINGS = ("true", "1", "yes", "y", "on")
_FALSE_STRINGS = ("false", "0", "no", "n", "off")


@dataclass(frozen=True)
class LoggerConfig:
    """
    Immutable settings for one logger.

    Attributes:
        logger_name: Tag printed in every line header.
        log_path: Directory receiving the log file.
        file_name: Log file base name, without suffix.
        to_console: Write lines to the console stream.
        to_file: Write lines to the log file.
    """
    logger_name: str = DEFAULT_LOGGER_NAME
    log_path: str = DEFAULT_LOG_DIR
    file_name: str = DEFAULT_BASE_NAME
    to_console: bool = True
    to_file: bool = True


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
    config: Any,
    *,
    strict: bool = False,
) -> Tuple[LoggerConfig, List[str]]:
    """
    Validate and normalize a configuration mapping.

    strict=False:
      - coerces recoverable values and records a warning for each fix.
      - falls back to defaults for invalid input (including non-mappings).

    strict=True:
      - raises TypeError/ValueError on the first invalid value or key.

    Args:
        config: Mapping with camelCase or snake_case keys.
        strict: Raise instead of correcting.

    Returns:
        Tuple[LoggerConfig, List[str]]: (Normalized config, warnings).
    """
    warnings: List[str] = []
    defaults = LoggerConfig()

    if not isinstance(config, Mapping):
        msg = f"Invalid config: expected a mapping, got {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        _warn(warnings, msg + " Using defaults.")
        return defaults, warnings

    fields: Dict[str, Any] = {}
    for key, value in config.items():
        field = _KEY_ALIASES.get(key)
        if field is None:
            msg = f"Unknown config key '{key}'."
            if strict:
                raise ValueError(msg)
            _warn(warnings, msg + " Ignored.")
            continue
        fields[field] = value

    normalized = LoggerConfig(
        logger_name=_as_str(fields.get("logger_name"), defaults.logger_name, "logger_name", warnings, strict),
        log_path=_as_str(fields.get("log_path"), defaults.log_path, "log_path", warnings, strict),
        file_name=_as_str(fields.get("file_name"), defaults.file_name, "file_name", warnings, strict),
        to_console=_as_bool(fields.get("to_console"), defaults.to_console, "to_console", warnings, strict),
        to_file=_as_bool(fields.get("to_file"), defaults.to_file, "to_file", warnings, strict),
    )
    return normalized, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _warn(warnings: List[str], msg: str) -> None:
    warnings.append(msg)
    logger.warning(msg)


def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    if value is None:
        return fallback
    if isinstance(value, str):
        v = value.strip()
        if v:
            return v
        msg = f"Field '{field}' is blank."
        if strict:
            raise ValueError(msg)
        _warn(warnings, msg + " Using fallback.")
        return fallback
    msg = f"Invalid field '{field}': expected str, got {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    _warn(warnings, msg + " Using fallback.")
    return fallback


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if not strict:
        if isinstance(value, (int, float)) and value in (0, 1):
            warnings.append(f"Field '{field}' converted from number {value} to bool.")
            return bool(value)
        if isinstance(value, str):
            s = value.strip().lower()
            if s in _TRUE_STRINGS:
                warnings.append(f"Field '{field}' converted from str '{value}' to bool True.")
                return True
            if s in _FALSE_STRINGS:
                warnings.append(f"Field '{field}' converted from str '{value}' to bool False.")
                return False

    msg = f"Invalid field '{field}': expected bool, got {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    _warn(warnings, msg + " Using fallback.")
    return fallback

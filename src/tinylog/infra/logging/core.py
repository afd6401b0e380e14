from __future__ import annotations

"""
Diagnostics Channel Orchestrator.

Maintains the idempotent setup of the `tinylog` stdlib logger namespace,
through which the library reports its own failures (unopenable files,
templates short of arguments). Host applications that already configure
stdlib logging need not call anything here: records propagate normally.
"""

import logging
import sys
from typing import Optional, TextIO

from tinylog.infra.logging.config import (
    _LEVEL_MAP,
    DIAGNOSTICS_LOGGER_NAME,
    DiagnosticsConfig,
)
from tinylog.infra.logging.handlers import _is_our_handler, _tag_handler

# Internal state flag for idempotency
_CONFIGURED_FLAG_ATTR: str = "_tinylog_configured"


# ==============================================================================
# PUBLIC API
# ==============================================================================

def configure_diagnostics(
        cfg: Optional[DiagnosticsConfig] = None,
        *,
        stream: Optional[TextIO] = None,
        force: bool = False,
) -> logging.Logger:
    """
    Attach a single stream handler to the diagnostics namespace.

    Repeated calls are no-ops unless `force` is set, in which case the
    previously attached handler is replaced.

    Args:
        cfg: Diagnostics settings. Defaults to WARNING on stderr.
        stream: Target stream. Defaults to `sys.stderr`.
        force: If True, bypass idempotency checks and re-initialize.

    Returns:
        logging.Logger: The diagnostics namespace logger.
    """
    cfg = cfg or DiagnosticsConfig()
    target = logging.getLogger(DIAGNOSTICS_LOGGER_NAME)

    already_configured = bool(getattr(target, _CONFIGURED_FLAG_ATTR, False))
    if already_configured and not force:
        return target

    level_int = _parse_level(cfg.level)
    target.setLevel(level_int)
    _remove_our_handlers(target)

    sh = logging.StreamHandler(stream or sys.stderr)
    sh.setLevel(level_int)
    sh.setFormatter(logging.Formatter(cfg.fmt))
    _tag_handler(sh)
    target.addHandler(sh)

    setattr(target, _CONFIGURED_FLAG_ATTR, True)
    return target


def get_logger(name: str) -> logging.Logger:
    """
    Acquire a logger inside the diagnostics namespace.

    Args:
        name: Hierarchical name (usually __name__).

    Returns:
        logging.Logger: The requested logger instance.
    """
    if name != DIAGNOSTICS_LOGGER_NAME and not name.startswith(DIAGNOSTICS_LOGGER_NAME + "."):
        name = f"{DIAGNOSTICS_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _parse_level(level: str) -> int:
    """Convert a string-based logging level to its numeric constant."""
    if not level:
        return logging.WARNING
    return _LEVEL_MAP.get(str(level).strip().upper(), logging.WARNING)


def _remove_our_handlers(target: logging.Logger) -> None:
    """Detach and close all internally-managed handlers from `target`."""
    for h in list(target.handlers):
        if _is_our_handler(h):
            target.removeHandler(h)
            h.close()

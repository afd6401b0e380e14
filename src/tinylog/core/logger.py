from __future__ import annotations

"""
Logger Core.

A named, synchronous logger writing leveled, timestamped lines to a console
stream and/or an append-mode log file. One lock per instance serializes
whole lines and reconfiguration, so concurrent callers on the same instance
never interleave partial output.

Two instances pointed at the same file share no lock and may interleave;
keep one instance per file path process-wide.
"""

import logging
import sys
import threading
from collections import OrderedDict
from typing import Any, Optional, TextIO, Tuple

from tinylog.config import LoggerConfig
from tinylog.core.formatter import count_placeholders, format_message
from tinylog.domain.constants import (
    DEFAULT_BASE_NAME,
    DEFAULT_LOG_DIR,
    DEFAULT_LOGGER_NAME,
)
from tinylog.domain.errors import FilesystemError
from tinylog.domain.levels import Level, level_name
from tinylog.infra.clock import Clock, SystemClock, format_timestamp
from tinylog.infra.fs import ensure_directory_exists, normalize_directory, resolve_log_path
from tinylog.infra.logging import (
    DestinationFileHandler,
    DestinationStreamHandler,
    create_console_handler,
    create_file_handler,
    get_logger,
)

logger = get_logger(__name__)

# Bound on remembered one-time diagnostics; oldest keys are forgotten first
MAX_REPORTED_KEYS = 128


class TinyLog:
    """
    Named line logger with console and file destinations.

    Construction resolves the log directory and file and opens the file for
    append. Each path setter closes the current file and reopens the newly
    resolved one before returning. Logging calls never raise: a destination
    that fails is dropped and reported once on the diagnostics channel.
    """

    def __init__(
            self,
            name: str = DEFAULT_LOGGER_NAME,
            *,
            log_path: str = DEFAULT_LOG_DIR,
            file_name: str = DEFAULT_BASE_NAME,
            to_console: bool = True,
            to_file: bool = True,
            stream: Optional[TextIO] = None,
            clock: Optional[Clock] = None,
    ) -> None:
        self._lock = threading.Lock()
        self._name = name
        self._directory = normalize_directory(log_path)
        self._file_base_name = file_name or DEFAULT_BASE_NAME
        self._to_console = to_console
        self._to_file = to_file
        self._clock: Clock = clock or SystemClock()

        self._console: Optional[DestinationStreamHandler] = create_console_handler(
            stream if stream is not None else sys.stdout
        )
        self._file_handler: Optional[DestinationFileHandler] = None
        self._file_path = ""
        self._rotation_counter = 0
        self._last_error: Optional[FilesystemError] = None
        self._reported: "OrderedDict[Tuple[str, str], None]" = OrderedDict()

        with self._lock:
            self._preprocess()

    @classmethod
    def from_config(cls, cfg: LoggerConfig, **kwargs: Any) -> "TinyLog":
        """
        Build a logger from a `LoggerConfig`.

        Args:
            cfg: Validated configuration.
            **kwargs: Extra constructor arguments (`stream`, `clock`).

        Returns:
            TinyLog: The configured logger.
        """
        return cls(
            cfg.logger_name,
            log_path=cfg.log_path,
            file_name=cfg.file_name,
            to_console=cfg.to_console,
            to_file=cfg.to_file,
            **kwargs,
        )

    # ==========================================================================
    # PROPERTIES
    # ==========================================================================

    @property
    def name(self) -> str:
        return self._name

    @property
    def directory(self) -> str:
        return self._directory

    @property
    def file_base_name(self) -> str:
        return self._file_base_name

    @property
    def file_path(self) -> str:
        """Resolved path of the current log file, even if it failed to open."""
        return self._file_path

    @property
    def to_console(self) -> bool:
        return self._to_console

    @property
    def to_file(self) -> bool:
        return self._to_file

    @property
    def console_available(self) -> bool:
        """False once the console stream has failed a write."""
        return self._console is not None

    @property
    def file_available(self) -> bool:
        """True while a file handle is open for the file destination."""
        return self._file_handler is not None

    @property
    def rotation_counter(self) -> int:
        return self._rotation_counter

    @property
    def last_error(self) -> Optional[FilesystemError]:
        return self._last_error

    # ==========================================================================
    # CONFIGURATION
    # ==========================================================================

    def set_log_path(self, path: str) -> None:
        """Redirect the file destination to another directory."""
        with self._lock:
            self._directory = normalize_directory(path)
            self._preprocess()

    def set_logger_name(self, name: str) -> None:
        """Change the header tag and reopen the log file."""
        with self._lock:
            self._name = name
            self._preprocess()

    def set_file_name(self, file_name: str) -> None:
        """Change the log file base name; non-default names are collision-probed."""
        with self._lock:
            self._file_base_name = file_name or DEFAULT_BASE_NAME
            self._preprocess()

    def set_console_enabled(self, enabled: bool) -> None:
        with self._lock:
            self._to_console = bool(enabled)

    def set_file_enabled(self, enabled: bool) -> None:
        with self._lock:
            self._to_file = bool(enabled)

    def configure(self, cfg: LoggerConfig) -> None:
        """
        Apply a whole `LoggerConfig` at once.

        Paths are re-resolved a single time, after every field is updated.
        """
        with self._lock:
            self._name = cfg.logger_name
            self._directory = normalize_directory(cfg.log_path)
            self._file_base_name = cfg.file_name or DEFAULT_BASE_NAME
            self._to_console = bool(cfg.to_console)
            self._to_file = bool(cfg.to_file)
            self._preprocess()

    # ==========================================================================
    # LOGGING
    # ==========================================================================

    def log(self, level: Level, template: str, *args: Any) -> None:
        """
        Write one line at `level`.

        Without arguments the template is written verbatim. With arguments
        each `%x` placeholder takes the next argument and `%%` yields `%`.
        """
        with self._lock:
            if not (self._to_console or self._to_file):
                return

            try:
                body = format_message(template, args)
                short = bool(args) and count_placeholders(template) > len(args)
            except Exception as e:
                # An argument whose __str__ fails must not take the caller down
                self._report_once("argument", repr(template), f"Cannot render arguments for {template!r}: {e}")
                body, short = str(template), False

            if short:
                self._report_once(
                    "underflow",
                    template,
                    f"Template {template!r} has more placeholders than the "
                    f"{len(args)} argument(s) supplied; line truncated.",
                )

            record = logging.makeLogRecord({
                "name": self._name,
                "levelno": int(level) if isinstance(level, int) else int(Level.UNKNOWN),
                "levelname": level_name(level),
                "msg": body,
                "timestamp": format_timestamp(self._clock.now()),
            })

            if self._to_console and self._console is not None:
                self._console.handle(record)
                if self._console.failure is not None:
                    self._drop_console(self._console.failure)

            if self._to_file and self._file_handler is not None:
                self._file_handler.handle(record)
                if self._file_handler.failure is not None:
                    self._drop_file_handler(self._file_handler.failure)

    def info(self, template: str, *args: Any) -> None:
        self.log(Level.INFO, template, *args)

    def error(self, template: str, *args: Any) -> None:
        self.log(Level.ERROR, template, *args)

    def debug(self, template: str, *args: Any) -> None:
        self.log(Level.DEBUG, template, *args)

    def global_(self, template: str, *args: Any) -> None:
        """Write a GLOBAL line (`global` is a reserved word)."""
        self.log(Level.GLOBAL, template, *args)

    def fatal(self, template: str, *args: Any) -> None:
        self.log(Level.FATAL, template, *args)

    def warning(self, template: str, *args: Any) -> None:
        self.log(Level.WARNING, template, *args)

    def trace(self, template: str, *args: Any) -> None:
        self.log(Level.TRACE, template, *args)

    # ==========================================================================
    # LIFECYCLE
    # ==========================================================================

    def close(self) -> None:
        """Flush and close the log file. Safe to call more than once."""
        with self._lock:
            self._close_file()

    def __enter__(self) -> "TinyLog":
        return self

    def __exit__(self, exc_type: Any, exc: Any, tb: Any) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"TinyLog(name={self._name!r}, file_path={self._file_path!r})"

    # ==========================================================================
    # PRIVATE HELPERS
    # ==========================================================================

    def _preprocess(self) -> None:
        """
        Close the current file, then resolve and open the configured one.

        Must be called with the lock held.
        """
        self._close_file()
        self._last_error = None

        self._file_path, self._rotation_counter = resolve_log_path(
            self._directory, self._file_base_name
        )

        try:
            ensure_directory_exists(self._directory)
            self._file_handler = create_file_handler(self._file_path)
        except FilesystemError as e:
            self._last_error = e
            self._report_once("filesystem", e.path or self._file_path, str(e))
            return

        logger.debug(f"Log file opened at {self._file_path}")

    def _close_file(self) -> None:
        if self._file_handler is None:
            return
        handler = self._file_handler
        self._file_handler = None
        handler.close()

    def _drop_file_handler(self, failure: BaseException) -> None:
        err = FilesystemError(f"Write to log file '{self._file_path}' failed: {failure}", path=self._file_path)
        self._last_error = err
        self._close_file()
        self._report_once("filesystem", self._file_path, str(err))

    def _drop_console(self, failure: BaseException) -> None:
        self._console = None
        self._report_once("console", "stream", f"Write to console stream failed, console output disabled: {failure}")

    def _report_once(self, kind: str, key: str, message: str) -> None:
        if (kind, key) in self._reported:
            self._reported.move_to_end((kind, key))
            return
        self._reported[(kind, key)] = None
        if len(self._reported) > MAX_REPORTED_KEYS:
            self._reported.popitem(last=False)
        logger.warning(message)

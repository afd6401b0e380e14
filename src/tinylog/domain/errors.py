from __future__ import annotations

"""
Error Taxonomy.

Runtime I/O failures and caller programming errors are kept in separate
branches so callers can tell them apart.
"""

from typing import Optional


class TinyLogError(Exception):
    """Base class for every error raised by the library."""


class FilesystemError(TinyLogError, OSError):
    """
    A log directory could not be created or a log file could not be opened.

    Attributes:
        path: The filesystem path involved in the failure.
    """

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class FormatUnderflow(TinyLogError, ValueError):
    """
    A template requested more arguments than were supplied.

    Attributes:
        template: The offending template.
        placeholders: Number of placeholders found in the template.
        supplied: Number of arguments supplied.
    """

    def __init__(self, template: str, placeholders: int, supplied: int) -> None:
        super().__init__(
            f"Template requires {placeholders} argument(s) but {supplied} "
            f"were supplied: {template!r}"
        )
        self.template = template
        self.placeholders = placeholders
        self.supplied = supplied

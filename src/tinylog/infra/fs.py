from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Resolves the concrete log file a logger writes to: directory normalization,
recursive directory creation and collision-free file naming for non-default
base names. Resolution is a pure probe and never creates files.
"""

import os
from typing import Optional, Tuple

from tinylog.domain.constants import (
    DEFAULT_BASE_NAME,
    DEFAULT_LOG_DIR,
    LOG_FILE_SUFFIX,
    PATH_SEPARATORS,
)
from tinylog.domain.errors import FilesystemError

# -----------------------------------------------------------------------------
# DIRECTORY API
# -----------------------------------------------------------------------------

def normalize_directory(directory: Optional[str]) -> str:
    """
    Normalize a configured directory so it always ends with a separator.

    Backslashes are rewritten to forward slashes, which every supported
    platform accepts, so `a\\b` and `a/b` name the same directory.

    Args:
        directory: Raw directory string. Empty or None means the default.

    Returns:
        str: Directory path terminated by "/".
    """
    d = (directory or "").strip() or DEFAULT_LOG_DIR
    d = d.replace("\\", "/")
    if not d.endswith(PATH_SEPARATORS):
        d += "/"
    return d


def ensure_directory_exists(directory: str) -> None:
    """
    Create every missing segment of a directory path.

    Idempotent: existing segments are left untouched.

    Args:
        directory: Target directory, "/" or "\\" separated.

    Raises:
        FilesystemError: If a segment cannot be created.
    """
    target = normalize_directory(directory)
    try:
        os.makedirs(target, exist_ok=True)
    except OSError as e:
        raise FilesystemError(
            f"Cannot create log directory '{target}': {e}", path=target
        ) from e


# -----------------------------------------------------------------------------
# FILE RESOLUTION API
# -----------------------------------------------------------------------------

def file_exists(path: str) -> bool:
    """Return True if a regular file exists at `path`."""
    return os.path.isfile(path)


def resolve_log_path(directory: str, base_name: str) -> Tuple[str, int]:
    """
    Compute the concrete log file path for a directory and base name.

    The default base name always maps to `<dir>/tinylog.log` and is opened
    for append. Any other base name is probed for collisions: the plain
    `<dir>/<base>.log` is used if free, otherwise `<base>_0.log`,
    `<base>_1.log`, ... until a free path is found.

    Args:
        directory: Log directory (normalized internally).
        base_name: File name without suffix.

    Returns:
        Tuple[str, int]: (Resolved path, number of collisions skipped).
    """
    d = normalize_directory(directory)
    candidate = f"{d}{base_name}{LOG_FILE_SUFFIX}"

    if base_name == DEFAULT_BASE_NAME:
        return candidate, 0

    counter = 0
    while file_exists(candidate):
        candidate = f"{d}{base_name}_{counter}{LOG_FILE_SUFFIX}"
        counter += 1

    return candidate, counter

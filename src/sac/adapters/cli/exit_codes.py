"""POSIX-conventional exit codes for CLI error paths.

Recoverable ``config`` sub-command errors exit with ``SUCCESS``; only fatal
source and directory failures use the non-zero codes below.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes following sysexits.h and errno conventions.

    Example:
        >>> int(ExitCode.CONFIG_ERROR)
        78
    """

    SUCCESS = 0
    FILE_NOT_FOUND = 2
    CONFIG_ERROR = 78


__all__ = ["ExitCode"]

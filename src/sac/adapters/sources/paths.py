"""Locations of the global and local ``.sac.yaml`` sources."""

from __future__ import annotations

from pathlib import Path
from typing import Final

from sac.domain.errors import DirectoryUnavailableError

#: File name shared by the home-directory and current-directory sources.
SOURCE_FILENAME: Final[str] = ".sac.yaml"


def global_config_path() -> Path:
    """Return ``<home>/.sac.yaml``.

    Raises:
        DirectoryUnavailableError: The home directory cannot be determined.
    """
    try:
        home = Path.home()
    except (RuntimeError, KeyError, OSError) as exc:
        raise DirectoryUnavailableError(f"cannot determine home directory: {exc}") from exc
    return home / SOURCE_FILENAME


def local_config_path() -> Path:
    """Return ``<cwd>/.sac.yaml``.

    Raises:
        DirectoryUnavailableError: The current working directory cannot be determined.
    """
    try:
        cwd = Path.cwd()
    except OSError as exc:
        raise DirectoryUnavailableError(f"cannot determine current directory: {exc}") from exc
    return cwd / SOURCE_FILENAME


__all__ = [
    "SOURCE_FILENAME",
    "global_config_path",
    "local_config_path",
]

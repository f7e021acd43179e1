"""Application ports: callable Protocol definitions for adapter functions.

Each Protocol class defines a ``__call__`` method whose signature exactly
matches the corresponding adapter function. Module-level adapter functions
satisfy these protocols via structural subtyping (PEP 544).

System Role:
    Sits between domain and adapters. ``Config`` from lib_layered_config is
    imported under ``TYPE_CHECKING`` only so the application layer stays free
    of infrastructure imports at runtime.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from lib_layered_config import Config


class GetConfig(Protocol):
    """Load the tool's own layered runtime settings."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class InitLogging(Protocol):
    """Initialize lib_log_rich runtime with the provided configuration."""

    def __call__(self, config: Config) -> None: ...


class LoadSource(Protocol):
    """Load one ``.sac.yaml`` source into a flat string mapping.

    A missing path yields an empty mapping; read and parse failures raise
    :class:`~sac.domain.errors.SourceLoadError` subclasses.
    """

    def __call__(self, path: Path) -> dict[str, str]: ...


class ParseNested(Protocol):
    """Parse nested key-value text (racks, bags) into a flat string mapping."""

    def __call__(self, text: str) -> dict[str, str]: ...


class SourcePath(Protocol):
    """Return the location of a configuration source file."""

    def __call__(self) -> Path: ...


__all__ = [
    "GetConfig",
    "InitLogging",
    "LoadSource",
    "ParseNested",
    "SourcePath",
]

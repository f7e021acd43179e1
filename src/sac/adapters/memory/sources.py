"""In-memory source adapters for testing.

Provides source functions that satisfy the same Protocols as the YAML
adapters but never touch the filesystem.

Contents:
    * :class:`InMemorySources` - Path-keyed store of mappings with load recording.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from ..sources.paths import SOURCE_FILENAME

DEFAULT_HOME = Path("/home/sac-user")
DEFAULT_CWD = Path("/work/project")


def _empty_files() -> dict[Path, dict[str, str]]:
    return {}


def _empty_failures() -> dict[Path, Exception]:
    return {}


def _empty_loads() -> list[Path]:
    return []


@dataclass
class InMemorySources:
    """Serves ``.sac.yaml`` contents from memory.

    Each test should create its own instance. Paths default to a synthetic
    home and working directory; use :meth:`set_global` / :meth:`set_local`
    to seed contents and :attr:`failures` to simulate load errors.

    Attributes:
        home: Directory reported as the home directory.
        cwd: Directory reported as the current working directory.
        files: Mapping contents keyed by absolute source path.
        failures: Exceptions raised when the keyed path is loaded.
        loaded: Every path passed to :meth:`load_source`, in call order.

    Example:
        >>> sources = InMemorySources()
        >>> sources.set_global({"name": "alice"})
        >>> sources.load_source(sources.global_config_path())
        {'name': 'alice'}
        >>> sources.load_source(sources.local_config_path())
        {}
    """

    home: Path = DEFAULT_HOME
    cwd: Path = DEFAULT_CWD
    files: dict[Path, dict[str, str]] = field(default_factory=_empty_files)
    failures: dict[Path, Exception] = field(default_factory=_empty_failures)
    loaded: list[Path] = field(default_factory=_empty_loads)

    def global_config_path(self) -> Path:
        return self.home / SOURCE_FILENAME

    def local_config_path(self) -> Path:
        return self.cwd / SOURCE_FILENAME

    def set_global(self, mapping: dict[str, str]) -> None:
        self.files[self.global_config_path()] = dict(mapping)

    def set_local(self, mapping: dict[str, str]) -> None:
        self.files[self.local_config_path()] = dict(mapping)

    def load_source(self, path: Path) -> dict[str, str]:
        """Return a copy of the stored mapping, ``{}`` when absent.

        Raises:
            Exception: The exception registered for ``path`` in :attr:`failures`.
        """
        self.loaded.append(path)
        if path in self.failures:
            raise self.failures[path]
        return dict(self.files.get(path, {}))


__all__ = [
    "DEFAULT_CWD",
    "DEFAULT_HOME",
    "InMemorySources",
]

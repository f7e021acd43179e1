"""Domain-specific exceptions for typed error handling at boundaries.

Two tiers exist:

* Fatal: :class:`SourceLoadError` (and subclasses) and
  :class:`DirectoryUnavailableError`. These propagate to the CLI boundary,
  which terminates the process with a diagnostic.
* Recoverable: :class:`CommandError` and subclasses. The dispatcher reports
  them and the process continues.
"""

from __future__ import annotations

from pathlib import Path


class SacError(Exception):
    """Base class for every error raised by sac."""


class SourceLoadError(SacError):
    """A configuration source exists but could not be loaded.

    Example:
        >>> from pathlib import Path
        >>> err = SourceLoadError(Path("/home/u/.sac.yaml"), "boom")
        >>> err.path.name
        '.sac.yaml'
        >>> str(err)
        'boom'
    """

    def __init__(self, path: Path | None, message: str) -> None:
        super().__init__(message)
        self.path = path


class SourceReadError(SourceLoadError):
    """The source file exists but reading it failed (permissions, encoding, I/O)."""


class SourceParseError(SourceLoadError):
    """The source content is not valid YAML or not a flat string mapping."""


class DirectoryUnavailableError(SacError):
    """The home or current working directory could not be determined.

    Example:
        >>> str(DirectoryUnavailableError("home directory unavailable"))
        'home directory unavailable'
    """


class UnresolvedConfigError(RuntimeError):
    """The effective configuration was read before any resolution pass ran."""


class CommandError(SacError):
    """Recoverable, user-facing failure of a ``config`` sub-command."""


class MissingSubcommandError(CommandError):
    """``config`` was given without a sub-command name.

    Example:
        >>> str(MissingSubcommandError())
        'config command requires a subcommand'
    """

    def __init__(self) -> None:
        super().__init__("config command requires a subcommand")


class MissingArgumentsError(CommandError):
    """A sub-command was given fewer arguments than it requires.

    Example:
        >>> str(MissingArgumentsError("get", "a key"))
        'get command requires a key'
    """

    def __init__(self, subcommand: str, requirement: str) -> None:
        super().__init__(f"{subcommand} command requires {requirement}")
        self.subcommand = subcommand


class KeyNotFoundError(CommandError):
    """The requested key is absent from the effective configuration.

    Example:
        >>> err = KeyNotFoundError("editor")
        >>> err.key, str(err)
        ('editor', "no value found for key 'editor'")
    """

    def __init__(self, key: str) -> None:
        super().__init__(f"no value found for key '{key}'")
        self.key = key


class UnknownSubcommandError(CommandError):
    """The sub-command name is not one of ``set``, ``get``, ``delete``, ``list``.

    Example:
        >>> str(UnknownSubcommandError("push"))
        'unknown config subcommand: push'
    """

    def __init__(self, token: str) -> None:
        super().__init__(f"unknown config subcommand: {token}")
        self.token = token


__all__ = [
    "CommandError",
    "DirectoryUnavailableError",
    "KeyNotFoundError",
    "MissingArgumentsError",
    "MissingSubcommandError",
    "SacError",
    "SourceLoadError",
    "SourceParseError",
    "SourceReadError",
    "UnknownSubcommandError",
    "UnresolvedConfigError",
]

"""Domain layer - pure business logic with no I/O or framework dependencies.

Contents:
    * :mod:`.resolution` - Layer merge, precedence and pruning
    * :mod:`.identity` - User identity with racks and bags
    * :mod:`.commands` - Token parse step producing tagged commands
    * :mod:`.enums` - Top-level tokens and config sub-commands
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .commands import Command, ConfigCommand, InitCommand, UnrecognizedToken, parse_tokens
from .enums import ConfigSubcommand, TopLevelToken
from .errors import (
    CommandError,
    DirectoryUnavailableError,
    KeyNotFoundError,
    MissingArgumentsError,
    MissingSubcommandError,
    SacError,
    SourceLoadError,
    SourceParseError,
    SourceReadError,
    UnknownSubcommandError,
    UnresolvedConfigError,
)
from .identity import UserIdentity, build_identity
from .resolution import ConfigState, RawMapping, resolve_user

__all__ = [
    # Resolution
    "ConfigState",
    "RawMapping",
    "resolve_user",
    # Identity
    "UserIdentity",
    "build_identity",
    # Commands
    "Command",
    "ConfigCommand",
    "InitCommand",
    "UnrecognizedToken",
    "parse_tokens",
    # Enums
    "ConfigSubcommand",
    "TopLevelToken",
    # Errors
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

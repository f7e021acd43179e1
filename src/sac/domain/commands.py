"""Explicit parse step turning raw CLI tokens into tagged commands.

The token sequence is parsed once into a tuple of commands. ``init`` and
unrecognised tokens are collected in order until the first ``config``
token; that token and everything after it become a single
:class:`ConfigCommand`, so trailing tokens are never re-interpreted as
top-level commands.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .enums import TopLevelToken


@dataclass(frozen=True, slots=True)
class InitCommand:
    """Reload the local override file and re-resolve."""


@dataclass(frozen=True, slots=True)
class ConfigCommand:
    """A ``config`` invocation.

    Attributes:
        subcommand: Token following ``config``; ``None`` when absent.
        args: Every token after the sub-command name.
    """

    subcommand: str | None
    args: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class UnrecognizedToken:
    """A top-level token that is neither ``init`` nor ``config``."""

    token: str


Command = InitCommand | ConfigCommand | UnrecognizedToken


def parse_tokens(tokens: Sequence[str]) -> tuple[Command, ...]:
    """Parse the full token sequence into commands.

    Args:
        tokens: Positional tokens from the command line.

    Returns:
        Commands in token order, ending with at most one ConfigCommand.

    Examples:
        >>> parse_tokens(["init"])
        (InitCommand(),)
        >>> parse_tokens(["config", "set", "k", "v"])
        (ConfigCommand(subcommand='set', args=('k', 'v')),)
        >>> parse_tokens(["x", "config"])
        (UnrecognizedToken(token='x'), ConfigCommand(subcommand=None, args=()))
        >>> parse_tokens(["config", "get", "init"])
        (ConfigCommand(subcommand='get', args=('init',)),)
    """
    commands: list[Command] = []
    for index, token in enumerate(tokens):
        if token == TopLevelToken.INIT.value:
            commands.append(InitCommand())
        elif token == TopLevelToken.CONFIG.value:
            rest = tuple(tokens[index + 1 :])
            commands.append(ConfigCommand(subcommand=rest[0] if rest else None, args=rest[1:]))
            break
        else:
            commands.append(UnrecognizedToken(token))
    return tuple(commands)


__all__ = [
    "Command",
    "ConfigCommand",
    "InitCommand",
    "UnrecognizedToken",
    "parse_tokens",
]

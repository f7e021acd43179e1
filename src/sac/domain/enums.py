"""Type-safe domain enums for top-level tokens and config sub-commands."""

from __future__ import annotations

from enum import Enum


class TopLevelToken(str, Enum):
    """Top-level tokens recognised by the dispatcher.

    Inherits from str to allow direct comparison with raw CLI tokens.

    Attributes:
        INIT: Reload the local override file and re-resolve.
        CONFIG: Hand the remaining tokens to the config sub-command handler.

    Example:
        >>> TopLevelToken.INIT == "init"
        True
    """

    INIT = "init"
    CONFIG = "config"


class ConfigSubcommand(str, Enum):
    """Sub-commands accepted after the ``config`` token.

    Attributes:
        SET: Assign a value to a key in the effective configuration.
        GET: Print a single key.
        DELETE: Remove a key (idempotent).
        LIST: Print every key.

    Example:
        >>> ConfigSubcommand("get") is ConfigSubcommand.GET
        True
        >>> ConfigSubcommand.LIST.value
        'list'
    """

    SET = "set"
    GET = "get"
    DELETE = "delete"
    LIST = "list"


__all__ = [
    "ConfigSubcommand",
    "TopLevelToken",
]

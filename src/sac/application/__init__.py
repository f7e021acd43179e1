"""Application layer - use cases and port definitions.

Contents:
    * :mod:`.ports` - Callable Protocol definitions for adapter functions
    * :mod:`.resolver` - Load global/override layers and resolve
    * :mod:`.config_commands` - ``config set|get|delete|list`` handler
    * :mod:`.dispatcher` - Top-level command dispatch
"""

from __future__ import annotations

from .config_commands import NO_VALUES_MESSAGE, handle_config
from .dispatcher import DispatchOutcome, Dispatcher
from .ports import GetConfig, InitLogging, LoadSource, ParseNested, SourcePath
from .resolver import ConfigResolver

__all__ = [
    "ConfigResolver",
    "DispatchOutcome",
    "Dispatcher",
    "GetConfig",
    "InitLogging",
    "LoadSource",
    "NO_VALUES_MESSAGE",
    "ParseNested",
    "SourcePath",
    "handle_config",
]

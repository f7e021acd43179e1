"""In-memory adapter implementations for testing.

Lightweight implementations of the application ports that operate entirely
in memory -- no filesystem, no logging framework.

Contents:
    * :mod:`.config` - Empty runtime settings
    * :mod:`.logging` - No-op logging initializer
    * :mod:`.sources` - :class:`InMemorySources` store for ``.sac.yaml`` contents
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import get_config_in_memory
from .logging import init_logging_in_memory
from .sources import InMemorySources

# Static conformance assertions
if TYPE_CHECKING:
    from sac.application.ports import GetConfig, InitLogging, LoadSource, SourcePath

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory
    _assert_load_source: LoadSource = InMemorySources().load_source
    _assert_global_path: SourcePath = InMemorySources().global_config_path

__all__ = [
    "InMemorySources",
    "get_config_in_memory",
    "init_logging_in_memory",
]

"""Composition root wiring adapters to application ports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

# Runtime settings
from ..adapters.config.loader import get_config

# Logging services
from ..adapters.logging.setup import init_logging

# Source services
from ..adapters.sources.paths import global_config_path, local_config_path
from ..adapters.sources.yaml_loader import load_source, parse_nested

# Static conformance assertions: pyright verifies that each adapter function
# structurally satisfies its corresponding Protocol at type-check time.
if TYPE_CHECKING:
    from ..adapters.memory.sources import InMemorySources
    from ..application.ports import (
        GetConfig,
        InitLogging,
        LoadSource,
        ParseNested,
        SourcePath,
    )

    _assert_get_config: GetConfig = get_config
    _assert_init_logging: InitLogging = init_logging
    _assert_load_source: LoadSource = load_source
    _assert_parse_nested: ParseNested = parse_nested
    _assert_global_config_path: SourcePath = global_config_path
    _assert_local_config_path: SourcePath = local_config_path


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations."""

    get_config: GetConfig
    init_logging: InitLogging
    load_source: LoadSource
    parse_nested: ParseNested
    global_config_path: SourcePath
    local_config_path: SourcePath


def build_production() -> AppServices:
    """Wire production adapters into an AppServices container."""
    return AppServices(
        get_config=get_config,
        init_logging=init_logging,
        load_source=load_source,
        parse_nested=parse_nested,
        global_config_path=global_config_path,
        local_config_path=local_config_path,
    )


def build_testing(*, sources: InMemorySources | None = None) -> AppServices:
    """Wire in-memory adapters into an AppServices container.

    Args:
        sources: Optional InMemorySources store. When None, a fresh empty
            store is created. Pass your own to seed contents and assert on
            which paths were loaded.

    Returns:
        AppServices container with in-memory adapters.
    """
    from ..adapters.memory import (
        InMemorySources,
        get_config_in_memory,
        init_logging_in_memory,
    )

    store = sources if sources is not None else InMemorySources()

    return AppServices(
        get_config=get_config_in_memory,
        init_logging=init_logging_in_memory,
        load_source=store.load_source,
        parse_nested=parse_nested,
        global_config_path=store.global_config_path,
        local_config_path=store.local_config_path,
    )


__all__ = [
    # Runtime settings
    "get_config",
    # Logging
    "init_logging",
    # Sources
    "global_config_path",
    "load_source",
    "local_config_path",
    "parse_nested",
    # Composition
    "AppServices",
    "build_production",
    "build_testing",
]

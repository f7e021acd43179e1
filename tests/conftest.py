"""Shared pytest fixtures for CLI, dispatcher and loader tests.

Centralizes test infrastructure:
- All shared fixtures live here
- Tests import fixtures implicitly via pytest's conftest discovery
- Fixtures use descriptive names that read as plain English
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import dataclass, fields
from typing import TYPE_CHECKING

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner

from sac.adapters.memory import InMemorySources
from sac.application import ConfigResolver, Dispatcher
from sac.domain import ConfigState

if TYPE_CHECKING:
    from sac.composition import AppServices

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))


def _remove_ansi_codes(text: str) -> str:
    """Return *text* stripped of ANSI escape sequences."""
    return ANSI_ESCAPE_PATTERN.sub("", text)


def _snapshot_cli_config() -> dict[str, object]:
    """Capture every attribute from ``lib_cli_exit_tools.config``."""
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    """Reapply a configuration snapshot captured by ``_snapshot_cli_config``."""
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Use ``result.stdout`` for command output and ``result.stderr`` for fatal
    diagnostics so log lines never contaminate assertions.
    """
    return CliRunner()


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return _remove_ansi_codes(value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore after the test.

    Use this whenever a test reads or mutates the global
    ``lib_cli_exit_tools.config`` traceback flags.
    """
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the runtime settings lru_cache before each test."""
    from sac.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def memory_sources() -> InMemorySources:
    """Provide an empty in-memory ``.sac.yaml`` store.

    Example:
        def test_get(memory_sources: InMemorySources) -> None:
            memory_sources.set_global({"name": "alice"})
    """
    return InMemorySources()


@pytest.fixture
def sources_factory(memory_sources: InMemorySources) -> Callable[[], AppServices]:
    """Return a services factory wired to ``memory_sources``.

    All other services are in-memory too: no filesystem, no logging runtime.

    Example:
        def test_list(cli_runner, memory_sources, sources_factory) -> None:
            memory_sources.set_global({"x": "1"})
            result = cli_runner.invoke(cli, ["config", "list"], obj=sources_factory)
    """
    from sac.composition import build_testing

    services = build_testing(sources=memory_sources)
    return lambda: services


@dataclass
class DispatchContext:
    """Bundles a resolved state, its dispatcher and the captured output lines.

    Attributes:
        state: Configuration state shared by resolver and dispatcher.
        resolver: Resolver bound to the in-memory sources.
        dispatcher: Dispatcher whose output is captured in ``lines``.
        lines: Every line emitted by the dispatcher.
    """

    state: ConfigState
    resolver: ConfigResolver
    dispatcher: Dispatcher
    lines: list[str]


@pytest.fixture
def dispatch_context(memory_sources: InMemorySources) -> Callable[[], DispatchContext]:
    """Return a builder that loads the global layer, resolves and wires a dispatcher.

    Seed ``memory_sources`` before calling the builder.

    Example:
        def test_get(memory_sources, dispatch_context) -> None:
            memory_sources.set_global({"x": "1"})
            ctx = dispatch_context()
            ctx.dispatcher.dispatch(["config", "get", "x"])
            assert ctx.lines == ["x: 1"]
    """
    from sac.adapters.sources import parse_nested

    def _build() -> DispatchContext:
        state = ConfigState()
        resolver = ConfigResolver(
            state=state,
            load_source=memory_sources.load_source,
            global_path=memory_sources.global_config_path,
            local_path=memory_sources.local_config_path,
        )
        resolver.load_global()
        resolver.resolve()
        lines: list[str] = []
        dispatcher = Dispatcher(resolver=resolver, parse_nested=parse_nested, emit=lines.append)
        return DispatchContext(state=state, resolver=resolver, dispatcher=dispatcher, lines=lines)

    return _build

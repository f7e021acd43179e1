"""Resolver use case stories: layer loading and the resolution log record."""

from __future__ import annotations

import logging

import pytest

from sac.adapters.memory import InMemorySources
from sac.application import ConfigResolver
from sac.domain import ConfigState


def _resolver(sources: InMemorySources) -> ConfigResolver:
    return ConfigResolver(
        state=ConfigState(),
        load_source=sources.load_source,
        global_path=sources.global_config_path,
        local_path=sources.local_config_path,
    )


@pytest.mark.os_agnostic
def test_resolve_logs_keys_dropped_as_empty(
    memory_sources: InMemorySources,
    caplog: pytest.LogCaptureFixture,
) -> None:
    memory_sources.set_global({"a": "1", "b": "2", "c": ""})
    memory_sources.set_local({"b": ""})
    resolver = _resolver(memory_sources)
    resolver.load_global()
    resolver.load_local_override()

    with caplog.at_level(logging.DEBUG, logger="sac.application.resolver"):
        resolver.resolve()

    record = next(r for r in caplog.records if r.getMessage() == "Resolved effective configuration")
    assert resolver.state.user == {"a": "1"}
    assert record.__dict__["pruned"] == ["b", "c"]
    assert record.__dict__["keys"] == 1


@pytest.mark.os_agnostic
def test_load_layers_read_home_then_local_paths(memory_sources: InMemorySources) -> None:
    resolver = _resolver(memory_sources)

    resolver.load_global()
    resolver.load_local_override()

    assert memory_sources.loaded == [
        memory_sources.global_config_path(),
        memory_sources.local_config_path(),
    ]

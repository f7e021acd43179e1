"""Property-based tests for configuration resolution.

Uses hypothesis to generate arbitrary layers and verify that
``resolve_user`` and ``ConfigState.resolve`` satisfy their contracts for
all representable string mappings, not just hand-picked examples.
"""

from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from sac.domain import ConfigState, resolve_user

keys = st.text(min_size=1, max_size=12)
values = st.text(max_size=12)
non_empty_values = st.text(min_size=1, max_size=12)
layers = st.dictionaries(keys, values, max_size=10)


@pytest.mark.os_agnostic
@given(
    global_=st.dictionaries(keys, non_empty_values, max_size=10),
    override=st.dictionaries(keys, non_empty_values, max_size=10),
)
@settings(max_examples=200)
def test_disjoint_layers_resolve_to_their_union(global_: dict[str, str], override: dict[str, str]) -> None:
    """Disjoint non-empty layers merge into their union."""
    disjoint_override = {key: value for key, value in override.items() if key not in global_}

    user = resolve_user(global_, disjoint_override)

    assert user == {**global_, **disjoint_override}


@pytest.mark.os_agnostic
@given(global_=layers, override=layers)
@settings(max_examples=200)
def test_override_value_wins_for_shared_keys(global_: dict[str, str], override: dict[str, str]) -> None:
    """Every shared key carries the override value unless that value is empty."""
    user = resolve_user(global_, override)

    for key in global_.keys() & override.keys():
        if override[key]:
            assert user[key] == override[key]
        else:
            assert key not in user


@pytest.mark.os_agnostic
@given(global_=layers, override=layers)
@settings(max_examples=200)
def test_resolved_mapping_never_contains_empty_values(global_: dict[str, str], override: dict[str, str]) -> None:
    """Pruning removes every key whose resolved value is empty."""
    user = resolve_user(global_, override)

    assert "" not in user.values()
    merged = {**global_, **override}
    assert set(user) == {key for key, value in merged.items() if value}


@pytest.mark.os_agnostic
@given(global_=layers, override=layers)
@settings(max_examples=200)
def test_resolve_is_idempotent(global_: dict[str, str], override: dict[str, str]) -> None:
    """Two passes over unchanged layers produce identical mappings."""
    state = ConfigState(global_=global_, override=override)

    state.resolve()
    first = dict(state.user)
    state.resolve()

    assert state.user == first

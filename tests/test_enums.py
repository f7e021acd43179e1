"""Domain enum tests: member values, string equality, and exhaustive member counts."""

from __future__ import annotations

import pytest

from sac.domain.enums import ConfigSubcommand, TopLevelToken

# ======================== TopLevelToken ========================


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("member", "expected_value"),
    [
        (TopLevelToken.INIT, "init"),
        (TopLevelToken.CONFIG, "config"),
    ],
)
def test_top_level_token_member_values(member: TopLevelToken, expected_value: str) -> None:
    """Each TopLevelToken member must compare equal to its raw CLI token."""
    assert member.value == expected_value
    assert member == expected_value


@pytest.mark.os_agnostic
def test_top_level_token_member_count() -> None:
    assert len(TopLevelToken) == 2


# ======================== ConfigSubcommand ========================


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("member", "expected_value"),
    [
        (ConfigSubcommand.SET, "set"),
        (ConfigSubcommand.GET, "get"),
        (ConfigSubcommand.DELETE, "delete"),
        (ConfigSubcommand.LIST, "list"),
    ],
)
def test_config_subcommand_member_values(member: ConfigSubcommand, expected_value: str) -> None:
    """Each ConfigSubcommand member must compare equal to its raw CLI token."""
    assert member.value == expected_value
    assert member == expected_value


@pytest.mark.os_agnostic
def test_config_subcommand_rejects_unknown_token() -> None:
    with pytest.raises(ValueError):
        ConfigSubcommand("push")


@pytest.mark.os_agnostic
def test_config_subcommand_is_case_sensitive() -> None:
    with pytest.raises(ValueError):
        ConfigSubcommand("GET")


@pytest.mark.os_agnostic
def test_config_subcommand_member_count() -> None:
    assert len(ConfigSubcommand) == 4

"""User identity stories: name/email copy and racks/bags re-parsing."""

from __future__ import annotations

import pytest

from sac.adapters.sources import parse_nested
from sac.domain import UserIdentity, build_identity


@pytest.mark.os_agnostic
def test_empty_mapping_yields_blank_identity() -> None:
    assert build_identity({}, parse_nested) == UserIdentity()


@pytest.mark.os_agnostic
def test_racks_and_bags_are_parsed_independently() -> None:
    identity = build_identity(
        {"racks": "origin: /srv/origin", "bags": "main: head\ndev: next"},
        parse_nested,
    )

    assert identity.racks == {"origin": "/srv/origin"}
    assert identity.bags == {"main": "head", "dev": "next"}


@pytest.mark.os_agnostic
def test_parser_is_only_called_for_present_keys() -> None:
    seen: list[str] = []

    def _spy(text: str) -> dict[str, str]:
        seen.append(text)
        return {}

    build_identity({"name": "alice", "bags": "x: y"}, _spy)

    assert seen == ["x: y"]

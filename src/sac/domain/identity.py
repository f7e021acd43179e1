"""User identity derived from the effective configuration."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field

RACKS_KEY = "racks"
BAGS_KEY = "bags"

NestedParser = Callable[[str], dict[str, str]]
"""Parses nested key-value text (YAML) stored under a single key."""


def _empty_refs() -> dict[str, str]:
    return {}


@dataclass(frozen=True, slots=True)
class UserIdentity:
    """The user's working context.

    Attributes:
        name: Value of ``user["name"]``, empty when unset.
        email: Value of ``user["email"]``, empty when unset.
        racks: Remote references (name -> location), similar to git remotes.
        bags: Local references (name -> location), similar to git branches.
    """

    name: str = ""
    email: str = ""
    racks: dict[str, str] = field(default_factory=_empty_refs)
    bags: dict[str, str] = field(default_factory=_empty_refs)


def build_identity(user: Mapping[str, str], parse_nested: NestedParser) -> UserIdentity:
    """Build a :class:`UserIdentity` from the effective mapping.

    ``racks`` and ``bags`` are re-parsed from the text stored under the
    literal keys ``"racks"`` and ``"bags"``; absent keys yield empty mappings.
    Errors raised by ``parse_nested`` propagate unchanged.

    Example:
        >>> identity = build_identity({"name": "alice"}, lambda text: {})
        >>> identity.name, identity.email, identity.racks
        ('alice', '', {})
    """
    racks = parse_nested(user[RACKS_KEY]) if RACKS_KEY in user else {}
    bags = parse_nested(user[BAGS_KEY]) if BAGS_KEY in user else {}
    return UserIdentity(
        name=user.get("name", ""),
        email=user.get("email", ""),
        racks=racks,
        bags=bags,
    )


__all__ = [
    "BAGS_KEY",
    "NestedParser",
    "RACKS_KEY",
    "UserIdentity",
    "build_identity",
]

"""Pure resolution of the effective configuration from global and override layers."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from .errors import UnresolvedConfigError

RawMapping = dict[str, str]
"""Flat mapping of string keys to string values loaded from one source."""


def resolve_user(global_: Mapping[str, str], override: Mapping[str, str]) -> RawMapping:
    """Merge ``global_`` then ``override`` and prune empty values.

    The override layer strictly wins on conflicting keys. After merging,
    every key whose value is the empty string is removed, so a local
    override of ``""`` unsets a global setting.

    Args:
        global_: Lowest-precedence layer (home directory).
        override: Highest-precedence layer (current directory).

    Returns:
        A new mapping; the inputs are never mutated.

    Example:
        >>> resolve_user({"name": "alice", "editor": "vim"}, {"editor": ""})
        {'name': 'alice'}
        >>> resolve_user({"a": "1"}, {"a": "2", "b": "3"})
        {'a': '2', 'b': '3'}
    """
    merged: RawMapping = {}
    merged.update(global_)
    merged.update(override)
    return {key: value for key, value in merged.items() if value != ""}


def _empty_mapping() -> RawMapping:
    return {}


@dataclass
class ConfigState:
    """Holds the two input layers and the derived effective mapping.

    ``global_`` and ``override`` are replaced wholesale by the loader.
    ``user`` is only available once :meth:`resolve` has run at least once;
    afterwards it may be mutated in place by ``set``/``delete``.

    Example:
        >>> state = ConfigState(global_={"name": "alice"})
        >>> state.is_resolved
        False
        >>> state.resolve()
        >>> state.user
        {'name': 'alice'}
    """

    global_: RawMapping = field(default_factory=_empty_mapping)
    override: RawMapping = field(default_factory=_empty_mapping)
    _user: RawMapping | None = field(default=None, init=False, repr=False)

    @property
    def is_resolved(self) -> bool:
        return self._user is not None

    @property
    def user(self) -> RawMapping:
        """Return the live effective mapping.

        Raises:
            UnresolvedConfigError: If no resolution pass has run yet.
        """
        if self._user is None:
            raise UnresolvedConfigError("effective configuration read before resolve()")
        return self._user

    def resolve(self) -> None:
        """Rebuild ``user`` from scratch; idempotent for unchanged inputs."""
        self._user = resolve_user(self.global_, self.override)


__all__ = [
    "ConfigState",
    "RawMapping",
    "resolve_user",
]

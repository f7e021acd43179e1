"""Config sub-command handler operating on the live effective mapping.

Contents:
    * :func:`handle_config` - Route a :class:`ConfigCommand` to set/get/delete/list.

Failures raise :class:`~sac.domain.errors.CommandError` subclasses; the
dispatcher reports them without terminating the process.
"""

from __future__ import annotations

from collections.abc import Callable

from ..domain.commands import ConfigCommand
from ..domain.enums import ConfigSubcommand
from ..domain.errors import (
    KeyNotFoundError,
    MissingArgumentsError,
    MissingSubcommandError,
    UnknownSubcommandError,
)
from ..domain.resolution import ConfigState, RawMapping

Emit = Callable[[str], None]
"""Output sink receiving one line of text per call."""

NO_VALUES_MESSAGE = "No configuration values found."


def _require(command: ConfigCommand, count: int, requirement: str) -> tuple[str, ...]:
    if len(command.args) < count:
        raise MissingArgumentsError(str(command.subcommand), requirement)
    return command.args[:count]


def _set(user: RawMapping, command: ConfigCommand, emit: Emit) -> None:
    key, value = _require(command, 2, "a key and value")
    # Empty values are kept until the next resolve().
    user[key] = value


def _get(user: RawMapping, command: ConfigCommand, emit: Emit) -> None:
    (key,) = _require(command, 1, "a key")
    if key not in user:
        raise KeyNotFoundError(key)
    emit(f"{key}: {user[key]}")


def _delete(user: RawMapping, command: ConfigCommand, emit: Emit) -> None:
    (key,) = _require(command, 1, "a key")
    user.pop(key, None)
    emit(f"Deleted key '{key}' from user configuration.")


def _list(user: RawMapping, command: ConfigCommand, emit: Emit) -> None:
    if not user:
        emit(NO_VALUES_MESSAGE)
        return
    for key, value in user.items():
        emit(f"{key}: {value}")


_HANDLERS: dict[ConfigSubcommand, Callable[[RawMapping, ConfigCommand, Emit], None]] = {
    ConfigSubcommand.SET: _set,
    ConfigSubcommand.GET: _get,
    ConfigSubcommand.DELETE: _delete,
    ConfigSubcommand.LIST: _list,
}


def handle_config(state: ConfigState, command: ConfigCommand, emit: Emit) -> None:
    """Execute one ``config`` sub-command against ``state.user``.

    Args:
        state: Resolved configuration state; ``user`` is mutated in place.
        command: Parsed config invocation.
        emit: Output sink for result lines.

    Raises:
        MissingSubcommandError: No sub-command name was given.
        MissingArgumentsError: The sub-command lacks required arguments.
        KeyNotFoundError: ``get`` on a key absent from the effective mapping.
        UnknownSubcommandError: The sub-command name is not recognised.

    Example:
        >>> state = ConfigState(global_={"x": "1"})
        >>> state.resolve()
        >>> handle_config(state, ConfigCommand("set", ("x", "2")), print)
        >>> handle_config(state, ConfigCommand("get", ("x",)), print)
        x: 2
    """
    if command.subcommand is None:
        raise MissingSubcommandError()
    try:
        subcommand = ConfigSubcommand(command.subcommand)
    except ValueError as exc:
        raise UnknownSubcommandError(command.subcommand) from exc
    _HANDLERS[subcommand](state.user, command, emit)


__all__ = [
    "Emit",
    "NO_VALUES_MESSAGE",
    "handle_config",
]

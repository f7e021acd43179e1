"""Command dispatcher executing parsed top-level commands in order."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from ..domain.commands import ConfigCommand, InitCommand, UnrecognizedToken, parse_tokens
from ..domain.errors import CommandError
from ..domain.identity import UserIdentity, build_identity
from .config_commands import Emit, handle_config
from .ports import ParseNested
from .resolver import ConfigResolver

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DispatchOutcome:
    """Result of one dispatch run.

    Attributes:
        identity: User identity built from the effective mapping at dispatch start.
        error: Recoverable command error that was reported, if any.
    """

    identity: UserIdentity
    error: CommandError | None = None


@dataclass
class Dispatcher:
    """Routes parsed commands to the resolver and the config sub-command handler."""

    resolver: ConfigResolver
    parse_nested: ParseNested
    emit: Emit

    def dispatch(self, tokens: Sequence[str]) -> DispatchOutcome:
        """Parse ``tokens`` once and execute the resulting commands.

        ``init`` reloads the local override and re-resolves. ``config`` runs
        the sub-command handler and ends the run. Unrecognised tokens are
        skipped. Command errors are reported through ``emit`` as
        ``Error: <message>`` and returned in the outcome instead of raised.

        Raises:
            SourceLoadError: Loading the local override or parsing racks/bags failed.
        """
        state = self.resolver.state
        identity = build_identity(state.user, self.parse_nested)
        logger.debug(
            "Built user identity",
            extra={"racks": len(identity.racks), "bags": len(identity.bags)},
        )

        for command in parse_tokens(tokens):
            if isinstance(command, InitCommand):
                logger.info("Initializing local configuration")
                self.resolver.load_local_override()
                self.resolver.resolve()
            elif isinstance(command, ConfigCommand):
                return DispatchOutcome(identity=identity, error=self._run_config(command))
            elif isinstance(command, UnrecognizedToken):
                logger.debug("Skipping unrecognized token", extra={"token": command.token})
        return DispatchOutcome(identity=identity)

    def _run_config(self, command: ConfigCommand) -> CommandError | None:
        logger.info("Running config subcommand", extra={"subcommand": command.subcommand})
        try:
            handle_config(self.resolver.state, command, self.emit)
        except CommandError as exc:
            logger.warning("Config subcommand failed", extra={"error": str(exc)})
            self.emit(f"Error: {exc}")
            return exc
        return None


__all__ = [
    "DispatchOutcome",
    "Dispatcher",
]

"""Root CLI command: global flags, startup resolution and token dispatch.

Contents:
    * :func:`cli` - Root command taking the dispatch tokens.
    * :func:`run_tokens` - Load the global layer, resolve and dispatch.
"""

from __future__ import annotations

import contextlib
import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

import lib_log_rich.runtime
import rich_click as click
from lib_layered_config import Config

from sac import __init__conf__
from sac.application.dispatcher import DispatchOutcome, Dispatcher
from sac.application.resolver import ConfigResolver
from sac.domain.errors import DirectoryUnavailableError, SourceLoadError
from sac.domain.resolution import ConfigState

from .constants import DISPATCH_CONTEXT_SETTINGS
from .exit_codes import ExitCode
from .traceback_state import apply_traceback_preferences

if TYPE_CHECKING:
    from sac.composition import AppServices

logger = logging.getLogger(__name__)


def _print_info(ctx: click.Context, param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    __init__conf__.print_info()
    ctx.exit()


def _load_runtime_settings(services: AppServices, profile: str | None) -> Config:
    """Load runtime settings, raising BadParameter for invalid profile names."""
    try:
        return services.get_config(profile=profile)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--profile") from exc


def _log_scope(tokens: Sequence[str], profile: str | None) -> contextlib.AbstractContextManager[object]:
    if not lib_log_rich.runtime.is_initialised():
        return contextlib.nullcontext()
    return lib_log_rich.runtime.bind(job_id="cli-sac", extra={"command": tokens[0], "profile": profile})


def run_tokens(services: AppServices, tokens: Sequence[str]) -> DispatchOutcome:
    """Load the global layer, resolve, and dispatch ``tokens``.

    Fatal source failures are reported on stderr and end the process with
    a non-zero exit code; recoverable command errors are printed by the
    dispatcher and leave the exit code at zero.

    Args:
        services: Wired application services.
        tokens: Positional tokens from the command line.

    Returns:
        The dispatch outcome.

    Raises:
        SystemExit: ``FILE_NOT_FOUND`` when a directory is unavailable,
            ``CONFIG_ERROR`` when a source cannot be read or parsed.
    """
    resolver = ConfigResolver(
        state=ConfigState(),
        load_source=services.load_source,
        global_path=services.global_config_path,
        local_path=services.local_config_path,
    )
    dispatcher = Dispatcher(resolver=resolver, parse_nested=services.parse_nested, emit=click.echo)
    try:
        resolver.load_global()
        resolver.resolve()
        return dispatcher.dispatch(tokens)
    except DirectoryUnavailableError as exc:
        logger.error("Directory unavailable", extra={"error": str(exc)})
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(ExitCode.FILE_NOT_FOUND) from exc
    except SourceLoadError as exc:
        logger.error(
            "Failed to load configuration source",
            extra={"error": str(exc), "source": str(exc.path) if exc.path else None},
        )
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(ExitCode.CONFIG_ERROR) from exc


@click.command("sac", context_settings=DISPATCH_CONTEXT_SETTINGS)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--info",
    is_flag=True,
    expose_value=False,
    is_eager=True,
    callback=_print_info,
    help="Show package metadata and exit",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.option(
    "--profile",
    type=str,
    default=None,
    help="Load runtime settings from a named profile (e.g., 'work', 'test')",
)
@click.argument("tokens", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None, tokens: tuple[str, ...]) -> None:
    r"""Resolve the effective configuration and run the given tokens.

    \b
    Commands:
      init                       reload ./.sac.yaml and re-resolve
      config set KEY VALUE       set a value for this session
      config get KEY             print one value
      config delete KEY          remove a value for this session
      config list                print every value

    ~/.sac.yaml is overridden by ./.sac.yaml; empty values unset a key.
    """
    # ctx.obj is always the services factory (production or test)
    if not callable(ctx.obj):
        raise RuntimeError("Services factory not provided. This is a bug.")
    services: AppServices = ctx.obj()  # type: ignore[assignment]  # Click's obj is typed as Any
    config = _load_runtime_settings(services, profile)
    services.init_logging(config)
    apply_traceback_preferences(traceback)

    if not tokens:
        click.echo(ctx.get_help())
        return

    with _log_scope(tokens, profile):
        logger.info("Dispatching tokens", extra={"tokens": list(tokens)})
        run_tokens(services, tokens)


__all__ = ["cli", "run_tokens"]

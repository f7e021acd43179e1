"""Process boundary for ``sac``: run the root command and map outcomes to exit codes.

Shared by the ``sac`` console script and ``python -m sac``.

Contents:
    * :func:`main` - Run the CLI and return an exit code.

Exit code mapping:
    * Click ``Exit``/``ClickException`` keep Click's own code (usage errors -> 2).
    * ``SystemExit`` raised by :func:`~sac.adapters.cli.root.run_tokens`
      carries :class:`~sac.adapters.cli.exit_codes.ExitCode` after the
      message was already printed.
    * Anything else is rendered by lib_cli_exit_tools, honouring ``--traceback``.
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import click
import lib_cli_exit_tools
import lib_log_rich.runtime

from sac import __init__conf__

from .constants import TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .traceback_state import (
    apply_traceback_preferences,
    restore_traceback_state,
    snapshot_traceback_state,
)

if TYPE_CHECKING:
    from sac.composition import AppServices


def _report_unexpected(exc: BaseException) -> int:
    """Print ``exc`` through lib_cli_exit_tools and return its exit code."""
    verbose = bool(getattr(lib_cli_exit_tools.config, "traceback", False))
    apply_traceback_preferences(verbose)
    limit = TRACEBACK_VERBOSE_LIMIT if verbose else TRACEBACK_SUMMARY_LIMIT
    lib_cli_exit_tools.print_exception_message(trace_back=verbose, length_limit=limit)
    return lib_cli_exit_tools.get_system_exit_code(exc)


def _run_cli(argv: Sequence[str] | None, *, services_factory: Callable[[], AppServices]) -> int:
    from .root import cli

    args = list(argv) if argv is not None else sys.argv[1:]
    try:
        cli.main(
            args=args,
            prog_name=__init__conf__.shell_command,
            obj=services_factory,
            standalone_mode=False,
        )
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except SystemExit as exc:
        return int(exc.code) if isinstance(exc.code, int) else 1
    except BaseException as exc:
        return _report_unexpected(exc)
    return 0


def _shutdown_logging() -> None:
    # Worker threads must not tear down the shared runtime.
    if threading.current_thread() is not threading.main_thread():
        return
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.shutdown()


def main(
    argv: Sequence[str] | None = None,
    *,
    restore_traceback: bool = True,
    services_factory: Callable[[], AppServices] | None = None,
) -> int:
    """Run ``sac`` with ``argv`` and return the process exit code.

    Args:
        argv: Command-line arguments without the program name; ``None`` reads ``sys.argv``.
        restore_traceback: Restore the lib_cli_exit_tools traceback flags afterwards.
        services_factory: Returns the wired :class:`~sac.composition.AppServices`.
            Pass ``build_production`` outside of tests.

    Returns:
        ``0`` on success, including recoverable command errors; ``2`` for
        usage errors or an unavailable directory; ``78`` when a ``.sac.yaml``
        source cannot be read or parsed.

    Raises:
        ValueError: If services_factory is not provided.

    Example:
        >>> from sac.composition import build_production
        >>> main(["config", "list"], services_factory=build_production)  # doctest: +SKIP
        No configuration values found.
        0
    """
    if services_factory is None:
        raise ValueError("services_factory is required. Pass build_production from composition layer.")

    previous_state = snapshot_traceback_state()
    try:
        return _run_cli(argv, services_factory=services_factory)
    finally:
        if restore_traceback:
            restore_traceback_state(previous_state)
        _shutdown_logging()


__all__ = ["main"]

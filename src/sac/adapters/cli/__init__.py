"""CLI package providing the command-line interface.

Contents:
    * Traceback state management from :mod:`.traceback_state`
    * Root command and startup dispatch from :mod:`.root`
    * Entry point from :mod:`.main`

System Role:
    Acts as the public facade for the CLI subsystem. Consumers import from here
    and remain insulated from internal module boundaries.
"""

from __future__ import annotations

from .constants import CLICK_CONTEXT_SETTINGS, TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .exit_codes import ExitCode
from .main import main
from .root import cli, run_tokens
from .traceback_state import (
    TracebackState,
    apply_traceback_preferences,
    restore_traceback_state,
    snapshot_traceback_state,
)

__all__ = [
    # Constants
    "CLICK_CONTEXT_SETTINGS",
    "TRACEBACK_SUMMARY_LIMIT",
    "TRACEBACK_VERBOSE_LIMIT",
    "ExitCode",
    # Traceback management
    "TracebackState",
    "apply_traceback_preferences",
    "restore_traceback_state",
    "snapshot_traceback_state",
    # Root command
    "cli",
    "run_tokens",
    # Entry point
    "main",
]

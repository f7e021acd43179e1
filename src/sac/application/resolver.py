"""Config resolver use case: load both layers and rebuild the effective mapping."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..domain.resolution import ConfigState
from .ports import LoadSource, SourcePath

logger = logging.getLogger(__name__)


@dataclass
class ConfigResolver:
    """Loads the global and override layers into a :class:`ConfigState`.

    Attributes:
        state: Mutable state shared with the dispatcher.
        load_source: Port reading one source file.
        global_path: Port returning the home-directory source path.
        local_path: Port returning the current-directory source path.
    """

    state: ConfigState
    load_source: LoadSource
    global_path: SourcePath
    local_path: SourcePath

    def load_global(self) -> None:
        """Replace the global layer with the home-directory source."""
        path = self.global_path()
        self.state.global_ = self.load_source(path)
        logger.info("Loaded global configuration", extra={"path": str(path), "keys": len(self.state.global_)})

    def load_local_override(self) -> None:
        """Replace the override layer with the current-directory source."""
        path = self.local_path()
        self.state.override = self.load_source(path)
        logger.info("Loaded local override", extra={"path": str(path), "keys": len(self.state.override)})

    def resolve(self) -> None:
        """Rebuild the effective mapping from both layers."""
        self.state.resolve()
        user = self.state.user
        pruned = sorted((self.state.global_.keys() | self.state.override.keys()) - user.keys())
        logger.debug(
            "Resolved effective configuration",
            extra={"keys": len(user), "pruned": pruned},
        )


__all__ = ["ConfigResolver"]

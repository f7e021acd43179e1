"""Adapters layer - infrastructure and framework integrations.

Contents:
    * :mod:`.sources` - ``.sac.yaml`` discovery and YAML loading
    * :mod:`.config` - Runtime settings via lib_layered_config
    * :mod:`.logging` - Logging setup with lib_log_rich
    * :mod:`.memory` - In-memory adapters for tests
    * :mod:`.cli` - Click CLI framework integration
"""

from __future__ import annotations

__all__: list[str] = []

"""Runtime settings adapter - loading via lib_layered_config.

Contents:
    * :mod:`.loader` - Cached layered settings loading with profile validation
"""

from __future__ import annotations

from .loader import get_config, get_default_config_path, validate_profile

__all__ = [
    "get_config",
    "get_default_config_path",
    "validate_profile",
]

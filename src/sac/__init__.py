"""Public package surface exposing resolution, dispatch and metadata.

Routes imports through the architectural layers:
- Domain exports: configuration state, resolution and command parsing
- Application exports: resolver and dispatcher use cases
- Composition exports: wired adapter services
- Metadata: package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Application exports
from .application import ConfigResolver, Dispatcher

# Composition exports (wired adapters)
from .composition import build_production

# Domain exports
from .domain import ConfigState, UserIdentity, parse_tokens, resolve_user

__all__ = [
    "ConfigResolver",
    "ConfigState",
    "Dispatcher",
    "UserIdentity",
    "build_production",
    "parse_tokens",
    "print_info",
    "resolve_user",
]

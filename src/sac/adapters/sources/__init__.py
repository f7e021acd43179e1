"""Source adapter - ``.sac.yaml`` discovery and YAML loading.

Contents:
    * :mod:`.paths` - Home-directory and current-directory source paths
    * :mod:`.yaml_loader` - PyYAML-backed loader and nested-text parser
"""

from __future__ import annotations

from .paths import SOURCE_FILENAME, global_config_path, local_config_path
from .yaml_loader import flatten_document, load_source, parse_nested

__all__ = [
    "SOURCE_FILENAME",
    "flatten_document",
    "global_config_path",
    "load_source",
    "local_config_path",
    "parse_nested",
]

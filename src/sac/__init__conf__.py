"""Static package metadata surfaced to the CLI and configuration loader.

Contents:
    * Identity constants (``name``, ``title``, ``version``, ``shell_command``).
    * ``LAYEREDCONF_*`` identifiers used by lib_layered_config to locate the
      tool's own runtime settings on each platform.
    * :func:`print_info` - Render the metadata block for ``sac --info``.
"""

from __future__ import annotations

from typing import Final

name: Final[str] = "sac"
title: Final[str] = "Layered key-value configuration for sac working directories"
version: Final[str] = "0.1.0"
shell_command: Final[str] = "sac"

#: Vendor, application and slug identifiers for lib_layered_config path discovery.
LAYEREDCONF_VENDOR: Final[str] = "sac"
LAYEREDCONF_APP: Final[str] = "Sac"
LAYEREDCONF_SLUG: Final[str] = "sac"


def print_info() -> None:
    """Print the package metadata as an aligned ``label = value`` block.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for sac:
        ...
    """
    rows = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in rows)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in rows)
    print("\n".join(lines))


__all__ = [
    "LAYEREDCONF_APP",
    "LAYEREDCONF_SLUG",
    "LAYEREDCONF_VENDOR",
    "name",
    "print_info",
    "shell_command",
    "title",
    "version",
]

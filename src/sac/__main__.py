"""``python -m sac`` runs the same production-wired CLI as the ``sac`` script."""

from __future__ import annotations

from .entry import main

if __name__ == "__main__":
    raise SystemExit(main())

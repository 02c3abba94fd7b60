"""Allow ``python -m linux_wave`` as an alias for the ``linux-wave`` script."""

from __future__ import annotations

from .entry import main

if __name__ == "__main__":
    raise SystemExit(main())

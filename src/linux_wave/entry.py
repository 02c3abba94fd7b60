"""``linux-wave`` console script.

Lives outside :mod:`linux_wave.adapters` because it is the one place that
chooses the production services for the CLI.
"""

from __future__ import annotations

from collections.abc import Sequence

from .adapters.cli.main import main as run_cli
from .composition import build_production


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI against the real filesystem and logging runtime."""
    return run_cli(argv, services_factory=build_production)


__all__ = ["main"]

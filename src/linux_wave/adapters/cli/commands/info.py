"""``linux-wave info``: show what is installed."""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from linux_wave import __init__conf__

from ..options import CLICK_CONTEXT_SETTINGS

logger = logging.getLogger(__name__)


@click.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print package name, version and homepage."""
    with lib_log_rich.runtime.bind(job_id="cli-info", extra={"command": "info", "version": __init__conf__.version}):
        logger.debug("Printing package metadata")
        __init__conf__.print_info()


__all__ = ["cli_info"]

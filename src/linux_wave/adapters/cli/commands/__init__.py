"""Subcommands registered on the root ``linux-wave`` group."""

from __future__ import annotations

from .config import cli_check, cli_config
from .info import cli_info

__all__ = ["cli_check", "cli_config", "cli_info"]

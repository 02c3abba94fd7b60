"""Configuration display and check CLI commands.

Contents:
    * :func:`cli_config` - Display the effective configuration.
    * :func:`cli_check` - Confirm the configuration loads and validates.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from linux_wave.adapters.config.loader import SYSTEM_CONFIG_PATH, USER_CONFIG_PATH
from linux_wave.domain.enums import OutputFormat
from linux_wave.domain.schema import SECTION_NAMES

from ..context import get_cli_context
from ..options import CLICK_CONTEXT_SETTINGS, ExitCode

logger = logging.getLogger(__name__)


@click.command("config", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    default=OutputFormat.HUMAN.value,
    help="Output format (human-readable or JSON)",
)
@click.option(
    "--section",
    type=str,
    default=None,
    help=f"Show only one section ({', '.join(SECTION_NAMES)})",
)
@click.pass_context
def cli_config(ctx: click.Context, output_format: str, section: str | None) -> None:
    """Display the effective configuration after merging and validation.

    Precedence: defaults -> /etc/linux-wave/config.yaml -> ~/.config/linux-wave/config.yaml,
    or defaults -> the file given with --config.
    """
    cli_ctx = get_cli_context(ctx)
    fmt = OutputFormat(output_format.lower())

    extra = {"command": "config", "format": fmt.value, "section": section}
    with lib_log_rich.runtime.bind(job_id="cli-config", extra=extra):
        logger.info("Displaying configuration", extra={"format": fmt.value, "section": section})
        try:
            cli_ctx.services.display_config(cli_ctx.config, output_format=fmt, section=section)
        except ValueError as exc:
            click.echo(f"\nError: {exc}", err=True)
            raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc


@click.command("check", context_settings=CLICK_CONTEXT_SETTINGS)
@click.pass_context
def cli_check(ctx: click.Context) -> None:
    """Confirm that the configuration loads and passes validation.

    Failures never reach this command: the root command exits with code 78
    and lists every violation first.
    """
    cli_ctx = get_cli_context(ctx)
    with lib_log_rich.runtime.bind(job_id="cli-check", extra={"command": "check"}):
        logger.info("Configuration check passed", extra={"config_path": cli_ctx.config_path})
        if cli_ctx.config_path is not None:
            click.echo(f"Configuration OK: {cli_ctx.config_path}")
        else:
            click.echo(f"Configuration OK: defaults, {SYSTEM_CONFIG_PATH}, {USER_CONFIG_PATH}")


__all__ = ["cli_check", "cli_config"]

"""Root CLI command group and global option handling.

Loads and validates the configuration once per invocation, initialises
logging from it, and stores both in the Click context for subcommands.
A configuration that cannot be loaded stops the CLI with exit code 78
after listing every problem found. ``info`` skips loading and runs with
the built-in defaults.

Contents:
    * :func:`cli` - Root command group with global options.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import rich_click as click

from linux_wave import __init__conf__
from linux_wave.domain.defaults import default_configuration
from linux_wave.domain.errors import ConfigurationError, ConfigValidationError
from linux_wave.domain.schema import Configuration

from .context import apply_traceback_preferences, store_cli_context
from .options import CLICK_CONTEXT_SETTINGS, ExitCode

if TYPE_CHECKING:
    from linux_wave.composition import AppServices

logger = logging.getLogger(__name__)

# Commands that never read the configuration; a broken file must not block them.
_CONFIG_FREE_COMMANDS = frozenset({"info"})


def _load_configuration(services: AppServices, config_path: str | None) -> Configuration:
    """Load configuration through the services, exiting on failure.

    Raises:
        SystemExit: With ExitCode.CONFIG_ERROR when loading or validation fails.
    """
    try:
        if config_path is not None:
            return services.load_config_from_path(config_path)
        return services.load_config()
    except ConfigValidationError as exc:
        click.echo("Error: configuration validation failed:", err=True)
        for violation in exc.violations:
            click.echo(f"  - {violation.field}: {violation.message}", err=True)
        raise SystemExit(ExitCode.CONFIG_ERROR) from exc
    except ConfigurationError as exc:
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(ExitCode.CONFIG_ERROR) from exc


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.option(
    "--config",
    "config_path",
    type=str,
    default=None,
    metavar="PATH",
    help="Load only this file over the defaults instead of the system and user files",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, config_path: str | None) -> None:
    """Root command storing global flags and the loaded configuration.

    Example:
        >>> from click.testing import CliRunner
        >>> runner = CliRunner()
        >>> # Real invocation tested in test_cli_config.py
    """
    # ctx.obj is always the services factory (production or test)
    if not callable(ctx.obj):
        raise RuntimeError("Services factory not provided. This is a bug.")
    services: AppServices = ctx.obj()  # type: ignore[assignment]  # Click's obj is typed as Any
    if ctx.invoked_subcommand in _CONFIG_FREE_COMMANDS:
        config = default_configuration()
    else:
        config = _load_configuration(services, config_path)
    services.init_logging(config)
    store_cli_context(ctx, traceback=traceback, config=config, services=services, config_path=config_path)
    apply_traceback_preferences(traceback)
    logger.debug("Configuration ready", extra={"config_path": config_path, "command": ctx.invoked_subcommand})

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


# Deferred import: command modules import from this package's ancestors.
def _register_commands() -> None:
    from .commands import cli_check, cli_config, cli_info

    for cmd in (cli_check, cli_config, cli_info):
        cli.add_command(cmd)


_register_commands()


__all__ = ["cli"]

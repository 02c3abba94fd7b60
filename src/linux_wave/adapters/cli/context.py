"""Per-invocation CLI state and the shared traceback switch.

The root command loads the configuration once and hands it to subcommands
through ``ctx.obj``. Traceback verbosity lives in ``lib_cli_exit_tools``'
global config, so it is snapshotted around each run.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, NamedTuple

import lib_cli_exit_tools
import rich_click as click

from linux_wave.domain.schema import Configuration

if TYPE_CHECKING:
    from linux_wave.composition import AppServices


class TracebackState(NamedTuple):
    enabled: bool
    force_color: bool


@dataclass(slots=True)
class CLIContext:
    """What every subcommand needs: the validated configuration and the services."""

    traceback: bool
    config: Configuration
    services: AppServices
    config_path: str | None = None


def store_cli_context(
    ctx: click.Context,
    *,
    traceback: bool,
    config: Configuration,
    services: AppServices,
    config_path: str | None = None,
) -> None:
    """Replace the services factory in ``ctx.obj`` with a :class:`CLIContext`.

    Example:
        >>> from unittest.mock import MagicMock
        >>> from linux_wave.composition import build_testing
        >>> from linux_wave.domain.defaults import default_configuration
        >>> ctx = MagicMock()
        >>> store_cli_context(ctx, traceback=False, config=default_configuration(), services=build_testing())
        >>> ctx.obj.config.service.timeout
        10
    """
    ctx.obj = CLIContext(traceback=traceback, config=config, services=services, config_path=config_path)


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Return the :class:`CLIContext` stored by the root command.

    Raises:
        RuntimeError: If a subcommand runs without the root command.
    """
    obj = ctx.obj
    if isinstance(obj, CLIContext):
        return obj
    raise RuntimeError("CLI context missing; subcommands must run under the linux-wave root command.")


def apply_traceback_preferences(enabled: bool) -> None:
    """Turn full (colored) tracebacks on or off for lib_cli_exit_tools."""
    lib_cli_exit_tools.config.traceback = bool(enabled)
    lib_cli_exit_tools.config.traceback_force_color = bool(enabled)


def snapshot_traceback_state() -> TracebackState:
    cfg = lib_cli_exit_tools.config
    return TracebackState(bool(getattr(cfg, "traceback", False)), bool(getattr(cfg, "traceback_force_color", False)))


def restore_traceback_state(state: TracebackState) -> None:
    lib_cli_exit_tools.config.traceback = state.enabled
    lib_cli_exit_tools.config.traceback_force_color = state.force_color


__all__ = [
    "CLIContext",
    "TracebackState",
    "apply_traceback_preferences",
    "get_cli_context",
    "restore_traceback_state",
    "snapshot_traceback_state",
    "store_cli_context",
]

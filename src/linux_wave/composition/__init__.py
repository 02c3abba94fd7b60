"""Wiring of concrete adapters into the services the CLI runs with.

``build_production`` reads real files and starts lib_log_rich;
``build_testing`` uses the in-memory fakes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..adapters.config.display import display_config
from ..adapters.config.loader import load_config, load_config_from_path
from ..adapters.logging.setup import init_logging

if TYPE_CHECKING:
    from ..application.ports import DisplayConfig, InitLogging, LoadConfig, LoadConfigFromPath

    # pyright checks each adapter against its port here.
    _assert_load_config: LoadConfig = load_config
    _assert_load_config_from_path: LoadConfigFromPath = load_config_from_path
    _assert_display_config: DisplayConfig = display_config
    _assert_init_logging: InitLogging = init_logging


@dataclass(frozen=True, slots=True)
class AppServices:
    """The four capabilities a CLI invocation needs."""

    load_config: LoadConfig
    load_config_from_path: LoadConfigFromPath
    display_config: DisplayConfig
    init_logging: InitLogging


def build_production() -> AppServices:
    return AppServices(
        load_config=load_config,
        load_config_from_path=load_config_from_path,
        display_config=display_config,
        init_logging=init_logging,
    )


def build_testing() -> AppServices:
    """Services that never touch disk: loading yields the defaults, display prints nothing."""
    from ..adapters.memory import (
        display_config_in_memory,
        init_logging_in_memory,
        load_config_from_path_in_memory,
        load_config_in_memory,
    )

    return AppServices(
        load_config=load_config_in_memory,
        load_config_from_path=load_config_from_path_in_memory,
        display_config=display_config_in_memory,
        init_logging=init_logging_in_memory,
    )


__all__ = [
    "AppServices",
    "build_production",
    "build_testing",
    "display_config",
    "init_logging",
    "load_config",
    "load_config_from_path",
]

"""In-memory adapters for tests: no disk, no console, no logging runtime."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .fakes import (
    InMemoryFileSystem,
    display_config_in_memory,
    init_logging_in_memory,
    load_config_from_path_in_memory,
    load_config_in_memory,
)

if TYPE_CHECKING:
    from linux_wave.application.ports import DisplayConfig, InitLogging, LoadConfig, LoadConfigFromPath

    _assert_load_config: LoadConfig = load_config_in_memory
    _assert_load_config_from_path: LoadConfigFromPath = load_config_from_path_in_memory
    _assert_display_config: DisplayConfig = display_config_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory

__all__ = [
    "InMemoryFileSystem",
    "display_config_in_memory",
    "init_logging_in_memory",
    "load_config_from_path_in_memory",
    "load_config_in_memory",
]

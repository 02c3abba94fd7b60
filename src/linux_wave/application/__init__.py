"""Ports between the CLI and the adapters; see :mod:`.ports`."""

from __future__ import annotations

from .ports import (
    DisplayConfig,
    FileExists,
    InitLogging,
    LoadConfig,
    LoadConfigFromPath,
)

__all__ = [
    "DisplayConfig",
    "FileExists",
    "InitLogging",
    "LoadConfig",
    "LoadConfigFromPath",
]

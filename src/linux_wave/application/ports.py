"""Callable protocols the CLI depends on instead of concrete adapters.

Production adapters and the in-memory fakes are plain functions; they
satisfy these protocols structurally.
"""

from __future__ import annotations

from typing import Protocol

from ..domain.enums import OutputFormat
from ..domain.schema import Configuration


class FileExists(Protocol):
    """Answer whether a filesystem path exists."""

    def __call__(self, path: str, /) -> bool: ...


class LoadConfig(Protocol):
    """Load the layered configuration (defaults, system file, user file)."""

    def __call__(
        self,
        *,
        system_path: str = ...,
        user_path: str = ...,
        file_exists: FileExists = ...,
        home: str | None = ...,
    ) -> Configuration: ...


class LoadConfigFromPath(Protocol):
    """Load the defaults overlaid with a single explicit file."""

    def __call__(self, path: str, *, file_exists: FileExists = ..., home: str | None = ...) -> Configuration: ...


class DisplayConfig(Protocol):
    """Display the provided configuration in the requested format."""

    def __call__(
        self,
        config: Configuration,
        *,
        output_format: OutputFormat = ...,
        section: str | None = ...,
    ) -> None: ...


class InitLogging(Protocol):
    """Initialize lib_log_rich runtime with the provided configuration."""

    def __call__(self, config: Configuration) -> None: ...


__all__ = [
    "DisplayConfig",
    "FileExists",
    "InitLogging",
    "LoadConfig",
    "LoadConfigFromPath",
]

"""Fakes standing in for the filesystem, display and logging runtime.

Each function matches the signature of its production adapter, so
:func:`linux_wave.composition.build_testing` can swap them in wholesale.
"""

from __future__ import annotations

from collections.abc import Iterable

from ...application.ports import FileExists
from ...domain.defaults import default_configuration
from ...domain.enums import OutputFormat
from ...domain.schema import Configuration


class InMemoryFileSystem:
    """Answers existence checks from a fixed set of paths and records each question.

    Example:
        >>> fs = InMemoryFileSystem(["/usr/share/sounds/ok.wav"])
        >>> fs.exists("/usr/share/sounds/ok.wav"), fs.exists("/missing.wav")
        (True, False)
        >>> fs.checked
        ['/usr/share/sounds/ok.wav', '/missing.wav']
    """

    def __init__(self, paths: Iterable[str] = ()) -> None:
        self._paths: set[str] = set(paths)
        self.checked: list[str] = []

    def add(self, path: str) -> None:
        self._paths.add(path)

    def exists(self, path: str) -> bool:
        self.checked.append(path)
        return path in self._paths


def load_config_in_memory(
    *,
    system_path: str = "",
    user_path: str = "",
    file_exists: FileExists | None = None,
    home: str | None = None,
) -> Configuration:
    """Behave as if neither overlay file existed."""
    return default_configuration()


def load_config_from_path_in_memory(
    path: str,
    *,
    file_exists: FileExists | None = None,
    home: str | None = None,
) -> Configuration:
    """Behave as if ``path`` were an empty file."""
    return default_configuration()


def display_config_in_memory(
    config: Configuration,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
) -> None:
    pass


def init_logging_in_memory(config: Configuration) -> None:
    pass


__all__ = [
    "InMemoryFileSystem",
    "display_config_in_memory",
    "init_logging_in_memory",
    "load_config_from_path_in_memory",
    "load_config_in_memory",
]

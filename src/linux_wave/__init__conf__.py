"""Static package metadata surfaced to CLI commands and documentation.

Contents:
    * module-level metadata constants (name, title, version, ...).
    * :func:`print_info` - render the metadata block for the ``info`` command.
"""

from __future__ import annotations

#: Distribution name as published on the package index.
name = "linux-wave"
#: Human-readable summary shown in the CLI help header.
title = "Configuration loader for the linux-wave face authentication suite"
#: Package version, kept in sync with ``pyproject.toml``.
version = "0.1.0"
#: Project homepage.
homepage = "https://github.com/vinisadev/linuxwave"
#: Maintainer shown by ``info``.
author = "linux-wave developers"
#: Console script name registered in ``pyproject.toml``.
shell_command = "linux-wave"


def print_info() -> None:
    """Print the summarised metadata block used by the ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for linux-wave:
        ...
    """
    fields = (
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("shell_command", shell_command),
    )
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))


__all__ = [
    "author",
    "homepage",
    "name",
    "print_info",
    "shell_command",
    "title",
    "version",
]

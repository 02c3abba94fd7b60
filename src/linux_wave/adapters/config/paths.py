"""Expansion of ``~`` and environment variables in configuration paths.

Contents:
    * :func:`resolve_path` - expand a user-supplied path into an absolute path.
    * :func:`path_exists` - production filesystem existence check.
"""

from __future__ import annotations

import os
import re
from collections.abc import Mapping

from linux_wave.domain.errors import PathResolutionError

# $NAME, ${NAME}, or a one-character shell special such as $5 or $$.
# A "$" followed by anything else is left untouched.
_ENV_REFERENCE = re.compile(r"\$(?:\{(?P<braced>[^}]*)\}|(?P<bare>[A-Za-z_][A-Za-z0-9_]*|[*#$@!?\-0-9]))")


def _home_directory() -> str:
    """Return the current user's home directory.

    Raises:
        PathResolutionError: If neither ``$HOME`` nor the password database
            yields a home directory, or if ``$HOME`` is set but empty.
    """
    if os.environ.get("HOME") == "":
        raise PathResolutionError("failed to get user home directory: $HOME is empty")
    home = os.path.expanduser("~")
    if not home or home == "~":
        raise PathResolutionError("failed to get user home directory")
    return home


def expand_env(path: str, environ: Mapping[str, str] | None = None) -> str:
    """Replace ``$NAME`` and ``${NAME}`` references with their values.

    Undefined variables expand to the empty string, and so do shell
    specials like ``$5`` or ``$$`` unless the mapping defines them.

    Example:
        >>> expand_env("/srv/$APP/${MODE}.yaml", {"APP": "wave", "MODE": "prod"})
        '/srv/wave/prod.yaml'
        >>> expand_env("/tmp/$FOO/config.yaml", {})
        '/tmp//config.yaml'
        >>> expand_env("/costs/$5/x", {})
        '/costs//x'
        >>> expand_env("/price/$/x", {})
        '/price/$/x'
    """
    env = os.environ if environ is None else environ

    def _substitute(match: re.Match[str]) -> str:
        key = match.group("braced") if match.group("braced") is not None else match.group("bare")
        return env.get(key, "")

    return _ENV_REFERENCE.sub(_substitute, path)


def resolve_path(path: str, *, home: str | None = None, environ: Mapping[str, str] | None = None) -> str:
    """Expand a configuration path into an absolute path.

    A leading ``~`` is replaced by the home directory and the remainder of
    the path is joined onto it; environment references are expanded
    afterwards. A result that is still relative is anchored at the current
    working directory. The path is not otherwise normalised.

    Args:
        path: Path as written by the user, e.g. ``~/.config/linux-wave/config.yaml``.
        home: Home directory to use instead of looking it up.
        environ: Environment mapping to use instead of ``os.environ``.

    Returns:
        Absolute, fully expanded path string.

    Raises:
        PathResolutionError: If the path starts with ``~`` and the home
            directory cannot be determined.

    Example:
        >>> resolve_path("~/.config/linux-wave/config.yaml", home="/home/alice")
        '/home/alice/.config/linux-wave/config.yaml'
        >>> resolve_path("/etc/$VENDOR/config.yaml", environ={"VENDOR": "linux-wave"})
        '/etc/linux-wave/config.yaml'
    """
    if path.startswith("~"):
        base = home if home is not None else _home_directory()
        remainder = path[1:].lstrip("/")
        path = os.path.join(base, remainder) if remainder else base
    path = expand_env(path, environ)
    if not os.path.isabs(path):
        path = os.path.join(os.getcwd(), path)
    return path


def path_exists(path: str) -> bool:
    """Return whether ``path`` exists; the production ``FileExists`` capability."""
    return os.path.exists(path)


__all__ = ["expand_env", "path_exists", "resolve_path"]

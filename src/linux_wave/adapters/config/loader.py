"""Layered configuration loading: defaults, system file, user file, validate.

Contents:
    * :data:`SYSTEM_CONFIG_PATH` / :data:`USER_CONFIG_PATH` - production locations.
    * :func:`load_config` - the layered pipeline used by every consumer.
    * :func:`load_config_from_path` - single explicit file over the defaults.

Each call builds a fresh configuration; nothing is cached between calls.
The pipeline is linear and fails fast: a file that exists but cannot be
read or parsed aborts the load, while a missing overlay file is skipped.
"""

from __future__ import annotations

import logging

from linux_wave.domain.defaults import default_configuration
from linux_wave.domain.errors import ConfigurationError, ConfigValidationError
from linux_wave.domain.merge import merge_configurations
from linux_wave.domain.schema import Configuration
from linux_wave.domain.validation import FileExists, validate_configuration

from .file_loader import load_file
from .paths import path_exists, resolve_path

logger = logging.getLogger(__name__)

#: System-wide configuration file.
SYSTEM_CONFIG_PATH = "/etc/linux-wave/config.yaml"
#: User configuration file, relative to the home directory.
USER_CONFIG_PATH = "~/.config/linux-wave/config.yaml"


def _overlay(
    config: Configuration,
    *,
    scope: str,
    raw_path: str,
    file_exists: FileExists,
    home: str | None,
) -> Configuration:
    """Merge the file at ``raw_path`` over ``config`` when it exists."""
    path = resolve_path(raw_path, home=home)
    if not file_exists(path):
        logger.debug("No %s configuration file, skipping", scope, extra={"path": path})
        return config
    try:
        overlay = load_file(path)
    except ConfigurationError as exc:
        logger.error("Failed to load %s configuration", scope, extra={"path": path, "error": str(exc)})
        raise
    logger.info("Loaded %s configuration", scope, extra={"path": path})
    return merge_configurations(config, overlay)


def _validated(config: Configuration, *, file_exists: FileExists) -> Configuration:
    try:
        validate_configuration(config, file_exists=file_exists)
    except ConfigValidationError as exc:
        logger.error("Configuration validation failed", extra={"fields": list(exc.fields)})
        raise
    return config


def load_config(
    *,
    system_path: str = SYSTEM_CONFIG_PATH,
    user_path: str = USER_CONFIG_PATH,
    file_exists: FileExists = path_exists,
    home: str | None = None,
) -> Configuration:
    """Load the effective configuration from defaults and both overlay files.

    Precedence: defaults -> system file -> user file. Each overlay is
    merged with :func:`~linux_wave.domain.merge.merge_configurations`.

    Args:
        system_path: System-wide file; production default is
            :data:`SYSTEM_CONFIG_PATH`.
        user_path: User file, may start with ``~``; production default is
            :data:`USER_CONFIG_PATH`.
        file_exists: Existence capability used to skip missing overlays and
            to check custom sound files.
        home: Home directory override for ``~`` expansion.

    Returns:
        A fully validated configuration.

    Raises:
        PathResolutionError: If ``~`` cannot be expanded.
        ConfigReadError: If an existing overlay file cannot be read.
        ConfigParseError: If an overlay file is not valid for the schema.
        ConfigValidationError: If the merged result violates any constraint.

    Example:
        >>> cfg = load_config(file_exists=lambda _: False, home="/nonexistent")
        >>> cfg == default_configuration()
        True
    """
    config = default_configuration()
    config = _overlay(config, scope="system", raw_path=system_path, file_exists=file_exists, home=home)
    config = _overlay(config, scope="user", raw_path=user_path, file_exists=file_exists, home=home)
    return _validated(config, file_exists=file_exists)


def load_config_from_path(
    path: str,
    *,
    file_exists: FileExists = path_exists,
    home: str | None = None,
) -> Configuration:
    """Load the defaults overlaid with exactly one explicit file.

    The file is decoded directly over the defaults: every key present in
    the file replaces the default, including zero and ``false`` values.
    A missing file is an error here, unlike in :func:`load_config`.

    Args:
        path: File to load; ``~`` and environment references are expanded.
        file_exists: Existence capability used to check custom sound files.
        home: Home directory override for ``~`` expansion.

    Raises:
        PathResolutionError: If ``~`` cannot be expanded.
        ConfigReadError: If the file cannot be read.
        ConfigParseError: If the file is not valid for the schema.
        ConfigValidationError: If the result violates any constraint.
    """
    resolved = resolve_path(path, home=home)
    try:
        config = load_file(resolved, into=default_configuration())
    except ConfigurationError as exc:
        logger.error("Failed to load configuration", extra={"path": resolved, "error": str(exc)})
        raise
    logger.info("Loaded configuration", extra={"path": resolved})
    return _validated(config, file_exists=file_exists)


__all__ = [
    "SYSTEM_CONFIG_PATH",
    "USER_CONFIG_PATH",
    "load_config",
    "load_config_from_path",
]

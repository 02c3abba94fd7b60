"""Centralized logging initialization for all entry points.

Provides a single source of truth for lib_log_rich runtime configuration so
that module execution, the console script and tests share the same setup,
and initialization happens exactly once.

Contents:
    * :class:`LoggingConfigModel` - boundary model for runtime options.
    * :func:`build_runtime_config` - maps the ``logging`` section to lib_log_rich.
    * :func:`init_logging` - idempotent logging initialization.
"""

from __future__ import annotations

import lib_log_rich.config
import lib_log_rich.runtime
from pydantic import BaseModel, ConfigDict

from linux_wave import __init__conf__
from linux_wave.domain.enums import LogLevel
from linux_wave.domain.schema import Configuration

# lib_log_rich spells the warning level out in full.
_RUNTIME_LEVELS: dict[LogLevel, str] = {
    LogLevel.DEBUG: "DEBUG",
    LogLevel.INFO: "INFO",
    LogLevel.WARN: "WARNING",
    LogLevel.ERROR: "ERROR",
}


class LoggingConfigModel(BaseModel):
    """Pydantic model for the lib_log_rich runtime options we set.

    Extra fields are allowed to pass through to lib_log_rich.RuntimeConfig.

    Example:
        >>> model = LoggingConfigModel(service="linux-wave", console_level="DEBUG")
        >>> model.console_level
        'DEBUG'
        >>> LoggingConfigModel().environment
        'prod'
    """

    service: str | None = None
    environment: str = "prod"
    console_level: str = "INFO"

    model_config = ConfigDict(extra="allow")


def runtime_level(level: str) -> str:
    """Translate a ``logging.level`` value into lib_log_rich's spelling.

    Unknown values fall back to INFO; the validator rejects them before
    they reach a running service.

    Example:
        >>> runtime_level("warn")
        'WARNING'
        >>> runtime_level("debug")
        'DEBUG'
    """
    parsed = LogLevel.parse(level)
    return _RUNTIME_LEVELS[parsed] if parsed is not None else "INFO"


def build_runtime_config(config: Configuration) -> lib_log_rich.runtime.RuntimeConfig:
    """Build RuntimeConfig from a validated configuration.

    Args:
        config: Already-loaded configuration; only its ``logging`` section
            is consulted.

    Returns:
        Runtime settings ready for lib_log_rich.init().
    """
    parsed = LoggingConfigModel.model_validate({"console_level": runtime_level(config.logging.level)})
    extra_config = parsed.model_dump(exclude={"service", "environment"}, exclude_none=True)
    return lib_log_rich.runtime.RuntimeConfig(
        service=parsed.service or __init__conf__.name,
        environment=parsed.environment,
        **extra_config,
    )


def init_logging(config: Configuration) -> None:
    """Initialize lib_log_rich runtime with the provided configuration.

    Safe to call multiple times: the first call loads .env files (making
    LOG_* variables available), initializes the runtime and bridges standard
    Python logging; later calls return immediately.

    Args:
        config: Already-loaded configuration.

    Example:
        >>> from linux_wave.domain.defaults import default_configuration
        >>> init_logging(default_configuration())  # doctest: +SKIP
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.config.enable_dotenv()
    lib_log_rich.runtime.init(build_runtime_config(config))
    lib_log_rich.runtime.attach_std_logging()


__all__ = [
    "LoggingConfigModel",
    "build_runtime_config",
    "init_logging",
    "runtime_level",
]

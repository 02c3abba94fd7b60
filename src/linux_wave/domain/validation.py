"""Constraint checks for a fully merged configuration.

Every rule runs on every call; nothing short-circuits. Failures are
collected as :class:`~linux_wave.domain.errors.Violation` records in rule
order and raised together as a single
:class:`~linux_wave.domain.errors.ConfigValidationError`.

Checking custom sound files needs the filesystem. The validator takes that
capability as a ``file_exists`` callable so it stays pure and can be driven
by an in-memory fake in tests.
"""

from __future__ import annotations

import os
from collections.abc import Callable

from .enums import LogFormat, LogLevel
from .errors import ConfigValidationError, Violation
from .schema import AudioSection, Configuration, LoggingSection, SecuritySection, ServiceSection

FileExists = Callable[[str], bool]

TIMEOUT_RANGE = (1, 60)
RETRY_ATTEMPTS_RANGE = (1, 10)
VOLUME_RANGE = (0, 100)
MATCH_THRESHOLD_RANGE = (0.0, 1.0)
MAX_AUTH_ATTEMPTS_RANGE = (1, 20)
LOCKOUT_DURATION_RANGE = (0, 3600)


def _out_of_range(value: float, bounds: tuple[float, float]) -> bool:
    low, high = bounds
    return not low <= value <= high


def _check_service(section: ServiceSection) -> list[Violation]:
    found: list[Violation] = []
    if _out_of_range(section.timeout, TIMEOUT_RANGE):
        found.append(
            Violation("service.timeout", "range", section.timeout, "timeout must be between 1 and 60 seconds")
        )
    if _out_of_range(section.retry_attempts, RETRY_ATTEMPTS_RANGE):
        found.append(
            Violation(
                "service.retry_attempts", "range", section.retry_attempts, "retry_attempts must be between 1 and 10"
            )
        )
    if not section.socket_path:
        found.append(Violation("service.socket_path", "required", section.socket_path, "socket_path must not be empty"))
    elif not os.path.isabs(section.socket_path):
        found.append(
            Violation("service.socket_path", "absolute", section.socket_path, "socket_path must be an absolute path")
        )
    return found


def _check_logging(section: LoggingSection) -> list[Violation]:
    found: list[Violation] = []
    if LogLevel.parse(section.level) is None:
        found.append(
            Violation("logging.level", "choice", section.level, "log_level must be DEBUG, INFO, WARN, or ERROR")
        )
    if LogFormat.parse(section.format) is None:
        found.append(Violation("logging.format", "choice", section.format, "log_format must be 'json' or 'text'"))
    return found


def _check_audio(section: AudioSection, file_exists: FileExists) -> list[Violation]:
    found: list[Violation] = []
    if _out_of_range(section.volume, VOLUME_RANGE):
        found.append(Violation("audio.volume", "range", section.volume, "audio_volume must be between 0 and 100"))
    for key in ("custom_sound_success", "custom_sound_failure"):
        path: str = getattr(section, key)
        if path and not file_exists(path):
            found.append(Violation(f"audio.{key}", "file_exists", path, f"{key} file not found: {path}"))
    return found


def _check_security(section: SecuritySection) -> list[Violation]:
    found: list[Violation] = []
    if _out_of_range(section.match_threshold, MATCH_THRESHOLD_RANGE):
        found.append(
            Violation(
                "security.match_threshold",
                "range",
                section.match_threshold,
                "match_threshold must be between 0.0 and 1.0",
            )
        )
    if _out_of_range(section.max_auth_attempts, MAX_AUTH_ATTEMPTS_RANGE):
        found.append(
            Violation(
                "security.max_auth_attempts",
                "range",
                section.max_auth_attempts,
                "max_auth_attempts must be between 1 and 20",
            )
        )
    if _out_of_range(section.lockout_duration, LOCKOUT_DURATION_RANGE):
        found.append(
            Violation(
                "security.lockout_duration",
                "range",
                section.lockout_duration,
                "lockout_duration must be between 0 and 3600",
            )
        )
    return found


def collect_violations(config: Configuration, *, file_exists: FileExists) -> list[Violation]:
    """Return every constraint violation in ``config``, in rule order.

    Example:
        >>> from linux_wave.domain.defaults import default_configuration
        >>> collect_violations(default_configuration(), file_exists=lambda _: True)
        []
    """
    return [
        *_check_service(config.service),
        *_check_logging(config.logging),
        *_check_audio(config.audio, file_exists),
        *_check_security(config.security),
    ]


def validate_configuration(config: Configuration, *, file_exists: FileExists) -> None:
    """Check ``config`` against all domain constraints.

    Args:
        config: Fully merged configuration.
        file_exists: Capability answering whether a path exists on disk;
            consulted only for non-empty custom sound paths.

    Raises:
        ConfigValidationError: Carrying every violation found.

    Example:
        >>> from dataclasses import replace
        >>> from linux_wave.domain.defaults import default_configuration
        >>> cfg = default_configuration()
        >>> bad = replace(cfg, security=replace(cfg.security, match_threshold=1.5))
        >>> validate_configuration(bad, file_exists=lambda _: True)
        Traceback (most recent call last):
        ...
        linux_wave.domain.errors.ConfigValidationError: configuration validation failed:
          - match_threshold must be between 0.0 and 1.0
    """
    violations = collect_violations(config, file_exists=file_exists)
    if violations:
        raise ConfigValidationError(violations)


__all__ = [
    "FileExists",
    "collect_violations",
    "validate_configuration",
]

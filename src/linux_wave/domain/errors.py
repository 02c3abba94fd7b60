"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


class ConfigurationError(Exception):
    """Base class for every failure raised while producing a configuration.

    Callers that only need to know "do not proceed" catch this type; the
    subclasses carry the detail needed to fix the offending file.

    Example:
        >>> err = ConfigurationError("configuration unusable")
        >>> str(err)
        'configuration unusable'
    """


class PathResolutionError(ConfigurationError):
    """The home directory could not be determined while expanding ``~``.

    Example:
        >>> err = PathResolutionError("failed to get user home directory")
        >>> isinstance(err, ConfigurationError)
        True
    """


class ConfigReadError(ConfigurationError):
    """A configuration file exists but could not be opened or read.

    Example:
        >>> err = ConfigReadError("/etc/linux-wave/config.yaml", "Permission denied")
        >>> err.path
        '/etc/linux-wave/config.yaml'
        >>> str(err)
        'failed to read /etc/linux-wave/config.yaml: Permission denied'
    """

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"failed to read {path}: {reason}")
        self.path = path
        self.reason = reason


class ConfigParseError(ConfigurationError):
    """A configuration file is not well-formed YAML matching the schema.

    Example:
        >>> err = ConfigParseError("/tmp/config.yaml", "service must be a mapping")
        >>> str(err)
        'failed to parse /tmp/config.yaml: service must be a mapping'
    """

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"failed to parse {path}: {reason}")
        self.path = path
        self.reason = reason


@dataclass(frozen=True, slots=True)
class Violation:
    """A single failed constraint found by the validator.

    Attributes:
        field: Dotted document key, e.g. ``security.match_threshold``.
        constraint: Short machine-readable rule name (``range``, ``choice``,
            ``required``, ``absolute``, ``file_exists``).
        value: The offending value as observed.
        message: Operator-facing sentence describing the failure.
    """

    field: str
    constraint: str
    value: object
    message: str

    def __str__(self) -> str:
        return self.message


class ConfigValidationError(ConfigurationError):
    """One or more constraint violations in a merged configuration.

    Every violation is kept, in the order the validator found them, so an
    operator can fix a misconfigured file in a single pass.

    Example:
        >>> v1 = Violation("service.timeout", "range", 0, "timeout must be between 1 and 60 seconds")
        >>> v2 = Violation("audio.volume", "range", 150, "audio_volume must be between 0 and 100")
        >>> err = ConfigValidationError([v1, v2])
        >>> err.fields
        ('service.timeout', 'audio.volume')
        >>> print(err)
        configuration validation failed:
          - timeout must be between 1 and 60 seconds
          - audio_volume must be between 0 and 100
    """

    def __init__(self, violations: Iterable[Violation]) -> None:
        self.violations: tuple[Violation, ...] = tuple(violations)
        lines = "\n".join(f"  - {violation.message}" for violation in self.violations)
        super().__init__(f"configuration validation failed:\n{lines}")

    @property
    def fields(self) -> tuple[str, ...]:
        """Dotted field names of all violations, in report order."""
        return tuple(violation.field for violation in self.violations)


__all__ = [
    "ConfigParseError",
    "ConfigReadError",
    "ConfigValidationError",
    "ConfigurationError",
    "PathResolutionError",
    "Violation",
]

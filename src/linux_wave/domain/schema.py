"""Typed shape of the linux-wave configuration.

The configuration is four flat sections of scalar fields. All types are
frozen dataclasses: merging and loading always build new instances, so a
configuration handed to a consumer can be shared freely and is never
changed behind its back.

Field names match the snake_case keys of the YAML document, which keeps
the decoder and :func:`configuration_to_dict` free of renaming tables.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any

SECTION_NAMES: tuple[str, ...] = ("service", "logging", "audio", "security")


@dataclass(frozen=True, slots=True)
class ServiceSection:
    """Service-level settings for authentication operations."""

    #: Seconds an authentication attempt may take (1-60).
    timeout: int = 0
    #: Maximum retries for an authentication attempt (1-10).
    retry_attempts: int = 0
    #: Absolute path of the Unix domain socket used for IPC.
    socket_path: str = ""


@dataclass(frozen=True, slots=True)
class LoggingSection:
    """Log verbosity and output format for the authentication service."""

    #: DEBUG, INFO, WARN or ERROR (case-insensitive).
    level: str = ""
    #: ``json`` (structured) or ``text`` (human-readable).
    format: str = ""


@dataclass(frozen=True, slots=True)
class AudioSection:
    """Audio feedback played on authentication events."""

    enabled: bool = False
    #: Volume in percent (0-100).
    volume: int = 0
    #: Optional sound file for success; empty means the built-in sound.
    custom_sound_success: str = ""
    #: Optional sound file for failure; empty means the built-in sound.
    custom_sound_failure: str = ""


@dataclass(frozen=True, slots=True)
class SecuritySection:
    """Face matching and lockout policy."""

    #: Require a blink/movement liveness check.
    liveness_required: bool = False
    #: Face match confidence cutoff (0.0-1.0, higher is stricter).
    match_threshold: float = 0.0
    #: Attempts before lockout (1-20).
    max_auth_attempts: int = 0
    #: Lockout length in seconds (0-3600).
    lockout_duration: int = 0


@dataclass(frozen=True, slots=True)
class Configuration:
    """Root aggregate owning the four configuration sections.

    The no-argument constructor produces the zero-valued configuration
    (every field 0, "", 0.0 or False) that overlay files are decoded into.

    Example:
        >>> Configuration().service.timeout
        0
        >>> Configuration.zero() == Configuration()
        True
    """

    service: ServiceSection = field(default_factory=ServiceSection)
    logging: LoggingSection = field(default_factory=LoggingSection)
    audio: AudioSection = field(default_factory=AudioSection)
    security: SecuritySection = field(default_factory=SecuritySection)

    @classmethod
    def zero(cls) -> Configuration:
        """Return a configuration with every field at its type's zero value."""
        return cls()

    def __str__(self) -> str:
        from .presenter import render_configuration

        return render_configuration(self)


def configuration_to_dict(config: Configuration) -> dict[str, dict[str, Any]]:
    """Encode a configuration as a document-shaped nested dict.

    The result uses the same keys as the YAML file format, so it can be
    dumped with any serializer and read back by the file loader.

    Example:
        >>> data = configuration_to_dict(Configuration())
        >>> sorted(data)
        ['audio', 'logging', 'security', 'service']
        >>> data["service"]
        {'timeout': 0, 'retry_attempts': 0, 'socket_path': ''}
    """
    return {name: asdict(getattr(config, name)) for name in SECTION_NAMES}


__all__ = [
    "SECTION_NAMES",
    "AudioSection",
    "Configuration",
    "LoggingSection",
    "SecuritySection",
    "ServiceSection",
    "configuration_to_dict",
]

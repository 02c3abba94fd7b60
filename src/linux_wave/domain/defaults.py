"""Built-in baseline configuration."""

from __future__ import annotations

from .schema import AudioSection, Configuration, LoggingSection, SecuritySection, ServiceSection

#: Socket under the systemd runtime directory.
DEFAULT_SOCKET_PATH = "/run/linux-wave/auth.sock"


def default_configuration() -> Configuration:
    """Return a configuration populated entirely with built-in values.

    Every call builds a fresh instance. The result always passes
    :func:`linux_wave.domain.validation.validate_configuration`; keep the
    values below inside the validator's ranges when changing them.

    Example:
        >>> cfg = default_configuration()
        >>> cfg.service.timeout, cfg.logging.level, cfg.security.match_threshold
        (10, 'INFO', 0.85)
    """
    return Configuration(
        service=ServiceSection(
            timeout=10,
            retry_attempts=3,
            socket_path=DEFAULT_SOCKET_PATH,
        ),
        logging=LoggingSection(
            level="INFO",
            format="text",
        ),
        audio=AudioSection(
            enabled=True,
            volume=50,
            custom_sound_success="",
            custom_sound_failure="",
        ),
        security=SecuritySection(
            liveness_required=True,
            match_threshold=0.85,
            max_auth_attempts=3,
            lockout_duration=300,  # 5 minutes
        ),
    )


__all__ = ["DEFAULT_SOCKET_PATH", "default_configuration"]

"""Human-readable rendering of a configuration for diagnostics and logs."""

from __future__ import annotations

from .schema import SECTION_NAMES, Configuration

#: Shown instead of an empty optional path so the output stays unambiguous.
NOT_SET = "<not set>"


def display_path(path: str) -> str:
    """Return ``path`` or :data:`NOT_SET` when it is empty.

    Example:
        >>> display_path("")
        '<not set>'
        >>> display_path("/usr/share/sounds/ok.wav")
        '/usr/share/sounds/ok.wav'
    """
    return path or NOT_SET


def _flag(value: bool) -> str:
    # Spelled as in the YAML file.
    return "true" if value else "false"


def render_section(config: Configuration, name: str) -> str:
    """Render one section as a single ``Label: {...}`` line.

    Raises:
        ValueError: If ``name`` is not a configuration section.

    Example:
        >>> from linux_wave.domain.defaults import default_configuration
        >>> render_section(default_configuration(), "logging")
        'Logging: {Level: INFO, Format: text}'
    """
    if name == "service":
        s = config.service
        return f"Service: {{Timeout: {s.timeout}s, RetryAttempts: {s.retry_attempts}, SocketPath: {s.socket_path}}}"
    if name == "logging":
        lg = config.logging
        return f"Logging: {{Level: {lg.level}, Format: {lg.format}}}"
    if name == "audio":
        a = config.audio
        return (
            f"Audio: {{Enabled: {_flag(a.enabled)}, Volume: {a.volume}, "
            f"CustomSuccess: {display_path(a.custom_sound_success)}, "
            f"CustomFailure: {display_path(a.custom_sound_failure)}}}"
        )
    if name == "security":
        sec = config.security
        return (
            f"Security: {{LivenessRequired: {_flag(sec.liveness_required)}, "
            f"MatchThreshold: {sec.match_threshold:.2f}, "
            f"MaxAuthAttempts: {sec.max_auth_attempts}, LockoutDuration: {sec.lockout_duration}s}}"
        )
    raise ValueError(f"Section {name!r} not found")


def render_configuration(config: Configuration) -> str:
    """Render every field of ``config`` as a multi-line string.

    No field is a credential today. A secret-bearing field added later must
    be masked here before it reaches a log line.

    Example:
        >>> from linux_wave.domain.defaults import default_configuration
        >>> print(render_configuration(default_configuration()))
        Config{
          Service: {Timeout: 10s, RetryAttempts: 3, SocketPath: /run/linux-wave/auth.sock}
          Logging: {Level: INFO, Format: text}
          Audio: {Enabled: true, Volume: 50, CustomSuccess: <not set>, CustomFailure: <not set>}
          Security: {LivenessRequired: true, MatchThreshold: 0.85, MaxAuthAttempts: 3, LockoutDuration: 300s}
        }
    """
    body = "\n".join(f"  {render_section(config, name)}" for name in SECTION_NAMES)
    return f"Config{{\n{body}\n}}"


__all__ = ["NOT_SET", "display_path", "render_configuration", "render_section"]

"""Domain layer - pure configuration logic with no I/O or framework dependencies.

Contents:
    * :mod:`.schema` - Configuration sections and document encoding
    * :mod:`.defaults` - Built-in baseline configuration
    * :mod:`.merge` - Overlay merge rules
    * :mod:`.validation` - Aggregated constraint checks
    * :mod:`.presenter` - Diagnostic rendering
    * :mod:`.enums` - Domain enumerations (LogLevel, LogFormat, OutputFormat)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .defaults import DEFAULT_SOCKET_PATH, default_configuration
from .enums import LogFormat, LogLevel, OutputFormat
from .errors import (
    ConfigParseError,
    ConfigReadError,
    ConfigurationError,
    ConfigValidationError,
    PathResolutionError,
    Violation,
)
from .merge import merge_configurations
from .presenter import NOT_SET, render_configuration, render_section
from .schema import (
    AudioSection,
    Configuration,
    LoggingSection,
    SecuritySection,
    ServiceSection,
    configuration_to_dict,
)
from .validation import FileExists, collect_violations, validate_configuration

__all__ = [
    # Schema
    "AudioSection",
    "Configuration",
    "LoggingSection",
    "SecuritySection",
    "ServiceSection",
    "configuration_to_dict",
    # Behaviors
    "DEFAULT_SOCKET_PATH",
    "NOT_SET",
    "FileExists",
    "collect_violations",
    "default_configuration",
    "merge_configurations",
    "render_configuration",
    "render_section",
    "validate_configuration",
    # Enums
    "LogFormat",
    "LogLevel",
    "OutputFormat",
    # Errors
    "ConfigParseError",
    "ConfigReadError",
    "ConfigValidationError",
    "ConfigurationError",
    "PathResolutionError",
    "Violation",
]

"""Public package surface for the linux-wave configuration core.

Consumers (authentication service, PAM helper, CLI, enrollment GUI) import
from here:

- Entry points: :func:`load_config` and :func:`load_config_from_path`
- Domain: the :class:`Configuration` schema, defaults and error types
- Metadata: :func:`print_info`
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Composition exports (wired adapters)
from .composition import load_config, load_config_from_path

# Domain exports
from .domain.defaults import default_configuration
from .domain.errors import (
    ConfigParseError,
    ConfigReadError,
    ConfigurationError,
    ConfigValidationError,
    PathResolutionError,
    Violation,
)
from .domain.schema import Configuration

__all__ = [
    "ConfigParseError",
    "ConfigReadError",
    "ConfigValidationError",
    "Configuration",
    "ConfigurationError",
    "PathResolutionError",
    "Violation",
    "default_configuration",
    "load_config",
    "load_config_from_path",
    "print_info",
]

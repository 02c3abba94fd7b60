"""Configuration adapter - path resolution, file decoding, loading, display.

Contents:
    * :mod:`.paths` - ``~`` and environment expansion, existence checks
    * :mod:`.file_loader` - YAML decoding into (partial) configurations
    * :mod:`.loader` - Layered and single-file loading pipelines
    * :mod:`.display` - Configuration display in human/JSON formats
"""

from __future__ import annotations

from .display import display_config, format_config
from .file_loader import load_file
from .loader import SYSTEM_CONFIG_PATH, USER_CONFIG_PATH, load_config, load_config_from_path
from .paths import path_exists, resolve_path

__all__ = [
    "SYSTEM_CONFIG_PATH",
    "USER_CONFIG_PATH",
    "display_config",
    "format_config",
    "load_config",
    "load_config_from_path",
    "load_file",
    "path_exists",
    "resolve_path",
]

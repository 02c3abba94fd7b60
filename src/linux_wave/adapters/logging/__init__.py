"""lib_log_rich runtime setup driven by the ``logging`` section."""

from __future__ import annotations

from .setup import build_runtime_config, init_logging

__all__ = ["build_runtime_config", "init_logging"]

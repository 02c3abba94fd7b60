"""Type-safe domain enums for log settings and display formats."""

from __future__ import annotations

from enum import Enum


class LogLevel(str, Enum):
    """Accepted values for ``logging.level``.

    Matching is case-insensitive; use :meth:`parse` to normalise input.

    Example:
        >>> LogLevel.parse("warn")
        <LogLevel.WARN: 'WARN'>
        >>> LogLevel.parse("verbose") is None
        True
    """

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"

    @classmethod
    def parse(cls, raw: str) -> LogLevel | None:
        try:
            return cls(raw.upper())
        except ValueError:
            return None


class LogFormat(str, Enum):
    """Accepted values for ``logging.format``.

    Example:
        >>> LogFormat.parse("JSON")
        <LogFormat.JSON: 'json'>
    """

    JSON = "json"
    TEXT = "text"

    @classmethod
    def parse(cls, raw: str) -> LogFormat | None:
        try:
            return cls(raw.lower())
        except ValueError:
            return None


class OutputFormat(str, Enum):
    """Output format options for configuration display.

    Inherits from str to allow direct string comparison and Click integration.

    Attributes:
        HUMAN: Diagnostic rendering produced by the presenter.
        JSON: Machine-readable document-shaped JSON.

    Example:
        >>> OutputFormat.HUMAN.value
        'human'
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


__all__ = [
    "LogFormat",
    "LogLevel",
    "OutputFormat",
]

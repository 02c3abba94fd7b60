"""Settings shared by every ``linux-wave`` command.

Exit codes follow ``sysexits.h`` where one fits: a configuration that
cannot be loaded is ``EX_CONFIG`` so service managers and scripts can tell
it apart from a usage mistake.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Final

CLICK_CONTEXT_SETTINGS: Final[dict[str, list[str]]] = {"help_option_names": ["-h", "--help"]}

# Characters of traceback text lib_cli_exit_tools may print.
TRACEBACK_SUMMARY_LIMIT: Final[int] = 500
TRACEBACK_VERBOSE_LIMIT: Final[int] = 10_000


class ExitCode(IntEnum):
    """Process exit codes returned by the CLI.

    Example:
        >>> int(ExitCode.CONFIG_ERROR)
        78
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    USAGE_ERROR = 2
    INVALID_ARGUMENT = 22
    CONFIG_ERROR = 78


__all__ = [
    "CLICK_CONTEXT_SETTINGS",
    "TRACEBACK_SUMMARY_LIMIT",
    "TRACEBACK_VERBOSE_LIMIT",
    "ExitCode",
]

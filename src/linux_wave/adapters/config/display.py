"""Display a configuration on the console.

Human output comes from the domain presenter; JSON output is the
document-shaped encoding serialised with orjson. Pending log output is
flushed first so log lines never interleave with the configuration.
"""

from __future__ import annotations

import lib_log_rich.runtime
import orjson
from rich.console import Console

from linux_wave.domain.enums import OutputFormat
from linux_wave.domain.presenter import render_configuration, render_section
from linux_wave.domain.schema import SECTION_NAMES, Configuration, configuration_to_dict


def format_config(
    config: Configuration,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
) -> str:
    """Return the text :func:`display_config` would print.

    Raises:
        ValueError: If a section was requested that doesn't exist.

    Example:
        >>> from linux_wave.domain.defaults import default_configuration
        >>> print(format_config(default_configuration(), output_format=OutputFormat.JSON, section="logging"))
        {
          "level": "INFO",
          "format": "text"
        }
    """
    if section is not None and section not in SECTION_NAMES:
        raise ValueError(f"Section {section!r} not found; expected one of {', '.join(SECTION_NAMES)}")
    if output_format is OutputFormat.JSON:
        data = configuration_to_dict(config)
        payload = data[section] if section is not None else data
        return orjson.dumps(payload, option=orjson.OPT_INDENT_2).decode("utf-8")
    if section is not None:
        return render_section(config, section)
    return render_configuration(config)


def display_config(
    config: Configuration,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    console: Console | None = None,
) -> None:
    """Print ``config`` in the requested format.

    Args:
        config: Already-loaded configuration to display.
        output_format: OutputFormat.HUMAN for the diagnostic rendering or
            OutputFormat.JSON for the document-shaped JSON.
        section: Optional section name to display only that section.
        console: Optional Rich Console for output. Primarily useful for testing.

    Side Effects:
        Flushes pending log messages before display.
        Writes the formatted configuration to stdout.

    Raises:
        ValueError: If a section was requested that doesn't exist.
    """
    text = format_config(config, output_format=output_format, section=section)
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.flush()
    target = console if console is not None else Console(soft_wrap=True)
    target.print(text, markup=False, highlight=False)


__all__ = ["display_config", "format_config"]

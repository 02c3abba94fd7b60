"""Display stories: human and JSON output, section filtering, unknown sections."""

from __future__ import annotations

import io

import orjson
import pytest
from rich.console import Console

from linux_wave.adapters.config.display import display_config, format_config
from linux_wave.domain.defaults import default_configuration
from linux_wave.domain.enums import OutputFormat

# ======================== format_config ========================


@pytest.mark.os_agnostic
def test_json_output_is_document_shaped() -> None:
    """JSON uses the YAML keys, one object per section."""
    payload = orjson.loads(format_config(default_configuration(), output_format=OutputFormat.JSON))

    assert payload["service"]["socket_path"] == "/run/linux-wave/auth.sock"
    assert payload["audio"]["enabled"] is True
    assert payload["security"]["match_threshold"] == 0.85


@pytest.mark.os_agnostic
def test_json_section_output_holds_only_that_section() -> None:
    """--section narrows the JSON to a single object."""
    payload = orjson.loads(
        format_config(default_configuration(), output_format=OutputFormat.JSON, section="logging")
    )

    assert payload == {"level": "INFO", "format": "text"}


@pytest.mark.os_agnostic
def test_human_section_output_is_one_line() -> None:
    """Human output for a section is its presenter line."""
    text = format_config(default_configuration(), section="audio")

    assert text.startswith("Audio: {")
    assert "\n" not in text


@pytest.mark.os_agnostic
@pytest.mark.parametrize("output_format", list(OutputFormat))
def test_unknown_section_raises_value_error(output_format: OutputFormat) -> None:
    """A section that doesn't exist is rejected in both formats."""
    with pytest.raises(ValueError, match="not found"):
        format_config(default_configuration(), output_format=output_format, section="camera")


# ======================== display_config ========================


@pytest.mark.os_agnostic
def test_display_human_prints_to_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    """Without a console argument, output goes to stdout."""
    display_config(default_configuration())

    output = capsys.readouterr().out
    assert output.startswith("Config{")
    assert "SocketPath: /run/linux-wave/auth.sock" in output


@pytest.mark.os_agnostic
def test_display_uses_supplied_console() -> None:
    """A caller-supplied Console receives the text verbatim."""
    buffer = io.StringIO()
    console = Console(file=buffer, soft_wrap=True, color_system=None)

    display_config(default_configuration(), output_format=OutputFormat.JSON, section="service", console=console)

    assert orjson.loads(buffer.getvalue())["timeout"] == 10

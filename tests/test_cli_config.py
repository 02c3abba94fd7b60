"""CLI config stories: display, JSON format, sections, --config, check, error reporting."""

from __future__ import annotations

import json
from collections.abc import Callable
from dataclasses import replace
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner, Result

from linux_wave.adapters import cli as cli_mod
from linux_wave.domain.defaults import default_configuration
from linux_wave.domain.schema import Configuration

# ======================== config ========================


@pytest.mark.os_agnostic
def test_when_config_is_invoked_it_displays_the_defaults(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    """With no files present the defaults are shown."""
    result: Result = cli_runner.invoke(cli_mod.cli, ["config"], obj=production_factory)

    assert result.exit_code == 0
    assert "Config{" in result.stdout
    assert "SocketPath: /run/linux-wave/auth.sock" in result.stdout


@pytest.mark.os_agnostic
def test_when_config_is_invoked_with_json_format_it_outputs_json(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    """--format json prints the document-shaped JSON."""
    result: Result = cli_runner.invoke(cli_mod.cli, ["config", "--format", "json"], obj=production_factory)

    assert result.exit_code == 0
    # Use result.stdout to avoid async log messages from stderr
    payload = json.loads(result.stdout)
    assert payload["security"]["max_auth_attempts"] == 3


@pytest.mark.os_agnostic
def test_when_config_is_invoked_with_json_format_and_section_it_shows_section(
    cli_runner: CliRunner,
    inject_config: Callable[[Configuration], Callable[[], Any]],
) -> None:
    """--section narrows the output to one section."""
    config = default_configuration()
    config = replace(config, audio=replace(config.audio, volume=80))

    result: Result = cli_runner.invoke(
        cli_mod.cli, ["config", "--format", "json", "--section", "audio"], obj=inject_config(config)
    )

    assert result.exit_code == 0
    assert json.loads(result.stdout)["volume"] == 80


@pytest.mark.os_agnostic
def test_when_config_is_invoked_with_human_section_it_shows_one_line(
    cli_runner: CliRunner,
    inject_config: Callable[[Configuration], Callable[[], Any]],
) -> None:
    """Human output for a section is a single presenter line."""
    result: Result = cli_runner.invoke(
        cli_mod.cli, ["config", "--section", "logging"], obj=inject_config(default_configuration())
    )

    assert result.exit_code == 0
    assert result.stdout.strip() == "Logging: {Level: INFO, Format: text}"


@pytest.mark.os_agnostic
def test_when_config_is_invoked_with_nonexistent_section_it_fails(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    """An unknown section exits with INVALID_ARGUMENT."""
    result: Result = cli_runner.invoke(cli_mod.cli, ["config", "--section", "camera"], obj=production_factory)

    assert result.exit_code == cli_mod.ExitCode.INVALID_ARGUMENT
    assert "not found" in result.stderr


# ======================== system / user files ========================


@pytest.mark.os_agnostic
def test_when_system_file_exists_its_values_are_shown(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
    write_config: Callable[..., Path],
) -> None:
    """The system file under the test root is merged over the defaults."""
    write_config(
        {"service": {"timeout": 25}, "audio": {"enabled": True}, "security": {"liveness_required": True}},
        "etc/config.yaml",
    )

    result: Result = cli_runner.invoke(cli_mod.cli, ["config", "--format", "json"], obj=production_factory)

    assert result.exit_code == 0
    assert json.loads(result.stdout)["service"]["timeout"] == 25


@pytest.mark.os_agnostic
def test_when_user_file_exists_it_wins_over_the_system_file(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
    write_config: Callable[..., Path],
) -> None:
    """The user file in $HOME is merged last."""
    write_config({"logging": {"level": "WARN"}, "audio": {"enabled": True}}, "etc/config.yaml")
    write_config({"logging": {"level": "ERROR"}, "audio": {"enabled": True}}, "home/.config/linux-wave/config.yaml")

    result: Result = cli_runner.invoke(
        cli_mod.cli, ["config", "--format", "json", "--section", "logging"], obj=production_factory
    )

    assert result.exit_code == 0
    assert json.loads(result.stdout)["level"] == "ERROR"


# ======================== --config ========================


@pytest.mark.os_agnostic
def test_when_config_option_is_given_only_that_file_is_used(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
    write_config: Callable[..., Path],
) -> None:
    """--config loads one file over the defaults and ignores the system file."""
    write_config({"service": {"timeout": 25}}, "etc/config.yaml")
    explicit = write_config({"service": {"retry_attempts": 7}}, "explicit.yaml")

    result: Result = cli_runner.invoke(
        cli_mod.cli,
        ["--config", str(explicit), "config", "--format", "json", "--section", "service"],
        obj=production_factory,
    )

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["timeout"] == 10
    assert payload["retry_attempts"] == 7


@pytest.mark.os_agnostic
def test_when_config_option_points_at_a_missing_file_it_exits_with_config_error(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
    tmp_path: Path,
) -> None:
    """A missing explicit file is reported and exits 78."""
    missing = tmp_path / "absent.yaml"

    result: Result = cli_runner.invoke(cli_mod.cli, ["--config", str(missing), "check"], obj=production_factory)

    assert result.exit_code == cli_mod.ExitCode.CONFIG_ERROR
    assert f"failed to read {missing}" in result.stderr


# ======================== validation failures ========================


@pytest.mark.os_agnostic
def test_when_configuration_is_invalid_every_violation_is_listed(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
    write_config: Callable[..., Path],
) -> None:
    """All failing fields are printed and the CLI exits with EX_CONFIG."""
    path = write_config({"service": {"timeout": 0, "retry_attempts": 99}, "audio": {"volume": 150}})

    result: Result = cli_runner.invoke(cli_mod.cli, ["--config", str(path), "config"], obj=production_factory)

    assert result.exit_code == cli_mod.ExitCode.CONFIG_ERROR
    assert "configuration validation failed" in result.stderr
    assert "service.retry_attempts: retry_attempts must be between 1 and 10" in result.stderr
    assert "audio.volume: audio_volume must be between 0 and 100" in result.stderr
    assert "Config{" not in result.stdout


@pytest.mark.os_agnostic
def test_when_configuration_is_malformed_the_parse_error_is_shown(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
    write_config: Callable[..., Path],
) -> None:
    """A parse error names the file and exits with EX_CONFIG."""
    write_config("service: [\n", "etc/config.yaml")

    result: Result = cli_runner.invoke(cli_mod.cli, ["check"], obj=production_factory)

    assert result.exit_code == cli_mod.ExitCode.CONFIG_ERROR
    assert "failed to parse" in result.stderr
    assert "etc/config.yaml" in result.stderr


# ======================== check ========================


@pytest.mark.os_agnostic
def test_when_check_passes_it_lists_the_sources(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    """check confirms the layered configuration is valid."""
    result: Result = cli_runner.invoke(cli_mod.cli, ["check"], obj=production_factory)

    assert result.exit_code == 0
    assert "Configuration OK: defaults, /etc/linux-wave/config.yaml, ~/.config/linux-wave/config.yaml" in result.stdout


@pytest.mark.os_agnostic
def test_when_check_passes_with_config_option_it_names_the_file(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
    write_config: Callable[..., Path],
) -> None:
    """check names the explicit file when --config was used."""
    path = write_config({"security": {"match_threshold": 0.95}})

    result: Result = cli_runner.invoke(cli_mod.cli, ["--config", str(path), "check"], obj=production_factory)

    assert result.exit_code == 0
    assert f"Configuration OK: {path}" in result.stdout

"""Shared pytest fixtures for configuration, CLI and module-entry tests.

Centralizes test infrastructure:
- All shared fixtures live here
- Tests import fixtures implicitly via pytest's conftest discovery
- Fixtures use descriptive names that read as plain English
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import fields
from functools import partial
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
import yaml
from click.testing import CliRunner

from linux_wave.adapters.memory import InMemoryFileSystem
from linux_wave.domain.schema import Configuration

if TYPE_CHECKING:
    from linux_wave.composition import AppServices

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))


def _remove_ansi_codes(text: str) -> str:
    """Return *text* stripped of ANSI escape sequences."""
    return ANSI_ESCAPE_PATTERN.sub("", text)


def _snapshot_cli_config() -> dict[str, object]:
    """Capture every attribute from ``lib_cli_exit_tools.config``."""
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    """Reapply a configuration snapshot captured by ``_snapshot_cli_config``."""
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Use result.stdout for clean output (e.g., JSON parsing) and
    result.stderr for error reports.
    """
    return CliRunner()


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return _remove_ansi_codes(value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore after the test."""
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def fake_fs() -> InMemoryFileSystem:
    """Provide an empty in-memory filesystem for existence checks.

    Example:
        def test_sound(fake_fs: InMemoryFileSystem) -> None:
            fake_fs.add("/sounds/ok.wav")
            validate_configuration(cfg, file_exists=fake_fs.exists)
    """
    return InMemoryFileSystem()


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper that writes a YAML configuration file under tmp_path.

    Accepts either a mapping (dumped with PyYAML) or raw text, plus an
    optional relative file name.

    Example:
        def test_load(write_config: Callable[..., Path]) -> None:
            path = write_config({"service": {"timeout": 30}})
    """

    def _write(content: dict[str, Any] | str, name: str = "config.yaml") -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        text = content if isinstance(content, str) else yaml.safe_dump(content, sort_keys=False)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point ``$HOME`` at an empty directory so user files never leak in."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    return home


@pytest.fixture
def production_factory(tmp_path: Path, isolated_home: Path) -> Callable[[], AppServices]:
    """Provide production services whose system file lives under tmp_path.

    Everything is the real adapter except the system path, which points at
    ``tmp_path / "etc" / "config.yaml"`` (absent unless a test writes it),
    and ``$HOME``, which is an empty temporary directory.
    """
    from linux_wave.composition import AppServices, build_production

    prod = build_production()
    services = AppServices(
        load_config=partial(prod.load_config, system_path=str(tmp_path / "etc" / "config.yaml")),
        load_config_from_path=prod.load_config_from_path,
        display_config=prod.display_config,
        init_logging=prod.init_logging,
    )
    return lambda: services


@pytest.fixture
def inject_config() -> Callable[[Configuration], Callable[[], AppServices]]:
    """Return a factory that provides services loading a fixed Configuration.

    Only the I/O boundary (loading) is replaced; display and logging stay
    production adapters.

    Example:
        def test_config_display(cli_runner, inject_config) -> None:
            factory = inject_config(default_configuration())
            result = cli_runner.invoke(cli, ["config"], obj=factory)
    """
    from linux_wave.composition import AppServices, build_production

    def _inject(config: Configuration) -> Callable[[], AppServices]:
        def _fake_load(*_args: Any, **_kwargs: Any) -> Configuration:
            return config

        prod = build_production()
        services = AppServices(
            load_config=_fake_load,
            load_config_from_path=_fake_load,
            display_config=prod.display_config,
            init_logging=prod.init_logging,
        )
        return lambda: services

    return _inject

"""Schema tests: zero values, immutability, document-shaped encoding."""

from __future__ import annotations

import dataclasses

import pytest

from linux_wave.domain.defaults import default_configuration
from linux_wave.domain.schema import (
    SECTION_NAMES,
    Configuration,
    ServiceSection,
    configuration_to_dict,
)


@pytest.mark.os_agnostic
def test_zero_configuration_holds_type_zero_values() -> None:
    """Every field of the zero configuration is 0, '', 0.0 or False."""
    data = configuration_to_dict(Configuration.zero())

    for section in data.values():
        for value in section.values():
            assert not value


@pytest.mark.os_agnostic
def test_configuration_is_frozen() -> None:
    """Sections cannot be mutated in place after construction."""
    config = default_configuration()

    with pytest.raises(dataclasses.FrozenInstanceError):
        config.service.timeout = 99  # type: ignore[misc]


@pytest.mark.os_agnostic
def test_configuration_to_dict_uses_document_keys() -> None:
    """Encoded keys match the snake_case keys of the YAML format."""
    data = configuration_to_dict(default_configuration())

    assert tuple(data) == SECTION_NAMES
    assert set(data["service"]) == {"timeout", "retry_attempts", "socket_path"}
    assert set(data["logging"]) == {"level", "format"}
    assert set(data["audio"]) == {"enabled", "volume", "custom_sound_success", "custom_sound_failure"}
    assert set(data["security"]) == {"liveness_required", "match_threshold", "max_auth_attempts", "lockout_duration"}


@pytest.mark.os_agnostic
def test_configurations_compare_by_value() -> None:
    """Two configurations with equal fields are equal."""
    left = Configuration(service=ServiceSection(timeout=5))
    right = Configuration(service=ServiceSection(timeout=5))

    assert left == right
    assert left is not right


@pytest.mark.os_agnostic
def test_str_renders_through_presenter() -> None:
    """str(Configuration) is the diagnostic rendering."""
    assert str(default_configuration()).startswith("Config{")

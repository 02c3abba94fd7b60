"""Read a YAML configuration file into a (possibly partial) configuration.

The YAML document is parsed with PyYAML and checked against pydantic
models at the boundary. Only keys that are present (and not null) in the
document are written into the destination configuration; everything else
keeps the destination's value. Decoding into the zero configuration thus
yields an overlay whose unset fields hold zero values, which is what
:func:`linux_wave.domain.merge.merge_configurations` expects.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError

from linux_wave.domain.errors import ConfigParseError, ConfigReadError
from linux_wave.domain.schema import SECTION_NAMES, Configuration

logger = logging.getLogger(__name__)


class _SectionDocument(BaseModel):
    # Strict: YAML already yields native scalars, so "10" for an int is a typo.
    model_config = ConfigDict(extra="ignore", frozen=True, strict=True)


class ServiceDocument(_SectionDocument):
    timeout: int | None = None
    retry_attempts: int | None = None
    socket_path: str | None = None


class LoggingDocument(_SectionDocument):
    level: str | None = None
    format: str | None = None


class AudioDocument(_SectionDocument):
    enabled: bool | None = None
    volume: int | None = None
    custom_sound_success: str | None = None
    custom_sound_failure: str | None = None


class SecurityDocument(_SectionDocument):
    liveness_required: bool | None = None
    match_threshold: float | None = None
    max_auth_attempts: int | None = None
    lockout_duration: int | None = None


class ConfigDocument(BaseModel):
    """Shape of a configuration file; every key is optional.

    Example:
        >>> doc = ConfigDocument.model_validate({"security": {"match_threshold": 0.9}})
        >>> doc.security.match_threshold
        0.9
        >>> doc.service is None
        True
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    service: ServiceDocument | None = None
    logging: LoggingDocument | None = None
    audio: AudioDocument | None = None
    security: SecurityDocument | None = None


def _describe_validation_error(exc: ValidationError) -> str:
    """Condense pydantic errors into ``key.path: message`` fragments."""
    return "; ".join(".".join(str(part) for part in err["loc"]) + ": " + err["msg"] for err in exc.errors())


def decode_document(data: bytes | str, *, path: str) -> ConfigDocument:
    """Parse YAML text into a :class:`ConfigDocument`.

    Args:
        data: Raw file content.
        path: Source path, used only for error messages.

    Raises:
        ConfigParseError: If the YAML is malformed, the root is not a
            mapping, or a value does not match the schema's types.

    Example:
        >>> decode_document("service:\\n  timeout: 30\\n", path="inline").service.timeout
        30
        >>> decode_document("", path="inline").service is None
        True
    """
    try:
        raw: Any = yaml.safe_load(data)
    except yaml.YAMLError as exc:
        raise ConfigParseError(path, f"invalid YAML: {exc}") from exc
    if raw is None:
        return ConfigDocument()
    if not isinstance(raw, dict):
        raise ConfigParseError(path, f"document root must be a mapping, got {type(raw).__name__}")
    try:
        return ConfigDocument.model_validate(raw)
    except ValidationError as exc:
        raise ConfigParseError(path, _describe_validation_error(exc)) from exc


def apply_document(into: Configuration, document: ConfigDocument) -> Configuration:
    """Return ``into`` with every field present in ``document`` written over it."""
    sections: dict[str, Any] = {}
    for name in SECTION_NAMES:
        current = getattr(into, name)
        section_doc: _SectionDocument | None = getattr(document, name)
        if section_doc is None:
            sections[name] = current
            continue
        present = section_doc.model_dump(exclude_unset=True, exclude_none=True)
        sections[name] = replace(current, **present)
    return Configuration(**sections)


def load_file(path: str, *, into: Configuration | None = None) -> Configuration:
    """Read and decode the configuration file at ``path``.

    Args:
        path: Resolved absolute path of the file.
        into: Destination configuration; fields absent from the file keep
            its values. Defaults to the zero configuration.

    Returns:
        A new configuration; ``into`` itself is not modified.

    Raises:
        ConfigReadError: If the file cannot be opened or read.
        ConfigParseError: If the content is not valid for the schema.
    """
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        raise ConfigReadError(path, exc.strerror or str(exc)) from exc
    except ValueError as exc:  # e.g. an embedded NUL byte in the path
        raise ConfigReadError(path, str(exc)) from exc
    document = decode_document(data, path=path)
    logger.debug("Decoded configuration file", extra={"path": path, "bytes": len(data)})
    return apply_document(into if into is not None else Configuration.zero(), document)


__all__ = [
    "AudioDocument",
    "ConfigDocument",
    "LoggingDocument",
    "SecurityDocument",
    "ServiceDocument",
    "apply_document",
    "decode_document",
    "load_file",
]

"""Field-by-field merging of an overlay configuration onto a base.

Overlay files are decoded into a zero-valued configuration, so a field the
file does not mention arrives here as ``0``, ``""`` or ``0.0``. The merge
rules read those zero values as "not set":

* ``str``, ``int`` and ``float`` fields: the override wins unless it holds
  the type's zero value, in which case the base value is kept.
* ``bool`` fields: a boolean has no spare "unset" value, so the override is
  applied whenever it differs from the *base* value. An overlay that omits
  a boolean therefore carries ``False`` into the result.

Both rules are part of the observable contract of the loader and are
covered by tests; see DESIGN.md for the open question around them.
"""

from __future__ import annotations

from dataclasses import fields, replace
from typing import TypeVar

from .schema import SECTION_NAMES, Configuration

_SectionT = TypeVar("_SectionT")


def _merge_value(base: object, override: object) -> object:
    """Apply the per-type override rule to a single field value.

    Example:
        >>> _merge_value(10, 0), _merge_value(10, 30)
        (10, 30)
        >>> _merge_value("INFO", ""), _merge_value(0.85, 0.0)
        ('INFO', 0.85)
        >>> _merge_value(True, False), _merge_value(False, False)
        (False, False)
    """
    # bool is checked first: it is a subclass of int.
    if isinstance(base, bool):
        return override if override != base else base
    if override == type(base)():
        return base
    return override


def merge_section(base: _SectionT, override: _SectionT) -> _SectionT:
    """Return a copy of ``base`` with the set fields of ``override`` applied."""
    changes = {
        f.name: _merge_value(getattr(base, f.name), getattr(override, f.name))
        for f in fields(base)  # type: ignore[arg-type]
    }
    return replace(base, **changes)  # type: ignore[type-var]


def merge_configurations(base: Configuration, override: Configuration) -> Configuration:
    """Combine ``base`` and ``override`` into a new configuration.

    Neither argument is modified.

    Args:
        base: The more complete configuration, usually defaults or the
            result of a previous merge.
        override: An overlay decoded from a configuration file.

    Returns:
        A new configuration following the module-level merge rules.

    Example:
        >>> from linux_wave.domain.defaults import default_configuration
        >>> from linux_wave.domain.schema import ServiceSection
        >>> overlay = Configuration(service=ServiceSection(timeout=30))
        >>> merged = merge_configurations(default_configuration(), overlay)
        >>> merged.service.timeout, merged.service.retry_attempts
        (30, 3)
    """
    return Configuration(
        **{name: merge_section(getattr(base, name), getattr(override, name)) for name in SECTION_NAMES}
    )


__all__ = ["merge_configurations", "merge_section"]

"""Modifier order option values and their resolution.

The option follows the editorconfig form::

    csharp_preferred_modifier_order = public, private, static:warning

The value is an ordered modifier list, optionally followed by ``:`` and a
severity. Without a configured value the language default order applies.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import NamedTuple, TypedDict

from modifier_order._types import UnknownJson
from modifier_order.diagnostics import Severity

OPTION_NAME = "csharp_preferred_modifier_order"

DEFAULT_PREFERRED_ORDER = (
    "public,private,protected,internal,file,static,extern,new,virtual,abstract,"
    "sealed,override,readonly,unsafe,required,volatile,async"
)

DEFAULT_SEVERITY = Severity.SILENT


class ModifierOrderOption(NamedTuple):
    """A resolved option: the raw order string plus its severity."""

    preferred_order: str
    severity: Severity


DEFAULT_OPTION = ModifierOrderOption(DEFAULT_PREFERRED_ORDER, DEFAULT_SEVERITY)


class OptionsJson(TypedDict):
    """Schema for options JSON files."""

    preferred_modifier_order: str
    severity: str


def _lookup_severity(name: str) -> Severity | None:
    key = name.strip().lower()
    for severity in Severity:
        if severity.value == key:
            return severity
    return None


def parse_severity(name: str) -> Severity:
    """Parse a severity name (case-insensitive).

    Raises:
        ValueError: If name is not a known severity.
    """
    severity = _lookup_severity(name)
    if severity is not None:
        return severity
    known = ", ".join(s.value for s in Severity)
    msg = f"Unknown severity {name!r}; expected one of: {known}"
    raise ValueError(msg)


def parse_option_value(raw: str) -> ModifierOrderOption:
    """Split an option value into order and severity.

    A trailing ``:severity`` is only taken as a severity when it names one;
    otherwise the whole value is the order and DEFAULT_SEVERITY applies.
    """
    order, sep, tail = raw.rpartition(":")
    severity = _lookup_severity(tail) if sep else None
    if severity is not None:
        return ModifierOrderOption(order.strip(), severity)
    return ModifierOrderOption(raw.strip(), DEFAULT_SEVERITY)


def resolve_option(raw: str | None) -> ModifierOrderOption:
    """Resolve a configured value, falling back to the language default."""
    if raw is None:
        return DEFAULT_OPTION
    return parse_option_value(raw)


def format_option(option: ModifierOrderOption) -> str:
    """Render an option back to its editorconfig value."""
    return f"{option.preferred_order}:{option.severity.value}"


def _decode_options_json(raw: UnknownJson) -> OptionsJson:
    """Decode raw JSON data as OptionsJson.

    Missing keys take the defaults.

    Raises:
        TypeError: If data structure is incorrect.
    """
    if not isinstance(raw, dict):
        msg = f"Expected dict, got {type(raw).__name__}"
        raise TypeError(msg)

    order_raw = raw.get("preferred_modifier_order", DEFAULT_PREFERRED_ORDER)
    if not isinstance(order_raw, str):
        msg = f"Expected str for 'preferred_modifier_order', got {type(order_raw).__name__}"
        raise TypeError(msg)

    severity_raw = raw.get("severity", DEFAULT_SEVERITY.value)
    if not isinstance(severity_raw, str):
        msg = f"Expected str for 'severity', got {type(severity_raw).__name__}"
        raise TypeError(msg)

    result: OptionsJson = {"preferred_modifier_order": order_raw, "severity": severity_raw}
    return result


def _load_options_json_data(path: Path) -> OptionsJson:
    """Load and validate options JSON data from file."""
    with path.open("r", encoding="utf-8-sig") as f:
        content = f.read()
    raw: UnknownJson = json.loads(content)
    return _decode_options_json(raw)


def load_options_json(path: str | Path) -> ModifierOrderOption:
    """Load an option from a JSON options file.

    Raises:
        TypeError: If a value has the wrong type.
        ValueError: If the severity is unknown or the file is not JSON.
    """
    data = _load_options_json_data(Path(path))
    severity = parse_severity(data["severity"])
    return ModifierOrderOption(data["preferred_modifier_order"], severity)


__all__ = [
    "DEFAULT_OPTION",
    "DEFAULT_PREFERRED_ORDER",
    "DEFAULT_SEVERITY",
    "OPTION_NAME",
    "ModifierOrderOption",
    "OptionsJson",
    "format_option",
    "load_options_json",
    "parse_option_value",
    "parse_severity",
    "resolve_option",
]

"""
Configuration loading utilities for Markovian.

Run configurations are flat mappings, so files and ``key=value`` overrides only ever set
top-level keys.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Optional

import yaml

_INTEGER_PATTERN = re.compile(r"-?\d+")


def parse_override_value(raw: str) -> object:
    """
    Parse a command-line override string into a Python scalar.

    :param raw: Raw override string.
    :type raw: str
    :return: Boolean, None, integer, float, or the stripped string.
    :rtype: object
    """
    value = str(raw).strip()
    lowered = value.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    if lowered in {"null", "none"}:
        return None
    if _INTEGER_PATTERN.fullmatch(value):
        return int(value)
    try:
        return float(value)
    except ValueError:
        return value


def parse_overrides(pairs: Optional[List[str]]) -> Dict[str, object]:
    """
    Parse repeated key=value pairs into an override mapping.

    :param pairs: Repeated command-line pairs.
    :type pairs: list[str] or None
    :return: Override mapping.
    :rtype: dict[str, object]
    :raises ValueError: If a pair is not key=value or the key is empty.
    """
    overrides: Dict[str, object] = {}
    for item in pairs or []:
        if "=" not in item:
            raise ValueError(f"Config values must be key=value (got {item!r})")
        key, raw = item.split("=", 1)
        key = key.strip()
        if not key:
            raise ValueError("Config keys must be non-empty")
        overrides[key] = parse_override_value(raw)
    return overrides


def apply_overrides(config: Mapping[str, object], overrides: Mapping[str, object]) -> Dict[str, object]:
    """
    Return a copy of ``config`` with ``overrides`` applied on top.

    :param config: Base configuration mapping.
    :type config: Mapping[str, object]
    :param overrides: Override mapping.
    :type overrides: Mapping[str, object]
    :return: New configuration mapping.
    :rtype: dict[str, object]
    """
    updated = dict(config)
    updated.update(overrides)
    return updated


def load_configuration_view(
    configuration_paths: Iterable[str],
    *,
    configuration_label: str = "Configuration",
) -> Dict[str, object]:
    """
    Load a composed configuration view from one or more YAML files.

    Later files override keys set by earlier ones.

    :param configuration_paths: Iterable of configuration file paths in precedence order.
    :type configuration_paths: Iterable[str]
    :param configuration_label: Label used in error messages (for example: "Configuration file").
    :type configuration_label: str
    :return: Composed configuration view.
    :rtype: dict[str, object]
    :raises FileNotFoundError: If any configuration file is missing.
    :raises ValueError: If any configuration file is not a mapping/object.
    """
    paths: List[Path] = [Path(str(path)) for path in configuration_paths]
    for candidate in paths:
        if not candidate.is_file():
            raise FileNotFoundError(f"{configuration_label} not found: {candidate}")
    view: Dict[str, object] = {}
    for candidate in paths:
        loaded = yaml.safe_load(candidate.read_text(encoding="utf-8"))
        if loaded is None:
            continue
        if not isinstance(loaded, dict):
            raise ValueError(f"{configuration_label} must be a mapping/object: {candidate}")
        view = apply_overrides(view, loaded)
    return view

"""
Grid configuration loading from YAML.

A configuration file is a flat mapping of GridConfig field names to values.
Dashes may stand in for underscores, so both ``gutter_method`` and
``gutter-method`` work. Lengths are CSS strings (``20px``, ``100%``),
enumerations use their CSS keywords, and omitted keys keep their defaults
(or the values of the *base* configuration passed in).

Example::

    columns: 12
    gutters: 20px
    gutter-method: margin
    grid-width: 940px
    rtl-selector: null
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import fields
from pathlib import Path
from typing import Any, cast

import yaml

from colgrid.schemas.config import GridConfig

_FIELD_NAMES: frozenset[str] = frozenset(f.name for f in fields(GridConfig))


def _normalise_key(key: object) -> str:
    if not isinstance(key, str):
        raise ValueError(f"configuration keys must be strings, got {key!r}")
    return key.strip().replace("-", "_")


def config_from_mapping(mapping: Mapping[str, Any], base: GridConfig | None = None) -> GridConfig:
    """
    Build a GridConfig from a plain mapping.

    Parameters
    ----------
    mapping:
        Field names (or dashed aliases) to raw values.
    base:
        Configuration supplying every value the mapping omits; defaults to
        ``GridConfig()``.

    Raises
    ------
    ValueError
        For unknown keys or values that fail GridConfig validation.
    """
    overrides = {_normalise_key(key): value for key, value in mapping.items()}
    unknown = sorted(set(overrides) - _FIELD_NAMES)
    if unknown:
        raise ValueError(f"unknown grid configuration keys: {', '.join(unknown)}")
    return (base or GridConfig()).with_overrides(**overrides)


def load_config(path: Path | str, base: GridConfig | None = None) -> GridConfig:
    """
    Load and validate a GridConfig from a YAML file.

    An empty file yields *base* (or the defaults) unchanged.

    Raises
    ------
    FileNotFoundError
        If *path* does not exist.
    ValueError
        If the file is not valid YAML, is not a mapping, or holds invalid
        configuration values.
    """
    path = Path(path)
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Grid configuration file not found: {path}") from None
    except yaml.YAMLError as exc:
        raise ValueError(f"Failed to parse grid configuration file {path}: {exc}") from exc

    if data is None:
        return base or GridConfig()
    if not isinstance(data, dict):
        raise ValueError(f"Grid configuration file {path} must contain a mapping")
    return config_from_mapping(cast(dict[str, Any], data), base)

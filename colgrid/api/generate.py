"""
Public CSS generation API.

generate_css() is the single entry point that takes a selector, a mixin name
and grid configuration and returns rendered CSS text together with the
warnings recorded while computing it. It wires: layout mixin → RuleSet →
CSS writer.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from colgrid.config.loader import load_config
from colgrid.layout.background import grid_background
from colgrid.layout.base import grid_clear, grid_container, grid_float, new_row
from colgrid.layout.flow_item import flow_item
from colgrid.layout.grid_item import grid_item
from colgrid.schemas.config import GridConfig, GridConfigurationError
from colgrid.schemas.css import LayoutResult
from colgrid.utilities.diagnostics import Diagnostic
from colgrid.writer.writer import render_rules

logger = logging.getLogger(__name__)

MIXINS: dict[str, Callable[..., LayoutResult]] = {
    "grid-container": lambda config: grid_container(),
    "grid-item": lambda config, column_span, column_position: grid_item(
        column_span, column_position, config
    ),
    "flow-item": lambda config, column_span, **kwargs: flow_item(column_span, config, **kwargs),
    "grid-background": grid_background,
    "clear": grid_clear,
    "float": grid_float,
    "new-row": new_row,
}


@dataclass(frozen=True)
class GeneratedCss:
    """Rendered CSS text plus the warnings recorded while computing it."""

    css: str
    diagnostics: tuple[Diagnostic, ...]


def generate_css(
    selector: str,
    mixin: str,
    config: GridConfig | None = None,
    **arguments: Any,
) -> GeneratedCss:
    """
    Run a layout mixin and render its rules for *selector*.

    Parameters
    ----------
    selector:
        Selector the declarations apply to (e.g. ``".sidebar"``).
    mixin:
        One of ``grid-container``, ``grid-item``, ``flow-item``,
        ``grid-background``, ``clear``, ``float`` or ``new-row``.
    config:
        Grid parameters; defaults to ``GridConfig()``.
    arguments:
        Mixin-specific arguments, e.g. ``column_span=3, column_position=1``
        for ``grid-item``.

    Returns
    -------
    GeneratedCss
        CSS text and the diagnostics recorded by the mixin.

    Raises
    ------
    GridConfigurationError
        If *mixin* is unknown, or the mixin rejects its argument values.
    TypeError
        If *arguments* do not match the mixin's parameters.
    """
    try:
        run = MIXINS[mixin]
    except KeyError:
        raise GridConfigurationError(
            f"unknown mixin {mixin!r}; expected one of {', '.join(sorted(MIXINS))}"
        ) from None

    logger.debug("generate_css selector=%s mixin=%s", selector, mixin)
    result = run(config or GridConfig(), **arguments)
    return GeneratedCss(css=render_rules(result.rules, selector), diagnostics=result.diagnostics)


def generate_css_from_file(
    path: Path | str,
    selector: str,
    mixin: str,
    **arguments: Any,
) -> GeneratedCss:
    """generate_css() with the grid configuration loaded from a YAML file."""
    return generate_css(selector, mixin, load_config(path), **arguments)

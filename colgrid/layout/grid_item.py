"""
Grid item placement using the isolation technique.

Every item floats in the grid direction, is pushed to its column with a
margin measured from the container edge, and pulls the following content
back with a -100% margin on the opposite side. Items therefore never depend
on their siblings' widths, so rounding errors do not accumulate.
"""

from __future__ import annotations

import logging

from colgrid.layout.base import grid_item_base, resolve_direction
from colgrid.layout.mirror import mirrored
from colgrid.schemas.config import GridConfig, GridConfigurationError
from colgrid.schemas.css import Declaration, LayoutResult, RuleSet
from colgrid.utilities.arithmetic import item_width, unit_width
from colgrid.utilities.diagnostics import Diagnostics
from colgrid.utilities.direction import flip_direction
from colgrid.utilities.types import Direction, GutterMethod, Length, percent

logger = logging.getLogger(__name__)


def column_offset(column_position: int, config: GridConfig) -> Length:
    """Distance from the grid edge to the start of *column_position*."""
    steps = column_position - 1
    # Warnings for this unit width are already reported by item_width.
    offset = steps * unit_width(
        config.columns, config.gutters, config.gutter_method, config.grid_width, Diagnostics()
    )
    if config.gutter_method is GutterMethod.MARGIN:
        offset = offset + steps * config.gutters
    return offset


def grid_item(column_span: float, column_position: int, config: GridConfig) -> LayoutResult:
    """
    Place an item spanning *column_span* columns starting at *column_position*.

    Parameters
    ----------
    column_span:
        Number of columns the item spans; may be fractional.
    column_position:
        1-based column the item starts in.
    config:
        Grid parameters.

    Raises
    ------
    GridConfigurationError
        If *column_span* is not positive or *column_position* is outside
        ``[1, columns]``.
    """
    if column_span <= 0:
        raise GridConfigurationError(f"column_span must be positive, got {column_span}")
    if not 1 <= column_position <= config.columns:
        raise GridConfigurationError(
            f"column_position must be in [1, {config.columns}], got {column_position}"
        )
    logger.debug("grid_item span=%s position=%s", column_span, column_position)

    diagnostics = Diagnostics()
    direction = resolve_direction(config, diagnostics)

    rules = RuleSet()
    if config.auto_include_item_base:
        rules = rules + grid_item_base(config, diagnostics)

    width = item_width(
        column_span,
        config.columns,
        config.gutters,
        config.gutter_method,
        config.grid_width,
        config.box_sizing,
        diagnostics,
    )
    offset = column_offset(column_position, config)

    def build(d: Direction) -> list[Declaration]:
        rev = flip_direction(d)
        return [
            Declaration("float", d.value),
            Declaration(f"margin-{d.value}", offset),
            Declaration(f"margin-{rev.value}", percent(-100)),
        ]

    rules = rules + RuleSet((Declaration("width", width),))
    rules = rules + mirrored(build, direction, config.rtl_selector, diagnostics)
    return LayoutResult(rules=rules, diagnostics=diagnostics.records)

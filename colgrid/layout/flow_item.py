"""
Flow item alignment.

A flow item stays in normal document flow (no float) but takes the width of
column_span grid columns and the gutters of its alpha (leading) and omega
(trailing) sides.

Fluid grids are computed inside the parent's coordinate space: the parent
spans parent_column_span columns and is 100% wide, and percentage gutters
are rescaled so they keep their rendered size. Without parent_column_span a
fluid flow item cannot be computed; that is the one hard configuration
error in the layout layer.
"""

from __future__ import annotations

import logging

from colgrid.layout.base import SIDES, grid_item_base, resolve_direction
from colgrid.layout.mirror import DeclarationBuilder, mirrored
from colgrid.schemas.config import GridConfig, GridConfigurationError
from colgrid.schemas.css import CssValue, Declaration, LayoutResult, RuleSet
from colgrid.utilities.arithmetic import half_gutter, item_width
from colgrid.utilities.diagnostics import Diagnostics
from colgrid.utilities.direction import flip_direction
from colgrid.utilities.types import ZERO, BoxSizing, Direction, GutterMethod, Length, percent

logger = logging.getLogger(__name__)


def _sided(prop: str, values: dict[Direction, CssValue]) -> list[Declaration]:
    """``<prop>-left`` / ``<prop>-right`` declarations, always left first."""
    return [Declaration(f"{prop}-{side.value}", values[side]) for side in SIDES if side in values]


def flow_item(
    column_span: float,
    config: GridConfig,
    parent_column_span: float | None = None,
    alpha_gutter: bool = False,
    omega_gutter: bool = True,
) -> LayoutResult:
    """
    Align an in-flow element to *column_span* grid columns.

    Parameters
    ----------
    column_span:
        Number of columns the element spans.
    config:
        Grid parameters.
    parent_column_span:
        Columns spanned by the parent element. Required for percentage grid
        widths, ignored otherwise.
    alpha_gutter:
        Keep a gutter on the leading side.
    omega_gutter:
        Keep a gutter on the trailing side.

    Returns
    -------
    LayoutResult
        Width and spacing declarations, with a mirrored override nested under
        the RTL selector when the two sides differ.

    Raises
    ------
    GridConfigurationError
        If the grid width is a percentage and *parent_column_span* is missing
        or smaller than *column_span*.
    """
    if column_span <= 0:
        raise GridConfigurationError(f"column_span must be positive, got {column_span}")
    logger.debug(
        "flow_item span=%s parent=%s alpha=%s omega=%s",
        column_span,
        parent_column_span,
        alpha_gutter,
        omega_gutter,
    )

    diagnostics = Diagnostics()
    columns: float = config.columns
    gutters = config.gutters
    grid_width = config.grid_width

    if config.is_fluid:
        if parent_column_span is None:
            raise GridConfigurationError(
                "a percentage grid width requires parent_column_span: the number of "
                "columns spanned by the flow item's parent"
            )
        if column_span > parent_column_span:
            raise GridConfigurationError(
                f"column_span ({column_span}) cannot exceed parent_column_span "
                f"({parent_column_span})"
            )
        if gutters.is_percentage:
            parent_width = item_width(
                parent_column_span,
                config.columns,
                gutters,
                config.gutter_method,
                grid_width,
                BoxSizing.BORDER_BOX,
                diagnostics,
            )
            gutters = gutters * (100 / parent_width.value)
        columns = parent_column_span
        grid_width = percent(100)

    direction = resolve_direction(config, diagnostics)

    rules = RuleSet()
    if config.auto_include_flow_item_base:
        # Flow items set their own padding below.
        rules = rules + grid_item_base(config, diagnostics, gutter_padding=False)

    width = item_width(
        column_span,
        columns,
        gutters,
        config.gutter_method,
        grid_width,
        config.box_sizing,
        diagnostics,
    )
    if (
        config.gutter_method is GutterMethod.PADDING
        and not config.is_fluid
        and not alpha_gutter
        and not omega_gutter
        and config.box_sizing.is_border_box
    ):
        # No padding is emitted, so the gutter is absorbed into the width.
        width = width - gutters
    rules = rules + RuleSet((Declaration("width", width),))

    build = _spacing_builder(column_span, columns, gutters, config, alpha_gutter, omega_gutter)
    if build is not None:
        rules = rules + mirrored(build, direction, config.rtl_selector, diagnostics)
    return LayoutResult(rules=rules, diagnostics=diagnostics.records)


def _spacing_builder(
    column_span: float,
    columns: float,
    gutters: Length,
    config: GridConfig,
    alpha: bool,
    omega: bool,
) -> DeclarationBuilder | None:
    """Pick the margin/padding builder for the gutter method and grid type."""
    if config.gutter_method is GutterMethod.NONE:
        return None

    if config.gutter_method is GutterMethod.MARGIN:
        if not (alpha or omega):
            return None

        def margins(d: Direction) -> list[Declaration]:
            rev = flip_direction(d)
            values = {d: gutters if alpha else ZERO, rev: gutters if omega else ZERO}
            return _sided("margin", values)

        return margins

    if config.is_fluid:
        # The parent's padding already takes space from the columns it spans.
        adjusted = (columns - column_span) * gutters / columns
        if adjusted.is_zero:
            adjusted = ZERO
        half = gutters / 2

        def fluid(d: Direction) -> list[Declaration]:
            rev = flip_direction(d)
            declarations = _sided("padding", {d: ZERO, rev: adjusted if omega else ZERO})
            if omega and not alpha:
                declarations += _sided("margin", {d: -half, rev: ZERO})
            return declarations

        return fluid

    if alpha and omega:
        return lambda d: _sided(
            "padding", {side: half_gutter(gutters, side, d) for side in SIDES}
        )
    if not (alpha or omega):
        return lambda d: _sided("padding", {side: ZERO for side in SIDES})

    def one_sided(d: Direction) -> list[Declaration]:
        rev = flip_direction(d)
        return _sided("padding", {d: gutters if alpha else ZERO, rev: gutters if omega else ZERO})

    return one_sided

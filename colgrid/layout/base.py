"""
Base helpers shared by grid items and flow items.

grid_item_base is the common reset applied to anything aligned to the grid;
apply_gutter_padding splits the gutter into left and right padding. The
container, clear, float and new-row helpers are the small building blocks
used around grid items.
"""

from __future__ import annotations

import logging

from colgrid.layout.mirror import mirrored
from colgrid.schemas.config import GridConfig
from colgrid.schemas.css import Declaration, LayoutResult, NestedRule, RuleSet
from colgrid.utilities.arithmetic import half_gutter
from colgrid.utilities.diagnostics import Diagnostics
from colgrid.utilities.direction import switch_direction
from colgrid.utilities.types import BoxSizing, Direction, GutterMethod

logger = logging.getLogger(__name__)

SIDES: tuple[Direction, Direction] = (Direction.LEFT, Direction.RIGHT)


def resolve_direction(config: GridConfig, diagnostics: Diagnostics | None = None) -> Direction:
    """The configured direction, reversed when ``switch_direction`` is set."""
    return Direction(switch_direction(config.direction, config.switch_direction, diagnostics))


def apply_gutter_padding(config: GridConfig, diagnostics: Diagnostics | None = None) -> RuleSet:
    """Half-gutter padding on both sides, mirrored for odd pixel gutters."""

    def build(direction: Direction) -> list[Declaration]:
        return [
            Declaration(f"padding-{side.value}", half_gutter(config.gutters, side, direction))
            for side in SIDES
        ]

    return mirrored(build, resolve_direction(config, diagnostics), config.rtl_selector, diagnostics)


def grid_item_base(
    config: GridConfig,
    diagnostics: Diagnostics | None = None,
    gutter_padding: bool = True,
) -> RuleSet:
    """
    Shared base reset for grid and flow items.

    ``box-sizing: border-box`` is only declared for BORDER_BOX; with
    UNIVERSAL_BORDER_BOX a global rule already sets it. The ``padding``
    gutter method adds the half-gutter padding unless *gutter_padding* is
    false (flow items declare their own).
    """
    declarations: list[Declaration] = []
    if config.box_sizing is BoxSizing.BORDER_BOX:
        declarations.append(Declaration("box-sizing", "border-box"))
    # Keeps long words from overflowing a narrow column.
    declarations.append(Declaration("word-wrap", "break-word"))

    rules = RuleSet(tuple(declarations))
    if gutter_padding and config.gutter_method is GutterMethod.PADDING:
        rules = rules + apply_gutter_padding(config, diagnostics)
    return rules


def grid_container() -> LayoutResult:
    """Clearfix for an element containing floated grid items."""
    rules = RuleSet(
        nested=(
            NestedRule(
                "&::before, &::after",
                RuleSet((Declaration("content", '""'), Declaration("display", "table"))),
            ),
            NestedRule("&::after", RuleSet((Declaration("clear", "both"),))),
        )
    )
    return LayoutResult(rules=rules)


def grid_clear(
    config: GridConfig,
    direction: Direction | str = Direction.BOTH,
) -> LayoutResult:
    """``clear`` in *direction*; left/right clears are mirrored under the RTL selector."""
    diagnostics = Diagnostics()
    rules = mirrored(
        lambda d: [Declaration("clear", d.value)],
        Direction(direction),
        config.rtl_selector,
        diagnostics,
    )
    return LayoutResult(rules=rules, diagnostics=diagnostics.records)


def grid_float(config: GridConfig, direction: Direction | str | None = None) -> LayoutResult:
    """``float`` in *direction* (default: the configured direction), mirrored."""
    diagnostics = Diagnostics()
    resolved = resolve_direction(config, diagnostics) if direction is None else Direction(direction)
    rules = mirrored(
        lambda d: [Declaration("float", d.value)],
        resolved,
        config.rtl_selector,
        diagnostics,
    )
    return LayoutResult(rules=rules, diagnostics=diagnostics.records)


def new_row(config: GridConfig) -> LayoutResult:
    """Start a new row of grid items by clearing in the configured direction."""
    logger.debug("new_row direction=%s", config.direction.value)
    return grid_clear(config, resolve_direction(config))

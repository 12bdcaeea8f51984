"""
Background grid generator.

grid_background draws the grid behind an element for design-time checking:
column-number marker images along the top and/or bottom edge, plus linear
gradients whose hard colour stops outline every column.

Three gradient constructions, by gutter arithmetic:

  margin      columns and gutters sit side by side:
              colour for unit_width, transparent for the gutter.
  comparable  gutters are inside the columns (padding): each column is
              transparent for its leading half gutter, coloured, then
              transparent for its trailing half gutter.
  otherwise   gutters cannot be subtracted from grid positions (e.g. em
              gutters on a px grid). Two gradients hold the left and right
              halves of every column, built only from unit_width fractions,
              and background-position shifts them by half a gutter in
              opposite directions so they meet as full columns.
"""

from __future__ import annotations

import logging

from colgrid.layout.base import resolve_direction
from colgrid.layout.mirror import mirrored
from colgrid.schemas.background import (
    TRANSPARENT,
    BackgroundLayer,
    BackgroundResult,
    ColorStop,
    LinearGradient,
)
from colgrid.schemas.config import GridConfig, GridNumbers
from colgrid.schemas.css import Declaration
from colgrid.utilities.arithmetic import half_gutter, unit_width
from colgrid.utilities.diagnostics import DiagnosticCode, Diagnostics
from colgrid.utilities.types import ZERO, Direction, GutterMethod, Length
from colgrid.writer.templates import format_layer_image, format_layer_position

logger = logging.getLogger(__name__)

# Marker images exist for column numbers 1..GRID_NUMBER_MAX.
GRID_NUMBER_MAX: int = 24
GRADIENT_DIRECTION: str = "to right"


def grid_number_image(number: int, config: GridConfig) -> str:
    """Path of the marker image for column *number*."""
    return f"{config.grid_numbers_path}/{number}.png"


def column_position(index: int, unit: Length, config: GridConfig) -> Length:
    """Horizontal centre of column *index* (1-based), measured from the left."""
    position = (2 * index - 1) * (unit / 2)
    if config.gutter_method is GutterMethod.MARGIN:
        position = position + (index - 1) * config.gutters
    return position


def number_markers(
    config: GridConfig,
    direction: Direction,
    unit: Length,
    diagnostics: Diagnostics,
) -> list[BackgroundLayer]:
    """
    Column-number marker layers, top row first.

    Left-to-right: the top row counts from the left, the bottom row from the
    right. Right-to-left swaps the two rows.
    """
    show_top = config.grid_numbers in (GridNumbers.BOTH, GridNumbers.TOP)
    show_bottom = config.grid_numbers in (GridNumbers.BOTH, GridNumbers.BOTTOM)
    top: list[BackgroundLayer] = []
    bottom: list[BackgroundLayer] = []
    missing: set[int] = set()

    for i in range(1, config.columns + 1):
        position = column_position(i, unit, config)
        forward, reverse = i, config.columns - i + 1
        top_number, bottom_number = (
            (reverse, forward) if direction is Direction.RIGHT else (forward, reverse)
        )
        for show, number, edge, row in (
            (show_top, top_number, "top", top),
            (show_bottom, bottom_number, "bottom", bottom),
        ):
            if not show:
                continue
            if number > GRID_NUMBER_MAX:
                missing.add(number)
                continue
            row.append(
                BackgroundLayer(grid_number_image(number, config), (position, edge), "no-repeat")
            )

    if missing:
        diagnostics.warn(
            DiagnosticCode.MISSING_GRID_NUMBER,
            f"no marker images for column numbers above {GRID_NUMBER_MAX}; "
            f"{len(missing)} column number(s) are not shown",
        )
    return top + bottom


def margin_stops(config: GridConfig, unit: Length) -> list[ColorStop]:
    """Colour for each column, transparent for each gutter between columns."""
    color, gutters = config.grid_color, config.gutters
    stops: list[ColorStop] = []
    for i in range(1, config.columns + 1):
        start = (i - 1) * (unit + gutters)
        end = start + unit
        stops += [ColorStop(color, start), ColorStop(color, end)]
        if i < config.columns:
            stops += [ColorStop(TRANSPARENT, end), ColorStop(TRANSPARENT, end + gutters)]
    return stops


def padded_stops(
    config: GridConfig,
    direction: Direction,
    unit: Length,
    diagnostics: Diagnostics,
) -> list[ColorStop]:
    """
    Columns inset by the same half gutters grid items get as padding.

    A half gutter wider than half a column is clamped to it, leaving a
    zero-width coloured band.
    """
    color, gutters = config.grid_color, config.gutters
    lead = half_gutter(gutters, Direction.LEFT, direction)
    trail = half_gutter(gutters, Direction.RIGHT, direction)
    half_unit = unit / 2
    if lead > half_unit or trail > half_unit:
        diagnostics.warn(
            DiagnosticCode.GUTTER_OVERFLOW,
            f"the gutter width ({gutters}) is wider than the unit width ({unit}); "
            "columns are drawn with no coloured area",
        )
        lead, trail = min(lead, half_unit), min(trail, half_unit)
    stops: list[ColorStop] = []
    for i in range(1, config.columns + 1):
        start = (i - 1) * unit
        end = i * unit
        band_start = start + lead
        # Clamped halves can cross by a rounding error.
        band_end = max(band_start, end - trail)
        stops += [
            ColorStop(TRANSPARENT, start),
            ColorStop(TRANSPARENT, band_start),
            ColorStop(color, band_start),
            ColorStop(color, band_end),
            ColorStop(TRANSPARENT, band_end),
            ColorStop(TRANSPARENT, end),
        ]
    return stops


def split_stops(config: GridConfig, unit: Length) -> tuple[list[ColorStop], list[ColorStop]]:
    """Left and right halves of every column, in unit_width fractions only."""
    color = config.grid_color
    left: list[ColorStop] = []
    right: list[ColorStop] = []
    for i in range(1, config.columns + 1):
        start = (i - 1) * unit
        middle = start + unit / 2
        end = i * unit
        left += [
            ColorStop(color, start),
            ColorStop(color, middle),
            ColorStop(TRANSPARENT, middle),
            ColorStop(TRANSPARENT, end),
        ]
        right += [
            ColorStop(TRANSPARENT, start),
            ColorStop(TRANSPARENT, middle),
            ColorStop(color, middle),
            ColorStop(color, end),
        ]
    return left, right


def background_layers(
    config: GridConfig,
    direction: Direction,
    diagnostics: Diagnostics,
) -> list[BackgroundLayer]:
    """All layers for one direction: markers, then one or two gradients."""
    unit = unit_width(
        config.columns, config.gutters, config.gutter_method, config.grid_width, diagnostics
    )
    layers = number_markers(config, direction, unit, diagnostics)

    if config.gutter_method is GutterMethod.MARGIN:
        gradient = LinearGradient(GRADIENT_DIRECTION, tuple(margin_stops(config, unit)))
        layers.append(BackgroundLayer(gradient, (ZERO, ZERO)))
    elif config.gutters.comparable(config.grid_width):
        gradient = LinearGradient(GRADIENT_DIRECTION, tuple(padded_stops(config, direction, unit, diagnostics))
        )
        layers.append(BackgroundLayer(gradient, (ZERO, ZERO)))
    else:
        left, right = split_stops(config, unit)
        half = config.gutters / 2
        layers += [
            BackgroundLayer(LinearGradient(GRADIENT_DIRECTION, tuple(left)), (half, ZERO)),
            BackgroundLayer(LinearGradient(GRADIENT_DIRECTION, tuple(right)), (-half, ZERO)),
        ]
    return layers


def background_declarations(layers: list[BackgroundLayer]) -> list[Declaration]:
    """``background-image``, ``-position`` and ``-repeat`` lists for *layers*."""
    images = ", ".join(format_layer_image(layer) for layer in layers)
    positions = ", ".join(format_layer_position(layer) for layer in layers)
    repeats = ", ".join(layer.repeat for layer in layers)
    return [
        Declaration("background-image", images),
        Declaration("background-position", positions),
        Declaration("background-repeat", repeats),
    ]


def grid_background(config: GridConfig) -> BackgroundResult:
    """
    Background layers that visualise the grid columns.

    Parameters
    ----------
    config:
        Grid parameters, including ``grid_color`` and ``grid_numbers``.

    Returns
    -------
    BackgroundResult
        The layers for the resolved direction, the background declarations,
        and, when an RTL selector is configured, the declarations of a single
        mirrored pass nested under it.
    """
    logger.debug(
        "grid_background columns=%s gutters=%s method=%s width=%s",
        config.columns,
        config.gutters,
        config.gutter_method.value,
        config.grid_width,
    )
    diagnostics = Diagnostics()
    direction = resolve_direction(config, diagnostics)
    layers = background_layers(config, direction, diagnostics)

    def build(d: Direction) -> list[Declaration]:
        # The mirrored pass repeats the same warnings; they are not collected twice.
        current = layers if d is direction else background_layers(config, d, Diagnostics())
        return background_declarations(current)

    rules = mirrored(build, direction, config.rtl_selector, diagnostics)
    return BackgroundResult(rules=rules, diagnostics=diagnostics.records, layers=tuple(layers))

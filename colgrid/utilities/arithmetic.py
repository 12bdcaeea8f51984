"""
Grid arithmetic: half gutters, column unit widths and spanned item widths.

These are the leaf computations every layout mixin builds on. They are pure
apart from recording warnings on the Diagnostics collector they are given.

Formulas:
    unit_width (margin)   = (grid_width − (columns − 1) × gutters) / columns
    unit_width (other)    = grid_width / columns
    item_width            = column_span × unit_width
                            + (floor(column_span) − 1) × gutters     [margin]
                            − gutters                                 [content-box]
"""

from __future__ import annotations

import math

from .diagnostics import DiagnosticCode, Diagnostics
from .types import BoxSizing, Direction, GutterMethod, Length


def half_gutter(gutters: Length, side: Direction | str, direction: Direction | str) -> Length:
    """
    Half of *gutters* for one side of a grid item.

    Odd integer pixel gutters cannot be halved without a sub-pixel loss, so
    the side matching *direction* gets the floor and the opposite side the
    ceiling; the two halves always sum to the full gutter. Other units are
    halved exactly.

    Examples:
        half_gutter(21px, left, left)  → 10px
        half_gutter(21px, right, left) → 11px
    """
    half = gutters / 2
    if gutters.is_pixels and gutters.is_integer and int(gutters.value) % 2 == 1:
        return half.floor() if side == direction else half.ceil()
    return half


def valid_units(
    gutters: Length,
    grid_width: Length,
    diagnostics: Diagnostics | None = None,
) -> bool:
    """
    Check that *gutters* and *grid_width* can be combined arithmetically.

    Records an ``incompatible-units`` warning and returns False when they
    cannot. The caller is expected to proceed; the arithmetic that follows
    raises IncompatibleUnitsError with the offending values.
    """
    if gutters.comparable(grid_width):
        return True
    (diagnostics if diagnostics is not None else Diagnostics()).warn(
        DiagnosticCode.INCOMPATIBLE_UNITS,
        f"the gutter width ({gutters}) and grid width ({grid_width}) "
        "use incompatible units",
    )
    return False


def unit_width(
    columns: int,
    gutters: Length,
    gutter_method: GutterMethod | str,
    grid_width: Length,
    diagnostics: Diagnostics | None = None,
) -> Length:
    """
    Width of one grid column, excluding any gutter placed outside it.

    Args:
        columns: Number of columns in the grid (>= 1).
        gutters: Gutter width.
        gutter_method: ``margin`` subtracts the internal gutters from the
            grid width before dividing; other methods divide it evenly.
        grid_width: Total width of the grid.
        diagnostics: Collector for non-fatal warnings.

    Returns:
        The unrounded unit width in the grid width's unit. A pixel width
        that is not a whole number records a ``rounding-risk`` warning.
    """
    if columns < 1:
        raise ValueError(f"columns must be >= 1, got {columns}")
    diag = diagnostics if diagnostics is not None else Diagnostics()

    if gutter_method == GutterMethod.MARGIN:
        valid_units(gutters, grid_width, diag)
        width = (grid_width - (columns - 1) * gutters) / columns
    else:
        width = grid_width / columns

    if width.is_pixels and math.floor(width.value) != math.ceil(width.value):
        diag.warn(
            DiagnosticCode.ROUNDING_RISK,
            f"a grid width of {grid_width} over {columns} columns gives a unit "
            f"width of {width}; browsers may round column widths differently",
        )
    return width


def item_width(
    column_span: float,
    columns: int,
    gutters: Length,
    gutter_method: GutterMethod | str,
    grid_width: Length,
    box_sizing: BoxSizing | str = BoxSizing.BORDER_BOX,
    diagnostics: Diagnostics | None = None,
) -> Length:
    """
    Width of an item spanning *column_span* columns.

    With the ``margin`` method the gutters between the spanned columns are
    part of the item. Otherwise a ``content-box`` item shrinks by one gutter,
    since its gutter padding is added outside the declared width.
    """
    diag = diagnostics if diagnostics is not None else Diagnostics()
    width = column_span * unit_width(columns, gutters, gutter_method, grid_width, diag)

    if gutter_method == GutterMethod.MARGIN:
        width = width + (math.floor(column_span) - 1) * gutters
    elif BoxSizing(box_sizing) is BoxSizing.CONTENT_BOX:
        valid_units(gutters, grid_width, diag)
        width = width - gutters
    return width

"""
Shared utilities for the colgrid layout library.

Provides the deterministic building blocks every layout mixin uses: CSS
lengths and unit conversion, grid arithmetic, direction flipping and the
diagnostics side channel.
"""

from .arithmetic import half_gutter, item_width, unit_width, valid_units
from .conversion import ABSOLUTE_UNITS, MM_PER_INCH, PX_PER_INCH, units_comparable
from .diagnostics import Diagnostic, DiagnosticCode, Diagnostics
from .direction import flip_direction, switch_direction
from .types import (
    ZERO,
    BoxSizing,
    Direction,
    GutterMethod,
    IncompatibleUnitsError,
    Length,
    percent,
    px,
)

__all__ = [
    # types
    "Length",
    "Direction",
    "GutterMethod",
    "BoxSizing",
    "IncompatibleUnitsError",
    "ZERO",
    "px",
    "percent",
    # conversion
    "ABSOLUTE_UNITS",
    "MM_PER_INCH",
    "PX_PER_INCH",
    "units_comparable",
    # diagnostics
    "Diagnostic",
    "DiagnosticCode",
    "Diagnostics",
    # arithmetic
    "half_gutter",
    "unit_width",
    "valid_units",
    "item_width",
    # direction
    "flip_direction",
    "switch_direction",
]

"""
Grid configuration schema.

GridConfig replaces process-wide defaults: every entry point takes one
explicitly, and per-call overrides go through with_overrides(). The field
defaults below are the library's documented defaults.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from enum import Enum
from typing import Any

from colgrid.utilities.types import BoxSizing, Direction, GutterMethod, Length, percent, px

DEFAULT_RTL_SELECTOR: str = '[dir="rtl"]'


class GridConfigurationError(ValueError):
    """Raised when a layout request cannot be computed safely from its inputs."""


class GridNumbers(str, Enum):
    """Which rows of column-number markers the background grid shows."""

    BOTH = "both"
    TOP = "top"
    BOTTOM = "bottom"
    NONE = "none"


@dataclass(frozen=True)
class GridConfig:
    """
    Immutable set of grid parameters.

    Attributes:
        columns: Number of columns in the grid.
        gutters: Space between adjacent columns.
        gutter_method: Whether gutters become margins, paddings, or nothing.
        grid_width: Total width of the grid; percentages make a fluid grid.
        box_sizing: Box-sizing mode of grid items.
        direction: Float/flow direction, ``left`` or ``right``.
        switch_direction: Reverse ``direction`` everywhere when true.
        rtl_selector: Selector under which mirrored declarations are nested;
            ``None`` or ``""`` disables mirrored output.
        auto_include_item_base: Emit the shared base reset with grid items.
        auto_include_flow_item_base: Emit the shared base reset with flow items.
        grid_color: Colour of the columns in the background grid.
        grid_numbers: Which marker rows the background grid shows.
        grid_numbers_path: Directory holding the ``<n>.png`` marker images.
    """

    columns: int = 1
    gutters: Length = field(default_factory=lambda: px(20))
    gutter_method: GutterMethod = GutterMethod.PADDING
    grid_width: Length = field(default_factory=lambda: percent(100))
    box_sizing: BoxSizing = BoxSizing.BORDER_BOX
    direction: Direction = Direction.LEFT
    switch_direction: bool = False
    rtl_selector: str | None = DEFAULT_RTL_SELECTOR
    auto_include_item_base: bool = True
    auto_include_flow_item_base: bool = True
    grid_color: str = "#ffdede"
    grid_numbers: GridNumbers = GridNumbers.BOTH
    grid_numbers_path: str = "grid-numbers"

    def __post_init__(self) -> None:
        # Coerce plain strings (e.g. from YAML) into lengths and enum members.
        object.__setattr__(self, "gutters", Length.parse(self.gutters))
        object.__setattr__(self, "grid_width", Length.parse(self.grid_width))
        object.__setattr__(self, "gutter_method", GutterMethod(self.gutter_method))
        object.__setattr__(self, "box_sizing", BoxSizing(self.box_sizing))
        object.__setattr__(self, "direction", Direction(self.direction))
        object.__setattr__(self, "grid_numbers", GridNumbers(self.grid_numbers))

        if isinstance(self.columns, bool) or not isinstance(self.columns, int):
            raise ValueError(f"columns must be an integer, got {self.columns!r}")
        if self.columns < 1:
            raise ValueError(f"columns must be >= 1, got {self.columns}")
        if self.gutters.value < 0:
            raise ValueError(f"gutters must be non-negative, got {self.gutters}")
        if self.grid_width.value <= 0:
            raise ValueError(f"grid_width must be positive, got {self.grid_width}")
        if self.direction not in (Direction.LEFT, Direction.RIGHT):
            raise ValueError(f"direction must be left or right, got {self.direction.value!r}")

    @property
    def is_fluid(self) -> bool:
        """True for percentage-based grids."""
        return self.grid_width.is_percentage

    def with_overrides(self, **overrides: Any) -> GridConfig:
        """Return a copy with the given fields replaced (and re-validated)."""
        known = {f.name for f in fields(self)}
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise ValueError(f"unknown GridConfig fields: {', '.join(unknown)}")
        return replace(self, **overrides)

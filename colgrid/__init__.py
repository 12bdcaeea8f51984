"""
colgrid: grid column arithmetic and CSS declaration generation.

Computes column widths, gutters and positions from a GridConfig and returns
structured CSS declarations for grid items, flow items and a debugging
background grid.
"""

from colgrid.api.generate import GeneratedCss, generate_css, generate_css_from_file
from colgrid.config.loader import config_from_mapping, load_config
from colgrid.layout import (
    flow_item,
    grid_background,
    grid_clear,
    grid_container,
    grid_float,
    grid_item,
    new_row,
)
from colgrid.schemas.config import GridConfig, GridConfigurationError, GridNumbers
from colgrid.utilities.types import BoxSizing, Direction, GutterMethod, Length

__all__ = [
    "BoxSizing",
    "Direction",
    "GeneratedCss",
    "GridConfig",
    "GridConfigurationError",
    "GridNumbers",
    "GutterMethod",
    "Length",
    "config_from_mapping",
    "flow_item",
    "generate_css",
    "generate_css_from_file",
    "grid_background",
    "grid_clear",
    "grid_container",
    "grid_float",
    "grid_item",
    "load_config",
    "new_row",
]

from .background import GRID_NUMBER_MAX, grid_background
from .base import (
    apply_gutter_padding,
    grid_clear,
    grid_container,
    grid_float,
    grid_item_base,
    new_row,
    resolve_direction,
)
from .flow_item import flow_item
from .grid_item import grid_item
from .mirror import mirrored, rtl_context

__all__ = [
    "GRID_NUMBER_MAX",
    "apply_gutter_padding",
    "flow_item",
    "grid_background",
    "grid_clear",
    "grid_container",
    "grid_float",
    "grid_item",
    "grid_item_base",
    "mirrored",
    "new_row",
    "resolve_direction",
    "rtl_context",
]

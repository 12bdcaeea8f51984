from .templates import format_gradient, format_list, format_value, resolve_selector
from .writer import render_rules

__all__ = [
    "format_gradient",
    "format_list",
    "format_value",
    "render_rules",
    "resolve_selector",
]

"""
Value and declaration templates for the CSS writer.

format_value converts a single structured value into CSS text.
format_gradient and the format_layer_* helpers render background layers.
render_declaration and render_block produce the text of one rule.
"""

from __future__ import annotations

from collections.abc import Iterable

from colgrid.schemas.background import BackgroundLayer, LinearGradient
from colgrid.schemas.css import CssValue, Declaration
from colgrid.utilities.types import Length, format_number


def format_value(value: CssValue) -> str:
    """Render a declaration value as CSS text."""
    match value:
        case Length():
            return str(value)
        case bool():
            raise TypeError(f"booleans are not CSS values: {value!r}")
        case int() | float():
            return format_number(value)
        case str():
            return value
        case _:
            raise TypeError(f"unsupported CSS value: {value!r}")


def format_list(values: Iterable[CssValue], separator: str = ", ") -> str:
    """Render several values as one comma-separated (or space-separated) list."""
    return separator.join(format_value(v) for v in values)


def format_gradient(gradient: LinearGradient) -> str:
    """``linear-gradient(to right, #ffdede 0px, ...)``."""
    stops = ", ".join(f"{stop.color} {format_value(stop.offset)}" for stop in gradient.stops)
    return f"linear-gradient({gradient.direction}, {stops})"


def format_layer_image(layer: BackgroundLayer) -> str:
    if isinstance(layer.image, LinearGradient):
        return format_gradient(layer.image)
    return f'url("{layer.image}")'


def format_layer_position(layer: BackgroundLayer) -> str:
    return format_list(layer.position, separator=" ")


def render_declaration(decl: Declaration) -> str:
    return f"{decl.property}: {format_value(decl.value)};"


def render_block(selector: str, declarations: Iterable[Declaration], indent: str = "  ") -> str:
    """Render ``selector { ... }``; an empty block renders as an empty string."""
    lines = [f"{indent}{render_declaration(d)}" for d in declarations]
    if not lines:
        return ""
    return "\n".join([f"{selector} {{", *lines, "}"])


def resolve_selector(nested: str, parent: str) -> str:
    """
    Resolve ``&`` in *nested* against *parent*, expanding comma lists.

    ``resolve_selector('[dir="rtl"] &', ".a, .b")`` gives
    ``'[dir="rtl"] .a, [dir="rtl"] .b'``.
    """
    parents = [p.strip() for p in parent.split(",")]
    resolved: list[str] = []
    for part in (n.strip() for n in nested.split(",")):
        if "&" in part:
            resolved.extend(part.replace("&", p) for p in parents)
        else:
            resolved.extend(f"{p} {part}" for p in parents)
    return ", ".join(resolved)

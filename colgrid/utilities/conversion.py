"""
Unit comparability and conversion between CSS length units.

Absolute lengths (px, in, cm, mm, q, pt, pc) convert through fixed factors
anchored on the CSS inch: 1in = 96px = 2.54cm = 25.4mm. Every other unit
(%, em, rem, vw, ...) is only comparable with itself. Unitless numbers are
comparable with everything.

All functions are pure and stateless.
"""

from __future__ import annotations

MM_PER_INCH: float = 25.4
PX_PER_INCH: float = 96.0

# Size of one unit expressed in px.
_PX_PER_UNIT: dict[str, float] = {
    "px": 1.0,
    "in": PX_PER_INCH,
    "cm": PX_PER_INCH / (MM_PER_INCH / 10),
    "mm": PX_PER_INCH / MM_PER_INCH,
    "q": PX_PER_INCH / (MM_PER_INCH * 4),
    "pt": PX_PER_INCH / 72,
    "pc": PX_PER_INCH / 6,
}

ABSOLUTE_UNITS: frozenset[str] = frozenset(_PX_PER_UNIT)


def is_absolute(unit: str) -> bool:
    """True if *unit* is a fixed physical length unit."""
    return unit in ABSOLUTE_UNITS


def units_comparable(unit_a: str, unit_b: str) -> bool:
    """True if values in the two units can be added, subtracted or divided."""
    if unit_a == unit_b or not unit_a or not unit_b:
        return True
    return is_absolute(unit_a) and is_absolute(unit_b)


def conversion_factor(from_unit: str, to_unit: str) -> float:
    """
    Multiplier that converts a value in *from_unit* into *to_unit*.

    Raises:
        ValueError: If the units are not comparable.
    """
    if from_unit == to_unit or not from_unit or not to_unit:
        return 1.0
    if not units_comparable(from_unit, to_unit):
        raise ValueError(f"cannot convert {from_unit!r} to {to_unit!r}")
    return _PX_PER_UNIT[from_unit] / _PX_PER_UNIT[to_unit]


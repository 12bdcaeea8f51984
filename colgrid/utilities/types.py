"""
Core type definitions for the shared utilities layer.

All types are immutable: lengths are frozen dataclasses with fail-fast
validation in __post_init__, vocabularies are str-valued enums so that plain
strings from configuration files compare equal to their members.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum

from .conversion import conversion_factor, units_comparable

_LENGTH_RE = re.compile(r"^\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:e[+-]?\d+)?)\s*([a-z%]*)\s*$", re.I)

# Decimal places kept when rendering numbers as CSS text.
PRECISION: int = 5


class IncompatibleUnitsError(ValueError):
    """Raised when arithmetic combines two lengths whose units do not convert."""


class Direction(str, Enum):
    """Horizontal direction vocabulary used by floats, gutters and flips."""

    LEFT = "left"
    RIGHT = "right"
    NONE = "none"
    BOTH = "both"


class GutterMethod(str, Enum):
    """How gutter space is allocated to grid items."""

    MARGIN = "margin"
    PADDING = "padding"
    NONE = "none"


class BoxSizing(str, Enum):
    """
    Box-sizing mode of grid items.

    UNIVERSAL_BORDER_BOX means a global ``* { box-sizing: border-box }`` rule
    is already in place, so items behave as BORDER_BOX without declaring it.
    """

    CONTENT_BOX = "content-box"
    BORDER_BOX = "border-box"
    UNIVERSAL_BORDER_BOX = "universal-border-box"

    @property
    def is_border_box(self) -> bool:
        return self is not BoxSizing.CONTENT_BOX


def format_number(value: float) -> str:
    """Render a number the way CSS expects: no trailing zeros, no ``-0``."""
    rounded = round(value, PRECISION)
    if rounded == 0:
        return "0"
    text = f"{rounded:.{PRECISION}f}".rstrip("0").rstrip(".")
    return text


@dataclass(frozen=True)
class Length:
    """
    A number with a CSS unit, e.g. ``20px`` or ``8.33333%``.

    ``unit`` is ``""`` for unitless numbers. Addition, subtraction and
    division between lengths require comparable units and otherwise raise
    IncompatibleUnitsError; the result keeps the left operand's unit.
    """

    value: float
    unit: str = ""

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, (int, float)):
            raise ValueError(f"Length value must be a number, got {self.value!r}")
        if not math.isfinite(self.value):
            raise ValueError(f"Length value must be finite, got {self.value!r}")
        if not isinstance(self.unit, str):
            raise ValueError(f"Length unit must be a string, got {self.unit!r}")

    # ── Construction ──────────────────────────────────────────────────────────

    @classmethod
    def parse(cls, raw: Length | str | int | float) -> Length:
        """
        Build a Length from CSS text (``"20px"``, ``"100%"``, ``"1.5em"``) or a
        plain number (unitless).

        Raises:
            ValueError: If *raw* is not a recognisable length.
        """
        if isinstance(raw, Length):
            return raw
        if isinstance(raw, (int, float)) and not isinstance(raw, bool):
            return cls(raw)
        if isinstance(raw, str):
            match = _LENGTH_RE.match(raw)
            if match:
                number, unit = match.groups()
                value = float(number)
                if value.is_integer() and "." not in number and "e" not in number.lower():
                    value = int(value)
                return cls(value, unit.lower())
        raise ValueError(f"not a CSS length: {raw!r}")

    # ── Queries ───────────────────────────────────────────────────────────────

    @property
    def is_percentage(self) -> bool:
        return self.unit == "%"

    @property
    def is_pixels(self) -> bool:
        return self.unit == "px"

    @property
    def is_integer(self) -> bool:
        return float(self.value).is_integer()

    @property
    def is_zero(self) -> bool:
        return self.value == 0

    def comparable(self, other: Length) -> bool:
        """True if *other* can be combined arithmetically with this length."""
        return units_comparable(self.unit, other.unit)

    def floor(self) -> Length:
        return Length(math.floor(self.value), self.unit)

    def ceil(self) -> Length:
        return Length(math.ceil(self.value), self.unit)

    # ── Arithmetic ────────────────────────────────────────────────────────────

    def _operand(self, other: object, op: str) -> tuple[float, str]:
        """Return *other* as a value in this length's unit, plus the result unit."""
        if isinstance(other, Length):
            if not units_comparable(self.unit, other.unit):
                raise IncompatibleUnitsError(
                    f"incompatible units: {self} {op} {other}"
                )
            if not self.unit:
                return other.value, other.unit
            return other.value * conversion_factor(other.unit, self.unit), self.unit
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            return float(other), self.unit
        raise TypeError(f"unsupported operand for Length {op}: {other!r}")

    def __add__(self, other: object) -> Length:
        value, unit = self._operand(other, "+")
        return Length(self.value + value, unit)

    def __radd__(self, other: object) -> Length:
        value, unit = self._operand(other, "+")
        return Length(value + self.value, unit)

    def __sub__(self, other: object) -> Length:
        value, unit = self._operand(other, "-")
        return Length(self.value - value, unit)

    def __rsub__(self, other: object) -> Length:
        value, unit = self._operand(other, "-")
        return Length(value - self.value, unit)

    def __mul__(self, other: object) -> Length:
        if isinstance(other, Length):
            if other.unit and self.unit:
                raise TypeError(f"cannot multiply {self} by {other}")
            return Length(self.value * other.value, self.unit or other.unit)
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            return Length(self.value * other, self.unit)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> Length | float:
        if isinstance(other, Length):
            if not other.unit:
                return Length(self.value / other.value, self.unit)
            value, _ = self._operand(other, "/")
            if not self.unit:
                raise TypeError(f"cannot divide unitless {self} by {other}")
            return self.value / value
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            return Length(self.value / other, self.unit)
        return NotImplemented

    def __neg__(self) -> Length:
        return Length(-self.value, self.unit)

    # ── Ordering ──────────────────────────────────────────────────────────────

    def __lt__(self, other: object) -> bool:
        value, _ = self._operand(other, "<")
        return self.value < value

    def __le__(self, other: object) -> bool:
        value, _ = self._operand(other, "<=")
        return self.value <= value

    def __gt__(self, other: object) -> bool:
        value, _ = self._operand(other, ">")
        return self.value > value

    def __ge__(self, other: object) -> bool:
        value, _ = self._operand(other, ">=")
        return self.value >= value

    def __str__(self) -> str:
        text = format_number(self.value)
        if text == "0" and not self.unit:
            return text
        return f"{text}{self.unit}"


def px(value: float) -> Length:
    """Shorthand for a pixel length."""
    return Length(value, "px")


def percent(value: float) -> Length:
    """Shorthand for a percentage length."""
    return Length(value, "%")


ZERO = Length(0)

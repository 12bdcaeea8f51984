"""Direction flipping for mirrored (right-to-left) output."""

from __future__ import annotations

from .diagnostics import DiagnosticCode, Diagnostics
from .types import Direction

_FLIPPED: dict[Direction, Direction] = {
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
    Direction.NONE: Direction.NONE,
    Direction.BOTH: Direction.BOTH,
}


def flip_direction(
    direction: Direction | str,
    diagnostics: Diagnostics | None = None,
) -> Direction | str:
    """
    Return the opposite horizontal direction.

    ``left`` and ``right`` swap; ``none`` and ``both`` pass through. Any
    other value records an ``invalid-direction`` warning and is returned
    unchanged.
    """
    try:
        return _FLIPPED[Direction(direction)]
    except ValueError:
        (diagnostics if diagnostics is not None else Diagnostics()).warn(
            DiagnosticCode.INVALID_DIRECTION,
            f"invalid direction {direction!r}; expected left, right, none or both",
        )
        return direction


def switch_direction(
    direction: Direction | str,
    switch: bool,
    diagnostics: Diagnostics | None = None,
) -> Direction | str:
    """Flip *direction* when *switch* is true, otherwise return it as given."""
    if switch:
        return flip_direction(direction, diagnostics)
    try:
        return Direction(direction)
    except ValueError:
        return direction

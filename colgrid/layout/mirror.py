"""
Mirrored (right-to-left) output.

mirrored() runs a declaration builder for the resolved direction and, when
an RTL selector is configured, exactly once more for the flipped direction.
The flipped declarations that differ from the originals are nested under
``<rtl_selector> &``. The flipped pass never mirrors again.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from colgrid.schemas.css import Declaration, NestedRule, RuleSet
from colgrid.utilities.diagnostics import Diagnostics
from colgrid.utilities.direction import flip_direction
from colgrid.utilities.types import Direction

DeclarationBuilder = Callable[[Direction], Iterable[Declaration]]


def rtl_context(rtl_selector: str) -> str:
    """Nested selector that scopes declarations under *rtl_selector*."""
    return f"{rtl_selector} &"


def mirrored(
    build: DeclarationBuilder,
    direction: Direction,
    rtl_selector: str | None,
    diagnostics: Diagnostics | None = None,
) -> RuleSet:
    """
    Build declarations for *direction* plus a mirrored override block.

    Builders must declare both sides of any sided property (e.g. both
    ``padding-left`` and ``padding-right``) so that the override fully
    replaces the original values.
    """
    base = RuleSet(tuple(build(direction)))
    if not rtl_selector:
        return base

    flipped = tuple(build(flip_direction(direction, diagnostics)))
    overrides = tuple(d for d in flipped if base.get(d.property) != d.value)
    if not overrides:
        return base
    return RuleSet(base.declarations, (NestedRule(rtl_context(rtl_selector), RuleSet(overrides)),))

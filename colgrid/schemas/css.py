"""
Structured CSS output: declarations, rule sets and computation results.

Layout mixins produce RuleSets rather than text; colgrid.writer renders them.
Nested selectors use ``&`` for the parent selector, e.g. ``[dir="rtl"] &``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from colgrid.utilities.diagnostics import Diagnostic
from colgrid.utilities.types import Length

CssValue = Union[Length, int, float, str]


@dataclass(frozen=True)
class Declaration:
    """A single ``property: value`` pair."""

    property: str
    value: CssValue


@dataclass(frozen=True)
class NestedRule:
    """A block of declarations scoped under a selector relative to ``&``."""

    selector: str
    rules: RuleSet


@dataclass(frozen=True)
class RuleSet:
    """
    Ordered declarations plus nested rules.

    A property may appear more than once (a later declaration overrides an
    earlier one, exactly as in CSS); get() returns the effective value.
    """

    declarations: tuple[Declaration, ...] = ()
    nested: tuple[NestedRule, ...] = ()

    def get(self, prop: str, default: CssValue | None = None) -> CssValue | None:
        """Effective (last declared) value of *prop*, or *default*."""
        for decl in reversed(self.declarations):
            if decl.property == prop:
                return decl.value
        return default

    def properties(self) -> list[str]:
        return [d.property for d in self.declarations]

    def nested_for(self, selector: str) -> RuleSet | None:
        """The nested rule set with exactly *selector*, if any."""
        for rule in self.nested:
            if rule.selector == selector:
                return rule.rules
        return None

    def __add__(self, other: RuleSet) -> RuleSet:
        """Concatenate two rule sets, merging nested rules that share a selector."""
        merged: dict[str, RuleSet] = {}
        for rule in self.nested + other.nested:
            merged[rule.selector] = (
                merged[rule.selector] + rule.rules if rule.selector in merged else rule.rules
            )
        return RuleSet(
            declarations=self.declarations + other.declarations,
            nested=tuple(NestedRule(selector, rules) for selector, rules in merged.items()),
        )

    def __bool__(self) -> bool:
        return bool(self.declarations or self.nested)


@dataclass(frozen=True)
class LayoutResult:
    """Output of a layout mixin: the rules plus any warnings recorded."""

    rules: RuleSet
    diagnostics: tuple[Diagnostic, ...] = field(default=())

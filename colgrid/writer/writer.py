"""
CSS writer. Converts structured RuleSets into stylesheet text.

Nested rules are flattened: each NestedRule becomes its own block after its
parent's block, with ``&`` replaced by the parent selector. Blocks are
separated by a blank line.
"""

from __future__ import annotations

from colgrid.schemas.css import RuleSet
from colgrid.writer.templates import render_block, resolve_selector


def render_rules(rules: RuleSet, selector: str, indent: str = "  ") -> str:
    """
    Render *rules* for *selector* as CSS text.

    Parameters
    ----------
    rules:
        The rule set produced by a layout mixin.
    selector:
        The selector the rule set applies to (e.g. ``".sidebar"``).
    indent:
        Indentation for declarations inside a block.

    Returns
    -------
    str
        CSS text; empty when the rule set has no declarations at any level.
    """
    blocks: list[str] = []
    _collect(rules, selector, indent, blocks)
    return "\n\n".join(blocks)


def _collect(rules: RuleSet, selector: str, indent: str, blocks: list[str]) -> None:
    block = render_block(selector, rules.declarations, indent)
    if block:
        blocks.append(block)
    for nested in rules.nested:
        _collect(nested.rules, resolve_selector(nested.selector, selector), indent, blocks)

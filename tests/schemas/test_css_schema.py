"""Tests for the structured CSS output schema."""

import pytest

from colgrid.schemas.background import (
    TRANSPARENT,
    BackgroundLayer,
    BackgroundResult,
    ColorStop,
    LinearGradient,
)
from colgrid.schemas.css import Declaration, LayoutResult, NestedRule, RuleSet
from colgrid.utilities.types import ZERO, px

RTL = '[dir="rtl"] &'


class TestRuleSet:
    def test_get_returns_last_value(self):
        rules = RuleSet((Declaration("padding-left", px(10)), Declaration("padding-left", ZERO)))
        assert rules.get("padding-left") == ZERO

    def test_get_default(self):
        assert RuleSet().get("width") is None
        assert RuleSet().get("width", "auto") == "auto"

    def test_properties(self):
        rules = RuleSet((Declaration("width", px(10)), Declaration("float", "left")))
        assert rules.properties() == ["width", "float"]

    def test_empty_is_falsy(self):
        assert not RuleSet()
        assert RuleSet((Declaration("float", "left"),))
        assert RuleSet(nested=(NestedRule(RTL, RuleSet()),))

    def test_add_concatenates_declarations(self):
        a = RuleSet((Declaration("width", px(10)),))
        b = RuleSet((Declaration("float", "left"),))
        assert (a + b).properties() == ["width", "float"]

    def test_add_merges_nested_rules_with_same_selector(self):
        a = RuleSet(nested=(NestedRule(RTL, RuleSet((Declaration("float", "right"),))),))
        b = RuleSet(nested=(NestedRule(RTL, RuleSet((Declaration("clear", "right"),))),))
        merged = a + b
        assert len(merged.nested) == 1
        assert merged.nested_for(RTL).properties() == ["float", "clear"]

    def test_add_keeps_distinct_selectors(self):
        a = RuleSet(nested=(NestedRule("&::after", RuleSet()),))
        b = RuleSet(nested=(NestedRule(RTL, RuleSet()),))
        assert [n.selector for n in (a + b).nested] == ["&::after", RTL]

    def test_nested_for_missing(self):
        assert RuleSet().nested_for(RTL) is None


class TestLayoutResult:
    def test_default_diagnostics(self):
        assert LayoutResult(rules=RuleSet()).diagnostics == ()


class TestLinearGradient:
    def test_accepts_hard_edges(self):
        gradient = LinearGradient(
            "to right",
            (ColorStop("red", px(0)), ColorStop("red", px(10)), ColorStop(TRANSPARENT, px(10))),
        )
        assert len(gradient.stops) == 3

    def test_rejects_decreasing_offsets(self):
        with pytest.raises(ValueError, match="non-decreasing"):
            LinearGradient("to right", (ColorStop("red", px(10)), ColorStop("red", px(5))))


class TestBackgroundResult:
    def test_markers_and_gradients(self):
        gradient = LinearGradient("to right", (ColorStop("red", px(0)),))
        layers = (
            BackgroundLayer("grid-numbers/1.png", (px(30), "top")),
            BackgroundLayer(gradient, (ZERO, ZERO)),
        )
        result = BackgroundResult(rules=RuleSet(), layers=layers)
        assert result.markers == layers[:1]
        assert result.gradients == (gradient,)

    def test_layer_defaults_to_no_repeat(self):
        assert BackgroundLayer("x.png", (ZERO, ZERO)).repeat == "no-repeat"

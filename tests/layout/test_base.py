"""Tests for the shared base helpers: gutter padding, item base, container, clear, float."""

import pytest

from colgrid.layout.base import (
    apply_gutter_padding,
    grid_clear,
    grid_container,
    grid_float,
    grid_item_base,
    new_row,
    resolve_direction,
)
from colgrid.schemas.config import GridConfig
from colgrid.utilities.types import BoxSizing, Direction, GutterMethod, px

RTL = '[dir="rtl"] &'


class TestResolveDirection:
    def test_configured_direction(self):
        assert resolve_direction(GridConfig(direction=Direction.RIGHT)) is Direction.RIGHT

    def test_switched(self):
        config = GridConfig(direction=Direction.LEFT, switch_direction=True)
        assert resolve_direction(config) is Direction.RIGHT


class TestApplyGutterPadding:
    def test_even_gutter_is_symmetric(self):
        rules = apply_gutter_padding(GridConfig(gutters=px(20)))
        assert rules.get("padding-left") == px(10)
        assert rules.get("padding-right") == px(10)
        assert rules.nested == ()

    def test_odd_gutter_is_mirrored(self):
        rules = apply_gutter_padding(GridConfig(gutters=px(21)))
        assert rules.get("padding-left") == px(10)
        assert rules.get("padding-right") == px(11)
        rtl = rules.nested_for(RTL)
        assert rtl.get("padding-left") == px(11)
        assert rtl.get("padding-right") == px(10)

    def test_odd_gutter_right_direction(self):
        rules = apply_gutter_padding(GridConfig(gutters=px(21), direction=Direction.RIGHT))
        assert rules.get("padding-left") == px(11)
        assert rules.get("padding-right") == px(10)

    def test_odd_gutter_without_rtl_selector(self):
        rules = apply_gutter_padding(GridConfig(gutters=px(21), rtl_selector=None))
        assert rules.nested == ()


class TestGridItemBase:
    def test_border_box(self):
        rules = grid_item_base(GridConfig())
        assert rules.get("box-sizing") == "border-box"
        assert rules.get("word-wrap") == "break-word"

    @pytest.mark.parametrize("box_sizing", [BoxSizing.UNIVERSAL_BORDER_BOX, BoxSizing.CONTENT_BOX])
    def test_no_box_sizing_declaration(self, box_sizing):
        rules = grid_item_base(GridConfig(box_sizing=box_sizing))
        assert rules.get("box-sizing") is None
        assert rules.get("word-wrap") == "break-word"

    def test_padding_method_adds_gutter_padding(self):
        rules = grid_item_base(GridConfig(gutters=px(20)))
        assert rules.get("padding-left") == px(10)
        assert rules.get("padding-right") == px(10)

    def test_gutter_padding_can_be_skipped(self):
        rules = grid_item_base(GridConfig(gutters=px(20)), gutter_padding=False)
        assert rules.get("padding-left") is None

    @pytest.mark.parametrize("method", [GutterMethod.MARGIN, GutterMethod.NONE])
    def test_other_methods_have_no_padding(self, method):
        rules = grid_item_base(GridConfig(gutter_method=method, grid_width=px(960)))
        assert rules.get("padding-left") is None
        assert rules.get("padding-right") is None


class TestGridContainer:
    def test_clearfix(self):
        rules = grid_container().rules
        assert rules.declarations == ()
        pseudo = rules.nested_for("&::before, &::after")
        assert pseudo.get("content") == '""'
        assert pseudo.get("display") == "table"
        assert rules.nested_for("&::after").get("clear") == "both"


class TestClearAndFloat:
    def test_clear_both_is_not_mirrored(self):
        result = grid_clear(GridConfig())
        assert result.rules.get("clear") == "both"
        assert result.rules.nested == ()
        assert result.diagnostics == ()

    def test_clear_left_is_mirrored(self):
        rules = grid_clear(GridConfig(), "left").rules
        assert rules.get("clear") == "left"
        assert rules.nested_for(RTL).get("clear") == "right"

    def test_float_uses_configured_direction(self):
        rules = grid_float(GridConfig()).rules
        assert rules.get("float") == "left"
        assert rules.nested_for(RTL).get("float") == "right"

    def test_float_switched_direction(self):
        rules = grid_float(GridConfig(switch_direction=True, rtl_selector=None)).rules
        assert rules.get("float") == "right"
        assert rules.nested == ()

    def test_float_explicit_direction(self):
        assert grid_float(GridConfig(), Direction.RIGHT).rules.get("float") == "right"

    def test_new_row_clears_in_grid_direction(self):
        rules = new_row(GridConfig(direction=Direction.RIGHT)).rules
        assert rules.get("clear") == "right"
        assert rules.nested_for(RTL).get("clear") == "left"

"""Tests for grid item placement."""

import pytest

from colgrid.layout.grid_item import column_offset, grid_item
from colgrid.schemas.config import GridConfig, GridConfigurationError
from colgrid.utilities.diagnostics import DiagnosticCode
from colgrid.utilities.types import Direction, GutterMethod, percent, px

RTL = '[dir="rtl"] &'


@pytest.fixture
def fixed_margin():
    return GridConfig(
        columns=12,
        gutters=px(20),
        gutter_method=GutterMethod.MARGIN,
        grid_width=px(940),
        rtl_selector=None,
    )


class TestColumnOffset:
    def test_first_column_is_at_edge(self, fixed_margin):
        assert column_offset(1, fixed_margin).value == 0

    def test_margin_method_includes_gutters(self, fixed_margin):
        assert column_offset(4, fixed_margin) == px(240)

    def test_padding_method_is_units_only(self):
        config = GridConfig(columns=12, grid_width=px(960))
        assert column_offset(4, config) == px(240)


class TestGridItem:
    def test_fixed_margin_grid(self, fixed_margin):
        result = grid_item(3, 4, fixed_margin)
        rules = result.rules
        assert rules.get("width") == px(220)
        assert rules.get("float") == "left"
        assert rules.get("margin-left") == px(240)
        assert rules.get("margin-right") == percent(-100)
        assert rules.get("padding-left") is None
        assert rules.nested == ()
        assert result.diagnostics == ()

    def test_base_comes_first(self, fixed_margin):
        properties = grid_item(3, 4, fixed_margin).rules.properties()
        assert properties[:2] == ["box-sizing", "word-wrap"]
        assert properties[2] == "width"

    def test_base_can_be_disabled(self, fixed_margin):
        config = fixed_margin.with_overrides(auto_include_item_base=False)
        properties = grid_item(3, 4, config).rules.properties()
        assert "box-sizing" not in properties
        assert "word-wrap" not in properties

    def test_fluid_padding_grid(self):
        config = GridConfig(columns=12, gutters=px(20))
        rules = grid_item(3, 4, config).rules
        assert rules.get("width").unit == "%"
        assert rules.get("width").value == pytest.approx(25)
        assert rules.get("margin-left").value == pytest.approx(25)
        assert rules.get("padding-left") == px(10)
        assert rules.get("padding-right") == px(10)

    def test_mirrored_placement(self):
        config = GridConfig(columns=12, gutters=px(20), grid_width=px(960))
        rules = grid_item(3, 4, config).rules
        rtl = rules.nested_for(RTL)
        assert rtl.get("float") == "right"
        assert rtl.get("margin-right") == px(240)
        assert rtl.get("margin-left") == percent(-100)

    def test_right_direction(self, fixed_margin):
        config = fixed_margin.with_overrides(direction=Direction.RIGHT)
        rules = grid_item(3, 4, config).rules
        assert rules.get("float") == "right"
        assert rules.get("margin-right") == px(240)
        assert rules.get("margin-left") == percent(-100)

    def test_fractional_span(self, fixed_margin):
        # 2.5 × 60px + (2 − 1) × 20px
        assert grid_item(2.5, 1, fixed_margin).rules.get("width") == px(170)

    def test_content_box_loses_a_gutter(self):
        config = GridConfig(columns=12, grid_width=px(960), box_sizing="content-box")
        assert grid_item(3, 1, config).rules.get("width") == px(220)

    def test_rounding_risk_reported_once(self):
        config = GridConfig(
            columns=12, gutters=px(20), gutter_method=GutterMethod.MARGIN, grid_width=px(960)
        )
        result = grid_item(3, 4, config)
        assert [d.code for d in result.diagnostics] == [DiagnosticCode.ROUNDING_RISK]

    @pytest.mark.parametrize("span", [0, -1])
    def test_rejects_non_positive_span(self, fixed_margin, span):
        with pytest.raises(GridConfigurationError, match="column_span"):
            grid_item(span, 1, fixed_margin)

    @pytest.mark.parametrize("position", [0, 13])
    def test_rejects_position_out_of_range(self, fixed_margin, position):
        with pytest.raises(GridConfigurationError, match=r"column_position must be in \[1, 12\]"):
            grid_item(1, position, fixed_margin)

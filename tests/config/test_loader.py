"""Tests for YAML grid configuration loading."""

import pytest

from colgrid.config.loader import config_from_mapping, load_config
from colgrid.schemas.config import GridConfig, GridNumbers
from colgrid.utilities.types import Direction, GutterMethod, px


@pytest.fixture
def write_yaml(tmp_path):
    def _write(text: str, name: str = "grid.yaml"):
        path = tmp_path / name
        path.write_text(text)
        return path

    return _write


class TestConfigFromMapping:
    def test_underscore_keys(self):
        config = config_from_mapping({"columns": 12, "gutter_method": "margin"})
        assert config.columns == 12
        assert config.gutter_method is GutterMethod.MARGIN

    def test_dashed_keys(self):
        config = config_from_mapping({"grid-width": "940px", "switch-direction": True})
        assert config.grid_width == px(940)
        assert config.switch_direction is True

    def test_base_supplies_missing_values(self):
        base = GridConfig(columns=16)
        config = config_from_mapping({"gutters": "10px"}, base)
        assert config.columns == 16
        assert config.gutters == px(10)

    def test_unknown_keys_rejected(self):
        with pytest.raises(ValueError, match="unknown grid configuration keys: colour, width"):
            config_from_mapping({"width": "10px", "colour": "red"})

    def test_non_string_key_rejected(self):
        with pytest.raises(ValueError, match="keys must be strings"):
            config_from_mapping({12: "columns"})  # type: ignore[dict-item]


class TestLoadConfig:
    def test_full_file(self, write_yaml):
        path = write_yaml(
            "columns: 12\n"
            "gutters: 20px\n"
            "gutter-method: margin\n"
            "grid-width: 940px\n"
            "direction: right\n"
            "rtl-selector: '.rtl'\n"
            "grid-numbers: none\n"
        )
        config = load_config(path)
        assert config.columns == 12
        assert config.gutters == px(20)
        assert config.gutter_method is GutterMethod.MARGIN
        assert config.grid_width == px(940)
        assert config.direction is Direction.RIGHT
        assert config.rtl_selector == ".rtl"
        assert config.grid_numbers is GridNumbers.NONE

    def test_accepts_str_path(self, write_yaml):
        path = write_yaml("columns: 3\n")
        assert load_config(str(path)).columns == 3

    def test_null_rtl_selector_disables_mirroring(self, write_yaml):
        config = load_config(write_yaml("rtl-selector: null\n"))
        assert config.rtl_selector is None

    def test_empty_file_gives_defaults(self, write_yaml):
        assert load_config(write_yaml("")) == GridConfig()

    def test_empty_file_gives_base(self, write_yaml):
        base = GridConfig(columns=5)
        assert load_config(write_yaml(""), base) is base

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="Grid configuration file not found"):
            load_config(tmp_path / "missing.yaml")

    def test_malformed_yaml(self, write_yaml):
        with pytest.raises(ValueError, match="Failed to parse grid configuration file"):
            load_config(write_yaml("columns: [12\n"))

    def test_non_mapping(self, write_yaml):
        with pytest.raises(ValueError, match="must contain a mapping"):
            load_config(write_yaml("- 12\n- 20px\n"))

    def test_invalid_value(self, write_yaml):
        with pytest.raises(ValueError, match="columns must be >= 1"):
            load_config(write_yaml("columns: 0\n"))

    def test_invalid_enum(self, write_yaml):
        with pytest.raises(ValueError):
            load_config(write_yaml("gutter-method: gap\n"))

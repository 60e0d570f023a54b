"""Tests for the layer configuration."""

from pathlib import Path

import pytest

from mtg_svg_maker.exceptions import ConfigurationError
from mtg_svg_maker.layer_config import DEFAULT_CONFIG, LayerConfig, deep_merge


class TestDeepMerge:
    """Test merging of configuration trees."""

    def test_nested_mappings_are_merged(self) -> None:
        """Test that sibling keys survive a nested override."""
        merged = deep_merge({"a": {"b": 1, "c": 2}}, {"a": {"c": 3}})

        assert merged == {"a": {"b": 1, "c": 3}}

    def test_lists_are_replaced(self) -> None:
        """Test that a list in the override replaces the base list."""
        merged = deep_merge({"lines": ["one", "two", "three"]}, {"lines": ["only"]})

        assert merged == {"lines": ["only"]}

    def test_scalar_replaces_mapping(self) -> None:
        """Test that a non-mapping override replaces a whole subtree."""
        assert deep_merge({"a": {"b": 1}}, {"a": 5}) == {"a": 5}

    def test_inputs_are_not_modified(self) -> None:
        """Test that neither argument changes."""
        base = {"a": {"b": 1}}
        override = {"a": {"b": 2}, "c": [1]}

        deep_merge(base, override)

        assert base == {"a": {"b": 1}}
        assert override == {"a": {"b": 2}, "c": [1]}


class TestLayerConfig:
    """Test LayerConfig accessors and overrides."""

    def test_default_values(self, layer_config: LayerConfig) -> None:
        """Test a sample of default values."""
        assert layer_config.font_size("name") == 32
        assert layer_config.horizontal_padding == 15
        assert layer_config.stroke_width == 2
        assert layer_config.corner_radius("outer") == {"x": 25, "y": 25}
        assert layer_config.mana_cost_config["max_circles"] == 10
        assert layer_config.css_class("card_name") == "card-name"

    def test_unknown_corner_radius_defaults(self, layer_config: LayerConfig) -> None:
        """Test the 5/5 fallback for unknown layer kinds."""
        assert layer_config.corner_radius("nothing") == {"x": 5, "y": 5}

    def test_unknown_lookups(self, layer_config: LayerConfig) -> None:
        """Test that unknown kinds give empty or None results."""
        assert dict(layer_config.positioning("nothing")) == {}
        assert layer_config.font_size("nothing") is None
        assert layer_config.css_class("nothing") is None

    def test_with_overrides_merges_deeply(self) -> None:
        """Test that an override keeps untouched siblings."""
        config = LayerConfig.with_overrides({"font_sizes": {"name": 40}})

        assert config.font_size("name") == 40
        assert config.font_size("type") == 22

    def test_override_replaces_copyright_lines(self) -> None:
        """Test that list values are replaced, not merged."""
        config = LayerConfig.with_overrides({"copyright": {"lines": ["Custom"]}})

        assert list(config.copyright_config["lines"]) == ["Custom"]
        assert config.copyright_config["base_y"] == 830

    def test_default_config_is_not_changed_by_overrides(self) -> None:
        """Test that overrides leave the defaults alone."""
        LayerConfig.with_overrides({"padding": {"horizontal": 99}})

        assert DEFAULT_CONFIG["padding"]["horizontal"] == 15
        assert LayerConfig.default().horizontal_padding == 15

    def test_config_is_read_only(self, layer_config: LayerConfig) -> None:
        """Test that the merged tree cannot be modified."""
        with pytest.raises(TypeError):
            layer_config.config["padding"]["horizontal"] = 1

    def test_equality(self) -> None:
        """Test that configs with the same values are equal."""
        assert LayerConfig.default() == LayerConfig()
        assert LayerConfig.default() != LayerConfig.with_overrides({"padding": {"vertical": 1}})

    def test_text_width(self, layer_config: LayerConfig) -> None:
        """Test the width available to text."""
        assert layer_config.text_width(570, "name_area") == pytest.approx(397.5)
        assert layer_config.text_width(550, "description") == 520
        assert layer_config.text_width(100) == 70

    def test_text_positions(self, layer_config: LayerConfig) -> None:
        """Test derived text positions."""
        assert layer_config.text_x_position(30) == 45
        assert layer_config.text_y_position(40, "name_area", 50) == 75
        assert layer_config.text_y_position(545, "description") == 575
        assert layer_config.text_y_position(10, "nothing") == 10


class TestLayerConfigFromYaml:
    """Test loading overrides from YAML files."""

    def test_load_overrides(self, tmp_path: Path) -> None:
        """Test that a YAML file is merged over the defaults."""
        path = tmp_path / "layers.yaml"
        path.write_text("font_sizes:\n  name: 36\n", encoding="utf-8")

        config = LayerConfig.from_yaml(path)

        assert config.font_size("name") == 36
        assert config.font_size("type") == 22

    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        """Test that an empty file means no overrides."""
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")

        assert LayerConfig.from_yaml(path) == LayerConfig.default()

    def test_invalid_yaml_raises(self, tmp_path: Path) -> None:
        """Test that broken YAML is reported as a configuration error."""
        path = tmp_path / "broken.yaml"
        path.write_text("font_sizes: [unclosed\n", encoding="utf-8")

        with pytest.raises(ConfigurationError):
            LayerConfig.from_yaml(path)

    def test_non_mapping_raises(self, tmp_path: Path) -> None:
        """Test that a list at the top level is rejected."""
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="must contain a mapping"):
            LayerConfig.from_yaml(path)

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        """Test that a missing file is a configuration error."""
        with pytest.raises(ConfigurationError):
            LayerConfig.from_yaml(tmp_path / "missing.yaml")

"""Layer styling and positioning configuration.

Every font size, padding, corner radius and offset used by the layers lives
in :data:`DEFAULT_CONFIG`. A :class:`LayerConfig` is built from that tree,
optionally deep-merged with a partial override tree, and is read-only after
construction.
"""

import logging
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any, Optional, Union

import yaml

from mtg_svg_maker.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    # Text rendering settings
    "font_sizes": {
        "name": 32,
        "type": 22,
        "description": 24,
        "flavor_text": 18,
        "power_area": 28,
        "copyright": 14,
    },
    "text_rendering": {
        "default_font_size": 16,
        "default_color": "#111",
        "default_line_height_multiplier": 1.2,
        "char_width_multiplier": 0.42,
        "css_classes": {
            "card_name": "card-name",
            "card_type": "card-type",
            "card_description": "card-description",
            "flavor_text": "card-flavor-text",
            "power_area": "card-power-toughness",
            "copyright": "card-copyright",
        },
    },
    "padding": {
        "horizontal": 15,
        "vertical": 30,
    },
    # Layer-specific positioning offsets
    "positioning": {
        "name_area": {"y_offset": 10, "width_ratio": 0.75},
        "type_area": {"y_offset": 8, "width_ratio": 0.75},
        "description": {"y_offset": 30, "width_ratio": 1.0},
        "flavor_text": {"y_offset": 45, "width_ratio": 1.0, "separator_offset": 70},
        "power_area": {"y_offset": 9},
    },
    "frames": {
        "stroke_width": 2,
        "corner_radius": {
            "name": {"x": 10, "y": 25},
            "type": {"x": 10, "y": 25},
            "power": {"x": 10, "y": 25},
            "art": {"x": 8, "y": 8},
            "art_inner": {"x": 5, "y": 5},
            "inner": {"x": 10, "y": 10},
            "outer": {"x": 25, "y": 25},
        },
    },
    "mana_cost": {
        "circle_radius": 15,
        "circle_spacing": 35,
        "icon_size": 24,
        "max_circles": 10,
        "margin": 10,
    },
    "copyright": {
        "base_y": 830,
        "line_spacing": 18,
        "x_position": 90,
        "lines": [
            "© 2025 MTG SVG Maker. Some rights reserved.",
            "Portions of the materials used are property of Wizards of the Coast.",
            "© Wizards of the Coast LLC",
        ],
    },
    "qr_code": {
        "x": 40,
        "y": 820,
        "scale": 1.1,
    },
    "type_icon": {
        "x_offset": 13,
        "y_offset": 4,
        "scale": 0.23,
        "aspect_ratio": {"x": 0.93839063, "y": 1.0656543},
    },
    "frame": {
        # Space kept free below the frame for the type line and power box
        "bottom_margin": 120,
    },
    "art_frame": {
        "outset": 3,
    },
    "metallic": {
        "shadow_offset": 2,
        "texture_opacity": 0.05,
        "shadow_opacity": 0.08,
    },
    "power_box": {
        "base_width": 60,
        "width_per_char": 13,
        "baseline_chars": 3,
        "right_margin": 35,
    },
    "drop_shadow": {
        "dx": -2,
        "dy": 2,
        "std_deviation": 1,
        "flood_opacity": 1.0,
    },
    "text_positioning": {
        "mana_cost_text_y_offset": 7,
        "mana_cost_font_size": 24,
    },
    "icon_opacity": {
        "mana_cost": 0.7,
    },
}

_EMPTY: Mapping[str, Any] = MappingProxyType({})
_DEFAULT_CORNER_RADIUS: Mapping[str, int] = MappingProxyType({"x": 5, "y": 5})


def deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Recursively merge ``override`` over ``base`` and return a new tree.

    Nested mappings present on both sides are merged key by key. Any other
    value in ``override`` (lists included) replaces the base value wholesale.
    Neither argument is modified.
    """
    merged = {key: _thaw(value) for key, value in base.items()}
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = _thaw(value)
    return merged


def _thaw(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {key: _thaw(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_thaw(item) for item in value]
    return value


def _freeze(value: Any) -> Any:
    if isinstance(value, Mapping):
        return MappingProxyType({key: _freeze(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(item) for item in value)
    return value


class LayerConfig:
    """Read-only view over the merged layer configuration tree."""

    def __init__(self, custom_config: Optional[Mapping[str, Any]] = None) -> None:
        """Build a configuration from the defaults and an optional override.

        Args:
            custom_config: Partial configuration tree merged over the defaults
        """
        self._config = _freeze(deep_merge(DEFAULT_CONFIG, custom_config or {}))

    @classmethod
    def default(cls) -> "LayerConfig":
        """Return a configuration holding only the default values."""
        return cls()

    @classmethod
    def with_overrides(cls, partial: Mapping[str, Any]) -> "LayerConfig":
        """Return a configuration with ``partial`` deep-merged over the defaults."""
        return cls(partial)

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "LayerConfig":
        """Load a partial override tree from a YAML file.

        Args:
            path: YAML file holding a (possibly empty) mapping of overrides

        Returns:
            The merged configuration

        Raises:
            ConfigurationError: If the file is not valid YAML or not a mapping
        """
        path = Path(path)
        try:
            with open(path, encoding="utf-8") as f:
                overrides = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Cannot read layer config {path}: {e}") from e

        if not isinstance(overrides, Mapping):
            raise ConfigurationError(
                f"Layer config {path} must contain a mapping, got {type(overrides).__name__}"
            )

        logger.debug(f"Loaded layer config overrides from {path}")
        return cls(overrides)

    @property
    def config(self) -> Mapping[str, Any]:
        """The full merged configuration tree."""
        return self._config

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LayerConfig):
            return NotImplemented
        return _thaw(self._config) == _thaw(other._config)

    def __repr__(self) -> str:
        return f"LayerConfig({_thaw(self._config)!r})"

    # Font sizes
    def font_size(self, layer_type: str) -> Optional[int]:
        return self._config["font_sizes"].get(layer_type)

    # Padding
    @property
    def horizontal_padding(self) -> int:
        return self._config["padding"]["horizontal"]

    @property
    def vertical_padding(self) -> int:
        return self._config["padding"]["vertical"]

    def positioning(self, layer_type: str) -> Mapping[str, Any]:
        """Positioning offsets for a layer kind, empty for unknown kinds."""
        return self._config["positioning"].get(layer_type, _EMPTY)

    # Frames
    @property
    def stroke_width(self) -> int:
        return self._config["frames"]["stroke_width"]

    def corner_radius(self, layer_type: str) -> Mapping[str, int]:
        """Corner radii ``{"x", "y"}`` for a layer kind, 5/5 for unknown kinds."""
        return self._config["frames"]["corner_radius"].get(
            layer_type, _DEFAULT_CORNER_RADIUS
        )

    @property
    def frame_bottom_margin(self) -> int:
        return self._config["frame"]["bottom_margin"]

    @property
    def art_frame_outset(self) -> int:
        return self._config["art_frame"]["outset"]

    # Grouped sections
    @property
    def mana_cost_config(self) -> Mapping[str, Any]:
        return self._config["mana_cost"]

    @property
    def copyright_config(self) -> Mapping[str, Any]:
        return self._config["copyright"]

    @property
    def qr_code_config(self) -> Mapping[str, Any]:
        return self._config["qr_code"]

    @property
    def type_icon_config(self) -> Mapping[str, Any]:
        return self._config["type_icon"]

    @property
    def metallic_config(self) -> Mapping[str, Any]:
        return self._config["metallic"]

    @property
    def power_box_config(self) -> Mapping[str, Any]:
        return self._config["power_box"]

    @property
    def drop_shadow_config(self) -> Mapping[str, Any]:
        return self._config["drop_shadow"]

    @property
    def text_positioning_config(self) -> Mapping[str, Any]:
        return self._config["text_positioning"]

    @property
    def icon_opacity_config(self) -> Mapping[str, Any]:
        return self._config["icon_opacity"]

    # Text rendering
    @property
    def text_rendering_config(self) -> Mapping[str, Any]:
        return self._config["text_rendering"]

    @property
    def default_font_size(self) -> int:
        return self.text_rendering_config["default_font_size"]

    @property
    def default_text_color(self) -> str:
        return self.text_rendering_config["default_color"]

    @property
    def default_line_height_multiplier(self) -> float:
        return self.text_rendering_config["default_line_height_multiplier"]

    @property
    def char_width_multiplier(self) -> float:
        return self.text_rendering_config["char_width_multiplier"]

    def css_class(self, layer_type: str) -> Optional[str]:
        return self.text_rendering_config["css_classes"].get(layer_type)

    @property
    def mana_cost_text_y_offset(self) -> int:
        return self.text_positioning_config["mana_cost_text_y_offset"]

    @property
    def mana_cost_font_size(self) -> int:
        return self.text_positioning_config["mana_cost_font_size"]

    @property
    def mana_cost_icon_opacity(self) -> float:
        return self.icon_opacity_config["mana_cost"]

    # Derived positions
    def text_width(self, base_width: float, layer_type: Optional[str] = None) -> float:
        """Width available to text inside a box of ``base_width``.

        Args:
            base_width: Width of the enclosing box
            layer_type: Positioning key whose ``width_ratio`` scales the box

        Returns:
            The box width (scaled when a ratio is configured) minus padding
            on both sides
        """
        ratio = self.positioning(layer_type).get("width_ratio") if layer_type else None
        if ratio is not None:
            return (base_width * ratio) - (self.horizontal_padding * 2)
        return base_width - (self.horizontal_padding * 2)

    def text_x_position(self, base_x: float) -> float:
        return base_x + self.horizontal_padding

    def text_y_position(
        self, base_y: float, layer_type: str, height: Optional[float] = None
    ) -> float:
        """Baseline for text in a box, centred vertically when ``height`` is given."""
        offset = self.positioning(layer_type).get("y_offset", 0)
        if height is not None:
            return base_y + (height / 2) + offset
        return base_y + offset

"""Builds the ordered layer stack for a card."""

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Optional

from mtg_svg_maker.constants import ART_WINDOW_MASK_ID
from mtg_svg_maker.domain.color_scheme import ColorScheme
from mtg_svg_maker.layer_config import LayerConfig
from mtg_svg_maker.layers import (
    ArtLayer,
    BaseLayer,
    BorderLayer,
    FrameLayer,
    NameLayer,
    PowerLayer,
    TextBoxLayer,
    TypeLineLayer,
)
from mtg_svg_maker.models import Card
from mtg_svg_maker.services.icon_service import IconService

logger = logging.getLogger(__name__)

# Placement of every layer on the 630x880 card
DEFAULT_LAYOUT: Mapping[str, Mapping[str, Any]] = MappingProxyType(
    {
        "border": {"x": 0, "y": 0, "width": 630, "height": 880},
        "frame": {"x": 10, "y": 10, "width": 610, "height": 860},
        "name_area": {"x": 30, "y": 40, "width": 570, "height": 50},
        "art_layer": {
            "x": 40,
            "y": 95,
            "width": 550,
            "height": 400,
            "corner_radius": {"x": 5, "y": 5},
        },
        "type_area": {"x": 30, "y": 500, "width": 570, "height": 40},
        "text_box": {"x": 40, "y": 545, "width": 550, "height": 265},
        "power_area": {"x": 455, "y": 790, "width": 140, "height": 40},
    }
)

DEFAULT_BORDER_COLOR = "white"


class LayerFactory:
    """
    Creates the seven layers of a card in rendering order.

    The color scheme used when a card names none is passed in explicitly.
    """

    def __init__(
        self,
        layout: Optional[Mapping[str, Mapping[str, Any]]] = None,
        mask_id: str = ART_WINDOW_MASK_ID,
        default_scheme: Optional[ColorScheme] = None,
        layer_config: Optional[LayerConfig] = None,
        icon_service: Optional[IconService] = None,
    ) -> None:
        self.layout = layout or DEFAULT_LAYOUT
        self.mask_id = mask_id
        self.default_scheme = default_scheme or ColorScheme.resolve()
        self.layer_config = layer_config or LayerConfig.default()
        self.icon_service = icon_service or IconService()

    def dimensions_for(self, layer_name: str) -> Mapping[str, Any]:
        return self.layout.get(layer_name, {})

    @property
    def art_window(self) -> Mapping[str, Any]:
        return self.dimensions_for("art_layer")

    def color_scheme_for(self, card: Card) -> ColorScheme:
        if card.color:
            return ColorScheme.resolve(card.color)
        return self.default_scheme

    def create_layers(self, card: Card) -> list[BaseLayer]:
        """Build the border, frame, name, art, type line, text box and power layers.

        Args:
            card: Card to build the layers for

        Returns:
            The layers, back to front

        Raises:
            ConfigurationError: If the border color or art URL is invalid
        """
        scheme = self.color_scheme_for(card)
        config = self.layer_config
        logger.debug(f"Building layers for '{card.name}' with {scheme.scheme_name} scheme")

        return [
            BorderLayer(
                self.dimensions_for("border"),
                color=card.border_color or DEFAULT_BORDER_COLOR,
                mask_id=self.mask_id,
                icon_service=self.icon_service,
                layer_config=config,
            ),
            FrameLayer(
                self.dimensions_for("frame"),
                color_scheme=scheme,
                mask_id=self.mask_id,
                layer_config=config,
            ),
            NameLayer(
                self.dimensions_for("name_area"),
                name=card.name,
                cost=card.mana_cost,
                color_scheme=scheme,
                layer_config=config,
                icon_service=self.icon_service,
            ),
            ArtLayer(
                self.art_window,
                color_scheme=scheme,
                art=card.art,
                layer_config=config,
            ),
            TypeLineLayer(
                self.dimensions_for("type_area"),
                type_line=card.type_line,
                color_scheme=scheme,
                layer_config=config,
                icon_service=self.icon_service,
            ),
            TextBoxLayer(
                self.dimensions_for("text_box"),
                rules_text=card.rules_text,
                flavor_text=card.flavor_text,
                color_scheme=scheme,
                layer_config=config,
            ),
            PowerLayer(
                self.dimensions_for("power_area"),
                power=card.power,
                toughness=card.toughness,
                color_scheme=scheme,
                layer_config=config,
            ),
        ]

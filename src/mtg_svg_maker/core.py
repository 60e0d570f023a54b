"""Core functionality for rendering cards to SVG."""

import logging
from pathlib import Path
from typing import Any, Optional, Union

from mtg_svg_maker.constants import ART_WINDOW_MASK_ID, CARD_HEIGHT, CARD_WIDTH
from mtg_svg_maker.domain.color_scheme import ColorScheme
from mtg_svg_maker.layer_config import LayerConfig
from mtg_svg_maker.layer_factory import LayerFactory
from mtg_svg_maker.models import Card
from mtg_svg_maker.services.icon_service import IconService
from mtg_svg_maker.svg import Template

logger = logging.getLogger(__name__)

CardLike = Union[Card, dict[str, Any]]


class CardGenerator:
    """Main class for rendering cards into SVG documents."""

    def __init__(
        self,
        layer_config: Optional[LayerConfig] = None,
        icon_service: Optional[IconService] = None,
        default_scheme: Optional[ColorScheme] = None,
        embed_font: bool = False,
        font_path: Optional[Path] = None,
    ) -> None:
        """Initialize the card generator.

        Args:
            layer_config: Styling constants, the defaults when omitted
            icon_service: Source of the mana, QR code and brand icons
            default_scheme: Scheme for cards without a color, colorless
                when omitted
            embed_font: Inline the title font as base64 data
            font_path: Font file used when ``embed_font`` is set
        """
        self.layer_config = layer_config or LayerConfig.default()
        self.icon_service = icon_service or IconService()
        self.embed_font = embed_font
        self.font_path = font_path
        self.factory = LayerFactory(
            mask_id=ART_WINDOW_MASK_ID,
            default_scheme=default_scheme or ColorScheme.resolve(),
            layer_config=self.layer_config,
            icon_service=self.icon_service,
        )

    def build_template(self, card: CardLike) -> Template:
        """Render every layer of ``card`` into a fresh template.

        Raises:
            ConfigurationError: If the card has an unsupported border color or
                an invalid art URL
            MissingAssetError: If the QR code or brand icon is unavailable
        """
        card = self._coerce(card)
        template = Template(
            CARD_WIDTH, CARD_HEIGHT, embed_font=self.embed_font, font_path=self.font_path
        )
        # The mask must exist before the border and frame reference it
        template.define_mask(self.factory.mask_id, self.factory.art_window)
        for layer in self.factory.create_layers(card):
            template.add_layer(layer)
        return template

    def render(self, card: CardLike) -> str:
        """Render a card to an SVG string."""
        return self.build_template(card).to_svg()

    def save_card(self, card: CardLike, path: Union[str, Path]) -> Path:
        """Render a card and write it to ``path``.

        Args:
            card: The card to render
            path: Destination SVG file

        Returns:
            Path to the saved file
        """
        card = self._coerce(card)
        saved = self.build_template(card).save(path)
        logger.info(f"Card '{card.name}' saved to: {saved}")
        return saved

    @staticmethod
    def _coerce(card: CardLike) -> Card:
        if isinstance(card, Card):
            return card
        return Card.from_dict(card)
